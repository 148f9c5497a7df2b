"""Normalization of pasted example URLs before decomposition."""

import re

_WRAPPING_QUOTES = re.compile(r"^[\"']|[\"']$")
_WHITESPACE = re.compile(r"\s+")
_HTTP_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def sanitize_url_input(raw: str) -> str:
    """Clean up a URL pasted by a user.

    Trims, drops one leading and one trailing quote, removes all whitespace
    and prepends https:// when no http(s) scheme is present.
    Returns "" when nothing is left.
    """
    if not raw:
        return ""
    cleaned = str(raw).strip()
    cleaned = _WRAPPING_QUOTES.sub("", cleaned)
    cleaned = _WHITESPACE.sub("", cleaned)
    if not cleaned:
        return ""
    if not _HTTP_SCHEME.match(cleaned):
        cleaned = f"https://{cleaned}"
    return cleaned
