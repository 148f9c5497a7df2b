"""Decompose an example booking URL into addressable slots.

Path segments and query parameters come straight from the URL grammar.
The fragment is free-form and is classified in this order:

  1. contains "?"          -> fragment path before the first "?", fragment query after it
  2. contains "=" or "&"   -> the whole fragment is a fragment query
  3. starts with "/"       -> fragment path
  4. anything else         -> one opaque fragment path segment

Example:
  https://hotels.example.com/reservation/abc?arrive=2026-03-01#room?bedType=king
  -> path [reservation, abc], query [arrive], fragment path [room], fragment query [bedType]
"""

import re
from urllib.parse import parse_qsl, unquote, urlsplit

from lib.deeplink.errors import InvalidUrlError
from lib.deeplink.models import ParsedUrl, Slot, SlotKind

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

SINGLE_DOT_SEGMENTS = frozenset({".", "%2e"})
DOUBLE_DOT_SEGMENTS = frozenset({"..", ".%2e", "%2e.", "%2e%2e"})

_SPECIAL_SCHEME = re.compile(r"^(?:https?|wss?|ftp):", re.IGNORECASE)

# Characters a URL host can never contain
_FORBIDDEN_HOST_CHARS = re.compile(r"[\s<>^|\\\"`{}%]")


def _split_path(path: str, kind: SlotKind) -> tuple[Slot, ...]:
    """Split on "/" and drop empty components; ordinals follow the filtered order."""
    segments = [segment for segment in path.split("/") if segment]
    return tuple(
        Slot(kind=kind, value=segment, ordinal=i) for i, segment in enumerate(segments)
    )


def _split_fragment_query(text: str) -> tuple[Slot, ...]:
    """Split "a=1&b&c=2" style text into fragment query slots.

    Empty pairs are skipped without consuming an ordinal. A pair without "="
    is a name with an empty value.
    """
    slots = []
    for pair in text.split("&"):
        pair = pair.strip()
        if not pair:
            continue
        name, _, value = pair.partition("=")
        slots.append(
            Slot(
                kind=SlotKind.FRAGMENT_QUERY_PARAM,
                name=unquote(name),
                value=unquote(value),
                ordinal=len(slots),
            )
        )
    return tuple(slots)


def decompose_fragment(fragment: str) -> tuple[tuple[Slot, ...], tuple[Slot, ...]]:
    """Classify a fragment (without the leading "#").

    Returns (fragment_path_slots, fragment_query_slots).
    """
    if not fragment:
        return (), ()

    if "?" in fragment:
        path_part, _, query_part = fragment.partition("?")
        return (
            _split_path(path_part, SlotKind.FRAGMENT_PATH_SEGMENT),
            _split_fragment_query(query_part),
        )

    if "=" in fragment or "&" in fragment:
        return (), _split_fragment_query(fragment)

    if fragment.startswith("/"):
        return _split_path(fragment, SlotKind.FRAGMENT_PATH_SEGMENT), ()

    opaque = Slot(kind=SlotKind.FRAGMENT_PATH_SEGMENT, value=fragment, ordinal=0)
    return (opaque,), ()


def _host(scheme: str, hostname: str, port) -> str:
    host = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"
    return host


def _normalize_hostname(hostname: str, url: str) -> str:
    """Percent-decode and IDNA-encode a host the way browsers do ("bücher.de" -> "xn--bcher-kva.de")."""
    if ":" in hostname:  # IPv6 literal
        return hostname
    hostname = unquote(hostname)
    if _FORBIDDEN_HOST_CHARS.search(hostname):
        raise InvalidUrlError(f"Invalid URL: invalid host {hostname!r}", url=url)
    if not hostname.isascii():
        try:
            hostname = hostname.encode("idna").decode("ascii")
        except UnicodeError as e:
            raise InvalidUrlError(f"Invalid URL: invalid host {hostname!r} ({e})", url=url) from e
    return hostname.lower()


def _backslashes_to_slashes(url: str) -> str:
    """Special schemes treat "\\" as "/" before the query and fragment."""
    if not _SPECIAL_SCHEME.match(url):
        return url
    end = min((i for i in (url.find("?"), url.find("#")) if i != -1), default=len(url))
    return url[:end].replace("\\", "/") + url[end:]


def _remove_dot_segments(path: str) -> str:
    """Resolve "." and ".." segments (also percent-encoded) like a browser does."""
    output = []
    for segment in path.split("/"):
        lowered = segment.lower()
        if lowered in SINGLE_DOT_SEGMENTS:
            continue
        if lowered in DOUBLE_DOT_SEGMENTS:
            if output:
                output.pop()
            continue
        output.append(segment)
    return "/".join(output)


def decompose(url: str) -> ParsedUrl:
    """Turn an absolute URL into a ParsedUrl.

    Raises InvalidUrlError when the URL has no scheme, no host, or a
    malformed authority (bad port, bad IPv6 literal, illegal host characters).
    """
    try:
        parts = urlsplit(_backslashes_to_slashes(url))
        port = parts.port
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL: {e}", url=url) from e

    if not parts.scheme:
        raise InvalidUrlError("Invalid URL: missing scheme", url=url)
    hostname = parts.hostname
    if not hostname:
        raise InvalidUrlError("Invalid URL: missing host", url=url)
    hostname = _normalize_hostname(hostname, url)

    scheme = parts.scheme.lower()
    host = _host(scheme, hostname, port)

    query_slots = tuple(
        Slot(kind=SlotKind.QUERY_PARAM, name=name, value=value, ordinal=i)
        for i, (name, value) in enumerate(parse_qsl(parts.query, keep_blank_values=True))
    )
    fragment_path_slots, fragment_query_slots = decompose_fragment(parts.fragment)

    return ParsedUrl(
        origin=f"{scheme}://{host}",
        host=host,
        scheme=scheme,
        path_slots=_split_path(_remove_dot_segments(parts.path), SlotKind.PATH_SEGMENT),
        query_slots=query_slots,
        fragment_path_slots=fragment_path_slots,
        fragment_query_slots=fragment_query_slots,
    )
