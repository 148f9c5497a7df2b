"""Exceptions raised by the deep-link template builder."""

from typing import Optional


class DeepLinkTemplateError(Exception):
    """Base class for template builder failures."""


class MissingUrlError(DeepLinkTemplateError, ValueError):
    """Raised when the example URL is empty after sanitization."""

    def __init__(self, message: str = "URL is required"):
        super().__init__(message)


class InvalidUrlError(DeepLinkTemplateError, ValueError):
    """Raised when the example URL is not a valid absolute URL."""

    def __init__(self, message: str, *, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class TemplateSaveError(DeepLinkTemplateError):
    """Raised when the external template store rejects or cannot receive a save."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
