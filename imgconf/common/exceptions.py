"""
Custom Exception Classes for imgconf

Raised inside the provider's fetch path and caught before reaching callers.
"""


class ImageConfigError(Exception):
    """Base exception for all image config errors"""

    def __init__(self, message: str, recoverable: bool = True):
        self.message = message
        self.recoverable = recoverable
        super().__init__(message)


class FetchError(ImageConfigError):
    """Remote config could not be retrieved (transport failure or non-2xx)"""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        reason: str | None = None,
    ):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Fetch Error: {message}", recoverable=True)


class ParseError(ImageConfigError):
    """Remote config body was not valid JSON"""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(f"Parse Error: {message}", recoverable=True)


class SettingsError(ImageConfigError):
    """Invalid provider settings"""

    def __init__(self, message: str, field_name: str | None = None):
        self.field_name = field_name
        super().__init__(f"Settings Error: {message}", recoverable=False)
