"""Exception hierarchy for Bannerize."""


class BannerError(Exception):
    """Base exception for all Bannerize errors."""

    pass


class FontError(BannerError):
    """Errors related to locating or loading a banner font."""

    pass


class FontNotFoundError(FontError):
    """Requested banner does not exist in the font library."""

    def __init__(self, name: str, path: str | None = None) -> None:
        self.name = name
        self.path = path
        message = f"Banner '{name}' not found"
        if path is not None:
            message += f" (looked for '{path}')"
        super().__init__(message)


class FontLoadError(FontError):
    """Error reading a banner font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load banner font '{path}': {reason}")


class FontFormatError(FontError):
    """Banner font stream ended before every glyph was read."""

    def __init__(
        self,
        source: str,
        details: str,
        code_point: int | None = None,
        row: int | None = None,
    ) -> None:
        self.source = source
        self.details = details
        self.code_point = code_point
        self.row = row
        super().__init__(f"Invalid banner font '{source}': {details}")
