"""Repository palette exception classes."""


class PaletteError(Exception):
    """Base exception for all repository palette errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(PaletteError):
    """Raised when service configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ValidationError(PaletteError):
    """Raised when a required request parameter is missing or blank."""

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__("VALIDATION_ERROR", message)
        self.missing = missing or []


class FetchError(PaletteError):
    """Raised when the repository archive cannot be downloaded."""

    def __init__(
        self, code: str, message: str, status_code: int | None = None
    ) -> None:
        super().__init__(code, message)
        self.status_code = status_code


class ArchiveFormatError(PaletteError):
    """Raised when the downloaded bytes are not a readable zip archive."""

    def __init__(self, message: str) -> None:
        super().__init__("ARCHIVE_FORMAT_ERROR", message)


class StyleParseError(PaletteError):
    """Raised when a stylesheet is not valid CSS syntax."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        path: str | None = None,
    ) -> None:
        self.line = line
        self.column = column
        self.path = path
        location = f" at {line}:{column}" if line is not None else ""
        source = f" in {path}" if path else ""
        super().__init__("STYLE_PARSE_ERROR", f"{message}{location}{source}")


class ColorParseError(PaletteError):
    """Raised when a matched color token does not resolve to a color.

    Never fatal: callers drop the token and keep scanning.
    """

    def __init__(self, token: str, message: str) -> None:
        super().__init__("COLOR_PARSE_ERROR", message)
        self.token = token
