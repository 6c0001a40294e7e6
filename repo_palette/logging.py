"""
Repository palette logging utilities.

Provides configurable logging for archive downloads and stylesheet
extraction. Ensures credentials (GitHub tokens, Authorization headers)
never reach the log output.
"""

import logging
import re
from typing import Any

# Create service-specific loggers
_root_logger = logging.getLogger("repo_palette")
_http_logger = logging.getLogger("repo_palette.http")
_extract_logger = logging.getLogger("repo_palette.extract")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"(authorization['\"]?\s*[:=]\s*['\"]?)(bearer|token|basic)\s+[^\s'\",}]+", re.IGNORECASE), r"\1\2 [REDACTED]"),
    # GitHub token formats (classic and fine-grained)
    (re.compile(r"\b(gh[pousr]_[A-Za-z0-9]{20,}|github_pat_[A-Za-z0-9_]{20,})\b"), "[TOKEN_REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"authorization", "token", "secret", "password", "api_key"}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    extract_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure repository palette logging.

    Args:
        level: Default log level for all service loggers (default: INFO)
        http_level: Log level for archive download logging (default: same as level)
        extract_level: Log level for stylesheet extraction logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from repo_palette.logging import configure_logging

        # Trace every download
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    # Configure main logger, replacing a handler installed by an earlier call
    for existing in list(_root_logger.handlers):
        if getattr(existing, "_repo_palette_handler", False):
            _root_logger.removeHandler(existing)
    handler._repo_palette_handler = True  # type: ignore[attr-defined]
    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    # Configure HTTP logger
    _http_logger.setLevel(http_level if http_level is not None else level)

    # Configure extraction logger
    _extract_logger.setLevel(extract_level if extract_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a repository palette logger.

    Args:
        name: Logger name suffix (e.g., "http", "extract"). If None, returns the main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"repo_palette.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Args:
        text: Text that may contain tokens or Authorization headers

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values (e.g. request headers)
        sensitive_keys: Keys to mask (default: authorization, token, secret, password, api_key)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
) -> None:
    """
    Log an outbound HTTP request at DEBUG level with credentials masked.

    Args:
        method: HTTP method
        url: Request URL
        headers: Request headers (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    content_length: int | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Final URL after redirects
        content_length: Size of the response body in bytes (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if content_length is not None:
        log_parts.append(f"bytes={content_length}")

    _http_logger.debug(" | ".join(log_parts))


def log_stylesheet(path: str, color_count: int, new_count: int) -> None:
    """
    Log the colors found in one stylesheet at DEBUG level.

    Args:
        path: Archive path of the stylesheet
        color_count: Distinct colors in this stylesheet
        new_count: Colors not seen in any earlier stylesheet
    """
    if not _extract_logger.isEnabledFor(logging.DEBUG):
        return

    _extract_logger.debug(f"{path}: colors={color_count}, new={new_count}")


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_stylesheet",
]
