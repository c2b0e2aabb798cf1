"""
GitAnalyzer logging utilities.

Provides configurable logging for HTTP requests/responses and explorer
state transitions. Ensures API tokens are never logged.
"""

import logging
import re
from typing import Any

_root_logger = logging.getLogger("gitanalyzer")
_http_logger = logging.getLogger("gitanalyzer.http")
_explorer_logger = logging.getLogger("gitanalyzer.explorer")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Classic and fine-grained GitHub tokens
    (re.compile(r"\b(ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}\b"), "[TOKEN_REDACTED]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}\b"), "[TOKEN_REDACTED]"),
    # Authorization header values
    (re.compile(r"(Bearer|token)\s+[A-Za-z0-9_.\-]+", re.IGNORECASE), r"\1 [REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"authorization", "token", "secret", "password"}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    explorer_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure GitAnalyzer logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        explorer_level: Log level for explorer state transitions (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from gitanalyzer.logging import configure_logging

        # Trace every GitHub call
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _explorer_logger.setLevel(explorer_level if explorer_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a GitAnalyzer logger.

    Args:
        name: Logger name suffix (e.g., "http", "explorer"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"gitanalyzer.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask API tokens and authorization values in a string.

    Args:
        text: Text that may contain sensitive data

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
        data: Dictionary that may contain sensitive values
        sensitive_keys: Keys to mask (default: authorization, token, secret, password)

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
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
) -> None:
    """Log an HTTP request at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if params:
        log_parts.append(f"params={params}")

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    _http_logger.debug(mask_sensitive_data(" | ".join(log_parts)))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
    body: str | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Bodies are only included for error responses, truncated to 200 chars.
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if body and status_code >= 400:
        log_parts.append(f"body={body[:200]}")

    _http_logger.debug(mask_sensitive_data(" | ".join(log_parts)))


def log_explorer_event(event: str, **fields: Any) -> None:
    """
    Log an explorer state transition at DEBUG level.

    Args:
        event: Short event name (e.g., "resolve_start", "detail_discarded")
        **fields: Extra key/value pairs appended to the message
    """
    if not _explorer_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [event]
    log_parts.extend(f"{key}={value}" for key, value in fields.items())
    _explorer_logger.debug(mask_sensitive_data(" | ".join(log_parts)))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_explorer_event",
]
