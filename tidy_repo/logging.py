"""
Tidy Repo logging utilities.

Provides configurable logging for HTTP requests/responses and credential
handling. Ensures no full access token is ever logged.
"""

import logging
import re
from collections.abc import Collection
from typing import Any

# Create package-specific loggers
_package_logger = logging.getLogger("tidy_repo")
_http_logger = logging.getLogger("tidy_repo.http")
_auth_logger = logging.getLogger("tidy_repo.auth")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values ("token abc", "Bearer abc")
    (re.compile(r"(Authorization['\"]?\s*[:=]\s*['\"]?)(token|Bearer)\s+[^'\"\s,}]+", re.IGNORECASE), r"\1\2 [REDACTED]"),
    # GitHub personal access tokens
    (re.compile(r"\b(ghp|gho|ghu|ghs|ghr|github_pat)_[A-Za-z0-9_]{10,}\b"), "[TOKEN_REDACTED]"),
    # YAML/JSON credential fields
    (re.compile(r"(github_token['\"]?\s*[:=]\s*)['\"]?[^'\"\s,}]+['\"]?", re.IGNORECASE), r"\1[REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

# Number of leading characters of a token shown in logs
_TOKEN_PREVIEW_LENGTH = 4

_DEFAULT_SENSITIVE_KEYS = frozenset(
    {"authorization", "token", "github_token", "secret", "password", "api_key"}
)

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handler added by the last configure_logging call
_installed_handler: logging.Handler | None = None


def configure_logging(
    level: int = logging.INFO,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Send Tidy Repo logs to ``handler`` (stderr by default) at ``level``.

    The ``tidy_repo.http`` and ``tidy_repo.auth`` loggers inherit the level,
    so ``logging.DEBUG`` turns on request/response and credential logging.
    Calling this again replaces the handler installed by the previous call.

    Example:
        ```python
        configure_logging(logging.DEBUG)
        ```
    """
    global _installed_handler

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))

    if _installed_handler is not None:
        _package_logger.removeHandler(_installed_handler)
    _package_logger.addHandler(handler)
    _package_logger.setLevel(level)
    _installed_handler = handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``tidy_repo`` or its ``tidy_repo.<name>`` child."""
    return _package_logger if name is None else _package_logger.getChild(name)


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces authorization header values, GitHub tokens and other
    credential-looking patterns with redacted placeholders.
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def mask_token(token: str) -> str:
    """
    Shorten a token for safe logging.

    Shows only the first few characters; short tokens are fully redacted.
    """
    if len(token) <= _TOKEN_PREVIEW_LENGTH * 2:
        return "[REDACTED]"

    return f"{token[:_TOKEN_PREVIEW_LENGTH]}...[REDACTED]"


def _mask_header(value: str) -> str:
    scheme, _, credential = value.partition(" ")
    if not credential:
        return "[REDACTED]"
    return f"{scheme} {mask_token(credential)}"


def _is_sensitive(key: str, keys: Collection[str]) -> bool:
    return any(sensitive in key for sensitive in keys)


def safe_log_dict(
    data: dict[str, Any], sensitive_keys: Collection[str] | None = None
) -> dict[str, Any]:
    """
    Copy ``data`` with credential values hidden, recursing into nested
    dicts and lists of dicts.

    An ``Authorization`` value keeps its scheme (``token``, ``Bearer``) and
    a short token preview; other sensitive keys become ``[REDACTED]``.
    """
    keys = _DEFAULT_SENSITIVE_KEYS if sensitive_keys is None else sensitive_keys

    def mask(key: str, value: Any) -> Any:
        key_lower = key.lower()
        if _is_sensitive(key_lower, keys):
            if key_lower == "authorization" and isinstance(value, str):
                return _mask_header(value)
            return "[REDACTED]"
        if isinstance(value, dict):
            return safe_log_dict(value, keys)
        if isinstance(value, list):
            return [safe_log_dict(v, keys) if isinstance(v, dict) else v for v in value]
        return value

    return {key: mask(key, value) for key, value in data.items()}


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an HTTP request at DEBUG level with credentials masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    body: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log an HTTP response at DEBUG level with credentials masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if body:
        log_parts.append(f"body={mask_sensitive_data(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_credential_operation(operation: str, location: str | None = None) -> None:
    """Log a credential load/store at DEBUG level. Never logs the token."""
    if not _auth_logger.isEnabledFor(logging.DEBUG):
        return

    message = f"{operation} credential"
    if location:
        message = f"{message} at {location}"

    _auth_logger.debug(message)


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "mask_token",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_credential_operation",
]
