"""
star-history logging utilities.

Provides configurable logging for HTTP requests/responses and sampling runs.
Ensures access tokens are never logged.
"""

import logging
import re
from collections.abc import Sequence
from typing import Any

# Package loggers
_sdk_logger = logging.getLogger("starhistory")
_http_logger = logging.getLogger("starhistory.http")
_sampler_logger = logging.getLogger("starhistory.sampler")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values ("token ghp_...", "Bearer ...")
    (re.compile(r"(authorization['\"]?\s*[:=]\s*['\"]?)(token|bearer)\s+[^'\"\s,}]+", re.IGNORECASE), r"\1\2 [REDACTED]"),
    # GitHub token formats (classic and fine-grained)
    (re.compile(r"\b(ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}\b"), "[TOKEN_REDACTED]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}\b"), "[TOKEN_REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"authorization", "token", "secret", "password", "api_key"}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    sampler_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure star-history logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        sampler_level: Log level for sampling runs (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from starhistory.logging import configure_logging

        # Show every GitHub request
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _sampler_logger.setLevel(sampler_level if sampler_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a star-history logger.

    Args:
        name: Logger name suffix (e.g., "http", "sampler"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"starhistory.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask access tokens and other secrets in a string.

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

    Keys are matched case-insensitively, so HTTP headers such as
    ``Authorization`` are caught as well.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of lowercase keys to mask (default: authorization, token, secret, password, api_key)

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
    """
    Log an HTTP request at DEBUG level with credentials masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Request headers (optional)
        params: Query parameters (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if params:
        log_parts.append(f"params={params}")

    if headers:
        safe_headers = safe_log_dict(headers)
        log_parts.append(f"headers={safe_headers}")

    _http_logger.debug(mask_sensitive_data(" | ".join(log_parts)))


def log_http_response(
    status_code: int,
    url: str,
    link: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Response bodies are not logged; stargazer pages carry user data and can be large.

    Args:
        status_code: HTTP status code
        url: Request URL
        link: Value of the Link pagination header (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if link:
        log_parts.append(f"link={link}")

    _http_logger.debug(mask_sensitive_data(" | ".join(log_parts)))


def log_sampling_plan(
    repo: str,
    strategy: str,
    path: str,
    total_pages: int,
    pages: Sequence[int],
) -> None:
    """
    Log the pages chosen for a sampling run at DEBUG level.

    Args:
        repo: Repository identifier ("owner/name")
        strategy: Name of the data source being sampled
        path: "exact" or "sampled"
        total_pages: Page count discovered from the Link header
        pages: Page numbers that will be fetched
    """
    if not _sampler_logger.isEnabledFor(logging.DEBUG):
        return

    _sampler_logger.debug(
        f"{repo}: strategy={strategy}, path={path}, total_pages={total_pages}, "
        f"pages={list(pages)}"
    )


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_sampling_plan",
]
