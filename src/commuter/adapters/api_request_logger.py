"""Utility for logging provider requests when COMMUTER_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"


def should_log_requests() -> bool:
    """Check if request logging is enabled via COMMUTER_LOG_REQUESTS environment variable."""
    return os.getenv("COMMUTER_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact API keys from query parameters."""
    sensitive_keys = {"key", "api_key"}
    return {k: REDACTED if k.lower() in sensitive_keys else v for k, v in params.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _format_payload(payload: Any) -> str:
    """Format payload for logging."""
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, dict) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    payload: Any = None,
) -> None:
    """Log request details if COMMUTER_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional, API keys are redacted).
        payload: Request body (optional).
    """
    if not should_log_requests():
        return

    safe_params = _redact_sensitive_params(params) if params else None
    log_parts = [f"{method} {_build_url_with_params(url, safe_params)}"]

    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
