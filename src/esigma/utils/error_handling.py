"""
Structured error logging for the service boundary

Façades turn failures into envelopes; the log entry written here is where the
operator sees the full exception. Operation context is redacted before output.
"""

import json
import logging
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Context keys containing any of these fragments are never logged in clear
REDACTED_KEY_FRAGMENTS = ("password", "hash", "token", "secret", "credential")

REDACTED = "[redacted]"

# Long context strings (e.g. uploaded CSV) are cut to this many characters
MAX_CONTEXT_VALUE_LENGTH = 2000


def redact_context(value: Any) -> Any:
    """Copy of an operation context safe to write to the log"""
    if isinstance(value, dict):
        redacted = {}
        for key, item in value.items():
            if any(fragment in str(key).lower() for fragment in REDACTED_KEY_FRAGMENTS):
                redacted[key] = REDACTED
            else:
                redacted[key] = redact_context(item)
        return redacted
    if isinstance(value, (list, tuple)):
        return [redact_context(item) for item in value]
    if isinstance(value, str) and len(value) > MAX_CONTEXT_VALUE_LENGTH:
        return f"{value[:MAX_CONTEXT_VALUE_LENGTH]}... ({len(value)} chars)"
    return value


def log_service_error(
    service: str,
    operation: str,
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    include_traceback: bool = True
) -> str:
    """
    Log a structured error entry for a failed service operation

    Args:
        service: Façade name, e.g. "UserService"
        operation: Operation name, e.g. "create_user"
        exception: The caught exception
        context: Operation arguments worth logging (redacted before output)
        include_traceback: Attach the formatted traceback

    Returns:
        Short trace id identifying the log entry
    """
    trace_id = uuid.uuid4().hex[:8]

    entry: Dict[str, Any] = {
        "trace_id": trace_id,
        "at": datetime.now(timezone.utc).isoformat(),
        "service": service,
        "operation": operation,
        "error": type(exception).__name__,
        "detail": str(exception),
    }

    if context:
        entry["context"] = redact_context(context)

    if include_traceback:
        entry["traceback"] = "".join(
            traceback.format_exception(type(exception), exception, exception.__traceback__)
        )

    logger.error(json.dumps(entry, default=str))

    return trace_id
