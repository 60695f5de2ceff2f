"""Session identifier generation and validation."""

import re
import time
import uuid

# Canonical version-3 form with the RFC 4122 variant
_UUID_V3 = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-3[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def generate_session_uuid() -> str:
    """Derive a new session identifier from a high-resolution timestamp."""
    return str(uuid.uuid3(uuid.NAMESPACE_DNS, str(time.perf_counter())))


def is_valid_session_uuid(value: str | None) -> bool:
    """Check that ``value`` has exactly the shape of a generated identifier."""
    if not value:
        return False
    return _UUID_V3.fullmatch(value) is not None
