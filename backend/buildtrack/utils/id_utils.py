"""
Identifier generation for generated milestones and deliverables.

Ids look like "milestone-1735689600000-k3x9q0a2b": a millisecond wall-clock
timestamp plus a random base36 suffix. No counter or lock is shared between
callers.
"""

import secrets
import string
import time

_ALPHABET = string.ascii_lowercase + string.digits
SUFFIX_LENGTH = 9


def _random_suffix(length: int = SUFFIX_LENGTH) -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def generate_id(prefix: str) -> str:
    """Return a process-unique id of the form '<prefix>-<ms timestamp>-<suffix>'."""
    timestamp_ms = time.time_ns() // 1_000_000
    return f"{prefix}-{timestamp_ms}-{_random_suffix()}"


def generate_milestone_id() -> str:
    return generate_id("milestone")


def generate_deliverable_id() -> str:
    return generate_id("deliverable")
