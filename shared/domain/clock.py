"""
Time helpers shared by entities and events.
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(timezone.utc)
