# formbridge/utils/formatting.py
from datetime import datetime, timezone
from typing import Any, List

AFFIRMATIVE_VALUES = ("Yes", "true")


def split_labels(value: Any) -> List[str]:
    """Multi-select answers: a list passes through, "Mon, Tue" is split, a scalar is wrapped."""
    if isinstance(value, (list, tuple)):
        parts = [str(v) for v in value]
    elif isinstance(value, str):
        parts = value.split(",")
    else:
        parts = [str(value)]
    # blank selections are dropped
    return [part.strip() for part in parts if part.strip()]


def as_list(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


def is_affirmative(value: Any) -> bool:
    # Any non-empty checkbox selection counts as ticked
    if value is True:
        return True
    if isinstance(value, str):
        return value in AFFIRMATIVE_VALUES
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return False


def is_empty(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, tuple)) and len(value) == 0)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
