# formbridge/services/mapper.py
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from formbridge.core.logging import logger
from formbridge.schemas.submission import NormalizedSubmission
from formbridge.utils.formatting import as_list, is_affirmative, is_empty, split_labels

STATUS_COLUMN_ID = "status"
NEW_ITEM_STATUS = "New"


@dataclass(frozen=True)
class ColumnSpec:
    field: str
    column_id: str
    build: Callable[[Any], Any]


def text_value(value: Any) -> str:
    return str(value)


def email_value(value: Any) -> Dict[str, str]:
    return {"email": value, "text": value}


def label_value(value: Any) -> Dict[str, str]:
    return {"label": value}


def labels_value(value: Any) -> Optional[Dict[str, list]]:
    labels = split_labels(value)
    return {"labels": labels} if labels else None


def single_labels_value(value: Any) -> Optional[Dict[str, list]]:
    labels = [label for label in as_list(value) if label.strip()]
    return {"labels": labels} if labels else None


def checkbox_value(value: Any) -> Dict[str, str]:
    return {"checked": "true"} if is_affirmative(value) else {}


# Board schema: NormalizedSubmission field -> column id -> value shape
BOARD_COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec("email", "email_col", email_value),
    ColumnSpec("event_address", "text_addr", text_value),
    ColumnSpec("event_timing", "text_time", text_value),
    ColumnSpec("event_type", "color_col", label_value),
    ColumnSpec("organization", "text_org", text_value),
    ColumnSpec("days_to_attend", "dropdown_days", labels_value),
    ColumnSpec("dietary_restrictions", "dropdown_diet", single_labels_value),
    ColumnSpec("acknowledgement", "boolean_col", checkbox_value),
)


def build_column_values(
    submission: NormalizedSubmission,
    columns: Tuple[ColumnSpec, ...] = BOARD_COLUMNS,
) -> Dict[str, Any]:
    """
    Build the column-values document for a new board item.
    Empty fields, and builders returning None, are left out; the status column is always set.
    """
    document: Dict[str, Any] = {}
    for spec in columns:
        value = getattr(submission, spec.field)
        if is_empty(value):
            continue
        built = spec.build(value)
        if built is None:
            continue
        document[spec.column_id] = built

    document[STATUS_COLUMN_ID] = {"label": NEW_ITEM_STATUS}

    logger.debug("Column values built", columns=list(document))
    return document
