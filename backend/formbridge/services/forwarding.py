# formbridge/services/forwarding.py
from dataclasses import dataclass
from typing import Any, Dict

from formbridge.core.errors import ValidationError
from formbridge.core.logging import logger
from formbridge.schemas.submission import BoardItem, NormalizedSubmission
from formbridge.services.board_client import BoardClient
from formbridge.services.mapper import build_column_values


@dataclass
class ForwardResult:
    item: BoardItem
    submission: NormalizedSubmission
    column_values: Dict[str, Any]

    def form_data(self) -> Dict[str, Any]:
        data = self.submission.model_dump(by_alias=True)
        data["columnValues"] = self.column_values
        return data


def forward_submission(
    submission: NormalizedSubmission,
    client: BoardClient,
    missing_name_message: str = "No task name found in form submission",
) -> ForwardResult:
    if not submission.task_name:
        raise ValidationError(missing_name_message)

    column_values = build_column_values(submission)
    logger.info("Forwarding submission", task_name=submission.task_name, columns=list(column_values))
    item = client.create_item(submission.task_name, column_values)
    return ForwardResult(item=item, submission=submission, column_values=column_values)
