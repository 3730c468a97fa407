# formbridge/schemas/submission.py
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class NormalizedSubmission(BaseModel):
    """Flat record extracted from one form response. Absent fields stay empty strings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    task_name: str = ""
    email: str = ""
    event_name: str = ""
    event_address: str = ""
    event_timing: str = ""
    event_type: str = ""
    organization: str = ""
    days_to_attend: Union[str, List[str]] = ""
    dietary_restrictions: Union[str, List[str]] = ""
    acknowledgement: Union[bool, str, List[str]] = ""


class BoardItem(BaseModel):
    id: str
    name: str


class BoardColumn(BaseModel):
    id: str
    title: str
    type: str


class ForwardResponse(BaseModel):
    success: bool = True
    message: str
    mondayItem: BoardItem
    formData: Dict[str, Any]


class ColumnsProbeResponse(BaseModel):
    success: bool
    message: str
    boardId: Optional[int] = None
    columns: Optional[List[BoardColumn]] = None
