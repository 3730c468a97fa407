# formbridge/schemas/webhook.py
"""Inbound payload posted by the Google Forms Apps Script trigger."""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class AnswerEntry(BaseModel):
    value: str = ""


class AnswerList(BaseModel):
    answers: List[AnswerEntry] = []


class RawAnswer(BaseModel):
    """One answer as sent on the wire; exactly one of the keys is expected."""

    model_config = ConfigDict(extra="ignore")

    textAnswers: Optional[AnswerList] = None
    email: Optional[str] = None
    choiceQuestions: Optional[AnswerList] = None


class FormResponse(BaseModel):
    # Extra keys are kept: without `answers` the body is taken as an already-flat submission
    model_config = ConfigDict(extra="allow")

    responseId: Optional[str] = None
    formId: Optional[str] = None
    formTitle: Optional[str] = None
    createTime: Optional[str] = None
    answers: Optional[Dict[str, RawAnswer]] = None


class FormWebhook(BaseModel):
    formResponse: Optional[FormResponse] = None
