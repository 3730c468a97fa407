# formbridge/services/extractor.py
"""
Turn a Google Forms answer set into a NormalizedSubmission.

Answers arrive keyed by the question title, normalized the same way the
Apps Script trigger does it ("What days will you attend?" ->
"what_days_will_you_attend"). Only the questions listed in QUESTION_FIELDS
are kept; anything else is logged and dropped.
"""
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from formbridge.core.errors import ValidationError
from formbridge.core.logging import logger
from formbridge.schemas.submission import NormalizedSubmission
from formbridge.schemas.webhook import FormResponse, RawAnswer
from formbridge.utils.formatting import is_empty, split_labels


@dataclass(frozen=True)
class TextAnswer:
    value: str


@dataclass(frozen=True)
class EmailAnswer:
    value: str


@dataclass(frozen=True)
class ChoiceAnswer:
    values: Tuple[str, ...]


AnswerValue = Union[TextAnswer, EmailAnswer, ChoiceAnswer]

# question key -> NormalizedSubmission field(s)
QUESTION_FIELDS: Dict[str, Tuple[str, ...]] = {
    "event_name": ("event_name", "task_name"),
    "email": ("email",),
    "event_address": ("event_address",),
    "event_timing": ("event_timing",),
    "event_type": ("event_type",),
    "organization": ("organization",),
    "what_days_will_you_attend": ("days_to_attend",),
    "dietary_restrictions": ("dietary_restrictions",),
    "i_understand_that_i_will_have_to_pay_10_upon_arrival": ("acknowledgement",),
}

# Fields allowed to hold several selections; the others get them comma-joined
MULTI_VALUE_FIELDS = frozenset({"days_to_attend", "dietary_restrictions", "acknowledgement"})


def normalize_question_key(title: str) -> str:
    key = re.sub(r"[^a-z0-9]", "_", title.lower())
    key = re.sub(r"_+", "_", key)
    return key.strip("_")


def to_answer_value(raw: RawAnswer) -> Optional[AnswerValue]:
    if raw.textAnswers is not None:
        first = raw.textAnswers.answers[0].value if raw.textAnswers.answers else ""
        return TextAnswer(first)
    if raw.email is not None:
        return EmailAnswer(raw.email)
    if raw.choiceQuestions is not None:
        return ChoiceAnswer(tuple(a.value for a in raw.choiceQuestions.answers))
    return None


def to_answer_set(answers: Mapping[str, RawAnswer]) -> Dict[str, AnswerValue]:
    answer_set: Dict[str, AnswerValue] = {}
    for key, raw in answers.items():
        value = to_answer_value(raw)
        if value is None:
            logger.info("Answer without a known shape ignored", key=key)
            continue
        answer_set[normalize_question_key(key)] = value
    return answer_set


def answer_scalar(answer: AnswerValue) -> Union[str, List[str]]:
    if isinstance(answer, (TextAnswer, EmailAnswer)):
        return answer.value
    if isinstance(answer, ChoiceAnswer):
        if not answer.values:
            return ""
        if len(answer.values) == 1:
            return answer.values[0]
        return list(answer.values)
    raise TypeError(f"Unsupported answer kind: {type(answer).__name__}")


def extract_submission(answers: Mapping[str, AnswerValue]) -> NormalizedSubmission:
    fields: Dict[str, Union[str, List[str]]] = {}
    for key, answer in answers.items():
        key = normalize_question_key(key)
        targets = QUESTION_FIELDS.get(key)
        if targets is None:
            logger.info("Unmapped question ignored", key=key)
            continue
        value = answer_scalar(answer)
        for name in targets:
            if isinstance(value, list) and name not in MULTI_VALUE_FIELDS:
                fields[name] = ", ".join(value)
            else:
                fields[name] = value

    days = fields.get("days_to_attend", "")
    if not is_empty(days):
        fields["days_to_attend"] = split_labels(days)

    submission = NormalizedSubmission(**fields)
    logger.info("Form data extracted", task_name=submission.task_name, fields=sorted(fields))
    return submission


def extract_from_form_response(form_response: FormResponse) -> NormalizedSubmission:
    """Answers go through the extractor; a response without them is read as a flat record."""
    if form_response.answers is not None:
        return extract_submission(to_answer_set(form_response.answers))
    try:
        return NormalizedSubmission.model_validate(form_response.model_extra or {})
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid formResponse fields: {e.error_count()} error(s)") from e
