import pytest

from formbridge.core.errors import ValidationError
from formbridge.schemas.webhook import FormResponse, RawAnswer
from formbridge.services.extractor import (
    ChoiceAnswer,
    EmailAnswer,
    TextAnswer,
    answer_scalar,
    extract_from_form_response,
    extract_submission,
    normalize_question_key,
    to_answer_value,
)


def test_normalize_question_key_matches_trigger_format():
    assert normalize_question_key("What days will you attend?") == "what_days_will_you_attend"
    assert (
        normalize_question_key("I understand that I will have to pay $10 upon arrival")
        == "i_understand_that_i_will_have_to_pay_10_upon_arrival"
    )
    assert normalize_question_key("  Event -- Name ") == "event_name"


def test_to_answer_value_by_shape():
    assert to_answer_value(RawAnswer.model_validate({"textAnswers": {"answers": [{"value": "A"}]}})) == TextAnswer("A")
    assert to_answer_value(RawAnswer.model_validate({"email": "a@b.c"})) == EmailAnswer("a@b.c")
    assert to_answer_value(
        RawAnswer.model_validate({"choiceQuestions": {"answers": [{"value": "x"}, {"value": "y"}]}})
    ) == ChoiceAnswer(("x", "y"))
    assert to_answer_value(RawAnswer.model_validate({"somethingElse": 1})) is None


def test_empty_text_answer_gives_empty_string():
    assert to_answer_value(RawAnswer.model_validate({"textAnswers": {"answers": []}})) == TextAnswer("")


def test_answer_scalar_keeps_multiple_choices_as_list():
    assert answer_scalar(ChoiceAnswer(("Mon",))) == "Mon"
    assert answer_scalar(ChoiceAnswer(("Mon", "Tue"))) == ["Mon", "Tue"]
    assert answer_scalar(ChoiceAnswer(())) == ""


def test_answer_scalar_rejects_unknown_kind():
    with pytest.raises(TypeError):
        answer_scalar("plain string")


def test_event_name_sets_task_name_and_event_name():
    sub = extract_submission({"event_name": TextAnswer("Launch party")})
    assert sub.task_name == "Launch party"
    assert sub.event_name == "Launch party"


def test_unknown_keys_are_ignored():
    sub = extract_submission({"full_name": TextAnswer("Jane"), "email": EmailAnswer("jane@example.com")})
    assert sub.email == "jane@example.com"
    assert sub.task_name == ""


def test_missing_fields_default_to_empty():
    sub = extract_submission({})
    assert sub.model_dump() == {
        "task_name": "",
        "email": "",
        "event_name": "",
        "event_address": "",
        "event_timing": "",
        "event_type": "",
        "organization": "",
        "days_to_attend": "",
        "dietary_restrictions": "",
        "acknowledgement": "",
    }


def test_days_comma_string_and_list_are_equivalent():
    from_string = extract_submission({"what_days_will_you_attend": TextAnswer("Mon, Tue")})
    from_list = extract_submission({"what_days_will_you_attend": ChoiceAnswer(("Mon", "Tue"))})
    assert from_string == from_list
    assert from_list.days_to_attend == ["Mon", "Tue"]


def test_single_day_is_wrapped():
    sub = extract_submission({"what_days_will_you_attend": ChoiceAnswer(("Wed",))})
    assert sub.days_to_attend == ["Wed"]


def test_multiple_choices_on_text_field_are_joined():
    sub = extract_submission({"organization": ChoiceAnswer(("Tech Corp", "Acme"))})
    assert sub.organization == "Tech Corp, Acme"


def test_raw_keys_are_normalized_before_lookup():
    sub = extract_submission({"Event Name": TextAnswer("Gala")})
    assert sub.task_name == "Gala"


def test_form_response_with_answers():
    form_response = FormResponse.model_validate(
        {
            "responseId": "r1",
            "answers": {
                "event_name": {"textAnswers": {"answers": [{"value": "Meetup"}]}},
                "i_understand_that_i_will_have_to_pay_10_upon_arrival": {
                    "choiceQuestions": {"answers": [{"value": "I agree"}]}
                },
            },
        }
    )
    sub = extract_from_form_response(form_response)
    assert sub.task_name == "Meetup"
    assert sub.acknowledgement == "I agree"


def test_flat_form_response_is_read_as_submission():
    form_response = FormResponse.model_validate(
        {"taskName": "Direct", "email": "d@example.com", "daysToAttend": ["Mon"]}
    )
    sub = extract_from_form_response(form_response)
    assert sub.task_name == "Direct"
    assert sub.email == "d@example.com"
    assert sub.days_to_attend == ["Mon"]


def test_flat_form_response_with_bad_types_is_rejected():
    form_response = FormResponse.model_validate({"taskName": {"nested": True}})
    with pytest.raises(ValidationError):
        extract_from_form_response(form_response)
