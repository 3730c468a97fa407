# formbridge/api/webhook.py
from fastapi import APIRouter, Depends

from formbridge.core.deps import get_board_client
from formbridge.core.errors import ValidationError
from formbridge.core.logging import logger
from formbridge.schemas.submission import ForwardResponse, NormalizedSubmission
from formbridge.schemas.webhook import FormWebhook
from formbridge.services.board_client import BoardClient
from formbridge.services.extractor import extract_from_form_response
from formbridge.services.forwarding import forward_submission

router = APIRouter()


@router.post("/form-webhook", response_model=ForwardResponse)
@router.post("/google-forms-webhook", response_model=ForwardResponse)  # alias used by older triggers
def receive_form_webhook(payload: FormWebhook, client: BoardClient = Depends(get_board_client)):
    if payload.formResponse is None:
        raise ValidationError("Invalid webhook data: missing formResponse")

    form_response = payload.formResponse
    logger.info(
        "Form webhook received",
        response_id=form_response.responseId,
        form_id=form_response.formId,
        form_title=form_response.formTitle,
        answer_keys=sorted(form_response.answers or {}),
    )
    submission = extract_from_form_response(form_response)
    result = forward_submission(submission, client)
    return ForwardResponse(
        message="Form submission processed successfully",
        mondayItem=result.item,
        formData=result.form_data(),
    )


@router.post("/create-task", response_model=ForwardResponse)
def create_task(submission: NormalizedSubmission, client: BoardClient = Depends(get_board_client)):
    result = forward_submission(submission, client, missing_name_message="Task name is required")
    return ForwardResponse(
        message="Event created successfully!",
        mondayItem=result.item,
        formData=result.form_data(),
    )
