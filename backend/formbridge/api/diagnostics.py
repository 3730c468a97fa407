# formbridge/api/diagnostics.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from formbridge.core.deps import get_board_client
from formbridge.schemas.submission import ColumnsProbeResponse, ForwardResponse, NormalizedSubmission
from formbridge.services.board_client import BoardClient
from formbridge.services.forwarding import forward_submission
from formbridge.utils.formatting import utc_now_iso

router = APIRouter()


@router.get("/")
def index():
    return {
        "message": "Google Forms to Monday.com Webhook Server",
        "status": "Running",
        "endpoints": {
            "webhook": "POST /form-webhook",
            "createTask": "POST /create-task",
            "health": "GET /health",
            "test": "GET /test-remote",
            "testBoard": "POST /test-board",
        },
    }


@router.get("/health")
def health():
    return {"status": "OK", "timestamp": utc_now_iso()}


@router.get("/test-remote", response_model=ColumnsProbeResponse)
@router.get("/test-monday", response_model=ColumnsProbeResponse)  # alias
def test_remote(client: BoardClient = Depends(get_board_client)):
    columns = client.list_columns()
    ok = columns is not None
    return ColumnsProbeResponse(
        success=ok,
        message="Monday.com connection successful" if ok else "Monday.com connection failed",
        boardId=client.config.board_id,
        columns=columns,
    )


def sample_submission() -> NormalizedSubmission:
    """A submission touching every mapped column."""
    stamp = datetime.now(timezone.utc).strftime("%H:%M:%S")
    return NormalizedSubmission(
        task_name=f"Test Event - {stamp}",
        email="test@example.com",
        event_address="123 Test Street, City",
        event_timing="January 15, 2024 at 2:00 PM",
        event_type="Conference",
        organization="Tech Corp",
        days_to_attend=["Day 1", "Day 2", "Day 3"],
        dietary_restrictions="Vegetarian",
        acknowledgement="Yes",
    )


@router.post("/test-board", response_model=ForwardResponse)
@router.post("/test-your-board", response_model=ForwardResponse)  # alias
def test_board(client: BoardClient = Depends(get_board_client)):
    result = forward_submission(sample_submission(), client)
    return ForwardResponse(
        message="Test item created on your board",
        mondayItem=result.item,
        formData=result.form_data(),
    )
