import pytest
from fastapi.testclient import TestClient

from formbridge.core.config import Settings
from formbridge.core.deps import get_board_client
from formbridge.core.errors import RemoteApiError
from formbridge.schemas.submission import BoardColumn, BoardItem
from main import create_app


class FakeBoardClient:
    """Records create_item calls instead of reaching the board API."""

    def __init__(self, config, error=None, columns=None):
        self.config = config
        self.error = error
        self.columns = columns
        self.calls = []

    def create_item(self, name, column_values):
        self.calls.append((name, column_values))
        if self.error:
            raise RemoteApiError(self.error)
        return BoardItem(id="987", name=name)

    def list_columns(self):
        return self.columns


@pytest.fixture
def settings():
    return Settings(_env_file=None, MONDAY_API_TOKEN="token", MONDAY_BOARD_ID=123, LOG_JSON=False)


@pytest.fixture
def fake_board(settings):
    return FakeBoardClient(
        settings.board_config(),
        columns=[BoardColumn(id="status", title="Status", type="status")],
    )


@pytest.fixture
def client(settings, fake_board):
    app = create_app(settings)
    app.dependency_overrides[get_board_client] = lambda: fake_board
    return TestClient(app)


def text(value):
    return {"textAnswers": {"answers": [{"value": value}]}}


def choice(*values):
    return {"choiceQuestions": {"answers": [{"value": v} for v in values]}}


@pytest.fixture
def webhook_body():
    return {
        "formResponse": {
            "responseId": "resp-1",
            "formTitle": "Event registration",
            "answers": {
                "full_name": text("Test User"),
                "email": {"email": "test@example.com"},
                "event_name": text("Test Event"),
                "event_address": text("123 Test Street"),
                "event_type": choice("Conference"),
                "organization": choice("Tech Corp"),
                "what_days_will_you_attend": choice("Mon", "Tue"),
                "dietary_restrictions": choice("Vegetarian"),
                "i_understand_that_i_will_have_to_pay_10_upon_arrival": choice("Yes"),
            },
        }
    }
