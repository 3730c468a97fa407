# formbridge/services/board_client.py
"""
Thin monday.com GraphQL wrapper: one mutation to create an item, one query
to list the board columns for the diagnostic endpoint.
"""
import json
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from formbridge.core.config import BoardConfig
from formbridge.core.errors import ConfigurationError, RemoteApiError
from formbridge.core.logging import logger
from formbridge.schemas.submission import BoardColumn, BoardItem

CREATE_ITEM_MUTATION = """
mutation CreateItem($boardId: ID!, $itemName: String!, $columnValues: JSON!) {
    create_item(board_id: $boardId, item_name: $itemName, column_values: $columnValues) {
        id
        name
    }
}
"""

BOARD_COLUMNS_QUERY = """
query GetBoard($boardId: ID!) {
    boards(ids: [$boardId]) {
        columns {
            id
            title
            type
        }
    }
}
"""


class BoardClient:
    def __init__(self, config: BoardConfig):
        self.config = config

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": self.config.api_token,
            "Content-Type": "application/json",
        }
        if self.config.api_version:
            headers["API-Version"] = self.config.api_version
        return headers

    def _post(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        if not self.config.is_complete:
            raise ConfigurationError("MONDAY_API_TOKEN and MONDAY_BOARD_ID must be set")

        try:
            resp = requests.post(
                self.config.api_url,
                json={"query": query, "variables": variables},
                headers=self._headers(),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise RemoteApiError(str(e)) from e

        try:
            body = resp.json()
        except ValueError:
            raise RemoteApiError(f"HTTP {resp.status_code}: {resp.text}") from None

        if not isinstance(body, dict):
            raise RemoteApiError(f"HTTP {resp.status_code}: unexpected response {body!r}")
        errors = body.get("errors")
        if errors:
            if not isinstance(errors, list):
                raise RemoteApiError(str(errors))
            first = errors[0]
            message = first.get("message") if isinstance(first, dict) else str(first)
            raise RemoteApiError(message or "Unknown board API error")
        if body.get("error_message"):
            raise RemoteApiError(body["error_message"])
        if resp.status_code >= 400:
            raise RemoteApiError(f"HTTP {resp.status_code}: {resp.text}")
        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise RemoteApiError(f"HTTP {resp.status_code}: unexpected data {data!r}")
        return data

    def create_item(self, name: str, column_values: Dict[str, Any]) -> BoardItem:
        variables = {
            "boardId": self.config.board_id,
            "itemName": name,
            # The API takes column values as a JSON-encoded string
            "columnValues": json.dumps(column_values),
        }
        data = self._post(CREATE_ITEM_MUTATION, variables)
        created = data.get("create_item")
        if not isinstance(created, dict) or created.get("id") is None or created.get("name") is None:
            raise RemoteApiError("Board API response has no create_item payload")

        item = BoardItem(id=str(created["id"]), name=str(created["name"]))
        logger.info("Board item created", item_id=item.id, item_name=item.name, board_id=self.config.board_id)
        return item

    def list_columns(self) -> Optional[List[BoardColumn]]:
        """Columns of the configured board, or None when the board cannot be reached."""
        try:
            data = self._post(BOARD_COLUMNS_QUERY, {"boardId": self.config.board_id})
            columns = data["boards"][0]["columns"]
            return [BoardColumn.model_validate(c) for c in columns]
        except (RemoteApiError, ConfigurationError, PydanticValidationError, KeyError, IndexError, TypeError) as e:
            logger.warning("Error fetching board columns", error=str(e), board_id=self.config.board_id)
            return None
