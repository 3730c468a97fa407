# formbridge/core/deps.py
from fastapi import Request

from formbridge.services.board_client import BoardClient


def get_board_client(request: Request) -> BoardClient:
    # Built once in create_app() from the startup settings
    return request.app.state.board_client
