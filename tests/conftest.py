import json
from typing import Any

import httpx
import pytest

from prediction_creator.models import UserToken


def raw_prediction(
    status: str = "ACTIVE",
    title: str = "Will we win?",
    outcomes: tuple[str, ...] = ("Win", "Lose"),
    prediction_id: str = "pred-1",
) -> dict[str, Any]:
    return {
        "id": prediction_id,
        "broadcaster_id": "1234",
        "broadcaster_login": "streamer",
        "title": title,
        "winning_outcome_id": None,
        "outcomes": [
            {"id": f"out-{i}", "title": t, "users": 0, "channel_points": 0, "color": "BLUE"}
            for i, t in enumerate(outcomes, 1)
        ],
        "prediction_window": 30,
        "status": status,
        "created_at": "2026-10-19T12:00:00Z",
        "ended_at": None,
        "locked_at": None,
    }


class FakeTwitch:
    """In-memory stand-in for the OAuth and Helix prediction endpoints."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.predictions: list[dict[str, Any]] = []
        self.token_valid = True
        self.list_status = 200
        self.create_status = 200
        self.end_status = 200
        self.error_body = {"error": "Bad Request", "status": 400, "message": "missing id"}

    def calls(self, method: str) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and r.url.path == "/helix/predictions"
        ]

    def bodies(self, method: str) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.calls(method)]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/oauth2/validate":
            if not self.token_valid:
                return httpx.Response(401, json={"status": 401, "message": "invalid access token"})
            return httpx.Response(200, json={
                "client_id": "client-abc",
                "login": "streamer",
                "scopes": ["channel:manage:predictions"],
                "user_id": "1234",
                "expires_in": 5000,
            })

        if path != "/helix/predictions":
            return httpx.Response(404, json={"error": "Not Found", "status": 404, "message": ""})

        if request.method == "GET":
            if self.list_status != 200:
                return httpx.Response(self.list_status, json=self.error_body)
            return httpx.Response(200, json={"data": self.predictions[:1], "pagination": {}})

        if request.method == "POST":
            if self.create_status != 200:
                return httpx.Response(self.create_status, json=self.error_body)
            body = json.loads(request.content)
            created = raw_prediction(
                title=body["title"],
                outcomes=tuple(o["title"] for o in body["outcomes"]),
                prediction_id="pred-new",
            )
            self.predictions.insert(0, created)
            return httpx.Response(200, json={"data": [created]})

        if request.method == "PATCH":
            if self.end_status != 200:
                return httpx.Response(self.end_status, json=self.error_body)
            body = json.loads(request.content)
            ended = raw_prediction(status=body["status"], prediction_id=body["id"])
            ended["winning_outcome_id"] = body.get("winning_outcome_id")
            return httpx.Response(200, json={"data": [ended]})

        return httpx.Response(405)


@pytest.fixture
def fake_twitch() -> FakeTwitch:
    return FakeTwitch()


@pytest.fixture
def make_client(fake_twitch):
    def _make(*_args: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(fake_twitch))
    return _make


@pytest.fixture
def token() -> UserToken:
    return UserToken(
        access_token="secret-token",
        login="streamer",
        user_id="1234",
        client_id="client-abc",
    )
