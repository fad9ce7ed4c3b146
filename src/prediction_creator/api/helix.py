"""Twitch Helix predictions endpoints: list, create, end."""

from typing import Any

import httpx

from prediction_creator.config import HELIX_BASE_URL
from prediction_creator.logger import get_logger
from prediction_creator.models import (
    AuthFailed,
    EndPredictionResponse,
    EndSuccess,
    MissingQuery,
    Outcome,
    Prediction,
    PredictionStatus,
    UnknownResponse,
    UserToken,
)

logger = get_logger(__name__)


def _parse_status(raw: str) -> PredictionStatus | str:
    try:
        return PredictionStatus(raw)
    except ValueError:
        logger.warning("Unknown prediction status %r", raw)
        return raw


def _parse_outcome(raw: dict[str, Any]) -> Outcome:
    return Outcome(
        id=raw.get("id", ""),
        title=raw.get("title", ""),
        users=int(raw.get("users", 0) or 0),
        channel_points=int(raw.get("channel_points", 0) or 0),
        color=raw.get("color", ""),
    )


def _parse_prediction(raw: dict[str, Any]) -> Prediction:
    return Prediction(
        id=raw.get("id", ""),
        broadcaster_id=raw.get("broadcaster_id", ""),
        title=raw.get("title", ""),
        status=_parse_status(raw.get("status", "")),
        outcomes=[_parse_outcome(o) for o in raw.get("outcomes") or []],
        prediction_window=int(raw.get("prediction_window", 0) or 0),
        winning_outcome_id=raw.get("winning_outcome_id"),
        created_at=raw.get("created_at", ""),
    )


async def get_last_prediction(
    client: httpx.AsyncClient,
    token: UserToken,
    broadcaster_id: str,
    base_url: str = HELIX_BASE_URL,
) -> Prediction | None:
    """Return the broadcaster's most recent prediction if it is still ACTIVE or LOCKED.

    Read-then-create is not atomic: two concurrent runs can both see no open
    prediction. Twitch itself refuses a second active prediction.
    """
    resp = await client.get(
        f"{base_url}/predictions",
        params={"broadcaster_id": broadcaster_id, "first": "1"},
        headers=token.helix_headers(),
    )
    resp.raise_for_status()
    data = resp.json().get("data") or []
    if not data:
        logger.info("No predictions found for %s", broadcaster_id)
        return None

    last = _parse_prediction(data[0])
    logger.info("Last prediction %s is %s", last.id, last.status)
    return last if last.is_open else None


async def create_prediction(
    client: httpx.AsyncClient,
    token: UserToken,
    broadcaster_id: str,
    title: str,
    outcomes: list[str],
    prediction_window: int,
    base_url: str = HELIX_BASE_URL,
) -> Prediction:
    """Create a prediction and return it with the ids Twitch assigned."""
    body = {
        "broadcaster_id": broadcaster_id,
        "title": title,
        "outcomes": [{"title": o} for o in outcomes],
        "prediction_window": prediction_window,
    }
    resp = await client.post(f"{base_url}/predictions", json=body, headers=token.helix_headers())
    resp.raise_for_status()
    prediction = _parse_prediction(resp.json()["data"][0])
    logger.info("Created prediction %s (%d outcomes)", prediction.id, len(prediction.outcomes))
    return prediction


async def end_prediction(
    client: httpx.AsyncClient,
    token: UserToken,
    broadcaster_id: str,
    prediction_id: str,
    status: PredictionStatus,
    winning_outcome_id: str | None = None,
    base_url: str = HELIX_BASE_URL,
) -> EndPredictionResponse:
    """Resolve or cancel a prediction.

    Transport errors propagate; HTTP error statuses come back as a response
    variant so the caller can report them.
    """
    body: dict[str, Any] = {
        "broadcaster_id": broadcaster_id,
        "id": prediction_id,
        "status": status.value,
    }
    if winning_outcome_id is not None:
        body["winning_outcome_id"] = winning_outcome_id

    resp = await client.patch(f"{base_url}/predictions", json=body, headers=token.helix_headers())
    logger.info("end_prediction %s -> %s: HTTP %d", prediction_id, status.value, resp.status_code)

    if resp.is_success:
        if not resp.content:
            return EndSuccess(prediction=None)
        try:
            raw = resp.json()["data"][0]
        except (ValueError, KeyError, IndexError, TypeError):
            logger.error("Unreadable end_prediction body: %s", resp.text)
            return UnknownResponse(status_code=resp.status_code, detail=f"unreadable response body: {resp.text[:200]}")
        return EndSuccess(prediction=_parse_prediction(raw))
    if resp.status_code == 400:
        return MissingQuery(detail=_error_detail(resp))
    if resp.status_code == 401:
        return AuthFailed(detail=_error_detail(resp))
    return UnknownResponse(status_code=resp.status_code, detail=_error_detail(resp))


def _error_detail(resp: httpx.Response) -> str:
    """Helix errors look like {"error": "Bad Request", "status": 400, "message": "..."}."""
    try:
        payload = resp.json()
    except ValueError:
        return resp.text
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return resp.text
