"""Menu and status-line formatting."""

from prediction_creator.errors import UnexpectedResponseError
from prediction_creator.models import (
    AuthFailed,
    EndPredictionResponse,
    EndSuccess,
    MissingQuery,
    Outcome,
    UnknownResponse,
)

CANCEL_LABEL = "CANCEL"


def menu_items(outcomes: list[Outcome]) -> list[str]:
    """One 1-indexed entry per outcome, then the trailing CANCEL entry."""
    items = [f"[{i}] {o.title}" for i, o in enumerate(outcomes, 1)]
    items.append(f"[{len(outcomes) + 1}] {CANCEL_LABEL}")
    return items


def fmt_outcome(outcome: Outcome) -> str:
    return f"{outcome.title} (id={outcome.id})"


def report_line(response: EndPredictionResponse) -> str:
    """Return the status line for an end-prediction response.

    Raises UnexpectedResponseError for responses we have no handling for.
    """
    if isinstance(response, EndSuccess):
        return "Successfully ended prediction"
    if isinstance(response, MissingQuery):
        return f"ERROR: Bad prediction body: {response.detail}"
    if isinstance(response, AuthFailed):
        return f"ERROR: Auth failed: {response.detail}"
    if isinstance(response, UnknownResponse):
        raise UnexpectedResponseError(response.status_code, response.detail)
    raise TypeError(f"Not an end_prediction response: {response!r}")
