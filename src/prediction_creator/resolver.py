"""Create-or-resume a prediction, ask the operator for the result, end it."""

from dataclasses import dataclass
from typing import Callable

import httpx
from rich.console import Console
from rich.markup import escape

from prediction_creator.api import helix
from prediction_creator.config import HELIX_BASE_URL
from prediction_creator.display.format import fmt_outcome, menu_items, report_line
from prediction_creator.logger import get_logger
from prediction_creator.models import (
    EndPredictionResponse,
    Prediction,
    PredictionStatus,
    UserToken,
)

logger = get_logger(__name__)

Selector = Callable[[list[str]], int]


@dataclass
class PredictionRequest:
    title: str
    outcomes: list[str]
    prediction_window: int = 30


def resolution_for(prediction: Prediction, selection: int) -> tuple[PredictionStatus, str | None]:
    """Map a menu index to the end status and winning outcome id.

    Any index past the outcomes is the trailing CANCEL entry.
    """
    if 0 <= selection < len(prediction.outcomes):
        return PredictionStatus.RESOLVED, prediction.outcomes[selection].id
    return PredictionStatus.CANCELED, None


async def create_or_resume(
    client: httpx.AsyncClient,
    token: UserToken,
    request: PredictionRequest,
    console: Console,
    base_url: str = HELIX_BASE_URL,
) -> Prediction:
    with console.status("[dim]Looking for an open prediction…[/dim]", spinner="dots"):
        current = await helix.get_last_prediction(client, token, token.user_id, base_url=base_url)
    if current is not None:
        console.print(f"Found already active prediction: {current.title}", highlight=False, markup=False)
        return current

    console.print(
        f"Starting prediction for [bold]{escape(token.login)}[/bold] ({token.user_id}): {escape(request.title)}",
        highlight=False,
    )
    with console.status("[dim]Creating prediction…[/dim]", spinner="dots"):
        return await helix.create_prediction(
            client,
            token,
            token.user_id,
            request.title,
            request.outcomes,
            request.prediction_window,
            base_url=base_url,
        )


async def run(
    client: httpx.AsyncClient,
    token: UserToken,
    request: PredictionRequest,
    select: Selector,
    console: Console,
    base_url: str = HELIX_BASE_URL,
) -> EndPredictionResponse:
    """Run one create/resume -> select -> end cycle and print the outcome."""
    prediction = await create_or_resume(client, token, request, console, base_url=base_url)

    selection = select(menu_items(prediction.outcomes))
    status, winning_outcome_id = resolution_for(prediction, selection)

    if status is PredictionStatus.RESOLVED:
        console.print(
            f"Resolving with this outcome {fmt_outcome(prediction.outcomes[selection])}",
            highlight=False,
            markup=False,
        )
    else:
        console.print("[bold]Cancelling[/bold]")
    logger.info("Ending prediction %s as %s (outcome %s)", prediction.id, status.value, winning_outcome_id)

    with console.status("[dim]Ending prediction…[/dim]", spinner="dots"):
        response = await helix.end_prediction(
            client,
            token,
            token.user_id,
            prediction.id,
            status,
            winning_outcome_id,
            base_url=base_url,
        )
    console.print(report_line(response), highlight=False, markup=False)
    return response
