import asyncio
from typing import Annotated, List, Optional

import httpx
import typer
from rich.markup import escape

from prediction_creator.api.auth import validate_token
from prediction_creator.config import Settings, get_settings
from prediction_creator.display.prompt import console, select
from prediction_creator.errors import PredictionCreatorError
from prediction_creator.logger import get_logger, setup_logging
from prediction_creator.resolver import PredictionRequest, run

MIN_OUTCOMES = 2
MAX_OUTCOMES = 5

logger = get_logger(__name__)


def validate_outcomes(outcomes: Optional[List[str]]) -> List[str]:
    """Reject fewer than 2 or more than 5 outcomes with a usage error."""
    outcomes = outcomes or []
    n = len(outcomes)
    if n < MIN_OUTCOMES:
        raise typer.BadParameter(
            f"You must provide at least {MIN_OUTCOMES} outcomes with --outcome, you provided {n}"
        )
    if n > MAX_OUTCOMES:
        raise typer.BadParameter(
            f"You may provide at most {MAX_OUTCOMES} outcomes with --outcome, you provided {n}"
        )
    return outcomes


def build_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.timeout)


def predict(
    title: Annotated[str, typer.Option("--title", help="The title of the prediction")],
    outcome: Annotated[
        Optional[List[str]],
        typer.Option(
            "--outcome",
            help="Outcome title. Repeat: at least 2, at most 5",
            callback=validate_outcomes,
        ),
    ] = None,
    prediction_window: Annotated[
        int, typer.Option("--prediction-window", help="Duration of the prediction in seconds")
    ] = 30,
) -> None:
    """Start (or pick up) a prediction, then resolve or cancel it interactively."""
    request = PredictionRequest(title=title, outcomes=outcome or [], prediction_window=prediction_window)

    async def main(settings: Settings) -> None:
        access_token = settings.require_token()
        async with build_client(settings) as client:
            with console.status("[dim]Validating access token…[/dim]", spinner="dots"):
                token = await validate_token(client, access_token, base_url=settings.oauth_base_url)
            await run(
                client,
                token,
                request,
                select=lambda items: select(items, console=console),
                console=console,
                base_url=settings.helix_base_url,
            )

    try:
        settings = get_settings()
        setup_logging(settings.log_file)
        asyncio.run(main(settings))
    except (PredictionCreatorError, httpx.HTTPError) as exc:
        logger.error("Aborted: %s", exc, exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
