"""Interactive single-choice menu."""

from typing import TextIO

from rich.console import Console
from rich.prompt import IntPrompt

console = Console()


def select(
    items: list[str],
    prompt: str = "your selection please",
    default: int = 0,
    console: Console = console,
    stream: TextIO | None = None,
) -> int:
    """Print ``items`` and block until the operator picks one.

    Items are entered by their 1-based number; the return value is the
    0-based index into ``items``. An empty answer picks ``default``.
    """
    for item in items:
        console.print(f"  {item}", highlight=False, markup=False)
    choice = IntPrompt.ask(
        f"[bold]?[/bold] {prompt}",
        console=console,
        choices=[str(i) for i in range(1, len(items) + 1)],
        default=default + 1,
        show_choices=False,
        stream=stream,
    )
    return choice - 1
