import io

from rich.console import Console

from prediction_creator.display.prompt import select

ITEMS = ["[1] Win", "[2] Lose", "[3] CANCEL"]


def _console() -> tuple[Console, io.StringIO]:
    out = io.StringIO()
    return Console(file=out, width=80), out


def test_select_returns_zero_based_index():
    console, out = _console()

    assert select(ITEMS, console=console, stream=io.StringIO("2\n")) == 1
    assert "[3] CANCEL" in out.getvalue()
    assert "your selection please" in out.getvalue()


def test_select_empty_answer_picks_default():
    console, _ = _console()

    assert select(ITEMS, console=console, stream=io.StringIO("\n")) == 0


def test_select_reprompts_on_out_of_range():
    console, _ = _console()

    assert select(ITEMS, console=console, stream=io.StringIO("9\nnope\n3\n")) == 2
