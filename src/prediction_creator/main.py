import typer

from prediction_creator.commands.predict import predict

app = typer.Typer(
    name="prediction-creator",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Only command, so Typer runs it at the top level: `prediction-creator --title ...`
app.command(help="Create or resume a Twitch prediction and resolve it from the terminal.")(predict)


if __name__ == "__main__":
    app()
