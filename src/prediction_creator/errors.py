"""Errors raised by prediction-creator; the CLI turns them into exit code 1."""


class PredictionCreatorError(Exception):
    pass


class ConfigError(PredictionCreatorError):
    """Required configuration (e.g. the access token) is missing."""


class TokenValidationError(PredictionCreatorError):
    """Twitch rejected the access token or returned no broadcaster identity."""


class UnexpectedResponseError(PredictionCreatorError):
    """End-prediction returned a response we have no handling for."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"Unexpected end_prediction response ({status_code}): {detail}")
        self.status_code = status_code
        self.detail = detail
