from dataclasses import dataclass, field
from enum import Enum


class PredictionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    LOCKED = "LOCKED"
    RESOLVED = "RESOLVED"
    CANCELED = "CANCELED"


# Statuses in which a prediction can still be resolved or canceled.
OPEN_STATUSES = (PredictionStatus.ACTIVE, PredictionStatus.LOCKED)


@dataclass
class Outcome:
    id: str
    title: str
    users: int = 0
    channel_points: int = 0
    color: str = ""


@dataclass
class Prediction:
    id: str
    broadcaster_id: str
    title: str
    status: PredictionStatus | str   # raw string when Twitch adds a status we don't know
    outcomes: list[Outcome] = field(default_factory=list)
    prediction_window: int = 0
    winning_outcome_id: str | None = None
    created_at: str = ""

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_STATUSES


@dataclass
class UserToken:
    """A validated user access token and the broadcaster it belongs to."""

    access_token: str
    login: str
    user_id: str
    client_id: str
    scopes: list[str] = field(default_factory=list)
    expires_in: int = 0

    def helix_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Client-Id": self.client_id,
        }


# ---------------------------------------------------------------------------
# End-prediction response variants
# ---------------------------------------------------------------------------

@dataclass
class EndSuccess:
    prediction: Prediction | None   # None when Twitch sends no body


@dataclass
class MissingQuery:
    """Twitch answered 400: the request body was rejected."""

    detail: str


@dataclass
class AuthFailed:
    """Twitch answered 401: the token lacks access to the channel."""

    detail: str


@dataclass
class UnknownResponse:
    status_code: int
    detail: str


EndPredictionResponse = EndSuccess | MissingQuery | AuthFailed | UnknownResponse
