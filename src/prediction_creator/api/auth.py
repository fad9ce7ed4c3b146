"""Twitch OAuth token validation."""

import httpx

from prediction_creator.config import OAUTH_BASE_URL
from prediction_creator.errors import TokenValidationError
from prediction_creator.logger import get_logger
from prediction_creator.models import UserToken

logger = get_logger(__name__)


async def validate_token(
    client: httpx.AsyncClient,
    access_token: str,
    base_url: str = OAUTH_BASE_URL,
) -> UserToken:
    """Validate ``access_token`` and return it with the broadcaster identity attached."""
    resp = await client.get(
        f"{base_url}/validate",
        headers={"Authorization": f"OAuth {access_token}"},
    )
    if resp.status_code == 401:
        logger.error("Token validation rejected: %s", resp.text)
        raise TokenValidationError("Twitch rejected the access token (invalid or expired)")
    resp.raise_for_status()
    data = resp.json()

    login = data.get("login")
    user_id = data.get("user_id")
    # App access tokens validate fine but carry no user
    if not login or not user_id:
        raise TokenValidationError("Access token is not a user token: it carries no login or user id")

    logger.info("Validated token for %s (%s), expires in %ss", login, user_id, data.get("expires_in"))
    return UserToken(
        access_token=access_token,
        login=login,
        user_id=str(user_id),
        client_id=data.get("client_id", ""),
        scopes=list(data.get("scopes") or []),
        expires_in=int(data.get("expires_in", 0) or 0),
    )
