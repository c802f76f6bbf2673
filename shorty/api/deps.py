import secrets
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from shorty.core.config import Settings
from shorty.services.shortener import URLService

REALM = "shorty"

logger = logging.getLogger(__name__)

basic_auth = HTTPBasic(realm=REALM, auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_service(request: Request) -> URLService:
    return request.app.state.service


def verify_credentials(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
    settings: Settings = Depends(get_settings),
):
    """HTTP Basic auth for the /v1 routes; a no-op while HTTP_USER is unset."""
    if not settings.HTTP_USER:
        return

    if credentials is not None:
        user_ok = secrets.compare_digest(credentials.username.encode(), settings.HTTP_USER.encode())
        password_ok = secrets.compare_digest(credentials.password.encode(), settings.HTTP_PASSWORD.encode())
        if user_ok and password_ok:
            return

    logger.warning("Rejected request with missing or invalid credentials")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized",
        headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
    )
