# storefront/routers/auth.py
from typing import Any

from fastapi import APIRouter, Body, Depends

from storefront.core.config import Settings, app_settings
from storefront.core.tokens import issue_token
from storefront.schemas.user import TokenResponse

router = APIRouter(tags=["Auth"])


@router.post("/jwt", response_model=TokenResponse)
def create_token(
    claims: dict[str, Any] = Body(...),
    settings: Settings = Depends(app_settings),
):
    """
    Sign the posted claims (typically `{"email": ...}`) into a bearer
    token valid for one hour.

    Auth:
      - Public. Roles in the claims are ignored by the gates; the stored
        user record decides admin access.
    """
    token = issue_token(claims, settings.ACCESS_TOKEN_SECRET, algorithm=settings.JWT_ALG)
    return TokenResponse(token=token)
