"""
Admin login endpoint.

The credentials are checked against the single configured admin
account.  A successful login only echoes the username back; no token
or session is issued, and the inquiry and statistics routes do not
require one.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from coaching_api.app.core.config import Settings
from coaching_api.app.core.store import get_settings
from coaching_api.app.schemas.auth import LoginRequest, LoginResponse
from coaching_api.app.services.auth_service import AuthService

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    settings: Settings = Depends(get_settings),
) -> LoginResponse:
    """Check admin credentials.

    Returns HTTP 400 if either field is missing or empty and HTTP 401
    if the username or password does not match.
    """
    if not credentials.username or not credentials.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password are required",
        )
    user = await AuthService.authenticate(credentials.username, credentials.password, settings)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return LoginResponse(user=user)
