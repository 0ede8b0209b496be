"""Sign-up, sign-in and role change endpoints, plus the bearer guard (get_current_user_id)."""

from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.database import SessionFactory, get_session_factory
from app.core.security import decode_access_token
from app.schemas.auth import (
    ChangeUserRoleRequest,
    ChangeUserRoleResponse,
    SignInRequest,
    SignUpInResponse,
    SignUpRequest,
)
from app.schemas.envelope import ClientResponse
from app.services import users
from app.services.auth import AuthService

router = APIRouter()
security = HTTPBearer(auto_error=False)


def envelope_response(result: ClientResponse) -> JSONResponse:
    """Send the envelope as JSON with its status_code as the HTTP status."""
    return JSONResponse(
        status_code=result.status_code,
        content=result.model_dump(mode="json", by_alias=True),
    )


def get_auth_service(
    session_factory: Annotated[SessionFactory, Depends(get_session_factory)],
) -> AuthService:
    return AuthService(session_factory)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    session_factory: Annotated[SessionFactory, Depends(get_session_factory)],
) -> str:
    """Dependency: require a valid Bearer access token and return its subject (user id). Raises 401 otherwise."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    sub = payload.get("sub")
    if not sub or not isinstance(sub, str):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
            headers={"WWW-Authenticate": "Bearer"},
        )
    with session_factory() as session:
        user = users.find_by_id(session, sub)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return sub


@router.post("/sign-up", response_model=ClientResponse[SignUpInResponse])
def sign_up(
    body: SignUpRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> JSONResponse:
    """Register a new account and return access and refresh tokens."""
    result = service.sign_up(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
        is_admin=body.is_admin,
    )
    return envelope_response(result)


@router.post("/sign-in", response_model=ClientResponse[SignUpInResponse])
def sign_in(
    body: SignInRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> JSONResponse:
    """
    Authenticate with email and password; returns access and refresh tokens.
    Include the access token in the Authorization header as: Bearer <accessToken>
    """
    return envelope_response(service.sign_in(email=body.email, password=body.password))


@router.post("/change-user-role", response_model=ClientResponse[ChangeUserRoleResponse])
def change_user_role(
    body: ChangeUserRoleRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> JSONResponse:
    """Change another user's role (admin only)."""
    return envelope_response(service.change_user_role(user_id, email=body.email, role=body.role))
