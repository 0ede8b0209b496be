"""Request/response schemas for auth endpoints."""

from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.rbac import UserRole


def _check_email(value: str) -> str:
    """Reject malformed addresses but keep the submitted spelling; emails match case-sensitively."""
    validate_email(value, check_deliverability=False)
    return value


Email = Annotated[str, Field(max_length=255), AfterValidator(_check_email)]


class CamelModel(BaseModel):
    """Base for payloads exchanged in camelCase (firstName, accessToken, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignUpRequest(CamelModel):
    """New account details. is_admin is ignored when ALLOW_ADMIN_SIGNUP is disabled."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: Email
    password: str = Field(..., min_length=1, max_length=128)
    is_admin: bool = False


class SignInRequest(CamelModel):
    """Credentials for sign-in."""

    email: Email
    password: str = Field(..., min_length=1, max_length=128)


class ChangeUserRoleRequest(CamelModel):
    email: Email
    role: UserRole


class TokenPair(CamelModel):
    """Access (1 day) and refresh (7 days) JWTs, both carrying the user id as sub."""

    access_token: str
    refresh_token: str


class SignUpInResponse(CamelModel):
    """Returned by sign-up and sign-in. Never includes the password hash."""

    first_name: str
    last_name: str
    email: str
    tokens: TokenPair


class ChangeUserRoleResponse(CamelModel):
    email: str
    new_role: UserRole
