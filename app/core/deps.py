"""
FastAPI dependencies for authentication, authorization and data access.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.core.database import SQLExecutor, get_executor
from app.core.exceptions import UnauthorizedError
from app.core.security import decode_token
from app.crud import CompanyRepository, JobRepository

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error=False so a missing header is reported as 401 by us, not 403
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Extract and validate the current user from the JWT token.

    Returns:
        Token payload ({"sub": username, "is_admin": bool, ...})

    Raises:
        UnauthorizedError: If the token is missing, invalid or has no subject
    """
    if credentials is None:
        raise UnauthorizedError("Missing bearer token")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")

    if payload.get("sub") is None:
        raise UnauthorizedError("Could not validate credentials")

    return payload


def require_admin(user: dict = Depends(get_current_user)) -> dict:
    """
    Ensure the current user is an admin.

    Raises:
        UnauthorizedError: If the token does not carry is_admin=True
    """
    if user.get("is_admin") is not True:
        raise UnauthorizedError("Admin access required")

    return user


def get_job_repository(executor: SQLExecutor = Depends(get_executor)) -> JobRepository:
    return JobRepository(executor)


def get_company_repository(executor: SQLExecutor = Depends(get_executor)) -> CompanyRepository:
    return CompanyRepository(executor)
