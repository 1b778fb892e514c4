"""
Shared API dependencies.
Provides the process-wide stores, the permission resolver, the receipt
extractor and the bearer-token user lookup as FastAPI dependencies.
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache

import jwt
from fastapi import HTTPException, Header, Depends

from app.ai.receipt_extractor import ReceiptVATExtractor
from app.config import get_settings
from app.core.permissions import Feature, PermissionResolver, ROLE_PERMISSIONS
from app.models.user import User
from app.repositories import (
    CompanyStateStore,
    InMemoryReceiptRepository,
    InMemoryUserRepository,
    ReceiptRepository,
    UserRepository,
)


@lru_cache()
def get_user_repository() -> UserRepository:
    return InMemoryUserRepository()


@lru_cache()
def get_receipt_repository() -> ReceiptRepository:
    return InMemoryReceiptRepository()


@lru_cache()
def get_company_state() -> CompanyStateStore:
    return CompanyStateStore()


@lru_cache()
def get_permission_resolver() -> PermissionResolver:
    return PermissionResolver(ROLE_PERMISSIONS)


@lru_cache()
def get_receipt_extractor() -> ReceiptVATExtractor:
    return ReceiptVATExtractor()


def create_access_token(user: User) -> tuple[str, int]:
    """Issue a signed token for a registry user; returns (token, expires_in seconds)."""
    settings = get_settings()
    expires_in = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    payload = {
        "sub": user.id,
        "email": user.email,
        "exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in),
    }
    token = jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token, expires_in


def verify_jwt_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.InvalidTokenError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")


async def get_current_user(
    authorization: str = Header(...),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Resolve the bearer token to a user in the registry.
    The role is read from the registry, so role changes apply immediately.
    """
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header")

    payload = verify_jwt_token(authorization.replace("Bearer ", "", 1))
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token: no user ID")

    user = users.get(user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="User no longer exists")
    return user


def require_feature(feature: Feature):
    """Dependency factory: the caller's role must include `feature`."""

    async def dependency(
        current_user: User = Depends(get_current_user),
        resolver: PermissionResolver = Depends(get_permission_resolver),
    ) -> User:
        if not resolver.can_access(current_user.role, feature):
            raise HTTPException(
                status_code=403,
                detail=f"Role {current_user.role.value} cannot access {feature.value}",
            )
        return current_user

    return dependency
