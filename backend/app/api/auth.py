"""
Authentication API routes.
Mock login: pick a user from the registry by email and receive a bearer token.
"""

from fastapi import APIRouter, HTTPException, Depends

from app.api.deps import (
    create_access_token,
    get_current_user,
    get_permission_resolver,
    get_user_repository,
)
from app.core.permissions import Feature, PermissionResolver
from app.models.user import User
from app.repositories import UserRepository
from app.schemas.schemas import LoginRequest, TokenResponse, UserResponse, UserWithFeaturesResponse

router = APIRouter()


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email, role=user.role)


@router.get("/users", response_model=list[UserResponse])
async def list_login_users(users: UserRepository = Depends(get_user_repository)):
    """Users available on the mock login screen."""
    return [_user_response(u) for u in users.list()]


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    user = users.get_by_email(data.email)
    if user is None:
        raise HTTPException(status_code=401, detail="Unknown user")

    token, expires_in = create_access_token(user)
    return TokenResponse(
        access_token=token,
        expires_in=expires_in,
        user=_user_response(user),
        default_feature=resolver.default_feature(user.role),
    )


@router.get("/me", response_model=UserWithFeaturesResponse)
async def get_me(
    current_user: User = Depends(get_current_user),
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    return UserWithFeaturesResponse(
        **_user_response(current_user).model_dump(),
        features=resolver.ordered_features(current_user.role),
    )


@router.get("/me/view/{feature}")
async def resolve_view(
    feature: Feature,
    current_user: User = Depends(get_current_user),
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    """Which view to render when the user opens `feature`; unknown access lands on the classifier."""
    resolved = resolver.resolve_feature(current_user.role, feature)
    return {
        "requested": feature,
        "feature": resolved,
        "redirected": resolved != feature,
    }


@router.post("/logout")
async def logout(current_user: User = Depends(get_current_user)):
    return {"message": "Logged out successfully"}
