"""
Admin API routes.
User management and the role -> feature table.
"""

import logging
import uuid

from fastapi import APIRouter, HTTPException, Depends

from app.api.deps import get_permission_resolver, get_user_repository, require_feature
from app.core.permissions import FEATURE_LABELS, Feature, PermissionResolver, Role
from app.models.user import User
from app.repositories import UserRepository, update_user
from app.schemas.schemas import UserCreate, UserRoleUpdate, UserWithFeaturesResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _with_features(user: User, resolver: PermissionResolver) -> UserWithFeaturesResponse:
    return UserWithFeaturesResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        features=resolver.ordered_features(user.role),
    )


@router.get("/users", response_model=list[UserWithFeaturesResponse])
async def list_users(
    users: UserRepository = Depends(get_user_repository),
    resolver: PermissionResolver = Depends(get_permission_resolver),
    _admin=Depends(require_feature(Feature.ADMIN)),
):
    return [_with_features(u, resolver) for u in users.list()]


@router.post("/users", response_model=UserWithFeaturesResponse, status_code=201)
async def create_user(
    data: UserCreate,
    users: UserRepository = Depends(get_user_repository),
    resolver: PermissionResolver = Depends(get_permission_resolver),
    _admin=Depends(require_feature(Feature.ADMIN)),
):
    try:
        user = users.add(User(id=uuid.uuid4().hex, name=data.name, email=data.email, role=data.role))
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.info("Created user %s with role %s", user.email, user.role.value)
    return _with_features(user, resolver)


@router.put("/users/{user_id}", response_model=UserWithFeaturesResponse)
async def update_user_role(
    user_id: str,
    data: UserRoleUpdate,
    users: UserRepository = Depends(get_user_repository),
    resolver: PermissionResolver = Depends(get_permission_resolver),
    _admin=Depends(require_feature(Feature.ADMIN)),
):
    try:
        user = update_user(users, user_id, role=data.role)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")

    logger.info("Changed role of %s to %s", user.email, user.role.value)
    return _with_features(user, resolver)


@router.get("/permissions")
async def role_permissions(
    resolver: PermissionResolver = Depends(get_permission_resolver),
    _admin=Depends(require_feature(Feature.ADMIN)),
):
    return {
        role.value: [
            {"feature": f.value, "label": FEATURE_LABELS[f]}
            for f in resolver.ordered_features(role)
        ]
        for role in Role
    }
