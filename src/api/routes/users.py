"""User API routes for CRUD over the in-memory store.

Endpoints:
- GET /api/users: List all users
- GET /api/users/{user_id}: Get a user
- POST /api/users: Create a user
- PUT /api/users/{user_id}: Update a user's name and email
- DELETE /api/users/{user_id}: Delete a user
"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_user_repo
from api.errors import envelope
from api.models import DeletedUserResponse, UserRequest, UserResponse
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

USER_NOT_FOUND = "user not found"

# Widest id a 64-bit counter can print; longer digit strings are also refused by int()
MAX_ID_DIGITS = 19


def parse_user_id(raw: str) -> int | None:
    """Parse a path id; anything that is not a plain decimal number matches no user."""
    if not (raw.isascii() and raw.isdigit()) or len(raw) > MAX_ID_DIGITS:
        return None
    user_id = int(raw)
    # "001" names no user, ids are matched in their canonical form
    if str(user_id) != raw:
        return None
    return user_id


def _not_found(user_id: str):
    logger.info("User not found", extra={"user_id": user_id})
    return envelope(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)


@router.get("")
async def list_users(repo: UserRepository = Depends(get_user_repo)):
    """List every user in store order."""
    users = [UserResponse.model_validate(u) for u in repo.list_all()]
    return envelope(status.HTTP_200_OK, "user list retrieved", users)


@router.get("/{user_id}")
async def get_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    """Get a single user by ID."""
    parsed = parse_user_id(user_id)
    user = repo.get_by_id(parsed) if parsed is not None else None
    if not user:
        return _not_found(user_id)

    return envelope(status.HTTP_200_OK, "user retrieved", UserResponse.model_validate(user))


@router.post("")
async def create_user(request: UserRequest, repo: UserRepository = Depends(get_user_repo)):
    """Create a user; the store assigns id and created_at."""
    user = repo.create(name=request.name, email=request.email)

    logger.info("User created", extra={"user_id": user.id, "store_size": len(repo)})

    return envelope(status.HTTP_201_CREATED, "user created", UserResponse.model_validate(user))


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    request: UserRequest,
    repo: UserRepository = Depends(get_user_repo),
):
    """Replace a user's name and email, keeping id and created_at."""
    parsed = parse_user_id(user_id)
    user = repo.update(parsed, name=request.name, email=request.email) if parsed is not None else None
    if not user:
        return _not_found(user_id)

    logger.info("User updated", extra={"user_id": user.id})

    return envelope(status.HTTP_200_OK, "user updated", UserResponse.model_validate(user))


@router.delete("/{user_id}")
async def delete_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    """Delete a user, preserving the order of the rest."""
    parsed = parse_user_id(user_id)
    user = repo.delete(parsed) if parsed is not None else None
    if not user:
        return _not_found(user_id)

    logger.info("User deleted", extra={"user_id": user.id, "store_size": len(repo)})

    return envelope(
        status.HTTP_200_OK,
        "user deleted",
        DeletedUserResponse(deleted_user_id=user.id, deleted_user_name=user.name),
    )
