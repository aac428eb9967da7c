from fastapi import Request

from port.user_repository import UserRepository


def get_user_repo(request: Request) -> UserRepository:
    """Return the user store owned by the running application."""
    return request.app.state.user_repo
