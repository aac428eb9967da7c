from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def list_all(self) -> list[User]:
        """Return every user in store order."""
        ...

    def get_by_id(self, user_id: int) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def create(self, name: str, email: str) -> User:
        """Append a new user and return it with its assigned ID."""
        ...

    def update(self, user_id: int, name: str, email: str) -> User | None:
        """Overwrite name and email in place. Return the updated User or None if not found."""
        ...

    def delete(self, user_id: int) -> User | None:
        """Remove a user. Return the removed User or None if not found."""
        ...

    def __len__(self) -> int:
        ...
