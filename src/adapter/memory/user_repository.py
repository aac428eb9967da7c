"""In-memory implementation of UserRepository.

Users are kept in a plain list so that store order is insertion order.
Lookups are linear scans; there is no locking.
"""

from datetime import date
from domain.model.user import User


def seed_users() -> list[User]:
    """Users every freshly started service begins with."""
    return [
        User(id=1, name="Zhang San", email="zhangsan@example.com", created_at="2024-01-01"),
        User(id=2, name="Li Si", email="lisi@example.com", created_at="2024-01-02"),
        User(id=3, name="Wang Wu", email="wangwu@example.com", created_at="2024-01-03"),
    ]


class InMemoryUserRepository:
    def __init__(self, users: list[User] | None = None):
        self.store: list[User] = list(users) if users else []

    def __len__(self) -> int:
        return len(self.store)

    # ── write operations ─────────────────────────────────────

    def create(self, name: str, email: str) -> User:
        user = User(
            id=self._next_id(),
            name=name,
            email=email,
            created_at=date.today().isoformat(),
        )
        self.store.append(user)
        return user

    def update(self, user_id: int, name: str, email: str) -> User | None:
        user = self.get_by_id(user_id)
        if not user:
            return None

        user.name = name
        user.email = email
        return user

    def delete(self, user_id: int) -> User | None:
        for index, user in enumerate(self.store):
            if user.id == user_id:
                return self.store.pop(index)
        return None

    # ── read operations ──────────────────────────────────────

    def list_all(self) -> list[User]:
        return list(self.store)

    def get_by_id(self, user_id: int) -> User | None:
        for user in self.store:
            if user.id == user_id:
                return user
        return None

    def _next_id(self) -> int:
        # Equals len + 1 while ids are contiguous, and never reuses a live id after deletes.
        return max((u.id for u in self.store), default=0) + 1
