from dataclasses import dataclass


@dataclass
class User:
    """Domain model representing a user record."""
    id: int
    name: str
    email: str
    created_at: str  # YYYY-MM-DD
