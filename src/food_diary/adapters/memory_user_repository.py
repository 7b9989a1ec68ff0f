"""In-memory user repository."""

from dataclasses import dataclass, field
from itertools import count

from food_diary.domain.models import UserRecord
from food_diary.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """Volatile user table keyed by id with a username index."""

    users: dict[int, UserRecord] = field(default_factory=dict)
    _by_username: dict[str, int] = field(default_factory=dict)
    _ids: count = field(default_factory=lambda: count(1))

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user with the given id, if present."""
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, compared case-insensitively."""
        user_id = self._by_username.get(username.lower())
        if user_id is None:
            return None
        return self.users.get(user_id)

    def create_user(self, username: str) -> UserRecord:
        """Store a new user under its lowercased username."""
        user = UserRecord(id=next(self._ids), username=username.lower())
        self.users[user.id] = user
        self._by_username[user.username] = user.id
        return user
