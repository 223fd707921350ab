"""In-memory user directory service."""

import logging
import re
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable

from users_api.errors import BadRequestError, NotFoundError
from users_api.models.user import User, UserInput

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
NAME_AND_EMAIL_REQUIRED = "Name and email are required"

# Leading ASCII integer prefix of an identifier token; anything after it is ignored.
_ID_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def parse_user_id(token: str | int) -> int | None:
    """Parse an identifier token leniently.

    Leading whitespace and a sign are accepted and trailing characters after
    the digits are ignored, so ``"2abc"`` resolves to ``2``. Only ASCII digits
    count. Tokens without a leading integer, including ones that start with
    other Unicode digits, return None, which matches no user.

    Args:
        token: Raw identifier from the request path, or an int

    Returns:
        The parsed integer, or None if the token has no numeric prefix
    """
    if isinstance(token, int):
        return token
    match = _ID_PREFIX.match(token)
    if match is None:
        return None
    return int(match.group(1))


def validate_user_input(payload: UserInput) -> None:
    """Require a non-empty name and email.

    Raises:
        BadRequestError: If name or email is missing or empty
    """
    if not payload.name or not payload.email:
        raise BadRequestError(NAME_AND_EMAIL_REQUIRED)


def default_users() -> list[User]:
    """Records the application store starts with."""
    return [
        User(id=1, name="Alice", email="alice@example.com", age=30),
        User(id=2, name="Bob", email="bob@example.com", age=25),
    ]


class UserService(ABC):
    """Abstract interface for the user directory."""

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users in insertion order."""
        pass

    @abstractmethod
    def get_user(self, user_id: str | int) -> User:
        """Get a user by ID."""
        pass

    @abstractmethod
    def create_user(self, payload: UserInput) -> User:
        """Create a user and assign its ID."""
        pass

    @abstractmethod
    def update_user(self, user_id: str | int, payload: UserInput) -> User:
        """Replace name, email and age of an existing user."""
        pass

    @abstractmethod
    def delete_user(self, user_id: str | int) -> None:
        """Delete a user."""
        pass


class InMemoryUserService(UserService):
    """Service for managing users in memory.

    Every operation holds a single lock, so ID assignment stays unique when
    the store is shared across threads. Records handed out are
    copies; the stored records change only through ``update_user``.
    """

    def __init__(self, users: Iterable[User] | None = None) -> None:
        """Initialize the store.

        Args:
            users: Optional initial records, kept in the given order
        """
        self._users: list[User] = [user.model_copy() for user in users or ()]
        self._lock = threading.Lock()

    def _index_of(self, user_id: str | int) -> int:
        parsed = parse_user_id(user_id)
        for index, user in enumerate(self._users):
            if user.id == parsed:
                return index
        logger.debug("No user matches id %r", user_id)
        raise NotFoundError(USER_NOT_FOUND)

    def list_users(self) -> list[User]:
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get_user(self, user_id: str | int) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If no user has the given ID
        """
        with self._lock:
            return self._users[self._index_of(user_id)].model_copy()

    def create_user(self, payload: UserInput) -> User:
        """Create a user.

        The new ID is one more than the highest ID currently stored, or 1 for
        an empty store. It is recomputed on every call, so deleting the
        highest record lets its ID be issued again.

        Raises:
            BadRequestError: If name or email is missing
        """
        validate_user_input(payload)

        with self._lock:
            next_id = max((user.id for user in self._users), default=0) + 1
            user = User(id=next_id, name=payload.name, email=payload.email, age=payload.age)
            self._users.append(user)

        logger.info("Created user %s", user.id)
        return user.model_copy()

    def update_user(self, user_id: str | int, payload: UserInput) -> User:
        """Replace a user's fields in place.

        Validation runs before the lookup, so an invalid body is rejected
        even when the ID does not exist. An omitted age clears the stored one.

        Raises:
            BadRequestError: If name or email is missing
            NotFoundError: If no user has the given ID
        """
        validate_user_input(payload)

        with self._lock:
            index = self._index_of(user_id)
            current = self._users[index]
            updated = User(id=current.id, name=payload.name, email=payload.email, age=payload.age)
            self._users[index] = updated

        logger.info("Updated user %s", updated.id)
        return updated.model_copy()

    def delete_user(self, user_id: str | int) -> None:
        """Delete a user.

        Raises:
            NotFoundError: If no user has the given ID
        """
        with self._lock:
            removed = self._users.pop(self._index_of(user_id))

        logger.info("Deleted user %s", removed.id)
