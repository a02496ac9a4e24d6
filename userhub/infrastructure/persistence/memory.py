import threading
from dataclasses import replace
from typing import Dict, List, Optional

from ...domain.errors import DuplicateEmail, NotFound
from ...domain.models import User, utcnow
from ...domain.ports.persistence import UserRepository


def _email_key(email: str) -> str:
    return email.strip().casefold()


class InMemoryUserStore(UserRepository):
    """Thread-safe in-memory implementation of the user repository.

    Records live in a dict keyed by id (insertion ordered) with a secondary
    index on the case-folded email. Every operation holds ``_lock`` so the
    uniqueness check and the write it guards happen atomically.
    """

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._email_index: Dict[str, int] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    # Queries ----------------------------------------------------------------
    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user else None

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user_id = self._email_index.get(_email_key(email))
            if user_id is None:
                return None
            return replace(self._users[user_id])

    def email_exists(self, email: str) -> bool:
        with self._lock:
            return _email_key(email) in self._email_index

    def list_all(self) -> List[User]:
        with self._lock:
            return [replace(user) for user in self._users.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    # Mutations --------------------------------------------------------------
    def create(self, name: str, email: str, password_hash: str) -> User:
        key = _email_key(email)
        with self._lock:
            if key in self._email_index:
                raise DuplicateEmail()
            user = User(
                id=self._next_id,
                name=name,
                email=email,
                password_hash=password_hash,
                created_at=utcnow(),
            )
            self._next_id += 1
            self._users[user.id] = user
            self._email_index[key] = user.id
            return replace(user)

    def update(
        self,
        user_id: int,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> User:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise NotFound()
            if email is not None:
                new_key = _email_key(email)
                owner = self._email_index.get(new_key)
                if owner is not None and owner != user_id:
                    raise DuplicateEmail()
                del self._email_index[_email_key(user.email)]
                self._email_index[new_key] = user_id
                user.email = email
            if name is not None:
                user.name = name
            if password_hash is not None:
                user.password_hash = password_hash
            return replace(user)

    def delete(self, user_id: int) -> bool:
        with self._lock:
            user = self._users.pop(user_id, None)
            if user is None:
                return False
            self._email_index.pop(_email_key(user.email), None)
            return True
