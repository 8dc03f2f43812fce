"""
Session Store

Holds the active session (token + user) in memory and mirrors it to
persistent storage under the "token" and "user" keys.
"""
import logging
from typing import Optional

from pydantic import ValidationError

from ims_frontend.schemas.auth import Session, User
from ims_frontend.services.storage import FileStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class SessionStore:

    def __init__(self, storage: FileStorage):
        self._storage = storage
        self._session: Optional[Session] = None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def token(self) -> Optional[str]:
        return self._session.token if self._session else None

    @property
    def user(self) -> Optional[User]:
        return self._session.user if self._session else None

    def restore(self) -> Optional[Session]:
        """
        Load the persisted session.

        Unreadable or partial data clears both keys and leaves the store
        signed out. Never raises.
        """
        token = self._storage.get_item(TOKEN_KEY)
        user_data = self._storage.get_item(USER_KEY)

        if not token or not user_data:
            self._session = None
            return None

        try:
            user = User.model_validate_json(user_data)
        except ValidationError as e:
            logger.error(f"Error parsing stored user data: {e}")
            self.clear()
            return None

        self._session = Session(token=token, user=user)
        logger.info(f"Restored session for {user.username} ({user.role.value})")
        return self._session

    def save(self, session: Session) -> None:
        self._storage.update({
            TOKEN_KEY: session.token,
            USER_KEY: session.user.model_dump_json(by_alias=True),
        })
        self._session = session

    def clear(self) -> None:
        self._session = None
        self._storage.remove_item(TOKEN_KEY, USER_KEY)
