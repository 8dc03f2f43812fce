"""
Authentication Service
"""
import logging
import time
from typing import List, Optional

from pydantic import ValidationError

from ims_frontend.config.permissions import permissions_for_role, role_has_permission
from ims_frontend.schemas.auth import Session, User, UserRole
from ims_frontend.services.inventory_client import ApiError, InventoryClient, NetworkError
from ims_frontend.services.notification_service import NotificationService
from ims_frontend.services.session_store import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """
    Login/logout against the backend and role-based permission checks
    for the current session.
    """

    def __init__(
        self,
        session_store: SessionStore,
        client: InventoryClient,
        notifications: NotificationService,
    ):
        self._session_store = session_store
        self._client = client
        self._notifications = notifications

    @property
    def current_user(self) -> Optional[User]:
        return self._session_store.user

    @property
    def is_authenticated(self) -> bool:
        return self._session_store.user is not None

    def restore(self) -> bool:
        """
        Restore a persisted session on startup

        Returns:
            True if a valid session was restored
        """
        return self._session_store.restore() is not None

    async def login(self, username: str, password: str) -> bool:
        """
        Authenticate a user with username and password

        Args:
            username: Username
            password: Plain text password

        Returns:
            True if the session was created, False otherwise

        Raises:
            NetworkError: the backend could not be reached
        """
        try:
            data = await self._client.login(username, password)
        except NetworkError:
            self._notifications.error("Login failed. Please try again.")
            raise
        except ApiError as e:
            logger.warning(f"Login failed for {username}: {e}")
            if e.status_code == 401:
                self._notifications.error("Invalid username or password")
            elif e.message:
                self._notifications.error(e.message)
            else:
                self._notifications.error("Login failed. Please try again.")
            return False

        if not data.token:
            return False

        try:
            user = User(
                id=data.id if data.id is not None else int(time.time() * 1000),
                username=data.username,
                role=data.role,
                full_name=data.full_name,
            )
        except ValidationError as e:
            logger.error(f"Login response for {username} is missing user fields: {e}")
            self._notifications.error("Login failed. Please try again.")
            return False

        self._session_store.save(Session(token=data.token, user=user))
        logger.info(f"User {user.username} logged in ({user.role.value})")
        self._notifications.success(f"Welcome back, {user.display_name}!")
        return True

    def logout(self) -> None:
        """Clear the session. The backend keeps no session state, so it is not called."""
        user = self.current_user
        self._session_store.clear()
        if user:
            logger.info(f"User {user.username} logged out")
        self._notifications.success("Logged out successfully")

    def has_permission(self, permission: str) -> bool:
        user = self.current_user
        if user is None:
            return False
        return role_has_permission(user.role, permission)

    def permissions(self) -> List[str]:
        user = self.current_user
        if user is None:
            return []
        return sorted(permissions_for_role(user.role))

    def is_admin(self) -> bool:
        user = self.current_user
        return user is not None and user.role == UserRole.ADMIN

    def is_user(self) -> bool:
        user = self.current_user
        return user is not None and user.role == UserRole.USER
