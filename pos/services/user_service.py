from datetime import datetime, timezone
from typing import List, Optional
import logging

from pos.models.user import User
from pos.schemas.user import UserSave
from pos.services.errors import AuthenticationError, NotFoundError, PermissionDeniedError
from pos.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def _stamp(state: str) -> str:
    return f"{state}_{datetime.now(timezone.utc).isoformat()}"


class UserService:
    """Service class for till operators and their logins."""

    def __init__(self, users: RecordStore[User]):
        self.users = users

    def get_all(self) -> List[User]:
        return self.users.find(order_by=User.id)

    def get_by_id(self, user_id: int) -> User:
        user = self.users.find_one(id=user_id)

        if not user:
            raise NotFoundError("User not found")

        return user

    def login(self, username: str, password: str) -> User:
        """
        Check credentials and mark the user as logged in.

        Raises:
            AuthenticationError: If the username or password is wrong
        """
        user = self.users.find_one(username=username)

        if user is None or not user.check_password(password):
            logger.warning(f"Failed login attempt for username: {username}")
            raise AuthenticationError("Invalid username or password")

        self.users.update({"id": user.id}, {"status": _stamp("Logged In")})
        logger.info(f"User logged in: {user.fullname or user.username}")

        return self.get_by_id(user.id)

    def logout(self, user_id: int) -> None:
        if not self.users.update({"id": user_id}, {"status": _stamp("Logged Out")}):
            raise NotFoundError("User not found")

        logger.info(f"User {user_id} logged out")

    def save(self, user_data: UserSave) -> User:
        """
        Create a user, or update one when an ID is given.

        Raises:
            NotFoundError: If the ID to update doesn't exist
            DuplicateKeyError: If the username is taken
        """
        user = User(
            username=user_data.username,
            fullname=user_data.fullname,
            perm_products=user_data.perm_products,
            perm_categories=user_data.perm_categories,
            perm_transactions=user_data.perm_transactions,
            perm_users=user_data.perm_users,
            perm_settings=user_data.perm_settings,
            status="",
        )
        user.set_password(user_data.password)

        if user_data.id is None:
            user = self.users.insert(user)
            logger.info(f"User created: {user.username}")
            return user

        patch = {
            column: getattr(user, column)
            for column in (
                "username", "password_hash", "fullname",
                "perm_products", "perm_categories", "perm_transactions",
                "perm_users", "perm_settings",
            )
        }
        if not self.users.update({"id": user_data.id}, patch):
            raise NotFoundError("User not found")

        logger.info(f"User updated: {user_data.username}")
        return self.get_by_id(user_data.id)

    def delete(self, user_id: int) -> None:
        """
        Delete a user. The built-in administrator can't be deleted.
        """
        user = self.get_by_id(user_id)

        if user.is_admin:
            raise PermissionDeniedError("Cannot delete admin user")

        self.users.remove({"id": user_id})

    def ensure_admin(self, username: str, password: str) -> Optional[User]:
        """
        Create the default administrator if it doesn't exist.

        Returns:
            The new admin user, or None if one already existed
        """
        if self.users.find_one(is_admin=True) is not None:
            return None

        admin = User(
            username=username,
            fullname="Administrator",
            is_admin=True,
            perm_products=True,
            perm_categories=True,
            perm_transactions=True,
            perm_users=True,
            perm_settings=True,
            status="",
        )
        admin.set_password(password)
        admin = self.users.insert(admin)
        logger.info(f"Default admin user created with ID {admin.id}")

        return admin
