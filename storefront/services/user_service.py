# storefront/services/user_service.py
from typing import Optional

from storefront.data.context import StoreContext
from storefront.domain.models import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class AuthFacade:
    """Plaintext credential check against the demo accounts. Not a security boundary."""

    def __init__(self, context: StoreContext):
        self.repo = context.users

    def login(self, username: str, password: str) -> Optional[User]:
        user = self.repo.get_by_credentials(username, password)
        if user:
            logger.info(f"User {user.id} ({user.role}) logged in")
        else:
            logger.info(f"Failed login for '{username}'")
        return user
