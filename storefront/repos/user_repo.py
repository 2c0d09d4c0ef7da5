# storefront/repos/user_repo.py
from typing import Optional

from storefront.domain.models import User
from storefront.repos.base import InMemoryRepo


class UserRepo(InMemoryRepo[User]):
    entity_name = "User"

    def get_by_credentials(self, username: str, password: str) -> Optional[User]:
        return self._find(lambda u: u.username == username and u.password == password)
