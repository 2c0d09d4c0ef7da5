# storefront/repos/order_repo.py
from typing import List

from storefront.domain.errors import NotFoundError
from storefront.domain.models import Order, utcnow
from storefront.repos.base import InMemoryRepo


class OrderRepo(InMemoryRepo[Order]):
    entity_name = "Order"

    def get_by_user_id(self, user_id: int) -> List[Order]:
        return self._filter(lambda o: o.user_id == user_id)

    def update(self, order: Order) -> Order:
        return super().update(order.model_copy(update={"updated_at": utcnow()}))

    def update_status(self, order_id: int, status: str) -> Order:
        with self._lock:
            order = self.get_by_id(order_id)
            if not order:
                raise NotFoundError(self.entity_name, order_id)
            return self.update(order.model_copy(update={"status": status}))
