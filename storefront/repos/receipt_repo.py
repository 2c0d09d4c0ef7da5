# storefront/repos/receipt_repo.py
from typing import Optional

from storefront.domain.models import Receipt
from storefront.repos.base import InMemoryRepo


class ReceiptRepo(InMemoryRepo[Receipt]):
    entity_name = "Receipt"

    def get_by_order_id(self, order_id: int) -> Optional[Receipt]:
        return self._find(lambda r: r.order_id == order_id)
