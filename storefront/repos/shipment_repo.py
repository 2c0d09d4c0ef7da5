# storefront/repos/shipment_repo.py
from typing import Optional

from storefront.domain.models import Shipment
from storefront.repos.base import InMemoryRepo


class ShipmentRepo(InMemoryRepo[Shipment]):
    entity_name = "Shipment"

    def get_by_order_id(self, order_id: int) -> Optional[Shipment]:
        return self._find(lambda s: s.order_id == order_id)
