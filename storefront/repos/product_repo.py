# storefront/repos/product_repo.py
from storefront.domain.errors import NotFoundError
from storefront.domain.models import Product
from storefront.repos.base import InMemoryRepo


class ProductRepo(InMemoryRepo[Product]):
    entity_name = "Product"

    def add(self, product: Product) -> Product:
        return self.create(product)

    def update_description(self, product_id: int, description: str) -> Product:
        with self._lock:
            product = self.get_by_id(product_id)
            if not product:
                raise NotFoundError(self.entity_name, product_id)
            return self.update(product.model_copy(update={"description": description}))

    def adjust_stock(self, product_id: int, delta: int) -> Product:
        """
        Shift stock by delta, never below zero.
        """
        with self._lock:
            product = self.get_by_id(product_id)
            if not product:
                raise NotFoundError(self.entity_name, product_id)
            new_stock = max(0, product.stock + delta)
            return self.update(product.model_copy(update={"stock": new_stock}))
