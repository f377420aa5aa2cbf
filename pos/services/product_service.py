from typing import Optional, List
import logging

from pos.models.category import Category
from pos.models.product import Product
from pos.schemas.product import ProductResponse, ProductSave
from pos.services.errors import NotFoundError
from pos.services.record_store import RecordStore
from pos.services.stock_ledger import StockLedger

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for Product CRUD operations.

    This service handles:
    - Creating and replacing products
    - Reading products (with caching)
    - Manual stock counts
    - Deleting products
    - Cache invalidation
    """

    CACHE_PREFIX = "product"

    def __init__(self, products: RecordStore[Product], categories: RecordStore[Category], ledger: StockLedger):
        self.products = products
        self.categories = categories
        self.ledger = ledger
        self.cache = ledger.cache

    def get_all(self) -> List[Product]:
        """Get all products."""
        return self.products.find(order_by=Product.id)

    def get_all_with_categories(self) -> List[dict]:
        """
        Get all products joined with their category name.

        Products without a known category get "N/A".
        """
        category_names = {c.id: c.name for c in self.categories.find()}

        return [
            {
                **ProductResponse.model_validate(product).model_dump(),
                "category_name": category_names.get(product.category, "N/A"),
            }
            for product in self.get_all()
        ]

    def get_by_id(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        product = self.products.find_one(id=product_id)

        if not product:
            raise NotFoundError("Product not found")

        return product

    def get_by_id_cached(self, product_id: int) -> dict:
        """
        Get product details from cache or database.
        Returns a dictionary (suitable for API response).

        Args:
            product_id: Product ID to look up

        Raises:
            NotFoundError: If the product doesn't exist
        """
        # Try cache first
        cached = self.cache.get(self.CACHE_PREFIX, str(product_id))
        if cached:
            return cached

        product_dict = self._to_dict(self.get_by_id(product_id))
        self.cache.set(self.CACHE_PREFIX, str(product_id), product_dict)

        return product_dict

    def get_by_sku(self, sku_code: str) -> Optional[Product]:
        """
        Find a product by SKU code.

        Products created without a SKU are looked up by their ID instead.
        """
        product = self.products.find_one(sku=sku_code)

        if product is None and sku_code.isdigit():
            product = self.products.find_one(id=int(sku_code))

        return product

    def save(self, product_data: ProductSave) -> Product:
        """
        Create a product, or replace an existing one when an ID is given.

        Raises:
            NotFoundError: If the ID to replace doesn't exist
        """
        values = product_data.model_dump(exclude={"id"})

        if product_data.id is None:
            product = self.products.insert(Product(**values))
            logger.info(f"Product #{product.id} '{product.name}' created")
            return product

        replaced = self.products.update({"id": product_data.id}, values, replace=True)
        if not replaced:
            raise NotFoundError("Product not found")

        self._invalidate_cache(product_data.id)
        logger.info(f"Product #{product_data.id} '{product_data.name}' updated")

        return self.get_by_id(product_data.id)

    def update_stock(self, product_id: int, quantity: int, reason: str = None) -> int:
        """
        Set a product's stock after a manual count.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        logger.info(f"Updating stock for product {product_id}: {quantity} (Reason: {reason or 'N/A'})")

        if not self.ledger.set_quantity(product_id, quantity):
            raise NotFoundError("Product not found")

        return quantity

    def delete(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        if not self.products.remove({"id": product_id}):
            raise NotFoundError("Product not found")

        self._invalidate_cache(product_id)
        logger.info(f"Product #{product_id} deleted")

    @staticmethod
    def _to_dict(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": product.price,
            "category": product.category,
            "quantity": product.quantity,
            "stock_tracked": product.stock_tracked,
            "image": product.image,
            "sku": product.sku,
            "barcode": product.barcode,
            "created_at": str(product.created_at) if product.created_at else None,
            "updated_at": str(product.updated_at) if product.updated_at else None,
        }

    def _invalidate_cache(self, product_id: int) -> None:
        """Invalidate cache for a product."""
        self.cache.delete(self.CACHE_PREFIX, str(product_id))
