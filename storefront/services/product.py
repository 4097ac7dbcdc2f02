# services/product.py
from typing import Any, Dict, Optional, Union
from pydantic import ValidationError
from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import RowMapping

from storefront.models.database_models import Product
from storefront.models.enums import ErrorKind
from storefront.models.schemas.product import Product as ProductSchema, ProductUpdate
from storefront.services.base import BaseService
from storefront.services.result import Result
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

products = Product.__table__

PRICE_NOT_POSITIVE = "Price must be a positive number."
NO_FIELDS = "No fields to update."
NOT_FOUND = "Product not found."
ITEM_NOT_FOUND = "Item not found"


def _to_schema(row: RowMapping) -> ProductSchema:
    return ProductSchema.model_validate(dict(row))


class ProductService(BaseService[Product]):
    """Data access for the products table.

    Every method returns a Result; store errors are logged and turned into
    failures rather than raised.
    """

    async def create(
        self,
        name: str,
        description: Optional[str],
        price: float,
        category_id: Optional[int],
        image_url: Optional[str],
    ) -> Result:
        statement = (
            insert(products)
            .values(
                name=name,
                description=description,
                price=price,
                category_id=category_id,
                image_url=image_url,
            )
            .returning(*products.c)
        )

        return await self._handle_db_operation(
            lambda: Result.ok(product=_to_schema(self.db.execute(statement).mappings().one())),
            "creating product",
        )

    async def list(self) -> Result:
        statement = select(products).order_by(products.c.created_at.desc(), products.c.id.desc())

        return await self._handle_db_operation(
            lambda: Result.ok(
                products=[_to_schema(row) for row in self.db.execute(statement).mappings().all()]
            ),
            "fetching products",
        )

    async def get_one(self, product_id: int) -> Result:
        statement = select(products).where(products.c.id == product_id)

        def operation() -> Result:
            row = self.db.execute(statement).mappings().first()
            if row is None:
                logger.info("Item {} not found", product_id)
                return Result.fail(ErrorKind.NOT_FOUND, ITEM_NOT_FOUND)
            return Result.ok(item=_to_schema(row))

        return await self._handle_db_operation(operation, "fetching product")

    async def update(self, product_id: int, data: Union[ProductUpdate, Dict[str, Any]]) -> Result:
        """Apply the supplied fields only; updated_at is refreshed by the column's onupdate."""
        if not isinstance(data, ProductUpdate):
            try:
                data = ProductUpdate.model_validate(data)
            except ValidationError as e:
                return Result.fail(ErrorKind.VALIDATION, e.errors()[0]["msg"])

        fields = data.to_patch()
        if "price" in fields and fields["price"] <= 0:
            return Result.fail(ErrorKind.VALIDATION, PRICE_NOT_POSITIVE)
        if not fields:
            return Result.fail(ErrorKind.VALIDATION, NO_FIELDS)

        statement = (
            update(products)
            .where(products.c.id == product_id)
            .values(**fields)
            .returning(*products.c)
        )

        def operation() -> Result:
            row = self.db.execute(statement).mappings().first()
            if row is None:
                return Result.fail(ErrorKind.NOT_FOUND, NOT_FOUND)
            return Result.ok(product=_to_schema(row))

        return await self._handle_db_operation(operation, "updating product")

    async def delete(self, product_id: int) -> Result:
        statement = delete(products).where(products.c.id == product_id)

        def operation() -> Result:
            if self.db.execute(statement).rowcount == 0:
                return Result.fail(ErrorKind.NOT_FOUND, NOT_FOUND)
            return Result.ok()

        return await self._handle_db_operation(operation, "deleting product")
