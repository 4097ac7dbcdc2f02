# routes/admin.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.database.database import get_db
from storefront.models.schemas.product import ProductCreate, ProductUpdate
from storefront.routes.responses import envelope_response
from storefront.services.product import ProductService

# No authorization is applied to these endpoints.
router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/products")
async def admin_create_product(data: ProductCreate, db: Session = Depends(get_db)):
    result = await ProductService(db).create(
        data.name, data.description, data.price, data.category_id, data.image_url
    )
    return envelope_response(result, status.HTTP_201_CREATED)


@router.patch("/products/{product_id}")
async def admin_update_product(product_id: int, data: ProductUpdate, db: Session = Depends(get_db)):
    result = await ProductService(db).update(product_id, data)
    return envelope_response(result)


@router.delete("/products/{product_id}")
async def admin_delete_product(product_id: int, db: Session = Depends(get_db)):
    result = await ProductService(db).delete(product_id)
    return envelope_response(result)
