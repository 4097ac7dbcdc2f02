# routes/product.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.database.database import get_db
from storefront.models.schemas.product import ProductCreate, ProductUpdate
from storefront.routes.responses import envelope_response
from storefront.services.product import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products(db: Session = Depends(get_db)):
    """List all products, newest first."""
    result = await ProductService(db).list()
    return envelope_response(result)


@router.get("/{product_id}")
async def get_product(product_id: int, db: Session = Depends(get_db)):
    """Get a specific product by ID."""
    result = await ProductService(db).get_one(product_id)
    return envelope_response(result)


@router.post("")
async def create_product(data: ProductCreate, db: Session = Depends(get_db)):
    """Create a new product."""
    result = await ProductService(db).create(
        data.name, data.description, data.price, data.category_id, data.image_url
    )
    return envelope_response(result, status.HTTP_201_CREATED)


@router.patch("/{product_id}")
@router.put("/{product_id}")
async def update_product(product_id: int, data: ProductUpdate, db: Session = Depends(get_db)):
    """Update the supplied fields of an existing product."""
    result = await ProductService(db).update(product_id, data)
    return envelope_response(result)


@router.delete("/{product_id}")
async def delete_product(product_id: int, db: Session = Depends(get_db)):
    """Delete a product."""
    result = await ProductService(db).delete(product_id)
    return envelope_response(result)
