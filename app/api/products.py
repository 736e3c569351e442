from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_product_service
from app.schemas.product import ProductCreate
from app.services.product_service import ProductService
from utils.serialization import serialize_document, serialize_documents

router = APIRouter(prefix="/shirts")


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_product(
    payload: ProductCreate,
    products: ProductService = Depends(get_product_service),
):
    product = await products.create(payload)
    return {"message": "✅ Product added successfully!", "addproduct": serialize_document(product)}


@router.get("")
async def list_products(
    category: Optional[str] = Query(None, description="Second-level category"),
    products: ProductService = Depends(get_product_service),
):
    return serialize_documents(await products.list(category))


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    products: ProductService = Depends(get_product_service),
):
    return serialize_document(await products.get(product_id))
