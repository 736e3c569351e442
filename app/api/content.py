"""
app/api/content.py

Purpose: Read-only storefront content

- Carousel (404 when empty)
- Privacy policy, terms, return policy, shipping info
- Discount codes
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_content_service
from app.services.content_service import ContentService
from utils.serialization import serialize_documents

router = APIRouter()


@router.get("/carousel")
async def carousel(content: ContentService = Depends(get_content_service)):
    return serialize_documents(await content.carousel())


@router.get("/privacy-policy")
async def privacy_policy(content: ContentService = Depends(get_content_service)):
    return serialize_documents(await content.privacy_policy())


@router.get("/t&c")
async def terms_and_conditions(content: ContentService = Depends(get_content_service)):
    return serialize_documents(await content.terms())


@router.get("/return-policy")
async def return_policy(content: ContentService = Depends(get_content_service)):
    return serialize_documents(await content.return_policy())


@router.get("/shipping-info")
async def shipping_info(content: ContentService = Depends(get_content_service)):
    return serialize_documents(await content.shipping_info())


@router.get("/discounts")
async def discounts(content: ContentService = Depends(get_content_service)):
    return serialize_documents(await content.discounts())
