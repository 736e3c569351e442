"""
app/api/deps.py

Purpose: FastAPI dependency providers

Services are built per request from the shared database handle. The mail
relay client is built once in the lifespan and kept on `app.state`. Tests
swap either one with `app.dependency_overrides`.
"""

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db.mongo import get_database
from app.services.content_service import ContentService
from app.services.mail_service import MailService
from app.services.order_service import OrderService
from app.services.product_service import ProductService
from app.services.review_service import ReviewService
from app.services.user_service import UserService


def get_order_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> OrderService:
    return OrderService(db)


def get_user_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> UserService:
    return UserService(db)


def get_product_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> ProductService:
    return ProductService(db)


def get_review_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> ReviewService:
    return ReviewService(db)


def get_content_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> ContentService:
    return ContentService(db)


def get_mail_service(request: Request) -> MailService:
    """The relay client built once at startup."""
    return request.app.state.mail_service
