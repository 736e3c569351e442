from fastapi import APIRouter, Depends, status

from app.api.deps import get_review_service
from app.schemas.review import ReviewCreate
from app.services.review_service import ReviewService
from utils.serialization import serialize_document, serialize_documents

router = APIRouter(prefix="/reviews")


@router.get("")
async def list_reviews(reviews: ReviewService = Depends(get_review_service)):
    return serialize_documents(await reviews.list())


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_review(
    payload: ReviewCreate,
    reviews: ReviewService = Depends(get_review_service),
):
    return serialize_document(await reviews.create(payload))
