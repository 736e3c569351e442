from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_user_service
from app.schemas.user import AddressUpdate, UserLookup
from app.services.user_service import UserService
from utils.serialization import serialize_document, to_json

router = APIRouter(prefix="/users")


@router.post("")
async def register_user(
    payload: UserLookup,
    users: UserService = Depends(get_user_service),
):
    """Creates the user, or returns the existing one (200)."""
    user, created = await users.get_or_create(payload.phone_number)
    if created:
        return JSONResponse(
            status_code=201,
            content={"message": "User created successfully", "user": serialize_document(user)},
        )
    return {"message": "User already exists", "user": serialize_document(user)}


@router.post("/updateAddress")
async def update_address(
    payload: AddressUpdate,
    users: UserService = Depends(get_user_service),
):
    user = await users.update_address(payload.phone_number, payload.address)
    return {"message": "Address updated successfully", "user": serialize_document(user)}


@router.post("/getAddress")
async def get_address(
    payload: UserLookup,
    users: UserService = Depends(get_user_service),
):
    return {"address": to_json(await users.get_address(payload.phone_number))}
