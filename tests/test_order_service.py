import pytest
from mongomock_motor import AsyncMongoMockClient

from app.core.exceptions import ResourceNotFoundError
from app.schemas.order import OrderCreate, OrderStatusUpdate
from app.services.order_service import OrderService
from app.services.user_service import UserService


@pytest.fixture
def database():
    return AsyncMongoMockClient()["orders_test"]


@pytest.fixture
def service(database):
    return OrderService(database)


def make_order(phone="9999999999", **overrides):
    data = {
        "userPhone": phone,
        "address": {"city": "Pune"},
        "cartItems": [{"title": "Kurta", "quantity": 2}],
        "totalAmount": 998,
        "paymentMethod": "cod",
    }
    data.update(overrides)
    return OrderCreate.model_validate(data)


@pytest.mark.asyncio
async def test_create_mirrors_order_into_user(service, database):
    await UserService(database).get_or_create("9999999999")

    order, user = await service.create_order(make_order(status="Placed"))

    stored = await database["orders"].find_one({"_id": order["_id"]})
    copy = user["orders"][-1]
    assert copy["_id"] == stored["_id"]
    assert copy["status"] == stored["status"] == "Placed"
    assert copy["trackingLink"] == stored["trackingLink"] == ""


@pytest.mark.asyncio
async def test_create_without_user_leaves_order(service, database):
    with pytest.raises(ResourceNotFoundError):
        await service.create_order(make_order(phone="1231231234"))

    assert await database["orders"].count_documents({"userPhone": "1231231234"}) == 1


@pytest.mark.asyncio
async def test_update_when_user_copy_missing(service, database):
    await UserService(database).get_or_create("9999999999")
    order, _ = await service.create_order(make_order())
    # copy dropped out of band
    await database["users"].update_one({"phoneNumber": "9999999999"}, {"$set": {"orders": []}})

    with pytest.raises(ResourceNotFoundError, match="User not found"):
        await service.update_order_status(
            str(order["_id"]), OrderStatusUpdate(status="Shipped", tracking_link="https://t.example/1")
        )

    stored = await database["orders"].find_one({"_id": order["_id"]})
    assert stored["status"] == "Shipped"
    assert stored["trackingLink"] == "https://t.example/1"


@pytest.mark.asyncio
async def test_update_touches_only_matching_copy(service, database):
    await UserService(database).get_or_create("9999999999")
    first, _ = await service.create_order(make_order())
    second, _ = await service.create_order(make_order())

    _, user = await service.update_order_status(str(second["_id"]), OrderStatusUpdate(status="Shipped"))

    by_id = {copy["_id"]: copy for copy in user["orders"]}
    assert by_id[second["_id"]]["status"] == "Shipped"
    assert by_id[first["_id"]]["status"] == ""


@pytest.mark.asyncio
async def test_update_earlier_order_leaves_later_copies(service, database):
    await UserService(database).get_or_create("9999999999")
    placed = [(await service.create_order(make_order()))[0] for _ in range(3)]

    await service.update_order_status(
        str(placed[0]["_id"]), OrderStatusUpdate(status="Delivered", tracking_link="https://t.example/9")
    )

    stored = await database["users"].find_one({"phoneNumber": "9999999999"})
    by_id = {copy["_id"]: copy for copy in stored["orders"]}
    assert len(stored["orders"]) == 3
    assert by_id[placed[0]["_id"]]["status"] == "Delivered"
    assert by_id[placed[0]["_id"]]["trackingLink"] == "https://t.example/9"
    for later in placed[1:]:
        assert by_id[later["_id"]]["status"] == ""
        assert by_id[later["_id"]]["trackingLink"] == ""


def test_cod_drops_payment_id():
    order = make_order(paymentId="pay_1")
    assert order.is_cash_on_delivery
    assert "paymentId" not in order.to_document()


def test_cod_match_is_exact():
    with pytest.raises(ValueError, match="paymentId"):
        make_order(paymentMethod="COD")

    order = make_order(paymentMethod="COD", paymentId="pay_1")
    assert not order.is_cash_on_delivery
    assert order.to_document()["paymentId"] == "pay_1"


def test_non_cod_without_payment_id_fails():
    with pytest.raises(ValueError, match="paymentId"):
        make_order(paymentMethod="upi")
