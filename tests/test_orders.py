from datetime import datetime, timedelta

from bson import ObjectId

from tests.conftest import run

ADDRESS = {"name": "Asha", "line1": "12 MG Road", "city": "Pune", "pincode": "411001"}
CART = [{"title": "Linen Shirt", "size": "M", "quantity": 1, "price": 499}]


def checkout(client, phone, **overrides):
    body = {
        "userPhone": phone,
        "address": ADDRESS,
        "cartItems": CART,
        "totalAmount": 499,
        "paymentMethod": "cod",
    }
    body.update(overrides)
    return client.post("/api/orders/confirm", json=body)


def test_cod_order_for_existing_user(client, user_phone):
    response = checkout(client, user_phone)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Order confirmed successfully!"
    order = data["order"]
    assert order["status"] == ""
    assert order["trackingLink"] == ""
    assert "paymentId" not in order
    assert "formattedDate" in order
    assert len(data["user"]["orders"]) == 1

    copy = data["user"]["orders"][0]
    assert copy["_id"] == order["_id"]
    assert copy["status"] == order["status"]
    assert copy["trackingLink"] == order["trackingLink"]


def test_cod_order_drops_payment_id(client, user_phone):
    response = checkout(client, user_phone, paymentId="pay_ignored")
    assert response.status_code == 201
    assert "paymentId" not in response.json()["order"]


def test_prepaid_order_requires_payment_id(client, user_phone, db):
    response = checkout(client, user_phone, paymentMethod="razorpay")

    assert response.status_code == 400
    assert "paymentId" in response.json()["error"]
    assert run(db["orders"].count_documents({})) == 0


def test_prepaid_order_keeps_payment_id(client, user_phone):
    response = checkout(
        client, user_phone,
        paymentMethod="razorpay", paymentId="pay_123",
        status="Placed", trackingLink="https://track.example/1",
    )

    assert response.status_code == 201
    order = response.json()["order"]
    assert order["paymentId"] == "pay_123"
    copy = response.json()["user"]["orders"][0]
    assert copy["status"] == "Placed"
    assert copy["trackingLink"] == "https://track.example/1"


def test_missing_fields_are_rejected(client, user_phone):
    response = client.post("/api/orders/confirm", json={"userPhone": user_phone})
    assert response.status_code == 400
    assert "error" in response.json()


def test_order_for_unknown_user_is_kept(client, db):
    response = checkout(client, "8888888888")

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
    orphan = run(db["orders"].find_one({"userPhone": "8888888888"}))
    assert orphan is not None


def test_list_new_orders_newest_first(client, db):
    base = datetime(2026, 1, 1)
    run(db["orders"].insert_many([
        {"userPhone": "1", "status": "", "createdAt": base},
        {"userPhone": "2", "status": "", "createdAt": base + timedelta(days=2)},
        {"userPhone": "3", "status": "", "createdAt": base + timedelta(days=1)},
    ]))

    response = client.get("/api/orders/new")

    assert response.status_code == 200
    assert [o["userPhone"] for o in response.json()] == ["2", "3", "1"]


def test_user_orders_keep_stored_order(client, db):
    first, second = ObjectId(), ObjectId()
    run(db["users"].insert_one({
        "phoneNumber": "7777777777",
        "address": [],
        "wishlist": [],
        # stored oldest-created last on purpose
        "orders": [
            {"_id": second, "status": "b", "createdAt": datetime(2026, 3, 1)},
            {"_id": first, "status": "a", "createdAt": datetime(2026, 1, 1)},
        ],
    }))

    response = client.get("/api/orders/7777777777")

    assert response.status_code == 200
    assert [o["_id"] for o in response.json()["orders"]] == [str(second), str(first)]


def test_user_orders_unknown_user(client):
    response = client.get("/api/orders/0000000000")
    assert response.status_code == 404


def test_status_update_syncs_user_copy(client, user_phone):
    order_id = checkout(client, user_phone).json()["order"]["_id"]

    response = client.patch(
        f"/api/orders/update/{order_id}",
        json={"status": "Shipped", "trackingLink": "https://track.example/42"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Order updated successfully!"
    assert data["order"]["status"] == "Shipped"
    assert data["order"]["trackingLink"] == "https://track.example/42"

    copies = client.get(f"/api/orders/{user_phone}").json()["orders"]
    assert copies[0]["status"] == "Shipped"
    assert copies[0]["trackingLink"] == "https://track.example/42"


def test_status_update_without_link_keeps_existing_link(client, user_phone):
    order_id = checkout(
        client, user_phone, trackingLink="https://track.example/7"
    ).json()["order"]["_id"]

    response = client.patch(f"/api/orders/update/{order_id}", json={"status": "Delivered"})

    assert response.status_code == 200
    assert response.json()["order"]["trackingLink"] == "https://track.example/7"
    copy = client.get(f"/api/orders/{user_phone}").json()["orders"][0]
    assert copy["status"] == "Delivered"
    assert copy["trackingLink"] == "https://track.example/7"


def test_status_update_unknown_order(client):
    response = client.patch(f"/api/orders/update/{ObjectId()}", json={"status": "Shipped"})
    assert response.status_code == 404
    assert response.json() == {"error": "Order not found"}


def test_status_update_malformed_id(client):
    response = client.patch("/api/orders/update/not-an-id", json={"status": "Shipped"})
    assert response.status_code == 404


def test_status_update_orphan_order_is_partial(client, db):
    checkout(client, "8888888888")
    orphan = run(db["orders"].find_one({"userPhone": "8888888888"}))

    response = client.patch(f"/api/orders/update/{orphan['_id']}", json={"status": "Cancelled"})

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
    updated = run(db["orders"].find_one({"_id": orphan["_id"]}))
    assert updated["status"] == "Cancelled"
