"""Tests for the FastAPI surface."""

from decimal import Decimal


def money(value) -> Decimal:
    return Decimal(str(value))


class TestHealthAndAuth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_login_hides_password(self, client):
        response = client.post("/auth/login", json={"username": "employee1", "password": "pass456"})
        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "employee"
        assert "password" not in data

    def test_login_rejected(self, client):
        response = client.post("/auth/login", json={"username": "employee1", "password": "nope"})
        assert response.status_code == 401

    def test_get_user(self, client):
        assert client.get("/users/1").json()["name"] == "Alice Customer"
        assert client.get("/users/9").status_code == 404


class TestProducts:
    def test_list(self, client):
        response = client.get("/products")
        assert response.status_code == 200
        assert len(response.json()) == 5

    def test_get_missing(self, client):
        assert client.get("/products/99").status_code == 404

    def test_replace(self, client):
        body = {"name": "UNO R4", "price": "27.50", "stock": 3}
        response = client.put("/products/2", json=body)
        assert response.status_code == 200

        data = client.get("/products/2").json()
        assert data["name"] == "UNO R4"
        assert data["description"] == ""
        assert money(data["price"]) == Decimal("27.50")

    def test_replace_missing_is_404(self, client):
        response = client.put("/products/99", json={"name": "Ghost", "price": "1.00"})
        assert response.status_code == 404
        assert response.json()["error_type"] == "NotFoundError"

    def test_patch_description(self, client):
        response = client.patch("/products/3/description", json={"description": "Cat III rated"})
        assert response.status_code == 200
        assert response.json()["description"] == "Cat III rated"

    def test_patch_description_missing(self, client):
        response = client.patch("/products/99/description", json={"description": "x"})
        assert response.status_code == 404

    def test_add_and_delete(self, client):
        response = client.post("/products", json={"name": "Heat Shrink Kit", "price": "12.00", "stock": 40})
        assert response.status_code == 201
        product_id = response.json()["id"]
        assert product_id == 6

        assert client.delete(f"/products/{product_id}").status_code == 204
        assert client.get(f"/products/{product_id}").status_code == 404
        assert client.delete(f"/products/{product_id}").status_code == 404

    def test_negative_price_rejected(self, client):
        response = client.post("/products", json={"name": "Bad", "price": "-1"})
        assert response.status_code == 422


class TestOrders:
    def purchase_body(self, **overrides):
        body = {
            "items": [
                {"product_id": 2, "name": "Arduino-Compatible UNO Board", "price": "39.95", "quantity": 2}
            ],
            "payment_method": "Credit Card",
            "shipping_address": "X",
        }
        body.update(overrides)
        return body

    def test_payment_methods(self, client):
        assert client.get("/payment-methods").json() == ["Credit Card", "PayPal", "Bank Transfer"]

    def test_create_order(self, client):
        response = client.post("/orders", json=self.purchase_body())
        assert response.status_code == 201
        order = response.json()
        assert order["id"] == 3
        assert order["status"] == "Processing"
        assert money(order["total"]) == Decimal("91.29")

        receipt = client.get(f"/receipts/{order['id']}").json()
        assert money(receipt["amount"]) == Decimal("91.29")

        shipment = client.get(f"/orders/{order['id']}/shipment").json()
        assert shipment["status"] == "Pending"

        assert client.get("/products/2").json()["stock"] == 23

    def test_unsupported_method_is_402(self, client):
        response = client.post("/orders", json=self.purchase_body(payment_method="Bitcoin"))
        assert response.status_code == 402
        assert response.json()["error_type"] == "PaymentError"
        assert len(client.get("/orders", params={"user_id": 1}).json()) == 2

    def test_unknown_product_is_404(self, client):
        items = [{"product_id": 999, "name": "Ghost", "price": "0.01", "quantity": 1}]
        response = client.post("/orders", json=self.purchase_body(items=items))
        assert response.status_code == 404
        assert response.json()["error_type"] == "NotFoundError"
        assert len(client.get("/orders", params={"user_id": 1}).json()) == 2

    def test_client_price_is_ignored(self, client):
        items = [{"product_id": 4, "name": "Raspberry Pi", "price": "0.00", "quantity": 3}]
        response = client.post("/orders", json=self.purchase_body(items=items))
        assert response.status_code == 201
        assert money(response.json()["total"]) == Decimal("422.96")
        assert client.get("/products/4").json()["stock"] == 7

    def test_missing_address_is_422(self, client):
        response = client.post("/orders", json=self.purchase_body(shipping_address=""))
        assert response.status_code == 422
        assert response.json()["error_type"] == "ValidationError"

    def test_orders_for_user(self, client):
        client.post("/orders", json=self.purchase_body(user_id=2))
        assert [o["id"] for o in client.get("/orders", params={"user_id": 2}).json()] == [3]
        assert len(client.get("/orders", params={"user_id": 1}).json()) == 2

    def test_get_order_missing(self, client):
        assert client.get("/orders/99").status_code == 404
        assert client.get("/receipts/99").status_code == 404
        assert client.get("/orders/99/shipment").status_code == 404

    def test_update_status(self, client):
        response = client.patch("/orders/2/status", json={"status": "Delivered"})
        assert response.status_code == 200
        assert client.get("/orders/2").json()["status"] == "Delivered"
        assert client.patch("/orders/99/status", json={"status": "Delivered"}).status_code == 404


class TestCarts:
    def test_cart_flow(self, client):
        client.post("/carts/1/items", json={"product_id": 2, "quantity": 1})
        response = client.post("/carts/1/items", json={"product_id": 2, "quantity": 1})
        cart = response.json()
        assert len(cart["items"]) == 1
        assert cart["items"][0]["quantity"] == 2
        assert money(cart["total"]) == Decimal("91.29")

        response = client.post("/carts/1/checkout", json={"payment_method": "PayPal", "shipping_address": "X"})
        assert response.status_code == 201
        assert response.json()["payment_method"] == "PayPal"

        cart = client.get("/carts/1").json()
        assert cart["items"] == []
        assert money(cart["total"]) == Decimal("0")

    def test_update_quantity_to_zero_removes_line(self, client):
        client.post("/carts/1/items", json={"product_id": 1, "quantity": 1})
        client.post("/carts/1/items", json={"product_id": 5, "quantity": 2})

        cart = client.put("/carts/1/items/1", json={"quantity": 0}).json()
        assert [i["product_id"] for i in cart["items"]] == [5]

        cart = client.put("/carts/1/items/5", json={"quantity": 4}).json()
        assert cart["items"][0]["quantity"] == 4

    def test_remove_and_clear(self, client):
        client.post("/carts/1/items", json={"product_id": 1, "quantity": 1})
        client.post("/carts/1/items", json={"product_id": 3, "quantity": 1})

        cart = client.delete("/carts/1/items/1").json()
        assert [i["product_id"] for i in cart["items"]] == [3]
        assert client.delete("/carts/1").json()["items"] == []

    def test_add_unknown_product(self, client):
        response = client.post("/carts/1/items", json={"product_id": 99, "quantity": 1})
        assert response.status_code == 404
        assert response.json()["error_type"] == "NotFoundError"

    def test_add_zero_quantity_rejected(self, client):
        response = client.post("/carts/1/items", json={"product_id": 1, "quantity": 0})
        assert response.status_code == 422

    def test_checkout_empty_cart(self, client):
        response = client.post("/carts/1/checkout", json={"payment_method": "PayPal", "shipping_address": "X"})
        assert response.status_code == 422
        assert response.json()["error_type"] == "ValidationError"

    def test_carts_are_per_user(self, client):
        client.post("/carts/1/items", json={"product_id": 1, "quantity": 1})
        assert client.get("/carts/2").json()["items"] == []


class TestDashboard:
    def test_dashboard(self, client):
        data = client.get("/dashboard").json()
        assert data["statistics"]["orders_count"] == 2
        assert money(data["statistics"]["total_revenue"]) == Decimal("290.47")
        assert len(data["inventory_items"]) == 5
        assert data["pending_shipments"][0]["customer_name"] == "Alice Customer"

    def test_admin_edit_survives_across_requests(self, client):
        client.patch("/products/1/description", json={"description": "Edited"})
        items = client.get("/dashboard").json()["inventory_items"]
        assert items[0]["description"] == "Edited"
