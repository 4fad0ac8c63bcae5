def test_empty_cart(client, auth):
    res = client.get("/api/cart", headers=auth)
    assert res.json() == {"success": True, "cart": [], "subtotal": 0}


def test_cart_requires_auth(client):
    assert client.get("/api/cart").status_code == 401


def test_add_item_snapshots_price(client, auth, make_product, mongo):
    pid = make_product(price=20.0, stock=5)
    res = client.post("/api/cart", json={"product_id": pid, "quantity": 2}, headers=auth)
    assert res.status_code == 200
    body = res.json()
    assert body["cart"][0]["product"]["id"] == pid
    assert body["cart"][0]["quantity"] == 2
    assert body["cart"][0]["price"] == 20.0
    assert body["subtotal"] == 40.0

    # a later price change does not alter the line price
    mongo["product"].update_one({}, {"$set": {"price": 99.0}})
    again = client.get("/api/cart", headers=auth).json()
    assert again["cart"][0]["price"] == 20.0
    assert again["cart"][0]["product"]["price"] == 99.0


def test_add_merges_existing_line(client, auth, make_product):
    pid = make_product(stock=5)
    client.post("/api/cart", json={"product_id": pid, "quantity": 2}, headers=auth)
    res = client.post("/api/cart", json={"product_id": pid}, headers=auth)
    assert len(res.json()["cart"]) == 1
    assert res.json()["cart"][0]["quantity"] == 3


def test_add_respects_stock(client, auth, make_product):
    pid = make_product(stock=3)
    res = client.post("/api/cart", json={"product_id": pid, "quantity": 4}, headers=auth)
    assert res.status_code == 400
    assert res.json()["message"] == "Only 3 items available in stock"

    client.post("/api/cart", json={"product_id": pid, "quantity": 2}, headers=auth)
    merged = client.post("/api/cart", json={"product_id": pid, "quantity": 2}, headers=auth)
    assert merged.status_code == 400
    assert merged.json()["message"] == "Cannot add more. Only 3 items available"


def test_add_unknown_product(client, auth):
    res = client.post("/api/cart", json={"product_id": "64b7f0000000000000000000"}, headers=auth)
    assert res.status_code == 404
    assert client.post("/api/cart", json={"product_id": "bogus"}, headers=auth).status_code == 400
    assert client.post("/api/cart", json={"product_id": "64b7f0000000000000000000", "quantity": 0}, headers=auth).status_code == 422


def test_update_quantity(client, auth, make_product):
    pid = make_product(stock=4)
    client.post("/api/cart", json={"product_id": pid}, headers=auth)

    res = client.put(f"/api/cart/{pid}", json={"quantity": 4}, headers=auth)
    assert res.json()["cart"][0]["quantity"] == 4

    too_many = client.put(f"/api/cart/{pid}", json={"quantity": 5}, headers=auth)
    assert too_many.status_code == 400

    assert client.put(f"/api/cart/{pid}", json={"quantity": 0}, headers=auth).status_code == 422


def test_update_missing_line(client, auth, make_product):
    pid = make_product()
    res = client.put(f"/api/cart/{pid}", json={"quantity": 1}, headers=auth)
    assert res.status_code == 404
    assert res.json()["message"] == "Item not found in cart"


def test_remove_and_clear(client, auth, make_product):
    a = make_product(name="A")
    b = make_product(name="B")
    client.post("/api/cart", json={"product_id": a}, headers=auth)
    client.post("/api/cart", json={"product_id": b}, headers=auth)

    res = client.delete(f"/api/cart/{a}", headers=auth)
    assert [i["product"]["name"] for i in res.json()["cart"]] == ["B"]

    cleared = client.delete("/api/cart", headers=auth)
    assert cleared.json() == {"success": True, "message": "Cart cleared successfully", "cart": []}
    assert client.get("/api/cart", headers=auth).json()["cart"] == []


def test_deleted_product_drops_out_of_cart_view(client, auth, make_product, mongo):
    pid = make_product()
    client.post("/api/cart", json={"product_id": pid}, headers=auth)
    mongo["product"].delete_many({})
    assert client.get("/api/cart", headers=auth).json() == {"success": True, "cart": [], "subtotal": 0}
    assert mongo["user"].find_one({"email": "shopper@example.com"})["cart"] == []


def test_carts_are_per_user(client, auth, make_product):
    from conftest import register

    pid = make_product()
    client.post("/api/cart", json={"product_id": pid}, headers=auth)
    other = register(client, email="other@example.com")
    assert client.get("/api/cart", headers=other).json()["cart"] == []
