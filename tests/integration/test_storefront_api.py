from mockstore.auth.token import verify_token

# Les fixtures `client`, `fake_adapter`, `user_headers`, `make_headers` sont fournies par `conftest.py`

def _delete(client, json, headers):
    return client.request("DELETE", "/cart/items", json=json, headers=headers)

# --- /login ---

def test_login_success_returns_token(client):
    res = client.post("/login", json={"username": "asmith456", "password": "asmith@456"})
    assert res.status_code == 200
    token = res.json()["token"]
    assert verify_token("asmith456", token) is True

def test_login_missing_fields_400(client):
    res = client.post("/login", json={"username": "asmith456"})
    assert res.status_code == 400
    assert res.json()["error"] == "validation"

def test_login_non_json_body_400(client):
    res = client.post("/login", content=b"not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 400

def test_login_unknown_user_and_wrong_password_same_response(client):
    unknown = client.post("/login", json={"username": "ghost", "password": "asmith@456"})
    wrong = client.post("/login", json={"username": "asmith456", "password": "bad"})
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()

def test_login_upstream_down_503(client, fake_adapter):
    fake_adapter.fail = "timeout"
    res = client.post("/login", json={"username": "asmith456", "password": "asmith@456"})
    assert res.status_code == 503
    assert "timed out" not in res.text

# --- /cart ---

def test_cart_requires_auth(client):
    assert client.post("/cart", json={"itemId": 1, "quantity": 1}).status_code == 401
    assert client.get("/cart/items").status_code == 401
    assert client.post("/checkout").status_code == 401
    assert client.post("/payment").status_code == 401

def test_cart_rejects_bad_token(client, make_headers):
    res = client.post("/cart", json={"itemId": 1, "quantity": 1}, headers=make_headers("asmith456", "0" * 64))
    assert res.status_code == 401

def test_add_to_cart(client, user_headers):
    res = client.post("/cart", json={"itemId": 1, "quantity": 2}, headers=user_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Item added to cart"
    assert body["cart"] == [{"itemId": 1, "quantity": 2}]

def test_add_to_cart_numeric_strings_are_normalized(client, user_headers):
    client.post("/cart", json={"itemId": "3", "quantity": "4"}, headers=user_headers)
    assert client.get("/cart/items", headers=user_headers).json() == [{"itemId": 3, "quantity": 4}]

def test_add_to_cart_validation_400(client, user_headers):
    for payload in ({}, {"itemId": 1}, {"itemId": "abc", "quantity": 1}, {"itemId": 1, "quantity": 0}):
        res = client.post("/cart", json=payload, headers=user_headers)
        assert res.status_code == 400, payload
    assert client.get("/cart/items", headers=user_headers).json() == []

def test_add_unknown_item_404(client, user_headers):
    res = client.post("/cart", json={"itemId": 9999, "quantity": 1}, headers=user_headers)
    assert res.status_code == 404
    assert res.json()["detail"] == "Item not found"

def test_add_with_catalog_down_503(client, user_headers, fake_adapter):
    fake_adapter.fail = "connect"
    res = client.post("/cart", json={"itemId": 1, "quantity": 1}, headers=user_headers)
    assert res.status_code == 503

def test_list_empty_cart(client, user_headers):
    res = client.get("/cart/items", headers=user_headers)
    assert res.status_code == 200
    assert res.json() == []

def test_duplicates_are_appended(client, user_headers):
    client.post("/cart", json={"itemId": 1, "quantity": 2}, headers=user_headers)
    client.post("/cart", json={"itemId": 1, "quantity": 3}, headers=user_headers)
    assert client.get("/cart/items", headers=user_headers).json() == [
        {"itemId": 1, "quantity": 2},
        {"itemId": 1, "quantity": 3},
    ]

def test_remove_first_matching_line(client, user_headers):
    client.post("/cart", json={"itemId": 1, "quantity": 2}, headers=user_headers)
    client.post("/cart", json={"itemId": 2, "quantity": 1}, headers=user_headers)
    client.post("/cart", json={"itemId": 1, "quantity": 3}, headers=user_headers)
    res = _delete(client, {"itemId": 1}, user_headers)
    assert res.status_code == 200
    assert res.json()["deletedItem"] == {"itemId": 1, "quantity": 2}
    assert client.get("/cart/items", headers=user_headers).json() == [
        {"itemId": 2, "quantity": 1},
        {"itemId": 1, "quantity": 3},
    ]

def test_remove_from_empty_cart_400(client, user_headers):
    res = _delete(client, {"itemId": 1}, user_headers)
    assert res.status_code == 400
    assert res.json()["error"] == "validation"

def test_remove_non_matching_400_and_cart_unchanged(client, user_headers):
    client.post("/cart", json={"itemId": 1, "quantity": 2}, headers=user_headers)
    res = _delete(client, {"itemId": 5}, user_headers)
    assert res.status_code == 400
    assert client.get("/cart/items", headers=user_headers).json() == [{"itemId": 1, "quantity": 2}]

# --- /checkout, /payment ---

def test_checkout_empty_cart_400(client, user_headers):
    res = client.post("/checkout", headers=user_headers)
    assert res.status_code == 400
    assert res.json()["error"] == "precondition"

def test_checkout_empties_cart(client, user_headers):
    client.post("/cart", json={"itemId": 1, "quantity": 2}, headers=user_headers)
    res = client.post("/checkout", headers=user_headers)
    assert res.status_code == 200
    assert "message" in res.json()
    assert client.get("/cart/items", headers=user_headers).json() == []

def test_payment_before_checkout_400(client, user_headers):
    res = client.post("/payment", headers=user_headers)
    assert res.status_code == 400
    assert res.json()["error"] == "precondition"

def test_checkout_then_pay_then_pay_again(client, user_headers):
    client.post("/cart", json={"itemId": 1, "quantity": 1}, headers=user_headers)
    assert client.post("/checkout", headers=user_headers).status_code == 200
    assert client.post("/payment", headers=user_headers).status_code == 200
    assert client.post("/payment", headers=user_headers).status_code == 400

def test_carts_are_isolated_per_identity(client, make_headers):
    alice = make_headers("asmith456")
    john = make_headers("jdoe123")
    client.post("/cart", json={"itemId": 1, "quantity": 1}, headers=alice)
    assert client.get("/cart/items", headers=john).json() == []
    assert client.post("/checkout", headers=john).status_code == 400

def test_error_shape_and_security_headers(client):
    res = client.get("/cart/items")
    assert set(res.json()) == {"error", "detail"}
    assert res.headers["X-Content-Type-Options"] == "nosniff"

def test_non_json_upstream_body_is_503_with_error_shape(client, user_headers, fake_adapter):
    fake_adapter.fail = "html"
    login = client.post("/login", json={"username": "asmith456", "password": "asmith@456"})
    assert login.status_code == 503
    assert login.json() == {"error": "upstream_unavailable", "detail": "Upstream service unavailable"}
    assert "proxy error" not in login.text

    res = client.post("/cart", json={"itemId": 1, "quantity": 1}, headers=user_headers)
    assert res.status_code == 503
    assert res.json()["error"] == "upstream_unavailable"
    assert client.get("/items").status_code == 503
