import os

# Avant tout import applicatif: pas de Redis pendant les tests
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

import json
from typing import Any, Dict, Generator, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from mockstore import config
from mockstore.app_setup.factory import create_storefront_app, create_admin_app
from mockstore.auth.token import issue_token
from mockstore.cart.store import SessionStore
from mockstore.infra import adapter_client

TEST_SECRET = "test-secret"

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class FakeAdapter:
    """
    Couche d'accès aux données simulée (httpx.MockTransport).
    Reproduit le contrat de l'adapter: items paginés, users, /user/role.
    `fail` force une panne: "timeout", "connect", "500" ou "html" (200 non JSON).
    """

    def __init__(self):
        self.users: List[Dict[str, Any]] = [
            {"id": 1, "username": "jdoe123", "firstname": "John", "surname": "Doe", "role": "admin", "password": "jdoe@123"},
            {"id": 2, "username": "asmith456", "firstname": "Alice", "surname": "Smith", "role": "user", "password": "asmith@456"},
        ]
        self.items: List[Dict[str, Any]] = [
            {"id": i, "name": f"Item {i}", "description": f"Description {i}", "price": f"{i * 10}.00"}
            for i in range(1, 26)
        ]
        self.fail: Optional[str] = None
        self.calls: List[str] = []

    def _find(self, rows, row_id):
        return next((r for r in rows if str(r["id"]) == str(row_id)), None)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(f"{request.method} {request.url.path}")
        if self.fail == "timeout":
            raise httpx.ConnectTimeout("timed out", request=request)
        if self.fail == "connect":
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail == "500":
            return httpx.Response(500, json={"error": "Internal Server Error"})
        if self.fail == "html":
            return httpx.Response(200, text="<html>proxy error</html>", headers={"content-type": "text/html"})

        method = request.method
        parts = [p for p in request.url.path.split("/") if p]
        body = json.loads(request.content) if request.content else None

        if parts == ["user", "role"] and method == "POST":
            user = next((u for u in self.users if u["username"] == (body or {}).get("username")), None)
            if not user:
                return httpx.Response(404, json={"error": "User not found"})
            return httpx.Response(200, json={"role": user["role"]})

        if parts == ["users"]:
            if method == "GET":
                return httpx.Response(200, json=self.users)
            if method == "POST":
                row = {"id": len(self.users) + 1, **body}
                self.users.append(row)
                return httpx.Response(201, json=row)

        if len(parts) == 2 and parts[0] == "users":
            user = self._find(self.users, parts[1])
            if not user:
                return httpx.Response(404, json={"error": "User not found"})
            if method == "PUT":
                user.update(body or {})
            return httpx.Response(200, json=user)

        if parts == ["items", "batch"] and method == "POST":
            created = []
            for it in body:
                row = {"id": len(self.items) + 1, "description": "", **it}
                self.items.append(row)
                created.append(row)
            return httpx.Response(201, json=created)

        if parts == ["items"]:
            if method == "GET":
                page = int(request.url.params.get("page", 1))
                limit = int(request.url.params.get("limit", 10))
                start = (page - 1) * limit
                return httpx.Response(200, json={
                    "items": self.items[start:start + limit],
                    "page": page,
                    "limit": limit,
                    "total": len(self.items),
                })
            if method == "POST":
                row = {"id": len(self.items) + 1, **body}
                self.items.append(row)
                return httpx.Response(201, json=row)

        if len(parts) == 2 and parts[0] == "items":
            item = self._find(self.items, parts[1])
            if not item:
                return httpx.Response(404, json={"error": "Item not found"})
            if method == "PUT":
                item.update(body or {})
            return httpx.Response(200, json=item)

        return httpx.Response(404, json={"error": "Not found"})


@pytest.fixture(autouse=True)
def _token_secret(monkeypatch):
    monkeypatch.setattr(config, "TOKEN_SECRET", TEST_SECRET)
    monkeypatch.setattr(config, "TOKEN_SECRET_IS_DEFAULT", False)


@pytest.fixture()
def fake_adapter() -> Generator[FakeAdapter, None, None]:
    fake = FakeAdapter()
    adapter_client.set_adapter_client(
        httpx.Client(base_url="http://adapter.test", transport=httpx.MockTransport(fake.handler))
    )
    yield fake
    adapter_client.close_adapter_client()


@pytest.fixture()
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture()
def storefront_app(store):
    return create_storefront_app(store)


@pytest.fixture()
def admin_app():
    return create_admin_app()


@pytest.fixture()
def client(storefront_app, fake_adapter) -> Generator[TestClient, None, None]:
    with TestClient(storefront_app) as c:
        yield c


@pytest.fixture()
def admin_client(admin_app, fake_adapter) -> Generator[TestClient, None, None]:
    with TestClient(admin_app) as c:
        yield c


def auth_headers(username: str, token: Optional[str] = None) -> Dict[str, str]:
    return {"X-User": username, "Authorization": f"Bearer {token or issue_token(username)}"}


@pytest.fixture()
def make_headers():
    return auth_headers


@pytest.fixture()
def user_headers() -> Dict[str, str]:
    return auth_headers("asmith456")


@pytest.fixture()
def admin_headers() -> Dict[str, str]:
    return auth_headers("jdoe123")
