import pytest
from fastapi.testclient import TestClient

from backend.app.core.security import create_access_token
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.user import User


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def auth_headers() -> dict:
    db = SessionLocal()
    try:
        user = User(username="clerk", hashed_password="x", is_active=True)
        db.add(user)
        db.commit()
        db.refresh(user)
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}
    finally:
        db.close()


def test_verify_page_shows_invoice_publicly():
    client = TestClient(app)
    headers = auth_headers()
    client.post(
        "/invoices",
        json={
            "customer_name": "Gulf <Cargo>",
            "bayan_no": "B-77",
            "items": [{"description_en": "Delivery Order", "description_ar": "اذن تسليم", "amount": "2000"}],
        },
        headers=headers,
    )
    resp = client.get("/verify/1001")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    body = resp.text
    assert "Verified Invoice" in body
    assert "#1001" in body
    assert "Gulf &lt;Cargo&gt;" in body
    assert "2,000.000" in body
    assert "TWO THOUSAND KUWAITI DINARS ONLY" in body
    assert "فقط ألفان دينار كويتي لا غير" in body


def test_verify_unknown_invoice():
    client = TestClient(app)
    resp = client.get("/verify/424242")
    assert resp.status_code == 404
    assert "Invoice Not Found" in resp.text
    assert "424242" in resp.text


def test_verify_link_uses_configured_base_url():
    client = TestClient(app)
    headers = auth_headers()
    client.put("/settings", json={"qr_base_url": "https://office.example.com/verify/"}, headers=headers)
    resp = client.get("/verify/1001/link")
    assert resp.status_code == 200
    assert resp.json() == {"verify_url": "https://office.example.com/verify/1001", "show_qr_code": True}


def test_verify_link_falls_back_to_public_base_url():
    client = TestClient(app)
    resp = client.get("/verify/1001/link")
    assert resp.json()["verify_url"].endswith("/verify/1001")
