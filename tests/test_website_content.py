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


def test_content_grouped_by_section():
    client = TestClient(app)
    headers = auth_headers()
    client.put("/website-content", json={"section": "hero", "key": "title", "value": "Fast clearance"}, headers=headers)
    client.put("/website-content", json={"section": "hero", "key": "subtitle", "value": "Since 1990"}, headers=headers)
    client.put("/website-content", json={"section": "contact", "key": "phone", "value": "60744492"}, headers=headers)

    resp = client.get("/website-content")
    assert resp.status_code == 200
    assert resp.json() == {
        "contact": {"phone": "60744492"},
        "hero": {"title": "Fast clearance", "subtitle": "Since 1990"},
    }


def test_upsert_replaces_existing_value():
    client = TestClient(app)
    headers = auth_headers()
    first = client.put("/website-content", json={"section": "hero", "key": "title", "value": "Old"}, headers=headers).json()
    second = client.put("/website-content", json={"section": "hero", "key": "title", "value": "New"}, headers=headers).json()
    assert first["id"] == second["id"]
    assert client.get("/website-content").json() == {"hero": {"title": "New"}}


def test_upsert_requires_auth():
    client = TestClient(app)
    assert client.put("/website-content", json={"section": "hero", "key": "title", "value": "x"}).status_code == 401
