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


def submit(client: TestClient, **overrides):
    payload = {"name": "Fatima", "email": "fatima@example.com", "phone": "99990000", "message": "Need clearance for a container"}
    payload.update(overrides)
    return client.post("/contact", json=payload)


def test_public_submission_stored_as_new():
    client = TestClient(app)
    resp = submit(client)
    assert resp.status_code == 201
    assert resp.json()["success"] is True

    messages = client.get("/contact", headers=auth_headers()).json()
    assert len(messages) == 1
    assert messages[0]["status"] == "new"
    assert messages[0]["email"] == "fatima@example.com"


@pytest.mark.parametrize("overrides", [{"name": "  "}, {"message": ""}, {"email": "not-an-email"}])
def test_required_fields_validated(overrides):
    client = TestClient(app)
    assert submit(client, **overrides).status_code == 422


def test_inbox_requires_auth():
    client = TestClient(app)
    assert client.get("/contact").status_code == 401


def test_status_update_and_delete():
    client = TestClient(app)
    headers = auth_headers()
    message_id = submit(client).json()["id"]

    resp = client.put(f"/contact/{message_id}", json={"status": "read"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "read"

    assert client.put(f"/contact/{message_id}", json={"status": "bogus"}, headers=headers).status_code == 422

    assert client.delete(f"/contact/{message_id}", headers=headers).status_code == 200
    assert client.delete(f"/contact/{message_id}", headers=headers).status_code == 404
