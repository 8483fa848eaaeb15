# backend/tests/conftest.py
import pytest

from artroad import create_app
from artroad.application.admin_accounts import create_admin
from artroad.extensions import db

ADMIN_EMAIL = "admin@artroad.ae"
ADMIN_PASSWORD = "correct-horse-battery"


@pytest.fixture(scope="function")
def app():
    """A fresh app per test; the in-memory database lives and dies with it."""
    app = create_app("testing")
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_token(app, client):
    """Creates the first admin directly, then signs in through the API."""
    with app.app_context():
        create_admin({"email": ADMIN_EMAIL, "name": "Site Admin", "password": ADMIN_PASSWORD})

    response = client.post(
        "/api/v1/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.get_json()["access_token"]


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def service_payload():
    def build(**overrides):
        payload = {
            "titleEn": "LED Panels",
            "titleFr": "Panneaux LED",
            "titleAr": "ألواح LED",
            "descriptionEn": "Indoor and outdoor LED walls",
            "descriptionFr": "Murs LED intérieurs et extérieurs",
            "descriptionAr": "جدران LED داخلية وخارجية",
            "imageUrl": "/images/services/led.jpg",
            "icon": "lightbulb",
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def gallery_payload():
    def build(**overrides):
        payload = {
            "titleEn": "Lobby makeover",
            "titleFr": "Rénovation du hall",
            "titleAr": "تجديد الردهة",
            "descriptionEn": "Before and after",
            "descriptionFr": "Avant et après",
            "descriptionAr": "قبل وبعد",
            "beforeImageUrl": "/images/gallery/before.jpg",
            "afterImageUrl": "/images/gallery/after.jpg",
            "category": "events",
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def team_payload():
    def build(**overrides):
        payload = {
            "nameEn": "Sara",
            "nameFr": "Sara",
            "nameAr": "سارة",
            "photoUrl": "/images/team/sara.jpg",
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def lead_payload():
    def build(**overrides):
        payload = {
            "name": "Ahmed Hassan",
            "email": "ahmed@example.com",
            "phone": "+971501234567",
            "message": "Need an LED wall for our office",
        }
        payload.update(overrides)
        return payload

    return build
