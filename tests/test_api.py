"""
Tests for the HTTP endpoints.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.api.routes.settings import get_settings_context
from app.db.base import Base
from app.db import models  # noqa: F401
from app.db.models.company import Company
from app.db.models.job import Job
from app.db.session import get_db
from app.services.settings_service import InMemorySettingsStorage, SettingsContext


# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=test_engine)
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def settings_context():
    return SettingsContext(InMemorySettingsStorage())


@pytest.fixture
def client(db, settings_context):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings_context] = lambda: settings_context
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def companies(db):
    acme = Company(name="Acme Corp", about="Company profile for Acme Corp", logo="acme.png")
    beta = Company(name="Beta Ltd")
    db.add_all([acme, beta])
    db.commit()
    db.add_all([
        Job(title="Engineer", description="Build things", company_id=acme.id),
        Job(title="Analyst", description="Analyse things", company_id=acme.id),
    ])
    db.commit()
    return acme, beta


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_list_filters(client):
    data = client.get("/filters").json()
    assert data["all"] == "All"
    assert "jobs" in data["entities"]
    assert data["pagination"]["default_rows_per_page"] == 10


def test_entity_filters(client):
    response = client.get("/filters/books")
    assert response.status_code == 200
    assert "epub" in response.json()["formats"]
    assert client.get("/filters/videos").status_code == 404


def test_filter_labels(client):
    data = client.get("/filters/labels/full_tuition").json()
    assert data["label"] == "Full Tuition"
    assert data["type_color"] == "bg-green-100 text-green-800"
    assert data["status_color"] == "bg-gray-100 text-gray-800"


def test_translations(client):
    assert client.get("/translations/en").json()["nav"]["jobs"] == "Jobs"
    assert client.get("/translations/fr").status_code == 404

    data = client.get("/translations/en/jobs.postedBy", params={"company": "Acme"}).json()
    assert data["text"] == "Posted by Acme"
    assert client.get("/translations/ps/missing.key").json()["text"] == "missing.key"


def test_translation_interpolates_any_query_value(client):
    data = client.get("/translations/en/jobs.closesOn", params={"date": "2025-05-01"}).json()
    assert data["text"] == "Closes on 2025-05-01"

    # Unknown placeholders stay, unrelated and reserved parameters are ignored
    data = client.get(
        "/translations/en/jobs.postedBy", params={"date": "x", "key": "other", "lng": "ps"}
    ).json()
    assert data == {"key": "jobs.postedBy", "language": "en", "text": "Posted by {{company}}"}


def test_read_and_update_settings(client, settings_context):
    assert client.get("/settings").json()["defaultCurrency"] == "AFN"

    response = client.patch("/settings", json={"key": "language", "value": "dr"})
    assert response.status_code == 200
    assert response.json()["language"] == "dr"
    assert settings_context.settings.language == "dr"

    response = client.patch("/settings", json={"parent_key": "notifications", "key": "orders", "value": False})
    assert response.json()["notifications"]["orders"] is False


def test_update_settings_errors(client):
    assert client.patch("/settings", json={"key": "nope", "value": 1}).status_code == 400
    assert client.patch("/settings", json={"key": "theme", "value": "neon"}).status_code == 422


def test_exchange_rate_and_conversion(client):
    response = client.put("/settings/exchange-rates/eur", json={"rate": 0.0105})
    assert response.json()["exchangeRates"]["EUR"] == 0.0105
    assert client.put("/settings/exchange-rates/EUR", json={"rate": 0}).status_code == 422

    data = client.get("/settings/convert", params={"amount": 100, "from": "AFN", "to": "USD"}).json()
    assert data["converted"] == pytest.approx(1.142)


def test_format_amount(client):
    data = client.get("/settings/format", params={"amount": 1000, "currency": "USD"}).json()
    assert data["formatted"] == "$1,000.00"


def test_toggles(client):
    assert client.post("/settings/toggle-theme").json()["theme"] == "dark"
    assert client.post("/settings/toggle-direction").json()["directionRTL"] is True


def test_list_companies(client, companies):
    data = client.get("/companies").json()
    assert data["total"] == 2
    assert [c["name"] for c in data["companies"]] == ["Acme Corp", "Beta Ltd"]

    data = client.get("/companies", params={"q": "beta"}).json()
    assert [c["name"] for c in data["companies"]] == ["Beta Ltd"]


def test_get_company(client, companies):
    acme, beta = companies
    data = client.get(f"/companies/{acme.id}").json()
    assert data["name"] == "Acme Corp"
    assert data["job_count"] == 2
    assert client.get(f"/companies/{beta.id}").json()["job_count"] == 0
    assert client.get("/companies/999").status_code == 404
