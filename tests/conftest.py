"""Pytest fixtures and configuration."""
import pytest
import fakeredis
from fastapi.testclient import TestClient

from app.config import Settings
from app.database.seed import seed_sample_data
from app.main import create_app
from app.services import RedisCache


@pytest.fixture
def settings():
    """Settings for an in-memory database and a cheap bcrypt cost."""
    return Settings(
        database_url="sqlite://",
        cache_enabled=False,
        jwt_secret_key="test-secret-key-with-at-least-32-bytes!!",
        bcrypt_rounds=4,
    )


@pytest.fixture
def fake_cache():
    """Redis cache backed by fakeredis."""
    return RedisCache(fakeredis.FakeRedis(decode_responses=True))


@pytest.fixture
def app(settings, fake_cache):
    return create_app(settings, cache=fake_cache)


@pytest.fixture
def client(app):
    """Test client; entering it runs the lifespan, which creates the tables."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app, client):
    """Session on the same database the client talks to."""
    session = app.state.database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db_session):
    """Sample issuer, company, questionnaire, responses and one report."""
    return seed_sample_data(db_session)


@pytest.fixture
def issuer(client):
    response = client.post("/api/v1/issuers", json={"name": "Acme Holdings"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def company(client, issuer):
    response = client.post(
        "/api/v1/companies",
        json={"name": "Acme Corp", "issuer_id": issuer["id"]},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def questionnaire(client):
    response = client.post(
        "/api/v1/questionnaires",
        json={"name": "ESG 2026", "description": "Annual ESG questionnaire"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def yes_no_question_data(questionnaire):
    return {
        "questionnaire_id": questionnaire["id"],
        "text": "Do you publish a sustainability report?",
        "type": "yes_no",
        "section": "Environmental",
        "order": 1,
        "options": [
            {"text": "Yes", "value": "yes", "score": 4},
            {"text": "No", "value": "no", "score": 1},
        ],
    }


@pytest.fixture
def yes_no_question(client, yes_no_question_data):
    response = client.post("/api/v1/questions", json=yes_no_question_data)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def text_question(client, questionnaire):
    response = client.post("/api/v1/questions", json={
        "questionnaire_id": questionnaire["id"],
        "text": "Describe your governance structure.",
        "type": "text_input",
        "section": "Governance",
        "order": 2,
    })
    assert response.status_code == 201
    return response.json()
