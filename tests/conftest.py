import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cvchat.agents.assistant import CVAssistant, get_assistant
from cvchat.api.app import app
from cvchat.api.limiter import limiter
from cvchat.db import Base, get_db
from cvchat.db import store

SAMPLE_CV = """# Jane Doe
Title: Staff Platform Engineer
Location: Berlin, DE
Email: jane@example.com

## Summary
Platform engineer focused on developer tooling.
Loves boring technology.

## Experience
Staff Engineer at Acme Corp – 2021-Present
- Led platform migration
- Mentored 3 engineers
Senior Engineer at Globex — 2017-2021
Built the deployment pipeline
  and on-call tooling

## Technical Skills
Python, Go, Kubernetes
- Terraform
PostgreSQL

## Certifications
- AWS Solutions Architect
* CKA
Scrum Master

## Languages
- English - Native
German (Fluent) - lived in Berlin
French: Basic - school
Klingon

## Associations
- IEEE
Python Software Foundation
"""


class FailingChatModel:
    """Stands in for an unreachable LLM endpoint."""

    async def ainvoke(self, messages):
        raise ConnectionError("upstream unavailable")


class RecordingChatModel:
    def __init__(self, reply: str):
        self.reply = reply
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        return AIMessage(content=self.reply)


@pytest.fixture
def sample_cv():
    return SAMPLE_CV


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    store.seed_default_profile(session)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def assistant():
    return CVAssistant(model=FailingChatModel())


@pytest.fixture
def client(db, assistant):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_assistant] = lambda: assistant
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True
