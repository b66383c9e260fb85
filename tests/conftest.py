import pytest
from fastapi.testclient import TestClient

from relnet.api import create_app
from relnet.domain.entities import (
    EVENTS_HEADERS,
    EVENTS_TABLE,
    PEOPLE_HEADERS,
    PEOPLE_TABLE,
    RELATIONSHIPS_HEADERS,
    RELATIONSHIPS_TABLE,
)
from relnet.session import NetworkSession
from relnet.table_stores.base import TableData
from tests.fakes import FakeEventClassifier, FakeSettingsStore, FakeTableStore


@pytest.fixture
def people_table() -> TableData:
    return TableData(
        headers=PEOPLE_HEADERS,
        rows=[
            ["P1", "Alice Chen", "VP Engineering", "Engineering", 9, "Low", ""],
            ["P2", "Bob Smith", "Director", "Sales", 6, "Low", "Quiet"],
            ["P3", "Carol Diaz", "Analyst", "Finance", 3, "High", None],
        ],
    )


@pytest.fixture
def relationships_table() -> TableData:
    return TableData(
        headers=RELATIONSHIPS_HEADERS,
        rows=[
            ["R1", "P1", "P2", "Collaborates With", 7, "Positive", "Both", ""],
            ["R2", "P2", "P3", "Conflicts With", 8, "Negative", "A→B", ""],
            ["R3", "P1", "P9", "Mentors", 4, "Neutral", "A→B", "Unknown mentee"],
        ],
    )


@pytest.fixture
def events_table() -> TableData:
    return TableData(
        headers=EVENTS_HEADERS,
        rows=[
            ["E1", "2024-03-01", "P2, P3", "Conflict", "Budget dispute", "Negative", 9],
            ["E2", "2024-04-15", "P2", "Betrayal", "Took credit", "Negative", 7],
            ["E3", "2024-02-10", "P1,P2", "Achievement", "Launch", "Positive", 10],
        ],
    )


@pytest.fixture
def table_store(
    people_table: TableData, relationships_table: TableData, events_table: TableData
) -> FakeTableStore:
    return FakeTableStore(
        {
            PEOPLE_TABLE: people_table,
            RELATIONSHIPS_TABLE: relationships_table,
            EVENTS_TABLE: events_table,
        }
    )


@pytest.fixture
def settings_store() -> FakeSettingsStore:
    return FakeSettingsStore(
        {
            "llm_provider": "openai",
            "llm_model": "gpt-4o",
            "llm_apiKey": "sk-test",
            "privacy_accepted": True,
        }
    )


@pytest.fixture
def fake_classifier() -> FakeEventClassifier:
    return FakeEventClassifier()


@pytest.fixture
def session(
    table_store: FakeTableStore,
    fake_classifier: FakeEventClassifier,
    settings_store: FakeSettingsStore,
) -> NetworkSession:
    return NetworkSession(
        store=table_store, classifier=fake_classifier, settings_store=settings_store
    )


@pytest.fixture
def test_client(session: NetworkSession, settings_store: FakeSettingsStore):
    """Create test client with fake implementations; startup loads the network."""
    app = create_app(session=session, settings_store=settings_store)
    with TestClient(app) as client:
        yield client
