"""In-memory working set of the network and the actions that change it."""

import asyncio

from loguru import logger

from relnet.domain.entities import (
    EVENTS_TABLE,
    PEOPLE_TABLE,
    DataLoadResult,
    Person,
    RelationshipEvent,
    RiskLevel,
)
from relnet.domain.graph import FilterState, NetworkGraph
from relnet.ingestion.loader import load_network
from relnet.llms.base import EventClassifier
from relnet.llms.schemas import AIAnalysisResult
from relnet.network.graph_builder import available_departments, build_graph
from relnet.network.relations import EntityRelations
from relnet.network.risk import RiskUpdate, update_risk_levels
from relnet.preferences import load_llm_config, load_privacy_accepted
from relnet.settings_stores.base import SettingsStore
from relnet.table_stores.base import TableStore


class AnalysisNotAllowedError(Exception):
    """Event analysis was requested before consent was given or a model was configured."""


class NetworkSession:
    """Owns the current snapshot of people, relationships and events.

    Snapshots are replaced, never mutated. Changes are serialized by a lock so
    that a reload and a write-back never interleave.
    """

    def __init__(
        self,
        *,
        store: TableStore,
        classifier: EventClassifier,
        settings_store: SettingsStore,
    ) -> None:
        self.store = store
        self.classifier = classifier
        self.settings_store = settings_store
        self._data = DataLoadResult()
        self._risk_update: RiskUpdate | None = None
        self._lock = asyncio.Lock()

    @property
    def data(self) -> DataLoadResult:
        return self._data

    @property
    def risk_update(self) -> RiskUpdate | None:
        """Result of the risk sync run by the last reload, if any."""
        return self._risk_update

    async def reload(self) -> DataLoadResult:
        """Load all tables again and sync risk levels for the loaded people."""
        async with self._lock:
            data = await load_network(self.store)
            self._risk_update = None

            if data.people:
                self._risk_update = await update_risk_levels(data.people, data.events, self.store)
                data = data.model_copy(update={"people": self._risk_update.people})
                if self._risk_update.failures:
                    logger.warning(
                        f"{len(self._risk_update.failures)} risk level writes failed during reload"
                    )

            self._data = data
            return data

    async def attach(self, store: TableStore) -> DataLoadResult:
        """Switch to another table store, e.g. a newly uploaded workbook, and reload."""
        self.store = store
        return await self.reload()

    def relations(self) -> EntityRelations:
        return EntityRelations(
            self._data.people, events=self._data.events, relationships=self._data.relationships
        )

    def graph(self, filters: FilterState | None = None) -> NetworkGraph:
        return build_graph(self._data.people, self._data.relationships, filters)

    def departments(self) -> list[str]:
        return available_departments(self._data.people)

    def get_event(self, event_id: str) -> RelationshipEvent:
        for event in self._data.events:
            if event.id == event_id:
                return event
        raise KeyError(f"Event {event_id} not found")

    def get_person(self, person_id: str) -> Person:
        person = self.relations().get_person(person_id)
        if person is None:
            raise KeyError(f"Person {person_id} not found")
        return person

    async def set_risk_level(self, person_id: str, level: RiskLevel) -> Person:
        """Overwrite a person's risk level directly."""
        async with self._lock:
            person = self.get_person(person_id)
            await self.store.write_fields(PEOPLE_TABLE, person_id, {"RiskLevel": level})

            updated = person.model_copy(update={"risk_level": level})
            self._data = self._data.model_copy(
                update={"people": [updated if p.id == person_id else p for p in self._data.people]}
            )
            return updated

    async def analyze_event(self, event_id: str) -> AIAnalysisResult:
        """Ask the configured model for a classification of an event's description.

        Raises:
            KeyError: If the event does not exist
            AnalysisNotAllowedError: If privacy consent or LLM configuration is missing
            ClassificationError: If the classification call fails
        """
        event = self.get_event(event_id)

        if not load_privacy_accepted(self.settings_store):
            raise AnalysisNotAllowedError("Event descriptions are only sent after privacy consent")
        config = load_llm_config(self.settings_store)
        if config is None:
            raise AnalysisNotAllowedError("No AI provider configured. Add an API key in Settings.")

        return await self.classifier.analyze(event.description, config)

    async def accept_suggestion(
        self, event_id: str, result: AIAnalysisResult
    ) -> RelationshipEvent:
        """Write a suggested type, impact and severity back to the event."""
        async with self._lock:
            event = self.get_event(event_id)
            await self.store.write_fields(
                EVENTS_TABLE,
                event_id,
                {"Type": result.event_type, "Impact": result.impact, "Severity": result.severity},
            )

            updated = event.model_copy(
                update={
                    "type": result.event_type,
                    "impact": result.impact,
                    "severity": result.severity,
                }
            )
            self._data = self._data.model_copy(
                update={"events": [updated if e.id == event_id else e for e in self._data.events]}
            )
            logger.info(f"Applied suggestion to event {event_id}")
            return updated
