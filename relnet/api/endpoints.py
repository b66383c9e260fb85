from fastapi import APIRouter, File, HTTPException, Query, UploadFile
from fastapi.responses import Response
from loguru import logger
from pydantic import BaseModel

from relnet.domain.entities import DataLoadResult, Person, RelationshipEvent, RiskLevel
from relnet.domain.graph import FilterState, NetworkGraph
from relnet.llms.errors import (
    ClassificationError,
    ConnectionFailedError,
    RateLimitedError,
    ServiceUnavailableError,
)
from relnet.llms.schemas import AVAILABLE_MODELS, AIAnalysisResult, LLMModel
from relnet.network.relations import filter_events
from relnet.session import AnalysisNotAllowedError, NetworkSession
from relnet.table_stores.base import TableStoreError
from relnet.table_stores.workbook import WorkbookTableStore

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class RiskLevelUpdate(BaseModel):
    risk_level: RiskLevel


def _classification_status(error: ClassificationError) -> int:
    if isinstance(error, RateLimitedError):
        return 429
    if isinstance(error, ConnectionFailedError | ServiceUnavailableError):
        return 503
    return 502


def _create_upload_endpoint(session: NetworkSession):
    async def upload_workbook(file: UploadFile = File(...)) -> DataLoadResult:
        content = await file.read()
        try:
            store = WorkbookTableStore.from_bytes(content)
        except Exception as e:
            logger.error(f"Could not read uploaded workbook {file.filename}: {e}")
            raise HTTPException(status_code=400, detail="File is not a valid Excel workbook") from e

        logger.info(f"Opened uploaded workbook {file.filename}")
        return await session.attach(store)

    return upload_workbook


def _create_download_endpoint(session: NetworkSession):
    async def download_workbook() -> Response:
        store = session.store
        if not isinstance(store, WorkbookTableStore):
            raise HTTPException(status_code=404, detail="No workbook loaded")
        return Response(
            content=store.to_bytes(),
            media_type=XLSX_MEDIA_TYPE,
            headers={"Content-Disposition": 'attachment; filename="relationship-network.xlsx"'},
        )

    return download_workbook


def _create_graph_endpoint(session: NetworkSession):
    async def get_graph(
        departments: list[str] = Query(default=[]),
        risk_levels: list[str] = Query(default=[]),
        relationship_types: list[str] = Query(default=[]),
        sentiments: list[str] = Query(default=[]),
    ) -> NetworkGraph:
        filters = FilterState(
            departments=departments,
            risk_levels=risk_levels,
            relationship_types=relationship_types,
            sentiments=sentiments,
        )
        return session.graph(filters)

    return get_graph


def _create_risk_level_endpoint(session: NetworkSession):
    async def set_risk_level(person_id: str, update: RiskLevelUpdate) -> Person:
        try:
            return await session.set_risk_level(person_id, update.risk_level)
        except KeyError as err:
            raise HTTPException(status_code=404, detail="Person not found") from err
        except TableStoreError as e:
            logger.error(f"Failed to write risk level for {person_id}: {e}")
            raise HTTPException(status_code=409, detail=str(e)) from e

    return set_risk_level


def _create_analysis_endpoint(session: NetworkSession):
    async def analyze_event(event_id: str) -> AIAnalysisResult:
        try:
            return await session.analyze_event(event_id)
        except KeyError as err:
            raise HTTPException(status_code=404, detail="Event not found") from err
        except AnalysisNotAllowedError as e:
            raise HTTPException(status_code=403, detail=str(e)) from e
        except ClassificationError as e:
            logger.error(f"Analysis of event {event_id} failed ({e.kind}): {e}")
            raise HTTPException(status_code=_classification_status(e), detail=e.message) from e

    return analyze_event


def _create_suggestion_endpoint(session: NetworkSession):
    async def accept_suggestion(event_id: str, result: AIAnalysisResult) -> RelationshipEvent:
        try:
            return await session.accept_suggestion(event_id, result)
        except KeyError as err:
            raise HTTPException(status_code=404, detail="Event not found") from err
        except TableStoreError as e:
            logger.error(f"Failed to apply suggestion to event {event_id}: {e}")
            raise HTTPException(status_code=409, detail=str(e)) from e

    return accept_suggestion


def get_endpoints_router(*, session: NetworkSession) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @router.get("/network")
    async def get_network() -> DataLoadResult:
        return session.data

    @router.post("/network/reload")
    async def reload_network() -> DataLoadResult:
        return await session.reload()

    @router.post("/workbook/template")
    async def new_template_workbook() -> DataLoadResult:
        return await session.attach(WorkbookTableStore.template())

    @router.get("/departments")
    async def get_departments() -> list[str]:
        return session.departments()

    @router.get("/events")
    async def get_events(
        event_type: str | None = None, impact: str | None = None
    ) -> list[RelationshipEvent]:
        return filter_events(session.data.events, event_type=event_type, impact=impact)

    @router.get("/people/{person_id}/events")
    async def get_person_events(person_id: str) -> list[RelationshipEvent]:
        try:
            session.get_person(person_id)
        except KeyError as err:
            raise HTTPException(status_code=404, detail="Person not found") from err
        return session.relations().events_for_person(person_id)

    @router.get("/models")
    async def get_models() -> list[LLMModel]:
        return AVAILABLE_MODELS

    router.post("/workbook")(_create_upload_endpoint(session))
    router.get("/workbook")(_create_download_endpoint(session))
    router.get("/graph")(_create_graph_endpoint(session))
    router.put("/people/{person_id}/risk-level")(_create_risk_level_endpoint(session))
    router.post("/events/{event_id}/analysis")(_create_analysis_endpoint(session))
    router.post("/events/{event_id}/suggestion")(_create_suggestion_endpoint(session))

    return router
