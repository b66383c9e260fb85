from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from relnet.api.endpoints import get_endpoints_router
from relnet.api.settings import get_settings_router
from relnet.session import NetworkSession
from relnet.settings_stores.base import SettingsStore


def create_app(
    *,
    session: NetworkSession,
    settings_store: SettingsStore,
) -> FastAPI:
    """Create FastAPI app. The network is loaded from the session's store on startup."""

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        await session.reload()
        yield

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router=get_endpoints_router(session=session))
    app.include_router(router=get_settings_router(settings_store=settings_store))

    return app
