"""Endpoints for the AI provider settings and privacy consent."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from relnet.llms.schemas import LLMConfig, LLMProvider
from relnet.preferences import (
    load_llm_config,
    load_privacy_accepted,
    save_llm_config,
    save_privacy_accepted,
)
from relnet.settings_stores.base import SettingsStore


class LLMSettings(BaseModel):
    """LLM configuration as shown to the client; the API key itself is never returned."""

    provider: LLMProvider
    model: str
    has_api_key: bool


class PrivacySettings(BaseModel):
    accepted: bool


def get_settings_router(*, settings_store: SettingsStore) -> APIRouter:
    router = APIRouter(prefix="/settings")

    @router.get("/llm")
    async def get_llm_settings() -> LLMSettings:
        config = load_llm_config(settings_store)
        if config is None:
            raise HTTPException(status_code=404, detail="No AI provider configured")
        return LLMSettings(provider=config.provider, model=config.model, has_api_key=True)

    @router.put("/llm")
    async def put_llm_settings(config: LLMConfig) -> LLMSettings:
        if not config.api_key:
            raise HTTPException(status_code=422, detail="API key is required")
        save_llm_config(settings_store, config)
        return LLMSettings(provider=config.provider, model=config.model, has_api_key=True)

    @router.get("/privacy")
    async def get_privacy() -> PrivacySettings:
        return PrivacySettings(accepted=load_privacy_accepted(settings_store))

    @router.put("/privacy")
    async def put_privacy(privacy: PrivacySettings) -> PrivacySettings:
        save_privacy_accepted(settings_store, privacy.accepted)
        return privacy

    return router
