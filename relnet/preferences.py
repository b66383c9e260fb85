"""Reading and writing user preferences through a settings store."""

from pydantic import ValidationError

from relnet.llms.schemas import LLMConfig
from relnet.settings_stores.base import SettingsStore

LLM_PROVIDER_KEY = "llm_provider"
LLM_MODEL_KEY = "llm_model"
LLM_API_KEY_KEY = "llm_apiKey"
PRIVACY_ACCEPTED_KEY = "privacy_accepted"


def load_llm_config(store: SettingsStore) -> LLMConfig | None:
    """Get the saved LLM configuration, or None when provider or API key is missing."""
    provider = store.get(LLM_PROVIDER_KEY)
    api_key = store.get(LLM_API_KEY_KEY)
    if not provider or not api_key:
        return None

    try:
        return LLMConfig(provider=provider, model=store.get(LLM_MODEL_KEY) or "", api_key=api_key)
    except ValidationError:
        return None


def save_llm_config(store: SettingsStore, config: LLMConfig) -> None:
    store.set(LLM_PROVIDER_KEY, config.provider)
    store.set(LLM_MODEL_KEY, config.model)
    store.set(LLM_API_KEY_KEY, config.api_key)
    store.save()


def load_privacy_accepted(store: SettingsStore) -> bool:
    return store.get(PRIVACY_ACCEPTED_KEY) is True


def save_privacy_accepted(store: SettingsStore, accepted: bool) -> None:
    store.set(PRIVACY_ACCEPTED_KEY, accepted)
    store.save()
