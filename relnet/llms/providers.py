"""Request builders and response extractors for each supported provider.

The providers differ only in wire format; error mapping and normalization are
shared by the classifier.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from relnet.llms.prompt import SYSTEM_PROMPT, get_user_prompt
from relnet.llms.schemas import LLMConfig

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
ANTHROPIC_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
GOOGLE_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
TEMPERATURE = 0.3
ANTHROPIC_MAX_TOKENS = 1024


@dataclass(frozen=True)
class ProviderRequest:
    url: str
    json: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ProviderSpec:
    label: str
    build_request: Callable[[str, LLMConfig], ProviderRequest]
    extract_text: Callable[[dict[str, Any]], str | None]


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def _get(data: Any, key: str) -> Any:
    return data.get(key) if isinstance(data, dict) else None


def build_openai_request(description: str, config: LLMConfig) -> ProviderRequest:
    return ProviderRequest(
        url=OPENAI_URL,
        headers={"Authorization": f"Bearer {config.api_key}"},
        json={
            "model": config.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": get_user_prompt(description)},
            ],
            "response_format": {"type": "json_object"},
            "temperature": TEMPERATURE,
        },
    )


def extract_openai_text(payload: dict[str, Any]) -> str | None:
    return _get(_get(_first(_get(payload, "choices")), "message"), "content")


def build_anthropic_request(description: str, config: LLMConfig) -> ProviderRequest:
    return ProviderRequest(
        url=ANTHROPIC_URL,
        headers={"x-api-key": config.api_key, "anthropic-version": ANTHROPIC_VERSION},
        json={
            "model": config.model,
            "max_tokens": ANTHROPIC_MAX_TOKENS,
            "system": SYSTEM_PROMPT,
            "messages": [{"role": "user", "content": get_user_prompt(description)}],
        },
    )


def extract_anthropic_text(payload: dict[str, Any]) -> str | None:
    return _get(_first(_get(payload, "content")), "text")


def build_google_request(description: str, config: LLMConfig) -> ProviderRequest:
    # Gemini has no system role in this API version, so the instruction is prefixed.
    return ProviderRequest(
        url=GOOGLE_URL.format(model=config.model),
        params={"key": config.api_key},
        json={
            "contents": [
                {"parts": [{"text": f"{SYSTEM_PROMPT}\n\n{get_user_prompt(description)}"}]}
            ],
            "generationConfig": {"temperature": TEMPERATURE},
        },
    )


def extract_google_text(payload: dict[str, Any]) -> str | None:
    candidate = _first(_get(payload, "candidates"))
    return _get(_first(_get(_get(candidate, "content"), "parts")), "text")


PROVIDERS: dict[str, ProviderSpec] = {
    "openai": ProviderSpec("OpenAI", build_openai_request, extract_openai_text),
    "anthropic": ProviderSpec("Anthropic", build_anthropic_request, extract_anthropic_text),
    "google": ProviderSpec("Google", build_google_request, extract_google_text),
}
