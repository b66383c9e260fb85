from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LLMProvider = Literal["openai", "anthropic", "google"]


class LLMModel(BaseModel):
    id: str
    name: str
    provider: LLMProvider


AVAILABLE_MODELS: list[LLMModel] = [
    LLMModel(id="gpt-4o", name="GPT-4o", provider="openai"),
    LLMModel(id="gpt-4o-mini", name="GPT-4o Mini", provider="openai"),
    LLMModel(id="claude-sonnet-4-5-20250514", name="Claude 3.5 Sonnet", provider="anthropic"),
    LLMModel(id="claude-haiku-4-5-20251001", name="Claude 3.5 Haiku", provider="anthropic"),
    LLMModel(id="gemini-1.5-flash", name="Gemini 1.5 Flash", provider="google"),
]


class LLMConfig(BaseModel):
    provider: LLMProvider
    model: str = ""
    api_key: str = Field(repr=False)


class AIAnalysisResult(BaseModel):
    """Suggested classification of a workplace event."""

    model_config = ConfigDict(frozen=True)

    event_type: str = Field(..., description="One of the known event types")
    impact: str = Field(..., description="Positive, Negative, Neutral or Mixed")
    severity: int = Field(..., ge=1, le=10, description="1 (minor) to 10 (most severe)")
    summary: str = Field(..., description="One or two sentences on the political implications")
