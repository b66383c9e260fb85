from typing import Protocol

from relnet.llms.schemas import AIAnalysisResult, LLMConfig


class EventClassifier(Protocol):
    async def analyze(self, description: str, config: LLMConfig) -> AIAnalysisResult:
        """Classify a free-text event description.

        Raises:
            ClassificationError: If the call fails or the response cannot be parsed
        """
        ...
