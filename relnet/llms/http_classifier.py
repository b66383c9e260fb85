import httpx
from loguru import logger

from relnet.llms.base import EventClassifier
from relnet.llms.errors import (
    ConnectionFailedError,
    MalformedResponseError,
    UnsupportedProviderError,
    error_for_status,
)
from relnet.llms.parsing import parse_analysis_response
from relnet.llms.providers import PROVIDERS, ProviderRequest
from relnet.llms.schemas import AIAnalysisResult, LLMConfig


class HttpEventClassifier(EventClassifier):
    """Classifies events with one HTTP POST to the configured provider."""

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 60.0) -> None:
        """Initialize the classifier.

        Args:
            client: HTTP client to send requests with. A new client is created per
                    call when not provided.
            timeout: Request timeout in seconds for clients created here
        """
        self.client = client
        self.timeout = timeout

    async def analyze(self, description: str, config: LLMConfig) -> AIAnalysisResult:
        provider = PROVIDERS.get(config.provider)
        if provider is None:
            raise UnsupportedProviderError(config.provider)

        request = provider.build_request(description, config)
        logger.info(f"Analyzing event with {provider.label} model {config.model}")
        response = await self._post(request)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Empty response from {provider.label}") from e

        content = provider.extract_text(payload) if isinstance(payload, dict) else None
        if not content or not isinstance(content, str):
            raise MalformedResponseError(f"Empty response from {provider.label}")

        result = parse_analysis_response(content)
        logger.debug(f"{provider.label} suggested {result.event_type}/{result.impact}")
        return result

    async def _post(self, request: ProviderRequest) -> httpx.Response:
        try:
            if self.client is not None:
                response = await self._send(self.client, request)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._send(client, request)
        except httpx.TransportError as e:
            logger.error(f"Connection to {request.url} failed: {e}")
            raise ConnectionFailedError() from e

        if not response.is_success:
            logger.error(f"Analysis request failed with status {response.status_code}")
            raise error_for_status(response.status_code, response.reason_phrase)

        return response

    @staticmethod
    async def _send(client: httpx.AsyncClient, request: ProviderRequest) -> httpx.Response:
        return await client.post(
            request.url,
            json=request.json,
            headers=request.headers,
            params=request.params,
        )
