from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from app.features.accessibility.exceptions import DecodeError, StatusError, TransportError
from app.platform.config import settings

ANALYZE_PATH = "/api/analyze-url"

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_url_param(url: str) -> str:
    return quote(url, safe=_URI_COMPONENT_SAFE)


class AnalyzerClient:
    """
    HTTP client for the remote accessibility analyzer.

    Opens one httpx.AsyncClient per call; the only timeout is the one
    configured on that client.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.ANALYZER_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.ANALYZER_TIMEOUT
        self.transport = transport

    def build_url(self, url: str) -> str:
        return f"{self.base_url}{ANALYZE_PATH}?url={encode_url_param(url)}"

    async def analyze_url(self, url: str) -> Dict[str, Any]:
        """
        Ask the analyzer to audit a URL.

        Args:
            url: Page to analyze, sent percent-encoded as the `url` query parameter

        Returns:
            Decoded JSON object from the analyzer

        Raises:
            TransportError: network failure
            StatusError: non-2xx response
            DecodeError: body is not a JSON object
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.build_url(url), headers={"Content-Type": "application/json"}
                )
        except httpx.HTTPError as e:
            raise TransportError(f"Connection error: {e}") from e

        if not response.is_success:
            raise StatusError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

        return data
