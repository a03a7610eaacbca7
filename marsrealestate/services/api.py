from httpx import AsyncClient
from pydantic import TypeAdapter
from typing import List
from marsrealestate.config import settings
from marsrealestate.schemas.property import MarsProperty
from structlog import get_logger

logger = get_logger()

_properties_adapter = TypeAdapter(List[MarsProperty])

class MarsApiService:
    """Client for the Mars real-estate listings endpoint.

    Every failure (transport, non-2xx status, undecodable body) is raised to the
    caller; this class does no retrying and keeps no state between calls.
    """

    def __init__(self, client: AsyncClient | None = None, base_url: str | None = None, timeout: float | None = None):
        self._base = (base_url or settings.MARS_API_URL).rstrip("/")
        self._owns_client = client is None
        self._client = client or AsyncClient(
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT
        )

    async def get_properties(self, filter_value: str) -> List[MarsProperty]:
        url = f"{self._base}/realestate"
        response = await self._client.get(url, params={"filter": filter_value})
        logger.info(
            "Mars API upstream response",
            upstream=url,
            filter=filter_value,
            status_code=response.status_code,
        )
        response.raise_for_status()
        # json() raises ValueError on a non-JSON body, validation raises on a schema mismatch
        properties = _properties_adapter.validate_python(response.json())
        logger.info("Fetched Mars properties", filter=filter_value, count=len(properties))
        return properties

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()
