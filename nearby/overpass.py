"""
Overpass Place Search

Finds OpenStreetMap nodes near a point via the public Overpass API.
No API key required.

https://wiki.openstreetmap.org/wiki/Overpass_API
"""

import httpx

from models import Location, Place, Tag
from nearby.errors import SearchServiceError
from nearby.log import setup_logger
from nearby.query import build_query

logger = setup_logger(__name__)

UNKNOWN_NAME = "Unknown"


def parse_elements(data: object) -> list[Place]:
    """Turn an Overpass JSON document into places.

    Raises SearchServiceError when the document has no `elements` list.
    Elements without numeric lat/lon are skipped; a missing name becomes
    UNKNOWN_NAME.
    """
    if not isinstance(data, dict) or not isinstance(data.get("elements"), list):
        raise SearchServiceError("Response has no 'elements' list")

    places = []
    for element in data["elements"]:
        if not isinstance(element, dict):
            continue
        lat, lon = element.get("lat"), element.get("lon")
        if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
            logger.debug(f"Skipping element without coordinates: {element.get('id')}")
            continue

        tags = element.get("tags")
        name = tags.get("name") if isinstance(tags, dict) else None
        if not isinstance(name, str) or not name.strip():
            name = UNKNOWN_NAME

        try:
            places.append(Place(name=name, location=Location(latitude=lat, longitude=lon)))
        except ValueError:
            logger.debug(f"Skipping element with out-of-range coordinates: {lat}, {lon}")

    return places


class OverpassClient:
    """Runs bounding-box tag searches against an Overpass interpreter endpoint.

    Every call to `search` makes at most one HTTP request. Failures of any kind
    are logged and reported as an empty result.
    """

    def __init__(
        self,
        url: str = "https://overpass-api.de/api/interpreter",
        timeout: float = 30.0,
        query_timeout: int = 25,
        client: httpx.AsyncClient | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self.query_timeout = query_timeout
        self._client = client

    async def search(self, location: Location, radius_km: float, tags: list[Tag]) -> list[Place]:
        """Places tagged with any of `tags` within radius_km of location."""
        query = build_query(location, radius_km, tags, timeout=self.query_timeout)

        try:
            data = await self._post(query)
            places = parse_elements(data)
        except SearchServiceError as e:
            logger.warning(f"Overpass search failed: {e.message}", extra=e.details)
            return []

        logger.info(f"Overpass returned {len(places)} places within {radius_km} km")
        return places

    async def _post(self, query: str) -> object:
        try:
            if self._client is not None:
                response = await self._client.post(self.url, data={"data": query}, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, data={"data": query})
        except httpx.HTTPError as e:
            raise SearchServiceError(f"Request error: {e!r}") from e

        if not response.is_success:
            raise SearchServiceError(
                f"HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )

        try:
            return response.json()
        except ValueError as e:
            raise SearchServiceError("Response body is not valid JSON") from e
