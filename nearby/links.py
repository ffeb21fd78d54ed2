"""External links built from coordinates: weather, local history, maps."""

from urllib.parse import quote

from models import Link, Location, Place
from nearby.query import format_coordinate

WIKIPEDIA_SEARCH_URL = "https://ru.wikipedia.org/wiki/Special:Search"


def weather_links(location: Location) -> list[Link]:
    lat, lon = format_coordinate(location.latitude), format_coordinate(location.longitude)
    return [
        Link(label="🌦 Yandex", url=f"https://yandex.uz/pogoda/?lat={lat}&lon={lon}"),
        Link(label="🌪 Windy", url=f"https://www.windy.com/{lat}/{lon}"),
    ]


def history_link(location: Location) -> Link:
    """Wikipedia full-text search for the coordinates."""
    url = f"{WIKIPEDIA_SEARCH_URL}?search={format_coordinate(location.latitude)}+{format_coordinate(location.longitude)}"
    return Link(label="🔗 Open Wikipedia search", url=url)


def place_links(place: Place) -> list[Link]:
    """Yandex Maps (ll is lon,lat) and Google Maps (query is lat,lon) links."""
    lat, lon = format_coordinate(place.location.latitude), format_coordinate(place.location.longitude)
    return [
        Link(
            label=f"📍 Yandex: {place.name}",
            url=f"https://yandex.uz/maps/?ll={lon}%2C{lat}&z=16&text={quote(place.name, safe='')}",
        ),
        Link(
            label=f"🌍 Google: {place.name}",
            url=f"https://www.google.com/maps/search/?api=1&query={lat},{lon}",
        ),
    ]
