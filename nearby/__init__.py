from .hours import is_open
from .links import history_link, place_links, weather_links
from .overpass import OverpassClient
from .query import bounding_box, build_query
from .sessions import SessionStore

__all__ = [
    "is_open",
    "history_link",
    "place_links",
    "weather_links",
    "OverpassClient",
    "bounding_box",
    "build_query",
    "SessionStore",
]
