import operator
from datetime import datetime, timezone
from typing import Annotated, Callable

from typing_extensions import TypedDict

from langgraph.graph import StateGraph, START, END
from langchain_core.runnables import RunnableConfig

from config import Settings
from models import (
    Button,
    ButtonEvent,
    Event,
    LocationEvent,
    OutboundAction,
    Place,
    SendLinks,
    SendText,
    Session,
    TextEvent,
)
from nearby import content
from nearby.errors import UserInputError
from nearby.hours import is_open
from nearby.links import history_link, place_links, weather_links
from nearby.log import setup_logger
from nearby.overpass import OverpassClient
from nearby.sessions import SessionStore

logger = setup_logger(__name__)


class State(TypedDict):
    """State schema for the conversation graph (one run per inbound event)."""
    event: LocationEvent | ButtonEvent | TextEvent
    now: datetime
    open: bool
    actions: Annotated[list, operator.add]


# Button codes with a dedicated node; everything else is treated as a category
BUTTON_ROUTES = {
    "weather": "weather",
    "history": "history",
    "emergency": "emergency",
    content.RESET_CODE: "reset",
}

HANDLER_NODES = ["closed", "location", "radius", "category", "weather", "history", "emergency", "reset", "text"]


def _deps(config: RunnableConfig) -> tuple[SessionStore, OverpassClient, Settings]:
    configurable = config["configurable"]
    return configurable["sessions"], configurable["search"], configurable["settings"]


def _say(state: State, text: str, buttons: list[list[Button]] | None = None) -> dict:
    return {"actions": [SendText(conversation_id=state["event"].conversation_id, text=text, buttons=buttons)]}


def _require_location(session: Session | None):
    if session is None or session.location is None:
        raise UserInputError(content.SEND_LOCATION_FIRST_TEXT)
    return session.location


def render_places(state: State, places: list[Place], limit: int = 5) -> dict:
    """Two map buttons per place (first `limit` places), then a reset row."""
    if not places:
        return _say(state, content.NOTHING_FOUND_TEXT)

    rows = []
    for place in places[:limit]:
        rows.append([Button(label=link.label, payload=link.url, kind="url") for link in place_links(place)])
    rows.append([content.reset_button()])
    return _say(state, content.RESULTS_TEXT, rows)


# --- Nodes ---


def gate(state: State, config: RunnableConfig):
    """Check the operating window before anything touches the session store."""
    _, _, settings = _deps(config)
    return {"open": is_open(state["now"], settings.utc_offset_hours, settings.open_hour, settings.close_hour)}


def route_event(state: State) -> str:
    """Pick the handler node for the inbound event."""
    if not state["open"]:
        return "closed"

    event = state["event"]
    if isinstance(event, LocationEvent):
        return "location"
    if isinstance(event, TextEvent):
        return "text"
    if event.code.startswith(content.RADIUS_PREFIX):
        return "radius"
    return BUTTON_ROUTES.get(event.code, "category")


def closed(state: State, config: RunnableConfig):
    _, _, settings = _deps(config)
    return _say(state, content.CLOSED_TEXT.format(open=settings.open_hour, close=settings.close_hour))


def location(state: State, config: RunnableConfig):
    """Store the shared location and ask for a radius."""
    sessions, _, settings = _deps(config)
    event: LocationEvent = state["event"]
    sessions.set_location(event.conversation_id, event.location)
    return _say(state, content.ASK_RADIUS_TEXT, content.radius_menu(settings.radius_options))


def radius(state: State, config: RunnableConfig):
    """Store the chosen radius and show the category menu."""
    sessions, _, settings = _deps(config)
    event: ButtonEvent = state["event"]

    try:
        radius_km = float(event.code.removeprefix(content.RADIUS_PREFIX))
    except ValueError:
        raise UserInputError(content.UNKNOWN_RADIUS_TEXT) from None
    if radius_km not in settings.radius_options:
        raise UserInputError(content.UNKNOWN_RADIUS_TEXT)

    sessions.set_radius(event.conversation_id, radius_km)
    text = content.RADIUS_SET_TEXT.format(radius=content.format_radius(radius_km))
    return _say(state, text, content.category_menu())


async def category(state: State, config: RunnableConfig):
    """Search the chosen category around the stored location."""
    sessions, search, settings = _deps(config)
    event: ButtonEvent = state["event"]

    session = sessions.get(event.conversation_id)
    center = _require_location(session)
    if event.code not in content.CATEGORIES:
        raise UserInputError(content.UNKNOWN_CATEGORY_TEXT)

    _, tags = content.CATEGORIES[event.code]
    radius_km = session.radius_km or settings.default_radius_km
    places = await search.search(center, radius_km, tags)
    logger.info(f"Conversation {event.conversation_id}: {event.code} -> {len(places)} places")

    return render_places(state, places, settings.max_results)


def weather(state: State, config: RunnableConfig):
    sessions, _, _ = _deps(config)
    center = _require_location(sessions.get(state["event"].conversation_id))
    action = SendLinks(
        conversation_id=state["event"].conversation_id,
        text=content.WEATHER_TEXT,
        links=weather_links(center),
    )
    return {"actions": [action]}


def history(state: State, config: RunnableConfig):
    sessions, _, _ = _deps(config)
    center = _require_location(sessions.get(state["event"].conversation_id))
    action = SendLinks(
        conversation_id=state["event"].conversation_id,
        text=content.HISTORY_TEXT,
        links=[history_link(center)],
    )
    return {"actions": [action]}


def emergency(state: State):
    return _say(state, content.EMERGENCY_TEXT)


def reset(state: State, config: RunnableConfig):
    sessions, _, _ = _deps(config)
    sessions.clear(state["event"].conversation_id)
    return _say(state, content.RESET_TEXT)


def text(state: State):
    return _say(state, content.SHARE_LOCATION_TEXT)


# Build the graph
graph_builder = StateGraph(State)
graph_builder.add_node("gate", gate)
graph_builder.add_node("closed", closed)
graph_builder.add_node("location", location)
graph_builder.add_node("radius", radius)
graph_builder.add_node("category", category)
graph_builder.add_node("weather", weather)
graph_builder.add_node("history", history)
graph_builder.add_node("emergency", emergency)
graph_builder.add_node("reset", reset)
graph_builder.add_node("text", text)

graph_builder.add_edge(START, "gate")
graph_builder.add_conditional_edges("gate", route_event, HANDLER_NODES)
for node in HANDLER_NODES:
    graph_builder.add_edge(node, END)

graph = graph_builder.compile()


class Conversation:
    """Entry point: one graph run per inbound event, returning outbound actions."""

    def __init__(
        self,
        sessions: SessionStore,
        search: OverpassClient,
        settings: Settings,
        clock: Callable[[], datetime] | None = None,
    ):
        self.sessions = sessions
        self.search = search
        self.settings = settings
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def handle(self, event: Event) -> list[OutboundAction]:
        config = {
            "configurable": {
                "sessions": self.sessions,
                "search": self.search,
                "settings": self.settings,
            }
        }
        try:
            result = await graph.ainvoke({"event": event, "now": self.clock(), "actions": []}, config=config)
        except UserInputError as e:
            return [SendText(conversation_id=event.conversation_id, text=e.message)]
        return result["actions"]
