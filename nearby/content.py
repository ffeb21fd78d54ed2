"""Fixed user-facing content: menus, the category tag table, messages.

Adding a category only needs an entry in CATEGORIES; the conversation graph
looks codes up here.
"""

from models import Button, Tag

RADIUS_PREFIX = "radius_"
RESET_CODE = "reset"

# code -> (button label, OpenStreetMap tags matched with OR)
CATEGORIES: dict[str, tuple[str, list[Tag]]] = {
    "police": ("🛡 Police", [Tag(key="amenity", value="police")]),
    "traffic": ("🚦 Traffic police", [Tag(key="highway", value="traffic_signals")]),
    "hospital": ("🏥 Hospital", [Tag(key="amenity", value="hospital")]),
    "places": ("🍽 Places to eat", [
        Tag(key="amenity", value="restaurant"),
        Tag(key="amenity", value="cafe"),
        Tag(key="amenity", value="fast_food"),
    ]),
    "hotels": ("🏨 Hotels", [
        Tag(key="tourism", value="hotel"),
        Tag(key="tourism", value="guest_house"),
        Tag(key="tourism", value="motel"),
    ]),
    "schools": ("🏫 Schools and kindergartens", [
        Tag(key="amenity", value="school"),
        Tag(key="amenity", value="kindergarten"),
    ]),
    "tourism": ("🗺 Tourism", [
        Tag(key="tourism", value="attraction"),
        Tag(key="historic", value="monument"),
    ]),
}

# Non-search actions, listed after the categories in the menu
SIDE_ACTIONS = {
    "weather": "🌦 Weather",
    "history": "🏛 City history",
    "emergency": "🚨 Emergency services",
    RESET_CODE: "🔄 Reset all requests",
}

EMERGENCY_TEXT = """📞 Emergency services of Uzbekistan:
🚓 Police: 102
🚒 Fire service: 101
🚑 Ambulance: 103
🆘 Unified emergency line: 112
☎️ Directory enquiries: 109"""

CLOSED_TEXT = "⏳ The bot works daily from {open:02d}:00 to {close:02d}:00. Please try again later."
ASK_RADIUS_TEXT = "Choose a search radius:"
RADIUS_SET_TEXT = "Radius set: {radius} km\nNow choose a category:"
SEND_LOCATION_FIRST_TEXT = "📍 Please send your location first"
SHARE_LOCATION_TEXT = "📍 Send me your location so I can help!"
UNKNOWN_CATEGORY_TEXT = "❌ Unknown category"
UNKNOWN_RADIUS_TEXT = "❌ Unknown search radius"
NOTHING_FOUND_TEXT = "❌ Nothing found nearby"
RESULTS_TEXT = "🔍 Here is what I found nearby:"
WEATHER_TEXT = "🔎 Choose a weather forecast source:"
HISTORY_TEXT = "🏛 Local history:"
RESET_TEXT = "🔄 Your data has been reset.\n📍 Please send your location again."


def format_radius(radius_km: float) -> str:
    return f"{radius_km:g}"


def reset_button() -> Button:
    return Button(label=SIDE_ACTIONS[RESET_CODE], payload=RESET_CODE)


def radius_menu(options: tuple[float, ...]) -> list[list[Button]]:
    """One row with a button per allowed radius."""
    return [[
        Button(label=f"{format_radius(r)} km", payload=f"{RADIUS_PREFIX}{format_radius(r)}")
        for r in options
    ]]


def category_menu() -> list[list[Button]]:
    rows = [[Button(label=label, payload=code)] for code, (label, _) in CATEGORIES.items()]
    rows += [[Button(label=label, payload=code)] for code, label in SIDE_ACTIONS.items()]
    return rows
