from dotenv import load_dotenv

# .env must be loaded before project modules create their loggers
load_dotenv()

from typing import Annotated  # noqa: E402

from fastapi import BackgroundTasks, Body, FastAPI  # noqa: E402

from config import load_settings  # noqa: E402
from graph import Conversation  # noqa: E402
from models import InboundEvent, OutboundAction  # noqa: E402
from nearby.delivery import WebhookSink  # noqa: E402
from nearby.log import set_log_level, setup_logger  # noqa: E402
from nearby.overpass import OverpassClient  # noqa: E402
from nearby.sessions import SessionStore  # noqa: E402

# ConfigurationError here stops the process before it serves anything
settings = load_settings()
set_log_level(settings.log_level)

logger = setup_logger(__name__)

sessions = SessionStore()
search_client = OverpassClient(
    settings.overpass_url,
    timeout=settings.overpass_timeout,
    query_timeout=settings.overpass_query_timeout,
)
conversation = Conversation(sessions, search_client, settings)
delivery = WebhookSink(settings.delivery_url) if settings.delivery_url else None

app = FastAPI(
    title="Nearby Assistant API",
    description="Location-based place search for chat transports",
    version="0.1.0",
)


@app.get("/")
async def root():
    return {"message": "Hello from Nearby Assistant"}


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/events", response_model=list[OutboundAction])
async def handle_event(
    event: Annotated[InboundEvent, Body(discriminator="type")],
    background_tasks: BackgroundTasks,
):
    """Run one inbound chat event through the conversation and return its replies."""
    actions = await conversation.handle(event)
    logger.info(f"Conversation {event.conversation_id}: {event.type} -> {len(actions)} actions")

    if delivery is not None:
        background_tasks.add_task(delivery.deliver, actions)

    return actions
