from typing import Annotated, Literal

from pydantic import BaseModel, Field

ConversationId = int | str


class Location(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class Tag(BaseModel):
    """A key=value pair from the OpenStreetMap tag schema, e.g. amenity=cafe."""

    key: str
    value: str


class Place(BaseModel):
    name: str
    location: Location


class BoundingBox(BaseModel):
    south: float
    north: float
    west: float
    east: float


class Session(BaseModel):
    conversation_id: ConversationId
    location: Location | None = None
    radius_km: float | None = None


# --- Inbound events ---


class LocationEvent(BaseModel):
    type: Literal["location"] = "location"
    conversation_id: ConversationId
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    @property
    def location(self) -> Location:
        return Location(latitude=self.latitude, longitude=self.longitude)


class ButtonEvent(BaseModel):
    type: Literal["button"] = "button"
    conversation_id: ConversationId
    code: str


class TextEvent(BaseModel):
    type: Literal["text"] = "text"
    conversation_id: ConversationId
    text: str


InboundEvent = LocationEvent | ButtonEvent | TextEvent

# Tagged on `type`; the HTTP surface applies the same tag through Body(discriminator="type")
Event = Annotated[InboundEvent, Field(discriminator="type")]


# --- Outbound actions ---


class Button(BaseModel):
    """An inline button. Callback payloads come back as ButtonEvent.code."""

    label: str
    payload: str
    kind: Literal["callback", "url"] = "callback"


class Link(BaseModel):
    label: str
    url: str


class SendText(BaseModel):
    type: Literal["send_text"] = "send_text"
    conversation_id: ConversationId
    text: str
    buttons: list[list[Button]] | None = None  # rows of buttons


class SendLinks(BaseModel):
    type: Literal["send_links"] = "send_links"
    conversation_id: ConversationId
    text: str
    links: list[Link]


OutboundAction = Annotated[SendText | SendLinks, Field(discriminator="type")]
