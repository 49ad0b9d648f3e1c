from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, StrictStr

ECHO_PREFIX = "You said: "


def utc_timestamp() -> str:
    """
    Current UTC time as ISO-8601 with millisecond precision and a Z suffix,
    e.g. 2026-10-19T12:00:00.123Z
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HealthStatus(BaseModel):
    status: str = "ok"
    message: str = "Backend is running"
    timestamp: str = Field(..., description="ISO-8601 time the response was built")


class Item(BaseModel):
    """
    One entry of the sample dataset.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="1-based, ascending, unique within the dataset")
    name: str
    description: str


class SampleDataset(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    data: tuple[Item, ...]


class MessageIn(BaseModel):
    """
    Payload accepted by the echo endpoint.

    `message` is required and must be a JSON string; the empty string is allowed.
    """

    message: StrictStr = Field(..., description="Text to echo back")


class MessageEcho(BaseModel):
    success: bool = True
    echo: str
    timestamp: str


class MessageError(BaseModel):
    success: bool = False
    error: str


# Built once at import; frozen models make it read-only for every request.
SAMPLE_DATASET = SampleDataset(
    message="Hello from the backend!",
    data=(
        Item(id=1, name="Item 1", description="First item"),
        Item(id=2, name="Item 2", description="Second item"),
        Item(id=3, name="Item 3", description="Third item"),
    ),
)
