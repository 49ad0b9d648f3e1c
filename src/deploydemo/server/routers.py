from __future__ import annotations

from fastapi import APIRouter

from .schemas import (
    ECHO_PREFIX,
    SAMPLE_DATASET,
    HealthStatus,
    MessageEcho,
    MessageError,
    MessageIn,
    SampleDataset,
    utc_timestamp,
)

router = APIRouter(tags=["api"])


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    return HealthStatus(timestamp=utc_timestamp())


@router.get("/data", response_model=SampleDataset)
async def get_data() -> SampleDataset:
    return SAMPLE_DATASET


@router.post(
    "/message",
    response_model=MessageEcho,
    responses={422: {"model": MessageError, "description": "Missing or non-string message"}},
)
async def post_message(payload: MessageIn) -> MessageEcho:
    echo = ECHO_PREFIX + payload.message
    return MessageEcho(success=True, echo=echo, timestamp=utc_timestamp())
