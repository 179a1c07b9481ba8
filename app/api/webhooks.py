from __future__ import annotations

import json
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response
from pydantic import ValidationError

from app.application.dto.webhook_event import WebhookEventDTO
from app.application.exceptions import WebhookValidationError
from app.application.use_cases.handle_event import HandleEventUseCase
from app.domain.entities.message import InboundEvent
from app.infrastructure.line.webhook_verify import SIGNATURE_HEADER, verify_signature
from app.wiring.dependencies import get_channel_secret, get_handle_event_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


def parse_batch(body: bytes, signature: str | None, channel_secret: str) -> list[InboundEvent]:
    if not verify_signature(body, signature, channel_secret):
        raise WebhookValidationError("invalid signature")

    try:
        payload = json.loads(body.decode("utf-8"))
        batch = WebhookEventDTO.model_validate(payload)
    except (ValueError, ValidationError) as e:
        raise WebhookValidationError(f"malformed batch: {e}") from e
    return batch.extract_events()


@router.post("/linebot")
async def line_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    channel_secret: str = Depends(get_channel_secret),
    use_case: HandleEventUseCase = Depends(get_handle_event_use_case),
) -> Response:
    body = await request.body()
    try:
        events = parse_batch(body, request.headers.get(SIGNATURE_HEADER), channel_secret)
    except WebhookValidationError as e:
        logger.warning("Rejected webhook", extra={"status": 400, "error": str(e)})
        return Response(status_code=400)

    logger.info("Handling events", extra={"event_count": len(events)})

    for event in events:
        logger.info("/linebot called", extra={"event_type": event.event_type, "session_key": event.session_key})
        background_tasks.add_task(use_case.handle, event)

    return Response(status_code=200)
