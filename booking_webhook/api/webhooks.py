from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from booking_webhook.api.schemas import FulfillmentResponseSchema
from booking_webhook.application.dto.webhook_request import WebhookRequestDTO
from booking_webhook.application.use_cases.handle_webhook import HandleWebhookUseCase
from booking_webhook.application.utils.replies import APOLOGY_REPLY
from booking_webhook.wiring.dependencies import get_handle_webhook_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Webhook running"


@router.post("/webhook", response_model=FulfillmentResponseSchema)
async def webhook(
    request: Request,
    use_case: HandleWebhookUseCase = Depends(get_handle_webhook_use_case),
) -> FulfillmentResponseSchema:
    body = await request.body()
    try:
        payload = json.loads(body.decode("utf-8")) if body else {}
        event = WebhookRequestDTO.model_validate(payload if isinstance(payload, dict) else {})
    except (ValueError, ValidationError):
        logger.warning("Unreadable webhook body; treating as empty request", exc_info=True)
        event = WebhookRequestDTO()

    intent_name = event.intent_name()
    logger.info("Webhook received", extra={"intent": intent_name or "<none>"})

    try:
        text = await run_in_threadpool(
            use_case.handle,
            intent_name,
            event.parameters(),
            event.query_text(),
        )
    except Exception as e:
        logger.exception("Webhook error", extra={"intent": intent_name, "error": str(e)})
        text = APOLOGY_REPLY

    return FulfillmentResponseSchema(fulfillmentText=text)
