from functools import lru_cache

from booking_webhook.core.config import Settings, settings
from booking_webhook.application.ports.sheet import SheetPort
from booking_webhook.application.use_cases.classify_request import ClassifyRequestUseCase
from booking_webhook.application.use_cases.forward_record import ForwardRecordUseCase
from booking_webhook.application.use_cases.handle_webhook import HandleWebhookUseCase
from booking_webhook.infrastructure.sheets.apps_script_sheet import AppsScriptSheet


def get_settings() -> Settings:
    return settings


@lru_cache
def get_sheet() -> SheetPort:
    config = get_settings()
    return AppsScriptSheet(
        endpoint_url=config.APPS_SCRIPT_URL,
        secret=config.APPS_SCRIPT_SECRET,
        timeout=config.APPS_SCRIPT_TIMEOUT_SECONDS,
    )


def build_handle_webhook_use_case(sheet: SheetPort) -> HandleWebhookUseCase:
    return HandleWebhookUseCase(
        classify_request=ClassifyRequestUseCase(),
        forward_record=ForwardRecordUseCase(sheet=sheet),
    )


def get_handle_webhook_use_case() -> HandleWebhookUseCase:
    return build_handle_webhook_use_case(get_sheet())

