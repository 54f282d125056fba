import logging

import uvicorn
from fastapi import FastAPI

from booking_webhook.api.webhooks import router as webhooks_router
from booking_webhook.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("intent", "domain", "booking_id", "status", "reason", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Booking Webhook", version="1.0.0")

app.include_router(webhooks_router, tags=["webhooks"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


def run() -> None:
    logger = logging.getLogger(__name__)
    logger.info(
        "Server started on %s ENV=%s sheet_configured=%s token_configured=%s",
        settings.PORT,
        settings.ENV,
        bool(settings.APPS_SCRIPT_URL),
        bool(settings.APPS_SCRIPT_SECRET),
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
