import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from slotbook.api.pages import router as pages_router
from slotbook.core.config import settings
from slotbook.wiring.dependencies import close_booking_api


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("path", "status", "service_id", "reservation_id", "slot_count", "reason", "error"):
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


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_booking_api()


app = FastAPI(title="Slotbook", version="1.0.0", lifespan=lifespan)

app.include_router(pages_router, tags=["booking"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
