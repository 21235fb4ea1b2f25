import logging
import os

from fastapi import FastAPI

from api.routers import notes, ops, tags, tasks

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Logging configuration
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="mind-dump")

app.include_router(notes.router)
app.include_router(tasks.router)
app.include_router(tags.router)
app.include_router(ops.router)


@app.on_event("startup")
async def startup() -> None:
    logger.info(f"Mind Dump service started (log level {LOG_LEVEL})")
