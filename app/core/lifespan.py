from contextlib import asynccontextmanager
import json
import logging

from app.core.history_store import get_history_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    store = get_history_store()
    history_size = len(store.load_all())
    logger.info(json.dumps({"event": "history_loaded", "analyses": history_size}))
    yield
    store.close()
