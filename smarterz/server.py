import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, ValidationError

from .aggregator import AggregationError, aggregate_batch
from .config import Settings
from .dashboard import DASHBOARD_HTML
from .progress import JsonFileProgressStore, ProgressStore
from .upstream import EduverseClient, UpstreamError

logger = logging.getLogger(__name__)


class MarkRequest(BaseModel):
    id: Optional[str] = None


def _failed(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


async def _item_id(request: Request) -> Optional[str]:
    """The `id` of a mark request body; None if the body is absent, not JSON or lacks one."""
    try:
        payload = await request.json()
        return MarkRequest.model_validate(payload).id or None
    except (ValueError, ValidationError):
        return None


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ProgressStore] = None,
    client: Optional[EduverseClient] = None,
) -> FastAPI:
    """
    Build the tracker app. Store and client default to the JSON cache file
    and the live API; pass fakes in to run against something else.
    """
    settings = settings or Settings()
    if store is None:
        store = JsonFileProgressStore(settings.cache_file)
        store.ensure()
    if client is None:
        client = EduverseClient(settings.api_base)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await client.aclose()

    app = FastAPI(title="Smarterz", lifespan=lifespan)
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.store = store
    app.state.client = client

    # ── Upstream proxy / aggregation ──────────────────────

    @app.get("/api/batches")
    async def batches():
        try:
            return await client.list_batches()
        except UpstreamError as e:
            logger.error("Error fetching batches: %s", e)
            return _failed("Failed to fetch batches")

    @app.get("/api/batch-full/{batch_id}")
    async def batch_full(batch_id: str):
        try:
            result = await aggregate_batch(client, batch_id)
        except AggregationError as e:
            logger.error("Error fetching batch %s: %s (%s)", batch_id, e, e.__cause__)
            return _failed("Failed to fetch batch details")
        return {"data": result.items}

    # ── Progress ──────────────────────────────────────────

    @app.get("/api/progress")
    def progress():
        return store.read()

    @app.post("/api/mark-done")
    async def mark_done(request: Request):
        item_id = await _item_id(request)
        if item_id is None:
            return JSONResponse(status_code=400, content={"error": "Missing id"})
        store.mark_done(item_id)
        return {"success": True}

    @app.post("/api/mark-undone")
    async def mark_undone(request: Request):
        item_id = await _item_id(request)
        if item_id is None:
            return JSONResponse(status_code=400, content={"error": "Missing id"})
        store.mark_undone(item_id)
        return {"success": True}

    # ── Dashboard ─────────────────────────────────────────

    @app.get("/", response_class=HTMLResponse)
    def index():
        return DASHBOARD_HTML

    return app
