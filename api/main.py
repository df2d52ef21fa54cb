from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from pathlib import Path
import logging
import sys
import threading
from typing import Optional

# ----- Ensure local package import (src/vies) without editable install -----
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from vies.columns import COLUMN_COUNT, parse_sort_option
from vies.config import Settings
from vies.engine import QueryEngine
from vies.fetch import FetchError, fetch_with_fallback
from vies.present import render_headers, render_row

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class APISortState(BaseModel):
    column: int
    direction: str
    option: str


class APIRows(BaseModel):
    query: str
    sort: APISortState
    count: int
    rows: list[list[dict]]


class APIRefresh(BaseModel):
    rows_loaded: int
    sort: APISortState


# ----- Session (one engine per process) -----
_engine = QueryEngine()
_engine_lock = threading.Lock()
settings = Settings.from_env()


def get_engine() -> QueryEngine:
    return _engine


def fetch_sheet() -> str:
    return fetch_with_fallback(settings.sheet_url, settings.proxies, timeout=settings.timeout)


def _sort_state(engine: QueryEngine) -> APISortState:
    s = engine.sort_state
    return APISortState(column=s.column, direction=s.direction.value, option=s.option)


def _require_loaded(engine: QueryEngine) -> None:
    if not engine.loaded:
        raise HTTPException(status_code=503, detail="No data loaded; POST /refresh first")


# ----- FastAPI app -----
app = FastAPI(title="Vies API")


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Vies API: try POST /refresh then /rows?q=fissura&sort=2-asc"


@app.post("/refresh", response_model=APIRefresh)
def refresh(engine: QueryEngine = Depends(get_engine)):
    try:
        text = fetch_sheet()
    except FetchError as exc:
        logger.error("Fetch error: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc))
    with _engine_lock:
        count = engine.load_text(text)
        return APIRefresh(rows_loaded=count, sort=_sort_state(engine))


@app.get("/rows", response_model=APIRows)
def rows(
    q: str = "",
    sort: Optional[str] = Query(None, description="Dropdown option such as '2-asc'"),
    engine: QueryEngine = Depends(get_engine),
):
    _require_loaded(engine)
    # not read-only: q and sort update the session's query and stored order,
    # like typing in the search box and picking a dropdown option
    with _engine_lock:
        if sort is not None:
            try:
                column, direction = parse_sort_option(sort)
            except ValueError as exc:
                raise HTTPException(status_code=422, detail=str(exc))
            engine.sort(column, direction)
        engine.set_query(q)
        snap = engine.snapshot()
    return APIRows(
        query=snap.query,
        sort=APISortState(column=snap.sort.column, direction=snap.sort.direction.value, option=snap.sort.option),
        count=len(snap.rows),
        rows=[render_row(r) for r in snap.rows],
    )


@app.post("/sort/{column}", response_model=APISortState)
def sort_by_header(column: int, engine: QueryEngine = Depends(get_engine)):
    _require_loaded(engine)
    if not 0 <= column < COLUMN_COUNT:
        raise HTTPException(status_code=422, detail=f"Column {column} out of range")
    with _engine_lock:
        engine.request_sort(column)  # unsortable columns leave the state unchanged
        return _sort_state(engine)


@app.get("/sort")
def sort_state(engine: QueryEngine = Depends(get_engine)):
    return {
        "sort": _sort_state(engine).model_dump(),
        "headers": render_headers(engine.sort_state),
    }
