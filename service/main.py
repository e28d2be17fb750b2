import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config import get_settings
from .log import setup_logging
from .models.batch import resolve_query, run_queries
from .models.graph import build_contacts, graph_stats
from .models.records import PathQuery, UserRecord
from .storage import InputFileError, load_users

logger = logging.getLogger(__name__)


# ---------- Schemas ----------
class BatchRequest(BaseModel):
    queries: List[PathQuery] = Field(..., description="(from, to) pairs, answered in order")


# ---------- App ----------
settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(title="Subscription paths")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _load_users() -> list[UserRecord]:
    path = get_settings().users_json
    try:
        users = load_users(path)
    except InputFileError as e:
        logger.error("%s", e)
        raise HTTPException(status_code=400, detail=str(e))
    if not users:
        raise HTTPException(status_code=400, detail="No users in database. Add user records first.")
    return users


def _build_graph():
    """Load the users file and build contacts + creation timestamps."""
    users = _load_users()
    contacts, created_at = build_contacts(users)
    return users, contacts, created_at


# --------- Endpoints ---------
@app.get("/")
async def root():
    return {"message": "Hello World"}


@app.get("/users", response_model=List[UserRecord])
def list_users():
    return _load_users()


@app.get("/graph")
def graph_summary():
    users, contacts, created_at = _build_graph()
    stats = graph_stats(contacts, created_at)
    stats["users"] = len(users)
    return stats


@app.post("/route")
def route(payload: PathQuery):
    """Shortest path between one pair of users."""
    _, contacts, created_at = _build_graph()
    return resolve_query(1, payload, contacts, created_at).to_json_dict()


@app.post("/generate-routes")
def generate_routes(payload: BatchRequest):
    """
    Shortest path for every query, ids 1..n in request order.
    """
    _, contacts, created_at = _build_graph()
    results = run_queries(payload.queries, contacts, created_at)
    return [r.to_json_dict() for r in results]
