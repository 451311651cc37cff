from __future__ import annotations

import logging
import os
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from .auth.dependencies import require_same_user, require_user
from .auth.models import LoginRequest, ProfileUpdate, SignupRequest, UserOut
from .auth.users import AccountStore, DuplicateUsernameError, get_account_store
from .llm.groq_client import GroqTextModel
from .llm.ranking import RankingClient
from .orders.models import OrderOut, OrderRequest
from .orders.store import OrderStore, get_order_store
from .recommendations.config import DEFAULT_ENGINE_CONFIG
from .recommendations.data_store import (
    CatalogUnavailableError,
    CsvMenuCatalog,
    CsvVendorDirectory,
)
from .recommendations.engine import RecommendationEngine
from .recommendations.models import (
    ChatRequest,
    ChatResponse,
    EnrichedItem,
    GeoPoint,
    MenuItem,
    NearbyVendor,
)

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="Food Ordering API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "food-ordering-secret-change-in-production"),
)


@lru_cache(maxsize=1)
def get_engine() -> RecommendationEngine:
    config = DEFAULT_ENGINE_CONFIG
    return RecommendationEngine(
        catalog=CsvMenuCatalog(config.menu_csv),
        vendors=CsvVendorDirectory(config.vendors_csv),
        ranker=RankingClient(GroqTextModel()),
        config=config,
    )


@app.exception_handler(CatalogUnavailableError)
def catalog_unavailable(request: Request, exc: CatalogUnavailableError) -> JSONResponse:
    logger.error("Catalog unavailable while serving %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Failed to fetch recommendations"})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Account endpoints ────────────────────────────────────────────────────


@app.post("/api/signup", response_model=UserOut, status_code=201)
def signup(
    body: SignupRequest,
    request: Request,
    accounts: AccountStore = Depends(get_account_store),
) -> dict:
    try:
        user = accounts.create(
            body.username,
            body.password,
            body.home_address,
            work_address=body.work_address,
            is_worker=body.is_worker,
        )
    except DuplicateUsernameError:
        raise HTTPException(status_code=409, detail="Username already taken")
    request.session["user"] = {"id": user["id"], "username": user["username"]}
    return user


@app.post("/api/login")
def login(
    body: LoginRequest,
    request: Request,
    accounts: AccountStore = Depends(get_account_store),
) -> dict:
    user = accounts.authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    session_user = {"id": user["id"], "username": user["username"]}
    request.session["user"] = session_user
    return {"status": "ok", "user": session_user}


@app.post("/api/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/api/users/me", response_model=UserOut)
def users_me(
    user: dict = Depends(require_user),
    accounts: AccountStore = Depends(get_account_store),
) -> dict:
    profile = accounts.find_by_id(user["id"])
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")
    return profile


@app.put("/api/users/{user_id}", response_model=UserOut)
def update_user(
    user_id: str,
    body: ProfileUpdate,
    request: Request,
    user: dict = Depends(require_user),
    accounts: AccountStore = Depends(get_account_store),
) -> dict:
    require_same_user(user_id, user)
    try:
        profile = accounts.update(user_id, **body.model_dump())
    except DuplicateUsernameError:
        raise HTTPException(status_code=409, detail="Username already taken")
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")
    request.session["user"] = {"id": profile["id"], "username": profile["username"]}
    return profile


# ── Order endpoints ──────────────────────────────────────────────────────


@app.post("/api/orders", response_model=OrderOut, status_code=201)
def create_order(
    body: OrderRequest,
    user: dict = Depends(require_user),
    orders: OrderStore = Depends(get_order_store),
) -> OrderOut:
    order = orders.create(user["id"], body)
    logger.info("Order %s created for user %s", order.id, user["id"])
    return order


@app.get("/api/orders/{user_id}", response_model=list[OrderOut])
def list_orders(
    user_id: str,
    user: dict = Depends(require_user),
    orders: OrderStore = Depends(get_order_store),
) -> list[OrderOut]:
    require_same_user(user_id, user)
    return orders.list_by_account(user_id)


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/api/chat", response_model=ChatResponse)
def chat(
    body: ChatRequest,
    engine: RecommendationEngine = Depends(get_engine),
) -> ChatResponse:
    message = (body.message or "").strip()
    meal_type = (body.meal_type or "").strip()
    if not message and not meal_type:
        raise HTTPException(status_code=400, detail="Message or meal type is required")

    user_location = body.user_location.to_geo_point() if body.user_location else None
    recommendations = engine.recommend_by_chat(
        message or None, meal_type or None, user_location,
    )
    return ChatResponse(recommendations=recommendations)


@app.get("/api/personalized-recommendations", response_model=list[EnrichedItem])
def personalized_recommendations(
    query: str | None = None,
    meal_type: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
    engine: RecommendationEngine = Depends(get_engine),
) -> list[EnrichedItem]:
    logger.info(
        "Personalized recommendations: query=%r meal_type=%r lat=%s lon=%s",
        query, meal_type, latitude, longitude,
    )
    return engine.recommend_by_query(
        (query or "").strip() or None,
        (meal_type or "").strip() or None,
        GeoPoint.from_pair(latitude, longitude),
    )


@app.get("/api/nearby-vendors", response_model=list[NearbyVendor])
def nearby_vendors(
    latitude: float,
    longitude: float,
    engine: RecommendationEngine = Depends(get_engine),
) -> list[NearbyVendor]:
    return engine.nearby_vendors(GeoPoint(latitude=latitude, longitude=longitude))


@app.get("/api/popular-items", response_model=list[MenuItem])
def popular_items(engine: RecommendationEngine = Depends(get_engine)) -> list[MenuItem]:
    return engine.popular_items()
