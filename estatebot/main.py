from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from .routers.chat import router as chat_router
from .routers.auth import router as auth_router
from .routers.valuation import router as valuation_router

# Core modules
from .core.config import settings
from .core.logging import configure_logging, CorrelationIdMiddleware
from .core.metrics import PromMiddleware, metrics_endpoint

# Domain wiring
from .data.chat_store import chat_store
from .data.user_store import user_store
from .models.rule_model import RuleBasedModel
from .services.auth_service import AuthService
from .services.chat_service import ChatService
from .services.dialogue_service import DialogueService

def create_app() -> FastAPI:
    """
    App factory so tests and ASGI servers can instantiate cleanly.
    """
    configure_logging()  # Set up JSON logs + request-id filter

    app = FastAPI(
        title="EstateBot",
        version="1.0.0",
        description="Rule-based Indian real estate assistant with deterministic property valuation.",
    )

    # CORS: the chat widget is served from another origin and sends the token cookie.
    allow_origins = [o.strip() for o in settings.ALLOW_ORIGINS.split(",")] if settings.ALLOW_ORIGINS else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["ETag","X-Request-Id"],
    )

    # Observability middlewares
    app.add_middleware(CorrelationIdMiddleware)  # Adds/propagates X-Request-Id
    if settings.PROMETHEUS_ENABLED:
        app.add_middleware(PromMiddleware)       # Records req/latency metrics

    # One instance of each per app: stores hold the file locks
    model = RuleBasedModel()
    app.state.valuation_model = model
    app.state.chat_service = ChatService(DialogueService(model=model), chat_store())
    app.state.auth_service = AuthService(user_store())

    # Meta routes
    @app.get("/v1/health", tags=["meta"])
    def health():
        return {"status": "ok"}

    @app.get("/v1/ping", tags=["meta"])
    def ping():
        return {"pong": True}

    if settings.PROMETHEUS_ENABLED:
        # Standard Prometheus scrape endpoint
        app.add_route("/v1/metrics", metrics_endpoint, methods=["GET"])

    # Business routes
    app.include_router(chat_router, prefix="/v1", tags=["chat"])
    app.include_router(auth_router, prefix="/v1", tags=["auth"])
    app.include_router(valuation_router, prefix="/v1", tags=["valuation"])

    return app

app = create_app()
