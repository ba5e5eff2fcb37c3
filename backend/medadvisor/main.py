"""
MedAdvisor Backend: symptom triage and OTC recommendation service.

ARCHITECTURE:
- Knowledge Base: fixed in-memory tables, built once at startup, read-only
- MedicineAdvisor: triage, ranking, aggregation, interaction and dosage checks
- Medicine catalog: SQLAlchemy table seeded from the knowledge base
- NotificationDispatcher: bounded worker pool for escalation messages

SAFETY MODEL:
- Triage and recommendations are returned side by side, never merged
- Output is advisory text; nothing here prescribes or dispenses

Illustrative data only. Not a medical device.
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from medadvisor.api.routes import medicines, recommendations
from medadvisor.core.audit import AuditLog
from medadvisor.core.config import settings
from medadvisor.core.logging_config import configure_logging
from medadvisor.db.init_db import init_db
from medadvisor.services.advisor import MedicineAdvisor
from medadvisor.services.knowledge_base import get_knowledge_base
from medadvisor.services.notification_service import NotificationDispatcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
    1. Build the knowledge base (one-time, before any request reads it)
    2. Create and seed the medicine catalog
    3. Start the notification worker pool

    Shutdown:
    1. Drain and stop the notification pool
    """
    configure_logging()

    kb = get_knowledge_base()
    app.state.advisor = MedicineAdvisor(kb, recommendation_limit=settings.RECOMMENDATION_LIMIT)
    init_db(kb=kb)
    app.state.notifier = NotificationDispatcher(max_workers=settings.NOTIFICATION_WORKERS)
    app.state.escalation_contact = settings.ESCALATION_CONTACT
    logger.info("[Startup] Advisor, catalog and notifier ready")

    yield

    app.state.notifier.shutdown(wait=settings.NOTIFICATION_SHUTDOWN_WAIT)


app = FastAPI(
    title="MedAdvisor API",
    description="Symptom triage, OTC medicine recommendations and medicine safety checks.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin"],
    max_age=600,
)


@app.middleware("http")
async def audit_and_headers(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    if request.url.path != "/health":
        AuditLog.log_api_call(
            request.url.path,
            request.method,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
    return response


app.include_router(recommendations.router, prefix="/recommendations", tags=["recommendations"])
app.include_router(medicines.router, prefix="/medicines", tags=["medicines"])


@app.get("/health")
def health():
    return {"status": "ok"}
