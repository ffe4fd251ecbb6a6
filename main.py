from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# silence HTTP client debug logs
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


# ✅ middleware imports
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ router imports
from routers import (
    attendance, classes, config, exam_results, meta,
    output_of_work, reports, students, subjects,
)

from database.seed import load_store
from database.store import set_store

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS (frontend dashboard)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ request latency middleware (adds X-Latency-Ms response header)
app.add_middleware(TimingMiddleware)

# ✅ global error handlers (consistent JSON error format)
add_error_handlers(app)

# ✅ /v1 prefixed routers
app.include_router(attendance.router,     prefix="/v1")
app.include_router(classes.router,        prefix="/v1")
app.include_router(config.router,         prefix="/v1")
app.include_router(exam_results.router,   prefix="/v1")
app.include_router(meta.router,           prefix="/v1")
app.include_router(output_of_work.router, prefix="/v1")
app.include_router(reports.router,        prefix="/v1")
app.include_router(students.router,       prefix="/v1")
app.include_router(subjects.router,       prefix="/v1")

# ✅ health check
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}

@app.on_event("startup")
def _seed_store():
    if settings.SEED_ON_STARTUP:
        set_store(load_store())
    else:
        logger.info("SEED_ON_STARTUP disabled, starting with an empty store")

# ✅ root endpoint
@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} - report card computation"}
