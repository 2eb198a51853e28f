import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# keep HTTP client debug noise out of the app log
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

# ✅ middlewares
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ models must be imported before create_all so their tables are registered
from database.db import Base, engine
from models import attendance as _attendance, courses as _courses, enrollments as _enrollments  # noqa: F401
from models import results as _results, reviews as _reviews, users as _users  # noqa: F401

# ✅ routers
from routers import attendance, auth, chat, courses, gpa, market, results, reviews, users

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS for the web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ request latency header (X-Latency-Ms)
app.add_middleware(TimingMiddleware)

# ✅ global error handlers (one JSON error envelope)
add_error_handlers(app)

# ✅ /api prefix for every router
app.include_router(auth.router,       prefix="/api")
app.include_router(users.router,      prefix="/api")
app.include_router(courses.router,    prefix="/api")
app.include_router(results.router,    prefix="/api")
app.include_router(gpa.router,        prefix="/api")
app.include_router(attendance.router, prefix="/api")
app.include_router(reviews.router,    prefix="/api")
app.include_router(chat.router,       prefix="/api")
app.include_router(market.router,     prefix="/api")


@app.on_event("startup")
def _create_tables():
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready (%s)", engine.url.render_as_string(hide_password=True))


# ✅ health check
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}


# ✅ root
@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} v{settings.APP_VERSION}"}
