from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finreports.app.api.v1.api import api_router
from finreports.app.core.config import settings
from finreports.app.core.logging_config import configure_logging
from finreports.app.middleware.language import LanguageMiddleware

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Financial Reports")

# ─── CORS: report consumers only issue GETs ──────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["Content-Type", "Accept", "Accept-Language"],
)

app.add_middleware(LanguageMiddleware)

app.include_router(api_router)
