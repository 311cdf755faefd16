"""OfferScore API. Run with: uvicorn offerscore.main:app --reload"""

import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from offerscore.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "offerscore.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from offerscore.routers import offers
from offerscore.services.recommendation_service import recommendation_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: populate the in-memory catalog with demo offers
    if settings.seed_demo_offers:
        from offerscore.seed import seed_catalog
        from offerscore.services.offer_catalog import offer_catalog

        seed_catalog(offer_catalog, seed=settings.seed_random_seed)

    logger.info(f"Scoring engine: {recommendation_service.scoring_service.name}")

    yield


app = FastAPI(
    title="OfferScore",
    description="Vacation offer aggregator with group-personalised ranking",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(offers.router, prefix="/api/offers", tags=["offers"])


@app.get("/api/health")
async def health_check():
    return {
        "status": "ok",
        "service": "offerscore",
        "scoring_engine": recommendation_service.scoring_service.name,
    }
