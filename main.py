import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from logging_config import setup_logging
from api.casing import router as casing_router
from api.color import router as color_router
from api.pages import router as pages_router
from services.casing import CASING_RULES

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("%s ready with %d casing rules", settings.app_name, len(CASING_RULES))
    yield


app = FastAPI(
    title=settings.app_name,
    description="A bespoke kit of small text tools: case and colour conversion",
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

app.include_router(pages_router)
app.include_router(casing_router)
app.include_router(color_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
