import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from splitbook.core.config import settings
from splitbook.db.session import connect_to_store, close_store
from splitbook.api.v1.api import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    connect_to_store()
    yield
    close_store()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.DESCRIPTION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    return {"message": "Welcome to Splitbook API"}

app.include_router(api_router, prefix=settings.API_V1_STR)


def run():
    """Console entry point."""
    uvicorn.run("splitbook.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
