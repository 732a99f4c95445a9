import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .routers import capture, health

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(title="Taskflow - Quick Capture", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(capture.router, prefix="/capture", tags=["capture"])


@app.get("/")
def root():
    return {"ok": True, "service": "capture", "version": "0.1.0"}
