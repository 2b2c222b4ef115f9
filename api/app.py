"""Main FastAPI application with modularized routes."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import CORS_ALLOW_ORIGINS, LOG_LEVEL
from api.routes import generate, phases, quiz
from core.logging_setup import setup_console_logging

setup_console_logging(LOG_LEVEL)

app = FastAPI(title="Shunt Quiz API")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def index() -> dict[str, object]:
    """Describe the available endpoints."""
    return {
        "title": app.title,
        "endpoints": ["/api/quiz", "/api/phases", "/api/cheatsheet", "/api/generate"],
    }


# Include routers
app.include_router(quiz.router)
app.include_router(phases.router)
app.include_router(generate.router)
