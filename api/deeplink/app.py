"""FastAPI application for the deep-link template builder.

Run:
    uv run uvicorn api.deeplink.app:app --reload --port 8000
"""

from fastapi import FastAPI

from api.deeplink.routes import router as api_router

app = FastAPI(title="Deep-Link Template Builder")

# API routes: GET /api/variables, POST /api/templates/*
app.include_router(api_router)
