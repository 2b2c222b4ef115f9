"""Generative-AI proxy endpoint."""
from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.models import GenerateRequest, GenerateResponse
from api.services.generate_service import GenerateError, generate_text
from api.utils import json_load

router = APIRouter(prefix="/api", tags=["generate"])


@router.post("/generate", response_model=GenerateResponse)
async def generate(request: Request) -> JSONResponse:
    """Forward a prompt to the remote model."""
    raw = await request.body()
    try:
        data = json_load(raw) if raw else {}
        # well-formed JSON that is not an object carries no prompt
        payload = GenerateRequest.model_validate(data if isinstance(data, dict) else {})
    except (ValueError, ValidationError):
        return JSONResponse(status_code=400, content={"error": "Ungültiges JSON"})

    try:
        text = await run_in_threadpool(generate_text, payload.prompt)
    except GenerateError as exc:
        return JSONResponse(status_code=500, content={"error": str(exc)})
    return JSONResponse(content={"text": text})
