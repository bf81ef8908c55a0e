"""FastAPI application entrypoint for alignscan service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from ..engine import AlignmentEngine
from ..postproc.report import ReportRenderer

TOOL_NAME = "alignment_engineering"


class AlignmentRequest(BaseModel):
    project_path: str
    stated_purpose: str = ""


class AlignmentResponse(BaseModel):
    tool: str = TOOL_NAME
    analysis: Dict[str, Any]


class HealthResponse(BaseModel):
    status: str


def _default_engine() -> AlignmentEngine:
    return AlignmentEngine()


def create_app(
    engine_factory: Callable[[], AlignmentEngine] = _default_engine,
) -> FastAPI:
    """Create the FastAPI application exposing alignment analysis."""

    app = FastAPI(title="alignscan", version="1.0.0")
    renderer = ReportRenderer()

    async def get_engine() -> AlignmentEngine:
        # New engine per request; analyses share no state.
        return engine_factory()

    async def _analyze(engine: AlignmentEngine, payload: AlignmentRequest) -> Dict[str, Any]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, engine.engineer_alignment, payload.project_path, payload.stated_purpose
        )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/alignment", response_model=AlignmentResponse)
    async def alignment(
        payload: AlignmentRequest,
        engine: AlignmentEngine = Depends(get_engine),
    ) -> Any:
        report = await _analyze(engine, payload)
        if "error" in report:
            return JSONResponse(
                status_code=404,
                content={"detail": report["error"], "timestamp": report["timestamp"]},
            )
        return AlignmentResponse(analysis=report)

    @app.post("/alignment/report", response_class=PlainTextResponse)
    async def alignment_report(
        payload: AlignmentRequest,
        engine: AlignmentEngine = Depends(get_engine),
    ) -> PlainTextResponse:
        report = await _analyze(engine, payload)
        status_code = 404 if "error" in report else 200
        return PlainTextResponse(
            renderer.render(report), status_code=status_code, media_type="text/markdown"
        )

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    uvicorn.run(create_app(), host=host, port=port)
