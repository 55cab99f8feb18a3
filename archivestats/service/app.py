"""FastAPI application entrypoint for archivestats service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import CONFIG_FILENAME, ConfigError, load_config
from ..errors import ArchiveNotFoundError, FatalIOError
from ..models import Report
from ..report import ReportBuilder, ReportWriter, report_to_dict


class ReportRequest(BaseModel):
    path: str
    write: bool = False
    workers: Optional[int] = None


class ReportStatsModel(BaseModel):
    discovered: int
    parsed: int
    missing_sidecars: int
    malformed_sidecars: int


class ReportResponse(BaseModel):
    report: Dict[str, Any]
    stats: ReportStatsModel
    report_path: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


ReportRunner = Callable[[ReportRequest], Tuple[Report, Optional[Path]]]


def _default_runner(payload: ReportRequest) -> Tuple[Report, Optional[Path]]:
    config = load_config(Path(payload.path) / CONFIG_FILENAME)
    builder = ReportBuilder(config, workers=payload.workers)
    report = builder.build(payload.path)
    report_path = None
    if payload.write:
        report_path = ReportWriter(config.output.directory, config.output.filename).write(report)
    return report, report_path


def create_app(runner: ReportRunner = _default_runner) -> FastAPI:
    """Create the FastAPI application exposing report generation."""

    app = FastAPI(title="Archive Stats Service", version="1.0.0")

    async def get_runner() -> ReportRunner:
        return runner

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/reports", response_model=ReportResponse)
    async def build_report(
        payload: ReportRequest,
        run: ReportRunner = Depends(get_runner),
    ) -> ReportResponse:
        # Report builds walk the filesystem; keep them off the event loop.
        loop = asyncio.get_running_loop()
        report, report_path = await loop.run_in_executor(None, run, payload)
        stats = report.stats
        return ReportResponse(
            report=report_to_dict(report),
            stats=ReportStatsModel(
                discovered=stats.discovered,
                parsed=stats.parsed,
                missing_sidecars=stats.missing_sidecars,
                malformed_sidecars=stats.malformed_sidecars,
            ),
            report_path=str(report_path) if report_path is not None else None,
        )

    @app.exception_handler(ArchiveNotFoundError)
    async def archive_not_found_handler(_: Any, exc: ArchiveNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(FatalIOError)
    async def fatal_io_error_handler(_: Any, exc: FatalIOError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    app = create_app()
    uvicorn.run(app, host=host, port=port)
