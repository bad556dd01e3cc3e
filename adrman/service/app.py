"""FastAPI application exposing adrman operations to editor integrations."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, List, Optional, TypeVar

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..errors import AdrError
from ..manager import AdrManager
from ..models import InitializationOutcome

T = TypeVar("T")

ManagerFactory = Callable[[List[str], Optional[str]], AdrManager]


class RootsRequest(BaseModel):
    roots: List[str] = Field(default_factory=list)
    adr_directory: Optional[str] = None


class InitRequest(BaseModel):
    path: str
    adr_directory: Optional[str] = None
    refill: bool = False


class RootStatus(BaseModel):
    root: str
    adr_directory: str
    exists: bool


class ExistsResponse(BaseModel):
    results: List[RootStatus]


class InitResponse(BaseModel):
    outcome: str
    message: str
    adr_directory: str


class AdrDocumentModel(BaseModel):
    root: str
    name: str
    path: str
    content: str


class AdrsResponse(BaseModel):
    documents: List[AdrDocumentModel]


class HealthResponse(BaseModel):
    status: str


def _default_manager(paths: List[str], adr_directory: Optional[str]) -> AdrManager:
    return AdrManager.from_paths(list(paths), adr_directory=adr_directory)


async def _run_blocking(func: Callable[[], T]) -> T:
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:  # pragma: no cover - fallback path when not in async context
        return func()
    return await loop.run_in_executor(None, func)


def create_app(manager_factory: ManagerFactory = _default_manager) -> FastAPI:
    """Create the FastAPI application exposing adrman operations."""

    app = FastAPI(title="adrman", version="0.1.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/exists", response_model=ExistsResponse)
    async def exists(payload: RootsRequest) -> ExistsResponse:
        def _check() -> List[RootStatus]:
            manager = manager_factory(payload.roots, payload.adr_directory)
            return [
                RootStatus(
                    root=root.name,
                    adr_directory=str(manager.adr_directory_for(root)),
                    exists=manager.adr_directory_exists(root),
                )
                for root in manager.workspace.roots
            ]

        return ExistsResponse(results=await _run_blocking(_check))

    @app.post("/init", response_model=InitResponse)
    async def init_adr_directory(payload: InitRequest) -> InitResponse:
        def _init() -> tuple[InitializationOutcome, Path]:
            manager = manager_factory([payload.path], payload.adr_directory)
            outcome = manager.initialize(confirm=lambda _message: payload.refill)
            return outcome, manager.adr_directory_for(manager.workspace.roots[0])

        outcome, location = await _run_blocking(_init)
        return InitResponse(
            outcome=outcome.value,
            message=outcome.message,
            adr_directory=str(location),
        )

    @app.post("/adrs", response_model=AdrsResponse)
    async def list_adrs(payload: RootsRequest) -> AdrsResponse:
        def _collect() -> List[AdrDocumentModel]:
            manager = manager_factory(payload.roots, payload.adr_directory)
            return [
                AdrDocumentModel(
                    root=document.root.name,
                    name=document.name,
                    path=str(document.path),
                    content=document.content,
                )
                for document in manager.collect_all()
            ]

        return AdrsResponse(documents=await _run_blocking(_collect))

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(
        _: Any, exc: NotADirectoryError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(OSError)
    async def os_error_handler(
        _: Any, exc: OSError
    ) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(AdrError)
    async def adr_error_handler(
        _: Any, exc: AdrError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
