"""Main FastAPI server for the realtime transcription relay."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse

from livescribe.state import RuntimeDeps
from livescribe.runtime.logging import configure_logging
from livescribe.config.logging import LOG_LEVEL
from livescribe.config.websocket import HOST, PORT, WS_ENDPOINT_PATH
from livescribe.runtime.dependencies import build_runtime_deps
from livescribe.handlers.websocket.guard import UpgradePathGuard
from livescribe.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

configure_logging()


def create_app(deps_factory: Callable[[], RuntimeDeps] = build_runtime_deps) -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.runtime_deps = deps_factory()
        logger.info("runtime: ready")
        yield

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.add_middleware(UpgradePathGuard, path=WS_ENDPOINT_PATH)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.websocket(WS_ENDPOINT_PATH)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        runtime_deps = getattr(app.state, "runtime_deps", None)
        if runtime_deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, runtime_deps)

    return app


app = create_app()


def run_server() -> None:
    logger.info("listening on %s:%s%s", HOST, PORT, WS_ENDPOINT_PATH)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower(), access_log=False)


if __name__ == "__main__":
    run_server()
