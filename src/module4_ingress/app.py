# file: src/module4_ingress/app.py
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from src.module0_config import load_config
from src.module3_transfer import TransferDispatcher, TransferPipeline, build_pipeline

from . import routes

# To run this with uvicorn:
# uvicorn --factory src.module4_ingress.app:create_app
# or use the entry point in src/module4_ingress/main.py

logger = logging.getLogger(__name__)


async def reject_malformed_request(request: Request, exc: RequestValidationError):
    """Malformed segments are rejected with 400 and never dispatched."""
    return PlainTextResponse(
        f"Can't read request body: {exc.errors()}", status_code=400
    )


def create_app(
    config: Optional[Dict[str, Any]] = None,
    pipeline: Optional[TransferPipeline] = None,
) -> FastAPI:
    """
    Build the ingress application.

    Args:
        config: Loaded configuration; packaged defaults if None
        pipeline: Pipeline override, e.g. one with a stub forwarder in tests
    """
    if config is None:
        config = load_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Owns the worker pool for the whole application lifetime.
        """
        active_pipeline = pipeline if pipeline is not None else build_pipeline(config)
        dispatcher = TransferDispatcher(
            active_pipeline, max_workers=config['dispatch']['max_workers']
        )
        app.state.dispatcher = dispatcher
        logger.info(
            f"Transfer dispatcher started with {dispatcher.max_workers} workers, "
            f"forwarding to {active_pipeline.forwarder.endpoint}"
        )

        yield

        logger.info("Shutting down transfer dispatcher...")
        await asyncio.to_thread(dispatcher.shutdown, True)

    app = FastAPI(title="Hamming link hop", lifespan=lifespan)
    app.state.config = config
    app.add_exception_handler(RequestValidationError, reject_malformed_request)
    app.include_router(routes.router, tags=["code"])

    return app
