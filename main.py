# main.py - Presentation evaluation backend

import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from config import Settings
from llm_clients import CompletionClient, build_completion_client
from logging_config import configure_logging
from models import ErrorResponse, EvaluationRequest
from services import EvaluationService


def error_body(error: str, details: Optional[str] = None) -> dict:
    return ErrorResponse(error=error, details=details).model_dump(exclude_none=True)


def create_app(
    settings: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
) -> FastAPI:
    """
    Build the FastAPI app. When `completion_client` is not given, one is
    constructed from `settings` at startup.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.completion_client is None:
            app.state.completion_client = build_completion_client(settings)
        logger.info("🚀 Evaluation service is starting ({})", settings.llm_provider)
        yield

    # ------------------------------------------------------
    # FastAPI init
    # ------------------------------------------------------
    app = FastAPI(title="AI Presentation Coach - Evaluation", lifespan=lifespan)
    app.state.settings = settings
    app.state.completion_client = completion_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        logger.info(f"🔵 [ReqID {request_id}] Start request: {request.method} {request.url}")

        response = await call_next(request)

        logger.info(f"✅ [ReqID {request_id}] End request: {response.status_code}")
        return response

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error("Unhandled error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal Server Error", str(exc)),
        )

    # ------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------
    @app.get("/")
    async def root():
        return {"status": "running", "msg": "Backend ready"}

    @app.post("/api/evaluate")
    async def evaluate(request: Request):
        try:
            payload = await request.json()

            transcript = payload.get("transcript") if isinstance(payload, dict) else None
            if not transcript:
                logger.warning("Rejected evaluation request without transcript")
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content=error_body("Transcript is required"),
                )

            item = EvaluationRequest.model_validate(payload)
            service = EvaluationService(request.app.state.completion_client, request.app.state.settings)
            result = await service.evaluate(item)
            return JSONResponse(content=result)

        except Exception as e:
            logger.exception("Error in evaluation API")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body("Failed to evaluate presentation", str(e) or repr(e)),
            )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
