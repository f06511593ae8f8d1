from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roaster.api.v1.routes import router as v1_router
from roaster.core.logging import logger, setup_logging
from roaster.core.settings import settings
from roaster.infra.providers.clients import close_clients
from roaster.schemas.roast import RoastFailure
from roaster.usecases.roast import get_pipeline

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Voice table + providers are built once and shared by every request
    get_pipeline()
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY not set; roast requests will fail")
    if not settings.elevenlabs_api_key:
        logger.warning("ELEVENLABS_API_KEY not set; all audio will use the fallback voice")
    logger.info("Roaster backend ready")
    yield
    await close_clients()
    logger.info("Roaster backend shut down")


app = FastAPI(
    title="AI Roaster",
    version="0.1.0",
    description="Roast generation with ElevenLabs voice and OpenAI speech fallback",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    messages = [err.get("msg", "invalid value") for err in exc.errors()]
    failure = RoastFailure(error="Invalid request", message="; ".join(messages))
    return JSONResponse(status_code=422, content=failure.model_dump())


@app.get("/health")
async def health():
    return {"ok": True}
