import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from arrowdiagram import config
from arrowdiagram.api.routes import router as diagram_router
from arrowdiagram.models.graph import ConnectorType

logger = logging.getLogger("uvicorn.error")

logging.getLogger("arrowdiagram").setLevel(config.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup: log connectors and available samples ---
    logger.info("Arrow notation connectors: %s", ConnectorType.tokens())

    if config.SAMPLES_DIR.is_dir():
        samples = [p.stem for p in sorted(config.SAMPLES_DIR.glob(f"*{config.SAMPLE_SUFFIX}"))]
        logger.info("Available sample diagrams: %s", samples)
    else:
        logger.warning("Samples directory does not exist: %s", config.SAMPLES_DIR)

    yield


app = FastAPI(
    title="Arrow Diagram Service",
    description="Parses arrow-notation flowcharts into node/edge graphs",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(diagram_router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
