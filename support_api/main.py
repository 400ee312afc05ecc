"""FastAPI application"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import LOG_LEVEL
from .database import init_db
from .routes.helplines import router as helplines_router
from .routes.status import router as status_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup"""
    init_db()
    logger.info("Database tables ready")
    yield


app = FastAPI(
    title="Support Helpline API",
    description="Mental-health support helplines, filterable by what is open right now",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(status_router)
app.include_router(helplines_router)


def run() -> None:
    """Run the API server"""
    import uvicorn
    from .config import API_HOST, API_PORT

    uvicorn.run(app, host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    run()
