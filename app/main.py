from fastapi import FastAPI
import logging
from app.core.config import settings
from app.core.middleware import DispatchMiddleware, AccessLogMiddleware
from app.api import config, static

# No-op when the host (e.g. a test runner) already configured the root logger
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME, docs_url=None, redoc_url=None, openapi_url=None)

# Last added runs first: access log wraps the dispatcher
app.add_middleware(DispatchMiddleware)
app.add_middleware(AccessLogMiddleware)

# Include routers (static catch-all last)
app.include_router(config.router)
app.include_router(static.router)

@app.on_event("startup")
async def startup_event():
    logger.info(f"{settings.PROJECT_NAME} running on http://localhost:{settings.PORT}")
    logger.info(f"Serving static files from {settings.PUBLIC_DIR}")
    logger.info(f"Configuration stored at {settings.CONFIG_FILE}")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
