from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
import logging
from app.core.config_store import config_repo, decode_document, ConfigWriteError
from app.core.routing import CONFIG_PATH, UPDATE_CONFIG_PATH
from app.schemas.config import UpdateConfigSuccess, UpdateConfigError

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get(CONFIG_PATH)
def get_config():
    """
    Return the stored configuration document.
    A missing or unreadable file is served as `{}`; this endpoint never fails.
    """
    return JSONResponse(content=config_repo.read())

@router.post(UPDATE_CONFIG_PATH, response_model=UpdateConfigSuccess)
async def update_config(request: Request):
    """Replace the stored configuration with the request body, whatever JSON it holds."""
    body = await request.body()

    try:
        data = decode_document(body)
    except ValueError as e:
        logger.error(f"Failed to update config: {e}")
        return JSONResponse(status_code=400, content=UpdateConfigError().model_dump())

    try:
        await run_in_threadpool(config_repo.write, data)
    except ConfigWriteError:
        return JSONResponse(
            status_code=500,
            content=UpdateConfigError(message="Failed to save configuration").model_dump()
        )

    return UpdateConfigSuccess()
