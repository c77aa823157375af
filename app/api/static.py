from fastapi import APIRouter
from fastapi.responses import FileResponse, PlainTextResponse
import logging
from app.core.static_files import static_assets, StaticFileNotFound

router = APIRouter()
logger = logging.getLogger(__name__)

# Catch-all: must be included after every other GET route
@router.get("/{file_path:path}")
def serve_static(file_path: str):
    try:
        full_path, content_type = static_assets.locate(file_path)
    except StaticFileNotFound as e:
        logger.warning(f"Static file not served for '/{file_path}': {e}")
        return PlainTextResponse("404 Not Found", status_code=404)

    # Explicit header keeps the table's content type exactly (no charset suffix)
    return FileResponse(full_path, media_type=content_type, headers={"Content-Type": content_type})
