"""
Static frontend served for every non-API path.
"""
import logging
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse

from settings import STATIC_DIR

logger = logging.getLogger(__name__)
router = APIRouter()

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _static_root() -> Path:
    root = Path(STATIC_DIR)
    if not root.is_absolute():
        root = PROJECT_ROOT / root
    return root.resolve()


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str):
    """Serve a static asset, falling back to index.html"""
    root = _static_root()

    if full_path:
        candidate = (root / full_path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)

    index = root / "index.html"
    if not index.is_file():
        logger.warning(f"Frontend index not found at {index}")
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return FileResponse(index)
