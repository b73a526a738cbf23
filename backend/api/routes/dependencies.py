"""Dependencies view API routes - layout, grid and cycle report for a fetched payload."""

from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from loguru import logger

from layout import DependencyPayload, build_dependency_grid
from shared import find_circular_dependencies
from visualization import compute_layout_from_payload

router = APIRouter()


def _layout(request: Request, body: DependencyPayload, overflow: Optional[str]):
    return compute_layout_from_payload(body, overflow or request.app.state.sprint_overflow)


@router.post("/layout")
async def post_layout(request: Request, body: DependencyPayload, overflow: Optional[str] = Query(None)):
    try:
        layout = _layout(request, body, overflow)
        return {"layout": layout.to_dict()}
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.exception("Dependency layout error")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to compute dependency layout"})


@router.post("/grid")
async def post_grid(request: Request, body: DependencyPayload, overflow: Optional[str] = Query(None)):
    try:
        layout = _layout(request, body, overflow)
        return {"grid": build_dependency_grid(layout)}
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.exception("Dependency grid error")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to build dependency grid"})


@router.post("/cycles")
async def post_cycles(request: Request, body: DependencyPayload, overflow: Optional[str] = Query(None)):
    """Circular dependencies between grid cells (self loops included)."""
    try:
        layout = _layout(request, body, overflow)
        return {"cycles": find_circular_dependencies(layout)}
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.exception("Dependency cycle report error")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to find circular dependencies"})
