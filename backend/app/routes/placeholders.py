"""Reserved route prefixes that answer with a "coming soon" notice."""

from fastapi import APIRouter, Request

router = APIRouter()

_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def _coming_soon(area: str, request: Request) -> dict:
    return {
        "message": f"{area} routes coming soon",
        "method": request.method,
        "path": request.url.path,
    }


@router.api_route("/auth", methods=_METHODS)
@router.api_route("/auth/{rest:path}", methods=_METHODS)
def auth_placeholder(request: Request):
    return _coming_soon("Auth", request)


@router.api_route("/progress", methods=_METHODS)
@router.api_route("/progress/{rest:path}", methods=_METHODS)
def progress_placeholder(request: Request):
    return _coming_soon("Progress", request)
