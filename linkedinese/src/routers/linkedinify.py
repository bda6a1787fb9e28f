import time

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..exceptions import InputValidationError, LinkedineseError
from ..logging import jlog
from ..schemas import ErrorResponse, TransformResponse
from ..service import linkedinify

router = APIRouter()

def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)

@router.post(
    "/linkedinify",
    response_model=TransformResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Rewrite casual text as a LinkedIn-style post",
    status_code=status.HTTP_200_OK,
)
async def linkedinify_text(request: Request, settings: Settings = Depends(get_settings)):
    started_at = time.time()
    try:
        body = await request.json()
        http_client = getattr(request.app.state, "httpx_client", None)
        return await linkedinify(body, started_at, settings, http_client)
    except InputValidationError as e:
        jlog(event="linkedinify_rejected", severity="WARNING", error=str(e))
        return _error(str(e), e.status_code)
    except LinkedineseError as e:
        jlog(event="linkedinify_failed", severity="ERROR", status=e.status_code, error=str(e))
        return _error(str(e), e.status_code)
    except Exception as e:
        jlog(event="linkedinify_unexpected", severity="ERROR", error=repr(e))
        return _error(str(e) or "An unexpected internal error occurred.", status.HTTP_500_INTERNAL_SERVER_ERROR)
