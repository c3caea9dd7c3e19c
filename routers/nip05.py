import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from config import Settings
from core.cors import get_preflight_headers
from core.dependencies import get_dispatch_client, get_settings
from services.github import DispatchClient
from services.submission import submit_nip05

logger = logging.getLogger(__name__)

SUBMIT_PATH = "/api/submit-nip05"

router = APIRouter()


@router.options(SUBMIT_PATH)
async def submit_nip05_preflight(settings: Settings = Depends(get_settings)):
    return Response(status_code=200, headers=get_preflight_headers(settings.allowed_origin))


@router.post(SUBMIT_PATH)
async def submit_nip05_request(
    request: Request,
    settings: Settings = Depends(get_settings),
    dispatch_client: DispatchClient = Depends(get_dispatch_client),
):
    try:
        body = await request.json()
    except ValueError:
        logger.warning("Submission body is not valid JSON")
        body = None

    result = await submit_nip05(body, settings, dispatch_client)
    # Every rejection is reported as 400, including configuration and upstream failures
    status_code = 200 if result.ok else 400
    return JSONResponse(content=result.to_content(), status_code=status_code)
