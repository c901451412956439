from functools import lru_cache

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from bytediff.config import build_store, load_settings
from bytediff.models.diff_report import DiffReportResponse
from bytediff.models.errors import InvalidPayload, NotFound, StoreFailure
from bytediff.models.payload import DiffPayload, ErrorResponseBody, PayloadRequestBody, parse_side
from bytediff.services.diff_service import DiffService

router = APIRouter()

JSON = "application/json"


@lru_cache(maxsize=1)
def get_diff_service() -> DiffService:
    """Process-wide service over the store picked by DIFF_STORE."""
    settings = load_settings()
    print(f"[DiffRouter] Using '{settings.store}' side store")
    return DiffService(build_store(settings))


def error_response(status_code: int, identifier: str, reason: str, cause: str = "") -> JSONResponse:
    body = ErrorResponseBody(id=identifier, reason=reason, cause=cause)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post("/diff/{identifier}/{side}", status_code=204)
async def save_side(
    identifier: str,
    side: str,
    request: Request,
    service: DiffService = Depends(get_diff_service),
):
    """
    Upload one side of a comparison. Body: {"data": "<base64>"}.
    """
    try:
        diff_side = parse_side(side)
    except ValueError:
        return Response(status_code=404, media_type=JSON)

    raw = await request.body()
    try:
        # a JSON null body decodes to an empty payload
        body = PayloadRequestBody() if raw.strip() == b"null" else PayloadRequestBody.model_validate_json(raw)
    except ValidationError as e:
        return error_response(400, identifier, "invalid body", str(e))
    if not body.data:
        return error_response(400, identifier, "missing data")

    payload = DiffPayload(identifier=identifier, side=diff_side, value=body.data)
    try:
        await run_in_threadpool(service.save, payload)
    except InvalidPayload as e:
        return error_response(400, identifier, e.reason)
    except StoreFailure as e:
        print(f"[DiffRouter] Save failed for {identifier}/{side}: {e.cause!r}")
        return error_response(500, identifier, "save operation failed", str(e))

    return Response(status_code=204, media_type=JSON)


@router.get(
    "/diff/{identifier}",
    response_model=DiffReportResponse,
    response_model_exclude_none=True,
)
async def get_report(identifier: str, service: DiffService = Depends(get_diff_service)):
    """
    Compare the sides uploaded so far for `identifier`.
    """
    try:
        report = await run_in_threadpool(service.get_report, identifier)
    except NotFound as e:
        return error_response(404, identifier, "diff not found", str(e))
    except StoreFailure as e:
        print(f"[DiffRouter] Report failed for {identifier}: {e.cause!r}")
        return error_response(500, identifier, "get diff failed", str(e))

    return DiffReportResponse.from_report(report)
