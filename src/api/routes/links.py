from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.utils.admin_auth import verify_link_manager
from src.app.services.background_writer import BackgroundWriter
from src.app.use_cases.links import (
    CreateShortlinkCommand,
    CreateShortlinkResponse,
    CreateShortlinkUseCase,
)
from src.depends import get_background_writer

router = APIRouter(tags=["Shortlinks"])

VALIDATION_ERRORS = {
    "METHOD_REQUIRED",
    "METHOD_INVALID",
    "DESTINATION_REQUIRED",
    "DESTINATION_INVALID",
    "DATA_NOT_ALLOWED",
    "DATA_INVALID",
    "LINKBUST_INVALID",
    "CODE_INVALID",
}


class CreateShortlinkRequest(BaseModel):
    """
    Create shortlink HTTP request payload

    Field types are left open so that malformed values reach the use case
    and get a field-specific 400 instead of a generic 422.
    """

    method: Optional[Any] = Field(None, description="GET or POST")
    destination: Optional[Any] = Field(None, description="Destination URL")
    data: Optional[Any] = Field(None, description="Flat key-value object, POST only")
    linkbust: Optional[Any] = Field(
        None, description="Technique names: RANDOM, CACHEBUST, CAPITALS"
    )
    code: Optional[Any] = Field(None, description="Public code, generated when absent")


@router.post(
    "/l",
    status_code=status.HTTP_200_OK,
    response_model=CreateShortlinkResponse,
    dependencies=[Depends(verify_link_manager)],
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": CreateShortlinkRequest.model_json_schema()
                }
            },
            "required": True,
        }
    },
)
async def create_shortlink(
    request: Request,
    writer: BackgroundWriter = Depends(get_background_writer),
):
    """
    Create Shortlink

    Validates the link and queues the insert. The response is sent before
    the row is committed.

    Requires: member browser session or X-Admin-API-Key header

    Raises:
        - 400 Bad Request: body is not a JSON object, or a field-specific
          validation error
        - 401 Unauthorized: no session and no (valid) admin API key
        - 403 Forbidden: session user is not a member
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        raise ClientError(
            Error("VALIDATION_ERROR", "Request body must be a JSON object."),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    body = CreateShortlinkRequest.model_validate(payload)
    command = CreateShortlinkCommand(**body.model_dump())

    use_case = CreateShortlinkUseCase(writer, code_length=ApplicationConfig.CODE_LENGTH)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in VALIDATION_ERRORS:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
