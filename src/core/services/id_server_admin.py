"""
id-server Admin Calls
Admin endpoints on the id-server: IDV data deletion and funds transfer
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from src.core.config import Settings

logger = logging.getLogger(__name__)

USER_IDV_DATA_PATH = "/admin/user-idv-data"
TRANSFER_FUNDS_PATH = "/admin/transfer-funds"


# === Response Models ===

class DeleteUserDataResponse(BaseModel):
    message: Optional[str] = None
    error: Optional[str] = None


class TransferFundsResponse(BaseModel):
    """Per-chain results are opaque; their shape is owned by the id-server."""

    optimism: Optional[Any] = None
    fantom: Optional[Any] = None
    avalanche: Optional[Any] = None
    error: Optional[str] = None


ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _admin_headers(settings: Settings) -> dict[str, str]:
    return {"x-api-key": settings.admin_api_key}


def _handle_response(
    response: httpx.Response,
    model: Type[ResponseT],
    action: str,
) -> Optional[ResponseT]:
    """
    Parse the body into `model` and log the outcome.
    Only status 200 counts as success, even when the body parses.
    """
    status = response.status_code

    try:
        result = model.model_validate_json(response.content)
    except ValidationError as e:
        logger.error(f"Error parsing response json: {e}")
        return None

    body = result.model_dump()
    if status != 200:
        logger.error(f"Error triggering {action}. response status: {status}. response: {body}")
    else:
        logger.info(f"Successfully triggered {action}. response status: {status}. response: {body}")

    return result


async def trigger_deletion_of_user_idv_data(
    client: httpx.AsyncClient,
    settings: Settings,
) -> Optional[DeleteUserDataResponse]:
    """
    DELETE /admin/user-idv-data
    Returns the parsed body, or None when the request or parsing failed.
    """
    action = "deletion of user data from IDV provider databases"
    url = settings.id_server_url + USER_IDV_DATA_PATH

    try:
        response = await client.delete(url, headers=_admin_headers(settings))
    except httpx.HTTPError as e:
        logger.error(f"Error triggering {action}: {e!r}")
        return None

    return _handle_response(response, DeleteUserDataResponse, action)


async def trigger_transfer_of_funds(
    client: httpx.AsyncClient,
    settings: Settings,
) -> Optional[TransferFundsResponse]:
    """
    POST /admin/transfer-funds
    Returns the parsed body, or None when the request or parsing failed.
    """
    action = "transfer of funds"
    url = settings.id_server_url + TRANSFER_FUNDS_PATH

    try:
        response = await client.post(url, headers=_admin_headers(settings))
    except httpx.HTTPError as e:
        logger.error(f"Error triggering {action}: {e!r}")
        return None

    return _handle_response(response, TransferFundsResponse, action)
