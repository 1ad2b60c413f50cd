from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from leadhub.features.auth.dependencies import get_current_user_id
from leadhub.features.lead_magnets.schemas.lead_magnet_schema import (
    LeadMagnetCreate,
    LeadMagnetRead,
    LeadMagnetUpdate,
)
from leadhub.platform.logger import get_logger
from leadhub.platform.schemas import MessageResponse
from leadhub.platform.storage.base import Storage
from leadhub.platform.storage.dependencies import get_storage
from leadhub.platform.validation import validate_create, validate_update

router = APIRouter(
    prefix="/lead-magnets",
    tags=["Lead Magnets"],
    dependencies=[Depends(get_current_user_id)],
)
logger = get_logger(__name__)

INVALID_LEAD_MAGNET = "Invalid lead magnet data"


def _server_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lead magnet not found")


@router.get("", response_model=list[LeadMagnetRead], summary="List lead magnets, newest first")
async def list_lead_magnets(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_lead_magnets()
    except Exception:
        logger.exception("Failed to fetch lead magnets")
        raise _server_error("Failed to fetch lead magnets")


@router.get("/{magnet_id}", response_model=LeadMagnetRead, summary="Get a lead magnet")
async def get_lead_magnet(magnet_id: int, storage: Storage = Depends(get_storage)):
    try:
        magnet = await storage.get_lead_magnet(magnet_id)
    except Exception:
        logger.exception("Failed to fetch lead magnet", extra={"magnet_id": magnet_id})
        raise _server_error("Failed to fetch lead magnet")

    if magnet is None:
        raise _not_found()
    return magnet


@router.post(
    "",
    response_model=LeadMagnetRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a lead magnet",
)
async def create_lead_magnet(payload: Any = Body(...), storage: Storage = Depends(get_storage)):
    magnet_in = validate_create(payload, LeadMagnetCreate, INVALID_LEAD_MAGNET)
    try:
        magnet = await storage.create_lead_magnet(magnet_in)
    except Exception:
        logger.exception("Failed to create lead magnet")
        raise _server_error("Failed to create lead magnet")

    logger.info("Lead magnet created", extra={"magnet_id": magnet.id, "type": magnet.type})
    return magnet


@router.put("/{magnet_id}", response_model=LeadMagnetRead, summary="Update some fields of a lead magnet")
async def update_lead_magnet(
    magnet_id: int,
    payload: Any = Body(...),
    storage: Storage = Depends(get_storage),
):
    changes = validate_update(payload, LeadMagnetUpdate, INVALID_LEAD_MAGNET)
    try:
        magnet = await storage.update_lead_magnet(magnet_id, changes)
    except Exception:
        logger.exception("Failed to update lead magnet", extra={"magnet_id": magnet_id})
        raise _server_error("Failed to update lead magnet")

    if magnet is None:
        raise _not_found()
    logger.info(
        "Lead magnet updated",
        extra={"magnet_id": magnet_id, "fields": sorted(changes.model_fields_set)},
    )
    return magnet


@router.delete("/{magnet_id}", response_model=MessageResponse, summary="Delete a lead magnet")
async def delete_lead_magnet(magnet_id: int, storage: Storage = Depends(get_storage)):
    try:
        deleted = await storage.delete_lead_magnet(magnet_id)
    except Exception:
        logger.exception("Failed to delete lead magnet", extra={"magnet_id": magnet_id})
        raise _server_error("Failed to delete lead magnet")

    if not deleted:
        raise _not_found()
    logger.info("Lead magnet deleted", extra={"magnet_id": magnet_id})
    return MessageResponse(message="Lead magnet deleted successfully")
