from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from leadhub.features.auth.dependencies import get_current_user_id
from leadhub.features.leads.schemas.lead_schema import LeadCreate, LeadRead, LeadUpdate
from leadhub.platform.logger import get_logger
from leadhub.platform.schemas import MessageResponse
from leadhub.platform.storage.base import Storage
from leadhub.platform.storage.dependencies import get_storage
from leadhub.platform.validation import validate_create, validate_update

router = APIRouter(
    prefix="/leads",
    tags=["Leads"],
    dependencies=[Depends(get_current_user_id)],
)
logger = get_logger(__name__)

INVALID_LEAD = "Invalid lead data"


def _server_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lead not found")


@router.get("", response_model=list[LeadRead], summary="List leads, newest first")
async def list_leads(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_leads()
    except Exception:
        logger.exception("Failed to fetch leads")
        raise _server_error("Failed to fetch leads")


@router.get("/{lead_id}", response_model=LeadRead, summary="Get a lead")
async def get_lead(lead_id: int, storage: Storage = Depends(get_storage)):
    try:
        lead = await storage.get_lead(lead_id)
    except Exception:
        logger.exception("Failed to fetch lead", extra={"lead_id": lead_id})
        raise _server_error("Failed to fetch lead")

    if lead is None:
        raise _not_found()
    return lead


@router.post(
    "",
    response_model=LeadRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a lead",
)
async def create_lead(payload: Any = Body(...), storage: Storage = Depends(get_storage)):
    lead_in = validate_create(payload, LeadCreate, INVALID_LEAD)
    try:
        lead = await storage.create_lead(lead_in)
    except Exception:
        logger.exception("Failed to create lead")
        raise _server_error("Failed to create lead")

    logger.info("Lead created", extra={"lead_id": lead.id, "source": lead.source})
    return lead


@router.put("/{lead_id}", response_model=LeadRead, summary="Update some fields of a lead")
async def update_lead(
    lead_id: int,
    payload: Any = Body(...),
    storage: Storage = Depends(get_storage),
):
    changes = validate_update(payload, LeadUpdate, INVALID_LEAD)
    try:
        lead = await storage.update_lead(lead_id, changes)
    except Exception:
        logger.exception("Failed to update lead", extra={"lead_id": lead_id})
        raise _server_error("Failed to update lead")

    if lead is None:
        raise _not_found()
    logger.info("Lead updated", extra={"lead_id": lead_id, "fields": sorted(changes.model_fields_set)})
    return lead


@router.delete("/{lead_id}", response_model=MessageResponse, summary="Delete a lead")
async def delete_lead(lead_id: int, storage: Storage = Depends(get_storage)):
    try:
        deleted = await storage.delete_lead(lead_id)
    except Exception:
        logger.exception("Failed to delete lead", extra={"lead_id": lead_id})
        raise _server_error("Failed to delete lead")

    if not deleted:
        raise _not_found()
    logger.info("Lead deleted", extra={"lead_id": lead_id})
    return MessageResponse(message="Lead deleted successfully")
