from fastapi import APIRouter, Depends
from precision_health.database.supabase_client import get_supabase
from precision_health.modules.biomarkers.schemas import (
    BiomarkerRecordCreate, BiomarkerRecordResponse,
    HealthConditionCreate, HealthConditionResponse
)
from precision_health.modules.biomarkers.service import BiomarkerService, HealthConditionService
from precision_health.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/biomarkers", tags=["biomarkers"])


def get_biomarker_service(supabase: Client = Depends(get_supabase)) -> BiomarkerService:
    return BiomarkerService(supabase)


def get_condition_service(supabase: Client = Depends(get_supabase)) -> HealthConditionService:
    return HealthConditionService(supabase)


@router.get("", response_model=List[BiomarkerRecordResponse])
async def list_biomarkers(
    limit: int = 50,
    offset: int = 0,
    user_data: Dict = Depends(get_current_user_id),
    service: BiomarkerService = Depends(get_biomarker_service)
):
    """List the user's lab results, newest first"""
    return service.list_records(user_data["id"], limit=limit, offset=offset)


@router.post("", response_model=BiomarkerRecordResponse, status_code=201)
async def create_biomarker(
    record_data: BiomarkerRecordCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: BiomarkerService = Depends(get_biomarker_service)
):
    return service.create_record(user_data["id"], record_data)


# Registered before /{record_id} so "conditions" is not taken as an id
@router.get("/conditions", response_model=List[HealthConditionResponse])
async def list_conditions(
    user_data: Dict = Depends(get_current_user_id),
    service: HealthConditionService = Depends(get_condition_service)
):
    """List active health conditions"""
    return service.list_active(user_data["id"])


@router.post("/conditions", response_model=HealthConditionResponse, status_code=201)
async def create_condition(
    condition_data: HealthConditionCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: HealthConditionService = Depends(get_condition_service)
):
    return service.create_condition(user_data["id"], condition_data)


@router.delete("/conditions/{condition_id}", response_model=HealthConditionResponse)
async def deactivate_condition(
    condition_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: HealthConditionService = Depends(get_condition_service)
):
    """Mark a health condition inactive"""
    return service.deactivate_condition(user_data["id"], condition_id)


@router.get("/{record_id}", response_model=BiomarkerRecordResponse)
async def get_biomarker(
    record_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: BiomarkerService = Depends(get_biomarker_service)
):
    return service.get_record(user_data["id"], record_id)


@router.delete("/{record_id}", status_code=204)
async def delete_biomarker(
    record_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: BiomarkerService = Depends(get_biomarker_service)
):
    service.delete_record(user_data["id"], record_id)
    return None
