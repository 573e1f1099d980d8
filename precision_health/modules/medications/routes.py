from fastapi import APIRouter, Depends
from precision_health.database.supabase_client import get_supabase
from precision_health.modules.medications.schemas import (
    MedicationCatalogResponse, UserMedicationCreate, UserMedicationResponse,
    DoseResponse, SkipDoseRequest, InteractionAlertResponse, AdherenceResponse
)
from precision_health.modules.medications.service import MedicationService
from precision_health.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict, Optional
from datetime import date

router = APIRouter(prefix="/medications", tags=["medications"])


def get_medication_service(supabase: Client = Depends(get_supabase)) -> MedicationService:
    return MedicationService(supabase)


@router.get("/catalog", response_model=List[MedicationCatalogResponse])
async def list_catalog(
    species: Optional[str] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    return service.list_catalog(species)


@router.get("", response_model=List[UserMedicationResponse])
async def list_medications(
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    """Active medications for the current user"""
    return service.list_active(user_data["id"])


@router.post("", response_model=UserMedicationResponse, status_code=201)
async def add_medication(
    data: UserMedicationCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    """Add a medication, schedule its doses and check for interactions"""
    return service.add_medication(user_data["id"], data)


@router.get("/doses/today", response_model=List[DoseResponse])
async def doses_today(
    day: Optional[date] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    return service.doses_for_day(user_data["id"], day)


@router.post("/doses/{dose_id}/taken", response_model=DoseResponse)
async def mark_dose_taken(
    dose_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    return service.mark_dose_taken(user_data["id"], dose_id)


@router.post("/doses/{dose_id}/skip", response_model=DoseResponse)
async def skip_dose(
    dose_id: str,
    request: Optional[SkipDoseRequest] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    return service.skip_dose(user_data["id"], dose_id, request.missed_reason if request else None)


@router.get("/alerts", response_model=List[InteractionAlertResponse])
async def list_alerts(
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    """Unacknowledged interaction alerts, most severe first"""
    return service.list_alerts(user_data["id"])


@router.post("/alerts/{alert_id}/acknowledge", response_model=InteractionAlertResponse)
async def acknowledge_alert(
    alert_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    return service.acknowledge_alert(user_data["id"], alert_id)


@router.delete("/{user_medication_id}", response_model=UserMedicationResponse)
async def deactivate_medication(
    user_medication_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    """Stop tracking a medication (kept for history)"""
    return service.deactivate_medication(user_data["id"], user_medication_id)


@router.get("/{user_medication_id}/adherence", response_model=AdherenceResponse)
async def adherence(
    user_medication_id: str,
    days: int = 7,
    user_data: Dict = Depends(get_current_user_id),
    service: MedicationService = Depends(get_medication_service)
):
    return service.adherence(user_data["id"], user_medication_id, days)
