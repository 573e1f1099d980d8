from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Any
from datetime import datetime, date
from precision_health.config.settings import settings


class MedicationCatalogResponse(BaseModel):
    id: str
    name: str
    generic_name: Optional[str] = None
    brand_names: Optional[List[str]] = None
    medication_class: Optional[str] = None
    species: Optional[str] = "human"
    common_dosages: Optional[List[Any]] = None
    side_effects: Optional[List[Any]] = None
    requires_prescription: bool = True


class UserMedicationCreate(BaseModel):
    medication_id: Optional[str] = None
    medication_name: str = Field(..., min_length=1)
    dosage: str = Field(..., min_length=1)
    dosage_amount: Optional[float] = None
    dosage_unit: Optional[str] = None
    frequency: str = Field(..., min_length=1)
    schedule_times: List[str] = Field(default_factory=list)
    start_date: date
    end_date: Optional[date] = None
    prescribing_provider: Optional[str] = None
    reason: Optional[str] = None
    special_instructions: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        if self.end_date and (self.end_date - self.start_date).days + 1 > settings.max_schedule_days:
            raise ValueError(f"Medication schedules are limited to {settings.max_schedule_days} days")
        return self


class UserMedicationResponse(BaseModel):
    id: str
    profile_id: str
    medication_id: Optional[str] = None
    medication_name: str
    dosage: str
    dosage_amount: Optional[float] = None
    dosage_unit: Optional[str] = None
    frequency: str
    schedule_times: List[str] = Field(default_factory=list)
    start_date: date
    end_date: Optional[date] = None
    prescribing_provider: Optional[str] = None
    reason: Optional[str] = None
    special_instructions: Optional[str] = None
    active: bool = True
    created_at: Optional[datetime] = None


class DoseResponse(BaseModel):
    id: str
    user_medication_id: str
    medication_name: str = "Unknown"
    scheduled_time: datetime
    taken_time: Optional[datetime] = None
    status: str = "scheduled"
    missed_reason: Optional[str] = None


class SkipDoseRequest(BaseModel):
    missed_reason: Optional[str] = None


class InteractionAlertResponse(BaseModel):
    id: str
    interaction_id: Optional[str] = None
    user_medication_ids: List[str] = Field(default_factory=list)
    alert_type: str
    severity: str
    message: str
    recommendation: str
    acknowledged: bool = False
    dismissed: bool = False
    created_at: Optional[datetime] = None
    acknowledged_at: Optional[datetime] = None


class AdherenceResponse(BaseModel):
    user_medication_id: str
    days: int
    doses_due: int
    doses_scheduled: int
    doses_taken: int
    doses_missed: int
    doses_skipped: int
    adherence_rate: float
