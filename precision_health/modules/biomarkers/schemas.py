from pydantic import BaseModel, Field
from typing import Optional, List, Literal, Any, Dict
from datetime import datetime, date


class BiomarkerRecordCreate(BaseModel):
    test_date: date
    source_type: Literal["pdf", "photo", "manual", "integration"] = "manual"
    raw_data: Optional[Dict[str, Any]] = None
    processed_data: Optional[Dict[str, Any]] = None
    risk_level: Literal["normal", "caution", "urgent"] = "normal"
    flagged_markers: List[Any] = Field(default_factory=list)


class BiomarkerRecordResponse(BaseModel):
    id: str
    profile_id: str
    test_date: date
    source_type: str
    raw_data: Optional[Dict[str, Any]] = None
    processed_data: Optional[Dict[str, Any]] = None
    risk_level: Optional[str] = "normal"
    flagged_markers: List[Any] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HealthConditionCreate(BaseModel):
    condition_name: str
    condition_type: Literal["diagnosed", "suspected", "risk"] = "risk"
    probability_score: Optional[float] = Field(default=None, ge=0, le=1)
    identified_from: Literal["biomarkers", "symptoms", "user_reported"] = "user_reported"
    notes: Optional[str] = None


class HealthConditionResponse(BaseModel):
    id: str
    profile_id: str
    condition_name: str
    condition_type: str
    probability_score: Optional[float] = None
    identified_from: str
    active: bool = True
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
