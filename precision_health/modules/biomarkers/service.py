from supabase import Client
from precision_health.modules.biomarkers.schemas import (
    BiomarkerRecordCreate, BiomarkerRecordResponse,
    HealthConditionCreate, HealthConditionResponse
)
from typing import List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class BiomarkerService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_records(self, profile_id: str, limit: int = 50, offset: int = 0) -> List[BiomarkerRecordResponse]:
        """List biomarker records, newest test first"""
        try:
            result = self.supabase.table("biomarker_records")\
                .select("*")\
                .eq("profile_id", profile_id)\
                .order("test_date", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            return [BiomarkerRecordResponse(**record) for record in result.data or []]
        except Exception as e:
            logger.error(f"Error loading biomarkers: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def create_record(self, profile_id: str, record_data: BiomarkerRecordCreate) -> BiomarkerRecordResponse:
        """Store a lab result"""
        try:
            payload = record_data.model_dump()
            payload["test_date"] = record_data.test_date.isoformat()
            payload["profile_id"] = profile_id
            result = self.supabase.table("biomarker_records").insert(payload).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create biomarker record")

            return BiomarkerRecordResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_record(self, profile_id: str, record_id: str) -> BiomarkerRecordResponse:
        try:
            result = self.supabase.table("biomarker_records")\
                .select("*")\
                .eq("id", record_id)\
                .eq("profile_id", profile_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Biomarker record not found")

            return BiomarkerRecordResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def delete_record(self, profile_id: str, record_id: str) -> bool:
        try:
            result = self.supabase.table("biomarker_records")\
                .delete()\
                .eq("id", record_id)\
                .eq("profile_id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Biomarker record not found")
            return True
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))


class HealthConditionService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_active(self, profile_id: str) -> List[HealthConditionResponse]:
        """Active conditions for a profile"""
        try:
            result = self.supabase.table("health_conditions")\
                .select("*")\
                .eq("profile_id", profile_id)\
                .eq("active", True)\
                .order("created_at", desc=True)\
                .execute()
            return [HealthConditionResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error loading health conditions: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def create_condition(self, profile_id: str, condition_data: HealthConditionCreate) -> HealthConditionResponse:
        try:
            payload = condition_data.model_dump()
            payload["profile_id"] = profile_id
            payload["active"] = True
            result = self.supabase.table("health_conditions").insert(payload).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create health condition")

            return HealthConditionResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def deactivate_condition(self, profile_id: str, condition_id: str) -> HealthConditionResponse:
        try:
            result = self.supabase.table("health_conditions")\
                .update({"active": False})\
                .eq("id", condition_id)\
                .eq("profile_id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Health condition not found")

            return HealthConditionResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
