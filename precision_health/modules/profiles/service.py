from supabase import Client
from precision_health.core.safety import effective_species
from precision_health.modules.profiles.schemas import ProfileCreate, ProfileUpdate, ProfileResponse
from typing import Any, Dict, Optional
from fastapi import HTTPException
from datetime import datetime
import logging

logger = logging.getLogger(__name__)


def _to_response(row: Dict[str, Any]) -> ProfileResponse:
    return ProfileResponse(**{**row, "effective_species": effective_species(row)})


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_profile_row(self, profile_id: str) -> Optional[Dict[str, Any]]:
        """Raw profile row or None"""
        result = self.supabase.table("profiles")\
            .select("*")\
            .eq("id", profile_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            return None
        return result.data

    def get_profile(self, profile_id: str) -> ProfileResponse:
        """Get profile by ID"""
        try:
            row = self.get_profile_row(profile_id)
            if not row:
                raise HTTPException(status_code=404, detail="Profile not found")
            return _to_response(row)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_species(self, profile_id: str) -> str:
        """Effective species for safety lookups. Falls back to human when the profile can't be read."""
        try:
            return effective_species(self.get_profile_row(profile_id))
        except Exception as e:
            logger.error(f"Error loading profile species for {profile_id}: {e}")
            return "human"

    def create_profile(self, profile_id: str, profile_data: ProfileCreate) -> ProfileResponse:
        """Create (or replace) the profile row for a newly registered user"""
        try:
            if profile_data.species_type == "pet" and not profile_data.pet_species:
                raise HTTPException(status_code=400, detail="Pet profiles require pet_species (dog or cat)")
            result = self.supabase.table("profiles").upsert({
                "id": profile_id,
                "full_name": profile_data.full_name,
                "species_type": profile_data.species_type,
                "pet_species": profile_data.pet_species,
                "pet_breed": profile_data.pet_breed,
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create profile")

            return _to_response(result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_profile(self, profile_id: str, profile_data: ProfileUpdate) -> ProfileResponse:
        """Update profile"""
        try:
            current = self.get_profile_row(profile_id)
            if not current:
                raise HTTPException(status_code=404, detail="Profile not found")

            update_data: Dict[str, Any] = {"updated_at": datetime.utcnow().isoformat()}
            for field, value in profile_data.model_dump(exclude_unset=True).items():
                if field == "full_name" and not value:
                    continue
                if field == "date_of_birth" and value is not None:
                    value = value.isoformat()
                update_data[field] = value

            species_type = update_data.get("species_type", current.get("species_type"))
            pet_species = update_data.get("pet_species", current.get("pet_species"))
            if species_type == "pet" and pet_species not in ("dog", "cat"):
                raise HTTPException(status_code=400, detail="Pet profiles require pet_species (dog or cat)")

            result = self.supabase.table("profiles")\
                .update(update_data)\
                .eq("id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            return _to_response(result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
