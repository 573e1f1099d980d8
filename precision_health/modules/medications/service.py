from supabase import Client
from precision_health.database.supabase_client import escape_like
from precision_health.config.settings import settings
from precision_health.core.safety import severity_rank
from precision_health.modules.medications.scheduler import build_dose_schedule, parse_schedule_time
from precision_health.modules.medications.schemas import (
    MedicationCatalogResponse, UserMedicationCreate, UserMedicationResponse,
    DoseResponse, InteractionAlertResponse, AdherenceResponse
)
from typing import Any, Dict, List, Optional
from fastapi import HTTPException
from datetime import date, datetime, timedelta
import logging

logger = logging.getLogger(__name__)

DRUG_DRUG = "drug_drug"


class MedicationService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def list_catalog(self, species: Optional[str] = None) -> List[MedicationCatalogResponse]:
        try:
            query = self.supabase.table("medications").select("*")
            if species:
                query = query.in_("species", [species, "all"])
            result = query.order("name").execute()
            return [MedicationCatalogResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error loading medication catalog: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def _catalog_id_for(self, medication_id: Optional[str], medication_name: str) -> Optional[str]:
        if medication_id:
            return medication_id
        result = self.supabase.table("medications")\
            .select("id")\
            .ilike("name", escape_like(medication_name.strip()))\
            .limit(1)\
            .execute()
        return result.data[0]["id"] if result.data else None

    # ------------------------------------------------------------------
    # User medications
    # ------------------------------------------------------------------

    def _active_rows(self, profile_id: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("user_medications")\
            .select("*")\
            .eq("profile_id", profile_id)\
            .eq("active", True)\
            .order("created_at", desc=True)\
            .execute()
        return result.data or []

    def list_active(self, profile_id: str) -> List[UserMedicationResponse]:
        try:
            return [UserMedicationResponse(**row) for row in self._active_rows(profile_id)]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def _get_user_medication(self, profile_id: str, user_medication_id: str) -> Dict[str, Any]:
        result = self.supabase.table("user_medications")\
            .select("*")\
            .eq("id", user_medication_id)\
            .eq("profile_id", profile_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Medication not found")
        return result.data

    def add_medication(self, profile_id: str, data: UserMedicationCreate) -> UserMedicationResponse:
        """
        Start tracking a medication.

        The dose schedule is generated for this medication only, then
        interactions against the catalog and the caller's other active
        medications are turned into alerts.
        """
        try:
            for value in data.schedule_times:
                parse_schedule_time(value)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            payload = data.model_dump()
            payload["start_date"] = data.start_date.isoformat()
            payload["end_date"] = data.end_date.isoformat() if data.end_date else None
            payload["medication_id"] = self._catalog_id_for(data.medication_id, data.medication_name)
            payload["profile_id"] = profile_id
            payload["active"] = True

            result = self.supabase.table("user_medications").insert(payload).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to add medication")
            medication = result.data[0]

            doses = build_dose_schedule(
                medication["id"], profile_id, data.start_date, data.end_date,
                data.schedule_times, settings.dose_schedule_horizon_days,
            )
            if doses:
                self.supabase.table("medication_doses").insert(doses).execute()
            logger.info("Scheduled %d doses for %s", len(doses), data.medication_name)

            self.detect_interactions(profile_id, medication)
            return UserMedicationResponse(**medication)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def deactivate_medication(self, profile_id: str, user_medication_id: str) -> UserMedicationResponse:
        try:
            result = self.supabase.table("user_medications")\
                .update({"active": False})\
                .eq("id", user_medication_id)\
                .eq("profile_id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Medication not found")

            return UserMedicationResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    def detect_interactions(self, profile_id: str, medication: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Create alerts for interactions involving a newly added medication. Returns the new alert rows."""
        catalog_id = medication.get("medication_id")
        if not catalog_id:
            return []

        interactions = []
        for column in ("medication_id_1", "medication_id_2"):
            result = self.supabase.table("medication_interactions")\
                .select("*")\
                .eq(column, catalog_id)\
                .execute()
            interactions.extend(result.data or [])
        if not interactions:
            return []

        # Other active medications keyed by catalog id
        others: Dict[str, Dict[str, Any]] = {}
        for row in self._active_rows(profile_id):
            if row["id"] == medication["id"]:
                continue
            other_catalog_id = row.get("medication_id") or self._catalog_id_for(None, row["medication_name"])
            if other_catalog_id:
                others.setdefault(other_catalog_id, row)

        existing = self.supabase.table("user_interaction_alerts")\
            .select("interaction_id")\
            .eq("profile_id", profile_id)\
            .eq("dismissed", False)\
            .in_("interaction_id", [i["id"] for i in interactions])\
            .execute()
        already_alerted = {row["interaction_id"] for row in existing.data or []}

        alerts = []
        seen = set()
        for interaction in interactions:
            if interaction["id"] in already_alerted or interaction["id"] in seen:
                continue
            seen.add(interaction["id"])

            user_medication_ids = [medication["id"]]
            if interaction["interaction_type"] == DRUG_DRUG:
                other_id = interaction["medication_id_2"] \
                    if interaction.get("medication_id_1") == catalog_id else interaction.get("medication_id_1")
                other = others.get(other_id)
                if not other:
                    continue
                user_medication_ids.append(other["id"])
                other_name = other["medication_name"]
            else:
                other_name = interaction.get("interacting_substance") or "unknown substance"

            alerts.append({
                "profile_id": profile_id,
                "interaction_id": interaction["id"],
                "user_medication_ids": user_medication_ids,
                "alert_type": interaction["interaction_type"],
                "severity": interaction["severity"],
                "message": f"{medication['medication_name']} + {other_name}: {interaction['effect']}",
                "recommendation": interaction["recommendation"],
                "acknowledged": False,
                "dismissed": False,
            })

        if not alerts:
            return []
        result = self.supabase.table("user_interaction_alerts").insert(alerts).execute()
        logger.info("Created %d interaction alerts for %s", len(alerts), medication["medication_name"])
        return result.data or []

    def list_alerts(self, profile_id: str) -> List[InteractionAlertResponse]:
        """Open alerts, most severe first, newest first within a severity"""
        try:
            result = self.supabase.table("user_interaction_alerts")\
                .select("*")\
                .eq("profile_id", profile_id)\
                .eq("acknowledged", False)\
                .eq("dismissed", False)\
                .order("created_at", desc=True)\
                .execute()
            # Stable sort keeps the created_at order inside each severity
            rows = sorted(result.data or [], key=lambda row: severity_rank(row.get("severity")), reverse=True)
            return [InteractionAlertResponse(**row) for row in rows]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def acknowledge_alert(self, profile_id: str, alert_id: str) -> InteractionAlertResponse:
        try:
            result = self.supabase.table("user_interaction_alerts")\
                .update({"acknowledged": True, "acknowledged_at": datetime.utcnow().isoformat()})\
                .eq("id", alert_id)\
                .eq("profile_id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Alert not found")

            return InteractionAlertResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    # ------------------------------------------------------------------
    # Doses
    # ------------------------------------------------------------------

    def doses_for_day(self, profile_id: str, day: Optional[date] = None) -> List[DoseResponse]:
        try:
            day = day or date.today()
            start = datetime.combine(day, datetime.min.time())
            result = self.supabase.table("medication_doses")\
                .select("*")\
                .eq("profile_id", profile_id)\
                .gte("scheduled_time", start.isoformat())\
                .lt("scheduled_time", (start + timedelta(days=1)).isoformat())\
                .order("scheduled_time")\
                .execute()
            doses = result.data or []
            if not doses:
                return []

            names = self.supabase.table("user_medications")\
                .select("id, medication_name")\
                .in_("id", list({dose["user_medication_id"] for dose in doses}))\
                .execute()
            by_id = {row["id"]: row["medication_name"] for row in names.data or []}

            return [
                DoseResponse(**dose, medication_name=by_id.get(dose["user_medication_id"], "Unknown"))
                for dose in doses
            ]
        except Exception as e:
            logger.error(f"Error loading doses: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def _update_dose(self, profile_id: str, dose_id: str, update: Dict[str, Any]) -> DoseResponse:
        try:
            result = self.supabase.table("medication_doses")\
                .update(update)\
                .eq("id", dose_id)\
                .eq("profile_id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Dose not found")

            dose = result.data[0]
            medication = self.supabase.table("user_medications")\
                .select("medication_name")\
                .eq("id", dose["user_medication_id"])\
                .maybe_single()\
                .execute()
            name = medication.data["medication_name"] if medication and medication.data else "Unknown"
            return DoseResponse(**dose, medication_name=name)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def mark_dose_taken(self, profile_id: str, dose_id: str) -> DoseResponse:
        return self._update_dose(profile_id, dose_id, {
            "status": "taken",
            "taken_time": datetime.utcnow().isoformat(),
        })

    def skip_dose(self, profile_id: str, dose_id: str, missed_reason: Optional[str] = None) -> DoseResponse:
        return self._update_dose(profile_id, dose_id, {
            "status": "skipped",
            "missed_reason": missed_reason,
        })

    def adherence(self, profile_id: str, user_medication_id: str, days: int = 7) -> AdherenceResponse:
        """Dose counts by status for doses due in the last `days` days"""
        if days < 1:
            raise HTTPException(status_code=400, detail="days must be at least 1")
        try:
            self._get_user_medication(profile_id, user_medication_id)
            now = datetime.utcnow()
            result = self.supabase.table("medication_doses")\
                .select("status")\
                .eq("profile_id", profile_id)\
                .eq("user_medication_id", user_medication_id)\
                .gte("scheduled_time", (now - timedelta(days=days)).isoformat())\
                .lte("scheduled_time", now.isoformat())\
                .execute()

            counts = {"scheduled": 0, "taken": 0, "missed": 0, "skipped": 0}
            for row in result.data or []:
                status = row.get("status") or "scheduled"
                counts[status] = counts.get(status, 0) + 1
            due = sum(counts.values())
            rate = round(counts["taken"] / due * 100, 1) if due else 0.0

            return AdherenceResponse(
                user_medication_id=user_medication_id,
                days=days,
                doses_due=due,
                doses_scheduled=counts["scheduled"],
                doses_taken=counts["taken"],
                doses_missed=counts["missed"],
                doses_skipped=counts["skipped"],
                adherence_rate=rate,
            )
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
