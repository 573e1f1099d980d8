"""
Dose schedule generation.

A schedule is one 'scheduled' dose row per day per time of day, from the
medication's start date through its end date inclusive. Open-ended
medications are scheduled for a fixed horizon past the start date.
"""

from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional


def parse_schedule_time(value: str) -> time:
    """Parse an 'HH:MM' time of day. Raises ValueError for anything else."""
    parts = value.strip().split(":") if isinstance(value, str) else []
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid schedule time {value!r}, expected HH:MM")
    hour, minute = int(parts[0]), int(parts[1])
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid schedule time {value!r}, expected HH:MM")
    return time(hour, minute)


def schedule_end_date(start_date: date, end_date: Optional[date], horizon_days: int) -> date:
    return end_date if end_date else start_date + timedelta(days=horizon_days)


def build_dose_schedule(
    user_medication_id: str,
    profile_id: str,
    start_date: date,
    end_date: Optional[date],
    schedule_times: List[str],
    horizon_days: int,
) -> List[Dict[str, Any]]:
    times = sorted({parse_schedule_time(t) for t in schedule_times})
    last_day = schedule_end_date(start_date, end_date, horizon_days)

    doses = []
    day = start_date
    while day <= last_day:
        for time_of_day in times:
            doses.append({
                "user_medication_id": user_medication_id,
                "profile_id": profile_id,
                "scheduled_time": datetime.combine(day, time_of_day).isoformat(),
                "status": "scheduled",
            })
        day += timedelta(days=1)
    return doses
