from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Lets the API scope rows itself instead of relying on the anon role

    # App
    app_name: str = "precision-health-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    # Auth
    auth_cache_ttl_sec: int = 60
    auth_cache_max_size: int = 500

    # Nutrition / medication rules
    dose_schedule_horizon_days: int = 30  # Used when a medication has no end_date
    recent_lookups_limit: int = 5
    meal_plan_recipe_limit: int = 20
    max_schedule_days: int = 366  # Longest start..end span a medication may be scheduled over

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
