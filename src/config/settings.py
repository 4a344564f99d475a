from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.services.reproductive_rules import ReproductivePeriods


class Settings(BaseSettings):
    database_url: str
    actor_header: str = "X-Actor"
    log_level: str = "INFO"
    environment: str = "dev"
    # CORS
    cors_allow_origins: str = "*"
    # Reproductive periods (days)
    heat_cycle_days: int = 21
    min_heat_interval_days: int = 18
    post_parturition_recovery_days: int = 21
    post_abortion_recovery_days: int = 14
    service_window_days: int = 3
    gestation_period_days: int = 114
    weaning_age_days: int = 21
    # Scheduler
    scheduler_enabled: bool = False
    scheduler_timezone: str = "America/Bogota"
    heat_expiry_run_at: str = "02:00"
    weaning_run_at: str = "03:00"
    notifications_interval_hours: int = 6
    # Notifications
    farrowing_alert_days: int = 7
    pregnancy_confirmation_due_days: int = 21
    notification_retention_days: int = 30

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @field_validator("heat_expiry_run_at", "weaning_run_at")
    @classmethod
    def ensure_hh_mm(cls, value: str) -> str:
        hours, _, minutes = value.partition(":")
        if not (hours.isdigit() and minutes.isdigit()):
            raise ValueError("Expected HH:MM")
        if not (0 <= int(hours) < 24 and 0 <= int(minutes) < 60):
            raise ValueError("Expected HH:MM")
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        if isinstance(self.cors_allow_origins, str):
            return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]
        return self.cors_allow_origins

    def reproductive_periods(self) -> ReproductivePeriods:
        return ReproductivePeriods(
            heat_cycle_days=self.heat_cycle_days,
            min_heat_interval_days=self.min_heat_interval_days,
            post_parturition_recovery_days=self.post_parturition_recovery_days,
            post_abortion_recovery_days=self.post_abortion_recovery_days,
            service_window_days=self.service_window_days,
            gestation_period_days=self.gestation_period_days,
            weaning_age_days=self.weaning_age_days,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
