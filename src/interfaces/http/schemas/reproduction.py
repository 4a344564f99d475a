from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.interfaces.http.schemas.abortions import AbortionResponse
from src.interfaces.http.schemas.births import BirthResponse
from src.interfaces.http.schemas.heats import HeatResponse
from src.interfaces.http.schemas.pregnancies import PregnancyResponse
from src.interfaces.http.schemas.services import ServiceResponse


class HeatValidationRequest(BaseModel):
    sow_id: UUID
    heat_date: date
    induced: bool = False


class ServiceValidationRequest(BaseModel):
    sow_id: UUID
    heat_id: UUID
    service_date: date


class PregnancyValidationRequest(BaseModel):
    sow_id: UUID
    service_id: UUID
    conception_date: date


class ValidationResultResponse(BaseModel):
    valid: bool
    errors: list[str]
    warnings: list[str]


class ReproductiveStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    sow_id: UUID
    ear_tag: str
    reproductive_status: str
    derived_status: str
    in_sync: bool
    expected_farrowing_date: date | None
    parity_count: int
    nursing_piglets: int
    last_heat: HeatResponse | None
    last_service: ServiceResponse | None
    active_pregnancy: PregnancyResponse | None
    last_birth: BirthResponse | None
    last_abortion: AbortionResponse | None


class HeatExpiryResponse(BaseModel):
    updated_count: int
    details: list[dict[str, Any]]


class WeaningJobResponse(BaseModel):
    processed_litters: int
    piglets_weaned: int
    failures: list[dict[str, Any]]
