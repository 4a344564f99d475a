from __future__ import annotations

from collections.abc import Callable
from datetime import date

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from src.application.events.dispatcher import dispatch_events
from src.application.use_cases.jobs import run_heat_expiry, run_weaning
from src.application.use_cases.reproduction import validate_registration
from src.domain.services.reproductive_rules import ReproductivePeriods
from src.interfaces.http.deps import get_periods, get_uow, get_uow_factory
from src.interfaces.http.schemas.reproduction import (
    HeatExpiryResponse,
    HeatValidationRequest,
    PregnancyValidationRequest,
    ServiceValidationRequest,
    ValidationResultResponse,
    WeaningJobResponse,
)
from src.utils.datetime_tz import today_local

router = APIRouter(prefix="/reproduction", tags=["reproduction"])


@router.post("/validate/heat", response_model=ValidationResultResponse)
async def validate_heat_endpoint(
    payload: HeatValidationRequest,
    periods: ReproductivePeriods = Depends(get_periods),
    uow=Depends(get_uow),
):
    result = await validate_registration.validate_heat(
        uow, payload.sow_id, payload.heat_date, induced=payload.induced, periods=periods
    )
    return result.to_dict()


@router.post("/validate/service", response_model=ValidationResultResponse)
async def validate_service_endpoint(
    payload: ServiceValidationRequest,
    periods: ReproductivePeriods = Depends(get_periods),
    uow=Depends(get_uow),
):
    result = await validate_registration.validate_service(
        uow, payload.sow_id, payload.heat_id, payload.service_date, periods=periods
    )
    return result.to_dict()


@router.post("/validate/pregnancy", response_model=ValidationResultResponse)
async def validate_pregnancy_endpoint(
    payload: PregnancyValidationRequest,
    periods: ReproductivePeriods = Depends(get_periods),
    uow=Depends(get_uow),
):
    result = await validate_registration.validate_pregnancy(
        uow, payload.sow_id, payload.service_id, payload.conception_date, periods=periods
    )
    return result.to_dict()


@router.post("/jobs/heat-expiry", response_model=HeatExpiryResponse)
async def run_heat_expiry_endpoint(
    today: date | None = None,
    periods: ReproductivePeriods = Depends(get_periods),
    uow_factory: Callable = Depends(get_uow_factory),
):
    result = await run_heat_expiry.execute(
        uow_factory, today=today or today_local(), periods=periods
    )
    return {"updated_count": result.updated_count, "details": result.details}


@router.post("/jobs/weaning", response_model=WeaningJobResponse)
async def run_weaning_endpoint(
    background_tasks: BackgroundTasks,
    request: Request,
    today: date | None = None,
    uow_factory: Callable = Depends(get_uow_factory),
):
    result = await run_weaning.execute(uow_factory, today=today or today_local())
    if result.events:
        background_tasks.add_task(dispatch_events, request.app.state.session_factory, result.events)
    return {
        "processed_litters": result.processed_litters,
        "piglets_weaned": result.piglets_weaned,
        "failures": result.failures,
    }
