from __future__ import annotations

from datetime import date

import pytest

from src.application.errors import DataInvalidError, ValidationError
from src.application.use_cases.abortions.record_abortion import check_abortion_gestation
from src.application.use_cases.births.record_birth import (
    check_birth_gestation,
    check_litter_counts,
)
from src.application.use_cases.pregnancies.register_pregnancy import validate_confirmation


@pytest.mark.parametrize("days", [110, 114, 120])
def test_birth_gestation_inside_bounds(days):
    check_birth_gestation(days)


@pytest.mark.parametrize("days", [109, 121])
def test_birth_gestation_outside_bounds(days):
    with pytest.raises(DataInvalidError) as exc:
        check_birth_gestation(days)
    assert f"got {days}" in exc.value.message


@pytest.mark.parametrize("days", [1, 60, 113])
def test_abortion_gestation_inside_bounds(days):
    check_abortion_gestation(days)


@pytest.mark.parametrize("days", [0, 114])
def test_abortion_gestation_outside_bounds(days):
    with pytest.raises(DataInvalidError):
        check_abortion_gestation(days)


def test_litter_total_must_match_parts():
    check_litter_counts(10, 1, 1, 12)
    with pytest.raises(DataInvalidError) as exc:
        check_litter_counts(10, 1, 1, 13)
    assert "Total born (13)" in exc.value.message


def test_litter_counts_cannot_be_negative():
    with pytest.raises(DataInvalidError):
        check_litter_counts(-1, 1, 0, 0)


def test_confirmation_requires_date_and_known_method():
    conception = date(2024, 1, 1)
    validate_confirmation(conception, date(2024, 1, 25), "ultrasound")

    with pytest.raises(DataInvalidError):
        validate_confirmation(conception, None, "ultrasound")
    with pytest.raises(ValidationError):
        validate_confirmation(conception, date(2024, 1, 25), "guess")
    with pytest.raises(DataInvalidError):
        validate_confirmation(conception, date(2023, 12, 31), "visual")
