"""Shared test fixtures and helpers."""

from datetime import date, timedelta
from typing import Any

import pytest

from cotizador.config import AppConfig
from cotizador.quote.duration import DurationCalculator
from cotizador.quote.messaging import MessageDispatcher, WhatsAppLink
from cotizador.quote.recalculation import RecalculationController
from cotizador.quote.service import QuoteService
from cotizador.quote.staffing import StaffingCalculator
from cotizador.quote.summary import SummaryBuilder
from cotizador.quote.validator import QuoteValidator
from cotizador.schemas.quote_schema import RawFormInput

# A Monday; tomorrow is Tuesday 2026-10-20.
TODAY = date(2026, 10, 19)
TOMORROW = TODAY + timedelta(days=1)


class RecordingOpener:
    """Stands in for the browser: remembers every URL it was asked to open."""

    def __init__(self) -> None:
        self.urls: list[str] = []

    def __call__(self, url: str) -> None:
        self.urls.append(url)


@pytest.fixture
def config():
    return AppConfig()


@pytest.fixture
def validator(config):
    return QuoteValidator(config.validation)


@pytest.fixture
def staffing(config):
    return StaffingCalculator(config.staffing)


@pytest.fixture
def durations():
    return DurationCalculator()


@pytest.fixture
def builder(config):
    return SummaryBuilder(config.messaging)


@pytest.fixture
def controller(config):
    return RecalculationController(config.staffing)


@pytest.fixture
def opener():
    return RecordingOpener()


@pytest.fixture
def service(config, opener):
    dispatcher = MessageDispatcher(WhatsAppLink(config.messaging), opener=opener)
    return QuoteService(config, dispatcher=dispatcher, today=TODAY)


def make_form(**overrides: Any) -> RawFormInput:
    """Helper to create a valid RawFormInput; keyword overrides replace fields."""
    values: dict[str, Any] = {
        "nombre": "Ana Pérez",
        "telefono": "9981234567",
        "fecha": TOMORROW.isoformat(),
        "lugar": "Salón X",
        "mesas": "10",
        "invitados": "150",
        "barra": "4",
        "hora_inicio": "19:00",
        "hora_fin": "01:00",
    }
    values.update(overrides)
    return RawFormInput(**values)
