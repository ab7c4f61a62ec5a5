"""
Quote form validation against business constraints.

Every rule runs independently and all failures are collected in field
declaration order, so the presentation layer can show every problem in
one pass and scroll to the first one.

Usage:
    validator = QuoteValidator(config.validation)
    result = validator.validate(RawFormInput(nombre="Ana", ...))
    if not result.valid:
        focus(result.first_failed_field)
"""

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Optional

from cotizador.config import ValidationConfig
from cotizador.schemas.quote_schema import FormField, RawFormInput, ValidationResult
from cotizador.utils import clean_text, parse_count, parse_date, parse_time

logger = logging.getLogger(__name__)

MIN_TABLES = 1
MIN_GUESTS = 1

# Check returns None on success, the user-facing message on failure.
FieldCheck = Callable[[Any, date], Optional[str]]


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for a single form field."""

    field: FormField
    check: FieldCheck


class QuoteValidator:
    """Validates raw quote form input field by field."""

    def __init__(self, config: Optional[ValidationConfig] = None) -> None:
        self.config = config or ValidationConfig()
        self._phone_pattern = re.compile(rf"\d{{{self.config.phone_length}}}", re.ASCII)
        self.rules: list[FieldRule] = [
            FieldRule(FormField.NOMBRE, self._check_name),
            FieldRule(FormField.TELEFONO, self._check_phone),
            FieldRule(FormField.FECHA, self._check_date),
            FieldRule(FormField.LUGAR, self._check_venue),
            FieldRule(FormField.MESAS, self._check_tables),
            FieldRule(FormField.INVITADOS, self._check_guests),
            FieldRule(FormField.HORA_INICIO, self._check_start_time),
            FieldRule(FormField.HORA_FIN, self._check_end_time),
        ]

    def _check_name(self, value: Any, today: date) -> Optional[str]:
        if len(clean_text(value)) < self.config.name_min_length:
            return "Ingresa tu nombre completo."
        return None

    def _check_phone(self, value: Any, today: date) -> Optional[str]:
        if not self._phone_pattern.fullmatch(clean_text(value)):
            return f"Ingresa un teléfono válido de {self.config.phone_length} dígitos."
        return None

    @staticmethod
    def _check_date(value: Any, today: date) -> Optional[str]:
        event_date = parse_date(value)
        if event_date is None:
            return "Selecciona la fecha del evento."
        if event_date < today:
            return "La fecha debe ser futura."
        return None

    @staticmethod
    def _check_venue(value: Any, today: date) -> Optional[str]:
        if not clean_text(value):
            return "Indica el lugar del evento."
        return None

    @staticmethod
    def _check_tables(value: Any, today: date) -> Optional[str]:
        if parse_count(value) < MIN_TABLES:
            return "Ingresa al menos 1 mesa."
        return None

    @staticmethod
    def _check_guests(value: Any, today: date) -> Optional[str]:
        if parse_count(value) < MIN_GUESTS:
            return "Ingresa el número de invitados."
        return None

    @staticmethod
    def _check_start_time(value: Any, today: date) -> Optional[str]:
        if parse_time(value) is None:
            return "Selecciona la hora de inicio."
        return None

    @staticmethod
    def _check_end_time(value: Any, today: date) -> Optional[str]:
        if parse_time(value) is None:
            return "Selecciona la hora de finalización."
        return None

    def validate(self, raw: RawFormInput, today: Optional[date] = None) -> ValidationResult:
        """
        Check every field rule and collect all failures.

        Args:
            raw: Form values as reported by the presentation layer.
            today: Reference date for the no-past-dates rule (defaults to today).

        Returns:
            ValidationResult with failed fields in declaration order.
        """
        today = today or date.today()
        errors: dict[FormField, str] = {}
        for rule in self.rules:
            message = rule.check(raw.value_of(rule.field), today)
            if message is not None:
                errors[rule.field] = message
                logger.debug("Field '%s' failed validation: %s", rule.field.value, message)

        return ValidationResult(
            valid=not errors,
            failed_fields=tuple(errors),
            errors=errors,
        )

    @staticmethod
    def min_event_date(today: Optional[date] = None) -> str:
        """ISO date the date picker should offer as its minimum."""
        return (today or date.today()).isoformat()
