"""Quote form, staffing and summary data models."""

from datetime import date, time
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from cotizador.utils import clean_text, parse_count, parse_date, parse_time


class FormField(str, Enum):
    """Quote form fields in declaration order.

    Values are the element ids used by the presentation layer.
    """
    NOMBRE = "nombre"
    TELEFONO = "telefono"
    FECHA = "fecha"
    LUGAR = "lugar"
    MESAS = "mesas"
    INVITADOS = "invitados"
    BARRA = "barra"
    HORA_INICIO = "horaInicio"
    HORA_FIN = "horaFin"


class DispatchStatus(str, Enum):
    """Outcome of handing a message to the messaging link.

    The external channel gives no feedback, so the only value is UNKNOWN.
    """
    UNKNOWN = "unknown"


class RawFormInput(BaseModel):
    """Untyped snapshot of the quote form as the presentation layer reports it."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    nombre: Any = None
    telefono: Any = None
    fecha: Any = None
    lugar: Any = None
    mesas: Any = None
    invitados: Any = None
    barra: Any = None
    hora_inicio: Any = Field(default=None, alias="horaInicio")
    hora_fin: Any = Field(default=None, alias="horaFin")

    def value_of(self, form_field: FormField) -> Any:
        """Return the raw value for a form field id."""
        return getattr(self, _ATTRIBUTE_BY_FIELD[form_field])

    def replace(self, form_field: FormField, value: Any) -> "RawFormInput":
        """Return a copy with one field changed."""
        return self.model_copy(update={_ATTRIBUTE_BY_FIELD[form_field]: value})


_ATTRIBUTE_BY_FIELD: dict[FormField, str] = {
    FormField.NOMBRE: "nombre",
    FormField.TELEFONO: "telefono",
    FormField.FECHA: "fecha",
    FormField.LUGAR: "lugar",
    FormField.MESAS: "mesas",
    FormField.INVITADOS: "invitados",
    FormField.BARRA: "barra",
    FormField.HORA_INICIO: "hora_inicio",
    FormField.HORA_FIN: "hora_fin",
}


class ValidationResult(BaseModel):
    """Outcome of validating a quote form."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    failed_fields: tuple[FormField, ...] = ()
    errors: dict[FormField, str] = Field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.valid, self.failed_fields, frozenset(self.errors.items())))

    @property
    def first_failed_field(self) -> Optional[FormField]:
        return self.failed_fields[0] if self.failed_fields else None


class QuoteRequest(BaseModel):
    """Typed, immutable quote request captured from a validated form."""

    model_config = ConfigDict(frozen=True)

    contact_name: str
    phone: str
    event_date: date
    venue: str
    table_count: int = Field(ge=0)
    guest_count: int = Field(ge=0)
    bar_staff_requested: int = Field(default=0, ge=0)
    start_time: time
    end_time: time

    @classmethod
    def from_form(cls, raw: RawFormInput) -> "QuoteRequest":
        """Capture a request from a form that already passed validation."""
        return cls(
            contact_name=clean_text(raw.nombre),
            phone=clean_text(raw.telefono),
            event_date=parse_date(raw.fecha),
            venue=clean_text(raw.lugar),
            table_count=max(parse_count(raw.mesas), 0),
            guest_count=max(parse_count(raw.invitados), 0),
            bar_staff_requested=max(parse_count(raw.barra), 0),
            start_time=parse_time(raw.hora_inicio),
            end_time=parse_time(raw.hora_fin),
        )


class StaffingPlan(BaseModel):
    """Staff counts derived from a quote request."""

    model_config = ConfigDict(frozen=True)

    wait_staff_count: int = Field(default=0, ge=0)
    bar_staff_count: int = Field(default=0, ge=0)


class EventDuration(BaseModel):
    """Event length in hours, rounded to one decimal."""

    model_config = ConfigDict(frozen=True)

    hours: float = Field(default=0.0, ge=0)

    @property
    def display(self) -> str:
        """Render whole hours without a decimal ("6") and others with one ("6.5")."""
        if self.hours == int(self.hours):
            return str(int(self.hours))
        return f"{self.hours:.1f}"


class QuoteSummary(BaseModel):
    """Single snapshot behind both the on-screen preview and the outbound message."""

    model_config = ConfigDict(frozen=True)

    contact_name: str
    phone: str
    formatted_date: str
    event_date_iso: str
    venue: str
    table_count: int
    wait_staff_count: int
    guest_count: int
    bar_staff_count: int
    start_time_display: str
    end_time_display: str
    duration: EventDuration

    @property
    def time_range(self) -> str:
        return f"{self.start_time_display} - {self.end_time_display}"

    @property
    def has_bar_staff(self) -> bool:
        return self.bar_staff_count > 0


class QuoteOutcome(BaseModel):
    """Result of phase one of a submission: validation plus, when valid, the rendered quote."""

    model_config = ConfigDict(frozen=True)

    quote_id: str
    validation: ValidationResult
    request: Optional[QuoteRequest] = None
    plan: Optional[StaffingPlan] = None
    summary: Optional[QuoteSummary] = None
    preview: Optional[str] = None
    message: Optional[str] = None

    @property
    def ready(self) -> bool:
        """True when the quote is valid and a message is ready to dispatch."""
        return self.validation.valid and self.message is not None
