from cotizador.schemas.quote_schema import (
    DispatchStatus,
    EventDuration,
    FormField,
    QuoteOutcome,
    QuoteRequest,
    QuoteSummary,
    RawFormInput,
    StaffingPlan,
    ValidationResult,
)

__all__ = [
    "FormField",
    "DispatchStatus",
    "RawFormInput",
    "ValidationResult",
    "QuoteRequest",
    "StaffingPlan",
    "EventDuration",
    "QuoteSummary",
    "QuoteOutcome",
]
