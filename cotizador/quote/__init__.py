from cotizador.quote.duration import DurationCalculator
from cotizador.quote.messaging import MessageDispatcher, WhatsAppLink
from cotizador.quote.recalculation import (
    DerivedField,
    FieldState,
    FieldView,
    RecalculationController,
)
from cotizador.quote.service import QuoteService
from cotizador.quote.staffing import StaffingCalculator
from cotizador.quote.summary import SummaryBuilder
from cotizador.quote.validator import QuoteValidator

__all__ = [
    "QuoteValidator",
    "StaffingCalculator",
    "DurationCalculator",
    "SummaryBuilder",
    "RecalculationController",
    "DerivedField",
    "FieldState",
    "FieldView",
    "WhatsAppLink",
    "MessageDispatcher",
    "QuoteService",
]
