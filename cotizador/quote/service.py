"""
Quote submission pipeline: validate -> calculate -> summarize -> dispatch.

Submission is a two-phase protocol. Phase one (``prepare``) is synchronous
and produces everything the preview needs; phase two (``dispatch``) hands
the message to the messaging link. ``submit`` runs both with the preview
callback in between, so the summary is always rendered before navigation.

Usage:
    service = QuoteService(load_config())
    outcome = service.prepare(RawFormInput(**form_values))
    if outcome.ready:
        show(outcome.preview)
        service.dispatch(outcome)
"""

from datetime import date
from typing import Callable, Optional

from cotizador.config import AppConfig
from cotizador.logging_context import get_quote_logger, new_quote_id, set_quote_id
from cotizador.quote.duration import DurationCalculator
from cotizador.quote.messaging import MessageDispatcher, WhatsAppLink
from cotizador.quote.staffing import StaffingCalculator
from cotizador.quote.summary import SummaryBuilder
from cotizador.quote.validator import QuoteValidator
from cotizador.schemas.quote_schema import (
    DispatchStatus,
    QuoteOutcome,
    QuoteRequest,
    RawFormInput,
)

logger = get_quote_logger(__name__)


class QuoteService:
    """Runs one quote submission end to end."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        dispatcher: Optional[MessageDispatcher] = None,
        today: Optional[date] = None,
    ) -> None:
        self.config = config or AppConfig()
        self.validator = QuoteValidator(self.config.validation)
        self.staffing = StaffingCalculator(self.config.staffing)
        self.durations = DurationCalculator()
        self.builder = SummaryBuilder(self.config.messaging)
        self.dispatcher = dispatcher or MessageDispatcher(WhatsAppLink(self.config.messaging))
        self._today = today

    def prepare(self, raw: RawFormInput) -> QuoteOutcome:
        """Phase one: validate and, when valid, build and render the quote."""
        quote_id = new_quote_id()
        set_quote_id(quote_id)

        validation = self.validator.validate(raw, today=self._today)
        if not validation.valid:
            logger.info(
                "Quote rejected, failed fields: %s",
                ", ".join(f.value for f in validation.failed_fields),
            )
            return QuoteOutcome(quote_id=quote_id, validation=validation)

        request = QuoteRequest.from_form(raw)
        plan = self.staffing.plan(request)
        duration = self.durations.duration(request.start_time, request.end_time)
        summary = self.builder.build(request, plan, duration)

        logger.info(
            "Quote prepared: %d waiter(s), %d bar staff, %s hour(s)",
            plan.wait_staff_count, plan.bar_staff_count, duration.display,
        )
        return QuoteOutcome(
            quote_id=quote_id,
            validation=validation,
            request=request,
            plan=plan,
            summary=summary,
            preview=self.builder.render_display(summary),
            message=self.builder.render_message(summary),
        )

    def dispatch(self, outcome: QuoteOutcome) -> DispatchStatus:
        """Phase two: hand the prepared message to the messaging link.

        Raises:
            ValueError: If the outcome did not pass phase one.
        """
        if not outcome.ready:
            raise ValueError(
                f"Quote {outcome.quote_id} has no message to dispatch; "
                f"failed fields: {[f.value for f in outcome.validation.failed_fields]}"
            )
        set_quote_id(outcome.quote_id)
        return self.dispatcher.dispatch(outcome.message)

    def submit(
        self,
        raw: RawFormInput,
        on_preview: Optional[Callable[[QuoteOutcome], None]] = None,
    ) -> tuple[QuoteOutcome, Optional[DispatchStatus]]:
        """Run both phases; the preview callback completes before dispatch starts."""
        outcome = self.prepare(raw)
        if not outcome.ready:
            return outcome, None
        if on_preview is not None:
            on_preview(outcome)
        return outcome, self.dispatch(outcome)
