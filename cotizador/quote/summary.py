"""
Quote summary builder.

Composes a validated request, its staffing plan and duration into one
immutable QuoteSummary, then renders both the on-screen preview and the
outbound message from that same snapshot so the two can never drift.

Usage:
    builder = SummaryBuilder(config.messaging)
    summary = builder.build(request, plan, duration)
    preview = builder.render_display(summary)
    message = builder.render_message(summary)
"""

import logging
from typing import NamedTuple, Optional

from cotizador.config import MessagingConfig
from cotizador.quote.formatting import format_long_date, format_time_12h
from cotizador.schemas.quote_schema import (
    EventDuration,
    QuoteRequest,
    QuoteSummary,
    StaffingPlan,
)

logger = logging.getLogger(__name__)


class SummaryLine(NamedTuple):
    icon: str
    label: str
    value: str


class SummaryBuilder:
    """Builds QuoteSummary snapshots and renders them."""

    def __init__(self, config: Optional[MessagingConfig] = None) -> None:
        self.config = config or MessagingConfig()

    def build(
        self,
        request: QuoteRequest,
        plan: StaffingPlan,
        duration: EventDuration,
    ) -> QuoteSummary:
        summary = QuoteSummary(
            contact_name=request.contact_name,
            phone=request.phone,
            formatted_date=format_long_date(request.event_date),
            event_date_iso=request.event_date.isoformat(),
            venue=request.venue,
            table_count=request.table_count,
            wait_staff_count=plan.wait_staff_count,
            guest_count=request.guest_count,
            bar_staff_count=plan.bar_staff_count,
            start_time_display=format_time_12h(request.start_time),
            end_time_display=format_time_12h(request.end_time),
            duration=duration,
        )
        logger.debug("Summary built for %s on %s", summary.contact_name, summary.event_date_iso)
        return summary

    @staticmethod
    def lines(summary: QuoteSummary) -> list[SummaryLine]:
        """Labeled lines shared by both renderings; bar staff only when requested."""
        lines = [
            SummaryLine("👤", "Nombre", summary.contact_name),
            SummaryLine("📞", "Teléfono", summary.phone),
            SummaryLine("📅", "Fecha", summary.formatted_date),
            SummaryLine("📍", "Lugar", summary.venue),
            SummaryLine("🍽", "Mesas", str(summary.table_count)),
            SummaryLine("👨‍🍳", "Meseros asignados", str(summary.wait_staff_count)),
            SummaryLine("👥", "Invitados", str(summary.guest_count)),
        ]
        if summary.has_bar_staff:
            lines.append(
                SummaryLine("🍹", "Personal de barra", f"{summary.bar_staff_count} persona(s)")
            )
        lines.append(SummaryLine("⏰", "Horario", summary.time_range))
        return lines

    def display_lines(self, summary: QuoteSummary) -> list[str]:
        return [f"{line.icon} {line.label}: {line.value}" for line in self.lines(summary)]

    def render_display(self, summary: QuoteSummary) -> str:
        """Plain-text preview, one labeled line per field."""
        return "\n".join(self.display_lines(summary))

    def render_message(self, summary: QuoteSummary) -> str:
        """Message block with the fixed greeting and closing.

        Returned unencoded; the messaging link encodes it for transport.
        """
        body = "\n".join(
            f"{line.icon} *{line.label}:* {line.value}" for line in self.lines(summary)
        )
        return f"{self.config.greeting}\n\n{body}\n\n{self.config.closing}"
