"""Staff-count calculators for wait staff and bar staff."""

import logging
from typing import Any, Optional

from cotizador.config import StaffingConfig
from cotizador.schemas.quote_schema import QuoteRequest, StaffingPlan
from cotizador.utils import parse_count

logger = logging.getLogger(__name__)


class StaffingCalculator:
    """
    Derives staff counts from table and bar-staff inputs.

    Bar staff follows the explicit-entry policy: the count the customer
    typed is used as-is (floored at zero), never re-derived from the
    guest count, so the quote matches what the staff are told.
    """

    def __init__(self, config: Optional[StaffingConfig] = None) -> None:
        self.config = config or StaffingConfig()

    def wait_staff(self, table_count: Any) -> int:
        """One waiter per ``tables_per_waiter`` tables, rounded up; 0 without tables."""
        tables = parse_count(table_count)
        if tables <= 0:
            return 0
        return -(-tables // self.config.tables_per_waiter)

    def bar_staff(self, guest_count: Any, explicit_bar_count: Any) -> int:
        """Bar staff as entered by the customer.

        ``guest_count`` is accepted for call-site symmetry with the wait-staff
        rule but does not change the result under the explicit-entry policy.
        """
        return max(parse_count(explicit_bar_count), 0)

    def plan(self, request: QuoteRequest) -> StaffingPlan:
        plan = StaffingPlan(
            wait_staff_count=self.wait_staff(request.table_count),
            bar_staff_count=self.bar_staff(request.guest_count, request.bar_staff_requested),
        )
        logger.debug(
            "Staffing for %d table(s): %d waiter(s), %d bar staff",
            request.table_count, plan.wait_staff_count, plan.bar_staff_count,
        )
        return plan
