"""
Live recalculation of derived quote fields as form inputs change.

Each derived field (wait staff, bar staff, duration) is a two-state
machine: HIDDEN while its inputs are insufficient, SHOWN with a live
estimate once they are usable. Fields recompute independently, so a bad
guest count never hides a valid wait-staff estimate. This is a feedback
aid only; submission is gated by the validator alone.

Usage:
    controller = RecalculationController(config.staffing)
    views = controller.on_change("mesas", form)
    for view in views:
        render(view.field, view.state, view.text)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from cotizador.config import StaffingConfig
from cotizador.quote.duration import DurationCalculator
from cotizador.quote.staffing import StaffingCalculator
from cotizador.schemas.quote_schema import FormField, RawFormInput
from cotizador.utils import parse_count, parse_time

logger = logging.getLogger(__name__)


class DerivedField(str, Enum):
    """Estimates shown live next to the form."""
    WAIT_STAFF = "wait_staff"
    BAR_STAFF = "bar_staff"
    DURATION = "duration"


class FieldState(str, Enum):
    HIDDEN = "hidden"
    SHOWN = "shown"


class RecalcTrigger(str, Enum):
    """Outcome of re-reading a derived field's inputs."""
    INPUT_USABLE = "input_usable"
    INPUT_INSUFFICIENT = "input_insufficient"


@dataclass(frozen=True)
class Transition:
    """A single valid state transition."""
    from_state: FieldState
    to_state: FieldState
    trigger: RecalcTrigger


@dataclass(frozen=True)
class FieldView:
    """What the presentation layer should show for one derived field."""
    field: DerivedField
    state: FieldState
    text: str = ""

    @property
    def shown(self) -> bool:
        return self.state == FieldState.SHOWN


class RecalculationController:
    """Re-runs the calculators whenever a relevant input changes."""

    TRANSITIONS: list[Transition] = [
        Transition(FieldState.HIDDEN, FieldState.SHOWN, RecalcTrigger.INPUT_USABLE),
        Transition(FieldState.HIDDEN, FieldState.HIDDEN, RecalcTrigger.INPUT_INSUFFICIENT),
        Transition(FieldState.SHOWN, FieldState.SHOWN, RecalcTrigger.INPUT_USABLE),
        Transition(FieldState.SHOWN, FieldState.HIDDEN, RecalcTrigger.INPUT_INSUFFICIENT),
    ]

    # Which derived fields each form input feeds.
    DEPENDENCIES: dict[FormField, tuple[DerivedField, ...]] = {
        FormField.MESAS: (DerivedField.WAIT_STAFF,),
        FormField.INVITADOS: (DerivedField.BAR_STAFF,),
        FormField.BARRA: (DerivedField.BAR_STAFF,),
        FormField.HORA_INICIO: (DerivedField.DURATION,),
        FormField.HORA_FIN: (DerivedField.DURATION,),
    }

    def __init__(self, config: Optional[StaffingConfig] = None) -> None:
        self.staffing = StaffingCalculator(config)
        self.durations = DurationCalculator()
        self._transitions: dict[tuple[FieldState, RecalcTrigger], Transition] = {
            (t.from_state, t.trigger): t for t in self.TRANSITIONS
        }
        self._views: dict[DerivedField, FieldView] = {
            derived: FieldView(field=derived, state=FieldState.HIDDEN)
            for derived in DerivedField
        }

    def view(self, derived: DerivedField) -> FieldView:
        """Return the current view of a derived field."""
        return self._views[derived]

    def on_change(self, changed: Union[FormField, str], form: RawFormInput) -> list[FieldView]:
        """
        Recompute the derived fields fed by ``changed``.

        Args:
            changed: Form field id that just changed.
            form: Current values of the whole form.

        Returns:
            Updated views for the affected derived fields (may be empty).

        Raises:
            ValueError: If ``changed`` is not a known form field id.
        """
        form_field = self._resolve_field(changed)
        return [self._recompute(derived, form) for derived in self.DEPENDENCIES.get(form_field, ())]

    def recalculate_all(self, form: RawFormInput) -> dict[DerivedField, FieldView]:
        return {derived: self._recompute(derived, form) for derived in DerivedField}

    @staticmethod
    def _resolve_field(changed: Union[FormField, str]) -> FormField:
        try:
            return FormField(changed)
        except ValueError:
            valid = [f.value for f in FormField]
            raise ValueError(
                f"Unknown form field '{changed}'. Valid fields: {valid}"
            ) from None

    def _compute_text(self, derived: DerivedField, form: RawFormInput) -> Optional[str]:
        """Live estimate text, or None while the inputs are insufficient."""
        if derived == DerivedField.WAIT_STAFF:
            tables = parse_count(form.mesas)
            if tables <= 0:
                return None
            waiters = self.staffing.wait_staff(tables)
            return f"Para {tables} mesa(s) se asignarán {waiters} mesero(s)."

        if derived == DerivedField.BAR_STAFF:
            bar = self.staffing.bar_staff(form.invitados, form.barra)
            if bar <= 0:
                return None
            return f"Se asignarán {bar} persona(s) de barra."

        if parse_time(form.hora_inicio) is None or parse_time(form.hora_fin) is None:
            return None
        duration = self.durations.duration(form.hora_inicio, form.hora_fin)
        return f"El servicio duraría {duration.display} hora(s)."

    def _recompute(self, derived: DerivedField, form: RawFormInput) -> FieldView:
        text = self._compute_text(derived, form)
        trigger = RecalcTrigger.INPUT_INSUFFICIENT if text is None else RecalcTrigger.INPUT_USABLE
        t = self._transitions[(self._views[derived].state, trigger)]

        view = FieldView(field=derived, state=t.to_state, text=text or "")
        self._views[derived] = view
        if t.from_state != t.to_state:
            logger.debug(
                "Derived field %s: %s -> %s",
                derived.value, t.from_state.value, t.to_state.value,
            )
        return view
