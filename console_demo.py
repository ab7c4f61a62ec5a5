"""
Offline console front end for the quotation calculator.

Plays the part of the web form: asks for each field, shows the live
estimates as inputs change, then validates, previews and hands the
message to the WhatsApp link. No browser or network needed with
--no-open, which prints the deep link instead of opening it.

Usage:
    python console_demo.py
    python console_demo.py --scenario boda
    python console_demo.py --scenario invalido --no-open
"""

import argparse
from datetime import date, timedelta
from typing import Any, Optional

from cotizador.config import AppConfig, load_config
from cotizador.quote.messaging import MessageDispatcher, WhatsAppLink
from cotizador.quote.recalculation import RecalculationController
from cotizador.quote.service import QuoteService
from cotizador.schemas.quote_schema import FormField, QuoteOutcome, RawFormInput

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

PROMPTS: dict[FormField, str] = {
    FormField.NOMBRE: "Nombre completo",
    FormField.TELEFONO: "Teléfono (10 dígitos)",
    FormField.FECHA: "Fecha del evento (AAAA-MM-DD)",
    FormField.LUGAR: "Lugar del evento",
    FormField.MESAS: "Número de mesas",
    FormField.INVITADOS: "Número de invitados",
    FormField.BARRA: "Personas de barra (0 si no requiere)",
    FormField.HORA_INICIO: "Hora de inicio (HH:MM)",
    FormField.HORA_FIN: "Hora de fin (HH:MM)",
}


def _scenarios(today: date) -> dict[str, dict[FormField, str]]:
    tomorrow = (today + timedelta(days=1)).isoformat()
    return {
        "boda": {
            FormField.NOMBRE: "Ana Pérez",
            FormField.TELEFONO: "9981234567",
            FormField.FECHA: tomorrow,
            FormField.LUGAR: "Salón X",
            FormField.MESAS: "10",
            FormField.INVITADOS: "150",
            FormField.BARRA: "4",
            FormField.HORA_INICIO: "19:00",
            FormField.HORA_FIN: "01:00",
        },
        "sin_barra": {
            FormField.NOMBRE: "Luis Canul",
            FormField.TELEFONO: "9997654321",
            FormField.FECHA: tomorrow,
            FormField.LUGAR: "Hacienda Xcanatún",
            FormField.MESAS: "6",
            FormField.INVITADOS: "60",
            FormField.BARRA: "0",
            FormField.HORA_INICIO: "14:00",
            FormField.HORA_FIN: "18:30",
        },
        "invalido": {
            FormField.NOMBRE: "",
            FormField.TELEFONO: "998-123",
            FormField.FECHA: (today - timedelta(days=1)).isoformat(),
            FormField.LUGAR: "Salón X",
            FormField.MESAS: "0",
            FormField.INVITADOS: "80",
            FormField.BARRA: "",
            FormField.HORA_INICIO: "18:00",
            FormField.HORA_FIN: "",
        },
    }


class ConsoleSession:
    """Simulates one pass through the quote form in the terminal."""

    def __init__(self, config: Optional[AppConfig] = None, open_links: bool = True) -> None:
        self.config = config or AppConfig()
        opener = None if open_links else self._print_link
        self.service = QuoteService(
            self.config,
            dispatcher=MessageDispatcher(WhatsAppLink(self.config.messaging), opener=opener),
        )
        self.controller = RecalculationController(self.config.staffing)
        self.values: dict[str, Any] = {}

    def say(self, text: str) -> None:
        print(f"{GREEN}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    @staticmethod
    def _print_link(url: str) -> None:
        print(f"{YELLOW}  Enlace: {url}{RESET}")

    def _form(self) -> RawFormInput:
        return RawFormInput(**self.values)

    def set_field(self, form_field: FormField, value: str) -> None:
        """Record a field value and show any live estimate it changes."""
        self.values[form_field.value] = value
        for view in self.controller.on_change(form_field, self._form()):
            if view.shown:
                self.system_log(view.text)
            else:
                self.system_log(f"{view.field.value}: oculto")

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted form for demo purposes."""
        steps = _scenarios(date.today()).get(scenario)
        if not steps:
            print(f"{RED}Escenario desconocido: {scenario}{RESET}")
            return

        self._banner(f"Escenario: {scenario}")
        for form_field, value in steps.items():
            print(f"{BLUE}{PROMPTS[form_field]}: {RESET}{value}")
            self.set_field(form_field, value)
        self._submit()

    def run(self) -> None:
        self._banner("Escribe 'salir' para terminar")
        for form_field, prompt in PROMPTS.items():
            value = input(f"{BLUE}{prompt}: {RESET}").strip()
            if value.lower() in ("salir", "quit", "exit"):
                print(f"\n{DIM}Sesión terminada.{RESET}")
                return
            self.set_field(form_field, value)
        self._submit()

    def _banner(self, subtitle: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  COTIZADOR - {self.config.business_name}{RESET}")
        print(f"{BOLD}  {subtitle}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def _show_preview(self, outcome: QuoteOutcome) -> None:
        print(f"\n{BOLD}Resumen de tu evento{RESET}")
        for line in (outcome.preview or "").splitlines():
            self.say(f"  {line}")

    def _submit(self) -> None:
        outcome, status = self.service.submit(self._form(), on_preview=self._show_preview)
        if not outcome.validation.valid:
            print(f"\n{RED}{BOLD}Revisa los siguientes campos:{RESET}")
            for form_field, message in outcome.validation.errors.items():
                print(f"{RED}  {form_field.value}: {message}{RESET}")
            return
        self.system_log(f"Cotización {outcome.quote_id} enviada (estado: {status.value})")


def main() -> None:
    parser = argparse.ArgumentParser(description="Cotizador de meseros en consola")
    parser.add_argument(
        "--scenario",
        choices=["boda", "sin_barra", "invalido"],
        default=None,
        help="Auto-play a pre-scripted form instead of interactive mode",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Print the WhatsApp link instead of opening a browser",
    )
    args = parser.parse_args()

    session = ConsoleSession(load_config(), open_links=not args.no_open)
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
