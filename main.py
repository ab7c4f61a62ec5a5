"""
Quotation calculator entry point.

Runs the console front end; all arguments are passed through.

Usage:
    Interactive:  python main.py
    Scenario:     python main.py --scenario boda --no-open
"""


def _run_console_mode() -> None:
    """Start the console front end (no browser required with --no-open)."""
    from console_demo import main

    main()


if __name__ == "__main__":
    _run_console_mode()
