"""Entry point for the Lunch Tray Textual app."""

from __future__ import annotations

from lunchtray.logs import setup_logging
from lunchtray.lunch_tray_app import LunchTrayApp


def main() -> None:
    """Run the Textual application."""
    setup_logging()
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
