"""Application entry points."""

from __future__ import annotations

import sys

from kingtake.settings import AppSettings, configure_logging


def main() -> None:
    """Play a game in the terminal."""
    from kingtake.game.console import ConsoleSession

    settings = AppSettings()
    configure_logging(settings.log_level)
    ConsoleSession(settings=settings).run()


def gui_main() -> None:
    """Launch the Qt board window."""
    from kingtake.ui.bootstrap import run_application

    settings = AppSettings()
    configure_logging(settings.log_level)
    sys.exit(run_application(settings=settings))


if __name__ == "__main__":
    main()
