"""Application entry point for BlogDesk backend server."""

from blogdesk.app import App
from blogdesk.config import Config
from blogdesk.logging import setup_logging
from blogdesk.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
