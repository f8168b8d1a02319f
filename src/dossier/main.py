"""Application entry point for the Dossier backend server."""

from dossier.app import App
from dossier.config import Config
from dossier.logging import setup_logging
from dossier.web.runner import run_server


def main() -> None:
    config = Config()  # type: ignore[call-arg]
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
