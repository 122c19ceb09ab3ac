"""Uvicorn server runner with custom configuration."""

import copy

import structlog
import uvicorn
from uvicorn.config import LOGGING_CONFIG

from blogdesk.app import App
from blogdesk.config import Config
from blogdesk.web.server import create_fastapi_app

logger = structlog.get_logger(__name__)


def run_server(app: App, config: Config) -> None:
    """Run a single Uvicorn process.

    Without a database, sessions live in this process only, so the server is never forked into workers.
    """
    fastapi_app = create_fastapi_app(app, config)

    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = '%(asctime)s - %(client_addr)s "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s - %(levelname)s - %(message)s"

    logger.info("server_starting", host=config.host, port=config.port, durable_sessions=config.database_url is not None)
    uvicorn.run(fastapi_app, host=config.host, port=config.port, log_config=log_config, access_log=True)
