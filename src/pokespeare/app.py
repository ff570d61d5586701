"""Application entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import uvicorn

from pokespeare.api import create_app

if TYPE_CHECKING:
    from pokespeare.config import AppConfig

log = getLogger(__name__)


def serve(config: AppConfig) -> None:
    """Run the HTTP server until interrupted."""

    app = create_app(config)
    log.info("Starting server on %s:%s", config.server.host, config.server.port)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)
