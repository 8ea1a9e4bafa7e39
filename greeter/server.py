import logging
import sys
from typing import Optional

import uvicorn

from .config import DEFAULT_HOST, resolve_port
from .main import app

logger = logging.getLogger(__name__)


class GreeterServer(uvicorn.Server):
    """uvicorn server that reports the port once the listener is bound."""

    async def startup(self, sockets=None) -> None:
        # exits the process with status 1 if the bind fails
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server running on port %d", self.config.port)


def run(port: Optional[int] = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stdout,
    )
    if port is None:
        port = resolve_port()
    config = uvicorn.Config(app, host=DEFAULT_HOST, port=port)
    try:
        GreeterServer(config).run()
    except KeyboardInterrupt:
        pass


def main() -> None:
    run()
