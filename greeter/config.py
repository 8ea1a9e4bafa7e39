import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
MAX_PORT = 65535


def resolve_port(environ: Optional[Mapping[str, str]] = None) -> int:
    """Return the port to listen on, read once from ``PORT``.

    Unset or empty gives ``DEFAULT_PORT``. Anything that is not an integer in
    ``1..65535`` also falls back to the default, with a warning.
    """
    if environ is None:
        environ = os.environ
    raw = environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    port = int(raw) if raw.isascii() and raw.isdigit() else 0
    if not 0 < port <= MAX_PORT:
        logger.warning("Ignoring invalid PORT %r, using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    return port
