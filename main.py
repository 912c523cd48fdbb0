import socket

import uvicorn
from loguru import logger

from app.core.app import app  # noqa: F401
from app.core.config import settings


def _pick_port(port: int) -> int:
    """Resolve port 0 to a concrete free port so the startup banner can print it."""
    if port:
        return port
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("", 0))
        return sock.getsockname()[1]


if __name__ == "__main__":
    port = _pick_port(settings.PORT)
    logger.info('thanks for locally hosting "UserRate"!')
    logger.info(f"the website is now running on http://localhost:{port}, congratulations!")
    reload = settings.APP_ENV == "development"
    uvicorn.run("app.core.app:app", host="0.0.0.0", port=port, reload=reload)
