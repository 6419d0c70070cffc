import logging
import socket

import uvicorn

from .core.config import settings
from .core.logging import configure_logging

logger = logging.getLogger(__name__)

# Tried in order after settings.PORT; 0 lets the OS pick
FALLBACK_PORTS = (3000, 3001, 8080, 8081, 5000, 5001, 4000, 4001)

def port_available(port: int, host: str = "0.0.0.0") -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True

def find_available_port(preferred: int | None = None, host: str = "0.0.0.0") -> int:
    candidates = ([preferred] if preferred else []) + [p for p in FALLBACK_PORTS if p != preferred]
    for port in candidates:
        if port_available(port, host):
            return port
    return 0

def run(host: str = "0.0.0.0") -> None:
    configure_logging()
    port = find_available_port(settings.PORT, host)
    logger.info("EstateBot starting on http://localhost:%s", port)
    logger.info("Storage: %s (data directory %s)", settings.STORAGE_PROVIDER, settings.DATA_DIR)
    # uvicorn handles SIGINT/SIGTERM with a graceful shutdown
    uvicorn.run("estatebot.main:app", host=host, port=port, log_config=None)

if __name__ == "__main__":
    run()
