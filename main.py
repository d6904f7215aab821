"""
Main entrypoint: run the Chirpy API under uvicorn.

Env: CHIRPY_HOST, CHIRPY_PORT, CHIRPY_FILEPATH_ROOT, CHIRPY_MAX_CHIRP_LENGTH,
CHIRPY_PROFANE_WORDS, LOG_LEVEL, LOG_FORMAT (see chirpy.config.settings).

Equivalent: uvicorn chirpy.api_server.app:app --host 0.0.0.0 --port 8080
"""

import sys

from chirpy.chirpy_logging import get_logger
from chirpy.chirpy_logging.logger import configure_structlog


def main() -> None:
    """Load settings, build the app, and serve it on the configured host/port."""
    from chirpy.config import get_settings
    from chirpy.core.exceptions import ConfigError

    try:
        settings = get_settings()
    except ConfigError as e:
        get_logger("main").error("main_config_error", error=str(e))
        sys.exit(1)

    # Must run before get_logger below
    configure_structlog(settings.log_level, settings.log_format)
    logger = get_logger("main")
    if not settings.filepath_root.is_dir():
        logger.error("main_config_error", error="filepath root is not a directory", filepath_root=str(settings.filepath_root))
        sys.exit(1)

    from chirpy.api_server.server import create_app
    from chirpy.metrics import HitCounter
    import uvicorn

    app = create_app(settings, HitCounter())
    logger.info("main_server_starting", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
