import logging
from classmcp.api.dispatcher import Dispatcher
from classmcp.api.stdio import serve_stdio
from classmcp.core.config import settings
from classmcp.core.logging import configure_logging
from classmcp.core.session import ServerSession

log = logging.getLogger(__name__)


def main() -> None:
    """Load the project config, then serve JSON-RPC over stdio."""
    configure_logging(settings.log_level)

    try:
        session = ServerSession.start(settings)
    except Exception as e:
        log.error("Startup failed: %s", e, exc_info=True)
        raise

    log.info("%s v%s - Multi-framework CSS class server running on stdio",
             settings.app_name, settings.app_version, extra={"framework": session.current_framework})
    log.info("Default framework: %s", session.display_name, extra={"framework": session.current_framework})

    stats = session.registry.get_framework_stats(session.current_framework)
    if stats.custom_patterns > 0:
        log.info("Custom patterns: %d", stats.custom_patterns, extra={"framework": session.current_framework})

    try:
        serve_stdio(Dispatcher(session))
    except KeyboardInterrupt:
        log.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
