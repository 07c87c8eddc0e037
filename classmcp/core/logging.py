import logging
import sys


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional framework and tool fields."""
    def format(self, record):
        # Add default values for framework and tool if not present
        if not hasattr(record, 'framework'):
            record.framework = '-'
        if not hasattr(record, 'tool'):
            record.tool = '-'
        return super().format(record)


def configure_logging(level: str = "INFO") -> None:
    # stdout carries protocol messages, so logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [framework=%(framework)s tool=%(tool)s] - %(message)s"
    ))
    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
        force=True,
    )
