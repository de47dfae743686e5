import logging
import sys


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional stage and collection fields."""
    def format(self, record):
        # Add default values for stage and collection if not present
        if not hasattr(record, 'stage'):
            record.stage = '-'
        if not hasattr(record, 'collection'):
            record.collection = '-'
        return super().format(record)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [stage=%(stage)s collection=%(collection)s] - %(message)s"
    ))
    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
    )
