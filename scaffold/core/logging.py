import logging
import sys

from scaffold.core.config import settings


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional resource and role fields."""
    def format(self, record):
        # Add default values for resource and role if not present
        if not hasattr(record, 'resource'):
            record.resource = '-'
        if not hasattr(record, 'role'):
            record.role = '-'
        return super().format(record)


def configure_logging(level: str | None = None) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [resource=%(resource)s role=%(role)s] - %(message)s"
    ))
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        handlers=[handler],
    )
