import logging
import sys

from .config import LOG_LEVEL, LOG_NAMESPACES


class NamespaceFilter(logging.Filter):
    def __init__(self, allowed_namespaces=None):
        super().__init__()
        self.allowed_namespaces = allowed_namespaces if allowed_namespaces is not None else []

    def filter(self, record):
        if not self.allowed_namespaces:
            return True # If no namespaces are specified, allow all records
        # Allow record if its name starts with any of the allowed namespaces
        return any(record.name.startswith(ns) for ns in self.allowed_namespaces)


log_formatter = logging.Formatter(
    fmt="%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def configure_logging(level: str = LOG_LEVEL, namespaces=None) -> logging.Logger:
    """
    Attaches a stdout handler to the 'sales_reports' logger.

    Modules use logging.getLogger(__name__), so loggers such as
    "sales_reports.features.reports.service" inherit this handler and level.
    Calling it again replaces the handler instead of stacking a second one.
    """
    app_logger = logging.getLogger("sales_reports")
    app_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.addFilter(NamespaceFilter(namespaces if namespaces is not None else LOG_NAMESPACES))

    app_logger.handlers = [console_handler]
    return app_logger


# To see the SQL Tortoise sends for the named queries, lower this to DEBUG:
# logging.getLogger("tortoise.db_client").setLevel(logging.DEBUG)
