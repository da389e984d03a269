import logging
import sys


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr at `level`; stdout is left to the report."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {level}, defaulting to WARNING", file=sys.stderr)
        numeric_level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    # main() may run more than once in a process (tests)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
