from __future__ import annotations
import logging

CONSOLE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_console_logging(level: int = logging.INFO) -> None:
    """
    Call once at app or CLI start. Later calls only adjust the level.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
