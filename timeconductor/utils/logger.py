#!filepath: timeconductor/utils/logger.py
import os
import sys
from typing import Optional

from loguru import logger


class Logging:
    """
    Time conductor logger
    ---------------------------------------
    - stderr sink by default
    - date-rotated file sink when log_dir is given
    - retention period for file logs
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        """
        Replace every loguru sink with the one described by this instance.
        """

        logger.remove()

        fmt = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"
        if self.log_dir:
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=fmt,
                enqueue=True,
                backtrace=True,
                diagnose=True,
            )
        else:
            logger.add(sys.stderr, level=self.level, format=fmt)

    # ----------- log methods -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)


def init_logging(cfg) -> Logging:
    """
    Rebuild the global `logs` from a LogConfig. Call once at startup.
    """
    global logs
    logs = Logging(
        log_dir=cfg.dir,
        rotation=cfg.rotation,
        retention=cfg.retention,
        log_level=cfg.level,
    )
    return logs


# default global logs (sinks are rebuilt by init_logging)
logs = Logging()
