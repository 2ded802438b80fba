import logging
import sys
import time
from pathlib import Path
from typing import Dict, Optional, Union

DETAILED_FORMAT = "[%(asctime)s] [%(levelname)s] [%(module)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Logger:
    """
    Process-wide logger for the enhancer.

    One instance per run; ImageEnhancer resets it so that a new debug flag or
    log file takes effect. Enhancement stages are bracketed with
    stage_start/stage_end, which also report the stage duration.
    """

    _instance: Optional["Logger"] = None

    def __new__(cls, debug: bool = False, log_file: Optional[str] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, debug: bool = False, log_file: Optional[str] = None):
        if self._initialized:
            return

        level = logging.DEBUG if debug else logging.INFO
        self._logger = logging.getLogger("ImageEnhancer")
        self._logger.setLevel(level)
        self._logger.handlers.clear()
        self._stage_started: Dict[str, float] = {}

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level)
        console.setFormatter(
            logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT) if debug
            else logging.Formatter("[%(levelname)s] %(message)s")
        )
        self._logger.addHandler(console)

        # The log file always records everything
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT))
            self._logger.addHandler(file_handler)

        self._initialized = True

    @classmethod
    def reset(cls):
        """Drop the singleton and close its handlers."""
        if cls._instance is not None and cls._instance._initialized:
            for handler in cls._instance._logger.handlers:
                handler.close()
            cls._instance._logger.handlers.clear()
        cls._instance = None

    def debug(self, msg: str):
        self._logger.debug(msg)

    def info(self, msg: str):
        self._logger.info(msg)

    def error(self, msg: str):
        self._logger.error(msg)

    def stage_start(self, stage_name: str):
        self._stage_started[stage_name] = time.perf_counter()
        self.info(f"{'='*50}")
        self.info(f"Starting: {stage_name}")
        self.info(f"{'='*50}")

    def stage_end(self, stage_name: str):
        started = self._stage_started.pop(stage_name, None)
        if started is None:
            self.info(f"Completed: {stage_name}")
        else:
            self.info(f"Completed: {stage_name} in {time.perf_counter() - started:.3f}s")

    def saved(self, what: str, path: Union[str, Path]):
        """Record an output file written to disk."""
        self.info(f"Saved {what}: {path}")


def get_logger() -> Logger:
    """Get the singleton logger instance."""
    if Logger._instance is None:
        return Logger(debug=False)
    return Logger._instance
