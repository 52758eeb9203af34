# core/context.py

"""
Application context threaded through construction of the model layer.

Holds the configuration values the model needs and hands out component loggers, so no
module keeps a process-wide logger or config of its own. The host application decides
where log records go by attaching handlers to the base logger, and owns its level unless
a level is passed in explicitly.
"""

from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "tutorbook"


class AppContext:

    def __init__(
        self,
        log_level: int | None = None,
        logger_name: str = DEFAULT_LOGGER_NAME,
    ):
        self._log_level = log_level
        self._logger_name = logger_name

        base_logger = logging.getLogger(logger_name)
        if log_level is not None:
            base_logger.setLevel(log_level)
        if not any(isinstance(h, logging.NullHandler) for h in base_logger.handlers):
            base_logger.addHandler(logging.NullHandler())

    # === properties ===

    @property
    def log_level(self) -> int | None:
        """The level applied to the base logger, or None if the host's level is left alone."""
        return self._log_level

    @property
    def logger_name(self) -> str:
        return self._logger_name

    # === loggers ===

    def get_logger(self, component: str) -> logging.Logger:
        """
        Returns a logger for `component`, namespaced under this context's base logger.

        Args:
            component (str): Short component name, e.g. "model_manager".

        Returns:
            logging.Logger: A child logger such as `tutorbook.model_manager`.
        """
        return logging.getLogger(self._logger_name).getChild(component)

    # === dunder methods ===

    def __repr__(self) -> str:
        level = logging.getLevelName(self._log_level) if self._log_level is not None else None
        return f"AppContext({level}, {self._logger_name})"
