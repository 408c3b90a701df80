# tablefsm/log.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Logging helpers for the tablefsm package.

Every record emitted by the package goes through the ``tablefsm`` logger and
carries ``component`` and ``category`` fields. The package only installs a
NullHandler; applications decide where records go, either with their own
logging configuration or with ``install_handler``.
"""

import logging
from typing import Any, MutableMapping, Optional, Sequence, TextIO, Tuple, Union

PACKAGE_LOGGER = "tablefsm"
COMPONENT = "LIB"

_package_log = logging.getLogger(PACKAGE_LOGGER)
_package_log.addHandler(logging.NullHandler())


class FieldsAdapter(logging.LoggerAdapter):
    """
    LoggerAdapter that merges its fixed fields with any per-call ``extra``
    instead of replacing them.
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


class FieldsFormatter(logging.Formatter):
    """
    Renders ``<time> [LEVEL][component][category] message``.

    Fields missing from a record are skipped. With ``report_caller`` the
    emitting function and line are appended.
    """

    def __init__(
        self,
        fields_order: Sequence[str] = ("component", "category"),
        report_caller: bool = False,
        datefmt: str = "%Y-%m-%dT%H:%M:%S%z",
    ) -> None:
        super().__init__(datefmt=datefmt)
        self.fields_order = tuple(fields_order)
        self.report_caller = report_caller

    def format(self, record: logging.LogRecord) -> str:
        fields = "".join(f"[{getattr(record, name)}]" for name in self.fields_order if hasattr(record, name))
        line = f"{self.formatTime(record, self.datefmt)} [{record.levelname}]{fields} {record.getMessage().strip()}"
        if self.report_caller:
            line += f" ({record.filename}:{record.lineno} {record.funcName})"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def get_logger(category: str) -> FieldsAdapter:
    """Return an adapter over the package logger tagged with ``category``."""
    return FieldsAdapter(_package_log, {"component": COMPONENT, "category": category})


_lib_log = get_logger("Log")


def install_handler(
    stream: Optional[TextIO] = None,
    level: Union[int, str] = logging.INFO,
    report_caller: bool = False,
) -> logging.Handler:
    """
    Attach a StreamHandler with a FieldsFormatter to the package logger.

    :return: The handler, so the caller can remove it again.
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(FieldsFormatter(report_caller=report_caller))
    _package_log.addHandler(handler)
    _package_log.setLevel(level)
    return handler


def set_log_level(level: Union[int, str]) -> None:
    """Set the threshold of the package logger."""
    _lib_log.info("set log level : %s", level)
    _package_log.setLevel(level)


def set_report_caller(enabled: bool) -> None:
    """Toggle caller reporting on every FieldsFormatter attached to the package logger."""
    _lib_log.info("set report call : %s", enabled)
    for handler in _package_log.handlers:
        if isinstance(handler.formatter, FieldsFormatter):
            handler.formatter.report_caller = enabled
