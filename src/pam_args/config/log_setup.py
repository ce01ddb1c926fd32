# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Explicit logging setup for processes embedding pam-args.

Library modules only create loggers under the ``pam_args`` namespace. A PAM
module (or a test, or the CLI) decides where those records go by building a
:class:`LogOptions` and calling :meth:`LogOptions.apply`. Nothing is
configured implicitly.
"""

import enum
import logging
import logging.handlers
import sys

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pam_args.errors import LoggingSetupError

# ###############
# Public Interface
# ###############

ROOT_LOGGER_NAME = "pam_args"


class LogDestination(enum.Enum):
    """Where log records are sent."""

    SYSLOG = "syslog"
    TERMINAL = "terminal"
    BOTH = "both"
    NONE = "none"


class LogOptions(BaseModel):
    """Logging settings for the ``pam_args`` logger.

    Attributes:
        destination: Syslog (the usual choice inside a PAM module), the
            terminal (stderr), both, or none to leave logging untouched.
        level: Name of the minimum level, e.g. ``"DEBUG"``.
        identifier: Program name shown in syslog messages.
        facility: Syslog facility name, ``auth`` by default.
        syslog_address: Unix socket of the syslog daemon.
        include_timestamps: Prefix terminal records with a timestamp.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    destination: LogDestination = LogDestination.SYSLOG
    level: str = "INFO"
    identifier: str = "pam_args"
    facility: str = "auth"
    syslog_address: str = Field(alias="syslog-address", default="/dev/log")
    include_timestamps: bool = Field(alias="include-timestamps", default=True)

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name

    @field_validator("facility")
    @classmethod
    def _check_facility(cls, value: str) -> str:
        name = value.lower()
        if name not in _FACILITIES:
            raise ValueError(f"unknown syslog facility {value!r}")
        return name

    def apply(self) -> logging.Logger:
        """Install handlers on the ``pam_args`` logger according to these options.

        Handlers installed by an earlier call are replaced, so applying options
        repeatedly does not duplicate output. With ``LogDestination.NONE`` the
        logger is left as it is.

        Raises:
            LoggingSetupError: If the syslog socket cannot be opened.
        """
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        if self.destination is LogDestination.NONE:
            return logger

        handlers: list[logging.Handler] = []
        if self.destination in (LogDestination.TERMINAL, LogDestination.BOTH):
            handlers.append(self._build_terminal_handler())
        if self.destination in (LogDestination.SYSLOG, LogDestination.BOTH):
            handlers.append(self._build_syslog_handler())

        _remove_installed_handlers(logger)
        for handler in handlers:
            setattr(handler, _INSTALLED_MARKER, True)
            logger.addHandler(handler)
        logger.setLevel(self.level)
        logger.propagate = False
        return logger

    def _build_terminal_handler(self) -> logging.Handler:
        fmt = "%(levelname)-8s %(name)s: %(message)s"
        if self.include_timestamps:
            fmt = "%(asctime)s " + fmt
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        return handler

    def _build_syslog_handler(self) -> logging.Handler:
        facility = _FACILITIES[self.facility]
        try:
            handler = logging.handlers.SysLogHandler(address=self.syslog_address, facility=facility)
        except OSError as exc:
            raise LoggingSetupError(f"Failed to connect to syslog at '{self.syslog_address}': {exc}") from exc
        handler.setFormatter(logging.Formatter(f"{self.identifier}[%(process)d]: %(levelname)s %(message)s"))
        return handler


def for_pam(identifier: str, level: str = "INFO") -> logging.Logger:
    """Log to syslog with the ``auth`` facility, as PAM modules usually do."""
    return LogOptions(destination=LogDestination.SYSLOG, identifier=identifier, level=level).apply()


def for_development(level: str = "DEBUG") -> logging.Logger:
    """Log to stderr."""
    return LogOptions(destination=LogDestination.TERMINAL, level=level).apply()


def dual_output(identifier: str, level: str = "DEBUG") -> logging.Logger:
    """Log to syslog and stderr, useful while debugging a PAM module."""
    return LogOptions(destination=LogDestination.BOTH, identifier=identifier, level=level).apply()


# ################
# Implementation
# ################

_INSTALLED_MARKER = "_pam_args_installed"

# Syslog facility names, resolved once at import.
_FACILITIES: dict[str, int] = dict(logging.handlers.SysLogHandler.facility_names)


def _remove_installed_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _INSTALLED_MARKER, False):
            logger.removeHandler(handler)
            handler.close()
