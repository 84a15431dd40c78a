# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostics reported while processing a round.

Every diagnostic is recorded and forwarded to the ``annogen`` logger at the
matching level, so callers can either inspect the records or rely on logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

# ###############
# Public Interface
# ###############


class Severity(Enum):
    """Severity of a diagnostic."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A message reported during processing.

    Attributes:
        severity: How serious the reported condition is.
        message: Human-readable description.
    """

    severity: Severity
    message: str


@dataclass
class Messager:
    """Collects diagnostics and forwards them to a logger.

    Attributes:
        diagnostics: Every diagnostic reported so far, in order.
    """

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("annogen"))
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def print_message(self, severity: Severity, message: str) -> None:
        """Record a diagnostic and log it."""
        self.diagnostics.append(Diagnostic(severity=severity, message=message))
        self.logger.log(_LEVELS[severity], "%s", message)

    def info(self, message: str) -> None:
        self.print_message(Severity.INFO, message)

    def warning(self, message: str) -> None:
        self.print_message(Severity.WARNING, message)

    def error(self, message: str) -> None:
        self.print_message(Severity.ERROR, message)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        """Return True if any error diagnostic was reported."""
        return len(self.errors) > 0


# ################
# Implementation
# ################

_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}
