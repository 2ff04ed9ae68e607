"""Host-style diagnostics (remark / warning / error) on top of logging.

Errors are tallied so a CLI run can finish every target and still exit non-zero.
"""

from __future__ import annotations

import logging

log = logging.getLogger("swift_format_plugin")

_error_count = 0


def remark(message: str) -> None:
    log.info(message)


def warning(message: str) -> None:
    log.warning(message)


def error(message: str) -> None:
    global _error_count
    _error_count += 1
    log.error(message)


def error_count() -> int:
    """Number of error diagnostics emitted since the last reset()."""
    return _error_count


def reset() -> None:
    global _error_count
    _error_count = 0
