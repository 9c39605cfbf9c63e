"""
tckit.logging - Centralized logging configuration and the advisory sink.

Advisories are non-fatal notes (rate mismatches, drift) emitted by the
conversion and validation functions. Callers may pass their own sink; by
default advisories are logged as warnings on the "tckit" logger.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger("tckit")

AdvisorySink = Callable[[str], None]


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the tckit package.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def emit_advisory(message: str, advise: AdvisorySink | None = None) -> None:
    """Deliver an advisory to the given sink, or log it as a warning."""
    if advise is None:
        logger.warning(message)
    else:
        advise(message)
