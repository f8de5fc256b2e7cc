"""Run ``lshw`` on the local machine and load its XML report."""

from __future__ import annotations

import logging
import subprocess
from typing import List, Optional

from .components import HardwareComponent
from .config import ParserSettings
from .parser import Parser, ParserError

logger = logging.getLogger(__name__)


class InventoryError(ParserError):
    """Raised when the lshw report cannot be produced."""


def _run_command(command: List[str], timeout: float) -> str:
    try:
        output = subprocess.check_output(command, stderr=subprocess.DEVNULL, timeout=timeout)
    except FileNotFoundError as exc:
        raise InventoryError(f"{command[0]} is not installed") from exc
    except subprocess.TimeoutExpired as exc:
        raise InventoryError(f"{command[0]} timed out after {timeout:g}s") from exc
    except (OSError, subprocess.CalledProcessError) as exc:
        raise InventoryError(f"{' '.join(command)} failed: {exc}") from exc
    return output.decode("utf-8", errors="ignore")


def scan_lshw(settings: Optional[ParserSettings] = None) -> Parser:
    """Run ``lshw -xml`` and return a :class:`Parser` over its output."""

    settings = settings or ParserSettings.from_env()
    command = [settings.lshw_bin, "-xml"]
    if settings.sanitize:
        command.append("-sanitize")

    logger.debug("Running %s", " ".join(command))
    output = _run_command(command, settings.timeout)
    if not output.strip():
        raise InventoryError(f"{settings.lshw_bin} produced no output")
    return Parser(output, skip_hubs=settings.skip_hubs)


def scan_system_inventory(settings: Optional[ParserSettings] = None) -> List[HardwareComponent]:
    """Collect hardware components from the local lshw report.

    Returns an empty list when lshw is unavailable.
    """

    try:
        parser = scan_lshw(settings)
    except InventoryError as exc:
        logger.warning("Hardware scan unavailable: %s", exc)
        return []
    return parser.components()
