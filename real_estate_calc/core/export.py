from __future__ import annotations

import datetime
import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .amortization import SCHEDULE_COLUMNS
from .exceptions import ExportError


logger = logging.getLogger(__name__)

CSV_HEADERS = {
    "month": "#",
    "payment": "Payment",
    "principal": "Principal",
    "interest": "Interest",
    "balance": "Balance",
}


def schedule_to_csv(schedule: pd.DataFrame) -> str:
    """Render a schedule as CSV text: ``#,Payment,Principal,Interest,Balance``.

    The payment index is written as an integer, amounts with two decimals.
    """
    frame = schedule[SCHEDULE_COLUMNS].rename(columns=CSV_HEADERS).copy()
    frame["#"] = frame["#"].astype(int)
    return frame.to_csv(index=False, float_format="%.2f", lineterminator="\n")


def default_export_filename(now: Optional[datetime.datetime] = None) -> str:
    now = now or datetime.datetime.now()
    return f"amort_{now:%Y%m%d_%H%M%S}.csv"


def write_schedule_csv(schedule: Optional[pd.DataFrame], path: Union[str, Path]) -> Path:
    """Write ``schedule`` to ``path`` as CSV.

    Raises ExportError when there is nothing to export or the file cannot be
    written. The schedule itself is never modified, so a failed export can
    simply be retried.
    """
    if schedule is None or schedule.empty:
        raise ExportError("Please generate schedule first!")

    target = Path(path)
    text = schedule_to_csv(schedule)
    try:
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as exc:
        logger.error("Export to %s failed: %s", target, exc)
        raise ExportError(f"Error exporting file: {exc}", path=target) from exc

    logger.info("Exported %d schedule rows to %s", len(schedule), target)
    return target
