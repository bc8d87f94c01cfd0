import datetime
import math

import pytest

from real_estate_calc.core.amortization import amort_schedule
from real_estate_calc.core.exceptions import ExportError
from real_estate_calc.core.export import (
    default_export_filename,
    schedule_to_csv,
    write_schedule_csv,
)


def test_csv_header_and_rows():
    df = amort_schedule(240_000, 4.5, 30)
    lines = schedule_to_csv(df).splitlines()
    assert lines[0] == "#,Payment,Principal,Interest,Balance"
    assert len(lines) == 361
    first = lines[1].split(",")
    assert first[0] == "1"
    assert first[3] == "900.00"
    assert all(len(field.split(".")[1]) == 2 for field in first[1:])
    assert math.isclose(float(first[1]), 1216.04, abs_tol=1e-2)
    last = lines[-1].split(",")
    assert last[0] == "360"
    assert last[4] == "0.00"


def test_write_schedule_csv(tmp_path):
    df = amort_schedule(10_000, 6.0, 1)
    target = write_schedule_csv(df, tmp_path / "schedule.csv")
    assert target.read_text(encoding="utf-8") == schedule_to_csv(df)


def test_write_empty_schedule_refused(tmp_path):
    with pytest.raises(ExportError, match="generate schedule first"):
        write_schedule_csv(amort_schedule(0, 4.5, 30), tmp_path / "x.csv")
    with pytest.raises(ExportError):
        write_schedule_csv(None, tmp_path / "x.csv")
    assert not (tmp_path / "x.csv").exists()


def test_write_failure_wrapped(tmp_path):
    df = amort_schedule(10_000, 6.0, 1)
    missing = tmp_path / "no_such_dir" / "schedule.csv"
    with pytest.raises(ExportError) as excinfo:
        write_schedule_csv(df, missing)
    assert excinfo.value.path == missing
    assert excinfo.value.message.startswith("Error exporting file:")
    # Schedule still usable for a retry
    assert write_schedule_csv(df, tmp_path / "retry.csv").exists()


def test_default_export_filename():
    now = datetime.datetime(2024, 3, 9, 14, 5, 7)
    assert default_export_filename(now) == "amort_20240309_140507.csv"
    assert default_export_filename().startswith("amort_")
