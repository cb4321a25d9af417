from datetime import datetime, timedelta, timezone

import pytest

from daily_puzzle.dates import sequence_number, today_et


def test_sequence_number_epoch_is_one() -> None:
    assert sequence_number("2023-06-12") == 1
    assert sequence_number("2023-06-13") == 2


def test_sequence_number_strictly_increasing() -> None:
    numbers = [sequence_number(d) for d in ("2023-06-12", "2023-12-31", "2024-02-29", "2024-03-01", "2026-10-18")]
    assert numbers == sorted(set(numbers))


def test_sequence_number_known_values() -> None:
    assert sequence_number("2024-06-12") == 367  # 2024 is a leap year
    assert sequence_number("2023-06-11") == 0


def test_sequence_number_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        sequence_number("June 12")


def test_today_et_uses_eastern_time_not_utc() -> None:
    # 03:00 UTC on Jan 1 is still Dec 31 in New York
    assert today_et(datetime(2024, 1, 1, 3, 0, tzinfo=timezone.utc)) == "2023-12-31"
    assert today_et(datetime(2024, 1, 1, 5, 0, tzinfo=timezone.utc)) == "2024-01-01"


def test_today_et_handles_daylight_saving() -> None:
    # EDT is UTC-4: 04:00 UTC on July 4 is midnight in New York
    assert today_et(datetime(2024, 7, 4, 3, 59, tzinfo=timezone.utc)) == "2024-07-03"
    assert today_et(datetime(2024, 7, 4, 4, 0, tzinfo=timezone.utc)) == "2024-07-04"


def test_today_et_converts_other_zones_and_naive_utc() -> None:
    tokyo = timezone(timedelta(hours=9))
    assert today_et(datetime(2024, 5, 2, 8, 0, tzinfo=tokyo)) == "2024-05-01"
    assert today_et(datetime(2024, 5, 2, 3, 0)) == "2024-05-01"


def test_today_et_is_zero_padded() -> None:
    assert today_et(datetime(2024, 2, 5, 17, 0, tzinfo=timezone.utc)) == "2024-02-05"
