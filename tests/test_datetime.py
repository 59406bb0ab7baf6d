from datetime import datetime

from gradebook.utils.datetime import academic_year_label


def test_academic_year_starts_in_july_by_default():
    assert academic_year_label(datetime(2026, 10, 19)) == "2026-27"
    assert academic_year_label(datetime(2027, 6, 30)) == "2026-27"
    assert academic_year_label(datetime(2027, 7, 1)) == "2027-28"


def test_custom_start_month_and_century_rollover():
    assert academic_year_label(datetime(2026, 1, 5), start_month=1) == "2026-27"
    assert academic_year_label(datetime(1999, 12, 1), start_month=9) == "1999-00"
