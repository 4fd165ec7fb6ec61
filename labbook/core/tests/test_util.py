from datetime import datetime

import pytz

from labbook.core.util import fqcn, utc_dt, utcnow


def test_fqcn() -> None:
    assert fqcn(datetime) == "datetime.datetime"


def test_utcnow_is_aware() -> None:
    now = utcnow()
    assert now.tzinfo is not None
    assert now.utcoffset().total_seconds() == 0


def test_utc_dt() -> None:
    naive = datetime(2020, 1, 1, 12, 0)
    assert utc_dt(naive) == pytz.utc.localize(naive)

    paris = pytz.timezone("Europe/Paris").localize(naive)
    converted = utc_dt(paris)
    assert converted.tzinfo is pytz.utc
    assert converted.hour == 11
