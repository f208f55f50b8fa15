import pytest

from meterdelta.types import MonthKey, Sample

QUARTER_HOUR_MS = 15 * 60 * 1000
FEB_2025_MS = 1740000000000  # 2025-02-19T21:20:00Z
MAR_2025_MS = 1742000000000  # 2025-03-15T00:53:20Z


def _series(start_ms, values):
    return [Sample(start_ms + i * QUARTER_HOUR_MS, v) for i, v in enumerate(values)]


@pytest.fixture
def march_2025():
    return MonthKey(2025, 2)


@pytest.fixture
def feed_series():
    return _series(FEB_2025_MS, [1578.45] * 4) + _series(MAR_2025_MS, [2156.43] * 4)


@pytest.fixture
def consumption_series():
    return _series(FEB_2025_MS, [93709.83, 93716.39, 93723.98, 93726.74]) + _series(
        MAR_2025_MS, [116790.68, 116803.95, 116807.26, 116815.18]
    )


@pytest.fixture
def raw_feed_records():
    # Readings as exported by the meter gateway; the 4th lands just after
    # midnight UTC on 1 March, the last three on 1 April.
    ts = [
        1740785107000, 1740786007000, 1740786908000, 1740787508000,
        1743464710000, 1743465610000, 1743466510000, 1743467410000,
    ]
    values = [1578.45] * 4 + [2156.43] * 4
    return [{"ts": t, "value": v} for t, v in zip(ts, values)]


@pytest.fixture
def raw_consumption_records(raw_feed_records):
    values = [
        93709.83, 93716.39, 93723.98, 93726.74,
        116790.68, 116803.95, 116807.26, 116815.18,
    ]
    return [{"ts": r["ts"], "value": v} for r, v in zip(raw_feed_records, values)]
