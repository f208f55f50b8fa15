"""Tests for payload and text rendering of results."""

import json

import meterdelta as md
from meterdelta import canon, formats
from meterdelta.config import ReportConfig
from meterdelta.types import Empty, FirstMeasurement, NoChange, Numeric, SingleSample


def test_numeric_payload_has_no_info():
    assert formats.to_payload(Numeric(577.98)) == {"kind": "numeric", "value": 577.98}


def test_single_sample_payload():
    out = formats.to_payload(SingleSample(value=42.0, timestamp=1742000000000))
    assert out["value"] == 42.0
    assert out["timestamp"] == 1742000000000
    assert out["info"] == canon.INFO_TEXT["single_sample"]


def test_no_change_payload_renders_zero():
    out = formats.to_payload(NoChange())
    assert out["value"] == 0.0
    assert out["kind"] == "no_change"
    assert "info" in out


def test_describe_explains_fallbacks():
    assert formats.describe(Numeric(577.98)) == "577.98 kWh"
    first = formats.describe(FirstMeasurement(value=93726.74))
    assert first.startswith("93726.74 kWh")
    assert canon.INFO_TEXT["first_measurement"] in first
    single = formats.describe(SingleSample(value=42.0, timestamp=1742000000000))
    assert "2025-03-15T00:53:20+00:00" in single
    assert formats.describe(Empty()) == canon.INFO_TEXT["empty"]
    assert formats.describe(NoChange(), unit="") == canon.INFO_TEXT["no_change"]


def test_consumption_payload_is_json_serialisable(feed_series, consumption_series, march_2025):
    mc = md.calculate_monthly_consumption(feed_series, consumption_series, march_2025)
    payload = formats.consumption_payload(mc)
    assert payload["target"] == "2025-03"
    assert payload["net_consumption"] == 22510.46
    assert json.loads(json.dumps(payload))["consumption_monthly"]["value"] == 23088.44


def test_render_report(feed_series, consumption_series, march_2025):
    mc = md.calculate_monthly_consumption(feed_series, consumption_series, march_2025)
    text = formats.render_report(mc, config=ReportConfig(unit="kWh", net_label="Net"))
    lines = text.splitlines()
    assert lines[0] == "Monthly usage 2025-03:"
    assert lines[1] == "Feed-in (EPm): 577.98 kWh"
    assert lines[2] == "Consumption (EPp): 23088.44 kWh"
    assert lines[3] == "Net: 22510.46 kWh"
