from io_utils import load_amplifier_strategy
from link_budget import FixedAmplifier, ScoredAmplifier, run_link_budget
from link_budget.report import FAIL_MESSAGE, format_report, verdict


def test_fixed_amplifier_pipeline(cfg, catalog, config):
    report = run_link_budget(catalog, config, load_amplifier_strategy(cfg, config.freqs))
    assert report.amplifier.name == "Amp-E"
    assert report.switch.name == "SW-C"
    assert not report.spec.passed
    assert format_report(report) == "\n".join(
        [
            "Selected Switch: SW-C (Cost: $13)",
            "Max Power Output at 1 GHz: 11.7 dBm",
            "Max Power Output at 20 GHz: 10.2 dBm",
            "Leakage at 1 GHz: -39.5 dBm",
            "Leakage at 20 GHz: -17 dBm",
        ]
    )
    assert verdict(report) == FAIL_MESSAGE


def test_scored_pipeline_reports_amplifier(catalog, config):
    report = run_link_budget(catalog, config, ScoredAmplifier())
    assert report.dynamic
    lines = format_report(report).splitlines()
    assert lines[0] == "Selected Amplifier: Amp-E (Cost: $17.5)"
    assert lines[1] == "Selected Switch: SW-C (Cost: $13)"


def test_pipeline_is_idempotent(catalog, config):
    first = run_link_budget(catalog, config, ScoredAmplifier())
    second = run_link_budget(catalog, config, ScoredAmplifier())
    assert format_report(first).encode() == format_report(second).encode()
    assert verdict(first) == verdict(second)


def test_fixed_by_name_uses_catalog_record(catalog, config):
    report = run_link_budget(catalog, config, FixedAmplifier("Amp-E"))
    assert report.amplifier is catalog.amplifier("Amp-E")
    assert "Leakage at 20 GHz: -15.5 dBm" in format_report(report)
