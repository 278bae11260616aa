"""Unit tests for txnstats.api.validate_output."""

import pytest

from txnstats.api._output_schemas import get_output_schema
from txnstats.api._output_schemas.stats import StatsReportOutput
from txnstats.api.stats.cmd_report import cmd_report
from txnstats.api.validate_output import validate_output


def test_stats_report_schema_is_registered():
    assert get_output_schema("stats", "report") is StatsReportOutput
    assert get_output_schema("stats", "missing") is None


def test_validate_output_accepts_report():
    output = {"errors": [], "warnings": [], "database": "juju", "report": {"Collections": {}}}
    assert validate_output(cmd_report, output) == output


def test_validate_output_accepts_failed_run():
    output = {"errors": ["cannot dial mongodb at localhost:37017: refused"], "warnings": [], "database": "juju", "report": None}
    assert validate_output(cmd_report, output)["report"] is None


def test_validate_output_rejects_missing_fields():
    with pytest.raises(ValueError, match="Output validation failed for stats.report"):
        validate_output(cmd_report, {"errors": [], "warnings": []})


def test_validate_output_ignores_unregistered_functions():
    def helper():
        pass

    output = {"anything": 1}
    assert validate_output(helper, output) is output


def test_validate_output_rejects_unknown_fields():
    output = {"errors": [], "warnings": [], "database": "juju", "report": {}, "reprot": {}}
    with pytest.raises(ValueError, match="reprot"):
        validate_output(cmd_report, output)
