"""Pytest configuration and shared fixtures.

No sys.path hacks - tests should import from installed stickyparam package.
"""

import json
import pytest
from pathlib import Path

from stickyparam.kernel.parameter import BooleanParameterSpec
from stickyparam.kernel.run_record import RunRecord


@pytest.fixture
def deploy_spec():
    """DEPLOY parameter that only looks back at successful runs."""
    return BooleanParameterSpec(name="DEPLOY", static_default=False, successful_only=True)


@pytest.fixture
def make_run():
    """Factory for run records with boolean parameter values."""
    def _make_run(seq, success=True, job_id="deploy-pipeline", **values):
        parameter_values = {}
        for name, value in values.items():
            value_type = "boolean" if isinstance(value, bool) else "string"
            parameter_values[name] = {"type": value_type, "name": name, "value": value}
        return RunRecord(
            job_id=job_id,
            run_sequence_number=seq,
            was_successful=success,
            parameter_values=parameter_values,
        )
    return _make_run


@pytest.fixture
def write_json(tmp_path):
    """Write data as JSON into tmp_path and return the file path."""
    def _write_json(filename: str, data) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path
    return _write_json
