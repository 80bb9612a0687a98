"""Tests for run record and parameter value models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from stickyparam.kernel.run_record import RunRecord
from stickyparam.kernel.values import (
    BooleanParameterValue,
    ParameterIdentity,
    ParameterValue,
    StringParameterValue,
)


def test_load_valid_run_record():
    """Test loading a run record with tagged values."""
    record = RunRecord(**{
        "job_id": "deploy-pipeline",
        "run_sequence_number": 4,
        "was_successful": True,
        "parameter_values": {
            "DEPLOY": {"type": "boolean", "name": "DEPLOY", "value": True},
            "TARGET": {"type": "string", "name": "TARGET", "value": "staging"},
        },
    })
    assert isinstance(record.get_value("DEPLOY"), BooleanParameterValue)
    assert isinstance(record.get_value("TARGET"), StringParameterValue)
    assert record.get_value("MISSING") is None


def test_parameter_values_accept_list():
    """Test that a list of values is keyed by each value's name."""
    record = RunRecord(
        job_id="deploy-pipeline",
        run_sequence_number=1,
        was_successful=False,
        parameter_values=[
            {"type": "boolean", "name": "DEPLOY", "value": False},
            {"type": "string", "name": "TARGET", "value": "prod"},
        ],
    )
    assert sorted(record.parameter_values) == ["DEPLOY", "TARGET"]
    assert record.get_value("DEPLOY").value is False


def test_duplicate_values_in_list_rejected():
    with pytest.raises(ValidationError, match="Duplicate parameter value"):
        RunRecord(
            job_id="deploy-pipeline",
            run_sequence_number=1,
            was_successful=True,
            parameter_values=[
                {"type": "boolean", "name": "DEPLOY", "value": False},
                {"type": "boolean", "name": "DEPLOY", "value": True},
            ],
        )


def test_value_stored_under_other_name_rejected():
    """Test that each value must be keyed by its own name."""
    with pytest.raises(ValidationError, match="different name"):
        RunRecord(
            job_id="deploy-pipeline",
            run_sequence_number=1,
            was_successful=True,
            parameter_values={"DEPLOY": {"type": "boolean", "name": "RELEASE", "value": True}},
        )


@pytest.mark.parametrize("field,value", [
    ("job_id", ""),
    ("run_sequence_number", 0),
])
def test_invalid_record_fields_rejected(field, value):
    data = {"job_id": "deploy-pipeline", "run_sequence_number": 1, "was_successful": True}
    data[field] = value
    with pytest.raises(ValidationError):
        RunRecord(**data)


def test_boolean_value_rejects_string_payload():
    """Test that the declared tag is authoritative: "true" is not a boolean."""
    with pytest.raises(ValidationError):
        BooleanParameterValue(name="DEPLOY", value="true")


def test_discriminator_selects_value_model():
    adapter = TypeAdapter(ParameterValue)
    assert isinstance(adapter.validate_python({"type": "boolean", "name": "A", "value": True}), BooleanParameterValue)
    assert isinstance(adapter.validate_python({"type": "string", "name": "A", "value": "x"}), StringParameterValue)
    with pytest.raises(ValidationError):
        adapter.validate_python({"type": "choice", "name": "A", "value": "x"})


def test_run_record_is_frozen():
    record = RunRecord(job_id="deploy-pipeline", run_sequence_number=1, was_successful=True)
    with pytest.raises(Exception):
        record.was_successful = False


def test_parameter_identity_requires_name():
    assert ParameterIdentity(name="DEPLOY").name == "DEPLOY"
    with pytest.raises(ValidationError):
        ParameterIdentity(name="")
