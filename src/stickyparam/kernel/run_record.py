"""Normalized run record models."""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .values import ParameterValue


class RunRecord(BaseModel):
    """Record of one finished run of a job.
    
    Produced by the orchestration system when a run ends and never changed
    afterwards. Recency is run_sequence_number, highest first.
    """
    job_id: str
    run_sequence_number: int = Field(..., ge=1)
    was_successful: bool
    parameter_values: Dict[str, ParameterValue] = Field(default_factory=dict)  # name -> value

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator('job_id')
    @classmethod
    def validate_job_id(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("job_id must be non-empty")
        return v

    @field_validator('parameter_values', mode='before')
    @classmethod
    def index_parameter_list(cls, v: Any) -> Any:
        """Accept a list of values (as build actions store them) keyed by their own name."""
        if not isinstance(v, list):
            return v
        indexed: Dict[str, Any] = {}
        for item in v:
            name = item.get("name") if isinstance(item, dict) else getattr(item, "name", None)
            if name in indexed:
                raise ValueError(f"Duplicate parameter value for '{name}'")
            indexed[name] = item
        return indexed

    @model_validator(mode='after')
    def check_value_names(self) -> 'RunRecord':
        """Each value must be stored under its own name."""
        mismatched = sorted(key for key, value in self.parameter_values.items() if value.name != key)
        if mismatched:
            raise ValueError(f"Parameter values stored under a different name: {mismatched}")
        return self

    def get_value(self, name: str) -> Optional[ParameterValue]:
        """Get the recorded value for a parameter name, or None if the run lacks it."""
        return self.parameter_values.get(name)
