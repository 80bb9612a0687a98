"""Parameter identity and tagged parameter values."""

from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


def check_parameter_name(v: str) -> str:
    """Reject empty or whitespace-only parameter names."""
    if not v or not v.strip():
        raise ValueError("Parameter name must be non-empty")
    return v


class ParameterIdentity(BaseModel):
    """Key of a parameter within a job's parameter set."""
    name: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return check_parameter_name(v)


class BooleanParameterValue(BaseModel):
    """A boolean value recorded for (or assigned to) a parameter."""
    type: Literal["boolean"] = "boolean"
    name: str
    value: StrictBool  # "true" strings are rejected, the tag is authoritative
    description: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return check_parameter_name(v)


class StringParameterValue(BaseModel):
    """A string value recorded for a parameter."""
    type: Literal["string"] = "string"
    name: str
    value: StrictStr
    description: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return check_parameter_name(v)


ParameterValue = Annotated[
    Union[BooleanParameterValue, StringParameterValue],
    Field(discriminator="type"),
]
