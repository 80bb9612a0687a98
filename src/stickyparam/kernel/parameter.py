"""Persistent boolean parameter definition and its value operations."""

from typing import Any, Literal, Optional
from pydantic import BaseModel, ConfigDict, field_validator

from stickyparam.codes import ValueType
from .values import BooleanParameterValue, ParameterIdentity, check_parameter_name

DISPLAY_NAME = "Persistent Boolean Parameter"
SYMBOLS = ("persistentBoolean", "persistentBooleanParam")


class BooleanParameterSpec(BaseModel):
    """A boolean parameter whose default sticks to the value of the last run.
    
    Created at job-configuration time and owned by the job configuration.
    When successful_only is set, only successful runs are looked back at.
    """
    kind: Literal["persistentBoolean", "persistentBooleanParam"] = "persistentBoolean"
    name: str
    static_default: bool = False
    successful_only: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return check_parameter_name(v)

    @property
    def identity(self) -> ParameterIdentity:
        return ParameterIdentity(name=self.name)


def coerce_boolean(raw: Any) -> bool:
    """Coerce a submitted string to a boolean.
    
    Only "true" (any case) is True. Everything else, including None and
    non-string input, is False; this never raises.
    """
    return isinstance(raw, str) and raw.lower() == "true"


def create_value(spec: BooleanParameterSpec, raw: Any) -> BooleanParameterValue:
    """Create the parameter value for a raw string submitted with a build trigger."""
    return BooleanParameterValue(
        name=spec.name,
        value=coerce_boolean(raw),
        description=spec.description,
    )


def copy_with_default(spec: BooleanParameterSpec, value: Any) -> BooleanParameterSpec:
    """Copy spec with value as its new static default.
    
    Only boolean-tagged values apply; anything else returns spec itself.
    """
    if getattr(value, "type", None) != ValueType.BOOLEAN:
        return spec
    return spec.model_copy(update={"static_default": value.value})
