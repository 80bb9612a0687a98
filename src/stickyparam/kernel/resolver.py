"""Sticky default resolution.

A parameter's default is the value it had in the most recent qualifying run of
its job, or its static default when there is none. Resolution is a pure read
over the history snapshot it is given: records and specs are never modified.
"""

import logging
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from stickyparam.codes import DefaultSource, ValueType
from .parameter import BooleanParameterSpec
from .run_record import RunRecord
from .values import BooleanParameterValue, ParameterValue

logger = logging.getLogger(__name__)


class ResolvedDefault(BaseModel):
    """Result of resolving a parameter's default."""
    value: bool
    source: DefaultSource
    run_sequence_number: Optional[int] = None  # Run the value came from (HISTORY only)
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


def _first_qualifying(spec: BooleanParameterSpec, history: Iterable[RunRecord]) -> Optional[RunRecord]:
    for record in history:
        if spec.successful_only and not record.was_successful:
            continue
        return record
    return None


def last_value(spec: BooleanParameterSpec, history: Iterable[RunRecord]) -> Optional[ParameterValue]:
    """Get the value recorded for spec in the most recent qualifying run, of any type.
    
    Args:
        spec: Parameter to look up
        history: Run records of the spec's job, newest first
        
    Returns:
        The recorded value, or None if no run qualifies or it lacks the parameter
    """
    record = _first_qualifying(spec, history)
    if record is None:
        return None
    return record.get_value(spec.name)


def resolve(spec: BooleanParameterSpec, history: Iterable[RunRecord]) -> ResolvedDefault:
    """Resolve the default for spec against a job's history (newest first).
    
    Only the first qualifying run is consulted. A value recorded there under
    another type is treated like an absent one; it falls back to the static
    default and is reported in the result's warnings.
    """
    record = _first_qualifying(spec, history)
    if record is None:
        logger.debug("No qualifying run for parameter '%s'", spec.name)
        return ResolvedDefault(value=spec.static_default, source=DefaultSource.STATIC)

    stored = record.get_value(spec.name)
    if stored is None:
        logger.debug(
            "Run #%d of job '%s' has no value for parameter '%s'",
            record.run_sequence_number, record.job_id, spec.name,
        )
        return ResolvedDefault(value=spec.static_default, source=DefaultSource.STATIC)

    if stored.type != ValueType.BOOLEAN:
        message = (
            f"Parameter '{spec.name}' is recorded as {stored.type} in run "
            f"#{record.run_sequence_number} of job '{record.job_id}'; using static default"
        )
        logger.warning(message)
        return ResolvedDefault(
            value=spec.static_default,
            source=DefaultSource.STATIC,
            warnings=[message],
        )

    return ResolvedDefault(
        value=stored.value,
        source=DefaultSource.HISTORY,
        run_sequence_number=record.run_sequence_number,
    )


def default_parameter_value(spec: BooleanParameterSpec, history: Iterable[RunRecord]) -> BooleanParameterValue:
    """Build the value a new run is seeded with when the user does not override it."""
    resolved = resolve(spec, history)
    return BooleanParameterValue(name=spec.name, value=resolved.value, description=spec.description)
