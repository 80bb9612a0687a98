"""Public API for stickyparam.

High-level functions that accept models, plain dicts or JSON file paths and
return complete, structured results. Callers should use these functions
instead of importing from _internal.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from stickyparam.kernel.parameter import BooleanParameterSpec, coerce_boolean
from stickyparam.kernel.parameter import create_value as _create_value
from stickyparam.kernel.resolver import ResolvedDefault, resolve, default_parameter_value
from stickyparam.kernel.run_record import RunRecord
from stickyparam.kernel.values import BooleanParameterValue
from stickyparam._internal.io.history import load_history_from_path, parse_history

__all__ = [
    "load_parameter",
    "load_history",
    "resolve_default",
    "default_value",
    "create_value",
    "coerce_boolean",
    "ResolvedDefault",
]

ParameterSource = Union[BooleanParameterSpec, Dict, str, os.PathLike, Path]
HistorySource = Union[Sequence[Union[RunRecord, Dict]], Dict, str, os.PathLike, Path]


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def _load_parameter_from_path(path: Path) -> BooleanParameterSpec:
    """Load a parameter spec from JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Parameter file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return BooleanParameterSpec.model_validate(data)


def load_parameter(parameter: ParameterSource) -> BooleanParameterSpec:
    """Load a parameter spec from a model, a dict or a JSON file path."""
    if isinstance(parameter, BooleanParameterSpec):
        return parameter
    if isinstance(parameter, dict):
        return BooleanParameterSpec.model_validate(parameter)
    return _load_parameter_from_path(_normalize_path(parameter))


def load_history(history: HistorySource, job_id: Optional[str] = None) -> List[RunRecord]:
    """Load run history from records, dicts or a JSON file path.
    
    Returns:
        Run records ordered newest first, restricted to job_id when given
    """
    if isinstance(history, (str, os.PathLike)):
        records = load_history_from_path(_normalize_path(history))
    else:
        records = parse_history(history)
    if job_id is not None:
        records = [record for record in records if record.job_id == job_id]
    return records


def resolve_default(
    parameter: ParameterSource,
    history: HistorySource,
    job_id: Optional[str] = None,
) -> ResolvedDefault:
    """
    Resolve a parameter's sticky default against a job's run history.
    
    Does NOT mutate or write anything. Absent or mistyped history values fall
    back to the parameter's static default.
    """
    spec = load_parameter(parameter)
    return resolve(spec, load_history(history, job_id=job_id))


def default_value(
    parameter: ParameterSource,
    history: HistorySource,
    job_id: Optional[str] = None,
) -> BooleanParameterValue:
    """Value a new run of the job gets for the parameter if the user does not override it."""
    spec = load_parameter(parameter)
    return default_parameter_value(spec, load_history(history, job_id=job_id))


def create_value(parameter: ParameterSource, raw: str) -> BooleanParameterValue:
    """Create a parameter value from the raw string of a build trigger submission."""
    return _create_value(load_parameter(parameter), raw)
