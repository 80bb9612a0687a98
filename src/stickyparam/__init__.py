"""stickyparam: boolean build parameters with sticky defaults."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("stickyparam")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from stickyparam.api import resolve_default, create_value, ResolvedDefault
from stickyparam.codes import DefaultSource, ValueType
from stickyparam.kernel.parameter import BooleanParameterSpec, coerce_boolean
from stickyparam.kernel.run_record import RunRecord

__all__ = [
    "__version__",
    "resolve_default",
    "create_value",
    "coerce_boolean",
    "ResolvedDefault",
    "DefaultSource",
    "ValueType",
    "BooleanParameterSpec",
    "RunRecord",
]
