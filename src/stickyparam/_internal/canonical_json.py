"""Centralized canonical JSON serialization.

Used everywhere resolved defaults or models are written out, so that the same
result always produces the same bytes.
"""

import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization.
    
    Rules:
    - UTF-8 encoding
    - Sorted keys
    - Stable separators (",", ":")
    - No trailing whitespace
    
    Args:
        obj: Python object to serialize (use model_dump(mode="json") for models)
        
    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )
