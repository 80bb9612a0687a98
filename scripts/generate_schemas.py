"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from stickyparam.kernel.parameter import BooleanParameterSpec
from stickyparam.kernel.resolver import ResolvedDefault
from stickyparam.kernel.run_record import RunRecord

SCHEMAS = {
    "boolean_parameter.schema.json": BooleanParameterSpec,
    "run_record.schema.json": RunRecord,
    "resolved_default.schema.json": ResolvedDefault,
}


def generate_schemas():
    """Generate JSON schemas for all models."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    for filename, model in SCHEMAS.items():
        schema_path = schemas_dir / filename
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(model.model_json_schema(), f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
