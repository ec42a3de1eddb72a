"""Generate JSON schemas from the Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from propcatalog.api import ComponentInfo, PropertyInfo
from propcatalog.config import SchemaSourceConfig


def generate_schemas():
    """Generate JSON schemas for all public models."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    models = {
        "property_info.schema.json": PropertyInfo,
        "component_info.schema.json": ComponentInfo,
        "schema_source_config.schema.json": SchemaSourceConfig,
    }
    for filename, model in models.items():
        schema_path = schemas_dir / filename
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(model.model_json_schema(), f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
