"""
Base Pydantic model for analysis results.

Every result model in the package is:
- frozen (immutable once produced)
- serialized with camelCase aliases for the rendering layer
  (``model_dump(by_alias=True)`` -> ``{"fleschScore": ...}``)
- constructible from either the snake_case field name or the camelCase alias
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ReportModel(BaseModel):
    """Frozen, camelCase-serializing base for analysis results."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
