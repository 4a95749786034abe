"""
Base Pydantic models for strhash.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrhashBaseModel(BaseModel):
    """Base model for all strhash Pydantic models.

    Configuration:
        - strict: No implicit type conversions
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - use_enum_values: Serialize enums as values
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
    )
