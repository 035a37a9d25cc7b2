# =============================================================================
# core/models/update.py - Partial Update Base
# =============================================================================
# PUT bodies only carry the fields being changed. Omitted fields are left
# alone; an explicit null is only accepted for columns that may be empty.
# =============================================================================

from typing import ClassVar

from pydantic import BaseModel, ValidationInfo, field_validator


class PartialUpdate(BaseModel):
    """
    Base for *Update schemas.

    Subclasses list the columns that cannot hold NULL in `not_null`.
    Sending null for one of them is a validation error (400), not a
    write that the database or the response model would reject later.
    """
    not_null: ClassVar[tuple[str, ...]] = ()

    model_config = {"str_strip_whitespace": True}

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name in cls.not_null:
            raise ValueError(f"{info.field_name} cannot be null")
        return value
