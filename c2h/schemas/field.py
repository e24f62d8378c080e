"""Form field definitions owned by a template."""

from enum import Enum
from typing import List, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr, model_validator
from pydantic_core import PydanticCustomError

from c2h.schemas.common import Omittable, WireModel, closed_enum


class FieldType(str, Enum):
    """Input kinds a template field can take."""
    TEXT = "text"
    TEXTAREA = "textarea"
    MARKDOWN = "markdown"
    SELECT = "select"
    MULTISELECT = "multiselect"
    CHECKBOX = "checkbox"
    DATE = "date"
    FILE = "file"
    ARRAY = "array"


# Field types whose values are picked from ``options``
CHOICE_FIELD_TYPES = frozenset({FieldType.SELECT, FieldType.MULTISELECT})

FieldTypeValue = closed_enum(FieldType)

Number = Union[StrictInt, StrictFloat]


class FieldOption(WireModel):
    """One selectable choice of a select/multiselect field."""
    label: StrictStr
    value: StrictStr


class FieldValidation(WireModel):
    """Constraints checked against submitted values, not by this schema."""
    min: Omittable[Number] = Field(None, description="Minimum length (strings) or item count (lists)")
    max: Omittable[Number] = Field(None, description="Maximum length (strings) or item count (lists)")
    pattern: Omittable[StrictStr] = Field(None, description="Regular expression a string value must fully match")


class TemplateField(WireModel):
    """Schema for a single form field in the template."""
    id: StrictStr = Field(..., description="Field identifier, the key used in object data")
    type: FieldTypeValue
    label: StrictStr
    description: Omittable[StrictStr] = None
    required: StrictBool = False
    options: Omittable[List[FieldOption]] = Field(None, description="Choices for select/multiselect fields")
    validation: Omittable[FieldValidation] = None

    @model_validator(mode="after")
    def _options_match_type(self) -> "TemplateField":
        if self.type in CHOICE_FIELD_TYPES:
            if not self.options:
                raise PydanticCustomError(
                    "options_required",
                    "Options are required for {type} fields",
                    {"type": self.type.value},
                )
        elif self.options is not None:
            raise PydanticCustomError(
                "options_not_allowed",
                "Options are only allowed for select and multiselect fields, not {type}",
                {"type": self.type.value},
            )
        return self
