"""Response envelope shared by every API operation."""

from typing import Annotated, Any, Dict, Generic, TypeVar

from pydantic import Field, StrictBool, StrictInt, StrictStr, model_validator
from pydantic_core import PydanticCustomError

from c2h.schemas.common import Omittable, WireModel

DataT = TypeVar("DataT")

PageNumber = Annotated[StrictInt, Field(ge=1)]
Count = Annotated[StrictInt, Field(ge=0)]


class ApiError(WireModel):
    code: StrictStr
    message: StrictStr
    details: Omittable[Dict[str, Any]] = None


class PageMeta(WireModel):
    """Pagination info for list responses."""
    page: Omittable[PageNumber] = None
    limit: Omittable[Count] = None
    total: Omittable[Count] = None


class ApiResponse(WireModel, Generic[DataT]):
    """
    Envelope wrapping an endpoint result.

    A successful response may carry ``data`` but never ``error``; a failed
    one must carry ``error`` and never ``data``.
    """

    success: StrictBool
    data: Omittable[DataT] = None
    error: Omittable[ApiError] = None
    meta: Omittable[PageMeta] = None

    @model_validator(mode="after")
    def _data_xor_error(self) -> "ApiResponse[DataT]":
        if self.success and self.error is not None:
            raise PydanticCustomError(
                "envelope_conflict", "A successful response cannot carry an error"
            )
        if not self.success:
            if self.error is None:
                raise PydanticCustomError(
                    "envelope_conflict", "A failed response must carry an error"
                )
            if "data" in self.model_fields_set:
                raise PydanticCustomError(
                    "envelope_conflict", "A failed response cannot carry data"
                )
        return self
