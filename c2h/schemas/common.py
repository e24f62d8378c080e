"""Shared building blocks for the wire schemas.

Every entity is exchanged with camelCase keys and validated strictly:
unknown keys are rejected, scalars are never coerced, and the three field
modifiers stay distinct:

* required-nullable: ``folder_id: Optional[StrictStr]`` with no default
  (the key must be present, ``null`` is accepted);
* omittable: ``description: Omittable[StrictStr] = None`` (the key may be
  absent, ``null`` is rejected);
* defaultable: ``required: StrictBool = False``.
"""

import re
from datetime import date, datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, Optional, Type, TypeVar

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StrictStr,
    TypeAdapter,
    ValidationError,
    model_serializer,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from c2h.config import get_settings

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def _reject_null(value: Any) -> Any:
    if value is None:
        raise PydanticCustomError("none_forbidden", "Input should not be null")
    return value


# The key may be left out, but an explicit null is an error.
Omittable = Annotated[Optional[T], AfterValidator(_reject_null)]


def closed_enum(enum_cls: Type[E]) -> Any:
    """Annotate an enum so that unknown values name the allowed set."""
    allowed = [member.value for member in enum_cls]
    expected = ", ".join(repr(value) for value in allowed)

    def _check_member(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str) or value not in allowed:
            raise PydanticCustomError(
                "enum",
                "Input should be one of {expected}",
                {"expected": expected, "allowed": allowed},
            )
        return enum_cls(value)

    return Annotated[enum_cls, BeforeValidator(_check_member)]


# ---------------------------------------------------------------------------
# Date-time strings
# ---------------------------------------------------------------------------

# UTC ('Z') only, ASCII digits; applied with fullmatch
_DATETIME_RE = re.compile(
    r"([0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})(?:\.([0-9]+))?Z"
)
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_iso_datetime(value: str) -> bool:
    """Return True for a calendar-valid ISO-8601 UTC date-time."""
    match = _DATETIME_RE.fullmatch(value)
    if match is None:
        return False
    try:
        datetime.strptime(match.group(1), "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        return False
    return True


def is_iso_date(value: str) -> bool:
    """Return True for a calendar-valid ``YYYY-MM-DD`` date."""
    if _DATE_RE.fullmatch(value) is None:
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def parse_datetime(value: str) -> datetime:
    """Parse a validated date-time string into an aware datetime."""
    match = _DATETIME_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"not an ISO-8601 date-time: {value!r}")
    base, fraction = match.groups()
    micros = (fraction or "0")[:6].ljust(6, "0")
    return datetime.fromisoformat(f"{base}.{micros}+00:00")


def format_datetime(moment: datetime) -> str:
    """Render an aware datetime as UTC with millisecond precision."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _check_datetime(value: str) -> str:
    if not is_iso_datetime(value):
        raise PydanticCustomError(
            "datetime_format",
            "Input should be an ISO-8601 date-time string",
        )
    return value


# Kept as the original string; never reparsed into a datetime on output.
DateTimeStr = Annotated[StrictStr, AfterValidator(_check_datetime)]


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError(
            "url_format", "Input should be a valid absolute URL"
        ) from None
    schemes = get_settings().webhook_url_schemes_list
    if url.scheme not in schemes or not url.host:
        raise PydanticCustomError(
            "url_format",
            "URL should use one of the schemes {schemes} and name a host",
            {"schemes": ", ".join(schemes)},
        )
    return value


UrlStr = Annotated[StrictStr, AfterValidator(_check_url)]


# ---------------------------------------------------------------------------
# Base models
# ---------------------------------------------------------------------------


class WireModel(BaseModel):
    """Base for every schema exchanged over the API boundary."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler):
        data = handler(self)
        for name, info in type(self).model_fields.items():
            if info.is_required() or info.default is not None:
                continue
            if name not in self.model_fields_set and getattr(self, name) is None:
                data.pop(info.alias or name, None)
                data.pop(name, None)
        return data

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with camelCase keys and JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)


class UpdateModel(WireModel):
    """Partial-update shape: omitted keys mean "leave unchanged"."""

    def changes(self) -> Dict[str, Any]:
        """Only the keys the caller actually supplied."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def apply_to(self, entity: BaseModel) -> BaseModel:
        """Return a copy of ``entity`` with the supplied fields replaced."""
        updates = {name: getattr(self, name) for name in self.model_fields_set}
        return entity.model_copy(update=updates)
