"""Model base classes shared by every request and response shape.

Wire mapping:
- Attribute names are snake_case. A field whose JSON key differs declares
  `Field(alias=...)`, and serialization always goes through aliases.
- `to_wire()` dumps with `exclude_unset=True`: a field the caller never set
  is absent from the payload, a field explicitly set to `None` is sent as
  `null`.

Field kinds:
- required: annotation without default.
- optional + nullable: `T | None = None`.
- optional, not nullable: `Omittable[T] = None`. May be left out, but an
  explicit `None` fails validation (except while parsing API responses).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Annotated, ClassVar, Self, TypeVar

from pydantic import AfterValidator, BaseModel, ValidationInfo
from pydantic.config import ConfigDict

T = TypeVar("T")

# Validation context used for server payloads.
LENIENT: dict[str, Any] = {"lenient": True}


def _reject_explicit_null(value: Any, info: ValidationInfo) -> Any:
    if value is None and not (info.context or {}).get("lenient"):
        raise ValueError("this field may be omitted but cannot be null")
    return value


Omittable = Annotated[T | None, AfterValidator(_reject_explicit_null)]


class ApiEnum(str, Enum):
    """String enum that tolerates values unknown to this client version.

    An unknown wire value becomes a pseudo-member instead of a validation
    error, so newer API values still parse.
    """

    @classmethod
    def _missing_(cls, value: object) -> ApiEnum | None:
        if not isinstance(value, str):
            return None
        pseudo = str.__new__(cls, value)
        pseudo._name_ = value.upper()
        pseudo._value_ = value
        return pseudo

    def is_known(self) -> bool:
        """True when the value is a declared member of the enum."""

        return self._value_ in type(self)._value2member_map_


class SdkModel(BaseModel):
    """Typed JSON shape exchanged with the API.

    Unknown keys sent by the server are kept (`extra="allow"`) and are
    serialized back untouched.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
    )

    _strict_nulls: ClassVar[bool] = False
    # Serialized even when left at their default (union discriminators).
    _always_sent: ClassVar[tuple[str, ...]] = ()

    def model_post_init(self, context: Any, /) -> None:
        if self._always_sent:
            self.__pydantic_fields_set__.update(self._always_sent)

    @classmethod
    def from_wire(cls, data: Any) -> Self:
        """Parse an API payload (lenient on explicit nulls)."""

        return cls.model_validate(data, context=LENIENT)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict using wire names, with only the fields that were set."""

        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def with_(self, **changes: Any) -> Self:
        """Return a validated copy with `changes` applied; `self` is untouched."""

        data: dict[str, Any] = {name: getattr(self, name) for name in self.model_fields_set}
        data.update(changes)
        context = None if self._strict_nulls else LENIENT
        return type(self).model_validate(data, context=context)


class SdkParams(SdkModel):
    """Request parameters: unknown keys are rejected at construction."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
    )

    _strict_nulls: ClassVar[bool] = True

    def to_query(self) -> dict[str, Any]:
        """Query-string form: wire names, unset and `None` values dropped."""

        return {key: value for key, value in self.to_wire().items() if value is not None}
