"""Validation of JSON request bodies for creating and updating openings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ValidationError(ValueError):
    """Raised when a request body cannot be decoded or fails validation."""


@dataclass(frozen=True)
class _Field:
    attr: str
    key: str
    label: str
    kind: str  # "string", "bool" or "int64"


_OPENING_FIELDS = (
    _Field("role", "role", "Role", "string"),
    _Field("company", "company", "Company", "string"),
    _Field("location", "location", "Location", "string"),
    _Field("remote", "remote", "Remote", "bool"),
    _Field("link", "link", "Link", "string"),
    _Field("salary", "salary", "Salary", "int64"),
)
_UPDATE_FIELDS = (_Field("id", "id", "ID", "string"),) + _OPENING_FIELDS


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _decode_value(type_name: str, spec: _Field, value: Any) -> Any:
    def mismatch() -> ValidationError:
        return ValidationError(
            f"cannot decode {_json_type(value)} into field "
            f"{type_name}.{spec.key} of type {spec.kind}"
        )

    if spec.kind == "string":
        if value is None:
            return ""
        if not isinstance(value, str):
            raise mismatch()
        return value
    if spec.kind == "bool":
        if value is None or isinstance(value, bool):
            return value
        raise mismatch()
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise mismatch()
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise mismatch()
    return value


def _is_missing(spec: _Field, value: Any) -> bool:
    if spec.kind == "bool":
        return value is None
    if spec.kind == "int64":
        return value == 0
    return value == ""


def _decode(type_name: str, data: Any, fields: tuple[_Field, ...]) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError(
            f"cannot decode {_json_type(data)} into {type_name}: expected object"
        )
    values = {spec.attr: _decode_value(type_name, spec, data.get(spec.key)) for spec in fields}
    problems = [
        f"Key: '{type_name}.{spec.label}' Error:Field validation for "
        f"'{spec.label}' failed on the 'required' tag"
        for spec in fields
        if _is_missing(spec, values[spec.attr])
    ]
    if problems:
        raise ValidationError("\n".join(problems))
    return values


@dataclass(frozen=True)
class CreateOpeningRequest:
    """Body of a request to create an opening; every field is required."""

    role: str
    company: str
    location: str
    remote: bool
    link: str
    salary: int

    @classmethod
    def from_json(cls, data: Any) -> CreateOpeningRequest:
        """Build a request from decoded JSON, raising ValidationError if invalid."""
        return cls(**_decode(cls.__name__, data, _OPENING_FIELDS))


@dataclass(frozen=True)
class UpdateOpeningRequest:
    """Body of a request to update an existing opening; every field is required."""

    id: str
    role: str
    company: str
    location: str
    remote: bool
    link: str
    salary: int

    @classmethod
    def from_json(cls, data: Any) -> UpdateOpeningRequest:
        """Build a request from decoded JSON, raising ValidationError if invalid."""
        return cls(**_decode(cls.__name__, data, _UPDATE_FIELDS))