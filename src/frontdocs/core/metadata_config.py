#!/usr/bin/env python3
"""
Purpose:
    Defines the immutable metadata configuration handed to the front-matter
    parser: per-field default values plus the set of multi-valued fields.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_serializer, field_validator

from frontdocs.core.constants import DEFAULT_METADATA, DEFAULT_MULTI_VALUED
from frontdocs.core.utils import join_values, split_values

MetadataValue = Union[str, Tuple[str, ...]]


class MetadataConfig(BaseModel):
    """
    Default metadata and multi-valued field names for a collection.

    Field names are case-insensitive and stored lower-cased. Defaults are held
    read-only: multi-valued fields as a tuple of trimmed strings, all other
    fields as a single string. `fresh_metadata()` hands out mutable copies.

    Example
    -------
    >>> cfg = MetadataConfig(defaults={"Tags": "a, b", "From": "me"}, multi_valued=["TAGS"])
    >>> dict(cfg.defaults)
    {'tags': ('a', 'b'), 'from': 'me'}
    >>> md = cfg.fresh_metadata()
    >>> md["tags"].append("c")
    >>> cfg.defaults["tags"]
    ('a', 'b')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Declared first: the defaults validator depends on it.
    multi_valued: frozenset[str] = Field(
        default=DEFAULT_MULTI_VALUED,
        description="Lower-cased names of fields holding a list of strings.",
    )
    defaults: Mapping[str, MetadataValue] = Field(
        default_factory=lambda: dict(DEFAULT_METADATA),
        validate_default=True,
        description="Read-only default value per field, copied into every parsed document.",
    )

    # --- Validators --- #

    @field_validator("multi_valued", mode="before")
    @classmethod
    def _normalize_multi_valued(cls, v: Any) -> frozenset[str]:
        """Accept any iterable of names (or a single name) and lower-case them."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        names = set()
        for name in v:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Multi-valued field names must be non-empty strings, got {name!r}")
            names.add(name.strip().lower())
        return frozenset(names)

    @field_validator("defaults", mode="before")
    @classmethod
    def _normalize_defaults(cls, v: Any, info: ValidationInfo) -> Dict[str, MetadataValue]:
        """
        Lower-case keys and coerce each value to the shape its field expects.
        Keys that collide after lower-casing are rejected.
        """
        if v is None:
            return {}
        if not isinstance(v, Mapping):
            raise ValueError(f"Metadata defaults must be a mapping, got {type(v).__name__}")
        multi = info.data.get("multi_valued", DEFAULT_MULTI_VALUED)

        normalized: Dict[str, MetadataValue] = {}
        for key, value in v.items():
            if not isinstance(key, str) or not key.strip():
                raise ValueError(f"Metadata field names must be non-empty strings, got {key!r}")
            name = key.strip().lower()
            if name in normalized:
                raise ValueError(f"Duplicate metadata field after lower-casing: {name!r}")
            if name in multi:
                normalized[name] = _as_tuple(name, value)
            else:
                normalized[name] = _as_string(name, value)
        return normalized

    @field_validator("defaults", mode="after")
    @classmethod
    def _freeze_defaults(cls, v: Mapping[str, MetadataValue]) -> Mapping[str, MetadataValue]:
        """Wrap the validated defaults in a read-only view."""
        return MappingProxyType(dict(v))

    @field_serializer("defaults")
    def _serialize_defaults(self, v: Mapping[str, MetadataValue]) -> Dict[str, Any]:
        return {k: list(val) if isinstance(val, tuple) else val for k, val in v.items()}

    # --- Construction --- #

    @classmethod
    def from_config(cls, section: Optional[Mapping[str, Any]]) -> "MetadataConfig":
        """Build from the ``metadata`` section of the layered configuration."""
        section = section or {}
        return cls(
            defaults=section.get("defaults", DEFAULT_METADATA),
            multi_valued=section.get("multi_valued", DEFAULT_MULTI_VALUED),
        )

    # --- Helpers --- #

    def is_multi_valued(self, name: str) -> bool:
        """Return True if ``name`` (case-insensitive) holds a list of strings."""
        return name.lower() in self.multi_valued

    def fresh_metadata(self) -> Dict[str, Any]:
        """Return a mutable copy of the defaults; multi-valued fields become new lists."""
        return {k: list(v) if isinstance(v, tuple) else v for k, v in self.defaults.items()}


# --- Internals --- #

def _as_tuple(name: str, value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return tuple(split_values(value)) if value.strip() else ()
    if isinstance(value, (list, tuple)):
        return tuple(_scalar(name, item).strip() for item in value)
    raise ValueError(f"Default for multi-valued field {name!r} must be a string or a list of strings")


def _as_string(name: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return join_values([_scalar(name, item).strip() for item in value])
    raise ValueError(f"Default for field {name!r} must be a string, got {type(value).__name__}")


def _scalar(name: str, item: Any) -> str:
    if not isinstance(item, str):
        raise ValueError(f"Values of field {name!r} must be strings, got {item!r}")
    return item
