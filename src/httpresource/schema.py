# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Declarative attribute schema and resource state.

A `Resource` pairs an attribute schema with lifecycle callbacks. Callbacks receive a
`ResourceData` built from user configuration and the provider-level meta object (the
HTTP client), and raise an `HttpResourceError` subclass on failure.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import SchemaError

Callback = Callable[["ResourceData", Any], None]


class SchemaType(str, Enum):
    STRING = "string"
    MAP = "map"


def env_default_func(name: str, default: str = "") -> Callable[[], str]:
    """Return a default function reading `name` from the environment at call time."""

    def _default() -> str:
        return os.getenv(name, default)

    return _default


@dataclass
class Schema:
    type: SchemaType
    required: bool = False
    optional: bool = False
    computed: bool = False
    force_new: bool = False
    default_func: Callable[[], Any] | None = None
    description: str = ""

    @property
    def computed_only(self) -> bool:
        return self.computed and not self.optional

    def zero_value(self) -> Any:
        return {} if self.type is SchemaType.MAP else ""

    def default_value(self) -> Any:
        if self.default_func is not None:
            value = self.default_func()
            if value is not None:
                return value
        return self.zero_value()

    def validate(self, name: str) -> None:
        if self.required and self.optional:
            raise SchemaError(f"{name}: required and optional are mutually exclusive")
        if self.required and self.computed:
            raise SchemaError(f"{name}: required attributes cannot be computed")
        if not (self.required or self.optional or self.computed):
            raise SchemaError(f"{name}: one of required, optional or computed must be set")
        if self.default_func is not None and (self.required or self.computed_only):
            raise SchemaError(f"{name}: default is only allowed on optional attributes")

    def coerce(self, name: str, value: Any) -> Any:
        if self.type is SchemaType.STRING:
            if not isinstance(value, str):
                raise SchemaError(f"{name}: expected string, got {type(value).__name__}")
            return value
        if not isinstance(value, Mapping):
            raise SchemaError(f"{name}: expected map, got {type(value).__name__}")
        out: dict[str, str] = {}
        for key, item in value.items():
            if isinstance(item, (Mapping, list, tuple, set)):
                raise SchemaError(f"{name}.{key}: expected string value, got {type(item).__name__}")
            out[str(key)] = "" if item is None else str(item)
        return out


class ResourceData:
    """Attribute values and identity of one resource instance."""

    def __init__(self, schema: Mapping[str, Schema], config: Mapping[str, Any] | None = None, *, id: str = ""):
        self._schema = schema
        self._config = dict(config or {})
        self._values: dict[str, Any] = {}
        self._id = id

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value or ""

    def _schema_for(self, key: str) -> Schema:
        try:
            return self._schema[key]
        except KeyError:
            raise SchemaError(f"unknown attribute: {key}") from None

    def get(self, key: str) -> Any:
        schema = self._schema_for(key)
        if key in self._values:
            return self._values[key]
        if key in self._config:
            return self._config[key]
        return schema.default_value()

    def get_ok(self, key: str) -> tuple[Any, bool]:
        value = self.get(key)
        return value, bool(value)

    def set(self, key: str, value: Any) -> None:
        schema = self._schema_for(key)
        self._values[key] = schema.zero_value() if value is None else schema.coerce(key, value)

    def to_state(self) -> dict[str, Any]:
        state: dict[str, Any] = {"id": self._id}
        for key in self._schema:
            state[key] = self.get(key)
        return state

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ResourceData(id={self._id!r})"


@dataclass
class Resource:
    schema: dict[str, Schema] = field(default_factory=dict)
    read: Callback | None = None
    create: Callback | None = None
    update: Callback | None = None
    delete: Callback | None = None

    def internal_validate(self, *, writable: bool = True) -> None:
        """Check the schema flags and that the callbacks match the resource kind."""
        if not self.schema:
            raise SchemaError("resource has no attributes")
        for name, attr in self.schema.items():
            attr.validate(name)

        if self.read is None:
            raise SchemaError("read callback is required")

        if not writable:
            if self.create or self.update or self.delete:
                raise SchemaError("data sources only support read")
            for name, attr in self.schema.items():
                if attr.force_new:
                    raise SchemaError(f"{name}: force_new is not allowed on data sources")
            return

        if self.create is None or self.delete is None:
            raise SchemaError("create and delete callbacks are required")

        updatable = [name for name, attr in self.schema.items() if not attr.force_new and not attr.computed_only]
        if updatable and self.update is None:
            raise SchemaError(f"update callback is required for in-place attributes: {', '.join(updatable)}")
        if not updatable and self.update is not None:
            raise SchemaError("all attributes are force_new or computed; update callback is superfluous")

    def data(self, config: Mapping[str, Any] | None = None, *, id: str = "") -> ResourceData:
        """Validate `config` against the schema and wrap it in a ResourceData."""
        values: dict[str, Any] = {}
        for key, value in (config or {}).items():
            if key not in self.schema:
                raise SchemaError(f"unknown attribute: {key}")
            attr = self.schema[key]
            if attr.computed_only:
                raise SchemaError(f"{key}: computed attributes cannot be configured")
            if value is None:
                continue
            values[key] = attr.coerce(key, value)

        missing = [key for key, attr in self.schema.items() if attr.required and key not in values]
        if missing:
            raise SchemaError(f"missing required attribute(s): {', '.join(sorted(missing))}")

        return ResourceData(self.schema, values, id=id)

    def force_new_changes(self, prior: ResourceData, config: Mapping[str, Any]) -> list[str]:
        """Names of force-new attributes whose configured value differs from `prior`."""
        changed = []
        for key, attr in self.schema.items():
            if attr.force_new and key in config and config[key] != prior.get(key):
                changed.append(key)
        return changed


__all__ = ["Callback", "Resource", "ResourceData", "Schema", "SchemaType", "env_default_func"]
