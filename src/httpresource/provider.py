# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Provider registry and resource lifecycle driver."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextlib import suppress
from typing import Any

from .data_source_http import data_source_http
from .errors import SchemaError
from .http.client import HttpClient, create_default_http_client
from .resource_http import resource_http
from .schema import Resource, ResourceData

logger = logging.getLogger(__name__)


class Provider:
    """
    Named resources and data sources sharing one HTTP client.

    The HTTP client is handed to every callback as its meta argument, so all operations
    reuse the same connection settings.
    """

    def __init__(
        self,
        resources_map: Mapping[str, Resource],
        data_sources_map: Mapping[str, Resource],
        http_client: HttpClient | None = None,
    ):
        self.resources_map = dict(resources_map)
        self.data_sources_map = dict(data_sources_map)
        self.http_client = http_client or create_default_http_client()

    def internal_validate(self) -> None:
        for name, resource in self.resources_map.items():
            try:
                resource.internal_validate(writable=True)
            except SchemaError as exc:
                raise SchemaError(f"resource {name}: {exc}") from exc
        for name, source in self.data_sources_map.items():
            try:
                source.internal_validate(writable=False)
            except SchemaError as exc:
                raise SchemaError(f"data source {name}: {exc}") from exc

    def resource(self, type_name: str) -> Resource:
        try:
            return self.resources_map[type_name]
        except KeyError:
            raise SchemaError(f"unknown resource type: {type_name}") from None

    def data_source(self, type_name: str) -> Resource:
        try:
            return self.data_sources_map[type_name]
        except KeyError:
            raise SchemaError(f"unknown data source type: {type_name}") from None

    def create(self, type_name: str, config: Mapping[str, Any]) -> ResourceData:
        resource = self.resource(type_name)
        data = resource.data(config)
        resource.create(data, self.http_client)
        logger.info("created %s %s", type_name, data.id)
        return data

    def read(self, type_name: str, data: ResourceData) -> ResourceData:
        """Refresh `data` from the remote side; an empty id afterwards means it is gone."""
        self.resource(type_name).read(data, self.http_client)
        return data

    def update(self, type_name: str, data: ResourceData, config: Mapping[str, Any]) -> ResourceData:
        resource = self.resource(type_name)
        changed = resource.force_new_changes(data, config)
        if changed:
            raise SchemaError(f"cannot update {', '.join(changed)} in place; the resource must be replaced")
        updated = resource.data(config, id=data.id)
        resource.update(updated, self.http_client)
        logger.info("updated %s %s", type_name, updated.id)
        return updated

    def delete(self, type_name: str, data: ResourceData) -> ResourceData:
        self.resource(type_name).delete(data, self.http_client)
        logger.info("deleted %s", type_name)
        return data

    def apply(self, type_name: str, config: Mapping[str, Any], prior: ResourceData | None = None) -> ResourceData:
        """Converge remote state on `config`, replacing the resource when a force-new attribute changed."""
        if prior is None or not prior.id:
            return self.create(type_name, config)

        changed = self.resource(type_name).force_new_changes(prior, config)
        if changed:
            logger.info("replacing %s: %s changed", type_name, ", ".join(changed))
            self.delete(type_name, prior)
            return self.create(type_name, config)
        return self.update(type_name, prior, config)

    def read_data_source(self, type_name: str, config: Mapping[str, Any]) -> ResourceData:
        source = self.data_source(type_name)
        data = source.data(config)
        source.read(data, self.http_client)
        return data

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> "Provider":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()


def new_provider(http_client: HttpClient | None = None) -> Provider:
    """Provider with the `http` resource and data source registered."""
    return Provider(
        resources_map={"http": resource_http()},
        data_sources_map={"http": data_source_http()},
        http_client=http_client,
    )


__all__ = ["Provider", "new_provider"]
