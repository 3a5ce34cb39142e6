# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Module for the SpannerClient entry point."""
import logging
import os
from typing import Any, Callable, Dict, Iterator, Optional

from google.api_core.client_options import ClientOptions
import google.auth
from google.auth.credentials import Credentials
from google.auth.exceptions import DefaultCredentialsError

from .configuration import Configuration
from .connection.connection_interface import (
    AdminConnectionInterface,
    ConnectionInterface,
)
from .connection.grpc import AdminGrpcConnection, GrpcConnection
from .errors import ObjectClosedError
from .instance import Instance
from .names import (
    format_instance_config_name,
    format_instance_name,
    format_project_name,
    parse_instance_config_name,
    parse_instance_name,
)
from .session_client import SessionClient

logger = logging.getLogger(__name__)

PROJECT_ENV_VAR = "GOOGLE_CLOUD_PROJECT"
EMULATOR_ENV_VAR = "SPANNER_EMULATOR_HOST"

DEFAULT_NODE_COUNT = 1


def _resolve_project_id(project_id: Optional[str]) -> str:
    """Returns the explicit project, the environment's, or ADC's."""
    if project_id:
        return project_id
    project_id = os.environ.get(PROJECT_ENV_VAR)
    if project_id:
        return project_id
    try:
        _, project_id = google.auth.default()
    except DefaultCredentialsError:
        project_id = None
    if not project_id:
        raise ValueError(
            "A project ID is required. Pass project_id or set "
            f"{PROJECT_ENV_VAR}."
        )
    return project_id


class SpannerClient:
    """Entry point to Cloud Spanner instance and session management.

    Example::

        with SpannerClient(project_id="test-project") as client:
            for config in client.configurations():
                print(config.name())

    Connections passed in are shared with the caller and never closed by
    the client. Connections the client builds itself are closed by
    :meth:`close`.
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        *,
        credentials: Optional[Credentials] = None,
        client_options: Optional[ClientOptions] = None,
        emulator_host: Optional[str] = None,
        connection: Optional[ConnectionInterface] = None,
        admin_connection: Optional[AdminConnectionInterface] = None,
    ) -> None:
        """
        Args:
            project_id: The project ID. Defaults to the
                ``GOOGLE_CLOUD_PROJECT`` environment variable, then to the
                project of the application default credentials.
            credentials: Credentials for the default gRPC connections.
            client_options: Client options for the default gRPC
                connections.
            emulator_host: ``host:port`` of a Spanner emulator. Defaults to
                the ``SPANNER_EMULATOR_HOST`` environment variable.
            connection: A data-plane connection to use instead of the
                default gRPC one.
            admin_connection: An instance-admin connection to use instead
                of the default gRPC one.
        """
        self._project_id = _resolve_project_id(project_id)
        if emulator_host is None:
            emulator_host = os.environ.get(EMULATOR_ENV_VAR)

        self._owned = []
        if connection is None:
            connection = GrpcConnection(
                credentials=credentials,
                client_options=client_options,
                emulator_host=emulator_host,
            )
            self._owned.append(connection)
        if admin_connection is None:
            try:
                admin_connection = AdminGrpcConnection(
                    credentials=credentials,
                    client_options=client_options,
                    emulator_host=emulator_host,
                )
            except Exception:
                self._close_owned()
                raise
            self._owned.append(admin_connection)

        self._connection = connection
        self._admin_connection = admin_connection
        self._closed = False
        logger.debug("Created SpannerClient for project %s", self._project_id)

    @property
    def project_id(self) -> str:
        """Returns the project ID."""
        return self._project_id

    @property
    def closed(self) -> bool:
        """Returns True if the client is closed."""
        return self._closed

    def _check_closed(self) -> None:
        if self._closed:
            raise ObjectClosedError("SpannerClient has already been closed.")

    def _paginate(
        self,
        list_method: Callable[[Dict[str, Any]], Dict[str, Any]],
        items_key: str,
        options: Optional[Dict[str, Any]],
    ) -> Iterator[Dict[str, Any]]:
        """Yields the entries of every page of a listing call."""
        request = {"parent": format_project_name(self._project_id)}
        request.update(options or {})
        while True:
            res = list_method(request) or {}
            for item in res.get(items_key, []):
                yield item
            page_token = res.get("nextPageToken")
            if not page_token:
                return
            request = {**request, "pageToken": page_token}

    def configurations(
        self, options: Optional[Dict[str, Any]] = None
    ) -> Iterator[Configuration]:
        """Lists the instance configurations available to the project.

        The listing call is made lazily, on first iteration. Each call
        starts a new listing.

        Args:
            options: Additional fields for the ListInstanceConfigs request,
                e.g. ``pageSize``.

        Yields:
            Configuration: One per configuration, in API order.
        """
        self._check_closed()
        for config in self._paginate(
            self._admin_connection.list_configs, "instanceConfigs", options
        ):
            yield Configuration(
                self._admin_connection,
                self._project_id,
                parse_instance_config_name(config["name"]),
                config,
            )

    def configuration(self, name: str) -> Configuration:
        """Returns a Configuration for ``name`` without calling the API.

        Args:
            name (str): The configuration ID, e.g. ``regional-us-central1``.
        """
        self._check_closed()
        return Configuration(self._admin_connection, self._project_id, name)

    def create_instance(
        self,
        config: Configuration,
        name: str,
        options: Optional[Dict[str, Any]] = None,
    ) -> Instance:
        """Creates an instance.

        Creation is a long-running operation on the server. The returned
        Instance can be polled with :meth:`Instance.state`.

        Args:
            config (Configuration): The configuration the instance uses.
            name (str): The instance ID.
            options: Additional Instance fields, e.g. ``displayName``
                (defaults to ``name``), ``nodeCount`` (defaults to 1 unless
                ``processingUnits`` is given) or ``labels``.

        Returns:
            Instance: The new instance.
        """
        self._check_closed()
        options = options or {}
        request = {"displayName": name, "labels": {}}
        # nodeCount and processingUnits are mutually exclusive.
        if "nodeCount" not in options and "processingUnits" not in options:
            request["nodeCount"] = DEFAULT_NODE_COUNT
        request.update(options)
        request["name"] = format_instance_name(self._project_id, name)
        request["config"] = format_instance_config_name(
            self._project_id, config.name()
        )

        logger.debug(
            "Creating instance %s with config %s",
            request["name"],
            request["config"],
        )
        self._admin_connection.create_instance(request)
        return Instance(self._admin_connection, self._project_id, name)

    def instance(
        self, name: str, info: Optional[Dict[str, Any]] = None
    ) -> Instance:
        """Returns an Instance for ``name`` without calling the API.

        Args:
            name (str): The instance ID.
            info: Instance metadata to attach, if already known.
        """
        self._check_closed()
        return Instance(self._admin_connection, self._project_id, name, info)

    def instances(
        self, options: Optional[Dict[str, Any]] = None
    ) -> Iterator[Instance]:
        """Lists the instances in the project.

        Args:
            options: Additional fields for the ListInstances request, e.g.
                ``filter`` or ``pageSize``.

        Yields:
            Instance: One per instance, in API order.
        """
        self._check_closed()
        for instance in self._paginate(
            self._admin_connection.list_instances, "instances", options
        ):
            yield Instance(
                self._admin_connection,
                self._project_id,
                parse_instance_name(instance["name"]),
                instance,
            )

    def session_client(self) -> SessionClient:
        """Returns a SessionClient sharing this client's connection."""
        self._check_closed()
        return SessionClient(self._connection, self._project_id)

    def close(self) -> None:
        """Closes the connections created by this client."""
        if self._closed:
            return
        self._closed = True
        self._close_owned()

    def _close_owned(self) -> None:
        """Closes every owned connection, then raises the first error."""
        first_error = None
        for connection in self._owned:
            try:
                connection.close()
            except Exception as e:
                logger.exception(
                    "Error closing %s", connection.__class__.__name__
                )
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    def __enter__(self) -> "SpannerClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
