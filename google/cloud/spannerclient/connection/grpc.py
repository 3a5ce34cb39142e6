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
"""Connections backed by the generated Spanner GAPIC clients."""
from functools import partial
import logging
from typing import Any, Callable, Optional

from google.api_core.client_options import ClientOptions
from google.api_core.exceptions import GoogleAPICallError
from google.auth.credentials import Credentials
from google.cloud.spanner_admin_instance_v1 import (
    CreateInstanceRequest,
    DeleteInstanceRequest,
    GetInstanceConfigRequest,
    GetInstanceRequest,
    Instance,
    ListInstanceConfigsRequest,
    ListInstancesRequest,
)
from google.cloud.spanner_admin_instance_v1.services.instance_admin import (
    InstanceAdminClient,
)
from google.cloud.spanner_admin_instance_v1.services.instance_admin.transports import (  # noqa: E501
    InstanceAdminGrpcTransport,
)
from google.cloud.spanner_v1 import (
    CreateSessionRequest,
    DeleteSessionRequest,
    GetSessionRequest,
)
from google.cloud.spanner_v1.services.spanner import SpannerClient
from google.cloud.spanner_v1.services.spanner.transports import (
    SpannerGrpcTransport,
)
from google.protobuf import json_format
import grpc

from ..errors import ObjectClosedError, SpannerClientError
from ..names import format_project_name, parse_instance_path
from .connection_interface import (
    AdminConnectionInterface,
    ConnectionInterface,
    Request,
    Response,
)

logger = logging.getLogger(__name__)


def to_request(request_type: Any, request: Request) -> Any:
    """Builds a proto-plus request from a JSON-named mapping.

    Keys the request type does not know are dropped.
    """
    pb = json_format.ParseDict(
        request, request_type.pb()(), ignore_unknown_fields=True
    )
    return request_type.wrap(pb)


def to_response(message: Any) -> Response:
    """Converts a proto-plus message into a JSON-named mapping."""
    return type(message).to_dict(
        message,
        use_integers_for_enums=False,
        preserving_proto_field_name=False,
    )


def _create_instance_request(request: Request) -> CreateInstanceRequest:
    parts = parse_instance_path(request["name"])
    return CreateInstanceRequest(
        parent=format_project_name(parts["project"]),
        instance_id=parts["instance"],
        instance=to_request(Instance, request),
    )


class _GrpcConnectionBase:
    """Shared call handling and lifecycle for the gRPC connections."""

    def __init__(self, api: Any) -> None:
        self._api = api
        self._closed = False

    @property
    def closed(self) -> bool:
        """Returns True if the connection is closed."""
        return self._closed

    def _call(
        self,
        method_name: str,
        method: Callable,
        build_request: Callable[[], Any],
    ) -> Any:
        """Builds the request and invokes a GAPIC method.

        API failures and SpannerClientError propagate unchanged. Anything
        else, including a request that cannot be built, is wrapped in
        SpannerClientError.
        """
        if self._closed:
            raise ObjectClosedError(
                f"{self.__class__.__name__} has already been closed."
            )
        logger.debug("Calling %s", method_name)
        try:
            return method(request=build_request())
        except GoogleAPICallError as e:
            logger.debug("%s failed: %s", method_name, e)
            raise
        except SpannerClientError:
            logger.exception("Error calling %s", method_name)
            raise
        except Exception as e:
            logger.exception("Unexpected error calling %s", method_name)
            raise SpannerClientError(f"Unexpected error: {e}") from e

    def close(self) -> None:
        """Closes the underlying transport. Closing twice is a no-op."""
        if self._closed:
            return
        try:
            logger.debug("Closing %s", self.__class__.__name__)
            self._api.transport.close()
        finally:
            self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class GrpcConnection(_GrpcConnectionBase, ConnectionInterface):
    """Data-plane connection using ``spanner_v1.SpannerClient``."""

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        client_options: Optional[ClientOptions] = None,
        emulator_host: Optional[str] = None,
        spanner_api: Optional[SpannerClient] = None,
    ) -> None:
        """
        Args:
            credentials: Credentials for the API. Ignored with an emulator.
            client_options: Options such as ``api_endpoint``.
            emulator_host: ``host:port`` of a Spanner emulator.
            spanner_api: A pre-built GAPIC client, used as is.
        """
        if spanner_api is None:
            if emulator_host:
                logger.debug("Using Spanner emulator at %s", emulator_host)
                transport = SpannerGrpcTransport(
                    channel=grpc.insecure_channel(emulator_host)
                )
                spanner_api = SpannerClient(transport=transport)
            else:
                spanner_api = SpannerClient(
                    credentials=credentials, client_options=client_options
                )
        super().__init__(spanner_api)

    def create_session(self, request: Request) -> Response:
        session = self._call(
            "create_session",
            self._api.create_session,
            partial(to_request, CreateSessionRequest, request),
        )
        return to_response(session)

    def get_session(self, request: Request) -> Response:
        session = self._call(
            "get_session",
            self._api.get_session,
            partial(to_request, GetSessionRequest, request),
        )
        return to_response(session)

    def delete_session(self, request: Request) -> None:
        self._call(
            "delete_session",
            self._api.delete_session,
            partial(to_request, DeleteSessionRequest, request),
        )


class AdminGrpcConnection(_GrpcConnectionBase, AdminConnectionInterface):
    """Instance-admin connection using ``InstanceAdminClient``."""

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        client_options: Optional[ClientOptions] = None,
        emulator_host: Optional[str] = None,
        instance_admin_api: Optional[InstanceAdminClient] = None,
    ) -> None:
        if instance_admin_api is None:
            if emulator_host:
                logger.debug("Using Spanner emulator at %s", emulator_host)
                transport = InstanceAdminGrpcTransport(
                    channel=grpc.insecure_channel(emulator_host)
                )
                instance_admin_api = InstanceAdminClient(transport=transport)
            else:
                instance_admin_api = InstanceAdminClient(
                    credentials=credentials, client_options=client_options
                )
        super().__init__(instance_admin_api)

    def _first_page(self, method_name, method, build_request) -> Response:
        # The caller drives pagination through pageToken.
        pager = self._call(method_name, method, build_request)
        return to_response(next(iter(pager.pages)))

    def list_configs(self, request: Request) -> Response:
        return self._first_page(
            "list_instance_configs",
            self._api.list_instance_configs,
            partial(to_request, ListInstanceConfigsRequest, request),
        )

    def get_config(self, request: Request) -> Response:
        config = self._call(
            "get_instance_config",
            self._api.get_instance_config,
            partial(to_request, GetInstanceConfigRequest, request),
        )
        return to_response(config)

    def list_instances(self, request: Request) -> Response:
        return self._first_page(
            "list_instances",
            self._api.list_instances,
            partial(to_request, ListInstancesRequest, request),
        )

    def get_instance(self, request: Request) -> Response:
        instance = self._call(
            "get_instance",
            self._api.get_instance,
            partial(to_request, GetInstanceRequest, request),
        )
        return to_response(instance)

    def create_instance(self, request: Request) -> Response:
        operation = self._call(
            "create_instance",
            self._api.create_instance,
            partial(_create_instance_request, request),
        )
        return json_format.MessageToDict(operation.operation)

    def delete_instance(self, request: Request) -> None:
        self._call(
            "delete_instance",
            self._api.delete_instance,
            partial(to_request, DeleteInstanceRequest, request),
        )
