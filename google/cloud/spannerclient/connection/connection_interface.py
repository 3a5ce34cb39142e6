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
"""Abstract connections consumed by the client wrappers.

Requests and responses are plain mappings keyed by the API's JSON field
names (``instanceConfigs``, ``displayName``, ``nextPageToken``, ...).
Implementations raise ``google.api_core.exceptions`` types for failed
calls, in particular ``NotFound`` for missing resources.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

Request = Dict[str, Any]
Response = Dict[str, Any]


class ConnectionInterface(ABC):
    """Data-plane connection to Cloud Spanner."""

    @abstractmethod
    def create_session(self, request: Request) -> Response:
        """Creates a session in ``request["database"]``.

        Returns:
            The created session. ``name`` may be missing.
        """

    @abstractmethod
    def get_session(self, request: Request) -> Response:
        """Fetches the session ``request["name"]``.

        Raises:
            google.api_core.exceptions.NotFound: If the session does not
                exist.
        """

    @abstractmethod
    def delete_session(self, request: Request) -> None:
        """Deletes the session ``request["name"]``."""

    @abstractmethod
    def close(self) -> None:
        """Releases the resources held by the connection."""


class AdminConnectionInterface(ABC):
    """Instance-admin connection to Cloud Spanner."""

    @abstractmethod
    def list_configs(self, request: Request) -> Response:
        """Lists instance configs under ``request["parent"]``."""

    @abstractmethod
    def get_config(self, request: Request) -> Response:
        """Fetches the instance config ``request["name"]``."""

    @abstractmethod
    def list_instances(self, request: Request) -> Response:
        """Lists instances under ``request["parent"]``."""

    @abstractmethod
    def get_instance(self, request: Request) -> Response:
        """Fetches the instance ``request["name"]``."""

    @abstractmethod
    def create_instance(self, request: Request) -> Optional[Response]:
        """Starts creation of the instance ``request["name"]``."""

    @abstractmethod
    def delete_instance(self, request: Request) -> None:
        """Deletes the instance ``request["name"]``."""

    @abstractmethod
    def close(self) -> None:
        """Releases the resources held by the connection."""
