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
"""Module for the Session class representing a single Spanner session."""
import logging
from typing import Any, Dict, Optional

from google.api_core.exceptions import NotFound

from .connection.connection_interface import ConnectionInterface
from .names import format_session_name

logger = logging.getLogger(__name__)


class Session:
    """Represents a single Cloud Spanner session.

    A Session is a handle to a server-side resource. It does not own the
    remote session: dropping the object leaves the session alive until
    :meth:`delete` is called or the server expires it.

    Example::

        session_client = spanner_client.session_client()
        session = session_client.create("test-instance", "test-database")
    """

    def __init__(
        self,
        connection: ConnectionInterface,
        project_id: str,
        instance: str,
        database: str,
        name: str,
    ) -> None:
        """Initializes a Session.

        Args:
            connection: A connection to Cloud Spanner.
            project_id (str): The project ID.
            instance (str): The instance ID.
            database (str): The database ID.
            name (str): The session ID.
        """
        self._connection = connection
        self._project_id = project_id
        self._instance = instance
        self._database = database
        self._name = name

    def info(self) -> Dict[str, str]:
        """Returns the ``projectId``, ``instance``, ``database`` and session
        ``name`` of this session."""
        return {
            "projectId": self._project_id,
            "instance": self._instance,
            "database": self._database,
            "name": self._name,
        }

    def exists(self, options: Optional[Dict[str, Any]] = None) -> bool:
        """Checks if the session exists.

        Args:
            options: Additional fields for the GetSession request.

        Returns:
            True if the session exists, False if the API reports it as
            not found.

        Raises:
            google.api_core.exceptions.GoogleAPICallError: Any failure
                other than NOT_FOUND.
        """
        try:
            self._connection.get_session(
                {"name": self.name(), **(options or {})}
            )
        except NotFound:
            logger.debug("Session %s not found", self.name())
            return False
        return True

    def delete(self, options: Optional[Dict[str, Any]] = None) -> None:
        """Deletes the session.

        Args:
            options: Additional fields for the DeleteSession request.
        """
        logger.debug("Deleting session %s", self.name())
        self._connection.delete_session(
            {"name": self.name(), **(options or {})}
        )

    def name(self) -> str:
        """Returns the fully qualified session name."""
        return format_session_name(
            self._project_id, self._instance, self._database, self._name
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Session):
            return NotImplemented
        return self.name() == other.name()

    def __hash__(self) -> int:
        return hash(self.name())

    def __repr__(self) -> str:
        return f"<Session(name='{self.name()}')>"
