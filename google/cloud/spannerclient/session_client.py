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
"""Module for creating Spanner sessions."""
import logging
from typing import Any, Dict, Optional

from .connection.connection_interface import ConnectionInterface
from .names import format_database_name, parse_session_name
from .session import Session

logger = logging.getLogger(__name__)


class SessionClient:
    """Manages API interactions related to Spanner database sessions.

    In general, sessions are handled by the client internally. Direct
    management of sessions is only useful where granular control is
    needed.
    """

    def __init__(self, connection: ConnectionInterface, project_id: str):
        """
        Args:
            connection: A connection to the Cloud Spanner API.
            project_id (str): The current project ID.
        """
        self._connection = connection
        self._project_id = project_id

    @property
    def project_id(self) -> str:
        return self._project_id

    def create(
        self,
        instance: str,
        database: str,
        options: Optional[Dict[str, Any]] = None,
    ) -> Optional[Session]:
        """Creates a new session in the given instance and database.

        Args:
            instance (str): The instance ID.
            database (str): The database ID.
            options: Additional fields for the CreateSession request.
                Keys given here take precedence.

        Returns:
            The new Session, or None if the response carried no session
            name.

        Raises:
            InvalidResourceNameError: If the returned name is not a
                session name.
        """
        database_name = format_database_name(
            self._project_id, instance, database
        )
        logger.debug("Creating session in %s", database_name)
        res = self._connection.create_session(
            {"database": database_name, **(options or {})}
        )

        if not res or not res.get("name"):
            logger.warning(
                "CreateSession for %s returned no session name",
                database_name,
            )
            return None

        parts = parse_session_name(res["name"])
        logger.debug("Created session %s", res["name"])
        return Session(
            self._connection,
            self._project_id,
            parts["instance"],
            parts["database"],
            parts["session"],
        )

    def __repr__(self) -> str:
        return (
            f"<SessionClient(connection="
            f"{self._connection.__class__.__name__}, "
            f"project_id='{self._project_id}')>"
        )
