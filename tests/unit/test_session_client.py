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
"""Unit tests for SessionClient behavior."""
from unittest.mock import Mock

from google.api_core.exceptions import ResourceExhausted
import pytest

from google.cloud.spannerclient import (  # type: ignore
    InvalidResourceNameError,
    Session,
    SessionClient,
)
from google.cloud.spannerclient.connection import (  # type: ignore
    ConnectionInterface,
)

PROJECT = "test-project"
SESSION_NAME = (
    "projects/test-project/instances/test-instance"
    "/databases/test-database/sessions/session-1"
)


class TestSessionClient:
    """Test suite for the SessionClient class."""

    @pytest.fixture
    def connection(self):
        return Mock(spec=ConnectionInterface)

    @pytest.fixture
    def session_client(self, connection):
        return SessionClient(connection, PROJECT)

    def test_create(self, session_client, connection):
        """A response name is parsed into a Session."""
        connection.create_session.return_value = {"name": SESSION_NAME}

        session = session_client.create("test-instance", "test-database")

        connection.create_session.assert_called_once_with(
            {
                "database": "projects/test-project/instances/test-instance"
                "/databases/test-database"
            }
        )
        assert isinstance(session, Session)
        assert session.info() == {
            "projectId": PROJECT,
            "instance": "test-instance",
            "database": "test-database",
            "name": "session-1",
        }

    @pytest.mark.parametrize(
        "instance,database,session_id",
        [
            ("test-instance", "test-database", "session-1"),
            ("i", "d", "AAfhx2Zx3qZ0"),
            ("my-instance-1", "db_2", "s-3"),
        ],
    )
    def test_create_name_matches_response(
        self, session_client, connection, instance, database, session_id
    ):
        response_name = (
            f"projects/{PROJECT}/instances/{instance}"
            f"/databases/{database}/sessions/{session_id}"
        )
        connection.create_session.return_value = {"name": response_name}

        session = session_client.create(instance, database)

        assert session.name() == response_name

    def test_create_options_take_precedence(self, session_client, connection):
        connection.create_session.return_value = {"name": SESSION_NAME}

        session_client.create(
            "test-instance",
            "test-database",
            {"database": "override", "session": {"labels": {"env": "dev"}}},
        )

        connection.create_session.assert_called_once_with(
            {"database": "override", "session": {"labels": {"env": "dev"}}}
        )

    @pytest.mark.parametrize("response", [{}, {"name": ""}, None])
    def test_create_without_name_returns_none(
        self, session_client, connection, response
    ):
        connection.create_session.return_value = response

        assert session_client.create("test-instance", "test-database") is None

    def test_create_with_malformed_name(self, session_client, connection):
        connection.create_session.return_value = {"name": "sessions/oops"}

        with pytest.raises(InvalidResourceNameError):
            session_client.create("test-instance", "test-database")

    def test_create_error_propagates(self, session_client, connection):
        connection.create_session.side_effect = ResourceExhausted("quota")

        with pytest.raises(ResourceExhausted):
            session_client.create("test-instance", "test-database")

    def test_repr(self, session_client):
        assert repr(session_client) == (
            "<SessionClient(connection=ConnectionInterface, "
            "project_id='test-project')>"
        )
