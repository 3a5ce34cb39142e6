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
"""Unit tests for Configuration and Instance behavior."""
from unittest.mock import Mock

from google.api_core.exceptions import NotFound, PermissionDenied
import pytest

from google.cloud.spannerclient import Configuration, Instance  # type: ignore
from google.cloud.spannerclient.abstract_admin_resource import (  # type: ignore
    AbstractAdminResource,
)
from google.cloud.spannerclient.connection import (  # type: ignore
    AdminConnectionInterface,
)


@pytest.fixture
def admin_connection():
    return Mock(spec=AdminConnectionInterface)


def test_abc_instantiation_fails(admin_connection):
    with pytest.raises(TypeError):
        # pylint: disable=abstract-class-instantiated
        AbstractAdminResource(admin_connection, "p", "n")  # type: ignore


class TestConfiguration:
    """Test suite for the Configuration class."""

    def test_qualified_name(self, admin_connection):
        config = Configuration(admin_connection, "test-project", "bar")

        assert config.name() == "bar"
        assert (
            config.qualified_name()
            == "projects/test-project/instanceConfigs/bar"
        )

    def test_info_loads_when_missing(self, admin_connection):
        admin_connection.get_config.return_value = {"displayName": "Bar"}
        config = Configuration(admin_connection, "test-project", "bar")

        assert config.info() == {"displayName": "Bar"}
        assert config.info() == {"displayName": "Bar"}
        admin_connection.get_config.assert_called_once_with(
            {"name": "projects/test-project/instanceConfigs/bar"}
        )

    def test_reload_replaces_info(self, admin_connection):
        admin_connection.get_config.return_value = {"displayName": "New"}
        config = Configuration(
            admin_connection, "p", "bar", {"displayName": "Old"}
        )

        assert config.reload() == {"displayName": "New"}
        assert config.info() == {"displayName": "New"}

    def test_exists(self, admin_connection):
        config = Configuration(admin_connection, "p", "bar")

        assert config.exists() is True

        admin_connection.get_config.side_effect = NotFound("missing")
        assert config.exists() is False

    def test_repr(self, admin_connection):
        config = Configuration(admin_connection, "p", "bar")

        assert repr(config) == (
            "<Configuration(name='projects/p/instanceConfigs/bar')>"
        )


class TestInstance:
    """Test suite for the Instance class."""

    def test_qualified_name(self, admin_connection):
        instance = Instance(admin_connection, "test-project", "foo")

        assert (
            instance.qualified_name() == "projects/test-project/instances/foo"
        )

    def test_state_from_attached_info(self, admin_connection):
        instance = Instance(
            admin_connection, "p", "foo", {"state": Instance.STATE_READY}
        )

        assert instance.state() == "READY"
        admin_connection.get_instance.assert_not_called()

    def test_state_reloads_when_missing(self, admin_connection):
        admin_connection.get_instance.return_value = {"state": "CREATING"}
        instance = Instance(admin_connection, "p", "foo")

        assert instance.state() == Instance.STATE_CREATING

    def test_exists_other_error_propagates(self, admin_connection):
        admin_connection.get_instance.side_effect = PermissionDenied("no")
        instance = Instance(admin_connection, "p", "foo")

        with pytest.raises(PermissionDenied):
            instance.exists()

    def test_delete(self, admin_connection):
        instance = Instance(admin_connection, "p", "foo")

        instance.delete()

        admin_connection.delete_instance.assert_called_once_with(
            {"name": "projects/p/instances/foo"}
        )
