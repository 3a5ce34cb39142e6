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
"""Formatting and parsing of Spanner resource names.

The templates come from the path helpers of the generated GAPIC clients, so
every ``format_*`` function here is the exact inverse of its ``parse_*``
counterpart.
"""
from typing import Dict

from google.cloud.spanner_admin_instance_v1.services.instance_admin import (
    InstanceAdminClient,
)
from google.cloud.spanner_v1.services.spanner import SpannerClient

from .errors import InvalidResourceNameError


def format_project_name(project: str) -> str:
    """Returns ``projects/{project}``."""
    return InstanceAdminClient.common_project_path(project)


def format_instance_config_name(project: str, config: str) -> str:
    """Returns ``projects/{project}/instanceConfigs/{config}``."""
    return InstanceAdminClient.instance_config_path(project, config)


def format_instance_name(project: str, instance: str) -> str:
    """Returns ``projects/{project}/instances/{instance}``."""
    return InstanceAdminClient.instance_path(project, instance)


def format_database_name(project: str, instance: str, database: str) -> str:
    """Returns ``projects/{p}/instances/{i}/databases/{d}``."""
    return SpannerClient.database_path(project, instance, database)


def format_session_name(
    project: str, instance: str, database: str, session: str
) -> str:
    """Returns ``projects/{p}/instances/{i}/databases/{d}/sessions/{s}``."""
    return SpannerClient.session_path(project, instance, database, session)


def _parse(parsed: Dict[str, str], name: str, kind: str) -> Dict[str, str]:
    if not parsed:
        raise InvalidResourceNameError(name, kind)
    return parsed


def parse_instance_config_name(name: str) -> str:
    """Returns the config id of a fully-qualified instance config name.

    Raises:
        InvalidResourceNameError: If ``name`` is not an instance config
            name.
    """
    parsed = InstanceAdminClient.parse_instance_config_path(name)
    return _parse(parsed, name, "instance config")["instance_config"]


def parse_instance_path(name: str) -> Dict[str, str]:
    """Splits an instance name into its ``project`` and ``instance`` parts."""
    parsed = InstanceAdminClient.parse_instance_path(name)
    return _parse(parsed, name, "instance")


def parse_instance_name(name: str) -> str:
    """Returns the instance id of a fully-qualified instance name."""
    return parse_instance_path(name)["instance"]


def parse_session_name(name: str) -> Dict[str, str]:
    """Splits a session name into its constituent parts.

    Returns:
        A dict with the ``project``, ``instance``, ``database`` and
        ``session`` keys.

    Raises:
        InvalidResourceNameError: If ``name`` is not a session name.
    """
    return _parse(SpannerClient.parse_session_path(name), name, "session")


def parse_instance_from_session_name(name: str) -> str:
    return parse_session_name(name)["instance"]


def parse_database_from_session_name(name: str) -> str:
    return parse_session_name(name)["database"]


def parse_session_from_session_name(name: str) -> str:
    return parse_session_name(name)["session"]
