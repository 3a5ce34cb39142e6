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
"""Module for the Configuration class."""
from typing import Any, Dict

from .abstract_admin_resource import AbstractAdminResource
from .names import format_instance_config_name


class Configuration(AbstractAdminResource):
    """An instance configuration, such as ``regional-us-central1``.

    Configurations define the geographic placement and replication of the
    instances that use them.
    """

    def qualified_name(self) -> str:
        return format_instance_config_name(self._project_id, self._name)

    def _fetch(self, request: Dict[str, Any]) -> Dict[str, Any]:
        return self._connection.get_config(request)
