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
"""Module for the Instance class."""
import logging
from typing import Any, Dict, Optional

from .abstract_admin_resource import AbstractAdminResource
from .names import format_instance_name

logger = logging.getLogger(__name__)


class Instance(AbstractAdminResource):
    """A Cloud Spanner instance."""

    STATE_READY = "READY"
    STATE_CREATING = "CREATING"

    def qualified_name(self) -> str:
        return format_instance_name(self._project_id, self._name)

    def _fetch(self, request: Dict[str, Any]) -> Dict[str, Any]:
        return self._connection.get_instance(request)

    def state(self, options: Optional[Dict[str, Any]] = None) -> Optional[str]:
        """Returns the instance state, e.g. ``Instance.STATE_READY``.

        Uses the attached metadata if present.
        """
        return self.info(options).get("state")

    def delete(self, options: Optional[Dict[str, Any]] = None) -> None:
        """Deletes the instance and all of its databases."""
        logger.debug("Deleting instance %s", self.qualified_name())
        self._connection.delete_instance(
            {"name": self.qualified_name(), **(options or {})}
        )
