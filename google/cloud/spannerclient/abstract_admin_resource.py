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
"""Abstract base class for instance-admin resources."""
from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, Optional

from google.api_core.exceptions import NotFound

from .connection.connection_interface import AdminConnectionInterface

logger = logging.getLogger(__name__)


class AbstractAdminResource(ABC):
    """
    Base class for value objects addressed through the instance-admin API.

    Holds the short resource ID and, optionally, the metadata returned by
    the API. Metadata is only fetched on :meth:`reload`, or by
    :meth:`info` when none is attached yet.
    """

    def __init__(
        self,
        connection: AdminConnectionInterface,
        project_id: str,
        name: str,
        info: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Args:
            connection: An instance-admin connection.
            project_id: The project ID.
            name: The short resource ID.
            info: Metadata already known for the resource.
        """
        self._connection = connection
        self._project_id = project_id
        self._name = name
        self._info = info

    def name(self) -> str:
        """Returns the short resource ID."""
        return self._name

    @abstractmethod
    def qualified_name(self) -> str:
        """Returns the fully qualified resource name."""

    @abstractmethod
    def _fetch(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """Fetches the resource metadata through the connection."""

    def info(self, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Returns the attached metadata, loading it if none is attached."""
        if self._info is None:
            return self.reload(options)
        return self._info

    def reload(
        self, options: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Fetches fresh metadata from the API and attaches it."""
        logger.debug("Reloading %s", self.qualified_name())
        self._info = self._fetch(
            {"name": self.qualified_name(), **(options or {})}
        )
        return self._info

    def exists(self, options: Optional[Dict[str, Any]] = None) -> bool:
        """Returns False if the API reports the resource as not found."""
        try:
            self._fetch({"name": self.qualified_name(), **(options or {})})
        except NotFound:
            return False
        return True

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name='{self.qualified_name()}')>"
