#  Copyright 2025 Google LLC
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""Python client for Cloud Spanner instances and sessions."""
import logging
from typing import Final

from google.cloud.spannerclient.client import SpannerClient
from google.cloud.spannerclient.configuration import Configuration
from google.cloud.spannerclient.errors import (
    InvalidResourceNameError,
    ObjectClosedError,
    SpannerClientError,
    SpannerError,
)
from google.cloud.spannerclient.instance import Instance
from google.cloud.spannerclient.session import Session
from google.cloud.spannerclient.session_client import SessionClient

__version__: Final[str] = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__: list[str] = [
    "Configuration",
    "Instance",
    "InvalidResourceNameError",
    "ObjectClosedError",
    "Session",
    "SessionClient",
    "SpannerClient",
    "SpannerClientError",
    "SpannerError",
]
