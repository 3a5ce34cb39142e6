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
"""Error types for the spannerclient package.

Failures reported by the Spanner API itself are raised as
``google.api_core.exceptions`` types and are never rewrapped here.
"""
from typing import Optional

import grpc


class SpannerError(Exception):
    """Base exception for all spannerclient errors.

    Catching this exception guarantees catching any error raised explicitly
    by this library.
    """


_STATUS_NAMES = {code.value[0]: code.name for code in grpc.StatusCode}


class SpannerClientError(SpannerError):
    """Exception raised for client-side failures around a connection call."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """Initializes the SpannerClientError.

        Args:
            message (str): The error description.
            error_code (Optional[int]): The gRPC status code
                (e.g., 3 for INVALID_ARGUMENT).
        """
        self.message = message
        self.error_code = error_code

        if error_code is None:
            super().__init__(message)
            return
        status_name = _STATUS_NAMES.get(error_code)
        label = f"{error_code} ({status_name})" if status_name else error_code
        super().__init__(f"[Err {label}] {message}")

    def __repr__(self) -> str:
        """Standard unambiguous representation for debugging."""
        return (
            f"<{self.__class__.__name__}(code={self.error_code}, "
            f"message='{self.message}')>"
        )


class InvalidResourceNameError(SpannerClientError, ValueError):
    """Raised when a string does not match the expected resource name."""

    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        super().__init__(
            f"Invalid {kind} name: '{name}'",
            grpc.StatusCode.INVALID_ARGUMENT.value[0],
        )


class ObjectClosedError(SpannerError, RuntimeError):
    """Raised when an operation is attempted on a closed object."""
