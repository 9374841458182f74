# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Scope exceptions."""

from __future__ import annotations

from wirebox.kernel.exceptions import InfrastructureException


class NoActiveRequestContextError(InfrastructureException):
    """A request-scoped bean was accessed outside of a request context."""

    def __init__(self, *, bean_name: str) -> None:
        self.bean_name = bean_name
        super().__init__(
            message=(
                f"No active request context for REQUEST-scoped bean '{bean_name}'. "
                "Call RequestContext.init() at the start of the request."
            ),
            code="SCOPE_NO_REQUEST_CONTEXT",
            context={"bean_name": bean_name},
        )
