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
"""Scope protocol: the storage contract bean definitions delegate to."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Scope(Protocol):
    """Storage strategy deciding how long a bean instance lives and where.

    Instances are keyed by bean name. ``lookup`` returns ``None`` when
    nothing is stored under the name. Implementations own their locking.
    """

    def lookup(self, name: str) -> Any | None: ...

    def register(self, name: str, instance: Any) -> None: ...

    def remove(self, name: str) -> None: ...
