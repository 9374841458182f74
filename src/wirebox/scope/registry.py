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
"""Scope registry: owns the scope instances bean definitions point at.

Bean definitions keep only a weak link to their scope. The registry holds
the strong reference, so dropping a scope here ends its lifetime.
"""

from __future__ import annotations

import threading
from typing import TypeVar

import structlog

from wirebox.scope.ports.outbound import Scope

S = TypeVar("S", bound=Scope)

logger = structlog.get_logger("wirebox.scope.registry")


class ScopeRegistry:
    """One scope instance per scope class."""

    def __init__(self) -> None:
        self._scopes: dict[type, Scope] = {}
        self._lock = threading.Lock()

    def resolve(self, scope_type: type[S]) -> S:
        """Return the owned instance of *scope_type*, creating it on first use."""
        with self._lock:
            scope = self._scopes.get(scope_type)
            if scope is None:
                scope = scope_type()
                self._scopes[scope_type] = scope
                logger.debug("scope_created", scope=scope_type.__qualname__)
            return scope  # type: ignore[return-value]

    def register(self, scope: Scope) -> None:
        """Install a pre-built scope, replacing any scope of the same class."""
        if not isinstance(scope, Scope):
            raise TypeError(f"{type(scope).__qualname__} does not implement lookup/register/remove")
        with self._lock:
            self._scopes[type(scope)] = scope
        logger.debug("scope_registered", scope=type(scope).__qualname__)

    def get(self, scope_type: type[S]) -> S | None:
        with self._lock:
            return self._scopes.get(scope_type)  # type: ignore[return-value]

    def __contains__(self, scope_type: object) -> bool:
        with self._lock:
            return scope_type in self._scopes

    def shutdown(self) -> None:
        """Drop every owned scope; definitions bound to them lose their scope."""
        with self._lock:
            count = len(self._scopes)
            self._scopes.clear()
        logger.debug("scopes_released", count=count)
