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
"""Built-in scope implementations."""

from __future__ import annotations

import threading
from typing import Any

from wirebox.context.request_context import RequestContext
from wirebox.scope.exceptions import NoActiveRequestContextError


class SingletonScope:
    """One instance per bean name for the lifetime of the scope.

    Map-backed and guarded by a lock so that lookups from worker threads
    see registrations made by others.
    """

    def __init__(self) -> None:
        self._instances: dict[str, Any] = {}
        self._lock = threading.Lock()

    def lookup(self, name: str) -> Any | None:
        with self._lock:
            return self._instances.get(name)

    def register(self, name: str, instance: Any) -> None:
        with self._lock:
            self._instances[name] = instance

    def remove(self, name: str) -> None:
        """Drop the instance stored under *name*; unknown names are ignored."""
        with self._lock:
            self._instances.pop(name, None)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._instances)

    def clear(self) -> None:
        with self._lock:
            self._instances.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)


class PrototypeScope:
    """Stores nothing: every lookup misses, so each request builds a new instance."""

    def lookup(self, name: str) -> Any | None:
        return None

    def register(self, name: str, instance: Any) -> None:
        pass

    def remove(self, name: str) -> None:
        pass


class RequestScope:
    """One instance per bean name per active :class:`RequestContext`."""

    _KEY_PREFIX = "__wirebox_bean_"

    def _context(self, name: str) -> RequestContext:
        ctx = RequestContext.current()
        if ctx is None:
            raise NoActiveRequestContextError(bean_name=name)
        return ctx

    def lookup(self, name: str) -> Any | None:
        return self._context(name).get(self._KEY_PREFIX + name)

    def register(self, name: str, instance: Any) -> None:
        self._context(name).set(self._KEY_PREFIX + name, instance)

    def remove(self, name: str) -> None:
        self._context(name).remove(self._KEY_PREFIX + name)
