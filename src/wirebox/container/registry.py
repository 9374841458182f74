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
"""Bean definition registry: the registration step of the container.

Creates :class:`BeanDefinition` objects, binds them to scopes owned by a
:class:`ScopeRegistry` and keeps them by name.
"""

from __future__ import annotations

import difflib
import threading
from collections.abc import Callable, Iterator

import structlog

from wirebox.container.definition import BeanDefinition
from wirebox.container.exceptions import DuplicateBeanNameError, NoSuchBeanDefinitionError
from wirebox.container.properties import ContainerProperties
from wirebox.container.types import WiringMode
from wirebox.core.config import Config
from wirebox.scope.adapters.memory import SingletonScope
from wirebox.scope.registry import ScopeRegistry

logger = structlog.get_logger("wirebox.container.registry")


class BeanDefinitionRegistry:
    """Name-keyed store of bean definitions.

    Registration and removal are thread-safe. Populating a definition's
    cache goes through :meth:`populate`, which runs the introspection once
    per definition.
    """

    def __init__(
        self,
        properties: ContainerProperties | None = None,
        scopes: ScopeRegistry | None = None,
    ) -> None:
        self._properties = properties or ContainerProperties()
        self._scopes = scopes or ScopeRegistry()
        self._definitions: dict[str, BeanDefinition] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: Config, scopes: ScopeRegistry | None = None) -> BeanDefinitionRegistry:
        """Build a registry from the ``wirebox.container`` config section."""
        return cls(properties=config.bind(ContainerProperties), scopes=scopes)

    @property
    def properties(self) -> ContainerProperties:
        return self._properties

    @property
    def scopes(self) -> ScopeRegistry:
        return self._scopes

    def resolve_bean_name(self, bean_type: type) -> str:
        """Default bean name: ``UserService`` -> ``userService``.

        With ``use_full_type_names`` the module-qualified name is used as is.
        """
        if self._properties.use_full_type_names:
            return f"{bean_type.__module__}.{bean_type.__qualname__}"
        simple = bean_type.__name__
        return simple[:1].lower() + simple[1:]

    def register(
        self,
        bean_type: type,
        *,
        name: str | None = None,
        scope_type: type | None = SingletonScope,
        wiring_mode: WiringMode | None = None,
    ) -> BeanDefinition:
        """Create and store a definition for *bean_type*.

        Args:
            bean_type: Concrete bean class.
            name: Bean name; derived from the type when omitted.
            scope_type: Scope class to bind, or ``None`` for a bean that is
                never stored.
            wiring_mode: Wiring policy; the configured default when omitted.

        Raises:
            DuplicateBeanNameError: If the name is taken and duplicate
                detection is enabled.
        """
        bean_name = name or self.resolve_bean_name(bean_type)
        mode = wiring_mode or self._properties.default_wiring_mode
        scope = self._scopes.resolve(scope_type) if scope_type is not None else None

        with self._lock:
            existing = self._definitions.get(bean_name)
            if existing is not None:
                if self._properties.detect_duplicated_bean_names:
                    raise DuplicateBeanNameError(
                        bean_name=bean_name,
                        existing_type=existing.bean_type,
                        new_type=bean_type,
                    )
                logger.debug("bean_definition_replaced", bean=bean_name)

            definition = BeanDefinition(bean_name, bean_type, scope, mode)
            self._definitions[bean_name] = definition

        logger.debug(
            "bean_definition_registered",
            bean=bean_name,
            type=bean_type.__qualname__,
            scope=scope_type.__qualname__ if scope_type is not None else None,
            wiring=mode.value,
        )
        return definition

    def lookup(self, name: str) -> BeanDefinition | None:
        with self._lock:
            return self._definitions.get(name)

    def get(self, name: str) -> BeanDefinition:
        """Return the definition named *name*.

        Raises:
            NoSuchBeanDefinitionError: With similar names as suggestions.
        """
        with self._lock:
            definition = self._definitions.get(name)
            if definition is None:
                raise NoSuchBeanDefinitionError(
                    bean_name=name,
                    suggestions=difflib.get_close_matches(name, list(self._definitions), n=5, cutoff=0.6),
                )
            return definition

    def remove(self, name: str) -> BeanDefinition | None:
        """Unregister *name*. Instances already stored in its scope are kept."""
        with self._lock:
            definition = self._definitions.pop(name, None)
        if definition is not None:
            logger.debug("bean_definition_removed", bean=name)
        return definition

    def populate(self, name: str, introspect: Callable[[BeanDefinition], None]) -> BeanDefinition:
        """Populate the cache of *name* once and return the definition."""
        definition = self.get(name)
        definition.populate(introspect)
        return definition

    def names(self) -> list[str]:
        with self._lock:
            return list(self._definitions)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._definitions

    def __len__(self) -> int:
        with self._lock:
            return len(self._definitions)

    def __iter__(self) -> Iterator[BeanDefinition]:
        with self._lock:
            return iter(list(self._definitions.values()))

    def shutdown(self) -> None:
        """Drop every definition and release the owned scopes."""
        with self._lock:
            count = len(self._definitions)
            self._definitions.clear()
        self._scopes.shutdown()
        logger.debug("bean_registry_shutdown", definitions=count)
