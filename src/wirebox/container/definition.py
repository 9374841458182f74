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
"""Bean definition: immutable bean identity plus a lazily built injection-point cache.

A definition is created with identity only (name, type, scope, wiring
mode). The wiring engine fills the cache through the ``add_*``/``set_*``
methods, ideally inside :meth:`BeanDefinition.populate`, before the
definition is shared with threads that create instances. The definition
never stores instances: storage goes through the bound scope.
"""

from __future__ import annotations

import threading
import weakref
from collections.abc import Callable, Iterable
from typing import Any

import structlog

from wirebox.container.exceptions import (
    BeanPopulationInProgressError,
    InvalidBeanDefinitionError,
    ScopeNotBoundError,
)
from wirebox.container.injection_points import (
    CtorInjectionPoint,
    InitMethodPoint,
    MethodInjectionPoint,
    PropertyInjectionPoint,
    SetInjectionPoint,
)
from wirebox.container.types import WiringMode
from wirebox.scope.ports.outbound import Scope

logger = structlog.get_logger("wirebox.container.definition")


class BeanDefinition:
    """Definition and wiring cache of one registered bean.

    Identity fields are read-only after construction. Cache sequences start
    empty and only grow; readers get tuples, so a read is a stable snapshot.

    The scope is held through a weak reference: whoever owns the scope
    (normally a :class:`~wirebox.scope.registry.ScopeRegistry`) decides how
    long it lives. Callers passing a scope they built themselves must keep a
    strong reference to it; ``BeanDefinition("a", A, SingletonScope())``
    loses its scope immediately and scope delegation then raises
    :class:`ScopeNotBoundError`.

    Args:
        name: Unique bean name.
        bean_type: Concrete class of the bean.
        scope: Storage for instances, or ``None`` for beans that are wired
            on every request and never stored.
        wiring_mode: Policy for unresolvable references, interpreted by the
            wiring engine.

    Raises:
        InvalidBeanDefinitionError: If *name* is empty, *bean_type* is
            ``None`` or *scope* cannot be weakly referenced.
    """

    def __init__(
        self,
        name: str,
        bean_type: type,
        scope: Scope | None = None,
        wiring_mode: WiringMode = WiringMode.DEFAULT,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidBeanDefinitionError(bean_name=None, reason="bean name must be a non-empty string")
        if bean_type is None:
            raise InvalidBeanDefinitionError(bean_name=name, reason="bean type is required")

        scope_ref: weakref.ReferenceType[Scope] | None = None
        if scope is not None:
            try:
                scope_ref = weakref.ref(scope)
            except TypeError:
                raise InvalidBeanDefinitionError(
                    bean_name=name,
                    reason=f"scope {type(scope).__qualname__} does not support weak references",
                ) from None

        self._name = name
        self._bean_type = bean_type
        self._scope_ref = scope_ref
        self._scope_kind: type | None = type(scope) if scope is not None else None
        self._wiring_mode = wiring_mode

        self._populate_lock = threading.RLock()
        self._populated = False
        self._populating = False
        self._reset_cache()

    def _reset_cache(self) -> None:
        self._ctor: CtorInjectionPoint | None = None
        self._properties: list[PropertyInjectionPoint] | None = None
        self._sets: list[SetInjectionPoint] | None = None
        self._methods: list[MethodInjectionPoint] | None = None
        self._init_methods: list[InitMethodPoint] | None = None
        self._params: tuple[str, ...] = ()

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def bean_type(self) -> type:
        return self._bean_type

    @property
    def wiring_mode(self) -> WiringMode:
        return self._wiring_mode

    @property
    def scope_kind(self) -> type | None:
        """Class of the bound scope, or ``None`` for transiently wired beans."""
        return self._scope_kind

    @property
    def has_scope(self) -> bool:
        return self._scope_kind is not None

    # ------------------------------------------------------------------
    # Cache reads
    # ------------------------------------------------------------------

    @property
    def ctor_injection_point(self) -> CtorInjectionPoint | None:
        return self._ctor

    @property
    def property_injection_points(self) -> tuple[PropertyInjectionPoint, ...]:
        return tuple(self._properties or ())

    @property
    def set_injection_points(self) -> tuple[SetInjectionPoint, ...]:
        return tuple(self._sets or ())

    @property
    def method_injection_points(self) -> tuple[MethodInjectionPoint, ...]:
        return tuple(self._methods or ())

    @property
    def init_method_points(self) -> tuple[InitMethodPoint, ...]:
        return tuple(self._init_methods or ())

    @property
    def params(self) -> tuple[str, ...]:
        return self._params

    @property
    def is_populated(self) -> bool:
        return self._populated

    # ------------------------------------------------------------------
    # Cache writes (build phase only, not synchronized)
    # ------------------------------------------------------------------

    def set_ctor_injection_point(self, point: CtorInjectionPoint) -> None:
        self._ctor = point

    def add_property_injection_point(self, point: PropertyInjectionPoint) -> None:
        if self._properties is None:
            self._properties = []
        self._properties.append(point)

    def add_set_injection_point(self, point: SetInjectionPoint) -> None:
        if self._sets is None:
            self._sets = []
        self._sets.append(point)

    def add_method_injection_point(self, point: MethodInjectionPoint) -> None:
        if self._methods is None:
            self._methods = []
        self._methods.append(point)

    def add_init_method_points(self, points: Iterable[InitMethodPoint]) -> None:
        """Append *points* after the init methods already collected.

        Order is kept within both groups; sorting by ``order`` is left to
        whoever invokes them.
        """
        if self._init_methods is None:
            self._init_methods = []
        self._init_methods.extend(points)

    def set_params(self, params: Iterable[str]) -> None:
        self._params = tuple(params)

    def _snapshot_cache(self) -> tuple:
        return (
            self._ctor,
            list(self._properties) if self._properties is not None else None,
            list(self._sets) if self._sets is not None else None,
            list(self._methods) if self._methods is not None else None,
            list(self._init_methods) if self._init_methods is not None else None,
            self._params,
        )

    def _restore_cache(self, snapshot: tuple) -> None:
        (
            self._ctor,
            self._properties,
            self._sets,
            self._methods,
            self._init_methods,
            self._params,
        ) = snapshot

    def populate(self, introspect: Callable[[BeanDefinition], None]) -> bool:
        """Fill the cache by running *introspect* on this definition exactly once.

        Concurrent callers block until the first one finishes; only one of
        them runs *introspect*. If it raises, the cache is restored to what
        it held before the call, the definition stays unpopulated and the
        error propagates.

        Returns:
            ``True`` if this call populated the cache, ``False`` if it was
            already populated.

        Raises:
            BeanPopulationInProgressError: If *introspect* calls back into
                ``populate`` on this definition from the same thread.
        """
        if self._populated:
            return False
        with self._populate_lock:
            if self._populated:
                return False
            if self._populating:
                raise BeanPopulationInProgressError(bean_name=self._name)
            snapshot = self._snapshot_cache()
            self._populating = True
            try:
                introspect(self)
            except BaseException:
                self._restore_cache(snapshot)
                raise
            finally:
                self._populating = False
            self._populated = True
        logger.debug(
            "bean_definition_populated",
            bean=self._name,
            properties=len(self._properties or ()),
            sets=len(self._sets or ()),
            methods=len(self._methods or ()),
            init_methods=len(self._init_methods or ()),
        )
        return True

    # ------------------------------------------------------------------
    # Scope delegation
    # ------------------------------------------------------------------

    def _bound_scope(self, operation: str) -> Scope:
        if self._scope_ref is None:
            raise ScopeNotBoundError(bean_name=self._name, operation=operation)
        scope = self._scope_ref()
        if scope is None:
            raise ScopeNotBoundError(bean_name=self._name, operation=operation, released=True)
        return scope

    def scope_lookup(self) -> Any | None:
        """Instance stored for this bean in its scope, or ``None``."""
        return self._bound_scope("lookup").lookup(self._name)

    def scope_register(self, instance: Any) -> None:
        self._bound_scope("register").register(self._name, instance)

    def scope_remove(self) -> None:
        self._bound_scope("remove").remove(self._name)

    def __repr__(self) -> str:
        scope = self._scope_kind.__qualname__ if self._scope_kind is not None else None
        type_name = getattr(self._bean_type, "__qualname__", repr(self._bean_type))
        return (
            f"BeanDefinition(name={self._name!r}, type={type_name}, "
            f"scope={scope}, wiring={self._wiring_mode.name})"
        )
