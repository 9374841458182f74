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
"""Injection point descriptors: where and from what a dependency is supplied.

All points are frozen dataclasses. Bean definitions hold them as opaque
data; building and interpreting them is the wiring engine's job.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from wirebox.container.types import InitMethodInvocationStrategy


@dataclass(frozen=True)
class BeanReference:
    """Reference to a dependency, by bean name or by bean type."""

    name: str | None = None
    bean_type: type | None = None

    def __post_init__(self) -> None:
        if not self.name and self.bean_type is None:
            raise ValueError("BeanReference needs a bean name or a bean type")

    @classmethod
    def by_name(cls, name: str) -> BeanReference:
        return cls(name=name)

    @classmethod
    def by_type(cls, bean_type: type) -> BeanReference:
        return cls(bean_type=bean_type)

    def __str__(self) -> str:
        if self.name:
            return self.name
        return getattr(self.bean_type, "__qualname__", repr(self.bean_type))


def _references(refs: Iterable[BeanReference]) -> tuple[BeanReference, ...]:
    return tuple(refs)


@dataclass(frozen=True)
class CtorInjectionPoint:
    """The constructor selected for a bean and the references for its parameters.

    ``references`` is ordered to match the constructor parameters.
    """

    constructor: Callable[..., Any]
    references: tuple[BeanReference, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "references", _references(self.references))

    @classmethod
    def empty(cls, constructor: Callable[..., Any]) -> CtorInjectionPoint:
        """Point for a constructor that takes no dependencies."""
        return cls(constructor=constructor)


@dataclass(frozen=True)
class PropertyInjectionPoint:
    """Attribute assigned directly with the first resolvable reference.

    Empty ``references`` means the wiring engine resolves the dependency by
    the attribute name, falling back to its annotated type.
    """

    attribute: str
    references: tuple[BeanReference, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "references", _references(self.references))


@dataclass(frozen=True)
class SetInjectionPoint:
    """Attribute receiving a collection of every bean matching the references.

    Empty ``references`` means every bean assignable to the attribute's
    annotated element type.
    """

    attribute: str
    references: tuple[BeanReference, ...] = ()
    collection_type: type = list

    def __post_init__(self) -> None:
        object.__setattr__(self, "references", _references(self.references))


@dataclass(frozen=True)
class MethodInjectionPoint:
    """Method invoked with one resolved bean per reference, in order.

    Empty ``references`` means the wiring engine resolves each parameter by
    its name and annotated type.
    """

    method: Callable[..., Any]
    references: tuple[BeanReference, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "references", _references(self.references))


@dataclass(frozen=True)
class InitMethodPoint:
    """Method invoked after construction and wiring.

    Attributes:
        method: The init method.
        order: Sequencing index among the bean's init methods; lower runs first.
        strategy: Wiring stage after which the method runs.
    """

    method: Callable[..., Any]
    order: int = 0
    strategy: InitMethodInvocationStrategy = field(default=InitMethodInvocationStrategy.POST_INITIALIZE)
