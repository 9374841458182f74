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
"""Wirebox Container: bean definitions and their injection-point caches."""

from wirebox.container.definition import BeanDefinition
from wirebox.container.exceptions import (
    BeanDefinitionException,
    BeanPopulationInProgressError,
    DuplicateBeanNameError,
    InvalidBeanDefinitionError,
    NoSuchBeanDefinitionError,
    ScopeNotBoundError,
)
from wirebox.container.injection_points import (
    BeanReference,
    CtorInjectionPoint,
    InitMethodPoint,
    MethodInjectionPoint,
    PropertyInjectionPoint,
    SetInjectionPoint,
)
from wirebox.container.properties import ContainerProperties
from wirebox.container.registry import BeanDefinitionRegistry
from wirebox.container.types import InitMethodInvocationStrategy, WiringMode

__all__ = [
    "BeanDefinition",
    "BeanDefinitionException",
    "BeanDefinitionRegistry",
    "BeanPopulationInProgressError",
    "BeanReference",
    "ContainerProperties",
    "CtorInjectionPoint",
    "DuplicateBeanNameError",
    "InitMethodInvocationStrategy",
    "InitMethodPoint",
    "InvalidBeanDefinitionError",
    "MethodInjectionPoint",
    "NoSuchBeanDefinitionError",
    "PropertyInjectionPoint",
    "ScopeNotBoundError",
    "SetInjectionPoint",
    "WiringMode",
]
