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
"""Tests for BeanDefinition.populate: compute-once cache population."""

import threading
import time

import pytest

from wirebox.container.definition import BeanDefinition
from wirebox.container.exceptions import BeanPopulationInProgressError
from wirebox.container.injection_points import (
    BeanReference,
    CtorInjectionPoint,
    InitMethodPoint,
    PropertyInjectionPoint,
)


class Inventory:
    def reload(self) -> None:
        pass


def _introspect(definition: BeanDefinition) -> None:
    definition.add_property_injection_point(PropertyInjectionPoint("store", (BeanReference.by_name("store"),)))
    definition.add_init_method_points([InitMethodPoint(Inventory.reload)])


class TestPopulate:
    def test_first_call_populates(self):
        d = BeanDefinition("inventory", Inventory)
        assert d.populate(_introspect) is True
        assert d.is_populated is True
        assert [p.attribute for p in d.property_injection_points] == ["store"]
        assert len(d.init_method_points) == 1

    def test_second_call_is_skipped(self):
        d = BeanDefinition("inventory", Inventory)
        d.populate(_introspect)
        calls = []
        assert d.populate(calls.append) is False
        assert calls == []
        assert len(d.property_injection_points) == 1

    def test_failed_population_discards_partial_cache(self):
        d = BeanDefinition("inventory", Inventory)

        def broken(definition: BeanDefinition) -> None:
            definition.add_property_injection_point(PropertyInjectionPoint("store", (BeanReference.by_name("store"),)))
            raise LookupError("no such member")

        with pytest.raises(LookupError, match="no such member"):
            d.populate(broken)

        assert d.is_populated is False
        assert d.property_injection_points == ()

        assert d.populate(_introspect) is True
        assert len(d.property_injection_points) == 1

    def test_concurrent_callers_populate_once(self):
        d = BeanDefinition("inventory", Inventory)
        runs = []
        results = []
        barrier = threading.Barrier(8)

        def slow_introspect(definition: BeanDefinition) -> None:
            runs.append(threading.get_ident())
            time.sleep(0.05)
            _introspect(definition)

        def worker() -> None:
            barrier.wait()
            results.append(d.populate(slow_introspect))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(runs) == 1
        assert results.count(True) == 1
        assert results.count(False) == 7
        assert len(d.property_injection_points) == 1

    def test_failed_population_keeps_values_set_beforehand(self):
        d = BeanDefinition("inventory", Inventory)
        ctor = CtorInjectionPoint.empty(Inventory)
        early = PropertyInjectionPoint("cache", (BeanReference.by_name("cache"),))
        d.set_params(["inventory.size"])
        d.set_ctor_injection_point(ctor)
        d.add_property_injection_point(early)

        def broken(definition: BeanDefinition) -> None:
            definition.set_params(["inventory.other"])
            definition.add_property_injection_point(PropertyInjectionPoint("store", (BeanReference.by_name("store"),)))
            definition.add_init_method_points([InitMethodPoint(Inventory.reload)])
            raise LookupError("no such member")

        with pytest.raises(LookupError):
            d.populate(broken)

        assert d.params == ("inventory.size",)
        assert d.ctor_injection_point is ctor
        assert d.property_injection_points == (early,)
        assert d.init_method_points == ()

    def test_reentrant_populate_raises_instead_of_blocking(self):
        d = BeanDefinition("inventory", Inventory)

        def self_dependent(definition: BeanDefinition) -> None:
            _introspect(definition)
            definition.populate(lambda again: None)

        with pytest.raises(BeanPopulationInProgressError, match="already being populated") as exc_info:
            d.populate(self_dependent)

        assert exc_info.value.bean_name == "inventory"
        assert d.is_populated is False
        assert d.property_injection_points == ()
        assert d.populate(_introspect) is True
