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
"""Container exceptions: invalid definitions, unbound scopes and registry lookups."""

from __future__ import annotations

from wirebox.kernel.exceptions import InfrastructureException


def _type_name(bean_type: object) -> str:
    return getattr(bean_type, "__qualname__", repr(bean_type))


class BeanDefinitionException(InfrastructureException):
    """Base error raised for a specific bean definition."""

    def __init__(self, message: str, *, bean_name: str | None, code: str) -> None:
        self.bean_name = bean_name
        super().__init__(message=message, code=code, context={"bean_name": bean_name})


class InvalidBeanDefinitionError(BeanDefinitionException):
    """A bean definition was constructed with a missing name or type."""

    def __init__(self, *, bean_name: str | None, reason: str) -> None:
        self.reason = reason
        label = repr(bean_name) if bean_name else "<unnamed>"
        super().__init__(
            f"Invalid bean definition {label}: {reason}",
            bean_name=bean_name,
            code="BEAN_DEFINITION_INVALID",
        )


class BeanPopulationInProgressError(BeanDefinitionException):
    """Cache population re-entered itself for the same definition on one thread."""

    def __init__(self, *, bean_name: str) -> None:
        lines = [f"BeanPopulationInProgressError: Bean '{bean_name}' is already being populated"]
        lines.append("")
        lines.append("  The introspection of this bean asked for its own cache to be populated")

        super().__init__("\n".join(lines), bean_name=bean_name, code="BEAN_POPULATION_IN_PROGRESS")


class ScopeNotBoundError(BeanDefinitionException):
    """Scope delegation was attempted on a definition without a usable scope.

    ``released`` is ``True`` when a scope was bound but its owner has
    already dropped it.
    """

    def __init__(self, *, bean_name: str, operation: str, released: bool = False) -> None:
        self.operation = operation
        self.released = released
        if released:
            headline = f"Scope of bean '{bean_name}' was released by its owner"
        else:
            headline = f"Bean '{bean_name}' is not bound to a scope"

        lines = [f"ScopeNotBoundError: {headline}", ""]
        lines.append(f"  Operation: {operation}")
        lines.append("")
        lines.append("  Check BeanDefinition.scope_kind before delegating to the scope")

        super().__init__("\n".join(lines), bean_name=bean_name, code="BEAN_SCOPE_NOT_BOUND")


class NoSuchBeanDefinitionError(BeanDefinitionException):
    """No definition is registered under the requested name."""

    def __init__(self, *, bean_name: str, suggestions: list[str] | None = None) -> None:
        self.suggestions = suggestions or []
        lines = [f"NoSuchBeanDefinitionError: No bean definition named '{bean_name}' is registered"]
        if self.suggestions:
            lines.append("")
            lines.append(f"  Similar registered names: {', '.join(self.suggestions)}")

        super().__init__("\n".join(lines), bean_name=bean_name, code="BEAN_DEFINITION_NOT_FOUND")


class DuplicateBeanNameError(BeanDefinitionException):
    """A definition with the same name is already registered."""

    def __init__(self, *, bean_name: str, existing_type: type, new_type: type) -> None:
        self.existing_type = existing_type
        self.new_type = new_type
        lines = [f"DuplicateBeanNameError: Bean name '{bean_name}' is already registered"]
        lines.append("")
        lines.append(f"  Existing: {_type_name(existing_type)}")
        lines.append(f"  New:      {_type_name(new_type)}")
        lines.append("")
        lines.append("  Fix: Register one of them under an explicit name, or disable")
        lines.append("  wirebox.container.detect_duplicated_bean_names to allow replacement")

        super().__init__("\n".join(lines), bean_name=bean_name, code="BEAN_NAME_DUPLICATED")
