"""Scope adapters."""

from wirebox.scope.adapters.memory import PrototypeScope, RequestScope, SingletonScope

__all__ = ["PrototypeScope", "RequestScope", "SingletonScope"]
