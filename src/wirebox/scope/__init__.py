"""Wirebox Scopes: pluggable bean instance storage."""

from wirebox.scope.adapters import PrototypeScope, RequestScope, SingletonScope
from wirebox.scope.exceptions import NoActiveRequestContextError
from wirebox.scope.ports import Scope
from wirebox.scope.registry import ScopeRegistry

__all__ = [
    "NoActiveRequestContextError",
    "PrototypeScope",
    "RequestScope",
    "Scope",
    "ScopeRegistry",
    "SingletonScope",
]
