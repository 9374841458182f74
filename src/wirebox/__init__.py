"""Wirebox: bean definitions, injection-point caches and pluggable scopes."""

from wirebox.container import BeanDefinition, BeanDefinitionRegistry, WiringMode
from wirebox.core.config import Config
from wirebox.scope import Scope, ScopeRegistry

__version__ = "0.1.0"

__all__ = [
    "BeanDefinition",
    "BeanDefinitionRegistry",
    "Config",
    "Scope",
    "ScopeRegistry",
    "WiringMode",
    "__version__",
]
