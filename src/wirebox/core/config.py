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
"""Hierarchical configuration: YAML/TOML files, env overrides, property binding."""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast, get_type_hints

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

_CONFIG_PROPERTIES_ATTR = "__wirebox_config_prefix__"

_ENV_PREFIX = "WIREBOX_"

_MAX_PLACEHOLDER_DEPTH = 10


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a class as bindable to a configuration prefix.

    Works with dataclasses and Pydantic ``BaseModel`` subclasses. Pydantic
    models are bound with ``model_validate()`` so bad values fail fast.

    Usage::

        @config_properties(prefix="wirebox.container")
        class ContainerProperties(BaseModel):
            detect_duplicated_bean_names: bool = True
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


class Config:
    """Dot-notation configuration with environment variable overrides.

    Priority (highest wins):
    1. Environment variables (``WIREBOX_SECTION_KEY`` format)
    2. Values from the data dict / loaded files
    3. Defaults of the bound properties class
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """Config sources that were merged, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        active_profiles: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Load configuration from a YAML or TOML file.

        Merge order (later wins): built-in defaults, *path*, then one
        ``<stem>-<profile><suffix>`` overlay per active profile that exists
        next to *path*. A missing *path* is not an error.
        """
        path = Path(path)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls._load_defaults()
            sources.append("wirebox-defaults.yaml (built-in defaults)")

        if path.is_file():
            data = cls._deep_merge(data, cls._load_config_data(path))
            sources.append(str(path))

            for profile in active_profiles or []:
                overlay = path.with_name(f"{path.stem}-{profile}{path.suffix}")
                if overlay.is_file():
                    data = cls._deep_merge(data, cls._load_config_data(overlay))
                    sources.append(f"{overlay} (profile: {profile})")

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @classmethod
    def defaults(cls) -> Config:
        """Configuration holding only the built-in defaults."""
        instance = cls(cls._load_defaults())
        instance._loaded_sources = ["wirebox-defaults.yaml (built-in defaults)"]
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _load_defaults() -> dict[str, Any]:
        """Load built-in defaults shipped in ``wirebox.resources``."""
        defaults_file = importlib.resources.files("wirebox.resources").joinpath("wirebox-defaults.yaml")
        return yaml.safe_load(defaults_file.read_text()) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge *override* into *base*; override values win."""
        merged = dict(base)
        for key, value in override.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _walk(self, key: str) -> Any:
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(part)
            if current is None:
                return None
        return current

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first.

        ``wirebox.container.use_full_type_names`` is overridden by
        ``WIREBOX_CONTAINER_USE_FULL_TYPE_NAMES``. String values may carry
        ``${ENV_VAR}``, ``${config.key}`` or ``${key:default}`` placeholders.
        """
        env_base = key.removeprefix("wirebox.")
        env_key = _ENV_PREFIX + env_base.upper().replace(".", "_").replace("-", "_")
        env_val = os.environ.get(env_key)
        if env_val is not None:
            return env_val

        value = self._walk(key)
        if value is None:
            return default
        if isinstance(value, str) and "${" in value:
            return self._resolve_placeholders(value)
        return value

    def _resolve_placeholders(self, value: str, _depth: int = 0) -> str:
        if _depth > _MAX_PLACEHOLDER_DEPTH:
            raise ValueError(f"Placeholder nesting too deep in '{value}'; check for circular references")

        def _replace(match: re.Match[str]) -> str:
            inner = match.group(1)
            ref_key, sep, default_val = inner.partition(":")

            env_val = os.environ.get(ref_key)
            if env_val is not None:
                return env_val

            referenced = self._walk(ref_key)
            if referenced is not None:
                resolved = str(referenced)
                if "${" in resolved:
                    resolved = self._resolve_placeholders(resolved, _depth + 1)
                return resolved

            if sep:
                return cast(str, default_val)

            raise ValueError(f"Cannot resolve placeholder '${{{inner}}}': not found in environment or config")

        return _PLACEHOLDER_RE.sub(_replace, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get the dict stored under *prefix*, or an empty dict."""
        section = self._walk(prefix)
        return section if isinstance(section, dict) else {}

    def _section_with_overrides(self, prefix: str, names: list[str]) -> dict[str, Any]:
        section = dict(self.get_section(prefix))
        for name in names:
            value = self.get(f"{prefix}.{name}")
            if value is not None:
                section[name] = value
        return section

    def bind(self, config_cls: type[T]) -> T:
        """Bind configuration to a ``@config_properties`` dataclass or Pydantic model.

        Field values honour environment overrides and placeholders.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        if isinstance(config_cls, type) and issubclass(config_cls, BaseModel):
            section = self._section_with_overrides(prefix, list(config_cls.model_fields))
            try:
                return cast(T, config_cls.model_validate(section))
            except ValidationError as exc:
                raise ValueError(
                    f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}"
                ) from exc

        fields = dataclasses.fields(config_cls)  # type: ignore[arg-type]
        section = self._section_with_overrides(prefix, [f.name for f in fields])
        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in fields:
            if field.name not in section:
                continue
            value = section[field.name]
            expected_type = hints.get(field.name)
            if isinstance(value, str):
                if expected_type is bool:
                    value = value.lower() in ("true", "1", "yes")
                elif expected_type in (int, float):
                    value = expected_type(value)
            kwargs[field.name] = value

        return config_cls(**kwargs)
