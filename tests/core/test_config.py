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
"""Tests for Config: dot access, env overrides, placeholders, files and binding."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, Field

from wirebox.core.config import Config, config_properties


@config_properties(prefix="myapp.pool")
@dataclass
class PoolProperties:
    size: int = 4
    ratio: float = 0.5
    eager: bool = False
    label: str = "default"


@config_properties(prefix="myapp.server")
class ServerProperties(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)


class Undecorated(BaseModel):
    value: str = "nope"


class TestGet:
    def test_nested_key(self):
        config = Config({"myapp": {"name": "demo"}})
        assert config.get("myapp.name") == "demo"

    def test_missing_key_returns_default(self):
        config = Config({"myapp": {"name": "demo"}})
        assert config.get("myapp.version", "1.0") == "1.0"
        assert config.get("myapp.name.deeper") is None

    def test_env_var_wins(self, monkeypatch):
        monkeypatch.setenv("WIREBOX_CONTAINER_DEFAULT_WIRING_MODE", "optional")
        config = Config({"wirebox": {"container": {"default_wiring_mode": "strict"}}})
        assert config.get("wirebox.container.default_wiring_mode") == "optional"

    def test_env_var_for_non_wirebox_key(self, monkeypatch):
        monkeypatch.setenv("WIREBOX_MYAPP_NAME", "from-env")
        assert Config({}).get("myapp.name") == "from-env"

    def test_get_section(self):
        config = Config({"a": {"b": {"c": 1}}})
        assert config.get_section("a.b") == {"c": 1}
        assert config.get_section("a.b.c") == {}
        assert config.get_section("missing") == {}

    def test_to_dict_is_copy(self):
        config = Config({"a": 1})
        data = config.to_dict()
        data["a"] = 2
        assert config.get("a") == 1


class TestPlaceholders:
    def test_env_placeholder(self, monkeypatch):
        monkeypatch.setenv("DB_HOST", "db.internal")
        config = Config({"myapp": {"url": "postgres://${DB_HOST}/app"}})
        assert config.get("myapp.url") == "postgres://db.internal/app"

    def test_config_reference(self):
        config = Config({"myapp": {"name": "demo", "title": "${myapp.name} service"}})
        assert config.get("myapp.title") == "demo service"

    def test_default_value(self, monkeypatch):
        monkeypatch.delenv("WIREBOX_TEST_UNSET", raising=False)
        config = Config({"myapp": {"mode": "${WIREBOX_TEST_UNSET:fallback}"}})
        assert config.get("myapp.mode") == "fallback"

    def test_unresolvable_raises(self, monkeypatch):
        monkeypatch.delenv("WIREBOX_TEST_UNSET", raising=False)
        config = Config({"myapp": {"mode": "${WIREBOX_TEST_UNSET}"}})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("myapp.mode")

    def test_circular_reference_raises(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="too deep"):
            config.get("a")


class TestFiles:
    def test_defaults(self):
        config = Config.defaults()
        assert config.get("wirebox.container.default_wiring_mode") == "strict"
        assert config.get("wirebox.logging.format") == "console"

    def test_yaml_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "wirebox.yaml"
        path.write_text("wirebox:\n  container:\n    use_full_type_names: true\n")
        config = Config.from_file(path)
        assert config.get("wirebox.container.use_full_type_names") is True
        assert config.get("wirebox.container.default_wiring_mode") == "strict"
        assert config.loaded_sources[-1] == str(path)

    def test_toml_file(self, tmp_path):
        path = tmp_path / "wirebox.toml"
        path.write_text('[wirebox.container]\ndefault_wiring_mode = "autowire"\n')
        config = Config.from_file(path, load_defaults=False)
        assert config.get("wirebox.container.default_wiring_mode") == "autowire"
        assert config.loaded_sources == [str(path)]

    def test_profile_overlay(self, tmp_path):
        (tmp_path / "wirebox.yaml").write_text("myapp:\n  name: base\n  region: eu\n")
        (tmp_path / "wirebox-dev.yaml").write_text("myapp:\n  name: dev\n")
        config = Config.from_file(tmp_path / "wirebox.yaml", active_profiles=["dev", "qa"], load_defaults=False)
        assert config.get("myapp.name") == "dev"
        assert config.get("myapp.region") == "eu"
        assert len(config.loaded_sources) == 2

    def test_missing_file_keeps_defaults(self, tmp_path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("wirebox.container.detect_duplicated_bean_names") is True


class TestBind:
    def test_dataclass_binding_coerces_strings(self):
        config = Config({"myapp": {"pool": {"size": "16", "ratio": "0.25", "eager": "yes"}}})
        props = config.bind(PoolProperties)
        assert props.size == 16
        assert props.ratio == 0.25
        assert props.eager is True
        assert props.label == "default"

    def test_dataclass_binding_honours_env(self, monkeypatch):
        monkeypatch.setenv("WIREBOX_MYAPP_POOL_SIZE", "32")
        props = Config({}).bind(PoolProperties)
        assert props.size == 32

    def test_pydantic_binding(self):
        props = Config({"myapp": {"server": {"port": 9000}}}).bind(ServerProperties)
        assert props.port == 9000
        assert props.host == "127.0.0.1"

    def test_pydantic_validation_failure(self):
        config = Config({"myapp": {"server": {"port": 70000}}})
        with pytest.raises(ValueError, match="Configuration validation failed for 'ServerProperties'"):
            config.bind(ServerProperties)

    def test_undecorated_class_rejected(self):
        with pytest.raises(ValueError, match="not decorated with @config_properties"):
            Config({}).bind(Undecorated)
