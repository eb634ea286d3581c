"""Tests for build settings: env-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from runtime_overrides.config import BuildSettings


class TestBuildSettings:
    def test_defaults(self):
        config = BuildSettings(_env_file=None)
        assert config.build_dir == Path("build")
        assert config.output_dir == Path("overridden-runtimes")
        assert config.default_target == "main"
        assert config.features == ["evm-tracing"]
        assert config.log_level == "INFO"

    def test_default_executables(self):
        config = BuildSettings(_env_file=None)
        assert config.git_executable == "git"
        assert config.cargo_executable == "cargo"
        assert config.subwasm_executable == "subwasm"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RUNTIME_OVERRIDES_OUTPUT_DIR", "/tmp/overrides")
        monkeypatch.setenv("RUNTIME_OVERRIDES_DEFAULT_TARGET", "develop")
        config = BuildSettings(_env_file=None)
        assert config.output_dir == Path("/tmp/overrides")
        assert config.default_target == "develop"

    def test_features_from_env_json(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RUNTIME_OVERRIDES_FEATURES", '["evm-tracing", "try-runtime"]')
        config = BuildSettings(_env_file=None)
        assert config.features == ["evm-tracing", "try-runtime"]
