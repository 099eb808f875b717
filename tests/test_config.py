"""
Tests for configuration loading.

Verifies precedence: defaults < pyproject.toml ``[tool.ts_converter]`` < CLI.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ts_converter.config import DEFAULT_OUT_ROOT, DEFAULT_SKIP_DIRS, ConverterConfig


def _write_toml(directory: Path, body: str) -> None:
  (directory / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults(tmp_path: Path) -> None:
  config = ConverterConfig.load(search_path=tmp_path)
  assert config.out_root == DEFAULT_OUT_ROOT
  assert config.skip_dirs == list(DEFAULT_SKIP_DIRS)
  assert config.trace is False
  assert config.effective_skip_dirs == set(DEFAULT_SKIP_DIRS) | {"tsConverter"}


def test_toml_settings(tmp_path: Path) -> None:
  _write_toml(
    tmp_path,
    '[tool.ts_converter]\nout_root = "typed"\nskip_dirs = ["vendor"]\nsource_extensions = ["JS"]\ntrace = true\n',
  )
  nested = tmp_path / "src" / "app"
  nested.mkdir(parents=True)

  config = ConverterConfig.load(search_path=nested)
  assert config.out_root == "typed"
  assert config.skip_dirs == ["vendor"]
  assert config.source_extensions == [".js"]
  assert config.trace is True
  assert config.accepts(Path("x.js"))
  assert not config.accepts(Path("x.jsx"))


def test_cli_overrides_toml(tmp_path: Path) -> None:
  _write_toml(tmp_path, '[tool.ts_converter]\nout_root = "typed"\ntrace = true\n')
  config = ConverterConfig.load(out_root="cli_out", extra_skip_dirs=["build", "public"], trace=False, search_path=tmp_path)
  assert config.out_root == "cli_out"
  assert config.trace is False
  assert config.skip_dirs == list(DEFAULT_SKIP_DIRS) + ["build"]


def test_invalid_toml_is_ignored(tmp_path: Path) -> None:
  _write_toml(tmp_path, "[tool.ts_converter\n")
  assert ConverterConfig.load(search_path=tmp_path).out_root == DEFAULT_OUT_ROOT


@pytest.mark.parametrize("value", ["", "a/b", "..", "a\\b"])
def test_out_root_must_be_plain_name(value: str) -> None:
  with pytest.raises(ValidationError):
    ConverterConfig(out_root=value)


def test_accepts_is_case_insensitive() -> None:
  assert ConverterConfig().accepts(Path("Component.JSX"))
