"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A shared engine and a ``convert`` helper returning converted text.
- A small project tree on disk for CLI tests.
"""

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add src to path so we can import 'ts_converter' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ts_converter.core.engine import ASTEngine  # noqa: E402


@pytest.fixture(scope="session")
def engine() -> ASTEngine:
  return ASTEngine()


@pytest.fixture
def convert(engine: ASTEngine) -> Callable[[str], str]:
  """Runs the engine and returns the output text, failing the test on parse errors."""

  def _convert(code: str) -> str:
    result = engine.run(code)
    assert result.success, result.errors
    return result.code

  return _convert


@pytest.fixture
def project(tmp_path: Path) -> Path:
  """
  Creates::

      app/
        index.js
        view.jsx
        lib/util.js
        node_modules/dep/index.js
        public/static.js
        notes.txt
  """
  root = tmp_path / "app"
  (root / "lib").mkdir(parents=True)
  (root / "node_modules" / "dep").mkdir(parents=True)
  (root / "public").mkdir()

  (root / "index.js").write_text('import { helper } from "./lib/util.js";\nconst count = 3;\n', encoding="utf-8")
  (root / "view.jsx").write_text("const View = () => <div>hi</div>;\n", encoding="utf-8")
  (root / "lib" / "util.js").write_text("export function helper(a) { return a; }\n", encoding="utf-8")
  (root / "node_modules" / "dep" / "index.js").write_text("module.exports = 1;\n", encoding="utf-8")
  (root / "public" / "static.js").write_text("var x = 1;\n", encoding="utf-8")
  (root / "notes.txt").write_text("not code\n", encoding="utf-8")
  return root
