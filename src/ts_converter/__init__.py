"""
ts-converter Package.

A deterministic AST converter that rewrites JavaScript sources as TypeScript:
it infers literal-based annotations for declarations, annotates parameters and
return types with ``any``, lowers destructuring parameters, strips source
extensions from import specifiers and detects JSX to pick ``.ts`` or ``.tsx``.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import ts_converter
    print(ts_converter.convert("const n = 5;"))
    # const n: number = 5;

Advanced Usage (AST Engine)
^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from ts_converter import ASTEngine

    res = ASTEngine().run("const el = <div />;")
    if res.success:
        print(res.code, res.has_markup)
    else:
        print(f"Errors: {res.errors}")
"""

from ts_converter.config import ConverterConfig
from ts_converter.core.conversion_result import ConversionResult
from ts_converter.core.engine import ASTEngine

__version__ = "0.0.1"


def convert(code: str) -> str:
  """
  Converts a string of JavaScript code to TypeScript.

  This is a convenience wrapper around `ASTEngine`. For file or directory
  conversion use the CLI (`ts_converter.cli`).

  Args:
      code (str): The source code to convert.

  Returns:
      str: The converted source code.

  Raises:
      ValueError: If the source cannot be parsed.
  """
  result = ASTEngine().run(code)
  if not result.success:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Conversion failed:\n{error_msg}")
  return result.code


def output_suffix(code: str) -> str:
  """
  Returns the suffix (``.ts`` or ``.tsx``) a conversion of ``code`` is written with.

  Raises:
      ValueError: If the source cannot be parsed.
  """
  result = ASTEngine().run(code)
  if not result.success:
    raise ValueError("\n".join(result.errors))
  return result.output_suffix


__all__ = [
  "ASTEngine",
  "ConversionResult",
  "ConverterConfig",
  "convert",
  "output_suffix",
  "__version__",
]
