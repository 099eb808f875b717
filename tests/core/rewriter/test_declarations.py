"""
Tests for variable declaration annotation.

Verifies that:
1.  Un-annotated declarators get the inferred annotation.
2.  Existing annotations are never replaced.
3.  Iteration variables in for-in / for-of headers stay bare.
"""

import pytest

from ts_converter.core.nodes import make_leaf, make_node
from ts_converter.core.rewriter import DeclarationAnnotator, TransformContext


@pytest.mark.parametrize(
  "code, expected",
  [
    ("const x = 5;", "const x: number = 5;"),
    ("let s = 'a';", "let s: string = 'a';"),
    ("var ok = true;", "var ok: boolean = true;"),
    ("const xs = [];", "const xs: any[] = [];"),
    ("const o = {};", "const o: Record<string, any> = {};"),
    ("let later;", "let later: any;"),
    ("const y = compute();", "const y: any = compute();"),
    ("let a = 1, b = 'b', c;", "let a: number = 1, b: string = 'b', c: any;"),
  ],
)
def test_declarations(convert, code: str, expected: str) -> None:
  assert convert(code) == expected


def test_destructuring_declaration(convert) -> None:
  assert convert("const {a, b} = obj;") == "const {a, b}: any = obj;"


def test_existing_annotation_is_kept(convert) -> None:
  code = "let n: string = 5;"
  assert convert(code) == code


def test_conversion_is_idempotent(convert) -> None:
  once = convert("let count = 0;\nconst name = 'x';\n")
  assert convert(once) == once


def test_classic_for_initializer_is_annotated(convert) -> None:
  assert convert("for (let i = 0; i < n; i++) {}") == "for (let i: number = 0; i < n; i++) {}"


@pytest.mark.parametrize(
  "code",
  [
    "for (const key in obj) {}",
    "for (let item of items) {}",
    "for (var v of [1, 2]) {}",
  ],
)
def test_iteration_headers_stay_bare(convert, code: str) -> None:
  assert convert(code) == code


def test_declarations_inside_loop_body_are_annotated(convert) -> None:
  code = "for (const k in o) { let v = 1; }"
  assert convert(code) == "for (const k in o) { let v: number = 1; }"


def test_formatting_is_preserved(convert) -> None:
  code = "// counter\nlet   total   =   0 ;  // running\n"
  assert convert(code) == "// counter\nlet   total: number   =   0 ;  // running\n"


def test_handler_logs_mutation() -> None:
  declarator = make_node(
    "variable_declarator",
    [
      make_leaf("x", kind="identifier", field_name="name"),
      make_leaf("=", prefix=" "),
      make_leaf("5", prefix=" ", kind="number", field_name="value"),
    ],
  )
  context = TransformContext()
  DeclarationAnnotator().handle(declarator, context)

  assert declarator.to_text() == "x: number = 5"
  events = context.tracer.export()
  assert events[-1]["metadata"] == {"before": "x = 5", "after": "x: number = 5"}
