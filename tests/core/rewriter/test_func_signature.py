"""
Tests for function signature rewriting.

Verifies that:
1.  Simple parameters and return types receive ``any``.
2.  Destructuring parameters are lowered to synthetic parameters plus binding
    statements at the top of the body.
3.  Explicit annotations, constructors and setters are respected.
"""

import pytest

from ts_converter.core.rewriter.func_signature import synthetic_names


@pytest.mark.parametrize(
  "code, expected",
  [
    ("function f(a, b) { return a; }", "function f(a: any, b: any): any { return a; }"),
    ("function f() {}", "function f(): any {}"),
    ("function f(a = 1) {}", "function f(a: any = 1): any {}"),
    ("function f(...args) {}", "function f(...args: any): any {}"),
    ("function* gen(n) { yield n; }", "function* gen(n: any): any { yield n; }"),
    ("const fn = function (a) {};", "const fn: any = function (a: any): any {};"),
    ("const g = x => x * 2;", "const g: any = (x: any): any => x * 2;"),
    ("const h = (a, b) => a + b;", "const h: any = (a: any, b: any): any => a + b;"),
    ("const k = async x => x;", "const k: any = async (x: any): any => x;"),
  ],
)
def test_simple_parameters(convert, code: str, expected: str) -> None:
  assert convert(code) == expected


def test_object_pattern_is_lowered(convert) -> None:
  code = "function f({a, b}) { return a + b; }"
  expected = "function f(params: any): any { const {a, b}: any = params; return a + b; }"
  assert convert(code) == expected


def test_array_pattern_is_lowered(convert) -> None:
  code = "function f([first]) { return first; }"
  expected = "function f(params: any): any { const [first]: any = params; return first; }"
  assert convert(code) == expected


def test_expression_arrow_gets_block_body(convert) -> None:
  code = "const h = ({a}) => a;"
  expected = "const h: any = (params: any): any => { const {a}: any = params; return a; };"
  assert convert(code) == expected


def test_multiple_patterns_keep_order(convert) -> None:
  code = "function f({a}, b, [c]) { return a + b + c; }"
  expected = (
    "function f(params: any, b: any, params1: any): any { "
    "const {a}: any = params; const [c]: any = params1; return a + b + c; }"
  )
  assert convert(code) == expected


def test_synthetic_name_avoids_existing_parameter(convert) -> None:
  code = "function f(params, {a}) { return a; }"
  expected = "function f(params: any, params1: any): any { const {a}: any = params1; return a; }"
  assert convert(code) == expected


def test_default_stays_on_synthetic_parameter(convert) -> None:
  code = "function f({a} = {}) { return a; }"
  expected = "function f(params: any = {}): any { const {a}: any = params; return a; }"
  assert convert(code) == expected


def test_annotated_pattern_is_untouched(convert) -> None:
  code = "function f({a}: {a: number}): number { return a; }"
  assert convert(code) == code


def test_existing_annotations_are_kept(convert) -> None:
  code = "function f(a: string, b) { return a; }"
  assert convert(code) == "function f(a: string, b: any): any { return a; }"


def test_empty_body_receives_binding(convert) -> None:
  assert convert("function f({a}) {}") == "function f(params: any): any { const {a}: any = params; }"


def test_multiline_body_indentation(convert) -> None:
  code = "function show({title, body}) {\n  render(title);\n  return body;\n}\n"
  expected = (
    "function show(params: any): any {\n"
    "  const {title, body}: any = params;\n"
    "  render(title);\n"
    "  return body;\n"
    "}\n"
  )
  assert convert(code) == expected


def test_class_methods(convert) -> None:
  code = (
    "class A {\n"
    "  constructor(x) { this.x = x; }\n"
    "  get value() { return this.x; }\n"
    "  set value(v) { this.x = v; }\n"
    "  run(a) { return a; }\n"
    "}\n"
  )
  expected = (
    "class A {\n"
    "  constructor(x: any) { this.x = x; }\n"
    "  get value(): any { return this.x; }\n"
    "  set value(v: any) { this.x = v; }\n"
    "  run(a: any): any { return a; }\n"
    "}\n"
  )
  assert convert(code) == expected


def test_nested_functions(convert) -> None:
  code = "function outer(a) { return function inner(b) { return a + b; }; }"
  expected = "function outer(a: any): any { return function inner(b: any): any { return a + b; }; }"
  assert convert(code) == expected


def test_callback_arguments(convert) -> None:
  code = "items.map(({id}) => id);"
  expected = "items.map((params: any): any => { const {id}: any = params; return id; });"
  assert convert(code) == expected


def test_synthetic_names_sequence() -> None:
  names = synthetic_names({"params1"})
  assert [next(names) for _ in range(3)] == ["params", "params2", "params3"]


def test_synthetic_name_avoids_body_declarations(convert) -> None:
  code = "function f({a}) { const params = 1; return a + params; }"
  expected = (
    "function f(params1: any): any { const {a}: any = params1; const params: number = 1; return a + params; }"
  )
  assert convert(code) == expected


def test_synthetic_name_avoids_body_functions_and_classes(convert) -> None:
  code = "function f([x]) { function params() {} class params1 {} return x; }"
  expected = (
    "function f(params2: any): any { const [x]: any = params2; "
    "function params(): any {} class params1 {} return x; }"
  )
  assert convert(code) == expected
