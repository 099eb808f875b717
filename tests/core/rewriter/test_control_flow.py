"""
Tests for iteration header sanitization.
"""

from ts_converter.core.nodes import make_leaf, make_node
from ts_converter.core.rewriter import LoopHeaderSanitizer, TransformContext
from ts_converter.core.rewriter.types import make_type_annotation
from ts_converter.enums import AnnotationKind


def _for_of(with_kind: bool):
  # for (const x: any of xs) {}
  children = [make_leaf("for"), make_leaf("(", prefix=" ")]
  if with_kind:
    children.append(make_leaf("const", field_name="kind"))
  children.extend(
    [
      make_leaf("x", prefix=" " if with_kind else "", kind="identifier", field_name="left"),
      make_type_annotation(AnnotationKind.UNKNOWN),
      make_leaf("of", prefix=" ", field_name="operator"),
      make_leaf("xs", prefix=" ", kind="identifier", field_name="right"),
      make_leaf(")"),
      make_node("statement_block", [make_leaf("{", prefix=" "), make_leaf("}")], field_name="body"),
    ]
  )
  return make_node("for_in_statement", children)


def test_annotation_removed_from_declaring_header() -> None:
  node = _for_of(with_kind=True)
  context = TransformContext()
  LoopHeaderSanitizer().handle(node, context)
  assert node.to_text() == "for (const x of xs) {}"
  assert context.tracer.export()[-1]["metadata"]["after"] == "for (const x of xs) {}"


def test_non_declaring_header_untouched() -> None:
  node = _for_of(with_kind=False)
  context = TransformContext()
  LoopHeaderSanitizer().handle(node, context)
  assert node.to_text() == "for (x: any of xs) {}"
  assert context.tracer.export() == []


def test_loop_body_untouched(convert) -> None:
  code = "for (const item of items) {\n  const doubled = item * 2;\n}\n"
  expected = "for (const item of items) {\n  const doubled: any = item * 2;\n}\n"
  assert convert(code) == expected


def test_destructuring_iteration_variable(convert) -> None:
  code = "for (const [k, v] of Object.entries(o)) {}"
  assert convert(code) == code
