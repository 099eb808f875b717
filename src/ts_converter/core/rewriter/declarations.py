"""
Variable Declaration Annotation.

Attaches an inferred annotation to every ``variable_declarator`` that lacks one
(``let x = 5`` becomes ``let x: number = 5``). Declarators that already carry an
explicit annotation keep it untouched, so converting a file twice is a no-op.

Declarators that declare the iteration variable of a ``for ... in`` / ``for ... of``
header are excluded; the grammar forbids annotations there (see
:mod:`ts_converter.core.rewriter.control_flow`).
"""

from ts_converter.core.nodes import SyntaxNode
from ts_converter.core.rewriter.context import TransformContext
from ts_converter.core.rewriter.interface import NodeHandler
from ts_converter.core.rewriter.types import infer_annotation, make_type_annotation

LOOP_HEADER_KINDS = frozenset({"for_in_statement"})


def is_loop_header_declarator(node: SyntaxNode) -> bool:
  """
  Checks whether a declarator belongs to a for-in / for-of header.

  Args:
      node: A ``variable_declarator``.

  Returns:
      bool: True if the enclosing declaration sits in an iteration header.
  """
  declaration = node.parent
  if declaration is None or declaration.parent is None:
    return False
  return declaration.parent.kind in LOOP_HEADER_KINDS and declaration.field_name != "body"


class DeclarationAnnotator(NodeHandler):
  """
  Handler for ``variable_declarator`` nodes.
  """

  node_kinds = frozenset({"variable_declarator"})

  def handle(self, node: SyntaxNode, context: TransformContext) -> None:
    name = node.child("name")
    if name is None:
      return

    if node.child("type") is not None:
      context.tracer.record_decision(name.source_text(), "kept", "explicit annotation")
      return

    if is_loop_header_declarator(node):
      context.tracer.record_decision(name.source_text(), "skipped", "loop header")
      return

    before = node.source_text()
    index = node.index_of(name) + 1
    # `let x!: T` keeps the definite assignment marker in front of the annotation
    if index < len(node.children) and node.children[index].kind == "!":
      index += 1

    annotation = infer_annotation(node.child("value"))
    node.insert_child(index, make_type_annotation(annotation))
    context.tracer.record_edit(node.kind, before, node.source_text())
