"""
Control Flow Rewriting Logic.

Handles ``for ... in`` and ``for ... of`` headers (both parse as
``for_in_statement``). TypeScript rejects a type annotation on the iteration
variable of such headers, so whenever the header declares its variable
(``var`` / ``let`` / ``const``) every annotation found in the header is removed,
whatever put it there.
"""

from typing import List

from ts_converter.core.nodes import SyntaxNode
from ts_converter.core.rewriter.context import TransformContext
from ts_converter.core.rewriter.interface import NodeHandler

DECLARATION_KINDS = frozenset({"lexical_declaration", "variable_declaration"})


class LoopHeaderSanitizer(NodeHandler):
  """
  Handler stripping annotations from declaring iteration headers.
  """

  node_kinds = frozenset({"for_in_statement"})

  def handle(self, node: SyntaxNode, context: TransformContext) -> None:
    header = self._header(node)
    declares = node.child("kind") is not None or any(child.kind in DECLARATION_KINDS for child in header)
    if not declares:
      return

    before = node.source_text()
    removed = 0
    for child in header:
      if child.kind == "type_annotation":
        node.remove_child(child)
        removed += 1
      elif child.kind in DECLARATION_KINDS:
        for declarator in child.children:
          annotation = declarator.child("type")
          if declarator.kind == "variable_declarator" and annotation is not None:
            declarator.remove_child(annotation)
            removed += 1

    if removed:
      context.tracer.record_edit(node.kind, before, node.source_text())

  @staticmethod
  def _header(node: SyntaxNode) -> List[SyntaxNode]:
    """Children between ``for`` and the loop body."""
    header = []
    for child in node.children:
      if child.field_name == "body":
        break
      header.append(child)
    return header
