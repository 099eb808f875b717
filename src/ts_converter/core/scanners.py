"""
Tree Scanners.

Read-only handlers that collect facts about a tree during the conversion walk.
"""

from ts_converter.core.nodes import SyntaxNode
from ts_converter.core.rewriter.context import TransformContext
from ts_converter.core.rewriter.interface import NodeHandler

MARKUP_KINDS = frozenset({"jsx_element", "jsx_self_closing_element", "jsx_fragment"})


class MarkupDetector(NodeHandler):
  """
  Flags whether the tree contains any JSX element.

  The flag starts False for every run and, once set, stays set. The engine reads
  it after the walk to choose between the ``.ts`` and ``.tsx`` output variants.

  Attributes:
      found (bool): True once a markup element has been visited.
  """

  node_kinds = MARKUP_KINDS

  def __init__(self) -> None:
    self.found = False

  def handle(self, node: SyntaxNode, context: TransformContext) -> None:
    if not self.found:
      self.found = True
      context.tracer.record_decision(node.kind, "markup", "selects the .tsx output variant")
