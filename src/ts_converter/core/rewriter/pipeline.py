"""
Single-pass dispatch over a syntax tree.

This module provides the ``HandlerTable``, which maps node kinds to the
``NodeHandler`` instances interested in them and drives one depth-first,
pre-order walk of a tree, invoking the handlers at each node.
"""

from typing import Dict, FrozenSet, List

from ts_converter.core.nodes import SyntaxNode
from ts_converter.core.rewriter.context import TransformContext
from ts_converter.core.rewriter.interface import NodeHandler


class HandlerTable:
  """
  Capability table from node kind to handlers.

  Handlers registered for the same kind run in registration order. Node kinds
  without a handler, and all leaf tokens, pass through untouched.
  """

  def __init__(self, handlers: List[NodeHandler]) -> None:
    """
    Initializes the table.

    Args:
        handlers: Handlers to register.
    """
    self.handlers = list(handlers)
    self._table: Dict[str, List[NodeHandler]] = {}
    for handler in self.handlers:
      for kind in handler.node_kinds:
        self._table.setdefault(kind, []).append(handler)

  @property
  def handled_kinds(self) -> FrozenSet[str]:
    return frozenset(self._table)

  def handlers_for(self, kind: str) -> List[NodeHandler]:
    return list(self._table.get(kind, []))

  def walk(self, tree: SyntaxNode, context: TransformContext) -> SyntaxNode:
    """
    Visits every node of ``tree`` exactly once.

    Children are read after the node's handlers ran, so nodes a handler inserts
    below the current node are visited and nodes it detaches are not.

    Args:
        tree: Root of the tree. Mutated in place.
        context: Shared per-run state.

    Returns:
        SyntaxNode: The same root.
    """
    stack = [tree]
    while stack:
      node = stack.pop()
      if node.is_leaf:
        continue
      for handler in self._table.get(node.kind, ()):
        handler.handle(node, context)
      stack.extend(reversed(node.children))
    return tree
