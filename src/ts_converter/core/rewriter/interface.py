"""
Interface definition for Node Handlers.

This module defines the abstract base class that every transformation pass
implements to take part in the single-traversal ``HandlerTable`` walk.
"""

from abc import ABC, abstractmethod
from typing import FrozenSet

from ts_converter.core.nodes import SyntaxNode
from ts_converter.core.rewriter.context import TransformContext


class NodeHandler(ABC):
  """
  Abstract contract for a pass that reacts to specific node kinds.

  Handlers never recurse on their own: the walk hands them each node whose
  ``kind`` is listed in ``node_kinds``. A handler may mutate the subtree rooted
  at the node it receives; anything it inserts there is visited afterwards.
  """

  node_kinds: FrozenSet[str] = frozenset()

  @abstractmethod
  def handle(self, node: SyntaxNode, context: TransformContext) -> None:
    """
    Executes the transformation logic on one node.

    Args:
        node: The node being visited.
        context: Shared per-run state (trace logger).
    """
    pass
