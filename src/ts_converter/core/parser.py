"""
Source Parser backed by tree-sitter.

Parses JavaScript / JSX (and already-annotated TypeScript) with the TSX grammar
of ``tree-sitter-typescript`` and hydrates the result into a mutable
:class:`~ts_converter.core.nodes.SyntaxNode` tree.

tree-sitter never raises on malformed input; it recovers and marks the damage with
``ERROR`` and ``MISSING`` nodes. Any such node turns into a :class:`ParseError`
here, so downstream passes only ever see well-formed trees.
"""

import tree_sitter as ts
import tree_sitter_typescript as tsts

from ts_converter.core.nodes import SyntaxNode
from ts_converter.errors import ParseError

TSX_LANGUAGE = ts.Language(tsts.language_tsx())


class SourceParser:
  """
  Thin wrapper around a ``tree_sitter.Parser`` configured for TSX.

  One instance can parse any number of sources sequentially.
  """

  def __init__(self) -> None:
    self._parser = ts.Parser(TSX_LANGUAGE)

  def parse(self, code: str) -> SyntaxNode:
    """
    Parses source text.

    Args:
        code: JavaScript / TypeScript source.

    Returns:
        SyntaxNode: The root ``program`` node.

    Raises:
        ParseError: If the source contains syntax errors.
    """
    source = code.encode("utf-8")
    tree = self._parser.parse(source)
    root = tree.root_node
    if root.has_error:
      raise _describe_error(root, source)
    return _hydrate(tree, source)


def _describe_error(root: ts.Node, source: bytes) -> ParseError:
  """Builds a ParseError pointing at the first ERROR or MISSING node."""
  stack = [root]
  culprit = root
  while stack:
    node = stack.pop()
    if node.is_error or node.is_missing:
      culprit = node
      break
    if node.has_error:
      stack.extend(reversed(node.children))

  line, column = culprit.start_point[0] + 1, culprit.start_point[1] + 1
  if culprit.is_missing:
    return ParseError(f"Missing {culprit.type!r}", line, column)

  snippet = source[culprit.start_byte : culprit.end_byte].decode("utf-8", errors="replace")
  snippet = snippet.strip().splitlines()[0][:40] if snippet.strip() else ""
  if snippet:
    return ParseError(f"Unexpected syntax near {snippet!r}", line, column)
  return ParseError("Unexpected syntax", line, column)


def _hydrate(tree: ts.Tree, source: bytes) -> SyntaxNode:
  """
  Copies a tree-sitter tree into SyntaxNodes.

  Walks with a TreeCursor so that field names inherited through hidden grammar
  rules (e.g. ``source`` on ``import_statement``) are reported on the right child.
  """
  cursor = tree.walk()
  module = SyntaxNode(kind=cursor.node.type)
  parents = [module]
  last_end = 0

  if not cursor.goto_first_child():
    module.trailing = source.decode("utf-8")
    return module

  while parents:
    ts_node = cursor.node
    parent = parents[-1]

    if ts_node.child_count == 0:
      start, end = ts_node.start_byte, ts_node.end_byte
      parent.append_child(
        SyntaxNode(
          kind=ts_node.type,
          field_name=cursor.field_name,
          value=source[start:end].decode("utf-8"),
          prefix=source[last_end:start].decode("utf-8"),
        )
      )
      last_end = max(last_end, end)
    else:
      node = SyntaxNode(kind=ts_node.type, field_name=cursor.field_name)
      parent.append_child(node)
      if cursor.goto_first_child():
        parents.append(node)
        continue

    while not cursor.goto_next_sibling():
      cursor.goto_parent()
      parents.pop()
      if not parents:
        break

  module.trailing = source[last_end:].decode("utf-8")
  return module
