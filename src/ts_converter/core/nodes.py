"""
Mutable Concrete Syntax Tree Nodes.

This module defines the tree the conversion passes operate on. Each node mirrors
one tree-sitter node (same ``kind`` tag, same field names), but unlike the
tree-sitter tree it can be edited in place: children can be inserted, removed
and replaced while a traversal is in progress.

Trivia preservation follows a simple rule: every leaf token carries the exact
source text that preceded it (``prefix``), and the root carries whatever text
follows the last token (``trailing``). Printing concatenates the two in order,
so regions of the tree no pass touched round-trip byte for byte.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass(eq=False)
class SyntaxNode:
  """
  A single node of the concrete syntax tree.

  Attributes:
      kind (str): The grammar tag (e.g. ``variable_declarator``). Anonymous
          tokens use their own text as tag (e.g. ``=``, ``const``).
      children (List[SyntaxNode]): Ordered child nodes. Empty for leaves.
      field_name (Optional[str]): The slot this node occupies in its parent
          (e.g. ``name``, ``type``, ``value``, ``body``).
      value (Optional[str]): Token text. Only set on leaves.
      prefix (str): Source text preceding the token (whitespace, newlines).
      trailing (str): Text following the last token of this subtree. Only the
          root normally carries it.
      parent (Optional[SyntaxNode]): Back reference, maintained by the mutation helpers.
  """

  kind: str
  children: List["SyntaxNode"] = field(default_factory=list)
  field_name: Optional[str] = None
  value: Optional[str] = None
  prefix: str = ""
  trailing: str = ""
  parent: Optional["SyntaxNode"] = field(default=None, repr=False)

  def __post_init__(self) -> None:
    for child in self.children:
      child.parent = self

  @property
  def is_leaf(self) -> bool:
    """True if the node is a token (carries text instead of children)."""
    return self.value is not None

  def child(self, field_name: str) -> Optional["SyntaxNode"]:
    """
    Returns the first child occupying the given slot.

    Args:
        field_name: Slot name (e.g. ``"parameters"``).

    Returns:
        The child node, or None if the slot is empty.
    """
    for node in self.children:
      if node.field_name == field_name:
        return node
    return None

  def index_of(self, child: "SyntaxNode") -> int:
    """
    Position of a child by identity.

    Raises:
        ValueError: If ``child`` is not a direct child of this node.
    """
    for index, node in enumerate(self.children):
      if node is child:
        return index
    raise ValueError(f"{child.kind} is not a child of {self.kind}")

  def insert_child(self, index: int, child: "SyntaxNode") -> None:
    child.parent = self
    self.children.insert(index, child)

  def append_child(self, child: "SyntaxNode") -> None:
    child.parent = self
    self.children.append(child)

  def remove_child(self, child: "SyntaxNode") -> int:
    """
    Detaches a child.

    Returns:
        int: The index the child occupied.
    """
    index = self.index_of(child)
    del self.children[index]
    child.parent = None
    return index

  def replace_child(self, old: "SyntaxNode", new: "SyntaxNode") -> None:
    index = self.remove_child(old)
    self.insert_child(index, new)

  def replace_children(self, children: List["SyntaxNode"]) -> None:
    for node in self.children:
      node.parent = None
    self.children = []
    for node in children:
      self.append_child(node)

  def leaves(self) -> Iterator["SyntaxNode"]:
    """Yields the tokens of this subtree in source order."""
    stack = [self]
    while stack:
      node = stack.pop()
      if node.is_leaf:
        yield node
      else:
        stack.extend(reversed(node.children))

  def first_leaf(self) -> Optional["SyntaxNode"]:
    return next(self.leaves(), None)

  @property
  def leading_trivia(self) -> str:
    """The whitespace in front of this subtree's first token."""
    leaf = self.first_leaf()
    return leaf.prefix if leaf is not None else ""

  @leading_trivia.setter
  def leading_trivia(self, text: str) -> None:
    leaf = self.first_leaf()
    if leaf is not None:
      leaf.prefix = text

  def to_text(self) -> str:
    """
    Renders the subtree, including the trivia in front of its first token.

    Returns:
        str: The source text.
    """
    parts: List[str] = []
    stack: List[object] = [self]
    while stack:
      item = stack.pop()
      if isinstance(item, str):
        parts.append(item)
        continue
      if item.is_leaf:
        parts.append(item.prefix)
        parts.append(item.value)
        continue
      if item.trailing:
        stack.append(item.trailing)
      stack.extend(reversed(item.children))
    return "".join(parts)

  def source_text(self) -> str:
    """Renders the subtree without its leading trivia."""
    return self.to_text()[len(self.leading_trivia) :]


def make_leaf(text: str, prefix: str = "", kind: Optional[str] = None, field_name: Optional[str] = None) -> SyntaxNode:
  """
  Creates a token node.

  Args:
      text: Token text.
      prefix: Whitespace emitted before the token.
      kind: Grammar tag. Defaults to the token text, as for anonymous tokens.
      field_name: Slot in the parent.

  Returns:
      SyntaxNode: The new leaf.
  """
  return SyntaxNode(kind=kind or text, value=text, prefix=prefix, field_name=field_name)


def make_node(kind: str, children: List[SyntaxNode], field_name: Optional[str] = None) -> SyntaxNode:
  return SyntaxNode(kind=kind, children=list(children), field_name=field_name)


def print_tree(tree: SyntaxNode) -> str:
  """
  Emits the full source text of a tree.

  Args:
      tree: The (possibly mutated) root node.

  Returns:
      str: Output source code.
  """
  return tree.to_text()
