"""
Function Body Rewriting Logic.

Builds the synthetic binding statements produced when a destructuring parameter
is lowered, and inserts them at the top of a function body.

A synthetic binding re-establishes the names the pattern used to bind::

    function f({a, b}) { ... }
    # becomes
    function f(params: any): any { const {a, b}: any = params; ... }
"""

from typing import List

from ts_converter.core.nodes import SyntaxNode, make_leaf, make_node


def make_binding_statement(pattern: SyntaxNode, source_name: str) -> SyntaxNode:
  """
  Builds ``const <pattern> = <source_name>;``.

  Args:
      pattern: The detached ``object_pattern`` / ``array_pattern``. Reused as-is.
      source_name: Identifier the pattern destructures from.

  Returns:
      SyntaxNode: A ``lexical_declaration`` statement.
  """
  pattern.field_name = "name"
  pattern.leading_trivia = " "
  declarator = make_node(
    "variable_declarator",
    [
      pattern,
      make_leaf("=", prefix=" "),
      make_leaf(source_name, prefix=" ", kind="identifier", field_name="value"),
    ],
  )
  return make_node("lexical_declaration", [make_leaf("const", field_name="kind"), declarator, make_leaf(";")])


def ensure_block_body(function_node: SyntaxNode) -> SyntaxNode:
  """
  Returns the statement block of a function, converting an arrow function's
  expression body into ``{ return <expr>; }`` when needed.

  Args:
      function_node: A function-like node with a ``body`` slot.

  Returns:
      SyntaxNode: The ``statement_block`` body.
  """
  body = function_node.child("body")
  if body.kind == "statement_block":
    return body

  lead = body.leading_trivia
  index = function_node.remove_child(body)
  body.field_name = None
  body.leading_trivia = " "
  statement = make_node("return_statement", [make_leaf("return", prefix=" "), body, make_leaf(";")])
  block = make_node(
    "statement_block",
    [make_leaf("{", prefix=lead), statement, make_leaf("}", prefix=" ")],
    field_name="body",
  )
  function_node.insert_child(index, block)
  return block


def prepend_statements(block: SyntaxNode, statements: List[SyntaxNode]) -> None:
  """
  Inserts statements at the top of a block, keeping their given order.

  The new statements copy the indentation of the block's current first
  statement; pre-existing statements are neither moved nor reordered.

  Args:
      block: A ``statement_block``.
      statements: Statements to insert, in final order.
  """
  position = block.index_of(next(child for child in block.children if child.kind == "{")) + 1
  following = block.children[position] if position < len(block.children) else None

  if following is None or following.kind == "}":
    indent = " "
    if following is not None and not following.prefix:
      following.prefix = " "
  else:
    trivia = following.leading_trivia
    indent = "\n" + trivia.rsplit("\n", 1)[-1] if "\n" in trivia else trivia or " "

  for offset, statement in enumerate(statements):
    statement.leading_trivia = indent
    block.insert_child(position + offset, statement)
