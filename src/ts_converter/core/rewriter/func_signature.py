"""
Signature Rewriting Logic for Function-like Nodes.

Handles named functions, function expressions, generators, arrow functions and
methods:

1.  **Simple parameters** without an annotation receive ``: any``. Parameters
    that already carry one are left alone.
2.  **Destructuring parameters** (``{a, b}`` / ``[a, b]``) are replaced by a
    synthetic ``params: any`` parameter (defaults are kept on the new parameter)
    and a ``const <pattern> = params;`` statement is prepended to the body.
    With several such parameters the statements keep the parameters'
    left-to-right order, and the synthetic names are ``params``, ``params1``,
    ``params2``... skipping any name already bound by the signature
    or declared at the top level of the body.
3.  **Return type**: ``: any`` is added when missing, except on constructors and
    ``set`` accessors, where TypeScript forbids one.

Bare arrow parameters (``x => x``) are parenthesized first so that they can
carry an annotation, and expression-bodied arrows become block-bodied when a
binding statement has to be inserted.
"""

from typing import Iterator, List, Set

from ts_converter.core.nodes import SyntaxNode, make_leaf, make_node
from ts_converter.core.rewriter.context import TransformContext
from ts_converter.core.rewriter.func_body import ensure_block_body, make_binding_statement, prepend_statements
from ts_converter.core.rewriter.interface import NodeHandler
from ts_converter.core.rewriter.types import make_type_annotation
from ts_converter.enums import AnnotationKind

FUNCTION_KINDS = frozenset(
  {
    "function_declaration",
    "function_expression",
    "function",
    "generator_function_declaration",
    "generator_function",
    "arrow_function",
    "method_definition",
  }
)
PARAMETER_KINDS = frozenset({"required_parameter", "optional_parameter"})
STRUCTURAL_PATTERN_KINDS = frozenset({"object_pattern", "array_pattern"})
BINDING_NAME_KINDS = frozenset({"identifier", "shorthand_property_identifier_pattern"})
SYNTHETIC_PARAM_NAME = "params"
BODY_DECLARATION_KINDS = frozenset(
  {
    "lexical_declaration",
    "variable_declaration",
    "function_declaration",
    "generator_function_declaration",
    "class_declaration",
  }
)
# class names parse as type_identifier
DECLARED_NAME_KINDS = BINDING_NAME_KINDS | {"type_identifier"}


def synthetic_names(taken: Set[str]) -> Iterator[str]:
  """
  Yields ``params``, ``params1``, ``params2``... skipping names in ``taken``.
  """
  index = 0
  while True:
    candidate = SYNTHETIC_PARAM_NAME if index == 0 else f"{SYNTHETIC_PARAM_NAME}{index}"
    if candidate not in taken:
      yield candidate
    index += 1


class ParameterAnnotator(NodeHandler):
  """
  Handler rewriting the signature (and, for destructuring, the body) of
  function-like nodes.
  """

  node_kinds = FUNCTION_KINDS

  def handle(self, node: SyntaxNode, context: TransformContext) -> None:
    parameters = node.child("parameters")
    if parameters is None:
      bare = node.child("parameter")
      if bare is None:
        return
      parameters = self._parenthesize(node, bare)

    can_lower = node.child("body") is not None
    names = synthetic_names(self._taken_names(node, parameters))
    bindings: List[SyntaxNode] = []

    for param in [child for child in parameters.children if child.kind in PARAMETER_KINDS]:
      pattern = param.child("pattern")
      if pattern is None:
        continue
      if param.child("type") is not None:
        context.tracer.record_decision(param.source_text(), "kept", "explicit annotation")
        continue

      before = param.source_text()
      if pattern.kind in STRUCTURAL_PATTERN_KINDS and can_lower:
        name = next(names)
        self._annotate(param, self._lower_pattern(param, pattern, name))
        bindings.append(make_binding_statement(pattern, name))
      else:
        self._annotate(param, pattern)
      context.tracer.record_edit(param.kind, before, param.source_text())

    if bindings:
      prepend_statements(ensure_block_body(node), bindings)

    self._annotate_return(node, parameters, context)

  def _taken_names(self, node: SyntaxNode, parameters: SyntaxNode) -> Set[str]:
    """Names bound by the signature or by top-level declarations of the body."""
    taken = {leaf.value for leaf in parameters.leaves() if leaf.kind in BINDING_NAME_KINDS}
    body = node.child("body")
    if body is None or body.kind != "statement_block":
      return taken
    for statement in body.children:
      if statement.kind not in BODY_DECLARATION_KINDS:
        continue
      targets = [statement.child("name")]
      targets.extend(d.child("name") for d in statement.children if d.kind == "variable_declarator")
      for target in targets:
        if target is not None:
          taken.update(leaf.value for leaf in target.leaves() if leaf.kind in DECLARED_NAME_KINDS)
    return taken

  def _parenthesize(self, node: SyntaxNode, bare: SyntaxNode) -> SyntaxNode:
    """
    Wraps the bare parameter of ``x => ...`` into ``(x) => ...``.

    Returns:
        SyntaxNode: The new ``formal_parameters`` node.
    """
    lead = bare.leading_trivia
    bare.leading_trivia = ""
    index = node.remove_child(bare)
    bare.field_name = "pattern"
    parameters = make_node(
      "formal_parameters",
      [make_leaf("(", prefix=lead), make_node("required_parameter", [bare]), make_leaf(")")],
      field_name="parameters",
    )
    node.insert_child(index, parameters)
    return parameters

  def _lower_pattern(self, param: SyntaxNode, pattern: SyntaxNode, name: str) -> SyntaxNode:
    """
    Swaps a destructuring pattern for a synthetic identifier.

    The pattern is detached, not copied; the caller moves it into the binding
    statement.

    Returns:
        SyntaxNode: The identifier now occupying the ``pattern`` slot.
    """
    lead = pattern.leading_trivia
    index = param.remove_child(pattern)
    identifier = make_leaf(name, prefix=lead, kind="identifier", field_name="pattern")
    param.insert_child(index, identifier)
    return identifier

  def _annotate(self, param: SyntaxNode, pattern: SyntaxNode) -> None:
    index = param.index_of(pattern) + 1
    if index < len(param.children) and param.children[index].kind == "?":
      index += 1
    param.insert_child(index, make_type_annotation(AnnotationKind.UNKNOWN))

  def _annotate_return(self, node: SyntaxNode, parameters: SyntaxNode, context: TransformContext) -> None:
    if node.child("return_type") is not None:
      return
    if self._forbids_return_type(node):
      context.tracer.record_decision(node.child("name").source_text(), "skipped", "return type not allowed")
      return

    index = node.index_of(parameters) + 1
    node.insert_child(index, make_type_annotation(AnnotationKind.UNKNOWN, field_name="return_type"))
    context.tracer.record_edit(node.kind, parameters.source_text(), parameters.source_text() + ": any")

  @staticmethod
  def _forbids_return_type(node: SyntaxNode) -> bool:
    """True for constructors and ``set`` accessors."""
    if node.kind != "method_definition":
      return False
    name = node.child("name")
    if name is None:
      return False
    if name.source_text() == "constructor":
      return True
    for child in node.children:
      if child is name:
        break
      if child.is_leaf and child.kind == "set":
        return True
    return False
