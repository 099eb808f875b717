"""
Literal-shape type inference.

Maps an initializer expression to one of the fixed ``AnnotationKind`` values by
looking only at its grammar tag. This is a best-effort annotation heuristic, not
type checking: identifiers, calls, operators and anything else not listed here
fall back to ``any``.
"""

from typing import Dict, Optional

from ts_converter.core.nodes import SyntaxNode, make_leaf, make_node
from ts_converter.enums import AnnotationKind

LITERAL_ANNOTATIONS: Dict[str, AnnotationKind] = {
  "number": AnnotationKind.NUMBER,
  "string": AnnotationKind.STRING,
  "true": AnnotationKind.BOOLEAN,
  "false": AnnotationKind.BOOLEAN,
  "array": AnnotationKind.UNKNOWN_ARRAY,
  "object": AnnotationKind.UNKNOWN_RECORD,
}

_PREDEFINED = {AnnotationKind.UNKNOWN, AnnotationKind.NUMBER, AnnotationKind.STRING, AnnotationKind.BOOLEAN}


def infer_annotation(node: Optional[SyntaxNode]) -> AnnotationKind:
  """
  Guesses the annotation for an initializer.

  Args:
      node: The initializer expression, or None when there is none.

  Returns:
      AnnotationKind: The category for the literal shape, ``UNKNOWN`` otherwise.

  Example:
      >>> infer_annotation(make_leaf("5", kind="number"))
      <AnnotationKind.NUMBER: 'number'>
  """
  if node is None:
    return AnnotationKind.UNKNOWN
  return LITERAL_ANNOTATIONS.get(node.kind, AnnotationKind.UNKNOWN)


def make_type_annotation(kind: AnnotationKind, field_name: str = "type") -> SyntaxNode:
  """
  Builds the concrete ``: <type>`` node for an annotation kind.

  Args:
      kind: The annotation to render.
      field_name: Slot the annotation will occupy (``type`` or ``return_type``).

  Returns:
      SyntaxNode: A ``type_annotation`` node.
  """
  type_kind = "predefined_type" if kind in _PREDEFINED else "type"
  return make_node(
    "type_annotation",
    [make_leaf(":"), make_leaf(kind.value, prefix=" ", kind=type_kind)],
    field_name=field_name,
  )
