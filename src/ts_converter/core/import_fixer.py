"""
Import Specifier Normalization.

TypeScript resolves ``import x from "./x"`` to ``x.ts`` / ``x.tsx`` on its own,
while a specifier spelled with a source extension (``"./x.js"``) stops resolving
once the files are renamed. This pass drops one trailing ``.js``, ``.jsx``,
``.ts`` or ``.tsx`` from the module specifier of import declarations and
re-exports (``export ... from "..."``). Other specifiers, including those with
unrelated extensions such as ``.json`` or ``.css``, are left as written.

The rewrite is purely textual: the referenced module is neither resolved nor
checked for existence.
"""

import re

from ts_converter.core.nodes import SyntaxNode, make_leaf
from ts_converter.core.rewriter.context import TransformContext
from ts_converter.core.rewriter.interface import NodeHandler

RECOGNIZED_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")

_EXTENSION_RE = re.compile("(?:" + "|".join(re.escape(ext) for ext in RECOGNIZED_EXTENSIONS) + r")\Z")


def normalize_specifier(specifier: str) -> str:
  """
  Strips a single recognized source extension.

  Args:
      specifier: The module specifier without quotes.

  Returns:
      str: The specifier, minus ``.js``/``.jsx``/``.ts``/``.tsx`` if it ended with one.

  Example:
      >>> normalize_specifier("./widgets/button.jsx")
      './widgets/button'
      >>> normalize_specifier("./data.json")
      './data.json'
  """
  return _EXTENSION_RE.sub("", specifier, count=1)


class ImportPathNormalizer(NodeHandler):
  """
  Handler for ``import_statement`` and ``export_statement`` nodes that name a
  module source.
  """

  node_kinds = frozenset({"import_statement", "export_statement"})

  def handle(self, node: SyntaxNode, context: TransformContext) -> None:
    source = node.child("source")
    if source is None or source.kind != "string":
      return

    text = source.source_text()
    quote, specifier = text[0], text[1:-1]
    normalized = normalize_specifier(specifier)
    if normalized == specifier:
      context.tracer.record_decision(text, "kept", "no recognized extension")
      return

    source.replace_children(
      [
        make_leaf(quote, prefix=source.leading_trivia),
        make_leaf(normalized, kind="string_fragment"),
        make_leaf(quote),
      ]
    )
    context.tracer.record_specifier(text, source.source_text())
