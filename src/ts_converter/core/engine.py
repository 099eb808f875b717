"""
Orchestration Engine for AST Transformations.

This module provides the `ASTEngine`, the driver that converts one JavaScript
source text into TypeScript. A run moves through three phases:

1.  **Parsing**: The source is parsed with tree-sitter (TSX grammar) and copied
    into a mutable syntax tree. Syntax errors end the run with a failed
    `ConversionResult`; they never raise.

2.  **Transforming**: A single depth-first walk dispatches every node to the
    handlers registered for its kind:
    - `DeclarationAnnotator`: annotates variable declarators.
    - `LoopHeaderSanitizer`: strips annotations from for-in / for-of headers.
    - `ParameterAnnotator`: annotates parameters and return types, lowers
      destructuring parameters.
    - `ImportPathNormalizer`: strips source extensions from module specifiers.
    - `MarkupDetector`: records whether JSX is present.

3.  **Printing**: The mutated tree is rendered back to text.

Writing the result to disk is the caller's job (see
`ts_converter.cli.handlers.convert`), since the output name depends on
`ConversionResult.has_markup`.
"""

import logging
from typing import List, Optional

from ts_converter.core.conversion_result import ConversionResult
from ts_converter.core.import_fixer import ImportPathNormalizer
from ts_converter.core.nodes import SyntaxNode, print_tree
from ts_converter.core.parser import SourceParser
from ts_converter.core.rewriter import (
  DeclarationAnnotator,
  HandlerTable,
  LoopHeaderSanitizer,
  ParameterAnnotator,
  TransformContext,
)
from ts_converter.core.scanners import MarkupDetector
from ts_converter.core.tracer import TraceLogger
from ts_converter.errors import ParseError

logger = logging.getLogger(__name__)


class ASTEngine:
  """
  The main compilation unit.

  An engine can convert any number of sources one after another. Each call to
  `run` builds its own tree, handlers and trace; nothing carries over between
  runs except the parser instance.
  """

  def __init__(self, parser: Optional[SourceParser] = None) -> None:
    """
    Initializes the Engine.

    Args:
        parser (SourceParser, optional): Parser to reuse. A new one is created if None.
    """
    self.parser = parser or SourceParser()

  def parse(self, code: str) -> SyntaxNode:
    """
    Parses source string into a syntax tree.

    Args:
        code (str): JavaScript source code.

    Returns:
        SyntaxNode: The root node.

    Raises:
        ParseError: If the input code is malformed.
    """
    return self.parser.parse(code)

  def to_source(self, tree: SyntaxNode) -> str:
    """
    Converts the tree back to source string.

    Args:
        tree (SyntaxNode): The modified syntax tree.

    Returns:
        str: Generated TypeScript code.
    """
    return print_tree(tree)

  def run(self, code: str) -> ConversionResult:
    """
    Executes the full conversion pipeline.

    Args:
        code (str): The input source string.

    Returns:
        ConversionResult: Object containing transformed code, markup flag and error logs.
    """
    tracer = TraceLogger()
    tree: Optional[SyntaxNode] = None
    errors: List[str] = []
    detector = MarkupDetector()

    with tracer.phase("Conversion Pipeline", "JavaScript -> TypeScript"):
      with tracer.phase("Parsing", "Source Text -> Syntax Tree"):
        try:
          tree = self.parse(code)
        except ParseError as e:
          logger.debug("Parse failed: %s", e)
          errors.append(f"Parse Error: {e}")
          tracer.record_error(errors[-1])

      if tree is not None:
        with tracer.phase("Transforming", "Single Traversal"):
          table = HandlerTable(
            [
              DeclarationAnnotator(),
              LoopHeaderSanitizer(),
              ParameterAnnotator(),
              ImportPathNormalizer(),
              detector,
            ]
          )
          table.walk(tree, TransformContext(tracer))

        with tracer.phase("Printing", "Syntax Tree -> Source Text"):
          code = self.to_source(tree)

    logger.debug("Conversion events: %s", tracer.counts())
    return ConversionResult(
      code=code,
      errors=errors,
      success=not errors,
      has_markup=detector.found,
      trace_events=tracer.export(),
    )