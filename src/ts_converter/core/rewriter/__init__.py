"""
Rewriter Package.

Exposes the node handlers that make up the conversion walk and the table that
dispatches them.
"""

from ts_converter.core.rewriter.context import TransformContext
from ts_converter.core.rewriter.control_flow import LoopHeaderSanitizer
from ts_converter.core.rewriter.declarations import DeclarationAnnotator
from ts_converter.core.rewriter.func_signature import ParameterAnnotator
from ts_converter.core.rewriter.interface import NodeHandler
from ts_converter.core.rewriter.pipeline import HandlerTable
from ts_converter.core.rewriter.types import infer_annotation, make_type_annotation

__all__ = [
  "DeclarationAnnotator",
  "HandlerTable",
  "LoopHeaderSanitizer",
  "NodeHandler",
  "ParameterAnnotator",
  "TransformContext",
  "infer_annotation",
  "make_type_annotation",
]
