"""
Core Package.

Contains the conversion logic:
- Mutable syntax tree and its tree-sitter parser
- Node handlers (annotation, signature rewriting, import normalization)
- AST Engine
"""
