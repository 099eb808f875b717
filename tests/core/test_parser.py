"""
Tests for the tree-sitter backed source parser.
"""

import pytest

from ts_converter.core.nodes import print_tree
from ts_converter.core.parser import SourceParser
from ts_converter.errors import ParseError


@pytest.fixture(scope="module")
def parser() -> SourceParser:
  return SourceParser()


@pytest.mark.parametrize(
  "code",
  [
    "",
    "\n\n",
    "const a = 1;\n",
    "// leading comment\nlet b = 'x'; /* trailing */\n\n",
    "function f(a, {b}) {\n  return a + b;\n}\n",
    "import React from 'react';\nexport default () => <div className=\"x\">{1}</div>;\n",
    "\tvar   spaced   =   [1,\t2];   ",
  ],
)
def test_round_trip_is_lossless(parser: SourceParser, code: str) -> None:
  assert print_tree(parser.parse(code)) == code


def test_field_names_are_preserved(parser: SourceParser) -> None:
  tree = parser.parse("let x = 5;")
  declaration = tree.children[0]
  assert declaration.kind == "lexical_declaration"
  declarator = next(c for c in declaration.children if c.kind == "variable_declarator")
  assert declarator.child("name").value == "x"
  assert declarator.child("value").kind == "number"


def test_import_source_field(parser: SourceParser) -> None:
  tree = parser.parse('import a from "./a.js";')
  source = tree.children[0].child("source")
  assert source is not None
  assert source.kind == "string"
  assert source.source_text() == '"./a.js"'


def test_parents_are_linked(parser: SourceParser) -> None:
  tree = parser.parse("f(1);")
  for leaf in tree.leaves():
    node = leaf
    while node.parent is not None:
      node = node.parent
    assert node is tree


def test_syntax_error_raises(parser: SourceParser) -> None:
  with pytest.raises(ParseError) as excinfo:
    parser.parse("function f( {")
  assert excinfo.value.line == 1
  assert excinfo.value.column is not None


def test_error_position_is_one_based(parser: SourceParser) -> None:
  with pytest.raises(ParseError) as excinfo:
    parser.parse("let ok = 1;\nlet = = ;\n")
  assert excinfo.value.line == 2


def test_parser_is_reusable(parser: SourceParser) -> None:
  with pytest.raises(ParseError):
    parser.parse("}")
  assert print_tree(parser.parse("x;")) == "x;"
