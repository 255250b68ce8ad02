# topmark:header:start
#
#   project      : CallSpacing
#   file         : javascript.py
#   file_relpath : src/callspacing/source/javascript.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JavaScript host adapter backed by tree-sitter.

Parses source text with ``tree-sitter-javascript`` and produces what the rule
consumes:

* a `SourceCode` token store: the leaves of the syntax tree become tokens,
  comments are kept apart, byte offsets are converted to character offsets;
* the call-like nodes: ``call_expression`` (a call, or a dynamic import when
  the function is ``import``) and ``new_expression``. Tagged templates are
  call expressions in tree-sitter but take no parens, so they are left out.

Files with syntax errors are rejected with `JavaScriptParseError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Final

import tree_sitter_javascript as tsjs
from tree_sitter import Language, Node, Parser

from callspacing.config.logging import get_logger
from callspacing.rule.nodes import CallNode, ConstructNode, DynamicImportNode
from callspacing.source.code import SourceCode
from callspacing.source.tokens import Token, TokenKind

if TYPE_CHECKING:
    from callspacing.config.logging import CallSpacingLogger
    from callspacing.rule.nodes import CallLikeNode
    from callspacing.source.tokens import Position

logger: CallSpacingLogger = get_logger(__name__)

JS_LANGUAGE: Final[Language] = Language(tsjs.language())

COMMENT_NODE_TYPES: Final[frozenset[str]] = frozenset({"comment", "html_comment"})
IDENTIFIER_NODE_TYPES: Final[frozenset[str]] = frozenset(
    {
        "identifier",
        "property_identifier",
        "private_property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "statement_identifier",
    }
)
KEYWORD_NODE_TYPES: Final[frozenset[str]] = frozenset(
    {"import", "super", "this", "true", "false", "null", "undefined"}
)
LITERAL_NODE_TYPES: Final[frozenset[str]] = frozenset(
    {"number", "string_fragment", "escape_sequence", "regex_pattern", "regex_flags"}
)


class JavaScriptParseError(Exception):
    """Raised when the source does not parse as JavaScript.

    Attributes:
        position (Position | None): Location of the first syntax error.
    """

    def __init__(self, message: str, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


@dataclass(frozen=True)
class ParsedSource:
    """A parsed file: its token store and its call-like nodes in source order."""

    source: SourceCode
    nodes: tuple[CallLikeNode, ...]


@lru_cache(maxsize=1)
def get_parser() -> Parser:
    """Return a shared tree-sitter parser for JavaScript."""
    return Parser(JS_LANGUAGE)


class _OffsetMap:
    """Convert UTF-8 byte offsets to character offsets."""

    def __init__(self, text: str) -> None:
        self._table: list[int] | None = None
        if not text.isascii():
            table: list[int] = []
            for index, char in enumerate(text):
                table.extend([index] * len(char.encode("utf-8")))
            table.append(len(text))
            self._table = table

    def __call__(self, byte_offset: int) -> int:
        if self._table is None:
            return byte_offset
        return self._table[byte_offset]


def _classify(node: Node, value: str) -> TokenKind:
    node_type: str = node.type
    if node_type in COMMENT_NODE_TYPES:
        return TokenKind.BLOCK_COMMENT if value.startswith("/*") else TokenKind.LINE_COMMENT
    if node_type == "hash_bang_line":
        return TokenKind.SHEBANG
    if node_type == "optional_chain" or not node.is_named:
        if value[:1].isalpha():
            return TokenKind.KEYWORD
        if value[:1] == "`":
            return TokenKind.TEMPLATE
        return TokenKind.PUNCTUATOR
    if node_type in IDENTIFIER_NODE_TYPES:
        return TokenKind.IDENTIFIER
    if node_type in KEYWORD_NODE_TYPES:
        return TokenKind.KEYWORD
    if node_type in LITERAL_NODE_TYPES:
        return TokenKind.LITERAL
    return TokenKind.OTHER


def _first_error(root: Node) -> Node | None:
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def parse_javascript(text: str) -> ParsedSource:
    """Parse ``text`` and return its token store and call-like nodes.

    Args:
        text (str): JavaScript source text.

    Returns:
        ParsedSource: Tokens, comments and call-like nodes.

    Raises:
        JavaScriptParseError: If the text contains syntax errors.
    """
    tree = get_parser().parse(text.encode("utf-8"))
    root: Node = tree.root_node
    to_char = _OffsetMap(text)
    locator = SourceCode(text, ())

    if root.has_error:
        error = _first_error(root) or root
        start: int = to_char(error.start_byte)
        position = locator.get_position(start)
        raise JavaScriptParseError(
            f"Parsing error at line {position.line}, column {position.column + 1}", position
        )

    tokens: list[Token] = []
    comments: list[Token] = []
    nodes: list[CallLikeNode] = []

    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        node_range = (to_char(node.start_byte), to_char(node.end_byte))

        if node.child_count == 0:
            if node_range[0] == node_range[1]:
                continue
            value: str = text[node_range[0] : node_range[1]]
            kind = _classify(node, value)
            token = Token(
                kind=kind,
                value=value,
                start=node_range[0],
                end=node_range[1],
                loc=locator.get_loc(*node_range),
            )
            (comments if kind.is_comment else tokens).append(token)
            continue

        call_like = _to_call_like(node, node_range, to_char)
        if call_like is not None:
            nodes.append(call_like)
        stack.extend(reversed(node.children))

    logger.debug(
        "Parsed %d token(s), %d comment(s), %d call-like node(s)",
        len(tokens),
        len(comments),
        len(nodes),
    )
    nodes.sort(key=lambda n: n.range)
    return ParsedSource(source=SourceCode(text, tokens, comments), nodes=tuple(nodes))


def _to_call_like(
    node: Node, node_range: tuple[int, int], to_char: _OffsetMap
) -> CallLikeNode | None:
    if node.type == "call_expression":
        function = node.child_by_field_name("function")
        arguments = node.child_by_field_name("arguments")
        if function is None or arguments is None or arguments.type != "arguments":
            return None
        if function.type == "import":
            return DynamicImportNode(range=node_range)
        optional = any(child.type == "optional_chain" for child in node.children)
        return CallNode(
            range=node_range,
            callee_range=(to_char(function.start_byte), to_char(function.end_byte)),
            optional=optional,
        )

    if node.type == "new_expression":
        constructor = node.child_by_field_name("constructor")
        if constructor is None:
            return None
        return ConstructNode(
            range=node_range,
            callee_range=(to_char(constructor.start_byte), to_char(constructor.end_byte)),
        )

    return None
