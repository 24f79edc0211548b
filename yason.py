"""
YASON (YAML-like Structured Object Notation) - Lossless Parser

A strict, data-only, zero-dependency parser for YASON configuration files.
Produces either the plain decoded value or a lossless AST from which the
original text (comments, blank lines and padding included) can be rebuilt.

Usage:
    import yason

    # Decode from string
    data = yason.decode('server:\\n  host: "localhost"\\n  port: 8080  # Default port\\n')

    # Decode from file
    with open('config.yason', 'r', newline='') as f:
        data = yason.load(f)

    # Lossless AST
    document = yason.parse(yason.tokenize(source))
    assert yason.reconstruct(document.get_ast()) == source
"""

import argparse
import json
import logging
import re
import sys
from dataclasses import dataclass, field, fields
from enum import Enum, auto
from typing import Any, Callable, Dict, List, NamedTuple, Optional, TextIO, Tuple, Union

__all__ = [
    'decode', 'load', 'loads', 'tokenize', 'parse', 'reconstruct', 'main',
    'Token', 'TokenType', 'OptionalToken', 'OneOf', 'Whitespace',
    'DocumentNode', 'MapNode', 'ListNode', 'KeyNode', 'ValueNode',
    'YasonError', 'LexerError', 'UnexpectedToken', 'ParseError', 'InvalidIndent',
    'UnexpectedEndOfDocument', 'ConsumedExceedsMatched', 'EmptyStack',
]

_LOGGER = logging.getLogger(__name__)

# ==========================================
# Data Structures
# ==========================================

class TokenType(Enum):
    # Keys
    SYMBOL = auto()

    # Literals
    TRUE = auto()
    FALSE = auto()
    NULL = auto()
    NUMBER = auto()
    STRING = auto()

    # Symbols
    COLON = auto()       # :
    DASH = auto()        # -
    COMMA = auto()       # ,
    LBRACE = auto()      # {
    RBRACE = auto()      # }
    LBRACKET = auto()    # [
    RBRACKET = auto()    # ]

    # Whitespace
    LINE_END = auto()    # trailing padding and/or comment
    PADDING = auto()
    NEWLINE = auto()

    # End
    END = auto()

    def matches(self, token: 'Token') -> bool:
        return token.type is self

@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

class OptionalToken:
    """Pattern element that is skipped when the next token does not match it."""

    def __init__(self, matcher):
        self.matcher = matcher

    def matches(self, token: Token) -> bool:
        return self.matcher.matches(token)

    def __repr__(self):
        return f'{self.matcher!r}?'

class OneOf:
    """Pattern element matching any one of several token types."""

    def __init__(self, *types):
        self.types = types

    def matches(self, token: Token) -> bool:
        return any(t.matches(token) for t in self.types)

    def __repr__(self):
        return 'OneOf(%s)' % ', '.join(repr(t) for t in self.types)

def optional(matcher) -> OptionalToken:
    return OptionalToken(matcher)

PRIMITIVE = OneOf(TokenType.TRUE, TokenType.FALSE, TokenType.NULL, TokenType.NUMBER, TokenType.STRING)
KEY = OneOf(TokenType.STRING, TokenType.SYMBOL)

@dataclass
class Whitespace:
    before: str = ''
    inner: str = ''
    after: str = ''

    def to_ast(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}

class State(Enum):
    BEFORE_VALUE = 'before_value'
    AFTER_VALUE = 'after_value'
    BEFORE_INDENT = 'before_indent'
    BEFORE_KEY = 'before_key'
    BEFORE_DASH = 'before_dash'
    BEFORE_NESTED_VALUE = 'before_nested_value'
    AFTER_NESTED_VALUE = 'after_nested_value'
    AFTER_ITEM = 'after_item'

# ==========================================
# Errors
# ==========================================

class YasonError(Exception):
    kind = 'Error'

    def __init__(self, message: str, line: int = 0, col: int = 0):
        super().__init__(f"{self.kind} at {line}:{col}: {message}")
        self.line = line
        self.col = col

class LexerError(YasonError):
    kind = 'Lexer error'

class UnexpectedToken(LexerError):
    def __init__(self, near: str, line: int, col: int):
        super().__init__(f"Unexpected token near {near!r}", line, col)
        self.near = near

class ParseError(YasonError):
    kind = 'Parse error'

    def __init__(self, message: str, line: int = 0, col: int = 0,
                 node: Optional['Node'] = None, state: Optional[State] = None,
                 window: Tuple[Token, ...] = ()):
        super().__init__(message, line, col)
        self.node = node
        self.state = state
        self.window = tuple(window)

class InvalidIndent(ParseError):
    kind = 'Indentation error'

class UnexpectedEndOfDocument(ParseError):
    pass

class ConsumedExceedsMatched(YasonError):
    kind = 'Internal error'

class EmptyStack(YasonError):
    kind = 'Internal error'

# ==========================================
# Tokenizer
# ==========================================

# Characters allowed in a bare-word key; keywords and numbers must not be
# followed by one of them.
_SYMBOL_CHAR = r'[^\s\\\[\]{},\'":#\x00-\x1f\x7f-\x9f]'
_BOUNDARY = rf'(?!{_SYMBOL_CHAR})'

# Tried in order at every offset; the first non-empty match wins.
_RECOGNIZERS = [
    (TokenType.SYMBOL, re.compile(rf'(?!-){_SYMBOL_CHAR}+(?=[ \t]*:)')),
    (TokenType.TRUE, re.compile(rf'true{_BOUNDARY}')),
    (TokenType.FALSE, re.compile(rf'false{_BOUNDARY}')),
    (TokenType.NULL, re.compile(rf'null{_BOUNDARY}')),
    (TokenType.NUMBER, re.compile(rf'-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?{_BOUNDARY}')),
    (TokenType.STRING, re.compile(r'"(?:[^"\\\x00-\x1f\x7f-\x9f]|\\["\\/bfnrt]|\\u[0-9a-fA-F]{4})*"')),
    (TokenType.COLON, re.compile(r':')),
    (TokenType.DASH, re.compile(r'-')),
    (TokenType.COMMA, re.compile(r',')),
    (TokenType.LBRACE, re.compile(r'\{')),
    (TokenType.RBRACE, re.compile(r'\}')),
    (TokenType.LBRACKET, re.compile(r'\[')),
    (TokenType.RBRACKET, re.compile(r'\]')),
    (TokenType.LINE_END, re.compile(r'[ \t]*(?:#[^\r\n]*)?(?=\r?\n|\Z)')),
    (TokenType.PADDING, re.compile(r'[ \t]+(?![ \t#\r\n]|\Z)')),
    (TokenType.NEWLINE, re.compile(r'\r?\n')),
]

_NEWLINE_RE = re.compile(r'\r?\n')

class _YasonLexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 1

    def error(self):
        raise UnexpectedToken(self.source[self.pos:self.pos + 20], self.line, self.col)

    def next_token(self) -> Token:
        for token_type, regex in _RECOGNIZERS:
            match = regex.match(self.source, self.pos)
            if match and match.end() > self.pos:
                break
        else:
            self.error()

        token = Token(token_type, match.group(), self.line, self.col)
        self.pos = match.end()
        if token_type is TokenType.NEWLINE:
            self.line += 1
            self.col = 1
        else:
            self.col += len(token.text)
        return token

    def tokenize(self) -> List[Token]:
        tokens = []
        while self.pos < len(self.source):
            tokens.append(self.next_token())
        tokens.append(Token(TokenType.END, '', self.line, self.col))
        return tokens

# ==========================================
# Pattern Matching
# ==========================================

Pattern = Tuple[Any, ...]

def match_length(window: List[Token], pattern: Pattern) -> Optional[int]:
    """Count the tokens a pattern consumes from the start of the window.

    Optional elements that do not match are skipped. Returns None when a
    required element fails, or when the window ends before the pattern does:
    a shorter window never settles whether a trailing optional is present.
    """
    length = 0
    for matcher in pattern:
        if length >= len(window):
            return None
        if matcher.matches(window[length]):
            length += 1
        elif not isinstance(matcher, OptionalToken):
            return None
    return length

def could_match(window: List[Token], pattern: Pattern) -> bool:
    """Check whether the window, possibly extended with more tokens, could match."""
    length = 0
    for matcher in pattern:
        if length >= len(window):
            return True
        if matcher.matches(window[length]):
            length += 1
        elif not isinstance(matcher, OptionalToken):
            return False
    return True

# ==========================================
# Node Engine
# ==========================================

@dataclass
class Result:
    """Stack changes requested by an action. All defaults is a pure state change."""
    consumed: int = 0
    push: Optional['Node'] = None
    pop: bool = False

class Rule(NamedTuple):
    pattern: Pattern
    action: Callable[..., Result]

class Step(NamedTuple):
    result: Result
    length: int

def _hoist(source: Whitespace, recipient: Whitespace, attr: str):
    """Move everything from the first newline of `source.after` onto `recipient`.

    The same-line part (usually a trailing comment) stays where it is.
    """
    match = _NEWLINE_RE.search(source.after)
    if match is None:
        return
    setattr(recipient, attr, getattr(recipient, attr) + source.after[match.start():])
    source.after = source.after[:match.start()]

def _texts(tokens: List[Token]) -> str:
    return ''.join(token.text for token in tokens)

class _Element:
    def __init__(self):
        self.whitespace = Whitespace()

class Node(_Element):
    """A grammar node driven by a table of (pattern, action) rules per state."""

    kind = 'Node'
    rules: Dict[State, List[Rule]] = {}
    state: State

    def advance(self, window: List[Token]) -> Optional[Step]:
        """Fire the single rule the window selects, or return None if undecided."""
        rules = self.rules[self.state]
        candidates = [rule for rule in rules if rule.pattern and could_match(window, rule.pattern)]

        matches = []
        for rule in candidates:
            length = match_length(window, rule.pattern)
            if length is not None:
                matches.append((rule, length))

        if not candidates:
            fallback = next((rule for rule in rules if not rule.pattern), None)
            if fallback is not None:
                matches.append((fallback, 0))

        if len(matches) == 1 and len(candidates) <= 1:
            rule, length = matches[0]
            return Step(rule.action(self, window[:length]), length)
        return None

    def matchable_tokens(self) -> int:
        """Longest pattern of the current state, which bounds lookahead."""
        return max((len(rule.pattern) for rule in self.rules[self.state]), default=0)

    def __repr__(self):
        return f'<{self.kind} {self.state.value}>'

# ==========================================
# Grammar Nodes
# ==========================================

class KeyNode(_Element):
    def __init__(self, token: Token):
        super().__init__()
        self.raw = token.text
        self.symbol = token.type is TokenType.SYMBOL
        self.value = token.text if self.symbol else json.loads(token.text)

    def get_data(self) -> str:
        return self.value

    def get_ast(self) -> Dict[str, Any]:
        return {
            'type': 'Key',
            'symbol': self.symbol,
            'whitespace': self.whitespace.to_ast(),
            'value': self.value,
            'raw': self.raw,
        }

class ValueNode(_Element):
    _KEYWORDS = {TokenType.TRUE: True, TokenType.FALSE: False, TokenType.NULL: None}

    def __init__(self, token: Token):
        super().__init__()
        self.raw = token.text
        if token.type in self._KEYWORDS:
            self.value = self._KEYWORDS[token.type]
        else:
            # NUMBER and STRING tokens are JSON literals by construction
            self.value = json.loads(token.text)

    def get_data(self) -> Union[bool, None, int, float, str]:
        return self.value

    def get_ast(self) -> Dict[str, Any]:
        return {
            'type': 'Value',
            'whitespace': self.whitespace.to_ast(),
            'value': self.value,
            'raw': self.raw,
        }

class MapItem(_Element):
    def __init__(self, key: KeyNode):
        super().__init__()
        self.key = key
        self.value = None

    def get_ast(self) -> Dict[str, Any]:
        return {
            'type': 'MapItem',
            'whitespace': self.whitespace.to_ast(),
            'key': self.key.get_ast(),
            'value': self.value.get_ast(),
        }

class ListItem(_Element):
    def __init__(self):
        super().__init__()
        self.value = None

    def get_ast(self) -> Dict[str, Any]:
        return {
            'type': 'ListItem',
            'whitespace': self.whitespace.to_ast(),
            'value': self.value.get_ast(),
        }

def _is_indent_unit(text: str) -> bool:
    return bool(text) and len(set(text)) == 1

class _CollectionNode(Node):
    """State machine shared by maps and lists; they differ in how an item starts."""

    item_state: State

    def __init__(self, nesting: int, document: 'DocumentNode'):
        super().__init__()
        self.nesting = nesting
        self.document = document
        self.items = []
        self.state = State.BEFORE_INDENT
        self._padding = ''

    def _append(self, item):
        if self.items:
            _hoist(self.items[-1].whitespace, item.whitespace, 'before')
        item.whitespace.before += self._padding
        self._padding = ''
        self.items.append(item)

    def _opening_comment(self, item, text: str):
        raise NotImplementedError

    def _depth(self, padding: Optional[Token]) -> int:
        if padding is None:
            return 0
        unit = self.document.indent
        text = padding.text
        if unit is None:
            raise InvalidIndent(f"Unexpected indentation {text!r}", padding.line, padding.col)
        if len(text) % len(unit) or text != unit * (len(text) // len(unit)):
            raise InvalidIndent(f"Indentation {text!r} is not a multiple of {unit!r}", padding.line, padding.col)
        return len(text) // len(unit)

    def _indent(self, tokens):
        text = tokens[0].text if tokens else ''
        line, col = (tokens[0].line, tokens[0].col) if tokens else (0, 0)
        document = self.document

        # The first indented line of the document fixes the unit
        if document.indent is None and text:
            if self.nesting != 1 or not _is_indent_unit(text):
                raise InvalidIndent(f"Invalid indent unit {text!r}", line, col)
            document.indent = text

        expected = (document.indent or '') * self.nesting
        if text != expected:
            raise InvalidIndent(f"Expected indentation {expected!r}, got {text!r}", line, col)

        self._padding = text
        self.state = self.item_state
        return Result(consumed=len(tokens))

    def _inline_value(self, tokens):
        value = ValueNode(tokens[-1])
        if len(tokens) == 2:
            value.whitespace.before = tokens[0].text
        self.items[-1].value = value
        self.state = State.AFTER_VALUE
        return Result(consumed=len(tokens))

    def _open_nested(self, tokens):
        item = self.items[-1]
        if len(tokens) == 2:
            self._opening_comment(item, tokens[0].text)
        item.whitespace.after += tokens[-1].text
        self.state = State.BEFORE_NESTED_VALUE
        return Result(consumed=len(tokens))

    def _push(self, child: '_CollectionNode'):
        item = self.items[-1]
        _hoist(item.whitespace, child.whitespace, 'before')
        item.value = child
        self.state = State.AFTER_NESTED_VALUE
        return Result(push=child)

    def _nested_map(self, tokens):
        return self._push(MapNode(self.nesting + 1, self.document))

    def _nested_list(self, tokens):
        return self._push(ListNode(self.nesting + 1, self.document))

    def _extra_line(self, tokens):
        self.items[-1].whitespace.after += _texts(tokens)
        return Result(consumed=len(tokens))

    def _end_value(self, tokens):
        self.state = State.AFTER_ITEM
        return Result()

    def _next_line(self, tokens):
        padding = tokens[0] if tokens[0].type is TokenType.PADDING else None
        depth = self._depth(padding)
        if depth == self.nesting:
            self.state = State.BEFORE_INDENT
            return Result()
        if depth < self.nesting:
            # Leaving this node; trailing lines belong to it, not its last item
            _hoist(self.items[-1].whitespace, self.whitespace, 'after')
            return Result(pop=True)
        raise InvalidIndent(f"Indentation {padding.text!r} is too deep", padding.line, padding.col)

    def _end_document(self, tokens):
        item = self.items[-1]
        if len(tokens) == 2:
            item.whitespace.after += tokens[0].text
        _hoist(item.whitespace, self.whitespace, 'after')
        return Result(consumed=len(tokens) - 1, pop=True)

    shared_rules = {
        State.BEFORE_INDENT: [
            Rule((optional(TokenType.PADDING),), _indent),
        ],
        State.BEFORE_VALUE: [
            Rule((optional(TokenType.PADDING), PRIMITIVE), _inline_value),
            Rule((optional(TokenType.LINE_END), TokenType.NEWLINE), _open_nested),
        ],
        State.BEFORE_NESTED_VALUE: [
            Rule((TokenType.PADDING, KEY), _nested_map),
            Rule((TokenType.PADDING, TokenType.DASH), _nested_list),
            Rule((optional(TokenType.LINE_END), TokenType.NEWLINE), _extra_line),
        ],
        State.AFTER_VALUE: [
            Rule((optional(TokenType.LINE_END), TokenType.NEWLINE), _extra_line),
            Rule((), _end_value),
        ],
        State.AFTER_NESTED_VALUE: [
            Rule((), _end_value),
        ],
        State.AFTER_ITEM: [
            Rule((optional(TokenType.PADDING), OneOf(TokenType.STRING, TokenType.SYMBOL, TokenType.DASH)), _next_line),
            Rule((optional(TokenType.LINE_END), TokenType.END), _end_document),
        ],
    }

class MapNode(_CollectionNode):
    kind = 'Map'
    item_state = State.BEFORE_KEY

    def _key(self, tokens):
        item = MapItem(KeyNode(tokens[0]))
        if tokens[1].type is TokenType.PADDING:
            item.key.whitespace.inner = tokens[1].text
        self._append(item)
        self.state = State.BEFORE_VALUE
        return Result(consumed=len(tokens))

    def _opening_comment(self, item, text):
        item.key.whitespace.after = text

    def get_data(self) -> Dict[str, Any]:
        return {item.key.get_data(): item.value.get_data() for item in self.items}

    def get_ast(self) -> Dict[str, Any]:
        return {
            'type': 'Map',
            'whitespace': self.whitespace.to_ast(),
            'value': [item.get_ast() for item in self.items],
        }

    rules = {
        **_CollectionNode.shared_rules,
        State.BEFORE_KEY: [
            Rule((KEY, optional(TokenType.PADDING), TokenType.COLON), _key),
        ],
    }

class ListNode(_CollectionNode):
    kind = 'List'
    item_state = State.BEFORE_DASH

    def _dash(self, tokens):
        self._append(ListItem())
        self.state = State.BEFORE_VALUE
        return Result(consumed=len(tokens))

    def _opening_comment(self, item, text):
        item.whitespace.inner = text

    def get_data(self) -> List[Any]:
        return [item.value.get_data() for item in self.items]

    def get_ast(self) -> Dict[str, Any]:
        return {
            'type': 'List',
            'whitespace': self.whitespace.to_ast(),
            'value': [item.get_ast() for item in self.items],
        }

    rules = {
        **_CollectionNode.shared_rules,
        State.BEFORE_DASH: [
            Rule((TokenType.DASH,), _dash),
        ],
    }

class DocumentNode(Node):
    kind = 'Document'

    def __init__(self):
        super().__init__()
        self.state = State.BEFORE_VALUE
        self.value = None
        self.indent = None

    def _adopt(self, child):
        # Leading lines move to the child so the document only keeps the indent
        child.whitespace.before = self.whitespace.before + child.whitespace.before
        self.whitespace.before = ''
        self.value = child
        self.state = State.AFTER_VALUE

    def _map(self, tokens):
        self._adopt(MapNode(0, self))
        return Result(push=self.value)

    def _list(self, tokens):
        self._adopt(ListNode(0, self))
        return Result(push=self.value)

    def _value(self, tokens):
        self._adopt(ValueNode(tokens[0]))
        return Result(consumed=1)

    def _leading_line(self, tokens):
        self.whitespace.before += _texts(tokens)
        return Result(consumed=len(tokens))

    def _trailing(self, tokens):
        self.value.whitespace.after += tokens[0].text
        return Result(consumed=1)

    def _end(self, tokens):
        return Result(consumed=1, pop=True)

    def get_data(self) -> Any:
        return self.value.get_data()

    def get_ast(self) -> Dict[str, Any]:
        return {
            'type': 'Document',
            'indent': self.indent,
            'whitespace': self.whitespace.to_ast(),
            'value': self.value.get_ast(),
        }

    def to_source(self) -> str:
        return reconstruct(self.get_ast())

    rules = {
        State.BEFORE_VALUE: [
            Rule((KEY, optional(TokenType.PADDING), TokenType.COLON), _map),
            Rule((TokenType.DASH,), _list),
            Rule((PRIMITIVE, optional(TokenType.LINE_END), OneOf(TokenType.NEWLINE, TokenType.END)), _value),
            Rule((optional(TokenType.LINE_END), TokenType.NEWLINE), _leading_line),
        ],
        State.AFTER_VALUE: [
            Rule((OneOf(TokenType.LINE_END, TokenType.NEWLINE),), _trailing),
            Rule((TokenType.END,), _end),
        ],
    }

# ==========================================
# Parse Driver
# ==========================================

def _describe(tokens) -> str:
    return ' '.join(f'{t.type.name}({t.text!r})' if t.text else t.type.name for t in tokens)

def parse(tokens: List[Token]) -> DocumentNode:
    """Run the node stack over a token list and return the completed document."""
    document = DocumentNode()
    stack: List[Node] = [document]
    start = end = 0

    while start < len(tokens) or stack:
        window = tokens[start:end + 1]
        if not stack:
            token = tokens[start]
            raise EmptyStack(f"No open node left for {_describe(window)}", token.line, token.col)

        current = stack[-1]
        state = current.state
        step = current.advance(window)

        if step is not None:
            result = step.result
            if result.consumed > step.length:
                raise ConsumedExceedsMatched(
                    f"{current.kind} {state.value} consumed {result.consumed} tokens "
                    f"but only {step.length} matched"
                )
            _LOGGER.debug("%s %s: matched %d, consumed %d%s%s", current.kind, state.value, step.length,
                          result.consumed, ', push ' + result.push.kind if result.push else '',
                          ', pop' if result.pop else '')
            if result.pop:
                stack.pop()
            if result.push is not None:
                stack.append(result.push)
            start += result.consumed
            if start > end:
                end += 1
        else:
            if len(window) >= current.matchable_tokens():
                token = window[0]
                raise ParseError(
                    f"Unexpected {_describe(window)} in {current.kind} ({state.value})",
                    token.line, token.col, node=current, state=state, window=window,
                )
            _LOGGER.debug("%s %s: undecided, growing lookahead", current.kind, state.value)
            end += 1

        if end > len(tokens):
            token = tokens[-1] if tokens else Token(TokenType.END, '')
            raise UnexpectedEndOfDocument(
                f"Unexpected end of document in {current.kind} ({current.state.value})",
                token.line, token.col, node=current, state=current.state, window=window,
            )

    return document

# ==========================================
# Source Reconstruction
# ==========================================

def _emit(ast: Dict[str, Any], parts: List[str]):
    whitespace = ast.get('whitespace', {})
    node_type = ast['type']
    parts.append(whitespace.get('before', ''))

    if node_type == 'Document':
        _emit(ast['value'], parts)
    elif node_type in ('Map', 'List'):
        for item in ast['value']:
            _emit(item, parts)
    elif node_type == 'MapItem':
        key = ast['key']
        key_ws = key.get('whitespace', {})
        parts.extend((key_ws.get('before', ''), key['raw'], key_ws.get('inner', ''), ':', key_ws.get('after', '')))
        _emit(ast['value'], parts)
    elif node_type == 'ListItem':
        parts.extend(('-', whitespace.get('inner', '')))
        _emit(ast['value'], parts)
    elif node_type == 'Value':
        parts.append(ast['raw'])
    else:
        raise ValueError(f"Unknown AST node type: {node_type!r}")

    parts.append(whitespace.get('after', ''))

def reconstruct(ast: Dict[str, Any]) -> str:
    """Rebuild the exact source text from an AST produced by `get_ast()`."""
    parts: List[str] = []
    _emit(ast, parts)
    return ''.join(parts)

# ==========================================
# Public API
# ==========================================

def tokenize(source: str) -> List[Token]:
    """Split YASON source into tokens, ending with an END sentinel."""
    return _YasonLexer(source).tokenize()

def decode(source: str) -> Any:
    """Parse YASON source string into plain Python data."""
    return parse(tokenize(source)).get_data()

def loads(source: str) -> Any:
    """Parse YASON source string."""
    return decode(source)

def load(fp: TextIO) -> Any:
    """Parse YASON from a file-like object."""
    return loads(fp.read())

# ==========================================
# CLI
# ==========================================

def _configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='yason', description="Decode a YASON document to JSON")
    parser.add_argument("path", nargs="?", default="-", help="File to read ('-' for stdin)")
    parser.add_argument("--ast", action="store_true", help="Print the lossless AST instead of the value")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)

    if args.path == "-":
        source = sys.stdin.read()
    else:
        with open(args.path, "r", encoding="utf-8", newline="") as f:
            source = f.read()

    try:
        document = parse(tokenize(source))
    except YasonError as exc:
        _LOGGER.error("%s: %s", args.path, exc)
        return 1

    output = document.get_ast() if args.ast else document.get_data()
    print(json.dumps(output, indent=2 if args.pretty else None, ensure_ascii=False))
    return 0

if __name__ == '__main__':
    sys.exit(main())
