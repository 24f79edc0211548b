"""
Lossless AST test suite
Run with: pytest tests/test_ast.py
"""
import sys
import os
import pytest
from textwrap import dedent

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import yason

def ast_of(src):
    return yason.parse(yason.tokenize(src)).get_ast()

def value(data, raw, **whitespace):
    return {'type': 'Value', 'whitespace': whitespace, 'value': data, 'raw': raw}

def key(data, raw=None, **whitespace):
    return {'type': 'Key', 'symbol': raw is None, 'whitespace': whitespace, 'value': data, 'raw': raw or data}

# ==========================================
# 1. AST Shapes
# ==========================================

def test_primitive_document():
    assert ast_of('\n# Before\n"Hi"  # Inline\n\n# After') == {
        'type': 'Document',
        'indent': None,
        'whitespace': {},
        'value': value('Hi', '"Hi"', before='\n# Before\n', after='  # Inline\n\n# After'),
    }

def test_map():
    assert ast_of('foo: null\n"zig zag": "Hello World"') == {
        'type': 'Document',
        'indent': None,
        'whitespace': {},
        'value': {
            'type': 'Map',
            'whitespace': {},
            'value': [
                {
                    'type': 'MapItem',
                    'whitespace': {},
                    'key': key('foo'),
                    'value': value(None, 'null', before=' '),
                },
                {
                    'type': 'MapItem',
                    'whitespace': {'before': '\n'},
                    'key': key('zig zag', '"zig zag"'),
                    'value': value('Hello World', '"Hello World"', before=' '),
                },
            ],
        },
    }

def test_trailing_comment_is_whitespace_only():
    document = yason.parse(yason.tokenize('key: "value" # note'))
    assert document.get_data() == {'key': 'value'}
    item = document.get_ast()['value']['value'][0]
    assert item['whitespace'] == {'after': ' # note'}

def test_map_with_comments():
    src = dedent("""\
    # Before document
    foo: null
    bar: "Hello World" # Inline comment

    # Section comment
    "zig zag" :3.142 # Final inline comment
    # After document

    """)
    tree = ast_of(src)['value']
    assert tree['whitespace'] == {'before': '# Before document\n', 'after': '\n# After document\n\n'}
    first, second, third = tree['value']
    assert first['whitespace'] == {}
    assert second['whitespace'] == {'before': '\n', 'after': ' # Inline comment'}
    assert third['whitespace'] == {'before': '\n\n# Section comment\n', 'after': ' # Final inline comment'}
    assert third['key'] == key('zig zag', '"zig zag"', inner=' ')
    assert third['value'] == value(3.142, '3.142')

def test_list_with_comments():
    src = dedent("""\
    # Before document
    - -3.142 # Inline comment

    # Section comment
    - false
    -  null
    # After document""")
    assert ast_of(src)['value'] == {
        'type': 'List',
        'whitespace': {'before': '# Before document\n', 'after': '\n# After document'},
        'value': [
            {
                'type': 'ListItem',
                'whitespace': {'after': ' # Inline comment'},
                'value': value(-3.142, '-3.142', before=' '),
            },
            {
                'type': 'ListItem',
                'whitespace': {'before': '\n\n# Section comment\n'},
                'value': value(False, 'false', before=' '),
            },
            {
                'type': 'ListItem',
                'whitespace': {'before': '\n'},
                'value': value(None, 'null', before='  '),
            },
        ],
    }

def test_nested_map_with_comments():
    src = dedent("""\
    foo: "Hello"
    bar: # Key comment
      # Block comment
        zim:
            gir: 123
            zig: 1E5 # Final nested item comment

    # Closing comment
    zip: true # Final item comment""")
    document = ast_of(src)
    assert document['indent'] == '    '

    foo, bar, zip_ = document['value']['value']
    assert bar['key'] == key('bar', after=' # Key comment')
    assert bar['whitespace'] == {'before': '\n'}

    outer = bar['value']
    assert outer['whitespace'] == {'before': '\n  # Block comment\n'}
    zim = outer['value'][0]
    assert zim['whitespace'] == {'before': '    '}

    inner = zim['value']
    assert inner['whitespace'] == {'before': '\n', 'after': '\n\n# Closing comment\n'}
    gir, zig = inner['value']
    assert gir['whitespace'] == {'before': '        '}
    assert zig['whitespace'] == {'before': '\n        ', 'after': ' # Final nested item comment'}
    assert zig['value'] == value(100000.0, '1E5', before=' ')

    assert zip_['whitespace'] == {'after': ' # Final item comment'}

def test_list_item_comment_after_dash():
    src = '- # Item comment\n  - 1\n- 2'
    document = ast_of(src)
    first = document['value']['value'][0]
    assert first['whitespace'] == {'inner': ' # Item comment'}
    assert first['value']['type'] == 'List'
    assert first['value']['whitespace'] == {'before': '\n', 'after': '\n'}
    assert document['indent'] == '  '

def test_tab_indent_recorded():
    assert ast_of('a:\n\t- 1')['indent'] == '\t'

def test_unknown_ast_node():
    with pytest.raises(ValueError):
        yason.reconstruct({'type': 'Bogus'})

# ==========================================
# 2. Round Trip
# ==========================================

ROUND_TRIP = [
    'null',
    '123  ',
    '\n\n"text" # c\n',
    '- "Hello \\"World\\""\n- 123\n- null',
    'foo: null\n"zig zag": "Hello World"',
    'foo:null\n\n"zig zag"  :   "Hello World"\n',
    '# head\n\n- 1 # one\n\n\n# two\n-  2\n# tail\n\n',
    'bar:\n  zim:\n    gir: 123',
    'a:\n  b: 1\n# between\nc: 2\n',
    'a:\n\t- 1\n\t-\n\t\tb: true\n\t\t# x\n\t\tc: false\n\n',
    'a:\r\n  - 1 # c\r\n  - 2\r\n\r\nb: null\r\n',
    '-   \n    - false\n- 1',
    '- # Item comment\n  - 1\n- 2 # last',
    'key: "value" # note',
    'a: 1   \n   \nb: 2\t\n',
    dedent("""\
    # Before document
    - null
    - # List item comment
        foo: "Hello" # Value comment
        bar: # Key comment
            # List comment
            - -1E-3

            # Section comment
            -  true # Inline comment
            -
                - false
        zim:
            gir: true
    - 123
    # After document

    """),
]

@pytest.mark.parametrize('src', ROUND_TRIP)
def test_round_trip(src):
    document = yason.parse(yason.tokenize(src))
    assert yason.reconstruct(document.get_ast()) == src
    assert document.to_source() == src
