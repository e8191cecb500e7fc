"""Property-based tests for lexer/parser invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from sexpy.ast import CallExpression, Identifier, NumericLiteral, StringLiteral, TreeElement, depth
from sexpy.format import format_tree
from sexpy.lexer import lex, tokenize
from sexpy.options import U32_MAX, ParseMode
from sexpy.parser import parse
from sexpy.pipeline import parse_source

names = st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=1, max_size=8)
leaves = st.one_of(
    st.integers(min_value=0, max_value=U32_MAX).map(NumericLiteral),
    names.map(Identifier),
    st.text(max_size=12).filter(lambda s: '"' not in s).map(StringLiteral),
)
calls = st.recursive(
    st.builds(lambda name: CallExpression(name, ()), names),
    lambda children: st.builds(
        lambda name, args: CallExpression(name, tuple(args)),
        names,
        st.lists(st.one_of(leaves, children), max_size=4),
    ),
    max_leaves=20,
)


def _paren_depth(text: str) -> int:
    current = deepest = 0
    in_string = False
    for ch in text:
        if ch == '"':
            in_string = not in_string
        elif in_string:
            continue
        elif ch == "(":
            current += 1
            deepest = max(deepest, current)
        elif ch == ")":
            current -= 1
    return deepest


@given(calls)
@settings(max_examples=200)
def test_formatted_trees_parse_back_to_the_same_tree(tree: TreeElement) -> None:
    assert parse(tokenize(format_tree(tree))) == tree


@given(calls)
@settings(max_examples=200)
def test_call_depth_equals_parenthesis_depth(tree: TreeElement) -> None:
    source = format_tree(tree)
    root = parse(tokenize(source))

    assert root is not None
    assert depth(root) == _paren_depth(source)


@given(st.text(max_size=300))
@settings(max_examples=200)
def test_parse_source_never_raises(source: str) -> None:
    for mode in ParseMode:
        result = parse_source(source, mode=mode)
        for diagnostic in result.diagnostics:
            start, end = diagnostic.range.as_tuple()
            assert 0 <= start <= end <= len(source)


@given(st.text(alphabet='()" abc123\n_+', max_size=200))
@settings(max_examples=200)
def test_lexing_and_parsing_are_deterministic(source: str) -> None:
    assert lex(source) == lex(source)

    first = parse_source(source, mode=ParseMode.PERMISSIVE)
    second = parse_source(source, mode=ParseMode.PERMISSIVE)
    assert first.root == second.root
    assert first.diagnostics == second.diagnostics


@given(st.text(alphabet='()" ab12', max_size=200))
@settings(max_examples=200)
def test_tokens_are_in_source_order(source: str) -> None:
    tokens, _ = lex(source, mode=ParseMode.PERMISSIVE)
    offsets = [token.range.as_tuple() for token in tokens]

    assert offsets == sorted(offsets)
    for (_, end), (start, _) in zip(offsets, offsets[1:]):
        assert end <= start
