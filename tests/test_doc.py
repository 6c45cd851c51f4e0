import pytest

from prettydoc import (
    ConstructionError,
    HARDLINE,
    LINE,
    NIL,
    concat,
    concat_with_line,
    concat_with_space,
    empty,
    flat_alt,
    flatten,
    group,
    hard_line,
    line,
    line_break,
    nest,
    soft_line,
    soft_line_break,
    text,
)
from prettydoc.api import cast_doc, column
from prettydoc.doc import (
    Concat,
    Contextual,
    FlatAlt,
    Nest,
    Text,
    Union,
)


def test_leaf_constructors():
    assert empty() is NIL
    assert hard_line() is HARDLINE
    assert text('hello') == Text('hello')
    assert text('') == Text('')


def test_line_constructors():
    assert line() == FlatAlt(HARDLINE, Text(' '))
    assert line_break() == FlatAlt(HARDLINE, NIL)
    assert soft_line() == Union(Text(' '), LINE)
    assert soft_line_break() == Union(NIL, FlatAlt(HARDLINE, NIL))


def test_concat_variants():
    a, b = text('a'), text('b')
    assert concat(a, b) == Concat(a, b)
    assert concat_with_line(a, b) == Concat(Concat(a, LINE), b)
    assert concat_with_space(a, b) == Concat(Concat(a, Text(' ')), b)


def test_strings_are_cast_to_docs():
    assert concat('a', 'b') == Concat(Text('a'), Text('b'))
    assert cast_doc('') is NIL
    assert nest(2, 'x') == Nest(2, Text('x'))


def test_cast_doc_rejects_other_values():
    with pytest.raises(TypeError):
        cast_doc(42)

    with pytest.raises(TypeError):
        concat('a', None)


def test_group_pairs_flat_form_with_itself():
    doc = concat_with_line('hello', 'world')
    grouped = group(doc)

    assert isinstance(grouped, Union)
    assert grouped.expanded is doc
    assert grouped.flat == flatten(doc)
    assert grouped.flat == Concat(Concat(Text('hello'), Text(' ')), Text('world'))


def test_method_sugar():
    doc = (
        text('hello')
        .cat_with_line(text('world'))
        .nest(2)
        .cat_with_line(text('!'))
        .group()
    )
    expected = group(
        concat_with_line(
            nest(2, concat_with_line(text('hello'), text('world'))),
            text('!'),
        )
    )
    assert doc == expected
    assert text('a') + 'b' == Concat(Text('a'), Text('b'))
    assert 'a' + text('b') == Concat(Text('a'), Text('b'))
    assert text('a').cat_with_space('b') == concat_with_space('a', 'b')


def test_text_with_line_separator_is_rejected():
    with pytest.raises(ConstructionError):
        text('hello\nworld')

    with pytest.raises(ConstructionError):
        text('carriage\rreturn')

    with pytest.raises(ConstructionError):
        concat('a\n', 'b')


def test_text_requires_str():
    with pytest.raises(TypeError):
        text(1)

    with pytest.raises(TypeError):
        Text(b'bytes')


def test_negative_nest_is_rejected():
    with pytest.raises(ConstructionError):
        nest(-1, text('x'))

    with pytest.raises(ConstructionError):
        text('x').nest(-4)


def test_nest_requires_int():
    with pytest.raises(TypeError):
        nest(1.5, text('x'))


def test_construction_error_is_a_value_error():
    assert issubclass(ConstructionError, ValueError)


def test_contextual_source_is_checked():
    with pytest.raises(ValueError):
        Contextual(lambda col: NIL, source='page')

    with pytest.raises(TypeError):
        Contextual('not callable')


def test_is_flat():
    assert Text('x').is_flat
    assert NIL.is_flat
    assert HARDLINE.is_flat
    assert Concat(Text('a'), Nest(2, Text('b'))).is_flat
    assert not LINE.is_flat
    assert not Concat(Text('a'), LINE).is_flat
    assert not group('a').is_flat
    assert not column(lambda col: 'x').is_flat


def test_flat_alt_accepts_strings():
    assert flat_alt(hard_line(), ', ') == FlatAlt(HARDLINE, Text(', '))


def test_repr():
    assert repr(Concat(Text('a'), NIL)) == "Concat(Text('a'), NIL)"
    assert repr(Nest(2, HARDLINE)) == 'Nest(2, HARDLINE)'
