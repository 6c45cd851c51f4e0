from .doc import (
    Concat,
    Contextual,
    Doc,
    FlatAlt,
    Nest,
    Text,
    Union,
    NIL,
    LINE,
    LINEBREAK,
    HARDLINE,
)
from .flatten import flatten


def cast_doc(doc):
    """Casts value to doc, if possible."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if doc == "":
            return NIL
        return Text(doc)

    raise TypeError(
        f"Got {repr(doc)} of type {type(doc).__name__}, "
        "expected 'str' or 'Doc'"
    )


def intersperse(sep, docs):
    """Yields the items of ``docs`` with ``sep`` between each two."""
    for i, doc in enumerate(docs):
        if i:
            yield sep
        yield doc


def empty():
    return NIL


def text(x):
    if not isinstance(x, str):
        raise TypeError("Argument to text function must be a str")
    return Text(x)


def hard_line():
    return HARDLINE


def line():
    """A line break that is laid out as a single space when its
    enclosing group is flattened."""
    return LINE


def line_break():
    """A line break that disappears when its enclosing group is
    flattened."""
    return LINEBREAK


def soft_line():
    """A space if the rest of the line fits, a line break otherwise."""
    return group(LINE)


def soft_line_break():
    """Nothing if the rest of the line fits, a line break otherwise."""
    return group(LINEBREAK)


def concat(a, b):
    """Returns ``a`` immediately followed by ``b``."""
    return Concat(cast_doc(a), cast_doc(b))


def concat_with_line(a, b):
    return concat(concat(a, LINE), b)


def concat_with_space(a, b):
    return concat(concat(a, Text(' ')), b)


def nest(i, doc):
    """Increases the indentation of line breaks inside ``doc`` by ``i``.
    Text already placed on the current line is not moved."""
    return Nest(i, cast_doc(doc))


def group(doc):
    """Annotates doc with special meaning to the layout algorithm, so that the
    document is attempted to output on a single line if it is possible within
    the layout constraints. To lay out the doc on a single line, the
    ``alternate`` branch of ``FlatAlt`` is used."""
    doc = cast_doc(doc)
    return Union(flatten(doc), doc)


def flat_alt(primary, alternate):
    """Gives the layout algorithm two options. ``primary`` is used when the
    enclosing group is broken into multiple lines, and ``alternate`` when
    it is flattened onto a single line."""
    return FlatAlt(cast_doc(primary), cast_doc(alternate))


def _contextual(source, fn):
    def evaluator(value):
        return cast_doc(fn(value))
    return Contextual(evaluator, source)


def column(fn):
    """Returns a Doc that is lazily evaluated during layout.

    ``fn`` receives the column the Doc starts at and must return a
    Doc (or a str)."""
    return _contextual('column', fn)


def row(fn):
    """Like ``column``, but ``fn`` receives the number of line breaks
    laid out before the Doc."""
    return _contextual('row', fn)


def nesting(fn):
    """Like ``column``, but ``fn`` receives the current indentation
    level."""
    return _contextual('indent', fn)


def align(doc):
    """Aligns each new line in ``doc`` with the column ``doc`` starts at.
    """
    doc = cast_doc(doc)

    def at_column(col):
        return nesting(lambda indent: Nest(max(col - indent, 0), doc))
    return column(at_column)


def hang(i, doc):
    return align(nest(i, doc))


def indent(i, doc):
    return hang(i, concat(' ' * i, doc))


def hcat(docs):
    """Returns a concatenation of the documents in the iterable argument"""
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return NIL
    acc = docs[-1]
    for doc in reversed(docs[:-1]):
        acc = Concat(doc, acc)
    return acc


def hsep(docs):
    return hcat(intersperse(' ', docs))


def vsep(docs):
    return hcat(intersperse(LINE, docs))


def sep(docs):
    """Lays out ``docs`` separated by spaces if they all fit on the line,
    each on its own line otherwise."""
    return group(vsep(docs))


def fillsep(docs):
    """Fills lines with as many of ``docs`` as fit, separated by spaces."""
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return NIL
    return hcat(intersperse(soft_line(), docs))


def bracket(left, doc, right, indent=4):
    """Lays out ``left doc right`` on a single line if it fits. Otherwise
    ``doc`` goes on its own lines, indented by ``indent``, between
    ``left`` and ``right``."""
    return group(
        hcat([
            left,
            nest(indent, concat(LINEBREAK, doc)),
            LINEBREAK,
            right,
        ])
    )
