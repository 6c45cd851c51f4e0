class ConstructionError(ValueError):
    """Raised when a document node is built from input that violates
    the document invariants, e.g. a text run containing a line separator
    or a negative nesting indent."""


CONTEXT_SOURCES = ('column', 'row', 'indent')

_LINE_SEPARATORS = ('\n', '\r')


class Doc:
    __slots__ = ()

    is_flat = True

    def __add__(self, other):
        from .api import concat
        return concat(self, other)

    def __radd__(self, other):
        from .api import concat
        return concat(other, self)

    def cat(self, other):
        from .api import concat
        return concat(self, other)

    def cat_with_line(self, other):
        from .api import concat_with_line
        return concat_with_line(self, other)

    def cat_with_space(self, other):
        from .api import concat_with_space
        return concat_with_space(self, other)

    def nest(self, indent):
        return Nest(indent, self)

    def group(self):
        from .api import group
        return group(self)

    def flatten(self):
        from .flatten import flatten
        return flatten(self)

    def pretty(self, width):
        from .render import render
        return render(self, width)


class Nil(Doc):
    __slots__ = ()

    def __eq__(self, other):
        return isinstance(other, Nil)

    def __hash__(self):
        return hash(Nil)

    def __repr__(self):
        return 'NIL'


NIL = Nil()


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        if any(sep in value for sep in _LINE_SEPARATORS):
            raise ConstructionError(
                f"Text {repr(value)} contains a line separator; "
                "use HARDLINE or LINE to break lines"
            )
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Text) and self.value == other.value

    def __hash__(self):
        return hash((Text, self.value))

    def __repr__(self):
        return f'Text({repr(self.value)})'


class HardLine(Doc):
    __slots__ = ()

    def __eq__(self, other):
        return isinstance(other, HardLine)

    def __hash__(self):
        return hash(HardLine)

    def __repr__(self):
        return 'HARDLINE'


HARDLINE = HardLine()


class Nest(Doc):
    __slots__ = ('indent', 'doc', 'is_flat')

    def __init__(self, indent, doc):
        if not isinstance(indent, int):
            raise TypeError(
                f"Got indent {repr(indent)} of type "
                f"{type(indent).__name__}, expected 'int'"
            )
        if indent < 0:
            raise ConstructionError(
                f'Nest indent must be non-negative, got {indent}'
            )
        assert isinstance(doc, Doc)

        self.indent = indent
        self.doc = doc
        self.is_flat = doc.is_flat

    def __eq__(self, other):
        return (
            isinstance(other, Nest) and
            self.indent == other.indent and
            self.doc == other.doc
        )

    __hash__ = None

    def __repr__(self):
        return f'Nest({repr(self.indent)}, {repr(self.doc)})'


class Concat(Doc):
    __slots__ = ('left', 'right', 'is_flat')

    def __init__(self, left, right):
        assert isinstance(left, Doc)
        assert isinstance(right, Doc)

        self.left = left
        self.right = right
        self.is_flat = left.is_flat and right.is_flat

    def __eq__(self, other):
        return (
            isinstance(other, Concat) and
            self.left == other.left and
            self.right == other.right
        )

    __hash__ = None

    def __repr__(self):
        return f'Concat({repr(self.left)}, {repr(self.right)})'


class FlatAlt(Doc):
    """Lays out as ``primary``, unless the document has been flattened,
    in which case ``alternate`` takes its place."""
    __slots__ = ('primary', 'alternate')

    is_flat = False

    def __init__(self, primary, alternate):
        assert isinstance(primary, Doc)
        assert isinstance(alternate, Doc)

        self.primary = primary
        self.alternate = alternate

    def __eq__(self, other):
        return (
            isinstance(other, FlatAlt) and
            self.primary == other.primary and
            self.alternate == other.alternate
        )

    __hash__ = None

    def __repr__(self):
        return (
            f'FlatAlt(primary={repr(self.primary)}, '
            f'alternate={repr(self.alternate)})'
        )


class Union(Doc):
    """A layout choice: ``flat`` if it fits on the current line,
    ``expanded`` otherwise. Built by ``group``, which keeps ``flat``
    equal to the flattened ``expanded``."""
    __slots__ = ('flat', 'expanded')

    is_flat = False

    def __init__(self, flat, expanded):
        assert isinstance(flat, Doc)
        assert isinstance(expanded, Doc)

        self.flat = flat
        self.expanded = expanded

    def __eq__(self, other):
        return (
            isinstance(other, Union) and
            self.flat == other.flat and
            self.expanded == other.expanded
        )

    __hash__ = None

    def __repr__(self):
        return f'Union({repr(self.flat)}, {repr(self.expanded)})'


class Contextual(Doc):
    """A document computed from the position it is laid out at.

    ``fn`` is called with the current column, row or indentation level,
    as named by ``source``, when the layout engine reaches the node.
    A flattened contextual flattens whatever ``fn`` returns."""
    __slots__ = ('fn', 'source', 'is_flat')

    def __init__(self, fn, source='column', is_flat=False):
        if not callable(fn):
            raise TypeError(f'Expected a callable, got {repr(fn)}')
        if source not in CONTEXT_SOURCES:
            raise ValueError(
                f"Unknown context source {repr(source)}, expected one of "
                f"{', '.join(CONTEXT_SOURCES)}"
            )
        self.fn = fn
        self.source = source
        self.is_flat = is_flat

    def __eq__(self, other):
        return (
            isinstance(other, Contextual) and
            self.fn is other.fn and
            self.source == other.source and
            self.is_flat == other.is_flat
        )

    __hash__ = None

    def __repr__(self):
        flat = ', flat' if self.is_flat else ''
        return f'Contextual({repr(self.fn)}, {self.source}{flat})'


LINE = FlatAlt(HARDLINE, Text(' '))
LINEBREAK = FlatAlt(HARDLINE, NIL)
