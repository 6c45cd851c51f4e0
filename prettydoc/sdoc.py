class SDoc:
    """A token of laid out output."""
    __slots__ = ()


class SText(SDoc):
    __slots__ = ('value', )

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, SText) and self.value == other.value

    def __hash__(self):
        return hash((SText, self.value))

    def __repr__(self):
        return f'SText({repr(self.value)})'


class SLine(SDoc):
    """A line break, followed by ``indent`` columns of indentation."""
    __slots__ = ('indent', )

    def __init__(self, indent):
        assert isinstance(indent, int)
        self.indent = indent

    def __eq__(self, other):
        return isinstance(other, SLine) and self.indent == other.indent

    def __hash__(self):
        return hash((SLine, self.indent))

    def __repr__(self):
        return f'SLine({repr(self.indent)})'
