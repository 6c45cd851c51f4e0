# -*- coding: utf-8 -*-

"""Top-level package for prettydoc."""

__version__ = '0.1.0'

import sys

from .api import (
    align,
    bracket,
    cast_doc,
    column,
    concat,
    concat_with_line,
    concat_with_space,
    empty,
    fillsep,
    flat_alt,
    group,
    hang,
    hard_line,
    hcat,
    hsep,
    indent,
    intersperse,
    line,
    line_break,
    nest,
    nesting,
    row,
    sep,
    soft_line,
    soft_line_break,
    text,
    vsep,
)
from .doc import (
    ConstructionError,
    Doc,
    NIL,
    LINE,
    LINEBREAK,
    HARDLINE,
)
from .flatten import flatten
from .layout import DEFAULT_WIDTH, fits, layout_smart
from .render import (
    default_render_to_str,
    default_render_to_stream,
    render,
)


__all__ = [
    'ConstructionError',
    'DEFAULT_WIDTH',
    'Doc',
    'NIL',
    'LINE',
    'LINEBREAK',
    'HARDLINE',
    'align',
    'bracket',
    'cast_doc',
    'column',
    'concat',
    'concat_with_line',
    'concat_with_space',
    'default_render_to_str',
    'default_render_to_stream',
    'empty',
    'fillsep',
    'fits',
    'flat_alt',
    'flatten',
    'group',
    'hang',
    'hard_line',
    'hcat',
    'hsep',
    'indent',
    'intersperse',
    'layout_smart',
    'line',
    'line_break',
    'nest',
    'nesting',
    'pformat',
    'pprint',
    'render',
    'row',
    'sep',
    'soft_line',
    'soft_line_break',
    'text',
    'vsep',
]


pformat = render


def pprint(
    doc,
    stream=None,
    width=DEFAULT_WIDTH,
    *,
    newline='\n',
    separator=' ',
    end='\n'
):
    sdocs = layout_smart(doc, width=width)
    if stream is None:
        stream = sys.stdout
    default_render_to_stream(stream, sdocs, newline, separator)
    if end:
        stream.write(end)
