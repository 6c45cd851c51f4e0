from io import StringIO

from .layout import DEFAULT_WIDTH, layout_smart
from .sdoc import (
    SText,
    SLine,
)


def default_render_to_stream(stream, sdocs, newline='\n', separator=' '):
    for sdoc in sdocs:
        if isinstance(sdoc, SText):
            stream.write(sdoc.value)
        elif isinstance(sdoc, SLine):
            stream.write(newline + separator * sdoc.indent)


def default_render_to_str(sdocs, newline='\n', separator=' '):
    stream = StringIO()
    default_render_to_stream(stream, sdocs, newline, separator)
    return stream.getvalue()


def render(doc, width=DEFAULT_WIDTH, *, newline='\n', separator=' '):
    """Lays out ``doc`` within ``width`` columns and returns the result
    as a string."""
    return default_render_to_str(
        layout_smart(doc, width=width),
        newline=newline,
        separator=separator,
    )
