"""Width-aware layout of documents into a stream of ``SText`` and
``SLine`` tokens.

The document is traversed with an explicit work stack of
``(indent, doc)`` pairs, so deeply nested documents don't hit the
interpreter's recursion limit. The work stack is a linked list of
tuples: ``((indent, doc), rest)``, or ``None`` when empty. Taking a
snapshot of it is free, which is what makes speculation cheap.

When a group (``Union``) is reached, its flat branch is laid out
speculatively in a new frame, on top of a snapshot of the remaining
work. The speculative frame stops at its first line break, as soon as
it runs past the page width, or when there is no work left. If its
tokens fit, they are committed together with the frame's state;
otherwise the frame is thrown away and the expanded branch is laid out
instead. Frames live on their own stack, so groups met while
speculating open nested frames without recursion.

Since a speculative frame never looks past the end of the current line,
the cost of deciding a group is bounded by the line it starts on, and
total work stays linear in the size of the output.
"""
import logging

from .api import cast_doc
from .doc import (
    Concat,
    Contextual,
    FlatAlt,
    HardLine,
    Nest,
    Nil,
    Text,
    Union,
)
from .flatten import flatten
from .sdoc import SLine, SText

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 79


def fits(sdocs, width):
    """Returns True if the text in ``sdocs`` up to the first line break
    takes at most ``width`` columns."""
    for sdoc in sdocs:
        if isinstance(sdoc, SLine):
            return True
        width -= len(sdoc.value)
        if width < 0:
            return False
    return True


class _Frame:
    __slots__ = (
        'column',
        'row',
        'work',
        'tokens',
        'origin',
        'start_column',
        'halted',
        'steps',
    )

    def __init__(self, column, row, work, origin=None):
        self.column = column
        self.row = row
        self.work = work
        self.tokens = []
        # (indent, union) this frame speculates on, None for the root frame
        self.origin = origin
        self.start_column = column
        self.halted = False
        self.steps = 0

    @property
    def speculative(self):
        return self.origin is not None

    def speculate(self, indent, union):
        return _Frame(
            self.column,
            self.row,
            ((indent, union.flat), self.work),
            origin=(indent, union),
        )

    def commit(self, frame):
        self.tokens.extend(frame.tokens)
        self.column = frame.column
        self.row = frame.row
        self.work = frame.work

    def context(self, source, indent):
        if source == 'column':
            return self.column
        elif source == 'row':
            return self.row
        return indent

    def advance(self, width):
        """Processes work until the frame stops or a group is reached.

        Returns the speculative frame for the group, or None when this
        frame has stopped."""
        while self.work is not None and not self.halted:
            self.steps += 1
            (indent, doc), self.work = self.work

            if isinstance(doc, Nil):
                continue
            elif isinstance(doc, Text):
                self.tokens.append(SText(doc.value))
                self.column += len(doc.value)
                if self.speculative and self.column > width:
                    self.halted = True
            elif isinstance(doc, HardLine):
                self.tokens.append(SLine(indent))
                self.column = indent
                self.row += 1
                if self.speculative:
                    self.halted = True
            elif isinstance(doc, Nest):
                self.work = ((indent + doc.indent, doc.doc), self.work)
            elif isinstance(doc, Concat):
                self.work = ((indent, doc.left), ((indent, doc.right), self.work))
            elif isinstance(doc, FlatAlt):
                self.work = ((indent, doc.primary), self.work)
            elif isinstance(doc, Union):
                return self.speculate(indent, doc)
            elif isinstance(doc, Contextual):
                resolved = cast_doc(doc.fn(self.context(doc.source, indent)))
                if doc.is_flat:
                    resolved = flatten(resolved)
                self.work = ((indent, resolved), self.work)
            else:
                raise TypeError(f'Unknown document node {repr(doc)}')
        return None

    def resume(self, frame, width):
        """Decides the group ``frame`` speculated on, now that it has
        stopped."""
        indent, union = frame.origin
        fits_flat = fits(frame.tokens, width - frame.start_column)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                'group at column %d laid out %s',
                frame.start_column,
                'flat' if fits_flat else 'broken',
            )

        if fits_flat:
            self.commit(frame)
            if (
                self.speculative and
                frame.tokens and
                isinstance(frame.tokens[-1], SLine)
            ):
                self.halted = True
        else:
            self.work = ((indent, union.expanded), self.work)


def layout_smart(doc, width=DEFAULT_WIDTH):
    """Lays out ``doc`` within ``width`` columns, choosing for each group
    whether it goes on a single line. Returns a tuple of ``SText`` and
    ``SLine`` tokens."""
    if not isinstance(width, int):
        raise TypeError(
            f"Got width {repr(width)} of type {type(width).__name__}, "
            "expected 'int'"
        )

    root = _Frame(0, 0, ((0, cast_doc(doc)), None))
    frames = [root]
    steps = 0

    while frames:
        frame = frames[-1]
        child = frame.advance(width)
        if child is not None:
            frames.append(child)
            continue

        frames.pop()
        steps += frame.steps
        if frames:
            frames[-1].resume(frame, width)

    logger.debug(
        'laid out %d tokens at width %d in %d steps',
        len(root.tokens),
        width,
        steps,
    )
    return tuple(root.tokens)
