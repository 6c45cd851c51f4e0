from .doc import (
    Concat,
    Contextual,
    FlatAlt,
    Nest,
    Union,
)


def flatten(doc):
    """Returns the single-line form of ``doc``.

    ``FlatAlt`` nodes are replaced by their flattened alternate and
    groups by their flattened flat branch. Contextual documents are
    marked flat, so whatever they resolve to is flattened as well.
    The transform is syntactic: it never looks at widths, and it never
    introduces a ``HARDLINE`` (hard lines already in ``doc`` are kept).

    Sub-documents that are already flat are returned unchanged, and a
    sub-document shared between several parents is flattened once.
    """
    if doc.is_flat:
        return doc

    memo = {}
    results = []
    # (doc, children_done)
    stack = [(doc, False)]

    while stack:
        node, children_done = stack.pop()

        if node.is_flat:
            results.append(node)
            continue

        key = id(node)
        if key in memo:
            results.append(memo[key])
            continue

        if isinstance(node, Contextual):
            res = Contextual(node.fn, node.source, is_flat=True)
        elif not children_done:
            stack.append((node, True))
            if isinstance(node, Concat):
                stack.append((node.right, False))
                stack.append((node.left, False))
            elif isinstance(node, Nest):
                stack.append((node.doc, False))
            elif isinstance(node, FlatAlt):
                stack.append((node.alternate, False))
            elif isinstance(node, Union):
                stack.append((node.flat, False))
            else:
                raise TypeError(f'Unknown document node {repr(node)}')
            continue
        elif isinstance(node, Concat):
            right = results.pop()
            left = results.pop()
            res = Concat(left, right)
        elif isinstance(node, Nest):
            res = Nest(node.indent, results.pop())
        else:
            # FlatAlt and Union both resolve to their flattened branch.
            res = results.pop()

        memo[key] = res
        results.append(res)

    assert len(results) == 1
    return results[0]
