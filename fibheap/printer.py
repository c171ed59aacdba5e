from collections import deque
from typing import TYPE_CHECKING, Any, Deque, List, Optional

if TYPE_CHECKING:
    from .heap import FibHeap
    from .node import _Node


def _format_value(node: Optional['_Node[Any]']) -> str:
    return 'null' if node is None else str(node.value)


def dump(heap: 'FibHeap[Any]') -> str:
    """
    Dumps the heap structure: heap counters followed by every tree of the root ring
    with its nodes listed in level order.

    :param heap: heap to be dumped
    :return: structure dump, empty for an empty heap
    """

    if heap._front is None or heap._min is None:
        return ''

    lines = [
        "FRONT: %s" % _format_value(heap._front.node),
        "MIN: %s" % _format_value(heap._min.node),
        "NUMELEMS: %d" % heap._count,
        "MAXDEGREE: %d" % heap._max_degree,
    ]

    for number, entry in enumerate(heap._iter_ring(), start=1):
        lines.extend([
            '',
            "TREE %d:" % number,
            "Root: %s" % _format_value(entry.node),
            "Left: %s" % _format_value(entry.left.node),
            "Right: %s" % _format_value(entry.right.node),
            '',
        ])
        lines.extend(_dump_tree(entry.node))

    return '\n'.join(lines) + '\n'


def _dump_tree(root: '_Node[Any]') -> List[str]:
    lines: List[str] = []

    queue: Deque[_Node[Any]] = deque([root])
    while queue:
        node = queue.popleft()
        lines.extend([
            "NODE:",
            "Value: %s" % _format_value(node),
            "Loser: %s" % ('T' if node.loser else 'F'),
            "Parent: %s" % _format_value(node.parent),
            "ChildIndex: %d" % node.child_index,
            "Children: %s" % ', '.join(_format_value(child) for child in node.children),
            "NumChildren: %d" % node.num_children,
            '',
        ])
        queue.extend(child for child in node.children if child is not None)

    return lines
