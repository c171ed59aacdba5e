import dataclasses as dc
import logging
from typing import TYPE_CHECKING, Any, List, Set, Tuple

if TYPE_CHECKING:
    from .heap import FibHeap
    from .node import _Node

logger = logging.getLogger(__package__)


@dc.dataclass(frozen=True)
class ValidationResult:
    """
    Heap validation result.

    :param ok: `True` if no invariant is violated
    :param message: description of the first violation found
    """

    ok: bool
    message: str = ''

    def __bool__(self) -> bool:
        return self.ok


class _Violation(Exception):
    pass


def validate(heap: 'FibHeap[Any]') -> ValidationResult:
    """
    Walks the whole heap structure checking its invariants. The heap is not repaired.

    :param heap: heap to be checked
    :return: validation result
    """

    try:
        _check_heap(heap)
    except _Violation as e:
        logger.warning("heap validation failed: %s", e)
        return ValidationResult(ok=False, message=str(e))

    return ValidationResult(ok=True)


def _check_heap(heap: 'FibHeap[Any]') -> None:
    front, min_entry, count, roots = heap._front, heap._min, heap._count, heap._roots

    if front is None:
        if min_entry is not None:
            raise _Violation("heap is empty but the minimum pointer is set")
        if roots:
            raise _Violation("heap is empty but %d roots are indexed" % len(roots))
        if count != 0:
            raise _Violation("heap is empty but reports %d elements" % count)
        return

    if min_entry is None:
        raise _Violation("heap is not empty but the minimum pointer is null")

    entries = []
    seen: Set[int] = set()
    entry = front
    while True:
        if id(entry) in seen:
            raise _Violation("root ring does not lead back to the front entry")
        seen.add(id(entry))
        entries.append(entry)

        if entry.right.left is not entry:
            raise _Violation("ring entry storing %r is not linked back by its right neighbour" % (entry.node.value,))

        entry = entry.right
        if entry is front:
            break

    if id(min_entry) not in seen:
        raise _Violation("minimum pointer is not in the root ring")

    counted = 0
    for entry in entries:
        if entry.node is None:
            raise _Violation("ring entry points to an empty tree")

        if entry.node.value < min_entry.node.value:
            raise _Violation(
                "minimum points to %r while %r exists" % (min_entry.node.value, entry.node.value),
            )

        if (mapped := roots.get(entry.node)) is not entry:
            if mapped is None:
                raise _Violation("root storing %r is not indexed" % (entry.node.value,))
            raise _Violation(
                "root storing %r is mapped to ring entry storing %r" % (entry.node.value, mapped.node.value),
            )

        counted += _check_tree(heap, entry.node)

    if len(roots) != len(entries):
        raise _Violation("%d roots are indexed but the ring holds %d" % (len(roots), len(entries)))

    if counted != count:
        raise _Violation("heap reports %d elements but actually holds %d" % (count, counted))


def _check_tree(heap: 'FibHeap[Any]', root: '_Node[Any]') -> int:
    """
    Checks the tree the node is the root of.

    :return: number of nodes in the tree
    """

    counted = 0
    stack: List[Tuple[_Node[Any], bool]] = [(root, True)]
    while stack:
        node, is_root = stack.pop()
        value = node.value

        if is_root:
            if node.parent is not None or node.child_index != -1:
                raise _Violation("node storing %r is a root but has a parent" % (value,))
            if node.loser:
                raise _Violation("node storing %r is a root but is marked as a loser" % (value,))
        else:
            parent = node.parent
            if parent is None:
                raise _Violation("node storing %r is not a root but has no parent" % (value,))
            if not 0 <= node.child_index < len(parent.children):
                raise _Violation(
                    "node storing %r has child index %d but its parent has %d child slots" % (
                        value, node.child_index, len(parent.children),
                    ),
                )
            if parent.children[node.child_index] is not node:
                raise _Violation(
                    "node storing %r is not at child index %d of its parent" % (value, node.child_index),
                )
            if node in heap._roots:
                raise _Violation("node storing %r is indexed as a root but is not a root" % (value,))

        num_children = 0
        for idx, child in enumerate(node.children):
            if child is None:
                continue

            if child.parent is not node:
                raise _Violation(
                    "node storing %r has a child storing %r whose parent link points elsewhere" % (
                        value, child.value,
                    ),
                )
            if child.child_index != idx:
                raise _Violation(
                    "node storing %r has a child storing %r at index %d but the child stores index %d" % (
                        value, child.value, idx, child.child_index,
                    ),
                )
            if child.value < value:
                raise _Violation(
                    "node storing %r has a child storing %r, violating heap order" % (value, child.value),
                )

            num_children += 1
            stack.append((child, False))

        if num_children != node.num_children:
            raise _Violation(
                "node storing %r has %d children but reports %d" % (value, num_children, node.num_children),
            )

        holes = sorted(idx for idx, child in enumerate(node.children) if child is None)
        if holes != sorted(node.free_slots):
            raise _Violation(
                "node storing %r has empty child slots %r but tracks %r" % (value, holes, sorted(node.free_slots)),
            )

        counted += 1

    return counted
