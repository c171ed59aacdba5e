import copy
import logging
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional

from . import exceptions
from .node import Handle, Value, _Domain, _Node, _RingEntry
from .printer import dump
from .validator import ValidationResult, validate

logger = logging.getLogger(__package__)

BASE_MAX_DEGREE = 1


class FibHeap(Generic[Value]):
    """
    Fibonacci heap data structure implementation.
    Supports the following operations:
        - insert: O(1), returns a handle to the inserted element
        - peek_min: O(1)
        - extract_min: O(log(n)) amortized
        - decrease_key: O(1) amortized
        - delete / change: O(log(n)) amortized
        - merge: O(1), empties the merged heap

    Handles are the fast path to an element. `find` is a linear search
    and should be avoided when the handle can be kept by the caller.

    :param values: values the heap is built from
    """

    def __init__(self, values: Optional[Iterable[Value]] = None) -> None:
        self._front: Optional[_RingEntry[Value]] = None
        self._min: Optional[_RingEntry[Value]] = None
        self._count = 0
        self._max_degree = BASE_MAX_DEGREE
        # maps current roots to their ring entries
        self._roots: Dict[_Node[Value], _RingEntry[Value]] = {}
        self._domain = _Domain()

        if values is not None:
            for value in values:
                self._add_root(self._new_node(value))
                self._count += 1

    def __repr__(self) -> str:
        if self._min is None:
            return "%s<size=0>" % self.__class__.__qualname__

        return "%s<size=%d, min=%r>" % (self.__class__.__qualname__, self._count, self._min.node.value)

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count != 0

    def __contains__(self, handle: object) -> bool:
        return self._is_live(handle)

    def __copy__(self) -> 'FibHeap[Value]':
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'FibHeap[Value]':
        result: FibHeap[Value] = FibHeap()
        result._copy_trees(self, lambda value: copy.deepcopy(value, memo))

        return result

    def is_empty(self) -> bool:
        return self._front is None

    def size(self) -> int:
        return self._count

    def peek_min(self) -> Value:
        """
        Returns the smallest value of the heap.
        If the heap is empty raises `EmptyHeapError`.
        """

        if self._min is None:
            raise exceptions.EmptyHeapError("heap is empty")

        return self._min.node.value

    def value_of(self, handle: Handle[Value]) -> Value:
        """
        Returns the value the handle refers to.

        :param handle: element handle
        """

        return self._node_of(handle).value

    def find(self, value: Value) -> Optional[Handle[Value]]:
        """
        Searches the heap for an element with the provided value.
        Takes linear time in the worst case, keep the handles returned by `insert`
        where repeated access is required.

        :param value: value to be found
        :return: handle of the first element found or `None`
        """

        for entry in self._iter_ring():
            if (node := self._find_in_subtree(entry.node, value)) is not None:
                return Handle(node, node.generation)

        return None

    def insert(self, value: Value) -> Handle[Value]:
        """
        Inserts a value into the heap.

        :param value: value to be inserted
        :return: inserted element handle
        """

        node = self._new_node(value)
        self._add_root(node)
        self._count += 1

        return Handle(node, node.generation)

    def extract_min(self) -> Value:
        """
        Removes the smallest element from the heap.
        If the heap is empty raises `EmptyHeapError`.

        :return: the smallest value
        """

        if self._min is None:
            raise exceptions.EmptyHeapError("heap is empty")

        return self._extract(self._min)

    def decrease_key(self, handle: Handle[Value], value: Value) -> None:
        """
        Decreases the value of an element.
        If the new value is not less than the current one raises `InvalidKeyOrderError`.

        :param handle: element handle
        :param value: new value
        """

        node = self._node_of(handle)
        if not value < node.value:
            raise exceptions.InvalidKeyOrderError("new value is not less than the current one")

        node.value = value

        parent = node.parent
        if parent is None:
            if self._min is not None and value < self._min.node.value:
                self._min = self._roots[node]
        elif value < parent.value:
            self._cut(node)

    def delete(self, handle: Handle[Value]) -> None:
        """
        Removes an element from the heap.

        :param handle: element handle
        """

        node = self._node_of(handle)
        if node.parent is not None:
            self._cut(node)

        self._min = self._roots[node]
        self._extract(self._min)

    def change(self, handle: Handle[Value], value: Value) -> Handle[Value]:
        """
        Changes the value of an element.
        Increasing a value re-inserts the element, so the passed handle
        becomes stale and the returned one must be used instead.

        :param handle: element handle
        :param value: new value
        :return: element handle
        """

        node = self._node_of(handle)
        if value < node.value:
            self.decrease_key(handle, value)
        elif node.value < value:
            self.delete(handle)
            handle = self.insert(value)

        return handle

    def merge(self, other: 'FibHeap[Value]') -> None:
        """
        Moves all the elements of another heap into this one.
        The other heap is left empty. Its handles remain valid and refer to this heap.

        :param other: heap to be merged
        """

        if not isinstance(other, FibHeap):
            raise TypeError("only FibHeap instances can be merged")

        if other is self or other._front is None or other._min is None:
            return

        if self._front is None or self._min is None:
            self._front = other._front
            self._min = other._min
            self._count = other._count
            self._max_degree = other._max_degree
            self._roots = other._roots
        else:
            back = self._front.left
            other_back = other._front.left

            back.right = other._front
            other._front.left = back
            other_back.right = self._front
            self._front.left = other_back

            self._roots.update(other._roots)
            self._count += other._count
            self._max_degree = max(self._max_degree, other._max_degree)
            if other._min.node.value < self._min.node.value:
                self._min = other._min

        other._domain.merge_into(self._domain)
        logger.debug("heap merged: %d elements", self._count)

        other._reset()

    def clear(self) -> None:
        """
        Removes all the elements from the heap.
        """

        for entry in list(self._iter_ring()):
            stack = [entry.node]
            while stack:
                node = stack.pop()
                stack.extend(child for child in node.children if child is not None)
                self._destroy(node)

        logger.debug("heap cleared: %d elements", self._count)
        self._reset()

    def clone(self) -> 'FibHeap[Value]':
        """
        Returns a structural copy of the heap. No nodes are shared with the copy,
        handles of this heap are not valid for the copy.
        """

        result: FibHeap[Value] = FibHeap()
        result._copy_trees(self)

        return result

    def assign(self, other: 'FibHeap[Value]') -> None:
        """
        Replaces the content of the heap with a copy of another heap.

        :param other: heap to be copied
        """

        if other is self:
            return

        self.clear()
        self._copy_trees(other)

    def dump(self) -> str:
        """
        Returns the heap structure dump.
        """

        return dump(self)

    def validate(self) -> ValidationResult:
        """
        Checks the heap internal invariants.
        """

        return validate(self)

    def _is_live(self, handle: object) -> bool:
        if not isinstance(handle, Handle):
            return False

        node = handle._node
        return node.generation == handle._generation and node.domain.resolve() is self._domain

    def _node_of(self, handle: Handle[Value]) -> _Node[Value]:
        if handle is None:
            raise exceptions.InvalidHandleError("handle is null")
        if not self._is_live(handle):
            raise exceptions.InvalidHandleError("handle is stale or belongs to another heap")

        return handle._node

    def _new_node(self, value: Value) -> _Node[Value]:
        return _Node(value, self._domain)

    def _destroy(self, node: _Node[Value]) -> None:
        node.generation += 1
        node.parent = None
        node.children = []
        node.free_slots = []
        node.num_children = 0

    def _reset(self) -> None:
        self._front = None
        self._min = None
        self._count = 0
        self._max_degree = BASE_MAX_DEGREE
        self._roots = {}
        self._domain = _Domain()

    def _iter_ring(self) -> Iterator[_RingEntry[Value]]:
        if (entry := self._front) is None:
            return

        while True:
            yield entry
            entry = entry.right
            if entry is self._front:
                break

    def _add_root(self, node: _Node[Value]) -> None:
        node.parent = None
        node.child_index = -1
        node.loser = False

        entry = _RingEntry(node)
        if self._min is None:
            self._front = entry
            self._min = entry
        else:
            # spliced to the left of the minimum
            entry.right = self._min
            entry.left = self._min.left
            self._min.left.right = entry
            self._min.left = entry

            if node.value < self._min.node.value:
                self._min = entry

        self._roots[node] = entry

    def _remove_entry(self, entry: _RingEntry[Value]) -> None:
        del self._roots[entry.node]

        if entry.right is entry:
            self._front = None
            self._min = None
        else:
            if entry is self._front:
                self._front = entry.right
            if entry is self._min:
                self._min = entry.right

            entry.left.right = entry.right
            entry.right.left = entry.left

        entry.left = entry.right = entry

    def _extract(self, entry: _RingEntry[Value]) -> Value:
        node = entry.node
        value = node.value

        for child in node.children:
            if child is not None:
                self._add_root(child)

        self._remove_entry(entry)
        self._destroy(node)
        self._count -= 1

        if self._count == 0:
            return value

        self._consolidate()

        self._min = self._front
        for root in self._iter_ring():
            if self._min is not None and root.node.value < self._min.node.value:
                self._min = root

        return value

    def _consolidate(self) -> None:
        buckets: List[Optional[_RingEntry[Value]]] = [None] * (self._max_degree + 1)

        links = 0
        for entry in list(self._iter_ring()):
            degree = entry.node.num_children
            while degree < len(buckets) and (other := buckets[degree]) is not None:
                buckets[degree] = None
                entry = self._link(entry, other)
                degree += 1
                links += 1

            if degree >= len(buckets):
                buckets.extend([None] * (degree + 1 - len(buckets)))
            buckets[degree] = entry

        logger.debug("heap consolidated: %d links, %d roots left", links, len(self._roots))

    def _link(self, entry: _RingEntry[Value], other: _RingEntry[Value]) -> _RingEntry[Value]:
        """
        Makes the tree with the greater root a child of the other one.

        :return: ring entry of the resulting tree
        """

        if other.node.value < entry.node.value:
            entry, other = other, entry

        parent, child = entry.node, other.node
        child.parent = parent
        child.loser = False
        if parent.free_slots:
            child.child_index = parent.free_slots.pop()
            parent.children[child.child_index] = child
        else:
            child.child_index = len(parent.children)
            parent.children.append(child)

        parent.num_children += 1
        if parent.num_children > self._max_degree:
            self._max_degree = parent.num_children

        self._remove_entry(other)

        return entry

    def _cut(self, node: _Node[Value]) -> None:
        """
        Moves the node subtree to the root ring. Ancestors that have already lost
        a child are moved as well, the first one that has not is marked as a loser.
        """

        cuts = 0
        parent = node.parent
        while parent is not None:
            parent.children[node.child_index] = None
            parent.free_slots.append(node.child_index)
            parent.num_children -= 1
            self._add_root(node)
            cuts += 1

            if not parent.loser:
                if parent.parent is not None:
                    parent.loser = True
                break

            node, parent = parent, parent.parent

        if cuts > 1:
            logger.debug("cascading cut: %d subtrees moved to the root ring", cuts)

    def _find_in_subtree(self, root: _Node[Value], value: Value) -> Optional[_Node[Value]]:
        stack = [root]
        while stack:
            node = stack.pop()
            # subtree minimum is its root
            if value < node.value:
                continue
            if node.value == value:
                return node

            stack.extend(child for child in reversed(node.children) if child is not None)

        return None

    def _copy_trees(self, other: 'FibHeap[Value]', copy_value: Optional[Callable[[Value], Value]] = None) -> None:
        for entry in other._iter_ring():
            self._add_root(self._copy_subtree(entry.node, copy_value))

        self._count = other._count
        self._max_degree = other._max_degree

    def _copy_subtree(
            self,
            root: _Node[Value],
            copy_value: Optional[Callable[[Value], Value]] = None,
    ) -> _Node[Value]:
        def new_node(value: Value) -> _Node[Value]:
            return self._new_node(copy_value(value) if copy_value is not None else value)

        root_copy = new_node(root.value)

        stack = [(root, root_copy)]
        while stack:
            node, node_copy = stack.pop()
            node_copy.loser = node.loser
            node_copy.num_children = node.num_children
            node_copy.free_slots = list(node.free_slots)

            for idx, child in enumerate(node.children):
                if child is None:
                    node_copy.children.append(None)
                else:
                    child_copy = new_node(child.value)
                    child_copy.parent = node_copy
                    child_copy.child_index = idx
                    node_copy.children.append(child_copy)
                    stack.append((child, child_copy))

        return root_copy

