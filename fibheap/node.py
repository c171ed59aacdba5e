import dataclasses as dc
from typing import Any, Generic, List, Optional, Protocol, TypeVar


class ComparableP(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __eq__(self, other: Any) -> bool: ...


Value = TypeVar('Value', bound=ComparableP)


class _Domain:
    """
    Ownership token shared by all the nodes of a heap.
    Merging heaps redirects the donor domain to the receiver one so that nodes
    moved by a merge resolve to their new owner without being touched.
    """

    def __init__(self) -> None:
        self._merged_into: Optional['_Domain'] = None

    def resolve(self) -> '_Domain':
        """
        Returns the domain this one currently resolves to.
        """

        root = self
        while root._merged_into is not None:
            root = root._merged_into

        # path compression
        domain: Optional[_Domain] = self
        while domain is not None and domain is not root:
            domain._merged_into, domain = root, domain._merged_into

        return root

    def merge_into(self, other: '_Domain') -> None:
        root, other_root = self.resolve(), other.resolve()
        if root is not other_root:
            root._merged_into = other_root


class _Node(Generic[Value]):
    """
    Heap tree node.

    Child slots emptied by a cut are left as `None` so that the indices of the
    remaining children stay valid. Emptied slots are filled by later adoptions.
    """

    def __init__(self, value: Value, domain: _Domain):
        self.value = value
        self.domain = domain
        self.generation = 0

        self.loser = False
        self.parent: Optional[_Node[Value]] = None
        self.child_index = -1
        self.children: List[Optional[_Node[Value]]] = []
        # indices of the slots emptied by cuts, reused by the next adoption
        self.free_slots: List[int] = []
        self.num_children = 0

    def __repr__(self) -> str:
        return "%s<value=%r, children=%d>" % (self.__class__.__qualname__, self.value, self.num_children)


class _RingEntry(Generic[Value]):
    """
    Root ring entry. A singleton ring points to itself.
    """

    def __init__(self, node: _Node[Value]):
        self.node = node
        self.left: _RingEntry[Value] = self
        self.right: _RingEntry[Value] = self


@dc.dataclass(frozen=True, repr=False)
class Handle(Generic[Value]):
    """
    Opaque reference to a heap element.
    A handle is only valid as an argument of the heap operations. It becomes stale
    once the element it refers to is extracted, deleted or cleared.
    """

    _node: _Node[Value]
    _generation: int

    def __repr__(self) -> str:
        state = "alive" if self._node.generation == self._generation else "stale"
        return "%s<value=%r, %s>" % (self.__class__.__qualname__, self._node.value, state)
