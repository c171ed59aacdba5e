import random
from typing import Dict, Tuple

import pytest

from fibheap import FibHeap, Handle


@pytest.fixture(autouse=True)
def init_random() -> None:
    random.seed(0)


@pytest.fixture
def tree_heap() -> Tuple[FibHeap[int], Dict[int, Handle[int]]]:
    """
    Heap holding a single tree of degree 3 built by consolidation:
    1[2, 3[4], 5[6, 7[8]]]
    """

    heap: FibHeap[int] = FibHeap()
    handles = {value: heap.insert(value) for value in range(9)}
    assert heap.extract_min() == 0
    handles.pop(0)

    return heap, handles
