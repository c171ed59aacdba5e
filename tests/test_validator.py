import logging

from fibheap import FibHeap, ValidationResult


def test_validate_empty():
    heap = FibHeap()

    result = heap.validate()
    assert result == ValidationResult(ok=True)
    assert result
    assert result.message == ''


def test_validate_heap_order(tree_heap, caplog):
    heap, handles = tree_heap

    handles[2]._node.value = 0

    with caplog.at_level(logging.WARNING, logger='fibheap'):
        result = heap.validate()

    assert not result
    assert result.message == "node storing 1 has a child storing 0, violating heap order"
    assert result.message in caplog.text


def test_validate_num_children(tree_heap):
    heap, handles = tree_heap

    handles[5]._node.num_children += 1

    result = heap.validate()
    assert not result.ok
    assert result.message == "node storing 5 has 2 children but reports 3"


def test_validate_child_index(tree_heap):
    heap, handles = tree_heap

    handles[7]._node.child_index = 0

    result = heap.validate()
    assert not result.ok
    assert result.message == "node storing 5 has a child storing 7 at index 1 but the child stores index 0"


def test_validate_count():
    heap = FibHeap([1, 2, 3])

    heap._count += 1

    result = heap.validate()
    assert not result.ok
    assert result.message == "heap reports 4 elements but actually holds 3"


def test_validate_minimum():
    heap = FibHeap([1, 2, 3])

    heap._min = heap._roots[heap.find(3)._node]

    result = heap.validate()
    assert not result.ok
    assert result.message == "minimum points to 3 while 1 exists"


def test_validate_root_index():
    heap = FibHeap([1, 2])

    del heap._roots[heap.find(2)._node]

    result = heap.validate()
    assert not result.ok
    assert result.message == "root storing 2 is not indexed"


def test_validate_root_loser():
    heap = FibHeap([1, 2])

    heap.find(2)._node.loser = True

    result = heap.validate()
    assert not result.ok
    assert result.message == "node storing 2 is a root but is marked as a loser"


def test_validate_empty_counters():
    heap = FibHeap()

    heap._count = 1

    result = heap.validate()
    assert not result.ok
    assert result.message == "heap is empty but reports 1 elements"


def test_dump_empty():
    heap = FibHeap()

    assert heap.dump() == ''


def test_dump_single():
    heap = FibHeap([5])

    assert heap.dump() == (
        "FRONT: 5\n"
        "MIN: 5\n"
        "NUMELEMS: 1\n"
        "MAXDEGREE: 1\n"
        "\n"
        "TREE 1:\n"
        "Root: 5\n"
        "Left: 5\n"
        "Right: 5\n"
        "\n"
        "NODE:\n"
        "Value: 5\n"
        "Loser: F\n"
        "Parent: null\n"
        "ChildIndex: -1\n"
        "Children: \n"
        "NumChildren: 0\n"
        "\n"
    )


def test_dump_tree(tree_heap):
    heap, handles = tree_heap

    heap.decrease_key(handles[8], -1)
    dump = heap.dump()

    assert "MIN: -1\n" in dump
    assert "NUMELEMS: 8\n" in dump
    assert "MAXDEGREE: 3\n" in dump
    assert "TREE 2:\n" in dump
    assert "TREE 3:\n" not in dump
    assert "Value: 7\nLoser: T\nParent: 5\nChildIndex: 1\nChildren: null\nNumChildren: 0\n" in dump


def test_validate_free_slots(tree_heap):
    heap, handles = tree_heap

    heap.decrease_key(handles[8], -1)
    handles[7]._node.free_slots.clear()

    result = heap.validate()
    assert not result.ok
    assert result.message == "node storing 7 has empty child slots [0] but tracks []"


def test_dump_tuple_values():
    heap = FibHeap([(0.0, 1), (2.0, 0)])
    heap.insert((1.0, 2))
    heap.extract_min()

    dump = heap.dump()

    assert "MIN: (1.0, 2)\n" in dump
    assert "Value: (2.0, 0)\n" in dump
    assert "Parent: (1.0, 2)\n" in dump
    assert "Children: (2.0, 0)\n" in dump
