from typing import Dict

from fibheap import FibHeap, Handle, exceptions


def main() -> None:
    # handles are kept by the caller, `find` is a linear search
    handles: Dict[int, Handle[int]] = {}

    heap1 = FibHeap[int]()
    heap2 = FibHeap[int](range(1, 11))

    heap3 = heap2.clone()
    heap3.assign(heap1)

    assert heap1.is_empty()
    assert heap2.size() == 10
    assert heap3.size() == 0
    assert heap2.peek_min() == 1
    assert heap2.value_of(heap2.find(4)) == 4

    for value in [3, 8, 1, 18, 13, 85, -2, 44]:
        handles[value] = heap1.insert(value)

    assert heap1.extract_min() == -2
    assert heap1.extract_min() == 1
    del handles[-2], handles[1]

    heap1.decrease_key(handles[44], 2)
    handles[2] = handles.pop(44)
    assert heap1.peek_min() == 2

    handles[44] = heap1.change(handles.pop(2), 44)
    assert heap1.value_of(handles[44]) == 44

    heap1.delete(handles.pop(3))
    heap1.delete(handles.pop(8))

    for value in range(1, 11):
        handles[value] = heap2.find(value)

    heap1.merge(heap2)
    assert heap2.is_empty()
    assert heap1.size() == 14
    assert heap1.value_of(handles[4]) == 4

    try:
        heap1.decrease_key(handles[4], 5)
    except exceptions.InvalidKeyOrderError as e:
        print(f"decrease rejected: {e}")

    print(heap1.dump())

    heap1.clear()
    assert heap1.is_empty()


if __name__ == '__main__':
    main()
