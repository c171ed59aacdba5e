import math
from typing import Dict, Hashable, List, Optional, Tuple

from fibheap import FibHeap, Handle

Vertex = Hashable
Graph = Dict[Vertex, List[Tuple[Vertex, float]]]


def shortest_paths(graph: Graph, source: Vertex) -> Dict[Vertex, float]:
    distances: Dict[Vertex, float] = {vertex: math.inf for vertex in graph}
    distances[source] = 0.0

    heap = FibHeap[Tuple[float, int]]()
    handles: Dict[Vertex, Handle[Tuple[float, int]]] = {}
    vertices: List[Vertex] = list(graph)
    numbers = {vertex: number for number, vertex in enumerate(vertices)}
    # (distance, vertex number) pairs keep the order total for unorderable vertices
    for number, vertex in enumerate(vertices):
        handles[vertex] = heap.insert((distances[vertex], number))

    while heap:
        distance, number = heap.extract_min()
        vertex = vertices[number]
        handles.pop(vertex)
        if distance == math.inf:
            break

        for neighbour, weight in graph[vertex]:
            handle: Optional[Handle[Tuple[float, int]]] = handles.get(neighbour)
            if handle is not None and distance + weight < distances[neighbour]:
                distances[neighbour] = distance + weight
                heap.decrease_key(handle, (distances[neighbour], numbers[neighbour]))

    return distances


def main() -> None:
    graph: Graph = {
        'a': [('b', 7.0), ('c', 9.0), ('f', 14.0)],
        'b': [('a', 7.0), ('c', 10.0), ('d', 15.0)],
        'c': [('a', 9.0), ('b', 10.0), ('d', 11.0), ('f', 2.0)],
        'd': [('b', 15.0), ('c', 11.0), ('e', 6.0)],
        'e': [('d', 6.0), ('f', 9.0)],
        'f': [('a', 14.0), ('c', 2.0), ('e', 9.0)],
    }

    for vertex, distance in shortest_paths(graph, 'a').items():
        print(f"{vertex}: {distance}")


if __name__ == '__main__':
    main()
