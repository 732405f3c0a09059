"""Shortest-path computations on weighted directed graphs."""

from __future__ import annotations

import heapq
import math
from typing import Dict, List, Sequence, Tuple


def network_delay_time(times: Sequence[Sequence[int]], n: int, k: int) -> int:
    """Time for a signal sent from node ``k`` to reach all ``n`` nodes, or -1.

    ``times`` holds directed edges ``(source, target, delay)`` with nodes numbered 1 to ``n``.
    """
    if not 1 <= k <= n:
        raise ValueError("start node is out of range")
    graph: Dict[int, List[Tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for source, target, cost in times:
        if not (1 <= source <= n and 1 <= target <= n):
            raise ValueError("edge refers to a node out of range")
        graph[source].append((cost, target))

    dist = {node: math.inf for node in graph}
    dist[k] = 0
    heap = [(0, k)]
    while heap:
        elapsed, node = heapq.heappop(heap)
        if elapsed > dist[node]:
            continue
        for cost, neighbour in graph[node]:
            arrival = elapsed + cost
            if arrival < dist[neighbour]:
                dist[neighbour] = arrival
                heapq.heappush(heap, (arrival, neighbour))

    slowest = max(dist.values())
    return -1 if slowest == math.inf else slowest