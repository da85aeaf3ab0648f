"""Puzzles over graphs, trees and game boards."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Sequence


def find_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Return the person everyone trusts who trusts no one, or -1."""
    score = [0] * (n + 1)
    for truster, trusted in trust:
        score[truster] -= 1
        score[trusted] += 1
    return next((person for person in range(1, n + 1) if score[person] == n - 1), -1)


def min_time(n: int, edges: Sequence[Sequence[int]], has_apple: Sequence[bool]) -> int:
    """Return the walking time from vertex 0 to collect every apple and come back."""
    if len(has_apple) != n:
        raise ValueError("has_apple must have one entry per vertex")
    adjacency: dict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)

    parent: dict[int, int | None] = {0: None}
    order = []
    stack = [0]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                stack.append(neighbour)

    cost = dict.fromkeys(order, 0)
    holds = {node: bool(has_apple[node]) for node in order}
    for node in reversed(order):
        up = parent[node]
        if up is not None and holds[node]:
            cost[up] += 2 + cost[node]
            holds[up] = True
    return cost[0]


def snakes_and_ladders(board: Sequence[Sequence[int]]) -> int:
    """Return the fewest dice rolls to reach the last square, or -1 if it cannot be reached."""
    n = len(board)
    last = n * n
    cells = [0] * (last + 1)
    for i, row in enumerate(board):
        for j, value in enumerate(row):
            column = j + 1 if (n - i) % 2 else n - j
            cells[(n - 1 - i) * n + column] = value

    seen = [False] * (last + 1)
    frontier = deque([1])
    moves = 0
    while frontier:
        moves += 1
        for _ in range(len(frontier)):
            current = frontier.popleft()
            for square in range(current + 1, min(current + 6, last) + 1):
                destination = cells[square] if cells[square] > 0 else square
                if destination == last:
                    return moves
                if seen[destination]:
                    continue
                seen[destination] = True
                frontier.append(destination)
    return -1