"""Local search for the travelling salesman problem: 2-opt, 3-opt, tabu search."""

from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence, Tuple

from .model import Move, Solution, TabuList, index_to_edge
from .problem import TSP

_ROUNDING = 0.00001


def two_opt(tour: List[int], i: int, j: int) -> None:
    """Reverse the tour positions ``i`` to ``j`` (both included) in place."""
    tour[i : j + 1] = tour[i : j + 1][::-1]


def two_opt_value(tour: Sequence[int], edges: Sequence[float], i: int, j: int) -> float:
    """Change of the tour length that ``two_opt(tour, i, j)`` would cause."""
    value = (
        -edges[index_to_edge(tour[i - 1], tour[i])]
        - edges[index_to_edge(tour[j], tour[j + 1])]
        + edges[index_to_edge(tour[i - 1], tour[j])]
        + edges[index_to_edge(tour[i], tour[j + 1])]
    )
    if abs(value) < _ROUNDING:
        value = 0.0
    return value


def check_tabu_two_opt(i: int, j: int, tabu: Optional[TabuList]) -> bool:
    """True when no recent move used both positions ``i`` and ``j``."""
    if tabu is None:
        return True
    for move in tabu:
        used = move.indices[:2]
        if i in used and j in used:
            return False
    return True


def best_two_opt(
    tour: Sequence[int],
    edges: Sequence[float],
    best: float,
    tabu: Optional[TabuList],
) -> Tuple[Tuple[int, int], float]:
    """Best allowed 2-opt move whose change is below ``best``.

    Returns the move positions and its change; when no move beats ``best``
    the positions are ``(0, 0)`` and ``best`` comes back unchanged.
    """
    move = (0, 0)
    size = len(tour)
    for i in range(1, size - 2):
        for j in range(i + 1, size - 1):
            if check_tabu_two_opt(i, j, tabu):
                value = two_opt_value(tour, edges, i, j)
                if value < best:
                    move = (i, j)
                    best = value
    return move, best


def three_opt(tour: List[int], i: int, j: int, k: int) -> None:
    """Reverse positions ``i..j`` and then ``j..k`` in place."""
    two_opt(tour, i, j)
    two_opt(tour, j, k)


def three_opt_value(
    tour: Sequence[int], edges: Sequence[float], i: int, j: int, k: int
) -> float:
    """Change of the tour length that ``three_opt(tour, i, j, k)`` would cause."""
    trial = list(tour)
    value = two_opt_value(trial, edges, i, j)
    two_opt(trial, i, j)
    return value + two_opt_value(trial, edges, j, k)


def check_tabu_three_opt(i: int, j: int, k: int, tabu: Optional[TabuList]) -> bool:
    """True when no recent move used all of positions ``i``, ``j`` and ``k``."""
    if tabu is None:
        return True
    for move in tabu:
        used = move.indices[:3]
        if i in used and j in used and k in used:
            return False
    return True


def best_three_opt(
    tour: Sequence[int],
    edges: Sequence[float],
    best: float,
    tabu: Optional[TabuList],
) -> Tuple[Tuple[int, int, int], float]:
    """Best allowed 3-opt move whose change is below ``best``.

    Returns the move positions and its change; when no move beats ``best``
    the positions are ``(0, 0, 0)`` and ``best`` comes back unchanged.
    """
    move = (0, 0, 0)
    size = len(tour)
    for i in range(1, size - 3):
        for j in range(i + 1, size - 2):
            for k in range(j + 1, size - 1):
                if check_tabu_three_opt(i, j, k, tabu):
                    value = three_opt_value(tour, edges, i, j, k)
                    if value < best:
                        move = (i, j, k)
                        best = value
    return move, best


def _best_move(
    tour: Sequence[int],
    edges: Sequence[float],
    tabu: Optional[TabuList],
    use_two_opt: bool,
) -> Tuple[Tuple[int, ...], float]:
    if use_two_opt:
        return best_two_opt(tour, edges, math.inf, tabu)
    return best_three_opt(tour, edges, math.inf, tabu)


def _apply(tour: List[int], move: Tuple[int, ...], use_two_opt: bool) -> None:
    if use_two_opt:
        two_opt(tour, move[0], move[1])
    else:
        three_opt(tour, move[0], move[1], move[2])


def neighborhood_solution(
    solution: Solution, edges: Sequence[float], use_two_opt: bool
) -> Solution:
    """Apply the best improving move until none is left; return the local minimum."""
    while True:
        move, change = _best_move(solution.tour, edges, None, use_two_opt)
        if change >= 0:
            return solution
        _apply(solution.tour, move, use_two_opt)
        solution.recompute_value(edges)


def random_swaps(tour: List[int], n: int, rng: random.Random) -> None:
    """Exchange ``n // 2`` random pairs of positions among the first ``n``."""
    for _ in range(n // 2):
        a = rng.randrange(n)
        b = rng.randrange(n)
        tour[a], tour[b] = tour[b], tour[a]


def resolve_tsp(problem: TSP, restarts: int, use_two_opt: bool) -> Solution:
    """Random multistart: local search from perturbed copies of the starting tour."""
    current = problem.init_solution()
    start = current.copy()
    best = current.copy()
    for _ in range(restarts):
        current = neighborhood_solution(current, problem.edges, use_two_opt)
        if current.value < best.value:
            best = current.copy()
        current = start.copy()
        random_swaps(current.tour, len(current.tour), problem.rng)
        current.recompute_value(problem.edges)
    return best


def neighborhood_tabu_solution(
    solution: Solution,
    best: Solution,
    edges: Sequence[float],
    tabu: TabuList,
    max_iter: int,
    use_two_opt: bool,
) -> Solution:
    """Tabu search from ``solution``; return the best tour met.

    At each step the best move not in the tabu list is taken, even when it
    worsens the tour, and recorded as tabu. The search stops after
    ``max_iter`` steps in a row without beating ``best``.
    """
    stale = 0
    while True:
        move, _ = _best_move(solution.tour, edges, tabu, use_two_opt)
        tabu.add(Move(tuple(move)))
        _apply(solution.tour, move, use_two_opt)
        solution.recompute_value(edges)
        if solution.value < best.value:
            best = solution.copy()
            stale = 0
        else:
            stale += 1
        if stale >= max_iter:
            return best


def tabu_search(problem: TSP, size: int, max_iter: int, use_two_opt: bool) -> Solution:
    """Tabu search starting from the farthest-insertion tour."""
    current = problem.init_solution()
    best = current.copy()
    tabu = TabuList(size)
    return neighborhood_tabu_solution(
        current, best, problem.edges, tabu, max_iter, use_two_opt
    )