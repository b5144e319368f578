"""Command line: generate a TSP instance and solve it three ways."""

from __future__ import annotations

import re
import sys
import time
from contextlib import ExitStack
from typing import List, Optional

from .model import Solution
from .problem import TSP
from .search import resolve_tsp, tabu_search

USAGE = (
    "Numero parametri sbagliato:\n"
    " 1 = numero nodi del problema \n"
    " 2 = tipologia del generatore(1-4) \n"
    " 3 = 2otp/3opt(1-0) \n"
    " 4 = Numero restart per risolutore con random multistart\n"
    " 5 = Lunghezza tabu list per tabu search\n"
    " 6 = numero iterazioni senza miglioramenti per tabu search"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _report(title: str, elapsed: float, solution: Solution) -> None:
    print(title)
    print(f"Tempo di Esecuzione =  {elapsed:f} secondi ")
    print(f"Soluzione definitiva: {solution.value:g}")
    print("".join(f"{node} " for node in solution.tour), end="")
    print("\n\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the solver; arguments: nodes, generator, opt, restarts, tabu size, iterations."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 6:
        print(USAGE)
        return 0
    n_nodes, generator, opt, restarts, tabu_size, iterations = (
        _atoi(a) for a in args[:6]
    )

    with ExitStack() as stack:
        try:
            edges_file = stack.enter_context(open("archi.txt", "w"))
            nodes_file = stack.enter_context(open("nodi.txt", "w"))
        except OSError:
            print("Errore nella creazione del file!", end="")
            return 1

        problem = TSP(n_nodes)
        designs = {
            1: problem.random_design,
            2: problem.circle_design,
            3: problem.linear_design,
            4: problem.cluster_design,
        }
        design = designs.get(generator)
        if design is None:
            print("Valore tipologia di generatore non valido")
            return 0
        design()

        if opt not in (0, 1):
            print("Valore scelta opt non valido")
            return 0
        use_two_opt = opt == 1

        problem.write_edges(edges_file)
        problem.write_nodes(nodes_file)

        start = time.process_time()
        initial = problem.init_solution()
        _report("Inizializzazione soluzione", time.process_time() - start, initial)

        start = time.process_time()
        multistart = resolve_tsp(problem, restarts, use_two_opt)
        _report(
            f"Random Multistart: N restart={restarts}",
            time.process_time() - start,
            multistart,
        )

        start = time.process_time()
        tabu = tabu_search(problem, tabu_size, iterations, use_two_opt)
        _report(
            f"Tabu Search: Lunghezza Tabu list={tabu_size} "
            f"Iterazioni senza miglioramenti={iterations}",
            time.process_time() - start,
            tabu,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())