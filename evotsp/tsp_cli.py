"""Command line entry point solving a small TSP instance."""

from __future__ import annotations

import argparse
import sys

from evotsp.tsp import TspError, TspProblem

_DEFAULT_CITIES = [("LONDON", 0, 0), ("PARIS", 344, 0)]


def _city(values: list[str]) -> tuple[str, int, int]:
    name, x, y = values
    return name, int(x), int(y)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a travelling salesman problem.")
    parser.add_argument("--city", nargs=3, action="append", metavar=("NAME", "X", "Y"),
                        default=None, help="add a city (repeatable)")
    args = parser.parse_args(argv)

    try:
        cities = [_city(values) for values in args.city] if args.city else _DEFAULT_CITIES
    except ValueError:
        parser.error("city coordinates must be integers")

    print("TSP SOLUTION")
    problem = TspProblem(stream=sys.stdout)
    try:
        for name, x, y in cities:
            problem.add_city(name, x, y)
        problem.compute_distances()
        tour = problem.nearest_neighbour()
    except TspError as exc:
        print(f"[ERROR] {exc.op} -> {exc.label:<18} {exc}", file=sys.stderr)
        return 1

    print(f"ALGORITHM: {problem.algorithm.value}")
    print(f"DISTANCE COVERED: {tour.total_distance}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())