"""Travelling salesman problem over cities on a plane."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import TextIO

MAX_CITIES = 5
NAME_LIMIT = 31


class Algorithm(enum.Enum):
    """Strategies for building a tour, with their display labels."""

    BRUTE_FORCE = "BRUTE FORCE"
    NEAREST_NEIGHBOUR = "NEAREST NEIGHBOUR"
    HELD_KARP = "HELD KARP"


class TspError(Exception):
    """Base class for errors raised by a TSP problem."""

    op = "N"
    label = "OK"


class TooManyCitiesError(TspError):
    """Raised when a city is added to a problem that is already full."""

    op = "C"
    label = "MAX CITIES EXCEEDED"


@dataclass(frozen=True)
class City:
    """A named point on the plane."""

    name: str
    x: int
    y: int


@dataclass(frozen=True)
class Tour:
    """A closed route through every city, starting and ending at city 0."""

    path: tuple[int, ...]
    total_distance: int
    city_count: int
    algorithm: Algorithm


def euclidean_distance(city_a: City, city_b: City) -> int:
    """Straight-line distance between two cities, truncated to an integer."""
    dx = city_a.x - city_b.x
    dy = city_a.y - city_b.y
    return math.isqrt(dx * dx + dy * dy)


@dataclass
class TspProblem:
    """Cities, their distance matrix and the last tour found."""

    max_cities: int = MAX_CITIES
    algorithm: Algorithm = Algorithm.NEAREST_NEIGHBOUR
    stream: TextIO | None = None
    cities: list[City] = field(default_factory=list)
    distances: list[list[int]] = field(default_factory=list)
    tour: Tour | None = None

    def add_city(self, name: str, x: int, y: int) -> City:
        """Add a city; names are cut to 31 characters."""
        if len(self.cities) >= self.max_cities:
            raise TooManyCitiesError(
                f"CURRENT CITY COUNT: {len(self.cities)}, "
                f"EXPECTED CITY LIMIT: {self.max_cities}"
            )
        city = City(name[:NAME_LIMIT], x, y)
        if self.stream is not None:
            print(f"[CITY] -> {name:>12} | INDEX: {len(self.cities)} | X: {x}  Y: {y}",
                  file=self.stream)
        self.cities.append(city)
        return city

    def compute_distances(self) -> list[list[int]]:
        """Build the matrix of distances between every pair of cities."""
        self.distances = [
            [0 if i == j else euclidean_distance(a, b) for j, b in enumerate(self.cities)]
            for i, a in enumerate(self.cities)
        ]
        return self.distances

    def nearest_neighbour(self) -> Tour:
        """Greedy tour from city 0, always moving to the closest unvisited city."""
        if not self.cities:
            raise TspError("no cities to visit")
        if len(self.distances) != len(self.cities):
            self.compute_distances()

        current = 0
        path = [current]
        unvisited = set(range(1, len(self.cities)))
        total = 0
        while unvisited:
            row = self.distances[current]
            nearest = min(unvisited, key=lambda index: (row[index], index))
            total += row[nearest]
            unvisited.remove(nearest)
            path.append(nearest)
            current = nearest

        total += self.distances[current][0]
        path.append(0)
        self.tour = Tour(tuple(path), total, len(self.cities), self.algorithm)
        return self.tour