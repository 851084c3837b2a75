import pytest

from evotsp.tsp import (
    Algorithm,
    City,
    TooManyCitiesError,
    TspError,
    TspProblem,
    euclidean_distance,
)

POINTS = [("A", 0, 0), ("B", 10, 3), ("C", -7, 12), ("D", 25, -4), ("E", 3, 3)]


def _problem(points=POINTS):
    problem = TspProblem()
    for name, x, y in points:
        problem.add_city(name, x, y)
    return problem


def test_euclidean_distance_right_triangle():
    assert euclidean_distance(City("A", 0, 0), City("B", 3, 4)) == 5


def test_euclidean_distance_truncates():
    assert euclidean_distance(City("A", 0, 0), City("B", 1, 1)) == 1


def test_euclidean_distance_symmetric():
    a, b = City("A", -5, 17), City("B", 40, -2)
    assert euclidean_distance(a, b) == euclidean_distance(b, a)


def test_add_city_records_city():
    problem = TspProblem()
    city = problem.add_city("LONDON", 0, 0)
    assert city == City("LONDON", 0, 0)
    assert problem.cities == [city]


def test_add_city_truncates_long_name():
    problem = TspProblem()
    city = problem.add_city("X" * 40, 1, 2)
    assert len(city.name) == 31


def test_add_city_limit():
    problem = _problem()
    assert len(problem.cities) == 5
    with pytest.raises(TooManyCitiesError):
        problem.add_city("F", 1, 1)


def test_too_many_cities_caught_as_tsp_error():
    problem = _problem()
    with pytest.raises(TspError):
        problem.add_city("F", 1, 1)
    assert len(problem.cities) == 5


def test_add_city_echoes_to_stream(tmp_path):
    path = tmp_path / "log.txt"
    with path.open("w") as stream:
        problem = TspProblem(stream=stream)
        problem.add_city("PARIS", 344, 0)
    assert "PARIS | INDEX: 0 | X: 344  Y: 0" in path.read_text()


def test_distance_matrix_properties():
    problem = _problem()
    matrix = problem.compute_distances()
    n = len(POINTS)
    assert len(matrix) == n and all(len(row) == n for row in matrix)
    for i in range(n):
        assert matrix[i][i] == 0
        for j in range(n):
            assert matrix[i][j] == matrix[j][i]
            assert matrix[i][j] == euclidean_distance(problem.cities[i], problem.cities[j])


def test_nearest_neighbour_two_cities():
    problem = _problem([("LONDON", 0, 0), ("PARIS", 344, 0)])
    problem.compute_distances()
    tour = problem.nearest_neighbour()
    assert tour.path == (0, 1, 0)
    assert tour.total_distance == 2 * 344
    assert tour.algorithm is Algorithm.NEAREST_NEIGHBOUR
    assert tour.algorithm.value == "NEAREST NEIGHBOUR"


def test_nearest_neighbour_tour_invariants():
    problem = _problem()
    problem.compute_distances()
    tour = problem.nearest_neighbour()
    assert tour.path[0] == 0 and tour.path[-1] == 0
    assert sorted(tour.path[:-1]) == list(range(len(POINTS)))
    assert tour.city_count == len(POINTS)
    legs = zip(tour.path, tour.path[1:])
    assert tour.total_distance == sum(problem.distances[a][b] for a, b in legs)
    assert problem.tour == tour


def test_nearest_neighbour_greedy_choice():
    problem = _problem()
    tour = problem.nearest_neighbour()
    row = problem.distances[0]
    first = tour.path[1]
    assert row[first] == min(row[1:])


def test_nearest_neighbour_single_city():
    problem = _problem([("SOLO", 5, 5)])
    tour = problem.nearest_neighbour()
    assert tour.path == (0, 0)
    assert tour.total_distance == 0


def test_nearest_neighbour_without_cities():
    with pytest.raises(TspError):
        TspProblem().nearest_neighbour()