# evotsp

Two small experiments in computational intelligence:

- **String evolution** (`evotsp.genetics`, `evotsp.evolve`): a genetic
  algorithm evolves a population of random strings towards a target string
  (by default `HELLO WORLD`). It uses tournament selection, elite
  preservation, single-point, double-point or uniform crossover, and mutation
  that sometimes writes the target character directly.
- **Travelling salesman** (`evotsp.tsp`, `evotsp.tsp_cli`): cities on a plane,
  a matrix of whole-number Euclidean distances, and a closed tour from city 0
  built by the nearest-neighbour rule.

Neither part needs anything outside the standard library.

## Installation

```
pip install .
```

Install with the test extra to run the tests:

```
pip install ".[test]"
pytest
```

## Command line

### `evotsp-evolve`

```
evotsp-evolve [--seed N] [--target TEXT] [--method {single,double,uniform}] [--quiet]
```

- `--seed` seeds the random generator, so a run can be repeated.
- `--target` sets the string to evolve towards (at least two characters).
- `--method` chooses the crossover method (default `single`).
- `--quiet` turns off the `[TRACE]` lines; the per-generation lines are still
  printed.

The command prints the trace settings and the evolution settings, then one
line per generation with the best chromosome, its fitness and the crossover
method. It stops when the target is matched or after the last generation
(200 by default), and finishes with the best solution and its fitness as a
fraction and a percentage.

### `evotsp-tsp`

```
evotsp-tsp [--city NAME X Y] ...
```

Each `--city` adds a city with integer coordinates; the option may be given
several times. Without it the command uses LONDON at (0, 0) and PARIS at
(344, 0). It prints a `[CITY]` line for each city added, then the algorithm
used and the length of the nearest-neighbour tour. A problem holds at most
five cities; adding more prints an `[ERROR]` line to standard error and the
command exits with status 1.

## Library use

### String evolution

```python
import random

from evotsp.evolve import run
from evotsp.genetics import CrossoverType, EvolutionConfig
from evotsp.trace import Tracer

config = EvolutionConfig(target="HELLO WORLD", crossover_method=CrossoverType.UNIFORM)
result = run(config, random.Random(1), Tracer())
print(result.solved, result.found_at, result.best.chromosome)
```

`EvolutionConfig` is a frozen dataclass holding the population size, number of
generations, mutation, crossover and guided-mutation rates (percentages),
tournament size, elite count and crossover method; it raises `ValueError` for
values out of range. `run` returns an `EvolutionResult` with the best `Person`,
a `GenerationReport` for every generation and whether the target was reached.
Progress lines go to the tracer's stream; pass `tracer=None` for a silent run.
`format_status(config)` returns the settings block the command prints.

The genetic operators in `evotsp.genetics` can be called on their own:
`fitness`, `cross_single`, `cross_double`, `cross_uniform`, `crossover`,
`mutate`, `select`, `init_population`, `evaluate` and `generate_offspring`.
Each takes the `random.Random` instance and the optional `Tracer` it should
use. The crossover functions return the two children as a pair of strings.

`evotsp.trace.Tracer` writes `[TRACE]` lines tagged with a `TraceOp` and a
`TraceStage`; its `TraceFlag` categories can be switched with `enable_flags`
and `disable_flags`, and `status()` describes its settings.

### Travelling salesman

```python
from evotsp.tsp import TspProblem

problem = TspProblem()
problem.add_city("LONDON", 0, 0)
problem.add_city("PARIS", 344, 0)
problem.compute_distances()
tour = problem.nearest_neighbour()
print(tour.path, tour.total_distance)  # (0, 1, 0) 688
```

City names are cut to 31 characters. Distances are truncated to whole
numbers. Adding more cities than `max_cities` (five by default) raises
`TooManyCitiesError`, a subclass of `TspError`; asking for a tour with no
cities raises `TspError`. Pass `stream=` to `TspProblem` to have each added
city printed.

## What it does not do

`evotsp.tsp.Algorithm` names brute force and Held-Karp as well as nearest
neighbour, but only the nearest-neighbour tour is implemented; there is no
exact solver, and tours cannot be improved after they are built.