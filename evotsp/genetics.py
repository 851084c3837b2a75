"""Genetic operators for evolving a string towards a target."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from evotsp.trace import TraceOp, TraceStage, Tracer


class CrossoverType(enum.Enum):
    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    UNIFORM = "UNIFORM"


@dataclass
class Person:
    """An individual: its chromosome string and its fitness."""

    chromosome: str
    wellbeing: int = 0


@dataclass(frozen=True)
class EvolutionConfig:
    """Parameters of the evolutionary run; rates are percentages."""

    target: str = "HELLO WORLD"
    population_size: int = 50
    max_generations: int = 200
    mutation_rate: int = 3
    crossover_rate: int = 70
    tournament_size: int = 5
    elite: int = 5
    guide_probability: int = 20
    gene_base: int = 46
    init_span: int = 100
    mutation_span: int = 200
    crossover_method: CrossoverType = CrossoverType.SINGLE

    def __post_init__(self) -> None:
        if len(self.target) < 2:
            raise ValueError("target must hold at least two characters")
        if self.population_size < 1:
            raise ValueError("population_size must be positive")
        if not 0 <= self.elite <= self.population_size:
            raise ValueError("elite must lie between 0 and population_size")
        if self.tournament_size < 1:
            raise ValueError("tournament_size must be positive")
        if self.max_generations < 0:
            raise ValueError("max_generations must not be negative")
        if self.init_span < 1 or self.mutation_span < 1:
            raise ValueError("gene spans must be positive")
        for name in ("mutation_rate", "crossover_rate", "guide_probability"):
            if not 0 <= getattr(self, name) <= 100:
                raise ValueError(f"{name} must be a percentage")


def _trace(tracer: Tracer | None, op: TraceOp, stage: TraceStage, message: str) -> None:
    if tracer is not None:
        tracer.trace(op, stage, message)


def fitness(chromosome: str, target: str, tracer: Tracer | None = None) -> int:
    """Count the positions at which ``chromosome`` matches ``target``."""
    matches = sum(1 for gene, want in zip(chromosome, target) if gene == want)
    _trace(tracer, TraceOp.FITNESS, TraceStage.OK, f"FITNESS MATCH: {matches}")
    return matches


def _check_parents(parent_a: str, parent_b: str) -> int:
    if len(parent_a) != len(parent_b):
        raise ValueError("parents must have the same length")
    return len(parent_a)


def cross_single(parent_a: str, parent_b: str, rng: random.Random,
                 tracer: Tracer | None = None) -> tuple[str, str]:
    """Swap the tails of the parents after one random point."""
    length = _check_parents(parent_a, parent_b)
    if length < 2:
        raise ValueError("single point crossover needs at least two genes")
    point = rng.randrange(1, length)
    _trace(tracer, TraceOp.CROSS, TraceStage.CROSSOVER, f"SINGLE AT POINT {point}")
    return (parent_a[:point] + parent_b[point:],
            parent_b[:point] + parent_a[point:])


def cross_double(parent_a: str, parent_b: str, rng: random.Random,
                 tracer: Tracer | None = None) -> tuple[str, str]:
    """Swap the segment between two random points, both inclusive."""
    length = _check_parents(parent_a, parent_b)
    if length < 1:
        raise ValueError("double point crossover needs at least one gene")
    first, second = sorted((rng.randrange(length), rng.randrange(length)))
    _trace(tracer, TraceOp.CROSS, TraceStage.CROSSOVER,
           f"DOUBLE BETWEEN {first} AND {second}")
    end = second + 1
    return (parent_a[:first] + parent_b[first:end] + parent_a[end:],
            parent_b[:first] + parent_a[first:end] + parent_b[end:])


def cross_uniform(parent_a: str, parent_b: str, rng: random.Random,
                  tracer: Tracer | None = None) -> tuple[str, str]:
    """Take each gene from either parent at random."""
    _check_parents(parent_a, parent_b)
    _trace(tracer, TraceOp.CROSS, TraceStage.CROSSOVER, "UNIFORM CROSSOVER")
    child_a, child_b = [], []
    for gene_a, gene_b in zip(parent_a, parent_b):
        if rng.randrange(2) == 0:
            child_a.append(gene_a)
            child_b.append(gene_b)
        else:
            child_a.append(gene_b)
            child_b.append(gene_a)
    return "".join(child_a), "".join(child_b)


_OPERATORS = {
    CrossoverType.SINGLE: cross_single,
    CrossoverType.DOUBLE: cross_double,
    CrossoverType.UNIFORM: cross_uniform,
}


def crossover(parent_a: str, parent_b: str, method, rng: random.Random,
              tracer: Tracer | None = None) -> tuple[str, str]:
    """Apply the chosen crossover; an unknown method falls back to single point."""
    try:
        operator = _OPERATORS[CrossoverType(method)]
    except ValueError:
        _trace(tracer, TraceOp.CROSS, TraceStage.CROSSOVER,
               f"INVALID CROSSOVER TYPE: {method}")
        operator = cross_single
    return operator(parent_a, parent_b, rng, tracer)


def mutate(chromosome: str, config: EvolutionConfig, rng: random.Random,
           tracer: Tracer | None = None) -> str:
    """Randomly replace genes, sometimes with the target's gene at that position."""
    genes = list(chromosome)
    count = 0
    for index in range(min(len(genes), len(config.target))):
        if rng.randrange(100) < config.mutation_rate:
            count += 1
            if rng.randrange(100) < config.guide_probability:
                genes[index] = config.target[index]
            else:
                genes[index] = chr(config.gene_base + rng.randrange(config.mutation_span))
    if count:
        _trace(tracer, TraceOp.MUT, TraceStage.OK, f"APPLIED {count} MUTATION(S)")
    return "".join(genes)


def select(population: list[Person], config: EvolutionConfig, rng: random.Random,
           tracer: Tracer | None = None) -> int:
    """Tournament selection: index of the fittest among random contestants."""
    if not population:
        raise ValueError("cannot select from an empty population")
    best = rng.randrange(len(population))
    best_fitness = population[best].wellbeing
    for _ in range(1, config.tournament_size):
        competitor = rng.randrange(len(population))
        if population[competitor].wellbeing > best_fitness:
            best = competitor
            best_fitness = population[competitor].wellbeing
    _trace(tracer, TraceOp.SELECT, TraceStage.FITNESS,
           f"SELECTED: {best} WITH FITNESS LEVEL: {best_fitness}")
    return best


def init_population(config: EvolutionConfig, rng: random.Random,
                    tracer: Tracer | None = None) -> list[Person]:
    """Create a population of random chromosomes with their fitness."""
    population = []
    for _ in range(config.population_size):
        genes = "".join(chr(config.gene_base + rng.randrange(config.init_span))
                        for _ in config.target)
        population.append(Person(genes, fitness(genes, config.target, tracer)))
    _trace(tracer, TraceOp.INIT, TraceStage.GENERATION,
           f"INITIALISED POPULATION OF SIZE: {config.population_size}")
    return population


def evaluate(population: list[Person], target: str, tracer: Tracer | None = None) -> None:
    """Recompute the fitness of every individual in place."""
    for person in population:
        person.wellbeing = fitness(person.chromosome, target, tracer)


def generate_offspring(current: list[Person], count: int, config: EvolutionConfig,
                       rng: random.Random, tracer: Tracer | None = None) -> list[Person]:
    """Breed ``count`` new individuals from the current population."""
    children: list[Person] = []

    def add(genes: str) -> None:
        children.append(Person(genes, fitness(genes, config.target, tracer)))

    while len(children) < count:
        if rng.randrange(100) < config.crossover_rate:
            first = current[select(current, config, rng, tracer)].chromosome
            second = current[select(current, config, rng, tracer)].chromosome
            child_a, child_b = crossover(first, second, config.crossover_method, rng, tracer)
            child_a = mutate(child_a, config, rng, tracer)
            child_b = mutate(child_b, config, rng, tracer)
            add(child_a)
            if len(children) < count:
                add(child_b)
        else:
            for _ in range(min(2, count - len(children))):
                parent = current[select(current, config, rng, tracer)]
                add(mutate(parent.chromosome, config, rng, tracer))
    return children