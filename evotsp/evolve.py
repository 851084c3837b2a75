"""Run the string-evolving genetic algorithm and report its progress."""

from __future__ import annotations

import argparse
import dataclasses
import random
from dataclasses import dataclass

from evotsp.genetics import (
    CrossoverType,
    EvolutionConfig,
    Person,
    evaluate,
    generate_offspring,
    init_population,
)
from evotsp.trace import TraceOp, TraceStage, Tracer

_METHOD_LABELS = {
    CrossoverType.SINGLE: "SINGLE_POINT",
    CrossoverType.DOUBLE: "DOUBLE_POINT",
    CrossoverType.UNIFORM: "UNIFORM",
}


@dataclass(frozen=True)
class GenerationReport:
    """The fittest individual of one generation."""

    generation: int
    best: str
    fitness: int
    length: int
    method: CrossoverType

    def __str__(self) -> str:
        return (f"GENERATION {self.generation}: {self.best}  "
                f"(FITNESS: {self.fitness}/{self.length})    "
                f"METHOD: {_METHOD_LABELS[self.method]}")


@dataclass
class EvolutionResult:
    """Outcome of a run: the best individual and every generation's report."""

    best: Person
    generations: list[GenerationReport]
    solved: bool

    @property
    def found_at(self) -> int | None:
        """Generation in which the target was reached, if it was."""
        return self.generations[-1].generation if self.solved else None


def format_status(config: EvolutionConfig) -> str:
    """Describe the run's configuration."""
    lines = [
        "EVO CONFIG:",
        f"    TARGET STRING: {config.target}",
        f"    CURRENT CROSSOVER TYPE: {config.crossover_method.value}",
        f"    POPULATION SIZE: {config.population_size}",
        f"    MAXIMUM GENERATIONS: {config.max_generations}",
        f"    MUTATION RATE: {config.mutation_rate}%",
        f"    CROSSOVER RATE: {config.crossover_rate}%",
        f"    CHROMOSOMES: {config.gene_base}",
        f"    TOURNAMENT SIZE: {config.tournament_size}",
        f"    ELITE PRESERVATION: {config.elite}",
        f"    GUIDED PROBABILITY RATE: {config.guide_probability}",
    ]
    return "\n".join(lines) + "\n\n\n"


def _emit(tracer: Tracer | None, line: str) -> None:
    if tracer is not None:
        print(line, file=tracer.stream)


def run(config: EvolutionConfig | None = None, rng: random.Random | None = None,
        tracer: Tracer | None = None) -> EvolutionResult:
    """Evolve a population towards the target; progress goes to the tracer's stream."""
    config = config or EvolutionConfig()
    rng = rng or random.Random()
    population = init_population(config, rng, tracer)
    reports: list[GenerationReport] = []

    for generation in range(config.max_generations):
        evaluate(population, config.target, tracer)
        population.sort(key=lambda person: person.wellbeing, reverse=True)
        leader = population[0]
        report = GenerationReport(generation, leader.chromosome, leader.wellbeing,
                                  len(config.target), config.crossover_method)
        reports.append(report)
        _emit(tracer, str(report))

        if leader.wellbeing == len(config.target):
            if tracer is not None:
                tracer.trace(TraceOp.EVO, TraceStage.OK,
                             f"SOLUTION FOUND IN GENERATION {generation}")
            _emit(tracer, f"FINAL STRING: {leader.chromosome}")
            return EvolutionResult(dataclasses.replace(leader), reports, True)

        elites = [dataclasses.replace(person) for person in population[:config.elite]]
        offspring = generate_offspring(population, config.population_size - config.elite,
                                       config, rng, tracer)
        population = elites + offspring

    return EvolutionResult(dataclasses.replace(population[0]), reports, False)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Evolve a string towards a target.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--target", default=None, help="string to evolve towards")
    parser.add_argument("--method", choices=[m.value.lower() for m in CrossoverType],
                        default="single", help="crossover method")
    parser.add_argument("--quiet", action="store_true", help="disable trace lines")
    args = parser.parse_args(argv)

    overrides = {"crossover_method": CrossoverType(args.method.upper())}
    if args.target is not None:
        overrides["target"] = args.target
    try:
        config = EvolutionConfig(**overrides)
    except ValueError as exc:
        parser.error(str(exc))
    tracer = Tracer(enabled=not args.quiet)

    print("EVOLUTIONARY COMPUTATION")
    print(tracer.status(), end="")
    print(format_status(config), end="")

    result = run(config, random.Random(args.seed), tracer)
    best = result.best
    length = len(config.target)
    print(f"BEST SOLUTION: {best.chromosome}")
    print(f"FINAL FITNESS: {best.wellbeing}/{length} ({best.wellbeing / length * 100:.1f}%)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())