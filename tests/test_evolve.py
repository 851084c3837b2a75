import io
import random

from evotsp.evolve import EvolutionResult, GenerationReport, format_status, main, run
from evotsp.genetics import CrossoverType, EvolutionConfig, fitness
from evotsp.trace import Tracer


def test_format_status_default():
    status = format_status(EvolutionConfig())
    assert status.startswith("EVO CONFIG:\n")
    assert "    POPULATION SIZE: 50\n" in status
    assert "    MUTATION RATE: 3%\n" in status
    assert "    CURRENT CROSSOVER TYPE: SINGLE\n" in status


def test_generation_report_line():
    report = GenerationReport(3, "HELLO", 4, 5, CrossoverType.DOUBLE)
    assert str(report) == "GENERATION 3: HELLO  (FITNESS: 4/5)    METHOD: DOUBLE_POINT"


def test_fully_guided_run_solves_quickly():
    config = EvolutionConfig(mutation_rate=100, guide_probability=100)
    result = run(config, random.Random(1))
    assert isinstance(result, EvolutionResult)
    assert result.solved
    assert result.best.chromosome == config.target
    assert len(result.generations) <= 2
    assert result.found_at == result.generations[-1].generation


def test_unreachable_target_runs_all_generations():
    config = EvolutionConfig(target="!!!!", mutation_rate=0, max_generations=5,
                             population_size=10, elite=2)
    result = run(config, random.Random(2))
    assert not result.solved
    assert result.found_at is None
    assert len(result.generations) == 5
    assert result.best.wellbeing == 0


def test_elitism_keeps_best_fitness_non_decreasing():
    config = EvolutionConfig(max_generations=30)
    result = run(config, random.Random(3))
    scores = [report.fitness for report in result.generations]
    assert scores == sorted(scores)
    assert result.best.wellbeing == fitness(result.best.chromosome, config.target)
    assert result.solved == (result.best.wellbeing == len(config.target))


def test_run_writes_progress_to_tracer_stream():
    buf = io.StringIO()
    config = EvolutionConfig(max_generations=3, target="!!!!", mutation_rate=0)
    run(config, random.Random(4), Tracer(enabled=False, stream=buf))
    lines = buf.getvalue().splitlines()
    assert len(lines) == 3
    assert all(line.startswith("GENERATION ") for line in lines)


def test_main_prints_summary(capsys):
    assert main(["--seed", "5", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "EVO CONFIG:" in out
    assert "GLOBAL TRACE:      DISABLED" in out
    assert "BEST SOLUTION:" in out
    assert "FINAL FITNESS:" in out
    assert "[TRACE]" not in out