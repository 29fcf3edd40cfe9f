"""CLI interface for packing items and running benchmarks."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from bestfit import HEURISTICS, PackingError
from bestfit.schemas import ProblemConfig
from bestfit.verify import lower_bound
from experiments.config import load_config
from experiments.runner import BenchmarkRunner
from instances.datasets import generate_uniform_instance, load_items_file, save_items_file

app = typer.Typer(help="Best-Fit bin packing CLI")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def pack(
    items: Optional[list[int]] = typer.Argument(None, help="Item sizes"),
    capacity: int = typer.Option(..., "--capacity", "-k", help="Bin capacity"),
    items_file: Optional[str] = typer.Option(None, "--file", "-f", help="Read item sizes from file"),
    heuristic: str = typer.Option("all", "--heuristic", help="Heuristic name or 'all'"),
    min_size: Optional[int] = typer.Option(None, help="Smallest item size (defaults to the actual minimum)"),
    show_assignment: bool = typer.Option(False, "--assignment", help="Print item to bin assignment"),
) -> None:
    """Pack items with one or all heuristics and report bins used."""
    if heuristic != "all" and heuristic not in HEURISTICS:
        typer.secho(f"❌ Unknown heuristic: {heuristic}. Available: {', '.join(HEURISTICS)}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    try:
        sizes = load_items_file(items_file) if items_file else list(items or [])
        config = ProblemConfig(capacity=capacity, num_items=len(sizes), min_size=min_size)
        names = list(HEURISTICS) if heuristic == "all" else [heuristic]
        results = [HEURISTICS[name](sizes, config) for name in names]
    except FileNotFoundError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except (PackingError, ValueError) as e:
        typer.secho(f"❌ Invalid input: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.echo(f"Items: {len(sizes)} | Capacity: {capacity} | Lower bound: {lower_bound(sizes, capacity)}")
    for result in results:
        typer.echo(f"  {result.heuristic:<20} bins={result.num_bins:<6} time={result.elapsed:.6f}s")
        if show_assignment and result.assignment is not None:
            typer.echo(f"    assignment: {' '.join(str(b) for b in result.assignment)}")


@app.command()
def bench(
    config_path: str = typer.Argument(..., help="Path to benchmark YAML config"),
    no_progress: bool = typer.Option(False, "--no-progress", help="Hide the progress bar"),
) -> None:
    """Run a benchmark from config file."""
    try:
        config = load_config(config_path)
        runner = BenchmarkRunner(config, show_progress=not no_progress)
        summary = runner.run()
    except FileNotFoundError as e:
        typer.secho(f"❌ Config file not found: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except PackingError as e:
        typer.secho(f"❌ Benchmark failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.secho(f"❌ Invalid config: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.secho(f"\n✅ Benchmark completed: {summary['n_instances']} instances", fg=typer.colors.GREEN)
    for name, stats in summary["heuristics"].items():
        typer.echo(
            f"  {name:<20} avg_bins={stats['avg_bins']:.2f} "
            f"avg_gap={stats['avg_gap_to_bound']:.2f} "
            f"time={stats['total_elapsed_s']:.4f}s"
        )
    if runner.artifacts is not None:
        typer.echo(f"   Artifacts: {runner.artifacts.run_dir}")


@app.command()
def generate(
    output: str = typer.Argument(..., help="File to write item sizes to"),
    num_items: int = typer.Option(1000, "--num-items", "-n", help="Number of items"),
    capacity: int = typer.Option(100, "--capacity", "-k", help="Bin capacity"),
    min_size: int = typer.Option(1, help="Smallest item size"),
    max_size: Optional[int] = typer.Option(None, help="Largest item size (defaults to capacity)"),
    seed: int = typer.Option(42, help="Random seed"),
) -> None:
    """Write a uniformly random instance to an item file."""
    try:
        instance = generate_uniform_instance(num_items, capacity, min_size, max_size, seed)
    except ValueError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    save_items_file(output, instance.items)
    typer.secho(f"✅ Wrote {instance.num_items} items to {output}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
