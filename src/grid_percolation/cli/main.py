"""
Command-line interface for grid_percolation.

Commands:
    perc trial  --n 10 --probability 0.63 --seed 1
    perc run    --n 10 --probability 0.63 --problems 10 [--seed S] [--no-wait]
    perc sweep  --config sweep.yaml
    perc sweep  --n 20 --p-min 0.4 --p-max 0.8 --n-probabilities 21 --trials 50 --output sweep.csv
"""

import time

import click

from ..errors import PercolationError


def _echo_result(result, title=None):
    from ..percolation.render import render_grid

    click.echo(render_grid(result.grid_state, result.percolates, title=title))
    click.echo(f"Open sites: {result.open_sites}/{result.n * result.n} "
               f"({result.open_fraction:.3f}), seed={result.seed}")


@click.group()
@click.version_option(package_name='grid_percolation')
def cli():
    """Grid Percolation - Site percolation trials on n x n grids."""
    pass


@cli.command('trial')
@click.option('--n', '-n', 'n', default=10, type=int, help='Grid side length')
@click.option('--probability', '-p', default=0.63, type=click.FloatRange(0.0, 1.0),
              help='Probability that each site is open')
@click.option('--seed', '-s', required=True, type=int, help='Random seed')
@click.option('--show/--no-show', default=True, help='Print the grid')
def trial(n, probability, seed, show):
    """Run a single seeded trial."""
    from ..percolation.trial import run_trial

    try:
        result = run_trial(n, probability, seed)
    except PercolationError as e:
        raise click.ClickException(str(e))

    if show:
        _echo_result(result)
    else:
        click.echo(f"Percolates - {str(result.percolates).lower()}")


@cli.command('run')
@click.option('--n', '-n', 'n', default=10, type=int, help='Grid side length')
@click.option('--probability', '-p', default=0.63, type=click.FloatRange(0.0, 1.0),
              help='Probability that each site is open')
@click.option('--problems', '-k', default=10, type=click.IntRange(min=1),
              help='Number of problems to run')
@click.option('--seed', '-s', default=None, type=int,
              help='Base seed; problem i uses seed + i (default: current time in ms)')
@click.option('--wait/--no-wait', default=True, help='Wait for a key press between problems')
def run(n, probability, problems, seed, wait):
    """Run and display a series of numbered problems."""
    from ..percolation.trial import run_problems

    if seed is None:
        seed = int(time.time() * 1000)
    click.echo(f"Running {problems} problems on a {n}x{n} grid with p={probability} (base seed {seed})")

    n_percolating = 0
    try:
        for i, result in enumerate(run_problems(n, probability, problems, seed), start=1):
            n_percolating += result.percolates
            click.echo()
            _echo_result(result, title=f"Problem {i}")

            if wait and i < problems:
                click.pause("Press any key for the next problem...")
    except PercolationError as e:
        raise click.ClickException(str(e))

    click.echo(f"\n✓ {n_percolating}/{problems} problems percolated")


@cli.command('sweep')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Sweep config YAML (overrides the other options)')
@click.option('--n', '-n', 'n', default=20, type=int, help='Grid side length')
@click.option('--p-min', default=0.0, type=click.FloatRange(0.0, 1.0), help='Smallest probability')
@click.option('--p-max', default=1.0, type=click.FloatRange(0.0, 1.0), help='Largest probability')
@click.option('--n-probabilities', default=21, type=click.IntRange(min=1),
              help='Number of probabilities between p-min and p-max')
@click.option('--trials', '-t', default=50, type=click.IntRange(min=1), help='Trials per probability')
@click.option('--seed', '-s', default=0, type=int, help='Base seed')
@click.option('--output', '-o', 'output_file', type=click.Path(), help='Output CSV for per-trial results')
@click.option('--verbose/--quiet', default=False, help='Print progress per probability')
def sweep_command(config_file, n, p_min, p_max, n_probabilities, trials, seed, output_file, verbose):
    """Estimate the percolation curve and threshold by Monte-Carlo sweep."""
    from ..percolation.analysis import (
        get_probability_values, sweep, percolation_curve, estimate_threshold, save_sweep
    )

    if config_file:
        from ..run.config import SweepConfig

        try:
            config = SweepConfig.from_yaml(config_file)
        except ValueError as e:
            raise click.ClickException(f"Invalid config {config_file}: {e}")

        click.echo(f"Loaded {config.summary()}")
        n = config.grid_size
        probabilities = config.probabilities
        trials = config.n_trials
        seed = config.base_seed
        output_file = output_file or config.sweep_csv
    else:
        try:
            probabilities = get_probability_values(p_min, p_max, n_probabilities)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint='--p-min/--p-max')

    try:
        df = sweep(n, probabilities, trials, base_seed=seed, verbose=verbose)
    except PercolationError as e:
        raise click.ClickException(str(e))

    curve = percolation_curve(df)
    click.echo(f"\n{'probability':>12}  {'rate':>6}")
    for row in curve.itertuples(index=False):
        click.echo(f"{row.probability:>12.4f}  {row.percolation_rate:>6.3f}")

    threshold = estimate_threshold(curve)
    if threshold is None:
        click.echo("\nPercolation rate never reached 0.5 in this range")
    else:
        click.echo(f"\nEstimated threshold: {threshold:.4f}")

    if output_file:
        path = save_sweep(df, output_file)
        click.echo(f"✓ Saved {len(df)} trials to {path}")


if __name__ == '__main__':
    cli()
