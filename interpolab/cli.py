"""Command that compares Lagrange, Newton and Hermite interpolation of the model function."""

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path

from interpolab.datafiles import write_error_csv, write_points
from interpolab.errors import ErrorResult, calculate_error
from interpolab.function import A, B, K, M, MAX_NODES, df, f
from interpolab.gnuplot import error_plot_script, interpolation_plot_script, write_script
from interpolab.interpolation import hermite, lagrange, newton
from interpolab.nodes import chebyshev_nodes, uniform_nodes

#: Number of points on which curves are sampled and errors measured.
PLOT_POINTS = 1000

_RULE = "========================================================================="


class Method(Enum):
    """Interpolation method."""

    LAGRANGE = "lagrange"
    NEWTON = "newton"
    HERMITE = "hermite"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def evaluate(
        self,
        x: float,
        nodes: Sequence[float],
        values: Sequence[float],
        derivatives: Sequence[float],
    ) -> float:
        """Evaluate this method's interpolating polynomial at ``x``."""
        if self is Method.HERMITE:
            return hermite(x, nodes, values, derivatives)
        if self is Method.NEWTON:
            return newton(x, nodes, values)
        return lagrange(x, nodes, values)


class NodeKind(Enum):
    """Distribution of interpolation nodes over the interval."""

    UNIFORM = "uniform"
    CHEBYSHEV = "chebyshev"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def nodes(self, n: int) -> list[float]:
        """Return ``n`` nodes of this kind."""
        generate: Callable[[int], list[float]] = (
            uniform_nodes if self is NodeKind.UNIFORM else chebyshev_nodes
        )
        return generate(n)


Results = dict[tuple[Method, NodeKind], list[ErrorResult]]


def _sample_points() -> list[float]:
    step = (B - A) / (PLOT_POINTS - 1.0)
    xs = [A + i * step for i in range(PLOT_POINTS)]
    xs[-1] = B
    return xs


def run_analysis(max_nodes: int, root: str | os.PathLike[str]) -> Results:
    """Interpolate with 1..max_nodes nodes and write data files and plot scripts.

    Files go to ``data/`` and ``scripts/`` under ``root`` (``plots/`` is created
    for the scripts' output). Returns the errors for each method and node kind,
    one entry per node count. Raises ValueError if ``max_nodes`` is outside
    1..MAX_NODES.
    """
    if not 1 <= max_nodes <= MAX_NODES:
        raise ValueError(
            f"number of nodes must be between 1 and {MAX_NODES}, got {max_nodes}"
        )
    root_path = Path(root)
    data_dir = root_path / "data"
    scripts_dir = root_path / "scripts"
    for directory in (data_dir, scripts_dir, root_path / "plots"):
        directory.mkdir(parents=True, exist_ok=True)

    xs = _sample_points()
    y_true = [f(x) for x in xs]
    write_points(data_dir / "original_function.dat", xs, y_true)

    results: Results = {(method, kind): [] for method in Method for kind in NodeKind}
    for n in range(1, max_nodes + 1):
        for kind in NodeKind:
            nodes = kind.nodes(n)
            values = [f(node) for node in nodes]
            derivatives = [df(node) for node in nodes]
            write_points(data_dir / f"{kind.value}_nodes_n{n}.dat", nodes, values)
            for method in Method:
                y_interp = [method.evaluate(x, nodes, values, derivatives) for x in xs]
                write_points(data_dir / f"{method.value}_{kind.value}_n{n}.dat", xs, y_interp)
                results[(method, kind)].append(calculate_error(y_true, y_interp))

    for (method, kind), errors in results.items():
        write_error_csv(
            data_dir / f"{method.value}_{kind.value}_errors.csv",
            [e.max_error for e in errors],
            [e.mean_squared_error for e in errors],
        )

    write_script(scripts_dir / "plot_interpolation.gp", interpolation_plot_script(max_nodes))
    series = {
        f"{method.value}_{kind.value}": [e.max_error for e in errors]
        for (method, kind), errors in results.items()
    }
    write_script(scripts_dir / "plot_errors.gp", error_plot_script(series))
    return results


def _report(results: Results, max_nodes: int) -> None:
    print(
        f"\nInterpolation analysis for f(x) = sin({K:.1f}x/pi) * exp(-{M:.1f}x/pi) "
        f"on [{A:.2f}, {B:.2f}]"
    )
    print(_RULE)
    for index in range(max_nodes):
        print(f"\nResults for Number of Nodes: {index + 1}")
        print("-----------------------------------")
        print("Maximum Absolute Errors:")
        for (method, kind), errors in results.items():
            label = f"{method.label} ({kind.label}):"
            print(f"  {label:<22}{errors[index].max_error:.3e}")
        print("\nMean Squared Errors (MSE):")
        for (method, kind), errors in results.items():
            label = f"{method.label} ({kind.label}):"
            print(f"  {label:<22}{errors[index].mean_squared_error:.3e}")
    print("\nGenerated Gnuplot script: scripts/plot_interpolation.gp")
    print("\nGenerated Gnuplot script: scripts/plot_errors.gp")
    print(f"\n{_RULE}")
    print("Analysis complete.")
    print("Data files saved in the data/ directory.")
    print("Gnuplot scripts saved in the scripts/ directory.")
    print("To generate the plots, navigate to the project root directory and run:")
    print("  gnuplot scripts/plot_interpolation.gp")
    print("  gnuplot scripts/plot_errors.gp")
    print("Generated plots (.png files) will be saved in the plots/ directory.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the analysis; the node count comes from the arguments or a prompt."""
    parser = argparse.ArgumentParser(
        description="Compare Lagrange, Newton and Hermite interpolation."
    )
    parser.add_argument("max_nodes", nargs="?", help=f"maximum node count (1-{MAX_NODES})")
    parser.add_argument("--root", default=".", help="directory that receives the output")
    args = parser.parse_args(argv)

    raw = args.max_nodes
    if raw is None:
        try:
            raw = input(f"Enter the maximum number of interpolation nodes (1-{MAX_NODES}): ")
        except EOFError:
            raw = ""
    try:
        max_nodes = int(raw)
    except ValueError:
        print("Error reading the number of nodes.")
        return 1
    if not 1 <= max_nodes <= MAX_NODES:
        print(f"Invalid number of nodes. Must be between 1 and {MAX_NODES}")
        return 1

    try:
        results = run_analysis(max_nodes, args.root)
    except OSError as exc:
        print(f"Error writing output: {exc}", file=sys.stderr)
        return 1
    _report(results, max_nodes)
    return 0


if __name__ == "__main__":
    sys.exit(main())