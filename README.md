# interpolab

Compares three polynomial interpolation methods — Lagrange, Newton (divided
differences) and Hermite (values and first derivatives) — on the function

    f(x) = sin(4x/π) · exp(-0.4x/π)

over the interval [-2π², π²]. Each method is tried with uniformly spaced nodes
and with Chebyshev nodes, for every node count from 1 up to a limit you pick
(at most 500).

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Running the analysis

    interpolab [MAX_NODES] [--root DIR]

`MAX_NODES` is the largest node count, from 1 to 500. If it is left out, the
command asks for it. A value that is not a whole number, or one outside that
range, makes the command print an error and exit with status 1.

For every `n` from 1 to that count the command prints the maximum absolute
error and the mean squared error of each method and node kind, measured at
1000 evenly spaced points across the interval.

It writes these files under `DIR` (the current directory by default), creating
`data/`, `scripts/` and `plots/` as needed:

- `data/original_function.dat` — the sampled function
- `data/uniform_nodes_n<N>.dat`, `data/chebyshev_nodes_n<N>.dat` — the nodes
- `data/<method>_<nodes>_n<N>.dat` — each interpolated curve, where
  `<method>` is `lagrange`, `newton` or `hermite` and `<nodes>` is `uniform`
  or `chebyshev`
- `data/<method>_<nodes>_errors.csv` — error per node count, with the header
  `NumNodes,MaxAbsoluteError,MeanSquaredError`
- `scripts/plot_interpolation.gp` and `scripts/plot_errors.gp` — gnuplot
  scripts that turn the data into PNG files under `plots/`

## What it does not do

interpolab does not draw plots itself and does not start gnuplot. Run gnuplot
yourself on the two scripts, from the output directory:

    gnuplot scripts/plot_interpolation.gp
    gnuplot scripts/plot_errors.gp

## Using the library

    from interpolab.function import f, df
    from interpolab.nodes import chebyshev_nodes
    from interpolab.interpolation import lagrange, newton, hermite
    from interpolab.errors import calculate_error

    xs = chebyshev_nodes(8)
    ys = [f(x) for x in xs]
    ds = [df(x) for x in xs]

    print(lagrange(0.5, xs, ys), newton(0.5, xs, ys), hermite(0.5, xs, ys, ds))

    result = calculate_error([f(0.5)], [hermite(0.5, xs, ys, ds)])
    print(result.max_error, result.mean_squared_error)

The modules:

- `interpolab.function` — `f`, its derivative `df`, and the constants `K`,
  `M`, `A`, `B` (the interval) and `MAX_NODES`.
- `interpolab.nodes` — `uniform_nodes(n)` and `chebyshev_nodes(n)`, both in
  ascending order; `n` below 1 raises `ValueError`.
- `interpolab.interpolation` — `lagrange`, `newton` and `hermite`. Coincident
  nodes give NaN, with a `RuntimeWarning`. `newton` raises `ValueError` for no
  nodes, and `newton` and `hermite` raise it for more than `MAX_NODES` nodes.
- `interpolab.errors` — `calculate_error(true_values, interp_values)` returns
  an `ErrorResult` with `max_error` and `mean_squared_error`; empty or unequal
  inputs raise `ValueError`.
- `interpolab.datafiles` — `write_points(path, xs, ys)` and
  `write_error_csv(path, max_errors, mse)`.
- `interpolab.gnuplot` — `interpolation_plot_script(max_nodes)` and
  `error_plot_script(series)` return script text; `write_script(path, text)`
  saves it.
- `interpolab.cli` — `run_analysis(max_nodes, root)` runs the whole analysis,
  writes its output under `root` and returns the errors keyed by
  `(Method, NodeKind)`; `main(argv)` is the command.