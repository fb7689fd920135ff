"""Gnuplot scripts that plot the interpolated curves and the error trends."""

import os
from collections.abc import Mapping, Sequence

from interpolab.function import A, B

#: Error series in plotting order: key, point type, colour, legend title.
_ERROR_SERIES = (
    ("lagrange_uniform", 7, "purple", "Lagrange (Uniform Nodes)"),
    ("lagrange_chebyshev", 4, "magenta", "Lagrange (Chebyshev Nodes)"),
    ("newton_uniform", 7, "blue", "Newton (Uniform Nodes)"),
    ("newton_chebyshev", 4, "green", "Newton (Chebyshev Nodes)"),
    ("hermite_uniform", 7, "orange", "Hermite (Uniform Nodes)"),
    ("hermite_chebyshev", 4, "red", "Hermite (Chebyshev Nodes)"),
)

#: Interpolation methods: file stem, display name, dash type.
_METHODS = (
    ("lagrange", "Lagrange", 2),
    ("newton", "Newton", 4),
    ("hermite", "Hermite", 5),
)

#: Node kinds: file stem, display name, title used on the combined plot.
_KINDS = (
    ("uniform", "Uniform", "węzły równoodległe"),
    ("chebyshev", "Chebyshev", "węzły Czebyszewa"),
)

#: Curve colour for each method and node kind.
_COLOURS = {
    ("lagrange", "uniform"): "purple",
    ("lagrange", "chebyshev"): "magenta",
    ("newton", "uniform"): "blue",
    ("newton", "chebyshev"): "green",
    ("hermite", "uniform"): "orange",
    ("hermite", "chebyshev"): "red",
}

_ORIGINAL_LINE = (
    "plot 'data/original_function.dat' with lines dashtype 3 lw 3 "
    "lc rgb 'black' title 'Original Function',\\\n"
)


def error_plot_script(series: Mapping[str, Sequence[float]]) -> str:
    """Return a script plotting maximum error against node count for all six cases.

    ``series`` maps each of ``lagrange_uniform``, ``lagrange_chebyshev``,
    ``newton_uniform``, ``newton_chebyshev``, ``hermite_uniform`` and
    ``hermite_chebyshev`` to the errors for node counts 1..n. All series must
    have the same length; a missing key or a length mismatch raises ValueError.
    """
    missing = [key for key, *_ in _ERROR_SERIES if key not in series]
    if missing:
        raise ValueError(f"missing error series: {', '.join(missing)}")
    lengths = {len(series[key]) for key, *_ in _ERROR_SERIES}
    if len(lengths) > 1:
        raise ValueError(f"error series differ in length: {sorted(lengths)}")

    parts = [
        "set terminal pngcairo enhanced size 1200,800 font 'Arial,12'\n",
        "set output 'plots/interpolation_errors.png'\n",
        "set title 'Comparison of Interpolation Errors (Max Absolute Error)'\n",
        "set xlabel 'Number of Nodes (n)'\n",
        "set ylabel 'Maximum Absolute Error'\n",
        "set grid\n",
        "set key below\n",
        "set logscale y\n",
        "system 'mkdir -p plots'\n",
    ]
    last = len(_ERROR_SERIES) - 1
    for index, (_, point, colour, title) in enumerate(_ERROR_SERIES):
        lead = "plot " if index == 0 else "     "
        tail = "\n" if index == last else ", \\\n"
        parts.append(
            f"{lead}'-' using 1:2 with linespoints pt {point} "
            f"lc rgb '{colour}' title '{title}'{tail}"
        )
    for key, *_ in _ERROR_SERIES:
        parts.extend(
            f"{count} {error:e}\n" for count, error in enumerate(series[key], start=1)
        )
        parts.append("e\n")
    return "".join(parts)


def _curve_line(stem: str, name: str, dash: int, kind: str, n: int) -> str:
    colour = _COLOURS[(stem, kind)]
    return (
        f"     'data/{stem}_{kind}_n{n}.dat' with lines dashtype {dash} lw 3 "
        f"lc rgb '{colour}' title '{name} Interpolation',\\\n"
    )


def _nodes_line(kind: str, n: int) -> str:
    return (
        f"     'data/{kind}_nodes_n{n}.dat' with points pt 7 ps 1.5 "
        f"lc rgb 'black' title 'Interpolation Nodes'\n"
    )


def _plots_for(n: int) -> list[str]:
    parts = []
    for stem, name, dash in _METHODS:
        for kind, kind_name, _ in _KINDS:
            parts.append(f"set output 'plots/{stem}_{kind}_with_nodes_n{n}.png'\n")
            parts.append(
                f'set title "{name} Interpolation (n={n}, {kind_name} Nodes)"\n'
            )
            parts.append(_ORIGINAL_LINE)
            parts.append(_curve_line(stem, name, dash, kind, n))
            parts.append(_nodes_line(kind, n))
    for kind, _, combined_title in _KINDS:
        parts.append(f"set output 'plots/all_{kind}_with_nodes_n{n}.png'\n")
        parts.append(f'set title "Wszystkie interpolacje (n={n}, {combined_title})"\n')
        parts.append(_ORIGINAL_LINE)
        parts.extend(_curve_line(stem, name, dash, kind, n) for stem, name, dash in _METHODS)
        parts.append(_nodes_line(kind, n))
    return parts


def interpolation_plot_script(max_nodes: int) -> str:
    """Return a script drawing every interpolated curve for node counts 1..max_nodes.

    For each count there is one plot per method and node kind, plus one plot per
    node kind with all methods together. A negative count raises ValueError.
    """
    if max_nodes < 0:
        raise ValueError(f"max_nodes must not be negative, got {max_nodes}")
    parts = [
        "set terminal pngcairo size 1200,800\n",
        "set grid\n",
        "set key below\n",
        "set xlabel 'x'\n",
        "set ylabel 'f(x)'\n",
        f"set xrange [{A:.2f}:{B:.2f}]\n",
        "set yrange [-15:15]\n",
        "system 'mkdir -p plots data'\n",
        "# Plots of interpolated functions with nodes\n",
    ]
    for n in range(1, max_nodes + 1):
        parts.extend(_plots_for(n))
    return "".join(parts)


def write_script(path: str | os.PathLike[str], text: str) -> None:
    """Write a script to ``path`` as UTF-8; raises OSError if it cannot be written."""
    with open(path, "w", encoding="utf-8") as out:
        out.write(text)