import math

import pytest

from interpolab.cli import PLOT_POINTS, Method, NodeKind, main, run_analysis
from interpolab.function import A, B, MAX_NODES, df, f
from interpolab.nodes import chebyshev_nodes, uniform_nodes


@pytest.fixture
def results_two(tmp_path):
    return run_analysis(2, tmp_path), tmp_path


def test_node_kinds_generate_matching_nodes():
    assert NodeKind.UNIFORM.nodes(4) == uniform_nodes(4)
    assert NodeKind.CHEBYSHEV.nodes(4) == chebyshev_nodes(4)


def test_methods_reproduce_node_values():
    nodes = uniform_nodes(3)
    values = [f(x) for x in nodes]
    derivatives = [df(x) for x in nodes]
    for method in Method:
        for node, value in zip(nodes, values):
            assert method.evaluate(node, nodes, values, derivatives) == pytest.approx(
                value, abs=1e-9
            )


def test_labels_appear_in_report(tmp_path, capsys):
    assert main(["1", "--root", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert Method.LAGRANGE.label == "Lagrange"
    assert NodeKind.CHEBYSHEV.label == "Chebyshev"
    assert "Lagrange (Chebyshev):" in out
    assert "Hermite (Uniform):" in out


def test_run_analysis_result_shape(results_two):
    results, _ = results_two
    assert set(results) == {(m, k) for m in Method for k in NodeKind}
    assert all(len(errors) == 2 for errors in results.values())


def test_single_node_lagrange_and_newton_agree(results_two):
    results, _ = results_two
    for kind in NodeKind:
        lag = results[(Method.LAGRANGE, kind)][0]
        new = results[(Method.NEWTON, kind)][0]
        assert lag.max_error == pytest.approx(new.max_error)
        assert lag.mean_squared_error == pytest.approx(new.mean_squared_error)


def test_mse_bounded_by_max_error_squared(results_two):
    results, _ = results_two
    for errors in results.values():
        for error in errors:
            assert error.mean_squared_error <= error.max_error ** 2 + 1e-12


def test_original_function_file(results_two):
    _, root = results_two
    lines = (root / "data" / "original_function.dat").read_text().splitlines()
    assert len(lines) == PLOT_POINTS
    first_x, first_y = map(float, lines[0].split())
    last_x, _ = map(float, lines[-1].split())
    assert first_x == pytest.approx(A, abs=1e-6)
    assert last_x == pytest.approx(B, abs=1e-6)
    assert first_y == pytest.approx(f(A), abs=1e-6)


def test_all_expected_files_written(results_two):
    _, root = results_two
    data_names = {p.name for p in (root / "data").iterdir()}
    for n in (1, 2):
        for kind in NodeKind:
            assert f"{kind.value}_nodes_n{n}.dat" in data_names
            for method in Method:
                assert f"{method.value}_{kind.value}_n{n}.dat" in data_names
    for method in Method:
        for kind in NodeKind:
            assert f"{method.value}_{kind.value}_errors.csv" in data_names
    assert len(data_names) == 1 + 2 * 8 + 6
    script_names = {p.name for p in (root / "scripts").iterdir()}
    assert script_names == {"plot_interpolation.gp", "plot_errors.gp"}


def test_error_csv_matches_results(results_two):
    results, root = results_two
    lines = (root / "data" / "newton_chebyshev_errors.csv").read_text().splitlines()
    assert lines[0] == "NumNodes,MaxAbsoluteError,MeanSquaredError"
    assert len(lines) == 3
    for line, error in zip(lines[1:], results[(Method.NEWTON, NodeKind.CHEBYSHEV)]):
        _, max_error, mse = line.split(",")
        assert float(max_error) == pytest.approx(error.max_error, rel=1e-9)
        assert float(mse) == pytest.approx(error.mean_squared_error, rel=1e-9)


def test_nodes_file_holds_function_values(results_two):
    _, root = results_two
    lines = (root / "data" / "chebyshev_nodes_n2.dat").read_text().splitlines()
    assert len(lines) == 2
    for line, node in zip(lines, chebyshev_nodes(2)):
        x, y = map(float, line.split())
        assert x == pytest.approx(node, abs=1e-6)
        assert y == pytest.approx(f(node), abs=1e-6)


@pytest.mark.parametrize("count", [0, MAX_NODES + 1])
def test_run_analysis_rejects_out_of_range(tmp_path, count):
    with pytest.raises(ValueError):
        run_analysis(count, tmp_path)


def test_main_with_argument(tmp_path, capsys):
    assert main(["1", "--root", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Analysis complete." in out
    assert "Results for Number of Nodes: 1" in out
    assert (tmp_path / "scripts" / "plot_errors.gp").is_file()


def test_main_prompts_when_no_argument(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "1")
    assert main(["--root", str(tmp_path)]) == 0
    assert (tmp_path / "data" / "hermite_uniform_errors.csv").is_file()
    assert "Analysis complete." in capsys.readouterr().out


def test_main_rejects_non_number(tmp_path, capsys):
    assert main(["abc", "--root", str(tmp_path)]) == 1
    assert "Error reading the number of nodes." in capsys.readouterr().out
    assert not (tmp_path / "data").exists()


@pytest.mark.parametrize("raw", ["0", str(MAX_NODES + 1)])
def test_main_rejects_out_of_range(tmp_path, capsys, raw):
    assert main([raw, "--root", str(tmp_path)]) == 1
    assert "Invalid number of nodes" in capsys.readouterr().out


def test_hermite_single_node_is_finite(results_two):
    results, _ = results_two
    for kind in NodeKind:
        error = results[(Method.HERMITE, kind)][0]
        assert math.isfinite(error.max_error)
        assert error.max_error > 0.0