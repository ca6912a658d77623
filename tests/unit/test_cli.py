"""Тесты для CLI.

Coverage:
- Trace + diagram на stdout, код 0
- "Error: <message>" на stderr, код 1
- --quiet / --json / --max-iterations / --version
- Ошибки argparse (код 2)
- Запуск через python -m farey_approx
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from farey_approx import __version__
from farey_approx.cli import main
from farey_approx.core.domain import Fraction
from farey_approx.formatting import format_diagram


class TestSuccess:
    """Успешный поиск."""

    def test_trace_and_diagram(self, capsys):
        assert main(["0.5"]) == 0

        out, err = capsys.readouterr()
        assert out == (
            "$ frac(0,1) <- 0.5 -> frac(1,1) $\n"
            + format_diagram(Fraction.new(1, 2))
            + "\n"
        )
        assert "Error" not in err

    def test_integer(self, capsys):
        assert main(["4"]) == 0

        out, _ = capsys.readouterr()
        assert out.startswith("$ frac(4,1) <- 4 -> frac(4,1) $\n")
        assert out.rstrip("\n").endswith("$ 4 ≈ frac(4,1) $")

    def test_trace_line_per_iteration(self, capsys):
        assert main(["0.3"]) == 0

        out, _ = capsys.readouterr()
        trace = [line for line in out.splitlines() if " <- " in line]
        assert len(trace) == 5
        assert trace[-1] == "$ frac(2,7) <- 0.3 -> frac(1,3) $"

    def test_quiet(self, capsys):
        assert main(["0.3", "--quiet"]) == 0

        out, _ = capsys.readouterr()
        assert " <- " not in out
        assert "$ 0.3 ≈ frac(3,10) $" in out

    def test_json(self, capsys):
        assert main(["0.75", "--json"]) == 0

        out, _ = capsys.readouterr()
        report = json.loads(out)
        assert report["numerator"] == 3
        assert report["denominator"] == 4
        assert report["iterations"] == 3
        assert report["state"] == "CONVERGED"

    def test_verbose(self, capsys):
        assert main(["0.5", "-v"]) == 0


class TestFailure:
    """Ошибки поиска → stderr и код 1."""

    @pytest.mark.parametrize(
        "argv, message",
        [
            (["-1"], "target must be non-negative"),
            (["nan"], "target must be finite"),
            (["inf"], "target must be finite"),
            (["1e30"], "target integer part must fit"),
        ],
    )
    def test_invalid_input(self, capsys, argv, message):
        assert main(argv) == 1

        out, err = capsys.readouterr()
        assert f"Error: {message}" in err
        assert out == ""

    def test_non_convergence(self, capsys):
        assert main(["0.1", "--max-iterations", "3"]) == 1

        out, err = capsys.readouterr()
        assert "Error: no convergence for 0.1 after 3 iterations" in err
        assert len(out.splitlines()) == 3


class TestArguments:
    """argparse поведение."""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        out, _ = capsys.readouterr()
        assert f"farey-approx {__version__}" in out

    def test_missing_number(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_non_numeric(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["abc"])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("value", ["0", "-5", "x"])
    def test_invalid_max_iterations(self, value):
        with pytest.raises(SystemExit) as exc_info:
            main(["0.5", "--max-iterations", value])
        assert exc_info.value.code == 2


SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def run_module(*args):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8"
    return subprocess.run(
        [sys.executable, "-m", "farey_approx", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        timeout=60,
    )


class TestModuleEntryPoint:
    """python -m farey_approx."""

    def test_success(self):
        proc = run_module("0.5")

        assert proc.returncode == 0
        assert "$ 0.5 ≈ frac(1,2) $" in proc.stdout

    def test_failure_exit_code(self):
        proc = run_module("--", "-1")

        assert proc.returncode == 1
        assert proc.stderr.startswith("Error: ")
