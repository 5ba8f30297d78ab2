"""Developer tasks for webdriver-wire, run with Invoke."""

from __future__ import annotations

import pathlib
import subprocess
from typing import Iterable

from invoke import task

ROOT = pathlib.Path(__file__).parent.resolve()
RESULTS_DIR = ROOT / "results"
SOURCES = ("src/webdriver_wire", "tests", "tasks.py")


def _run(command: Iterable[str] | str) -> None:
    cmd = command if isinstance(command, str) else " ".join(command)
    subprocess.run(cmd, shell=True, check=True, cwd=ROOT)


@task(help={"k": "Only run tests matching this pytest -k expression"})
def tests(_context, k=""):
    """Run the test suite without coverage."""
    args = ["uv", "run", "pytest", "tests/"]
    if k:
        args += ["-k", f'"{k}"']
    _run(args)


@task
def coverage(_context):
    """Run tests under coverage and write reports to results/."""
    RESULTS_DIR.mkdir(exist_ok=True)
    _run("uv run coverage erase")
    _run(["uv", "run", "coverage", "run", "-m", "pytest", "tests/", "--junitxml=results/pytest.xml"])
    _run("uv run coverage combine")
    _run("uv run coverage report")
    _run(["uv", "run", "coverage", "html", "-d", "results/htmlcov"])
    _run(["uv", "run", "coverage", "xml", "-o", "results/coverage.xml"])


@task
def fmt(_context):
    """Reformat sources with black."""
    _run(["uv", "run", "black", *SOURCES])


@task
def lint(_context):
    """Check formatting and types."""
    _run(["uv", "run", "black", "--check", *SOURCES])
    _run(["uv", "run", "mypy", "src/webdriver_wire"])


@task
def build(_context):
    """Build sdist and wheel."""
    _run("uv build")
