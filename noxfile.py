"""Nox configuration file."""

import os

import nox

nox.options.default_venv_backend = "uv"

python = ["3.9", "3.10", "3.11", "3.12", "3.13"]
num_cpus = os.cpu_count() or 1
xdist = ("-n", "auto") if num_cpus > 2 else ()


@nox.session(python=python)
def pytest(session: nox.Session) -> None:
    """Run the test-suite."""
    session.install(".[test]")
    session.run("coverage", "erase")
    session.run("pytest", "--cov=quadrule", *xdist)


@nox.session(python="3.9")
def pytest_oldest_numpy(session: nox.Session) -> None:
    """Run the test-suite against the oldest supported numpy and scipy."""
    session.install(".[test]", "numpy==1.22.*", "scipy==1.8.*")
    session.run("pytest", *xdist)


@nox.session(python="3.13")
def coverage(session: nox.Session) -> None:
    """Generate coverage report."""
    session.install(".[test]")
    session.run("pytest", "--cov=quadrule", *xdist)

    session.run("coverage", "report")
    session.run("coverage", "xml")


@nox.session(python="3.13")
def benchmarks(session: nox.Session) -> None:
    """Time the rule builders with asv against the working tree."""
    session.install(".[dev]")
    session.chdir("benchmarks")
    session.run("asv", "run", "--python=same", "--quick", "--show-stderr")
