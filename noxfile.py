import os
import re
from sys import version_info

import nox

PYTHON_VERSION = f"{version_info[0]}.{version_info[1]}"
PYTHON_VERSIONS = ["3.10", "3.11", "3.12", "3.13"]
PYTHON_RE_PATTERN = re.compile(r"\d\.\d{1,2}")
IS_CI = bool(os.environ.get("CI"))

nox.options.default_venv_backend = "uv"
nox.options.sessions = ["test", "type", "lint", "doctest"]


def get_python_version(session: nox.Session) -> str:
    matches = PYTHON_RE_PATTERN.search(session.name)
    return matches.group(0) if matches else PYTHON_VERSION


@nox.session(python=PYTHON_VERSIONS)
def test(session: nox.Session) -> None:
    """Run unit tests with coverage reporting. Specify version using `nox -s test-{version}`."""
    python_version = get_python_version(session)
    session.install("-e", ".[test]")
    xdist_args = ["-n4", "--dist", "loadfile"]
    cov_args = ["--cov", f"--junitxml=output/junit.{python_version}.xml"]
    cov_term_args = ["--cov-report", "term"]
    cov_xml_args = ["--cov-report", f"xml:output/coverage.{python_version}.xml"]

    session.run("pytest", *xdist_args, *cov_args, *cov_term_args, *cov_xml_args, *session.posargs)


@nox.session
def type(session: nox.Session) -> None:  # noqa: A001
    """Run type checks."""
    session.install("-e", ".[test]", "pyright[nodejs]")
    session.run("pyright", "--stats", "src/", "tests/")


@nox.session
def lint(session: nox.Session) -> None:
    """Perform linting and spellcheck."""
    session.install("ruff", "codespell[toml]")
    session.run("ruff", "check", "--show-fixes", "--exit-non-zero-on-fix", "--fix")
    session.run("ruff", "format", "--check" if IS_CI else ".")
    session.run("codespell")


@nox.session
def doctest(session: nox.Session) -> None:
    """Run docstring tests."""
    session.install("-e", ".[test]")
    target = session.posargs if session.posargs else ["src/discrim"]
    session.run("pytest", "--doctest-modules", "--doctest-continue-on-failure", "--disable-warnings", *target)
