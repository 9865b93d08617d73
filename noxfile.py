"""Nox sessions for unimath."""

import nox


PYPROJECT = nox.project.load_toml("pyproject.toml")
PYTHON_VERSIONS = nox.project.python_versions(PYPROJECT, max_version="3.14")
DEV_DEPS = nox.project.dependency_groups(PYPROJECT, "dev")
nox.options.default_venv_backend = "uv"
nox.options.sessions = ["tests"]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the test suite on every supported interpreter."""
    session.install(".", *DEV_DEPS)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def coverage(session: nox.Session) -> None:
    """Measure coverage of the unimath package on the newest interpreter."""
    session.install(".", *DEV_DEPS)
    session.run(
        "pytest",
        "--cov=unimath",
        "--cov-report=term-missing",
        *session.posargs,
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def cli(session: nox.Session) -> None:
    """Smoke-test the installed console script."""
    session.install(".")
    session.run("unimath", "--version")
    session.run("unimath", "style", "x + y", "--math-style", "iso")
    session.run("unimath", "table", "num")
