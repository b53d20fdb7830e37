# noxfile.py

import nox


locations = "src", "tests", "noxfile.py"
nox.options.sessions = "lint", "black", "tests"


@nox.session
def lint(session):
    args = session.posargs or locations
    session.install("ruff")
    session.run("ruff", "check", *args)


@nox.session(reuse_venv=True)
def vulture(session):
    """Find dead code"""
    session.install("vulture")
    session.run("vulture", "src")


@nox.session
def tests(session):
    session.install("-e", ".[test]")
    session.run("pytest", "-v", *session.posargs)


@nox.session
def black(session):
    args = session.posargs or locations
    session.install("black")
    session.run("black", *args)
