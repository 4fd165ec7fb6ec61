import nox

PYTHON_VERSIONS = ["3.9", "3.10", "3.11", "3.12"]
PACKAGE = "labbook"

nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = ("pytest", "lint")


@nox.session(python="python3")
def lint(session):
    session.install("flake8")
    session.run("flake8", PACKAGE)


@nox.session(python=PYTHON_VERSIONS)
def pytest(session):
    print("SQLALCHEMY_DATABASE_URI=", session.env.get("SQLALCHEMY_DATABASE_URI"))

    session.install("-e", ".[tests]")

    session.run("pip", "check")
    session.run("pytest", "-q")
