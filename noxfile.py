import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

nox.options.sessions = ["tests"]


def _install(session: nox.Session, *extras: str) -> None:
    """Editable install of courier-dispatch with the requested extras."""
    target = f".[{','.join(extras)}]" if extras else "."
    session.install("-e", target)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Whole suite against the in-memory adapters."""
    _install(session, "test")
    session.run("pytest", "--cov=delivery", "--cov-report=term-missing", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
@nox.parametrize("layer", ["domain", "application", "integration", "bdd"])
def tests_layer(session: nox.Session, layer: str) -> None:
    """One test layer at a time, selected by the directory markers."""
    _install(session, "test")
    session.run("pytest", "-m", layer, *session.posargs)

