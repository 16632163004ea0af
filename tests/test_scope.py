import pytest

from versionfox.scope import Location, UseScope


@pytest.mark.parametrize(
    "scope, text",
    [(UseScope.GLOBAL, "global"), (UseScope.PROJECT, "project"), (UseScope.SESSION, "session")],
)
def test_use_scope_str(scope, text):
    assert str(scope) == text
    assert f"{scope}" == text


@pytest.mark.parametrize(
    "location, text",
    [(Location.ORIGINAL, "original"), (Location.GLOBAL, "global"), (Location.SHELL, "shell")],
)
def test_location_str(location, text):
    assert str(location) == text


def test_ordering_of_values():
    assert [int(s) for s in UseScope] == [0, 1, 2]
    assert [int(loc) for loc in Location] == [0, 1, 2]
    assert UseScope(1) is UseScope.PROJECT
    assert Location(2) is Location.SHELL


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        UseScope(7)