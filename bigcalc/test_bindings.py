import pytest

from bigcalc.bindings import BindingStore
from bigcalc.errors import InvalidAssignmentError, InvalidIdentifierError, UnknownVariableError


@pytest.fixture
def store():
    return BindingStore()


def test_lookup_missing(store):
    assert store.lookup("x") is None
    assert "x" not in store
    assert len(store) == 0


def test_assign_and_overwrite(store):
    store.assign("x", 5)
    assert store.lookup("x") == 5
    store.assign("x", -2)
    assert store.lookup("x") == -2
    assert len(store) == 1


def test_names_are_case_sensitive(store):
    store.assign("a", 1)
    assert store.lookup("A") is None


def test_resolve_literal(store):
    assert store.resolve_assignment("n = - 3") == ("n", -3)
    assert store.resolve_assignment("n = 42") == ("n", 42)
    assert store.lookup("n") is None


def test_resolve_copies_bound_identifier(store):
    store.assign("a", 10 ** 30)
    assert store.resolve_assignment("b = a") == ("b", 10 ** 30)


def test_resolve_unknown_identifier(store):
    with pytest.raises(UnknownVariableError):
        store.resolve_assignment("b = a")


@pytest.mark.parametrize("statement", ["n1 = 2", "a1b = 3", "_x = 1"])
def test_resolve_invalid_identifier(store, statement):
    with pytest.raises(InvalidIdentifierError):
        store.resolve_assignment(statement)


@pytest.mark.parametrize("statement", [
    "a = 2 + 3",
    "a = 3a",
    "a = = 3",
    "a =",
    "a = -- 3",
    "a = _",
    "a = 3 = 4",
])
def test_resolve_invalid_assignment(store, statement):
    with pytest.raises(InvalidAssignmentError):
        store.resolve_assignment(statement)


def test_execute_commits_only_on_success(store):
    store.execute("a = 7")
    assert store.lookup("a") == 7
    with pytest.raises(InvalidAssignmentError):
        store.execute("a = 7x")
    assert store.lookup("a") == 7
