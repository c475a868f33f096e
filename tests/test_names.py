import pytest

from phpgen.errors import InvalidModelError
from phpgen.names import NameSet, QualifiedName


@pytest.mark.parametrize("raw", ["App\\Models\\User", "App/Models/User", "App.Models.User", "App\\Models\\User\\"])
def test_parse_splits_namespace(raw):
    qn = QualifiedName.parse(raw)
    assert qn.namespace == "App\\Models"
    assert qn.short_name == "User"
    assert qn.fqn == "App\\Models\\User"


def test_global_name():
    qn = QualifiedName.parse("\\Countable")
    assert qn.namespace is None
    assert qn.absolute
    assert qn.fqn == "Countable"
    assert qn.reference == "\\Countable"


@pytest.mark.parametrize("raw", ["", "\\", "App\\9Lives", "App\\\\User", "App\\has-dash"])
def test_invalid_names(raw):
    with pytest.raises(InvalidModelError):
        QualifiedName.parse(raw)


def test_name_set_collapses_duplicates():
    names = NameSet(["B\\Two", "A\\One"])
    names.add("\\B\\Two", "A/One", "C")
    assert len(names) == 3
    assert names.references() == ["B\\Two", "A\\One", "C"]
    assert names.sorted() == ["A\\One", "B\\Two", "C"]
    assert "A.One" in names
    assert 42 not in names


def test_name_set_discard():
    names = NameSet(["A", "B"])
    names.discard("A")
    names.discard("Missing")
    assert names.references() == ["B"]
    assert not NameSet()
