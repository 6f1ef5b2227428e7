from dataclasses import FrozenInstanceError

import pytest

from employee_db.models import Employee
from employee_db.store import EmployeeStore, IdStrategy


def _fields(name, role="Engineer"):
    return {
        "name": name,
        "address": f"{name} street",
        "date_of_birth": "01-01-1990",
        "gender": "F",
        "role": role,
    }


@pytest.fixture()
def store():
    return EmployeeStore()


def test_create_assigns_length_plus_one(store):
    for i, name in enumerate(["Alice", "Bob", "Carol"], start=1):
        employee = store.create(_fields(name))
        assert employee.id == i == len(store)
    assert [e.name for e in store] == ["Alice", "Bob", "Carol"]


def test_ids_repeat_after_delete_with_length_strategy(store):
    alice = store.create(_fields("Alice"))
    store.remove(alice.id)
    assert len(store) == 0

    carol = store.create(_fields("Carol"))
    assert carol.id == 1


def test_counter_strategy_never_reuses_ids():
    store = EmployeeStore(IdStrategy.COUNTER)
    alice = store.create(_fields("Alice"))
    store.remove(alice.id)

    carol = store.create(_fields("Carol"))
    assert carol.id == 2


def test_update_changes_only_matching_record(store):
    store.create(_fields("Alice"))
    bob = store.create(_fields("Bob"))
    carol = store.create(_fields("Carol"))

    store.update(2, _fields("Bobby", role="Manager"))

    assert store.employees[0].name == "Alice"
    assert store.employees[1] == Employee(id=2, **_fields("Bobby", role="Manager"))
    assert store.employees[2] == carol
    assert bob != store.employees[1]


def test_update_unknown_id_is_noop(store):
    store.create(_fields("Alice"))
    before = store.employees
    store.update(42, _fields("Nobody"))
    assert store.employees is before


def test_update_rewrites_every_duplicate_id(store):
    store.add(Employee(id=1, **_fields("Alice")))
    store.add(Employee(id=1, **_fields("Alias")))

    store.update(1, {"role": "Manager"})

    assert [e.role for e in store] == ["Manager", "Manager"]
    assert [e.name for e in store] == ["Alice", "Alias"]


def test_remove_drops_all_matches_and_keeps_order(store):
    store.add(Employee(id=1, **_fields("Alice")))
    store.add(Employee(id=2, **_fields("Bob")))
    store.add(Employee(id=1, **_fields("Alias")))
    store.add(Employee(id=3, **_fields("Carol")))

    store.remove(1)

    assert [e.name for e in store] == ["Bob", "Carol"]


def test_get_returns_first_match(store):
    store.add(Employee(id=1, **_fields("Alice")))
    store.add(Employee(id=1, **_fields("Alias")))
    assert store.get(1).name == "Alice"
    assert store.get(9) is None


def test_subscribers_receive_snapshots(store):
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.create(_fields("Alice"))
    store.update(1, {"role": "Manager"})
    store.remove(1)

    assert [len(snapshot) for snapshot in seen] == [1, 1, 0]
    assert seen[1][0].role == "Manager"

    unsubscribe()
    store.create(_fields("Bob"))
    assert len(seen) == 3


def test_noop_mutations_do_not_notify(store):
    seen = []
    store.subscribe(seen.append)
    store.update(5, {"role": "Manager"})
    store.remove(5)
    assert seen == []


def test_employee_is_immutable():
    employee = Employee(id=1, **_fields("Alice"))
    with pytest.raises(FrozenInstanceError):
        employee.name = "Eve"


def test_with_fields_keeps_id():
    employee = Employee(id=7, **_fields("Alice"))
    edited = employee.with_fields({"id": 99, "role": "Manager"})
    assert edited.id == 7
    assert edited.role == "Manager"


@pytest.mark.parametrize(
    "raw, expected",
    [("length", IdStrategy.LENGTH), ("COUNTER", IdStrategy.COUNTER), ("uuid", IdStrategy.LENGTH)],
)
def test_id_strategy_parse(raw, expected):
    assert IdStrategy.parse(raw) is expected
