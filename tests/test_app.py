"""
Application root actions, exercised without a display.
"""

import logging
from unittest.mock import MagicMock

import pytest

from employee_db.config import Settings
from employee_db.store import IdStrategy
from gui.app import EmployeeDatabaseApp
from gui.theme import DarkTheme, Theme

ALICE = {
    "name": "Alice",
    "address": "1 Main St",
    "date_of_birth": "01-01-1990",
    "gender": "F",
    "role": "Engineer",
}


@pytest.fixture()
def app():
    return EmployeeDatabaseApp(settings=Settings(id_strategy="length", theme="light", show_validation=False))


def _fill(app, values):
    for name, value in values.items():
        app.state.dialog.set_field(name, value)


def test_app_starts_empty_and_closed(app):
    assert app.state.employees == ()
    assert not app.state.dialog.is_open
    assert app.root is None


def test_add_then_edit_then_delete(app):
    app.open_add_dialog()
    _fill(app, ALICE)
    assert app.commit_dialog() is True

    employee = app.state.employees[0]
    app.open_edit_dialog(employee)
    assert app.state.dialog.fields["name"] == "Alice"
    app.state.dialog.set_field("address", "9 Elm St")
    assert app.commit_dialog() is True
    assert app.state.employees[0].address == "9 Elm St"
    assert app.state.employees[0].id == employee.id

    app.delete_employee(app.state.employees[0])
    assert app.state.employees == ()


def test_cancel_closes_without_commit(app):
    app.open_add_dialog()
    _fill(app, ALICE)
    app.cancel_dialog()
    assert not app.state.dialog.is_open
    assert app.state.employees == ()


def test_opening_twice_keeps_pending_input(app):
    app.open_add_dialog()
    app.state.dialog.set_field("name", "Alice")
    app.open_add_dialog()
    assert app.state.dialog.fields["name"] == "Alice"


def test_incomplete_commit_is_silent_by_default(app, caplog):
    caplog.set_level(logging.WARNING, logger="employee_db.gui")
    app.open_add_dialog()
    assert app.commit_dialog() is False
    assert app.state.dialog.is_open
    assert "Form incomplete" not in caplog.text


def test_incomplete_commit_warns_when_enabled(caplog):
    caplog.set_level(logging.WARNING, logger="employee_db.gui")
    app = EmployeeDatabaseApp(settings=Settings(show_validation=True))
    app.open_add_dialog()
    _fill(app, {**ALICE, "gender": " "})

    assert app.commit_dialog() is False
    assert "Form incomplete: gender" in caplog.text
    assert app.state.employees == ()


def test_settings_pick_id_strategy_and_theme():
    app = EmployeeDatabaseApp(settings=Settings(id_strategy="counter", theme="dark"))
    assert app.state.store.id_strategy is IdStrategy.COUNTER
    assert isinstance(app.theme, DarkTheme)


def test_unknown_theme_falls_back_to_light():
    app = EmployeeDatabaseApp(settings=Settings(theme="neon"))
    assert type(app.theme) is Theme


def test_verbose_setting_reaches_dialog():
    app = EmployeeDatabaseApp.from_settings(Settings(verbose=True))
    assert app.state.dialog.verbose is True


def test_failing_listener_still_closes_form_widget(app):
    form = MagicMock()
    app.root = MagicMock()
    app.form = form
    app.state.dialog.open_for_add()
    _fill(app, ALICE)

    def broken_render(_employees):
        raise RuntimeError("render failed")

    app.state.store.subscribe(broken_render)
    with pytest.raises(RuntimeError):
        app.commit_dialog()

    form.close.assert_called_once_with()
    assert app.form is None
    assert app.commit_dialog() is False
    assert len(app.state.employees) == 1


def test_attach_view_renders_every_change(app):
    view = MagicMock()
    app.attach_view(view)
    view.render.assert_called_once_with(())

    app.open_add_dialog()
    _fill(app, ALICE)
    app.commit_dialog()
    app.delete_employee(app.state.employees[0])

    snapshots = [c.args[0] for c in view.render.call_args_list]
    assert [len(s) for s in snapshots] == [0, 1, 0]
    assert snapshots[1][0].name == "Alice"


def test_attach_view_replaces_previous_subscription(app):
    first, second = MagicMock(), MagicMock()
    app.attach_view(first)
    app.attach_view(second)

    app.state.store.create(ALICE)

    assert first.render.call_count == 1
    assert second.render.call_count == 2
    assert app.view is second
