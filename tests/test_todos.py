import io
import json

import pytest

from toybox.todos import Status, Todo, TodoApp


def run_app(script, app=None):
    app = TodoApp() if app is None else app
    output = io.StringIO()
    app.run(io.StringIO(script), output)
    return app, output.getvalue()


def test_status_serialised_names():
    app = TodoApp([Todo("a", Status.IN_PROGRESS), Todo("b", Status.DONE)])
    statuses = [item["status"] for item in json.loads(app.to_json())]
    assert statuses == ["InProgres", "Done"]


def test_add_appends_item_without_status():
    app = TodoApp()
    todo = app.add("buy milk")
    assert app.todos == [Todo("buy milk")]
    assert todo.status is None


def test_add_ignores_empty_text():
    app = TodoApp()
    assert app.add("") is None
    assert app.todos == []


def test_list_numbers_items_in_order():
    app = TodoApp()
    app.add("first")
    app.add("second")
    lines = app.list()
    assert len(lines) == 2
    assert lines[0].startswith("0 -> ") and "first" in lines[0]
    assert lines[1].startswith("1 -> ") and "second" in lines[1]


def test_list_line_format():
    app = TodoApp([Todo("x")])
    assert app.list() == ['0 -> Todo { text: "x", status: None }']


def test_mark_returns_previous_status():
    app = TodoApp([Todo("a")])
    assert app.mark(0, Status.IN_PROGRESS) is None
    assert app.mark(0, Status.DONE) is Status.IN_PROGRESS
    assert app.todos[0].status is Status.DONE


@pytest.mark.parametrize("index", [1, -1, 10])
def test_mark_out_of_range(index):
    app = TodoApp([Todo("a")])
    with pytest.raises(IndexError):
        app.mark(index, Status.DONE)
    assert app.todos[0].status is None


def test_to_json_round_trip():
    app = TodoApp([Todo("a"), Todo("b", Status.DONE)])
    assert json.loads(app.to_json()) == [
        {"text": "a", "status": None},
        {"text": "b", "status": "Done"},
    ]


def test_to_json_is_compact():
    app = TodoApp([Todo("a")])
    assert " " not in app.to_json()


def test_to_json_empty():
    assert json.loads(TodoApp().to_json()) == []


def test_run_add_mark_and_save():
    app, output = run_app("add\nbuy milk\ndone\n0\nsave\n")
    assert app.todos == [Todo("buy milk", Status.DONE)]
    assert "0 -> (text=buy milk previous=None -> Some(Done))" in output
    assert app.to_json() in output


def test_run_in_progress_then_done():
    app, output = run_app("add\ntask\nprogress\n0\ndone\n0\n")
    assert app.todos[0].status is Status.DONE
    assert "previous=None -> Some(InProgres)" in output
    assert "previous=Some(InProgres) -> Some(Done)" in output


def test_run_list_shows_items():
    app, output = run_app("add\none\nadd\ntwo\nlist\n")
    assert "List:" in output
    for line in app.list():
        assert line in output


def test_run_ignores_empty_item():
    app, _ = run_app("add\n\n")
    assert app.todos == []


def test_run_mark_missing_item_changes_nothing():
    app, output = run_app("add\nonly\ndone\n5\n")
    assert app.todos == [Todo("only")]
    assert "5 ->" not in output


def test_run_rejects_non_numeric_index():
    with pytest.raises(ValueError):
        run_app("add\nonly\ndone\nabc\n")


def test_run_stops_at_end_of_input():
    app, output = run_app("")
    assert app.todos == []
    assert "Select command: " in output