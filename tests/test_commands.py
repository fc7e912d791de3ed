# tests/test_commands.py

from __future__ import annotations

from astro_schedule.cli.commands import EMPTY_SCHEDULE, CommandRegistry, registry, split_args


def test_command_registry_routes_case_insensitively(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("doThing", handler, "doThing - test", aliases=["dt"])

    assert reg.handle(state, 'DOTHING "two words" x') == "ok"
    assert reg.handle(state, "dt") == "ok"
    assert called == [["two words", "x"], []]


def test_command_registry_unknown_blank_and_bad_quotes(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "   ") is None
    assert "Unknown command" in (reg.handle(state, "nope") or "")
    assert "unbalanced quotes" in (reg.handle(state, 'addTask "oops 09:00') or "")


def test_schedule_commands_end_to_end(state) -> None:
    assert registry.handle(state, "viewTasks") == EMPTY_SCHEDULE

    assert registry.handle(state, 'addTask "Morning Exercise" 07:00 08:00 High') == (
        "Task added successfully. No conflicts."
    )
    assert registry.handle(state, 'addTask "Team Meeting" 09:00 10:00 Medium') == (
        "Task added successfully. No conflicts."
    )
    assert registry.handle(state, 'addTask "Training" 09:30 10:30 High') == (
        'Error: Task conflicts with existing task "Team Meeting".'
    )
    assert registry.handle(state, 'addTask "Late" 25:00 26:00 Low') == "Error: Invalid time format."

    assert registry.handle(state, "viewtasks") == (
        "07:00 - 08:00: Morning Exercise [High]\n09:00 - 10:00: Team Meeting [Medium]"
    )

    assert registry.handle(state, 'markCompleted "morning exercise"') == "Task marked as completed."
    assert registry.handle(state, "viewPriority high") == "07:00 - 08:00: Morning Exercise [High] [Completed]"

    assert registry.handle(state, 'editTask "Team Meeting" 10:00 09:00') == (
        "Error: End time must be after start time."
    )
    assert registry.handle(state, 'editTask "Team Meeting" 11:00 12:00') == "Task updated successfully."

    assert registry.handle(state, 'removeTask "Nope"') == "Error: Task not found."
    assert registry.handle(state, 'removeTask "Team Meeting"') == "Task removed successfully."
    assert registry.handle(state, "viewPriority Medium") == EMPTY_SCHEDULE


def test_schedule_commands_usage_errors(state) -> None:
    assert registry.handle(state, 'addTask "Only description"').startswith("Invalid arguments. Usage: addTask")
    assert registry.handle(state, "removeTask").startswith("Invalid argument. Usage: removeTask")
    assert registry.handle(state, "viewPriority").startswith("Usage: viewPriority")
    assert registry.handle(state, 'editTask "X" 10:00').startswith("Invalid arguments. Usage: editTask")


def test_help_lists_every_command(state) -> None:
    text = registry.handle(state, "help") or ""
    for name in ("addTask", "removeTask", "viewTasks", "viewPriority", "editTask", "markCompleted", "exit"):
        assert name in text


def test_apostrophes_do_not_need_quoting(state) -> None:
    assert split_args("removeTask Bob's") == ["removeTask", "Bob's"]
    assert registry.handle(state, "removeTask Bob's") == "Error: Task not found."

    assert registry.handle(state, 'addTask "Bob\'s run" 06:00 06:45 Low') == "Task added successfully. No conflicts."
    assert registry.handle(state, "viewTasks") == "06:00 - 06:45: Bob's run [Low]"
    assert registry.handle(state, 'removeTask "bob\'s run"') == "Task removed successfully."
