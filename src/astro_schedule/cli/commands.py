# src/astro_schedule/cli/commands.py

from __future__ import annotations

import shlex
from collections.abc import Callable

from ..core.state import AppState
from ..schedule.models import Task

CommandHandler = Callable[[AppState, list[str]], str]

EMPTY_SCHEDULE = "No tasks scheduled for the day."


def split_args(line: str) -> list[str]:
    """Split on whitespace; only double quotes group words, so "Bob's run" and Bob's both work."""
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.quotes = '"'
    lexer.commenters = ""
    return list(lexer)


class CommandRegistry:
    """
    Lookup-table command dispatch used by the console connector.

    Command names are case-insensitive ("addTask" == "addtask"). Arguments are split
    with split_args, so a multi-word description must be double-quoted: addTask "Morning run" ...
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[name.lower()] = handler
        self._help[name] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a line like 'addTask "Description" 09:00 10:00 High'.
        Returns a reply string, or None for a blank line.
        """
        line = line.strip()
        if not line:
            return None

        try:
            parts = split_args(line)
        except ValueError:
            return "Invalid arguments: unbalanced quotes."
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return "Unknown command. Type 'help' for commands list."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Commands:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        lines.append("  exit - Exit the program")
        return "\n".join(lines)


registry = CommandRegistry()


def _render(tasks: list[Task]) -> str:
    if not tasks:
        return EMPTY_SCHEDULE
    return "\n".join(str(t) for t in tasks)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    if len(args) != 4:
        return 'Invalid arguments. Usage: addTask "Description" HH:MM HH:MM Priority'
    description, start, end, priority = args
    return state.scheduler.add_task_from_text(description, start, end, priority).message


def cmd_remove(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Invalid argument. Usage: removeTask "Description"'
    return state.scheduler.remove_task(args[0]).message


def cmd_view(state: AppState, args: list[str]) -> str:
    return _render(state.scheduler.view_tasks())


def cmd_view_priority(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: viewPriority Priority"
    return _render(state.scheduler.view_tasks_by_priority(args[0]))


def cmd_edit(state: AppState, args: list[str]) -> str:
    if len(args) != 3:
        return 'Invalid arguments. Usage: editTask "Description" NewStartTime NewEndTime'
    description, start, end = args
    return state.scheduler.edit_task(description, start, end).message


def cmd_mark_completed(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Invalid argument. Usage: markCompleted "Description"'
    return state.scheduler.mark_task_completed(args[0]).message


registry.register("addTask", cmd_add, help_text='addTask "Description" HH:MM HH:MM Priority - Add a new task', aliases=["add"])
registry.register("removeTask", cmd_remove, help_text='removeTask "Description" - Remove a task', aliases=["remove", "rm"])
registry.register("viewTasks", cmd_view, help_text="viewTasks - View all tasks sorted by start time", aliases=["view", "ls"])
registry.register("viewPriority", cmd_view_priority, help_text="viewPriority Priority - View tasks filtered by priority")
registry.register(
    "editTask", cmd_edit, help_text='editTask "Description" NewStartTime NewEndTime - Edit an existing task\'s time', aliases=["edit"]
)
registry.register("markCompleted", cmd_mark_completed, help_text='markCompleted "Description" - Mark task as completed', aliases=["done"])
registry.register("help", cmd_help, help_text="help - Show this help", aliases=["h", "?"])
