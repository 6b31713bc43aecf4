"""Menu-driven console shell for managing students.

The shell holds a reference to a registry it does not own. It translates the
numbered menu choices into the four registry operations and prints results.
After each command it waits for Enter, so scripted input needs an extra blank
line per command unless pausing is turned off.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console

from roster.models.student import Student
from roster.registry.sorted_registry import SortedRegistry
from roster.shell.parsing import InvalidNumberError, parse_int

logger = logging.getLogger(__name__)

MENU_LINES = (
    "=== Student Management Menu ===",
    "1. Insert student",
    "2. Delete student by ID",
    "3. Search student by ID",
    "4. Display all students",
    "5. Exit",
)

OPTION_INSERT = 1
OPTION_DELETE = 2
OPTION_SEARCH = 3
OPTION_DISPLAY = 4
OPTION_EXIT = 5


class ConsoleShell:
    """Read-eval-print loop over a ``SortedRegistry``."""

    def __init__(
        self,
        registry: SortedRegistry,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        pause: bool = True,
    ) -> None:
        self.registry = registry
        self.console = console or Console(highlight=False, soft_wrap=True)
        self._stdin = stdin if stdin is not None else sys.stdin
        self.pause = pause

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Run until the user exits or input ends. Returns commands processed."""
        handled = 0
        try:
            while True:
                self._show_menu()
                raw = self._read_line()
                handled += 1
                try:
                    choice = parse_int(raw)
                except InvalidNumberError:
                    self._say("Invalid input. Please enter a number.")
                    self._pause()
                    continue

                if choice == OPTION_EXIT:
                    break
                self.dispatch(choice)
                self._pause()
        except EOFError:
            logger.debug("Input ended after %d commands", handled)
            self.console.print()
        self._say("Exiting. Goodbye!")
        return handled

    def dispatch(self, choice: int) -> None:
        """Run one non-exit menu option."""
        handler = {
            OPTION_INSERT: self.do_insert,
            OPTION_DELETE: self.do_delete,
            OPTION_SEARCH: self.do_search,
            OPTION_DISPLAY: self.do_display,
        }.get(choice)
        if handler is None:
            self._say("Unknown option. Try again.")
            return
        handler()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def do_insert(self) -> None:
        try:
            student_id = parse_int(self._prompt("Enter student ID (integer): "))
            name = self._prompt("Enter student name: ").strip()
            semester = parse_int(self._prompt("Enter semester (integer): "))
        except InvalidNumberError as e:
            logger.debug("Insert aborted: %s", e)
            self._say("Invalid number entered. Aborting insert.")
            return

        outcome = self.registry.insert_with_outcome(Student(student_id, name, semester))
        if outcome:
            self._say("Inserted successfully.")
        else:
            self._say(f"Insert failed: {outcome.reason}.")

    def do_delete(self) -> None:
        try:
            student_id = parse_int(self._prompt("Enter ID to delete: "))
        except InvalidNumberError:
            self._say("Invalid ID input.")
            return

        if self.registry.delete(student_id):
            self._say("Student deleted.")
        else:
            self._say("Student with given ID not found.")

    def do_search(self) -> None:
        try:
            student_id = parse_int(self._prompt("Enter ID to search: "))
        except InvalidNumberError:
            self._say("Invalid ID input.")
            return

        found = self.registry.search(student_id)
        if found is None:
            self._say("Student not found.")
            return
        self._say("Student found:")
        self._say(found.display_line())

    def do_display(self) -> None:
        students = self.registry.enumerate()
        if not students:
            self._say("No student records to display.")
            return
        self._say("Current students (sorted by ID):")
        for student in students:
            self._say(student.display_line())

    # ------------------------------------------------------------------
    # I/O helpers
    # ------------------------------------------------------------------

    def _show_menu(self) -> None:
        self.console.print()
        for line in MENU_LINES:
            self._say(line)
        self.console.print("Choose an option: ", end="", markup=False, highlight=False)

    def _prompt(self, text: str) -> str:
        self.console.print(text, end="", markup=False, emoji=False, highlight=False)
        return self._read_line()

    def _pause(self) -> None:
        if not self.pause:
            return
        self.console.print()
        self._say("Press Enter to return to the menu...")
        self._read_line()

    def _read_line(self) -> str:
        line = self._stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False, emoji=False, highlight=False)
