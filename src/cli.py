"""Interactive shell over a CourseManager.

Each line is one command; the table lives only as long as the shell does.
"""
import re
from typing import List, Optional
from course_table import CourseNotFoundError
from manager import CourseManager
from storage import MalformedLineError, parse_int32, parse_line
from theme import color, HEADER_COLOR, CRN_COLOR, WARN_COLOR, EMPTY_COLOR

CRN_RE = re.compile(r"CRN:-?\d+")

PROMPT = "\ncoursedb> "


class CLI:
    def __init__(self, manager: CourseManager, sorted_output: bool = True):
        self.manager: CourseManager = manager
        self.sorted_output: bool = sorted_output

    def run(self) -> None:
        """Main REPL loop; returns on 'exit', Ctrl-C or end of input."""
        exit_message: Optional[str] = None
        print(color("Course database", HEADER_COLOR) + f" ({self.manager}). Type 'help' for commands.")
        try:
            while True:
                line = input(PROMPT).strip()
                if not line:
                    continue
                if line.lower() == 'exit':
                    exit_message = "Goodbye."
                    break
                self._handle_command(line)
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if exit_message:
                print(exit_message)

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        tokens = line.split()
        cmd = tokens[0].lower()
        if cmd == 'add':
            self._cmd_add(line)
        elif cmd == 'get':
            self._cmd_get(tokens)
        elif cmd == 'show':
            self._print_courses(self.manager.show_all(self.sorted_output))
        elif cmd == 'raw':
            self._print_courses(self.manager.show_all(sorted_output=False))
        elif cmd == 'load':
            self._cmd_load(line)
        elif cmd == 'size':
            print(self.manager)
        elif cmd == 'help':
            self._help()
        else:
            print(color("Unknown command. Type 'help' for instructions.", WARN_COLOR))

    # ---- individual command helpers ----
    def _cmd_add(self, line: str) -> None:
        parts = line.split(None, 1)
        if len(parts) != 2:
            print("Usage: add <id> <crn> <credits> <room> <instructor>")
            return
        try:
            course = parse_line(parts[1].strip())
        except MalformedLineError as exc:
            print(color(f"Invalid course ({exc}).", WARN_COLOR))
            print("Usage: add <id> <crn> <credits> <room> <instructor>")
            return
        replaced = course.crn in self.manager
        self.manager.add(course.course_id, course.crn, course.credits, course.room, course.instructor)
        verb = 'Replaced' if replaced else 'Added'
        print(f"{verb} {self._highlight(str(course))}")

    def _cmd_get(self, tokens: List[str]) -> None:
        if len(tokens) != 2:
            print("Usage: get <crn>")
            return
        try:
            crn = parse_int32(tokens[1], 'CRN')
        except MalformedLineError:
            print("Invalid CRN.")
            return
        try:
            course = self.manager.get(crn)
        except CourseNotFoundError as exc:
            print(color(str(exc), WARN_COLOR))
            return
        print(self._highlight(str(course)))

    def _cmd_load(self, line: str) -> None:
        parts = line.split(None, 1)
        if len(parts) != 2:
            print("Usage: load <path>")
            return
        try:
            report = self.manager.read_file(parts[1].strip())
        except OSError as exc:
            print(color(f"Cannot read {parts[1].strip()}: {exc.strerror or exc}", WARN_COLOR))
            return
        print(f"Loaded {report}.")

    # -------------------- output --------------------
    @staticmethod
    def _highlight(text: str) -> str:
        return CRN_RE.sub(lambda m: color(m.group(0), CRN_COLOR), text)

    def _print_courses(self, lines: List[str]) -> None:
        if not lines:
            print(color('(empty)', EMPTY_COLOR))
            return
        for text in lines:
            print(self._highlight(text))

    def _help(self) -> None:
        print("Commands:")
        print("  add <id> <crn> <credits> <room> <instructor...>")
        print("                      Add a course; an existing CRN is replaced")
        print("  get <crn>           Show one course")
        print("  show                List all courses (sorted by CRN unless COURSEDB_SORTED=0)")
        print("  raw                 List all courses in bucket order")
        print("  load <path>         Bulk-load a course file")
        print("  size                Show course and bucket counts")
        print("  help                Show this help")
        print("  exit                Leave the shell")
