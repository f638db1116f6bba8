"""Line-oriented command layer over :class:`MemoryTree`.

Parses one input line into a keyword plus arguments, dispatches it through
a keyword table and renders the :class:`MTResult` as text.  The core never
prints; everything user-visible is produced here.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

from ._result import MTResult, MTStatus
from ._tree import MemoryTree

logger = logging.getLogger(__name__)

BANNER = "Welcome to the File System CLI!"
DEFAULT_PROMPT = "fs> "
EXIT_KEYWORD = "exit"
INVALID_COMMAND = "Invalid command."

# filename, then one separator, then the rest of the line verbatim
_WRITE_ARGS = re.compile(r"(\S+)(?:\s(.*))?\Z", re.DOTALL)

_MESSAGES: dict[tuple[str, MTStatus], str] = {
    ("create", MTStatus.SUCCESS): "File '{name}' created successfully.",
    ("create", MTStatus.ALREADY_EXISTS): "Error: File '{name}' already exists in the current directory.",
    ("read", MTStatus.SUCCESS): "Reading from in-memory file '{name}':\n{content}",
    ("read", MTStatus.NOT_FOUND): "Error: File '{name}' not found in memory.",
    ("write", MTStatus.SUCCESS): "File '{name}' has been updated.",
    ("write", MTStatus.NOT_FOUND): "Error: File '{name}' not found.",
    ("delete", MTStatus.SUCCESS): "File '{name}' has been deleted.",
    ("delete", MTStatus.NOT_FOUND): "Error: File '{name}' not found.",
    ("createDir", MTStatus.SUCCESS): "Directory '{name}' created.",
    ("createDir", MTStatus.ALREADY_EXISTS): "Error: Directory '{name}' already exists.",
    ("cd", MTStatus.SUCCESS): "Changed to directory '{name}'.",
    ("cd", MTStatus.NOT_FOUND): "Error: Directory '{name}' not found.",
    ("parent", MTStatus.SUCCESS): "Moved to parent directory.",
    ("parent", MTStatus.ALREADY_AT_ROOT): "Already at the root directory.",
    ("parent", MTStatus.DANGLING_PARENT): "Error: Parent directory no longer exists.",
    ("root", MTStatus.SUCCESS): "Moved to root directory.",
}

HELP_TEXT = """\
Commands:
  create <file>           create an empty file
  read <file>             print a file's content
  write <file> <content>  replace a file's content with the rest of the line
  delete <file>           delete a file
  createDir <dir>         create a directory
  cd <dir>                enter a child directory
  parent                  go to the parent directory
  root                    go to the root directory
  ls                      list the current directory
  pwd                     print the current directory
  help                    show this text
  exit                    leave the shell"""


@dataclass
class ParsedCommand:
    """A parsed command line."""
    keyword: str
    args: list[str] = field(default_factory=list)


def parse_command(line: str) -> ParsedCommand:
    """Split *line* into a keyword and its arguments.

    ``write`` keeps everything after the filename as a single content
    argument, embedded whitespace included.  Every other keyword splits
    its arguments on whitespace.
    """
    parts = line.split(None, 1)
    if not parts:
        return ParsedCommand("")
    keyword = parts[0]
    rest = parts[1] if len(parts) > 1 else ""
    if keyword == "write":
        match = _WRITE_ARGS.match(rest.lstrip())
        if match is None:
            return ParsedCommand(keyword)
        return ParsedCommand(keyword, [match.group(1), match.group(2) or ""])
    return ParsedCommand(keyword, rest.split())


def render(keyword: str, result: MTResult) -> str:
    """Turn the outcome of *keyword* into the text shown to the user."""
    template = _MESSAGES.get((keyword, result.status))
    if template is None:
        raise ValueError(f"No message for {keyword!r} with status {result.status.name}")
    return template.format(name=result.name, content=result.content)


# ---------------------------------------------------------------------------
#  TreeShell
# ---------------------------------------------------------------------------


class TreeShell:
    """Read-eval-print loop driving one :class:`MemoryTree`."""

    def __init__(
        self,
        tree: MemoryTree | None = None,
        prompt: str = DEFAULT_PROMPT,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        if "\n" in prompt:
            raise ValueError(f"Prompt must be a single line: {prompt!r}")
        self.tree = tree if tree is not None else MemoryTree()
        self.prompt = prompt
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._handlers: dict[str, Callable[[list[str]], str]] = {
            "create": self._with_name("create", self.tree.create_file),
            "read": self._with_name("read", self.tree.read_file),
            "write": self._do_write,
            "delete": self._with_name("delete", self.tree.delete_file),
            "createDir": self._with_name("createDir", self.tree.create_directory),
            "cd": self._with_name("cd", self.tree.change_directory),
            "parent": lambda args: render("parent", self.tree.go_to_parent()),
            "root": lambda args: render("root", self.tree.go_to_root()),
            "ls": self._do_ls,
            "pwd": lambda args: self.tree.pwd(),
            "help": lambda args: HELP_TEXT,
        }

    @staticmethod
    def _with_name(keyword: str, op: Callable[[str], MTResult]) -> Callable[[list[str]], str]:
        def handler(args: list[str]) -> str:
            if not args:
                return f"Error: '{keyword}' requires a name."
            return render(keyword, op(args[0]))
        return handler

    def _do_write(self, args: list[str]) -> str:
        if not args:
            return "Error: 'write' requires a name."
        name, content = args
        return render("write", self.tree.write_file(name, content))

    def _do_ls(self, args: list[str]) -> str:
        dirs = sorted(self.tree.list_directories())
        files = sorted(self.tree.list_files())
        return "\n".join([f"{d}/" for d in dirs] + files)

    def execute(self, line: str) -> str:
        """Run one command line and return its rendered output."""
        command = parse_command(line)
        handler = self._handlers.get(command.keyword)
        if handler is None:
            logger.debug("invalid command %r", command.keyword)
            return INVALID_COMMAND
        logger.debug("executing %r with %d argument(s)", command.keyword, len(command.args))
        return handler(command.args)

    def run(self) -> None:
        """Loop until ``exit`` or end of input."""
        self._write_line(BANNER)
        while True:
            self._stdout.write(self.prompt)
            self._stdout.flush()
            line = self._stdin.readline()
            if not line:
                self._write_line("")
                break
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            if parse_command(line).keyword == EXIT_KEYWORD:
                break
            output = self.execute(line)
            if output:
                self._write_line(output)

    def _write_line(self, text: str) -> None:
        self._stdout.write(text + "\n")
