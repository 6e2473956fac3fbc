"""The interactive read-and-run loop."""

import sys

from . import plugins
from .commands import COMMANDS
from .parser import ParseError, parse_command
from .prompt import get_prompt


class Shell:
    """Reads command lines and runs built-in commands or plugins."""

    def __init__(self, prompt, commands):
        self.prompt = prompt
        self.commands = commands

    def execute(self, line):
        """Parse one line and run the command it names."""
        line = line.strip()
        if not line:
            return
        try:
            name, args = parse_command(line)
        except ParseError as exc:
            print("error parsing command:", exc)
            return
        if not name:
            return

        command = self.commands.get(name)
        if command is not None:
            command(args)
            return
        plugin = plugins.get(name)
        if plugin is not None:
            plugin.run(args)
        else:
            print("wth that command:", name)

    def run(self, stdin=None):
        """Prompt for and run lines until input ends."""
        stream = sys.stdin if stdin is None else stdin
        while True:
            print(self.prompt(), end="", flush=True)
            line = stream.readline()
            if not line.endswith("\n"):
                print("reading input error: EOF")
                return
            self.execute(line)


def main(argv=None):
    """Start the shell with the built-in commands."""
    Shell(get_prompt, COMMANDS).run()
    return 0