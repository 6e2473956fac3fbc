"""The built-in commands of the shell."""

import subprocess
import sys

from . import fscommands, mathcmd, notes
from .sysinfo import sysinfo


def exit_shell(args):
    """Say goodbye and leave the shell."""
    print("xau")
    sys.exit(0)


def clear(args):
    """Clear the terminal screen."""
    if sys.platform == "win32":
        command = ["cmd", "/C", "cls"]
    else:
        command = ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


COMMANDS = {
    "exit": exit_shell,
    "clear": clear,
    "cd": fscommands.cd,
    "ls": fscommands.ls,
    "mkdir": fscommands.mkdir,
    "rmdir": fscommands.rmdir,
    "touch": fscommands.touch,
    "rm": fscommands.rm,
    "sysinfo": sysinfo,
    "newnote": notes.new_note,
    "shownote": notes.show_note,
    "delnote": notes.del_note,
    "math": mathcmd.math_command,
}