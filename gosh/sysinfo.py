"""The ``sysinfo`` command."""

import getpass
import os
import platform
import socket


def sysinfo(args):
    """Print the user, home directory, host, OS, architecture and runtime."""
    try:
        username = getpass.getuser()
    except (OSError, KeyError) as exc:
        print("error user info:", exc)
        return

    try:
        hostname = socket.gethostname()
    except OSError:
        hostname = "unknown"

    print("====================== SysInfo ======================")
    print(f"user: {username}")
    print(f"home dir: {os.path.expanduser('~')}")
    print(f"hostname: {hostname}")
    print(f"OS: {platform.system().lower()}")
    print(f"arch: {platform.machine()}")
    print(f"python ver: {platform.python_version()}")
    print("====================================================")