"""The shell prompt."""

import getpass
import os
import socket


def get_prompt():
    """Return the prompt ``[host@user:folder]> ``."""
    try:
        username = getpass.getuser().split("\\")[-1]
    except Exception:
        username = "user"

    try:
        hostname = socket.gethostname()
    except OSError:
        hostname = "host"

    try:
        folder = os.path.basename(os.getcwd().rstrip(os.sep)) or os.sep
    except OSError:
        folder = "?"

    return f"[{hostname}@{username}:{folder}]> "