"""Small file-system helpers."""

import os
import stat
import sys


def check_exists(path):
    """Return False only when ``path`` is known not to exist."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def print_error(action, path, err):
    """Print ``error <action> <path>: <err>`` when ``err`` is set."""
    if err:
        print(f"error {action} {path}: {err}")


def is_hidden(entry):
    """Tell whether a directory entry is hidden on this platform."""
    if sys.platform != "win32":
        return entry.name.startswith(".")
    try:
        attributes = entry.stat(follow_symlinks=False).st_file_attributes
    except (OSError, AttributeError):
        return False
    return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)