"""File-system commands: cd, ls, mkdir, rmdir, touch and rm."""

import os
import shutil
import stat
import time

from .fsutil import is_hidden

_BLUE = "\033[34m"
_RESET = "\033[0m"


def _reason(exc):
    return exc.strerror or str(exc)


def cd(args):
    """Change directory to ``args[0]``, or to the home directory."""
    if not args:
        home = os.path.expanduser("~")
        if home == "~":
            print("error dir home: cannot determine home directory")
            return
        try:
            os.chdir(home)
        except OSError:
            pass
        return
    try:
        os.chdir(args[0])
    except OSError as exc:
        print(f"cd error: chdir {args[0]}: {_reason(exc)}")


def _permissions(mode):
    return "-" + stat.filemode(mode & 0o777)[1:]


def ls(args):
    """List a directory; ``-l`` shows details and ``-a`` hidden entries."""
    show_details = "-l" in args
    show_hidden = "-a" in args
    paths = [arg for arg in args if arg not in ("-l", "-a")]
    path = paths[0] if paths else "."

    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        print(f"error reading directory {path}: {_reason(exc)}")
        return

    for entry in entries:
        name = entry.name
        if not show_hidden and is_hidden(entry):
            continue
        is_dir = entry.is_dir(follow_symlinks=False)
        if show_details:
            try:
                info = entry.stat(follow_symlinks=False)
            except OSError:
                print(f"error getting info for {name}")
                continue
            modified = time.strftime("%d %b %y %H:%M %Z", time.localtime(info.st_mtime))
            kind = "[DIR] " if is_dir else "[FILE]"
            print(
                f"{_permissions(info.st_mode)} {kind} {name:<20} "
                f"{info.st_size:>10} bytes  {modified}"
            )
        elif is_dir:
            print(f"{_BLUE}{name}{_RESET}")
        else:
            print(name)


def mkdir(args):
    """Create a folder and any missing parents."""
    if len(args) != 1:
        print("usage: mkdir <folder_path>")
        return
    path = args[0]
    try:
        os.makedirs(path, mode=0o755, exist_ok=True)
    except OSError as exc:
        print(f"error creating folder {path}: {_reason(exc)}")
        return
    print(f"folder created: {path}")


def rmdir(args):
    """Remove a path and everything below it; a missing path is no error."""
    if len(args) != 1:
        print("usage: rmdir <folder_path>")
        return
    path = args[0]
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        print(f"error removing folder {path}: {_reason(exc)}")
        return
    print(f"folder removed: {path}")


def touch(args):
    """Create a file if it does not exist, leaving existing content alone."""
    if len(args) != 1:
        print("usage: touch <file_path>")
        return
    path = args[0]
    try:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY, 0o644)
    except OSError as exc:
        print(f"error creating file {path}: {_reason(exc)}")
        return
    os.close(fd)
    print(f"file created: {path}")


def rm(args):
    """Remove a single file; directories are refused."""
    if len(args) != 1:
        print("usage: rm <file_path>")
        return
    path = args[0]
    try:
        is_dir = os.path.isdir(path) if os.stat(path) else False
    except OSError as exc:
        print(f"error accesing file {path}: {_reason(exc)}")
        return
    if is_dir:
        print(f"{path} is a dir, instead use rmdir to remove it!")
        return
    try:
        os.remove(path)
    except OSError as exc:
        print(f"error removing file {path}: {_reason(exc)}")
        return
    print(f"file removed: {path}")