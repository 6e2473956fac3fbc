"""Topic notes kept as text files under ~/Documents/notes."""

import os
import re
from pathlib import Path

_INDEX = re.compile(r"[+-]?[0-9]+")


def notes_dir():
    """Return the directory that holds the note files."""
    return Path.home() / "Documents" / "notes"


def _note_path(topic):
    return notes_dir() / f"{topic}.txt"


def _lines(text):
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_notes(text):
    """Split file text into notes separated by blank lines."""
    notes = []
    current = ""
    for line in _lines(text):
        if not line.strip() and current:
            notes.append(current.strip())
            current = ""
        else:
            if current:
                current += "\n"
            current += line
    if current:
        notes.append(current.strip())
    return notes


def _parse_index(text):
    if not _INDEX.fullmatch(text):
        raise ValueError(text)
    return int(text)


def _read_notes(topic, path):
    """Return the notes of ``path``, or None after printing why it failed."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return split_notes(handle.read())
    except OSError as exc:
        print(f"error opening note {topic}: open {path}: {exc.strerror or exc}")
        return None


def new_note(args):
    """Append a note to the file of a topic, creating it when needed."""
    if len(args) < 2:
        print('usage: newnote <topic> "content"')
        return

    topic = args[0]
    note = " ".join(args[1:]).strip('"')

    try:
        directory = notes_dir()
    except RuntimeError as exc:
        print("error getting home:", exc)
        return
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass

    path = directory / f"{topic}.txt"
    try:
        with open(path, "a", encoding="utf-8", newline="") as handle:
            if os.fstat(handle.fileno()).st_size > 0:
                handle.write("\n\n")
            handle.write(f'-> "{note}"')
    except OSError as exc:
        print("open file error", exc)
        return
    print(f"note append in {path}")


def show_note(args):
    """Print all notes of a topic, or the first, the last or one by index."""
    if not args:
        print("usage: shownote <topic> [last|first|index]")
        return

    topic = args[0]
    path = _note_path(topic)
    notes = _read_notes(topic, path)
    if notes is None:
        return

    if len(args) == 1:
        print(f"========== {path.name} ==========")
        for index, note in enumerate(notes):
            print(f"[{index}]\n{note}\n")
        print("===========================")
        return

    option = args[1]
    if option in ("last", "first"):
        if not notes:
            print(f"error: no notes in {topic}")
            return
        note = notes[-1] if option == "last" else notes[0]
        print(f"[{option}]\n{note}")
        return

    try:
        index = _parse_index(option)
    except ValueError:
        print("invalid option, use: last, first, or index number")
        return
    if not 0 <= index < len(notes):
        print(f"error: note index {index} out of range (0-{len(notes) - 1})")
        return
    print(f"[{index}]\n{notes[index]}")


def del_note(args):
    """Delete the note at an index from the file of a topic."""
    if len(args) != 2:
        print("usage: delnote <topic> [index]")
        return

    topic, index_text = args
    try:
        index = _parse_index(index_text)
    except ValueError:
        print("error: index is a num")
        return

    try:
        path = _note_path(topic)
    except RuntimeError as exc:
        print("error getting home dir:", exc)
        return

    notes = _read_notes(topic, path)
    if notes is None:
        return

    if not 0 <= index < len(notes):
        print(f"error: note index {index} out of range (0-{len(notes) - 1})")
        return

    removed = notes.pop(index)
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write("\n\n".join(notes))
    except OSError as exc:
        print("error rewriting file:", exc)
        return

    print(f"note [{index}] exterminated from {path}")
    print(f"deleted content:\n-> {removed}")