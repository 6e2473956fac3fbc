import pytest

from gosh import notes


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_notes_dir_is_under_home(home):
    assert notes.notes_dir() == home / "Documents" / "notes"


def test_split_notes_groups_by_blank_lines():
    assert notes.split_notes("a\nb\n\nc") == ["a\nb", "c"]


def test_split_notes_collapses_repeated_blank_lines():
    assert notes.split_notes("a\n\n\nb\n") == ["a", "b"]


def test_split_notes_empty_text():
    assert notes.split_notes("") == []


def test_split_notes_drops_carriage_returns():
    assert notes.split_notes("a\r\n\r\nb\r\n") == ["a", "b"]


def test_new_note_writes_quoted_content(home, capsys):
    notes.new_note(["work", "hello", "world"])
    path = home / "Documents" / "notes" / "work.txt"
    assert path.read_text(encoding="utf-8") == '-> "hello world"'
    assert capsys.readouterr().out == f"note append in {path}\n"


def test_new_note_separates_notes_and_round_trips(home):
    notes.new_note(["work", '"first"'])
    notes.new_note(["work", "second"])
    path = home / "Documents" / "notes" / "work.txt"
    text = path.read_text(encoding="utf-8")
    assert text == '-> "first"\n\n-> "second"'
    assert notes.split_notes(text) == ['-> "first"', '-> "second"']


def test_new_note_usage(home, capsys):
    notes.new_note(["work"])
    assert capsys.readouterr().out == 'usage: newnote <topic> "content"\n'


def test_show_note_all(home, capsys):
    notes.new_note(["work", "a"])
    notes.new_note(["work", "b"])
    capsys.readouterr()
    notes.show_note(["work"])
    assert capsys.readouterr().out == (
        "========== work.txt ==========\n"
        '[0]\n-> "a"\n\n'
        '[1]\n-> "b"\n\n'
        "===========================\n"
    )


@pytest.mark.parametrize(
    "option, expected",
    [("first", '[first]\n-> "a"\n'), ("last", '[last]\n-> "b"\n'), ("1", '[1]\n-> "b"\n')],
)
def test_show_note_options(home, capsys, option, expected):
    notes.new_note(["work", "a"])
    notes.new_note(["work", "b"])
    capsys.readouterr()
    notes.show_note(["work", option])
    assert capsys.readouterr().out == expected


def test_show_note_out_of_range(home, capsys):
    notes.new_note(["work", "a"])
    capsys.readouterr()
    notes.show_note(["work", "3"])
    assert capsys.readouterr().out == "error: note index 3 out of range (0-0)\n"


def test_show_note_invalid_option(home, capsys):
    notes.new_note(["work", "a"])
    capsys.readouterr()
    notes.show_note(["work", "middle"])
    assert capsys.readouterr().out == "invalid option, use: last, first, or index number\n"


def test_show_note_missing_topic(home, capsys):
    notes.show_note(["nothing"])
    assert capsys.readouterr().out.startswith("error opening note nothing:")


def test_show_note_last_of_empty_file(home, capsys):
    directory = home / "Documents" / "notes"
    directory.mkdir(parents=True)
    (directory / "empty.txt").write_text("", encoding="utf-8")
    notes.show_note(["empty", "last"])
    assert capsys.readouterr().out == "error: no notes in empty\n"


def test_show_note_usage(capsys):
    notes.show_note([])
    assert capsys.readouterr().out == "usage: shownote <topic> [last|first|index]\n"


def test_del_note_removes_entry(home, capsys):
    for word in ("a", "b", "c"):
        notes.new_note(["work", word])
    capsys.readouterr()
    notes.del_note(["work", "1"])
    path = home / "Documents" / "notes" / "work.txt"
    assert notes.split_notes(path.read_text(encoding="utf-8")) == ['-> "a"', '-> "c"']
    out = capsys.readouterr().out
    assert out == f'note [1] exterminated from {path}\ndeleted content:\n-> -> "b"\n'


def test_del_note_out_of_range_leaves_file(home, capsys):
    notes.new_note(["work", "a"])
    path = home / "Documents" / "notes" / "work.txt"
    before = path.read_text(encoding="utf-8")
    capsys.readouterr()
    notes.del_note(["work", "-1"])
    assert capsys.readouterr().out == "error: note index -1 out of range (0-0)\n"
    assert path.read_text(encoding="utf-8") == before


def test_del_note_rejects_non_number(home, capsys):
    notes.del_note(["work", "x1"])
    assert capsys.readouterr().out == "error: index is a num\n"


def test_del_note_usage(capsys):
    notes.del_note(["work"])
    assert capsys.readouterr().out == "usage: delnote <topic> [index]\n"


def test_del_note_missing_topic(home, capsys):
    notes.del_note(["ghost", "0"])
    assert capsys.readouterr().out.startswith("error opening note ghost:")