import os

from gosh.prompt import get_prompt


def test_prompt_shape():
    text = get_prompt()
    assert text.startswith("[")
    assert text.endswith("]> ")
    assert "@" in text


def test_prompt_shows_folder(tmp_path, monkeypatch):
    folder = tmp_path / "workdir"
    folder.mkdir()
    monkeypatch.chdir(folder)
    assert get_prompt().endswith(":workdir]> ")


def test_prompt_user(monkeypatch):
    monkeypatch.setenv("USER", "alice")
    monkeypatch.setenv("LOGNAME", "alice")
    monkeypatch.setenv("USERNAME", "alice")
    if os.name != "nt":
        assert "@alice:" in get_prompt()
    else:
        assert "@" in get_prompt()