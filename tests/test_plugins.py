from gosh.plugins import Plugin, get, list_plugins, register


class _Echo(Plugin):
    def __init__(self, name):
        self.name = name
        self.calls = []

    def run(self, args):
        self.calls.append(list(args))


def test_register_and_get():
    plugin = _Echo("echo-test")
    register(plugin)
    assert get("echo-test") is plugin
    assert "echo-test" in list_plugins()


def test_get_missing():
    assert get("no-such-plugin") is None


def test_register_replaces():
    first, second = _Echo("dup-test"), _Echo("dup-test")
    register(first)
    register(second)
    assert get("dup-test") is second
    assert list_plugins().count("dup-test") == 1


def test_run_receives_args():
    plugin = _Echo("run-test")
    register(plugin)
    get("run-test").run(["a", "b"])
    assert plugin.calls == [["a", "b"]]