# gosh

A small interactive shell with a handful of built-in commands for working
with files, keeping plain-text notes and doing quick calculations.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Starting the shell

```
gosh
```

The prompt shows the host, the user and the current folder:

```
[myhost@alice:projects]>
```

Arguments are separated by spaces. Wrap an argument in double quotes to
keep spaces inside it, for example `touch "my file.txt"`. An unclosed quote
is reported as a parse error and the line is skipped. When input ends
(for example on Ctrl-D), the shell prints `reading input error: EOF` and
stops.

## Built-in commands

| Command | What it does |
| --- | --- |
| `exit` | Print `xau` and leave the shell |
| `clear` | Clear the terminal (`clear`, or `cls` on Windows) |
| `cd [dir]` | Change directory; with no argument, go to your home directory |
| `ls [-l] [-a] [dir]` | List a directory, sorted by name; `-l` for permissions, size and modification time, `-a` to include hidden entries |
| `mkdir <path>` | Create a folder, including missing parents |
| `rmdir <path>` | Remove a folder and everything in it |
| `touch <path>` | Create a file if it does not exist; existing content is kept |
| `rm <path>` | Remove a file (folders are refused; use `rmdir`) |
| `sysinfo` | Show user, home directory, host name, OS, architecture and Python version |
| `newnote <topic> "text"` | Append a note to a topic |
| `shownote <topic> [first\|last\|N]` | Show all notes of a topic, or one of them |
| `delnote <topic> <N>` | Delete note number `N` from a topic |
| `math eval <expr>` | Evaluate an arithmetic expression, e.g. `math eval "2*(3+4)"` |
| `math sin\|cos\|tan <x>` | Trigonometric functions of `x` in radians |

`math eval` accepts numbers, parentheses, unary `+`/`-`, and the operators
`+ - * /`; with integer operands also `% << >> & | ^`. Division of two
integers truncates toward zero, so `math eval 7/2` prints `3` while
`math eval 7.0/2` prints `3.5`.

Notes are stored as text files under `~/Documents/notes/<topic>.txt`, one
note per paragraph (notes are separated by a blank line), and are numbered
from 0.

## Using it from Python

```python
from gosh.shell import Shell
from gosh.commands import COMMANDS
from gosh.prompt import get_prompt
from gosh.parser import parse_command
from gosh.mathx import evaluate

parse_command('touch "a b.txt"')   # ('touch', ['a b.txt'])
evaluate("1 + 2 * 3")              # 7.0

shell = Shell(get_prompt, COMMANDS)
shell.execute("ls -a")             # run a single line
```

`parse_command` raises `gosh.parser.ParseError` on an unclosed quote, and
`evaluate` raises `gosh.mathx.MathError` on an expression it cannot
evaluate.

### Plugins

Extra commands can be added as plugins: subclass `gosh.plugins.Plugin`,
set its `name` attribute, implement `run(args)`, and pass an instance to
`gosh.plugins.register`. The shell runs a plugin when no built-in command
has the same name. `gosh.plugins.list_plugins()` returns the registered
names.

```python
from gosh import plugins

class Hello(plugins.Plugin):
    name = "hello"

    def run(self, args):
        print("hello", *args)

plugins.register(Hello())
```

## What it does not do

gosh only runs its own built-in commands and registered plugins. It does
not start other programs by name: an unknown command is answered with
`wth that command: <name>`. There are no pipes, redirection, variables,
globbing, job control, history or line editing.