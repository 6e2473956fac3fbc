"""Splitting a command line into a command name and its arguments."""


class ParseError(ValueError):
    """Raised when a command line cannot be parsed."""


def parse_command(line):
    """Split ``line`` into ``(command, args)``.

    Words are separated by spaces. Double quotes group words and are removed.
    An empty line gives ``("", [])``. An unclosed quote raises ParseError.
    """
    line = line.strip()
    if not line:
        return "", []

    words = []
    current = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == " ":
            if in_quotes:
                current.append(char)
            elif current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        words.append("".join(current))

    if in_quotes:
        raise ParseError("syntax error: unclosed quotes")

    if not words:
        return "", []
    return words[0], words[1:]