"""
Blank-line spacing between model fields.

Works on printed text, not on the syntax tree. The text contract with the
synthesizer: one block-opening line ending in ":", then one statement per
field at a single indentation level. Comment lines stick to the field that
follows them; deeper-indented lines stick to the field above.
"""

from typing import List


def _leading_ws(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]


def add_blank_lines(code: str, blank_lines: int) -> str:
    lines = code.split("\n")

    opener = next(
        (i for i, line in enumerate(lines) if line.rstrip().endswith(":")),
        None,
    )
    if opener is None:
        raise ValueError("There must be a class block opening line.")

    if not blank_lines:
        return code

    body = [
        i for i in range(opener + 1, len(lines))
        if lines[i].strip() and _leading_ws(lines[i])
    ]
    if not body:
        return code

    indent = _leading_ws(lines[body[0]])
    end = body[-1]

    units: List[List[str]] = []
    current: List[str] = []
    for line in lines[opener + 1:end + 1]:
        starts_statement = bool(line.strip()) and _leading_ws(line) == indent
        if starts_statement and current and not current[-1].lstrip().startswith("#"):
            units.append(current)
            current = []
        current.append(line)
    units.append(current)

    separator = "\n" * (blank_lines + 1)
    block = separator.join("\n".join(unit) for unit in units)

    return "\n".join(lines[:opener + 1] + [block] + lines[end + 1:])
