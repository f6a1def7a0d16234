"""Strip the common leading tabs from an indented YAML snippet."""

from __future__ import annotations


def fix_tabs(text: str) -> str:
    """Remove the first line's leading tabs from every line.

    A leading empty line is dropped, and a trailing whitespace-only line no
    longer than the prefix becomes empty. Raises ValueError if a line does
    not start with the prefix.
    """
    lines = text.split("\n")
    if lines[0] == "" and len(lines) > 1:
        lines = lines[1:]
    first = lines[0]
    prefix = first[: len(first) - len(first.lstrip("\t"))]
    out = []
    last = len(lines) - 1
    for i, line in enumerate(lines):
        if i == last and len(line) <= len(prefix) and line.strip() == "":
            out.append("")
            break
        if not line.startswith(prefix):
            raise ValueError(
                f"line {i} doesn't start with expected number ({len(prefix)}) of tabs: {line}"
            )
        out.append(line[len(prefix):])
    return "\n".join(out)