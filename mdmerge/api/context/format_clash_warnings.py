"""Render label clashes as warning lines."""

from .Context import Context

CLASH_WARNING_HEADER = "Some sections have the same name and therefore the same label"


def format_clash_warnings(context: Context) -> list[str]:
    """One line per file with clashing labels, empty if there are none."""
    lines: list[str] = []
    for file, labels in context.clashes_to_dict().items():
        if len(labels) == 1:
            lines.append(f'in file "{file}" for label {labels[0]}')
        else:
            lines.append(f'in file "{file}" for labels {", ".join(labels)}')
    return lines
