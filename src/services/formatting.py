"""Render definition entries as display text grouped by part of speech.

Output shape:

    (Noun)
    1. <definition>
    2. <definition>

    (Verb)
    1. <definition>
"""

from domain.model.definition import DefinitionEntry

NO_DEFINITION_MESSAGE = "No definitions found"

# Most common parts of speech come first, in this order
PREFERRED_PARTS_OF_SPEECH_ORDER = ("noun", "verb")


def group_by_part_of_speech(entries: list[DefinitionEntry]) -> dict[str, list[DefinitionEntry]]:
    """Group entries by part of speech, in order of first appearance.

    Entries without a part of speech share the "" group.
    """
    groups: dict[str, list[DefinitionEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.part_of_speech or "", []).append(entry)
    return groups


def _format_group(part_of_speech: str, entries: list[DefinitionEntry]) -> str:
    lines = [f"({part_of_speech.title()})"]
    lines.extend(f"{index}. {entry.definition}" for index, entry in enumerate(entries, start=1))
    return "\n".join(lines)


def format_definitions(entries: list[DefinitionEntry]) -> str:
    """Format entries into numbered definitions grouped by part of speech."""
    if not entries:
        return NO_DEFINITION_MESSAGE

    groups = group_by_part_of_speech(entries)

    ordered = [pos for pos in PREFERRED_PARTS_OF_SPEECH_ORDER if pos in groups]
    ordered += [pos for pos in groups if pos not in PREFERRED_PARTS_OF_SPEECH_ORDER]

    return "\n\n".join(_format_group(pos, groups[pos]) for pos in ordered)
