"""Grouping of overloads that share a display name."""

from xmldoc2md.documented_entity import DocumentedEntity
from xmldoc2md.member_header import member_name


def member_group_key(entity: DocumentedEntity) -> str:
    """Return the key under which overloads are grouped.

    Overloads of one method share `Method: Add`; a property and a method with
    the same name never share a group.
    """
    return f"{entity.kind_word}: {member_name(entity)}"


def group_members(
    members: list[DocumentedEntity],
) -> dict[str, list[DocumentedEntity]]:
    """Group members by key, keeping the order of first appearance."""
    groups: dict[str, list[DocumentedEntity]] = {}
    for m in members:
        groups.setdefault(member_group_key(m), []).append(m)
    return groups
