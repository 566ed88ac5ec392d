"""Headers for member sections, e.g. `Method: Add(int, int)`."""

from xmldoc2md.containing_type_id import containing_type_id
from xmldoc2md.documented_entity import DocumentedEntity
from xmldoc2md.format_method_name import format_method_name
from xmldoc2md.format_parameter_list import format_parameter_list
from xmldoc2md.split_member_id import split_member_id


def member_name(entity: DocumentedEntity) -> str:
    """Return the formatted simple name of a member."""
    head, _ = split_member_id(entity.id)
    name = head.rsplit(".", 1)[-1]
    if entity.kind == "M":
        return format_method_name(name, containing_type_id(entity.identifier))
    return name


def member_header(entity: DocumentedEntity) -> str:
    """Build `{KindWord}: {Name}({ParamList})` for a member.

    Methods always show a parameter list; other members only when the
    identifier has one (indexers).
    """
    _, params = split_member_id(entity.id)
    name = member_name(entity)
    if entity.kind == "M" or params is not None:
        name = f"{name}({format_parameter_list(params)})"
    return f"{entity.kind_word}: {name}"
