"""Non-destructive merge of inherited documentation sections."""

import copy
import xml.etree.ElementTree as ET

SINGLE_SECTIONS = ("summary", "remarks", "returns", "value")
NAMED_SECTIONS = ("param", "typeparam")
LIST_SECTIONS = ("exception", "seealso", "example")


def merge_inherited_content(into: ET.Element, source: ET.Element) -> None:
    """Copy sections from `source` that `into` does not document itself.

    - summary/remarks/returns/value: copied only when missing.
    - param/typeparam: copied per name when that name is missing.
    - exception/seealso/example: the whole list is copied only when `into`
      has none of that section.

    Author-written content is never replaced, so merging twice is a no-op.
    """
    for tag in SINGLE_SECTIONS:
        found = source.find(tag)
        if into.find(tag) is None and found is not None:
            into.append(copy.deepcopy(found))

    for tag in NAMED_SECTIONS:
        present = {p.get("name", "") for p in into.findall(tag)}
        for p in source.findall(tag):
            name = p.get("name", "")
            if name not in present:
                into.append(copy.deepcopy(p))
                present.add(name)

    for tag in LIST_SECTIONS:
        if not into.findall(tag):
            into.extend(copy.deepcopy(e) for e in source.findall(tag))
