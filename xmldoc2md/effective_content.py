"""The documentation content used when rendering an entity."""

import copy
import logging
import xml.etree.ElementTree as ET

from xmldoc2md.documented_entity import DocumentedEntity
from xmldoc2md.merge_inherited_content import merge_inherited_content
from xmldoc2md.render_context import RenderContext

logger = logging.getLogger(__name__)


def effective_content(
    entity: DocumentedEntity,
    ctx: RenderContext,
    _seen: frozenset[str] = frozenset(),
) -> ET.Element:
    """Return the entity's content with inherited sections merged in.

    Only entities carrying `<inheritdoc>` inherit anything. The merge happens
    on a copy, so the loaded model stays untouched between renders. Chains are
    followed until they repeat.
    """
    if entity.element.find("inheritdoc") is None:
        return entity.element

    seen = _seen | {entity.identifier}
    target = ctx.inheritance.resolve(ctx.model, entity)
    if target is None or target.identifier in seen:
        logger.debug("No inheritance source for %s", entity.identifier)
        return entity.element

    logger.debug(
        "%s inherits documentation from %s",
        entity.identifier,
        target.identifier,
    )
    merged = copy.deepcopy(entity.element)
    merge_inherited_content(merged, effective_content(target, ctx, seen))
    return merged
