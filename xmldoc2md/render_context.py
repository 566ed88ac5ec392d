"""Call-scoped state threaded through a single render."""

from dataclasses import dataclass, field

from xmldoc2md.documentation_model import DocumentationModel
from xmldoc2md.inheritance_resolver import (
    HeuristicInheritanceResolver,
    InheritanceStrategy,
)
from xmldoc2md.render_options import RenderOptions


@dataclass(frozen=True)
class RenderContext:
    """Everything a render call needs; never stored on the renderer."""

    model: DocumentationModel
    options: RenderOptions = field(default_factory=RenderOptions)
    single_file: bool = False
    inheritance: InheritanceStrategy = field(
        default_factory=HeuristicInheritanceResolver
    )
