"""Options that control how a documentation model is rendered to Markdown."""

from dataclasses import dataclass

VERBATIM = "verbatim"
CLEAN_GENERICS = "clean-generics"
FILE_NAME_STYLES = (VERBATIM, CLEAN_GENERICS)
DEFAULT_CODE_BLOCK_LANGUAGE = "csharp"


@dataclass(frozen=True)
class RenderOptions:
    """Rendering configuration shared by the CLI and other callers.

    - `file_name_style`: `verbatim` keeps type ids as they are in file names,
      `clean-generics` drops arity markers (`Widget`1` -> `Widget`).
    - `root_namespace_to_trim`: prefix removed from visible type names only.
    - `code_block_language`: language tag written on fenced code blocks.
    - `trim_root_namespace_in_file_names`: also drop the prefix from file names.
    """

    file_name_style: str = VERBATIM
    root_namespace_to_trim: str | None = None
    code_block_language: str = DEFAULT_CODE_BLOCK_LANGUAGE
    trim_root_namespace_in_file_names: bool = False

    def __post_init__(self) -> None:
        """Validate the file name style and normalize empty values."""
        if self.file_name_style not in FILE_NAME_STYLES:
            msg = (
                f"Unknown file name style: {self.file_name_style!r} "
                f"(expected one of {', '.join(FILE_NAME_STYLES)})"
            )
            raise ValueError(msg)
        root = (self.root_namespace_to_trim or "").strip().strip(".")
        object.__setattr__(self, "root_namespace_to_trim", root or None)
        lang = (self.code_block_language or "").strip()
        object.__setattr__(
            self, "code_block_language", lang or DEFAULT_CODE_BLOCK_LANGUAGE
        )
