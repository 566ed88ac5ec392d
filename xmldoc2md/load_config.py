"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from xmldoc2md.deep_merge import deep_merge
from xmldoc2md.render_options import (
    CLEAN_GENERICS,
    DEFAULT_CODE_BLOCK_LANGUAGE,
    VERBATIM,
    RenderOptions,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "render": {
        "file_name_style": VERBATIM,
        "root_namespace_to_trim": None,
        "code_block_language": DEFAULT_CODE_BLOCK_LANGUAGE,
        "trim_root_namespace_in_file_names": False,
    },
    "output": {
        "single_file": False,
        "report_path": None,
    },
}

# Spellings accepted from users for each file name style.
FILE_NAME_STYLE_ALIASES = {
    "verbatim": VERBATIM,
    "clean": CLEAN_GENERICS,
    "clean-generics": CLEAN_GENERICS,
    "cleangenerics": CLEAN_GENERICS,
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found; using defaults", p)
    return config


def normalize_file_name_style(value: str) -> str:
    """Map a user-facing file name style onto a `RenderOptions` value."""
    key = str(value).strip().lower().replace("_", "-")
    try:
        return FILE_NAME_STYLE_ALIASES[key]
    except KeyError:
        msg = f"Unknown file name style: {value!r} (expected verbatim or clean)"
        raise ValueError(msg) from None


def options_from_config(config: dict[str, Any]) -> RenderOptions:
    """Build `RenderOptions` from the `render` section of a config."""
    render = config.get("render") or {}
    return RenderOptions(
        file_name_style=normalize_file_name_style(
            render.get("file_name_style") or VERBATIM
        ),
        root_namespace_to_trim=render.get("root_namespace_to_trim"),
        code_block_language=render.get("code_block_language")
        or DEFAULT_CODE_BLOCK_LANGUAGE,
        trim_root_namespace_in_file_names=bool(
            render.get("trim_root_namespace_in_file_names")
        ),
    )
