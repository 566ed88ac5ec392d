"""Rewriting of generic arity markers and placeholders into display names."""

import re

# ``0 / `0 standing alone: a reference to a method or type generic parameter.
PLACEHOLDER_RE = re.compile(r"(?<![A-Za-z0-9_`])``?(\d+)")
# Foo`2 directly followed by explicit arguments: the marker is redundant.
ARITY_BEFORE_ARGS_RE = re.compile(r"(?<=[A-Za-z0-9_])``?\d+(?=<)")
# Foo`2 / Foo``2: declares the number of generic parameters.
ARITY_RE = re.compile(r"(?<=[A-Za-z0-9_])``?(\d+)")


def _parameter_names(count: int) -> str:
    return ",".join(f"T{i}" for i in range(1, count + 1))


def expand_generic_arity(text: str) -> str:
    """Turn arity markers and placeholders into `T1`-style names.

    `Transform``2` -> `Transform<T1,T2>`, and a bare `` ``0 `` -> `T1`.
    """
    text = PLACEHOLDER_RE.sub(lambda m: f"T{int(m.group(1)) + 1}", text)
    text = ARITY_BEFORE_ARGS_RE.sub("", text)
    return ARITY_RE.sub(lambda m: f"<{_parameter_names(int(m.group(1)))}>", text)
