"""Keyword aliases for well-known framework type names."""

import re

TYPE_ALIASES: dict[str, str] = {
    "System.Boolean": "bool",
    "System.Byte": "byte",
    "System.SByte": "sbyte",
    "System.Char": "char",
    "System.Decimal": "decimal",
    "System.Double": "double",
    "System.Single": "float",
    "System.Int16": "short",
    "System.UInt16": "ushort",
    "System.Int32": "int",
    "System.UInt32": "uint",
    "System.Int64": "long",
    "System.UInt64": "ulong",
    "System.IntPtr": "nint",
    "System.UIntPtr": "nuint",
    "System.Object": "object",
    "System.String": "string",
    "System.Void": "void",
}

# Longest names first so alternation never stops at a shorter prefix.
_ALIAS_RE = re.compile(
    r"(?<![A-Za-z0-9_])("
    + "|".join(re.escape(k) for k in sorted(TYPE_ALIASES, key=len, reverse=True))
    + r")(?![A-Za-z0-9_])",
)


def apply_type_aliases(text: str) -> str:
    """Replace whole-token framework type names with their keyword aliases.

    `System.Int32` becomes `int`, while `System.StringComparer` is left alone
    because the match would end inside a longer identifier.
    """
    return _ALIAS_RE.sub(lambda m: TYPE_ALIASES[m.group(1)], text)
