"""Logic for computing stable hashes of configuration objects."""

import hashlib
import json
from typing import Any


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a SHA-256 of the configuration over canonical JSON.

    Keys are sorted, so equal configurations hash equally regardless of order.
    """
    config_json = json.dumps(config, sort_keys=True, ensure_ascii=True, default=str)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
