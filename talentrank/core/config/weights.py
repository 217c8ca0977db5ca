"""Weight normalization and the config merge function."""

import math
from collections.abc import Mapping
from typing import Any


def normalize_weights(weights: Mapping[str, float]) -> dict[str, float]:
    """Scale a weight mapping so its values sum to 1.0.

    Negative or non-finite values count as 0. When every value is 0 the
    weights fall back to an equal split across keys.

    Args:
        weights: Named non-negative weights

    Returns:
        Mapping with the same keys whose values sum to 1.0

    Example:
        >>> normalize_weights({"skills": 0, "experience": 0})
        {'skills': 0.5, 'experience': 0.5}
    """
    cleaned = {key: _as_weight(value) for key, value in weights.items()}
    if not cleaned:
        return {}

    total = sum(cleaned.values())
    if total <= 0:
        equal = 1.0 / len(cleaned)
        return {key: equal for key in cleaned}

    return {key: value / total for key, value in cleaned.items()}


def _as_weight(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any] | None) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary (None leaves base unchanged)

    Returns:
        Merged dictionary (base is not modified)
    """
    result = dict(base)
    if not override:
        return result
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            # Recursively merge nested dicts
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
