"""
Loaders for the dictionary and the optional word-frequency weights.

Both are read once, before any solving, and handed to the solver as plain
in-memory data.
"""

import json
import logging
import math
from typing import Dict, List

from .feedback import is_valid_word

logger = logging.getLogger(__name__)


class ResourceUnavailable(RuntimeError):
    """A required word list or weight file is missing or unreadable."""


def load_words(filepath: str) -> List[str]:
    """
    Load a word list, one word per line.

    Lines that are not 5 letters a-z are skipped. A missing file or one with
    no usable word raises ResourceUnavailable.
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            lines = [line.strip().lower() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceUnavailable(f"Cannot read word list {filepath}: {e}") from e

    valid = [w for w in lines if is_valid_word(w)]
    rejected = len(lines) - len(valid)
    words = list(dict.fromkeys(valid))
    if rejected:
        logger.warning("Skipped %d malformed entries in %s", rejected, filepath)
    if not words:
        raise ResourceUnavailable(f"Word list {filepath} has no valid 5-letter words")
    logger.info("Loaded %d words from %s", len(words), filepath)
    return words


def load_weights(filepath: str) -> Dict[str, float]:
    """
    Load word-frequency weights from a JSON object of word -> weight.

    Weights must be finite, non-negative numbers.
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceUnavailable(f"Cannot read weights {filepath}: {e}") from e
    except json.JSONDecodeError as e:
        raise ResourceUnavailable(f"Weights file {filepath} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ResourceUnavailable(f"Weights file {filepath} must hold a JSON object")

    weights = {}
    for word, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ResourceUnavailable(f"Weight for {word!r} is not a number: {value!r}")
        if value < 0 or not math.isfinite(value):
            raise ResourceUnavailable(f"Weight for {word!r} must be finite and non-negative: {value!r}")
        weights[word.lower()] = float(value)
    logger.info("Loaded %d weights from %s", len(weights), filepath)
    return weights
