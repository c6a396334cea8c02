"""
Lexicon loader

Word lists for the highlighting stages can be supplied as a YAML file:

    keywords:
      - var
      - async
    known_types:
      - Observable
      - IObservable
    extend: true        # add to the built-in lists instead of replacing them

A list left out of the file keeps its built-in default.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..models.lexicon import Lexicon, DEFAULT_KEYWORDS, DEFAULT_KNOWN_TYPES, words_normalize
from .errors import LexiconError
from .log import LOG


LEXICON_KEYS = {"keywords", "known_types", "extend"}


def lexiconConfig_read(path: Path) -> Dict[str, Any]:
    """Load and parse a lexicon YAML file"""
    if not path.exists():
        raise LexiconError(f"Lexicon file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LexiconError(f"Failed to parse {path}: {e}")
    except OSError as e:
        raise LexiconError(f"Failed to load {path}: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise LexiconError(f"Lexicon {path} must be a mapping")
    return config


def wordList_get(config: Dict[str, Any], key: str, path: Path) -> Optional[tuple]:
    words = config.get(key)
    if words is None:
        return None
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise LexiconError(f"'{key}' in {path} must be a list of strings")
    return words_normalize(words)


def lexicon_load(path: Union[str, Path]) -> Lexicon:
    """
    Build a Lexicon from a YAML file

    Args:
        path: Lexicon file

    Returns:
        Lexicon with the file's lists (merged with the defaults when
        extend is true)

    Raises:
        LexiconError: Missing file, invalid YAML, unknown keys or badly
                      typed lists
    """
    path = Path(path)
    config = lexiconConfig_read(path)

    unknown = set(config) - LEXICON_KEYS
    if unknown:
        raise LexiconError(f"Unknown lexicon keys in {path}: {', '.join(sorted(unknown))}")

    extend = config.get("extend", False)
    if not isinstance(extend, bool):
        raise LexiconError(f"'extend' in {path} must be a boolean")

    keywords = wordList_get(config, "keywords", path)
    known_types = wordList_get(config, "known_types", path)

    if extend:
        keywords = words_normalize(DEFAULT_KEYWORDS + (keywords or ()))
        known_types = words_normalize(DEFAULT_KNOWN_TYPES + (known_types or ()))

    lexicon = Lexicon(
        keywords=keywords if keywords is not None else DEFAULT_KEYWORDS,
        known_types=known_types if known_types is not None else DEFAULT_KNOWN_TYPES,
    )
    LOG(
        f"Loaded lexicon {path.name}: {len(lexicon.keywords)} keywords, "
        f"{len(lexicon.known_types)} known types",
        level=2,
    )
    return lexicon
