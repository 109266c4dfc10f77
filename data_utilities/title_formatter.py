"""
Title Formatting Utility
========================

• Lowercases, then spaces out punctuation
• Splits on whitespace plus configurable separators
• Config-driven exceptions (small words, all caps, camel case)
• Caller exceptions extend the built-in defaults, never replace them

Usage:
    title_case("the lord of the rings")          # "The Lord of the Rings"
    title_case("github api", {"all_caps_words": ["api"]})
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Set, Union

from data_utilities.errors import ConfigError

# ============================================================
# PATHS & CONFIG
# ============================================================

CONFIG_PATH = Path(__file__).resolve().parent / "config.json"

# Original camelCase keys are accepted alongside the snake_case ones
_KEY_ALIASES = {
    "lowerCaseWords": "lower_case_words",
    "allCapsWords": "all_caps_words",
    "camelCaseWords": "camel_case_words",
    "spaceEquivalents": "space_equivalents",
}

# ============================================================
# REGEX PATTERNS
# ============================================================

_PUNCTUATION_RE = re.compile(r"([\W_])\s*")

# ============================================================
# DATA MODEL
# ============================================================


@dataclass
class WordExceptions:
    """
    The four exception categories that steer title casing.

    Set entries and mapping keys are stored lowercase so lookups against
    the lowercased title are exact.
    """

    lower_case_words: Set[str] = field(default_factory=set)
    all_caps_words: Set[str] = field(default_factory=set)
    camel_case_words: Dict[str, str] = field(default_factory=dict)
    space_equivalents: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.lower_case_words = {w.lower() for w in self.lower_case_words}
        self.all_caps_words = {w.lower() for w in self.all_caps_words}
        self.camel_case_words = {k.lower(): v for k, v in self.camel_case_words.items()}
        self.space_equivalents = list(self.space_equivalents)

    @classmethod
    def from_mapping(cls, raw: Mapping) -> "WordExceptions":
        """
        Build a bundle from a config mapping (JSON shape).

        Unknown keys are ignored. Wrong value types raise ConfigError.
        """
        if not isinstance(raw, Mapping):
            raise ConfigError(f"Word exceptions must be a mapping, got {type(raw).__name__}")

        data = {_KEY_ALIASES.get(k, k): v for k, v in raw.items()}

        camel = data.get("camel_case_words") or {}
        if not isinstance(camel, Mapping):
            raise ConfigError("camel_case_words must map lowercase words to replacements")

        exceptions = cls(
            lower_case_words=set(_string_list(data, "lower_case_words")),
            all_caps_words=set(_string_list(data, "all_caps_words")),
            camel_case_words={str(k): str(v) for k, v in camel.items()},
            space_equivalents=_string_list(data, "space_equivalents"),
        )
        exceptions.separator_pattern()
        return exceptions

    def merge(self, other: Optional["WordExceptions"]) -> "WordExceptions":
        """
        Return a new bundle holding the entries of both.
        """
        if other is None:
            return WordExceptions(
                self.lower_case_words,
                self.all_caps_words,
                self.camel_case_words,
                self.space_equivalents,
            )

        separators = list(self.space_equivalents)
        separators += [s for s in other.space_equivalents if s not in separators]

        return WordExceptions(
            lower_case_words=self.lower_case_words | other.lower_case_words,
            all_caps_words=self.all_caps_words | other.all_caps_words,
            camel_case_words={**self.camel_case_words, **other.camel_case_words},
            space_equivalents=separators,
        )

    def separator_pattern(self) -> re.Pattern:
        """
        One character class built from every space equivalent, repeated.

        Whitespace alone when there are none. A fragment that breaks the
        character class raises ConfigError.
        """
        fragments = "".join(_class_fragment(s) for s in self.space_equivalents) or r"\s"
        try:
            return re.compile("[" + fragments + "]+")
        except re.error as e:
            raise ConfigError(f"Bad space_equivalents {self.space_equivalents!r}: {e}") from e


def _string_list(data: Mapping, key: str) -> List[str]:
    value = data.get(key) or []
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ConfigError(f"{key} must be a list of strings")
    return [str(v) for v in value]


def _class_fragment(separator: str) -> str:
    # Single characters are escaped; escapes like "\s" or "\t" pass through
    if len(separator) == 1:
        return re.escape(separator)
    return separator


# ============================================================
# CONFIG LOADING
# ============================================================


def load_config(path: Path = CONFIG_PATH) -> WordExceptions:
    """
    Load exception lists from a JSON file.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read word exceptions from {path}: {e}") from e

    return WordExceptions.from_mapping(raw)


DEFAULT_EXCEPTIONS = load_config()


def load_word_exceptions(path: Union[str, Path]) -> WordExceptions:
    """
    Load a user exceptions file merged onto the built-in defaults.
    """
    return DEFAULT_EXCEPTIONS.merge(load_config(Path(path)))


def resolve_exceptions(
    exceptions: Union[WordExceptions, Mapping, None] = None,
) -> WordExceptions:
    """
    Defaults plus whatever the caller supplied.
    """
    if exceptions is None:
        # A copy, so callers cannot change the built-in defaults
        return DEFAULT_EXCEPTIONS.merge(None)
    if not isinstance(exceptions, WordExceptions):
        exceptions = WordExceptions.from_mapping(exceptions)
    return DEFAULT_EXCEPTIONS.merge(exceptions)


# ============================================================
# WORD PROCESSORS
# ============================================================


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _process_word(word: str, is_first: bool, cfg: WordExceptions) -> str:
    if word in cfg.all_caps_words:
        return word.upper()

    if word in cfg.camel_case_words:
        return cfg.camel_case_words[word]

    if is_first or word not in cfg.lower_case_words:
        return _capitalize(word)

    return word


# ============================================================
# PUBLIC API
# ============================================================


def title_case(
    title: str,
    exceptions: Union[WordExceptions, Mapping, None] = None,
) -> str:
    """
    Convert a string to Title Case.

    :param title: Any string, possibly empty
    :param exceptions: Extra exception entries, as a WordExceptions or a
        mapping with any of the keys lower_case_words, all_caps_words,
        camel_case_words, space_equivalents
    :return: The title-cased string, words joined by single spaces
    """
    if not title:
        return ""

    cfg = resolve_exceptions(exceptions)

    # Add a space after each piece of punctuation
    title = _PUNCTUATION_RE.sub(r"\1 ", title.lower())

    words = [w for w in cfg.separator_pattern().split(title) if w]

    return " ".join(
        _process_word(word, i == 0, cfg) for i, word in enumerate(words)
    )
