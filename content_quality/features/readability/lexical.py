"""
Per-word and per-sentence lexical classifiers.

- count_syllables: vowel-group syllable estimate for English words
- is_passive_voice: auxiliary + past-participle pattern matcher

Both are heuristics, not parsers. Passive voice is an auxiliary ("was", "got")
followed by a word ending in "-ed" or "-en" or by a common irregular participle
("thrown", "built"); "by the way"-style idioms never count as an agent.
"""

import re
from typing import Final

from .constants import DIFFICULT_WORD_SYLLABLES

_NON_LETTERS_RE = re.compile(r"[^a-z]")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")

PASSIVE_INDICATORS: Final[tuple[re.Pattern, ...]] = (
    re.compile(r"\b(am|is|are|was|were|be|been|being)\s+\w+ed\b", re.IGNORECASE),
    re.compile(r"\b(am|is|are|was|were|be|been|being)\s+\w+en\b", re.IGNORECASE),
    re.compile(r"\b(get|gets|got|gotten)\s+\w+ed\b", re.IGNORECASE),
    re.compile(r"\b(get|gets|got|gotten)\s+\w+en\b", re.IGNORECASE),
)

# Irregular past participles that end in neither "-ed" nor "-en".
IRREGULAR_PARTICIPLES: Final[tuple[str, ...]] = (
    "begun", "bent", "blown", "born", "borne", "bought", "bound", "brought", "built",
    "burnt", "caught", "cut", "dealt", "done", "drawn", "drunk", "dug", "fed", "felt",
    "flown", "fought", "found", "grown", "heard", "held", "hit", "hung", "hurt", "kept",
    "known", "laid", "led", "left", "lent", "lost", "made", "meant", "met", "overthrown",
    "paid", "put", "read", "run", "said", "sent", "set", "sewn", "shot", "shown", "shut",
    "sold", "sought", "sown", "spent", "spun", "struck", "stuck", "sung", "sunk", "swept",
    "sworn", "swum", "taught", "thought", "thrown", "told", "torn", "understood",
    "withdrawn", "won", "worn", "wound",
)

_IRREGULAR_PASSIVE_RE = re.compile(
    r"\b(am|is|are|was|were|be|been|being|get|gets|got|gotten)\s+("
    + "|".join(IRREGULAR_PARTICIPLES)
    + r")\b",
    re.IGNORECASE,
)

_BY_AGENT_RE = re.compile(r"\bby\s+[a-z]+\b", re.IGNORECASE)
_PASSIVE_BY_AGENT_RE = re.compile(r"\b(was|were|is|are|been)\s+\w+ed\s+by\b", re.IGNORECASE)

BY_PHRASE_EXCLUDES: Final[tuple[str, ...]] = (
    "by the way", "by now", "by far", "by and large", "by all means",
)


def count_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a word.

    Words of three letters or fewer count as one syllable. A trailing silent
    "e" is dropped before counting vowel groups, and words ending in "le"
    ("table", "people") get the "-le" syllable back.

    Args:
        word: A single word token

    Returns:
        Syllable count (always >= 1)
    """
    word = _NON_LETTERS_RE.sub("", word.lower())
    if len(word) <= 3:
        return 1

    ends_with_le = word.endswith("le")
    if word.endswith("e"):
        word = word[:-1]

    vowel_groups = _VOWEL_GROUP_RE.findall(word)
    if not vowel_groups:
        return 1

    count = len(vowel_groups)
    if ends_with_le:
        count += 1

    return max(1, count)


def is_passive_voice(sentence: str) -> bool:
    """
    Detect passive voice in a sentence.

    Args:
        sentence: Sentence text

    Returns:
        True if any passive indicator matches
    """
    for pattern in PASSIVE_INDICATORS:
        if pattern.search(sentence):
            return True

    if _IRREGULAR_PASSIVE_RE.search(sentence):
        return True

    if _BY_AGENT_RE.search(sentence):
        lower_sentence = sentence.lower()
        has_exclude = any(phrase in lower_sentence for phrase in BY_PHRASE_EXCLUDES)
        if not has_exclude and _PASSIVE_BY_AGENT_RE.search(sentence):
            return True

    return False


def is_difficult_word(word: str, min_syllables: int = DIFFICULT_WORD_SYLLABLES) -> bool:
    """True when the word has at least ``min_syllables`` syllables."""
    return count_syllables(word) >= min_syllables
