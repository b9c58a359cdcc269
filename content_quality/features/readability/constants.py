"""
Immutable constants for readability and content-quality analysis.

This module contains version-controlled reference data.
These values should NEVER change at runtime - they define WHAT readability analysis IS.

Constants include:
- Readability formula coefficients and level breakpoints
- Audience threshold profiles
- Transitional phrase dictionary (grouped by rhetorical function)
- Complex word -> plain English suggestion dictionary
- Sentence/paragraph length buckets and score adjustment rules

For runtime configuration (HOW to run the analysis), see configs/features/readability.yaml
"""

from typing import Final

# ===========================
# Module Metadata
# ===========================

READABILITY_MODULE_VERSION: Final[str] = "1.0.0"
"""Version of the readability analysis module."""

# ===========================
# Formula Coefficients
# ===========================

FLESCH_BASE: Final[float] = 206.835
FLESCH_SENTENCE_WEIGHT: Final[float] = 1.015
FLESCH_SYLLABLE_WEIGHT: Final[float] = 84.6

FK_SENTENCE_WEIGHT: Final[float] = 0.39
FK_SYLLABLE_WEIGHT: Final[float] = 11.8
FK_OFFSET: Final[float] = 15.59

COLEMAN_LIAU_LETTER_WEIGHT: Final[float] = 0.0588
COLEMAN_LIAU_SENTENCE_WEIGHT: Final[float] = 0.296
COLEMAN_LIAU_OFFSET: Final[float] = 15.8

LIX_LONG_WORD_LENGTH: Final[int] = 6
"""Words with more characters than this count as long words for LIX."""

DIFFICULT_WORD_SYLLABLES: Final[int] = 3
"""Words with at least this many syllables count as difficult/complex."""

# ===========================
# Flesch Level Breakpoints
# ===========================

FLESCH_LEVELS: Final[tuple[tuple[int, str], ...]] = (
    (90, "Very Easy (5th grade)"),
    (80, "Easy (6th grade)"),
    (70, "Fairly Easy (7th grade)"),
    (60, "Standard (8th-9th grade)"),
    (50, "Fairly Difficult (10th-12th grade)"),
    (30, "Difficult (College)"),
)
"""(minimum score, label) pairs checked from easiest to hardest."""

FLESCH_LEVEL_FLOOR: Final[str] = "Very Difficult (Professional)"
"""Label for scores below the last breakpoint."""

LEVEL_NOT_AVAILABLE: Final[str] = "N/A"
LEVEL_ERROR: Final[str] = "Error"

INSUFFICIENT_CONTENT_MESSAGE: Final[str] = "Insufficient content to analyze"
NO_READABLE_CONTENT_MESSAGE: Final[str] = "No readable content found"

# ===========================
# Audience Profiles
# ===========================

DEFAULT_AUDIENCE: Final[str] = "general"

AUDIENCE_PROFILES: Final[dict[str, dict]] = {
    "general": {
        "flesch_min": 60,
        "sentence_length_max": 20,
        "paragraph_length_max": 150,
        "passive_max": 10,
        "description": "General Audience (Standard Web Content)",
    },
    "professional": {
        "flesch_min": 50,
        "sentence_length_max": 25,
        "paragraph_length_max": 200,
        "passive_max": 15,
        "description": "Professional / Business Audience",
    },
    "academic": {
        "flesch_min": 30,
        "sentence_length_max": 30,
        "paragraph_length_max": 250,
        "passive_max": 20,
        "description": "Academic / Technical Audience",
    },
}
"""Threshold profiles keyed by audience name."""

# Slack bands between "good" and "poor" per metric.
FLESCH_WARNING_BAND: Final[int] = 10
SENTENCE_LENGTH_WARNING_BAND: Final[int] = 5
PARAGRAPH_LENGTH_WARNING_BAND: Final[int] = 50
PASSIVE_WARNING_BAND: Final[int] = 10

# ===========================
# Length Buckets
# ===========================

VERY_LONG_SENTENCE_WORDS: Final[int] = 25
"""Sentences with more words than this are 'very long'."""

LONG_SENTENCE_WORDS: Final[int] = 20
"""Sentences with more words than this (up to VERY_LONG_SENTENCE_WORDS) are 'long'."""

SHORT_SENTENCE_WORDS: Final[int] = 10
"""Sentences with fewer words than this are 'short'."""

SAME_START_MIN_RUN: Final[int] = 2
SAME_START_MIN_WORD_LENGTH: Final[int] = 3

LONG_PARAGRAPH_WORDS: Final[int] = 150
SHORT_PARAGRAPH_WORDS: Final[int] = 50

# ===========================
# Score Adjustments
# ===========================

PASSIVE_PENALTIES: Final[tuple[tuple[float, int], ...]] = ((25, -10), (15, -5))
"""(percentage above which, adjustment) for passive voice; first match applies."""

LONG_SENTENCE_PENALTIES: Final[tuple[tuple[float, int], ...]] = ((25, -10), (15, -5))
"""(percentage above which, adjustment) for long sentences; first match applies."""

DIFFICULT_WORD_PENALTY: Final[tuple[float, int]] = (15, -5)

TRANSITION_BONUSES: Final[tuple[tuple[float, int], ...]] = ((30, 5), (20, 3))
"""(percentage at or above which, adjustment) for transitional words; first match applies."""

CONSECUTIVE_START_PENALTY: Final[tuple[int, int]] = (3, -5)

# ===========================
# Recommendation Limits
# ===========================

FK_GRADE_MAX: Final[float] = 12
COLEMAN_LIAU_MAX: Final[float] = 14
LIX_MAX: Final[float] = 50
CONSECUTIVE_START_MAX: Final[int] = 3
TRANSITIONAL_MIN_PCT: Final[float] = 20
TRANSITIONAL_GOOD_PCT: Final[float] = 30

# ===========================
# Transitional Phrases
# ===========================

TRANSITIONAL_WORDS_BY_FUNCTION: Final[dict[str, tuple[str, ...]]] = {
    "addition": (
        "additionally", "also", "and", "besides", "coupled with", "furthermore",
        "in addition", "likewise", "moreover", "similarly", "equally important",
        "as well as", "together with", "not to mention", "to say nothing of",
        "not only", "but also", "in the same way", "by the same token",
    ),
    "contrast": (
        "although", "but", "conversely", "despite", "even though", "however",
        "in contrast", "in spite of", "nevertheless", "nonetheless", "notwithstanding",
        "on the contrary", "on the other hand", "otherwise", "rather", "still",
        "though", "yet", "while", "whereas", "even so", "be that as it may",
        "in reality", "at the same time", "different from", "of course",
    ),
    "cause_effect": (
        "accordingly", "as a result", "because", "consequently", "due to", "for",
        "for this reason", "hence", "since", "so", "therefore", "thus",
        "then", "it follows that", "under those circumstances", "in that case",
        "for that reason", "in effect", "as a consequence", "with this in mind",
    ),
    "sequence": (
        "after", "afterward", "at this time", "before", "concurrently", "currently",
        "during", "eventually", "finally", "first", "second", "third", "fourth",
        "following", "formerly", "immediately", "initially", "lastly", "later",
        "meanwhile", "next", "now", "once", "previously", "simultaneously", "soon",
        "subsequently", "thereafter", "until", "when", "whenever",
        "at last", "in the meantime", "in the interim", "at first", "at once",
        "in the end", "at length", "at this point", "prior to", "straight away",
    ),
    "example": (
        "as an illustration", "as shown by", "by way of illustration", "for example",
        "for instance", "in other words", "in particular", "namely", "put differently",
        "specifically", "such as", "that is", "to demonstrate", "to illustrate",
        "to put it another way", "to show that", "as revealed by", "in this case",
        "take the case of", "for one thing", "as proof", "like",
    ),
    "emphasis": (
        "above all", "certainly", "especially", "importantly", "in fact",
        "indeed", "notably", "particularly", "primarily",
        "surely", "truly", "undoubtedly", "unquestionably", "without doubt",
        "most importantly", "more specifically", "to emphasize", "to repeat",
        "to clarify", "with attention to", "chiefly", "mainly", "actually",
    ),
    "summary": (
        "all in all", "all things considered", "altogether", "as a final point",
        "as has been noted", "as i have said", "as mentioned", "as shown",
        "briefly", "by and large", "given these points", "in any case",
        "in any event", "in brief", "in conclusion", "in essence", "in short",
        "in sum", "in summary", "in the final analysis", "in the long run",
        "on balance", "on the whole", "overall", "summing up",
        "to conclude", "to summarize", "ultimately",
        "as can be seen", "for the most part", "as stated", "given all this",
    ),
    "comparison": (
        "compared to", "same as", "similar to",
        "in the same fashion", "just as", "just like",
        "equally", "by comparison", "in like manner", "in a similar way",
    ),
    "place": (
        "above", "adjacent to", "below", "beyond", "elsewhere", "farther on",
        "here", "nearby", "opposite to", "there", "to the left", "to the right",
        "in the distance", "in the foreground", "in the background",
    ),
    "concession": (
        "admittedly", "albeit", "granted that",
        "naturally", "while it may be true",
    ),
}
"""Transitional words and phrases grouped by rhetorical function (lowercase)."""

TRANSITIONAL_WORDS: Final[tuple[str, ...]] = tuple(dict.fromkeys(
    phrase
    for phrases in TRANSITIONAL_WORDS_BY_FUNCTION.values()
    for phrase in phrases
))
"""All distinct transitional phrases, in dictionary order."""

# ===========================
# Complex Word Simplifications
# ===========================

COMPLEX_WORD_SUGGESTIONS: Final[dict[str, str]] = {
    "accelerate": "speed up",
    "accommodate": "fit",
    "accompany": "go with",
    "accomplish": "do",
    "accordingly": "so",
    "accumulate": "gather",
    "acquire": "get",
    "additional": "more",
    "adjacent": "next to",
    "advantageous": "helpful",
    "aggregate": "total",
    "alleviate": "ease",
    "allocate": "give",
    "alternatively": "or",
    "ameliorate": "improve",
    "anticipate": "expect",
    "apparent": "clear",
    "appreciable": "large",
    "approximately": "about",
    "ascertain": "find out",
    "assistance": "help",
    "attempt": "try",
    "beneficial": "helpful",
    "capability": "ability",
    "commence": "start",
    "commencement": "start",
    "component": "part",
    "comprehend": "understand",
    "comprise": "include",
    "concerning": "about",
    "consequently": "so",
    "consolidate": "combine",
    "constitute": "make up",
    "demonstrate": "show",
    "designate": "name",
    "determine": "decide",
    "disseminate": "spread",
    "endeavor": "try",
    "enumerate": "list",
    "equivalent": "equal",
    "establish": "set up",
    "evaluate": "check",
    "evident": "clear",
    "exclusively": "only",
    "expedite": "speed up",
    "expenditure": "spending",
    "facilitate": "help",
    "feasible": "possible",
    "finalize": "finish",
    "frequently": "often",
    "fundamental": "basic",
    "furthermore": "also",
    "however": "but",
    "identical": "same",
    "implement": "carry out",
    "indicate": "show",
    "individual": "person",
    "initial": "first",
    "initiate": "start",
    "magnitude": "size",
    "maintain": "keep",
    "methodology": "method",
    "minimize": "reduce",
    "modification": "change",
    "monitor": "check",
    "necessitate": "need",
    "nevertheless": "still",
    "notification": "notice",
    "numerous": "many",
    "objective": "goal",
    "obtain": "get",
    "operate": "run",
    "optimal": "best",
    "optimize": "improve",
    "participate": "take part",
    "perceive": "see",
    "perform": "do",
    "permit": "let",
    "possess": "have",
    "preclude": "prevent",
    "previously": "before",
    "prioritize": "rank",
    "procure": "get",
    "proficiency": "skill",
    "purchase": "buy",
    "regarding": "about",
    "remainder": "rest",
    "remuneration": "pay",
    "require": "need",
    "requirement": "need",
    "subsequently": "later",
    "substantial": "large",
    "sufficient": "enough",
    "terminate": "end",
    "therefore": "so",
    "transmit": "send",
    "ultimately": "finally",
    "utilization": "use",
    "utilize": "use",
    "visualize": "see",
}
"""Complex words (lowercase) mapped to plain-English suggestions."""
