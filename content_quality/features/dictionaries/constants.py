"""
Immutable lexicons for tone, toxicity, keyword and inclusive-language analysis.

This module contains version-controlled reference data.
These values should NEVER change at runtime - they define WHAT each lexicon IS.

Constants include:
- Sentiment lexicon (AFINN-165 subset, weights -4..+5)
- Toxic/aggressive trigger list
- Stopword sets (sentiment scoring, keyword extraction)
- Inclusive-language dictionary (term, suggestion, category)

For runtime configuration (HOW to use the lexicons), see configs/features/sentiment.yaml
"""

from typing import Final

# ===========================
# Lexicon Metadata
# ===========================

SENTIMENT_LEXICON_VERSION: Final[str] = "afinn-165-subset"
"""Identifier of the sentiment lexicon."""

SENTIMENT_LEXICON_SOURCE_URL: Final[str] = "https://github.com/fnielsen/afinn"
"""Upstream source of the AFINN word list."""

# ===========================
# Sentiment Lexicon
# ===========================

SENTIMENT_LEXICON: Final[dict[str, int]] = {
    # Positive
    "amazing": 4, "awesome": 4, "excellent": 5, "outstanding": 5, "fantastic": 4,
    "good": 3, "great": 3, "best": 3, "better": 2, "love": 3, "perfect": 3,
    "beautiful": 3, "brilliant": 4, "creative": 2, "dynamic": 2, "effective": 2,
    "efficient": 2, "engaging": 2, "enjoy": 2, "exciting": 3, "expert": 2,
    "favorite": 2, "free": 1, "fun": 4, "helpful": 2, "highlight": 2,
    "impressive": 3, "improve": 2, "innovative": 2, "inspire": 3, "joke": 2,
    "joy": 3, "masterpiece": 4, "opportunity": 2, "pleasure": 3, "popular": 3,
    "powerful": 2, "pro": 1, "promising": 3, "reward": 2, "robust": 2,
    "safe": 1, "satisfied": 2, "secure": 2, "solution": 1, "success": 2,
    "support": 2, "top": 2, "value": 1, "vision": 1, "wealth": 3, "win": 4,
    "wonderful": 4, "worth": 2, "wow": 4, "yes": 1, "easy": 1, "benefit": 2,
    "boost": 1, "clarity": 2, "comfort": 2, "recommend": 2, "trusted": 2,

    # Negative
    "bad": -3, "worse": -3, "worst": -3, "horrible": -3, "terrible": -3,
    "awful": -3, "disgusting": -3, "hate": -3, "anger": -3, "annoy": -2,
    "anxious": -2, "avoid": -1, "awkward": -2, "blame": -2, "boring": -2,
    "broken": -1, "chaos": -2, "cheat": -3, "complaint": -2, "confused": -1,
    "crisis": -3, "damage": -3, "dead": -3, "delay": -1, "deny": -2,
    "disaster": -2, "doubt": -1, "dumb": -3, "error": -2, "fail": -2,
    "fake": -3, "fear": -2, "fight": -1, "fraud": -4, "grief": -2,
    "guilt": -3, "harm": -2, "hurt": -2, "idiot": -3, "ignore": -1,
    "ill": -2, "issues": -1, "kill": -3, "lack": -1, "lazy": -1,
    "loss": -3, "mess": -1, "mistake": -2, "negative": -2, "pain": -2,
    "panic": -3, "poor": -2, "problem": -1, "quit": -1, "reject": -1,
    "risk": -2, "rude": -2, "sad": -2, "scam": -4, "shame": -2,
    "sick": -2, "silly": -1, "slow": -2, "sorry": -1, "stress": -1,
    "stupid": -2, "suffer": -2, "threat": -2, "trouble": -2, "ugly": -3,
    "unhappy": -2, "useless": -2, "victim": -3, "waste": -1, "weak": -2,
    "worry": -3, "wrong": -2, "manipulate": -1, "mislead": -3, "complex": -1,
    "difficult": -1, "hard": -1,
}
"""Lowercase word -> sentiment weight."""

# Multi-word entries are compared against single tokens and never match.
TOXIC_TRIGGERS: Final[tuple[str, ...]] = (
    "stupid", "idiot", "dumb", "shut up", "kill yourself", "hate you",
    "ugly", "fat", "disgusting", "scam", "cheat", "fraud", "manipulate",
)
"""Words that flag the text as toxic/aggressive."""

SENTIMENT_STOPWORDS: Final[frozenset[str]] = frozenset({
    "the", "is", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
})
"""Tokens skipped before sentiment scoring."""

# ===========================
# Keyword Extraction
# ===========================

KEYWORD_STOPWORDS: Final[frozenset[str]] = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it", "for", "not",
    "on", "with", "he", "as", "you", "do", "at", "this", "but", "his", "by", "from",
    "they", "we", "say", "her", "she", "or", "an", "will", "my", "one", "all", "would",
    "there", "their", "what", "so", "up", "out", "if", "about", "who", "get", "which",
    "go", "me", "when", "make", "can", "like", "time", "no", "just", "him", "know",
    "take", "people", "into", "year", "your", "good", "some", "could", "them", "see",
    "other", "than", "then", "now", "look", "only", "come", "its", "over", "think",
    "also", "back", "after", "use", "two", "how", "our", "work", "first", "well", "way",
    "even", "new", "want", "because", "any", "these", "give", "day", "most", "us", "is",
    "are", "was", "were", "been", "has", "had",
})
"""Common English words never auto-selected as keywords."""

KEYWORD_MIN_LENGTH: Final[int] = 4
"""Auto-extracted keywords must have at least this many characters."""

# ===========================
# Inclusive Language
# ===========================

INCLUSIVE_CATEGORIES: Final[tuple[str, ...]] = ("Gender", "Race", "Disability")

INCLUSIVE_TERMS: Final[tuple[tuple[str, str, str], ...]] = (
    # Gender
    ("mankind", "humankind", "Gender"),
    ("manpower", "workforce", "Gender"),
    ("manmade", "artificial", "Gender"),
    ("chairman", "chairperson", "Gender"),
    ("policeman", "police officer", "Gender"),
    ("fireman", "firefighter", "Gender"),
    ("mailman", "mail carrier", "Gender"),
    ("stewardess", "flight attendant", "Gender"),
    ("guys", "folks", "Gender"),
    ("waitress", "server", "Gender"),
    ("freshman", "first-year student", "Gender"),
    ("mother tongue", "native language", "Gender"),

    # Race / Ethnicity
    ("blacklist", "blocklist", "Race"),
    ("whitelist", "allowlist", "Race"),
    ("master", "primary", "Race"),
    ("slave", "secondary", "Race"),
    ("grandfathered", "legacy", "Race"),
    ("powwow", "meeting", "Race"),
    ("guru", "expert", "Race"),
    ("ninja", "expert", "Race"),
    ("sherpa", "guide", "Race"),

    # Disability
    ("crazy", "wild", "Disability"),
    ("insane", "extreme", "Disability"),
    ("dumb", "unwise", "Disability"),
    ("lame", "uncool", "Disability"),
    ("sanity check", "confidence check", "Disability"),
    ("blind spot", "missed area", "Disability"),
    ("crippled", "disabled", "Disability"),
    ("handicap", "disability", "Disability"),
    ("wheelchair bound", "wheelchair user", "Disability"),
    ("suffers from", "has", "Disability"),
    ("tone deaf", "insensitive", "Disability"),
    ("ocd", "meticulous", "Disability"),
)
"""(term, suggestion, category) triples, lowercase terms."""

INCLUSIVITY_PENALTY_PER_TERM: Final[int] = 5
"""Points deducted from 100 per distinct flagged term."""
