"""
Text preprocessing for content quality analysis.

Usage:
    from content_quality.preprocessing import segment_text, split_paragraphs

    segmentation = segment_text(text)
    print(segmentation.sentence_count, segmentation.word_count)
"""

from .segmenter import (
    DEFAULT_ABBREVIATIONS,
    TextSegmentation,
    TextSegmenter,
    make_snippet,
    segment_text,
    split_paragraphs,
    split_sentences,
    tokenize_words,
)

__all__ = [
    "DEFAULT_ABBREVIATIONS",
    "TextSegmentation",
    "TextSegmenter",
    "make_snippet",
    "segment_text",
    "split_paragraphs",
    "split_sentences",
    "tokenize_words",
]
