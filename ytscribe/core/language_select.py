"""
Caption language prioritisation.

Turns a CaptionAvailability snapshot into an ordered list of
(language, is_manual) candidates. Pure: no I/O, deterministic for a given
snapshot. Index 0 is tried first.

Priority:
    1. manual captions in the video's original language (base-code match)
    2. manual English captions
    3. any other manual captions
    4. auto captions for the original language, requested by base code
    5. auto English captions
    6. any other auto captions, as listed (the original language's "-orig"
       key is already covered by rule 4)
"""

from ytscribe.core.constants import ENGLISH_PREFIX, ORIG_SUFFIX, NON_LANGUAGE_KEYS
from ytscribe.core.models import CaptionAvailability, LanguageCandidate


def base_code(language: str) -> str:
    """Leading subtag of a language tag: 'pt-BR' -> 'pt'."""
    return language.split('-', 1)[0]


class _CandidateList:
    """Ordered, duplicate-free list of candidates."""

    def __init__(self):
        self._items: list[LanguageCandidate] = []
        self._seen: set[LanguageCandidate] = set()

    def add(self, language: str, is_manual: bool):
        candidate = LanguageCandidate(language, is_manual)
        if candidate not in self._seen:
            self._seen.add(candidate)
            self._items.append(candidate)

    def as_list(self) -> list[LanguageCandidate]:
        return list(self._items)


def prioritize_languages(availability: CaptionAvailability) -> list[LanguageCandidate]:
    original = availability.original_language
    manual = [l for l in availability.manual_languages if l not in NON_LANGUAGE_KEYS]
    auto = [l for l in availability.auto_languages if l not in NON_LANGUAGE_KEYS]
    candidates = _CandidateList()

    if original:
        original_base = base_code(original)
        # Exact match ahead of base-code matches
        if original in manual and not original.endswith(ORIG_SUFFIX):
            candidates.add(original, True)
        for lang in manual:
            if not lang.endswith(ORIG_SUFFIX) and base_code(lang) == original_base:
                candidates.add(lang, True)

    for lang in manual:
        if lang.startswith(ENGLISH_PREFIX):
            candidates.add(lang, True)

    for lang in manual:
        candidates.add(lang, True)

    # Requested below by base code, never as "-orig"
    original_orig = None
    if original:
        # The base code fetches the untranslated "-orig" track as well,
        # without going through YouTube's on-demand translation.
        original_base = base_code(original)
        original_orig = f"{original_base}{ORIG_SUFFIX}"
        if original_base in auto or original_orig in auto:
            candidates.add(original_base, False)

    if ENGLISH_PREFIX in auto:
        candidates.add(ENGLISH_PREFIX, False)

    for lang in auto:
        if lang != original_orig:
            candidates.add(lang, False)

    return candidates.as_list()
