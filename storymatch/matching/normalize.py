"""Text normalization for fuzzy title matching."""

import re
from typing import List, Optional, Pattern, Tuple

_PUNCT_RE = re.compile(r"[^\w\s]")
_WS_RE = re.compile(r"\s+")


def _word(pattern: str) -> Pattern:
    return re.compile(r"\b" + pattern + r"\b", re.IGNORECASE)


def _stem(pattern: str) -> Pattern:
    return re.compile(r"\b" + pattern, re.IGNORECASE)


# Ordered: the combined "plannedcaesarean" form must run before "caesarean".
SPELLING_VARIANTS: List[Tuple[Pattern, str]] = [
    (_word("haemorrhage"), "hemorrhage"),
    (_word("haemorrhagic"), "hemorrhagic"),
    (_word("anaemia"), "anemia"),
    (_word("anaemic"), "anemic"),
    (_word("oedema"), "edema"),
    (_stem("oesophag"), "esophag"),
    (_word("aetiology"), "etiology"),
    (_word("paediatric"), "pediatric"),
    (_stem("gynaecolog"), "gynecolog"),
    (_word("orthopaedic"), "orthopedic"),
    (_word("plannedcaesarean"), "planned cesarean"),
    (_word("caesarean"), "cesarean"),
    (_word("caesarian"), "cesarean"),
    (_word("centre"), "center"),
    (_word("fibre"), "fiber"),
    (_word("tumour"), "tumor"),
    (_word("favour"), "favor"),
    (_word("colour"), "color"),
    (_word("labour"), "labor"),
    (_word("behaviour"), "behavior"),
    (_word("analyse"), "analyze"),
    (_word("organise"), "organize"),
    (_word("randomised"), "randomized"),
    (_word("standardised"), "standardized"),
    (_word("optimised"), "optimized"),
    (_word("immunisation"), "immunization"),
    (_word("hospitalisation"), "hospitalization"),
]


def normalize_title(text: Optional[str]) -> str:
    """
    Normalize text for fuzzy matching.

    Lowercases, replaces punctuation with spaces, collapses whitespace and
    rewrites regional/medical spelling variants to their US form.
    """
    if not text:
        return ""

    normalized = _PUNCT_RE.sub(" ", text.lower())
    normalized = _WS_RE.sub(" ", normalized).strip()

    for pattern, replacement in SPELLING_VARIANTS:
        normalized = pattern.sub(replacement, normalized)

    return normalized
