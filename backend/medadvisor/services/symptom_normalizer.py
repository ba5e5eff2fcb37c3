"""
Symptom normalization.

Every lookup into the knowledge base goes through `normalize` first, so
" Headache " and "headache" are the same symptom everywhere.

Usage:
    from medadvisor.services.symptom_normalizer import normalize, split_symptom_text
    normalize("  Sore Throat ")              # "sore throat"
    split_symptom_text("fever, Cough ,,")    # ["fever", "cough"]
"""

from typing import Iterable, List, Optional


def normalize(raw: Optional[str]) -> str:
    """
    Lower-case and strip a symptom string.

    Idempotent. None, non-strings and whitespace-only input give "", which
    never matches any table entry.
    """
    if not isinstance(raw, str):
        return ""
    return raw.strip().lower()


def normalize_all(symptoms: Optional[Iterable[str]]) -> List[str]:
    """Normalize a sequence, keeping order and duplicates. None -> []."""
    if not symptoms:
        return []
    return [normalize(s) for s in symptoms]


def split_symptom_text(text: Optional[str]) -> List[str]:
    """
    Split free text on commas, the way the console and chat callers
    collect symptoms. Empty pieces are dropped.
    """
    if not text:
        return []
    return [key for key in (normalize(part) for part in text.split(",")) if key]
