"""PassMint -- keyword-aware password generation and strength scoring.

Core functions for building randomized passwords from selected character
classes (with an optional memorable keyword) and scoring them with a
heuristic 0-50 rubric.
"""

import random
import re
import secrets
from collections.abc import Iterable
from types import MappingProxyType


# ── Character classes ──────────────────────────────────────────────────────

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Iteration order is the order classes are seeded in.
CHARACTER_CLASSES = MappingProxyType({
    "lowercase": LOWERCASE,
    "uppercase": UPPERCASE,
    "digit": DIGITS,
    "symbol": SYMBOLS,
})

DEFAULT_CLASSES = ("lowercase", "uppercase", "digit")

_system_random = secrets.SystemRandom()


class InvalidConfiguration(ValueError):
    """Raised when no usable character pool can be built."""


def resolve_classes(classes: Iterable[str] | None) -> list[str]:
    """Return *classes* as a list of class names in canonical order.

    Raises :class:`InvalidConfiguration` for unknown names or an empty
    selection.
    """
    requested = set(classes or ())
    unknown = requested - set(CHARACTER_CLASSES)
    if unknown:
        raise InvalidConfiguration(
            f"Unknown character class(es): {', '.join(sorted(unknown))}"
        )
    if not requested:
        raise InvalidConfiguration("At least one character type must be selected")
    return [name for name in CHARACTER_CLASSES if name in requested]


# ── Keyword handling ───────────────────────────────────────────────────────

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def sanitize_keyword(keyword: str | None, length: int) -> str:
    """Strip non-alphanumerics from *keyword* and cap it at ``length // 3``."""
    if not keyword or not keyword.strip():
        return ""
    return _NON_ALNUM.sub("", keyword)[: length // 3]


# ── Password generation ────────────────────────────────────────────────────


def generate_password(
    length: int = 16,
    classes: Iterable[str] = DEFAULT_CLASSES,
    keyword: str | None = "",
    *,
    rng: random.Random | None = None,
) -> str:
    """Generate a random password, optionally carrying a keyword.

    One character from every enabled class is always included, then the
    sanitized keyword, then random padding from the combined pool up to
    *length*.  The whole sequence is shuffled so neither the guaranteed
    characters nor the keyword sit at predictable positions.

    When the seeded characters plus the keyword already reach *length* no
    padding is added and the result is returned as is, which can make it
    longer than *length*.

    *rng* is any object with ``choice`` and ``randrange`` (the
    :class:`random.Random` API); it defaults to :class:`secrets.SystemRandom`.
    """
    if length < 1:
        raise ValueError("Password length must be at least 1")

    names = resolve_classes(classes)
    rng = rng or _system_random

    alphabet = "".join(CHARACTER_CLASSES[name] for name in names)
    chars = [rng.choice(CHARACTER_CLASSES[name]) for name in names]
    chars.extend(sanitize_keyword(keyword, length))

    remaining = length - len(chars)
    chars.extend(rng.choice(alphabet) for _ in range(remaining))

    # Fisher-Yates shuffle
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randrange(i + 1)
        chars[i], chars[j] = chars[j], chars[i]

    return "".join(chars)


# ── Strength analysis ──────────────────────────────────────────────────────

_SEQUENCES = [
    "abcdefghijklmnopqrstuvwxyz",
    "0123456789",
]

_SEQUENCE_WINDOWS = tuple(
    seq[i : i + 3] for seq in _SEQUENCES for i in range(len(seq) - 2)
)

_SYMBOL_RE = re.compile("[" + re.escape(SYMBOLS) + "]")
_REPEAT_RE = re.compile(r"(.)\1{2,}")

# (upper bound exclusive, label, tier); anything above the last bound is Strong
_LABELS = [
    (10, "Very Weak", "danger"),
    (20, "Weak", "warning"),
    (30, "Fair", "warning"),
    (40, "Good", "success"),
]

MAX_SCORE = 50


def strength_label(score: int) -> tuple[str, str]:
    """Map a 0-50 score to its ``(label, tier)`` pair."""
    for bound, label, tier in _LABELS:
        if score < bound:
            return label, tier
    return "Strong", "success"


def score_strength(
    password: str,
    classes: Iterable[str] | None = None,
    keyword: str | None = "",
) -> dict:
    """Analyse password strength and return a detailed report.

    Scoring looks at what the password actually contains; *classes* is
    accepted so callers can pass the same options they generated with, but
    it does not change the result.

    Returns a dict with keys:
        score    -- int 0-50
        label    -- str  (Very Weak, Weak, Fair, Good, Strong)
        tier     -- str  (danger, warning, success)
        analysis -- dict of the flags the score was built from
    """
    keyword = keyword or ""
    lower = password.lower()

    analysis = {
        "length": len(password),
        "has_lower": bool(re.search(r"[a-z]", password)),
        "has_upper": bool(re.search(r"[A-Z]", password)),
        "has_number": bool(re.search(r"[0-9]", password)),
        "has_symbol": bool(_SYMBOL_RE.search(password)),
        "has_repeat_run": bool(_REPEAT_RE.search(password)),
        "has_sequential_run": any(w in lower for w in _SEQUENCE_WINDOWS),
        "has_keyword": bool(keyword) and keyword.lower() in lower,
        "keyword_length": len(keyword),
    }

    score = 0
    for threshold in (8, 12, 16, 20):
        if analysis["length"] >= threshold:
            score += 5

    if analysis["has_lower"]:
        score += 2
    if analysis["has_upper"]:
        score += 2
    if analysis["has_number"]:
        score += 2
    if analysis["has_symbol"]:
        score += 3

    if analysis["has_keyword"]:
        score += min(3, analysis["keyword_length"])

    if analysis["has_repeat_run"]:
        score -= 3
    if analysis["has_sequential_run"]:
        score -= 2
    if analysis["length"] < 8:
        score -= 10

    score = max(0, min(MAX_SCORE, score))
    label, tier = strength_label(score)

    return {
        "score": score,
        "label": label,
        "tier": tier,
        "analysis": analysis,
    }
