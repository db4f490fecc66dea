"""Comparaison de caractères sensible à la locale (sensibilité "base").

Deux variantes partagent la même interface :

- ``BaseCollator`` : ignore la casse, les diacritiques, les formes de
  compatibilité (pleine/demi-chasse, exposants) et l'écriture kana
  ("É" == "e", "Ａ" == "a", "あ" == "ア").
- ``ExactComparator`` : égalité stricte, utilisé quand le collator n'a pas pu
  être construit.

Le choix est fait une seule fois, par ``create_comparator``.
"""
import re
import unicodedata
from functools import lru_cache
from typing import FrozenSet, NamedTuple, Optional, Protocol

from levenpy.exceptions import CapabilityUnavailable
from levenpy.logger import logger

GENERIC_LOCALES = frozenset({"generic", "root", "und"})

# en, fr-FR, pt_BR, zh-Hant-TW...
_LOCALE_TAG = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*$")

# Lettres barrées : variantes secondaires de leur lettre de base, sans
# décomposition Unicode.
_STROKE_LETTERS = str.maketrans({
    "ø": "o", "đ": "d", "ł": "l", "ħ": "h", "ŧ": "t", "ƀ": "b", "ƶ": "z",
    "ǥ": "g", "ɨ": "i", "ʉ": "u", "ȼ": "c", "ɇ": "e", "ɍ": "r", "ɏ": "y",
    "ƚ": "l", "ɉ": "j",
})

# Hiragana -> katakana (ぁ..ゖ, ゝ ゞ)
_HIRAGANA_TO_KATAKANA = str.maketrans(
    {chr(code): chr(code + 0x60) for code in (*range(0x3041, 0x3097), 0x309D, 0x309E)}
)


class Tailoring(NamedTuple):
    """Règles propres à une langue."""
    # Lettres (minuscules) qui sont des lettres à part entière
    letters: FrozenSet[str] = frozenset()
    # Casse turque : I <-> ı, İ <-> i
    dotless_i: bool = False


ROOT_TAILORING = Tailoring()

TAILORINGS = {
    "da": Tailoring(frozenset("æøå")),
    "nb": Tailoring(frozenset("æøå")),
    "nn": Tailoring(frozenset("æøå")),
    "no": Tailoring(frozenset("æøå")),
    "sv": Tailoring(frozenset("åäö")),
    "fi": Tailoring(frozenset("åäö")),
    "es": Tailoring(frozenset("ñ")),
    "tr": Tailoring(dotless_i=True),
    "az": Tailoring(dotless_i=True),
}


def tailoring_for(locale: str) -> Tailoring:
    """Règles de la langue d'une locale ("fr-FR" -> "fr")."""
    language = re.split(r"[-_]", locale, maxsplit=1)[0].lower()
    return TAILORINGS.get(language, ROOT_TAILORING)


class LocaleComparator(Protocol):
    """Capacité de comparaison de deux caractères."""

    available: bool
    locale: Optional[str]

    def equivalent(self, char_a: str, char_b: str) -> bool:
        ...


@lru_cache(maxsize=4096)
def fold_base(char: str, tailoring: Tailoring = ROOT_TAILORING) -> str:
    """
    Réduit un caractère à sa forme de base.

    Décomposition de compatibilité (NFKD), suppression des marques
    combinantes, case folding, lettres barrées et kana ramenés à leur base.
    Les lettres propres à la langue (ex: "ñ" en espagnol) ne perdent que
    leur casse.

    Args:
        char: Caractère à réduire
        tailoring: Règles de la langue

    Returns:
        Forme de base (peut faire plus d'un caractère, ex: "ß" -> "ss")
    """
    if tailoring.dotless_i:
        char = {"I": "ı", "İ": "i"}.get(char, char)

    lowered = char.casefold()
    if lowered in tailoring.letters:
        return lowered

    decomposed = unicodedata.normalize("NFKD", char)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold().translate(_STROKE_LETTERS).translate(_HIRAGANA_TO_KATAKANA)


class BaseCollator:
    """Collator de sensibilité "base" : insensible à la casse et aux accents."""

    available = True

    def __init__(self, locale: str = "generic"):
        if not isinstance(locale, str) or not locale:
            raise CapabilityUnavailable(f"Locale invalide : {locale!r}")
        if locale.lower() not in GENERIC_LOCALES and not _LOCALE_TAG.match(locale):
            raise CapabilityUnavailable(f"Locale non supportée : {locale!r}")
        self.locale = locale
        self.tailoring = tailoring_for(locale)

    def equivalent(self, char_a: str, char_b: str) -> bool:
        """Vrai si les deux caractères ont la même forme de base dans la locale."""
        if char_a == char_b:
            return True
        return fold_base(char_a, self.tailoring) == fold_base(char_b, self.tailoring)

    def __repr__(self):
        return f"BaseCollator(locale={self.locale!r})"


class ExactComparator:
    """Variante "absente" : simple égalité des caractères."""

    available = False
    locale = None

    def equivalent(self, char_a: str, char_b: str) -> bool:
        return char_a == char_b

    def __repr__(self):
        return "ExactComparator()"


def create_comparator(locale: str = "generic", enabled: bool = True) -> LocaleComparator:
    """
    Construit le comparateur pour la durée de vie du moteur.

    Un échec de construction n'est jamais fatal : il est journalisé et la
    comparaison exacte est utilisée à la place.
    """
    if not enabled:
        logger.debug("Collator désactivé par la configuration.")
        return ExactComparator()

    try:
        collator = BaseCollator(locale)
    except CapabilityUnavailable as e:
        logger.warning(
            "Collator could not be initialized and won't be used: {error}", error=e
        )
        return ExactComparator()

    logger.debug("Collator initialisé (locale={locale}).", locale=locale)
    return collator
