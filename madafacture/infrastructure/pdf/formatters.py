"""
Amount formatting for printed documents.

``format_amount`` groups thousands with plain spaces so the result stays
latin-1 safe for the core PDF fonts. ``number_to_words`` spells an amount
in French for the "somme arrêtée" line of an invoice.
"""

import math

_UNITS = ("", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf")
_TEENS = (
    "dix", "onze", "douze", "treize", "quatorze",
    "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf",
)
_TENS = ("", "", "vingt", "trente", "quarante", "cinquante", "soixante")


def round_amount(value: float) -> int:
    """Round half up, as cash amounts are printed."""
    return math.floor(value + 0.5)


def format_amount(value: float, currency: str = "Ar") -> str:
    """Format ``1234.6`` as ``"1 235 Ar"``."""
    return f"{round_amount(value):,}".replace(",", " ") + f" {currency}"


def _below_hundred(n: int, final: bool) -> str:
    if n < 10:
        return _UNITS[n]
    if n < 20:
        return _TEENS[n - 10]
    if n < 70:
        tens, unit = divmod(n, 10)
        if unit == 0:
            return _TENS[tens]
        if unit == 1:
            return f"{_TENS[tens]}-et-un"
        return f"{_TENS[tens]}-{_UNITS[unit]}"
    if n < 80:
        return "soixante-et-onze" if n == 71 else f"soixante-{_below_hundred(n - 60, final)}"
    if n == 80:
        return "quatre-vingts" if final else "quatre-vingt"
    return f"quatre-vingt-{_below_hundred(n - 80, final)}"


def _below_thousand(n: int, final: bool) -> str:
    """
    Spell 1..999.

    *final* is False when the group is followed by "mille", which keeps
    "cent" and "quatre-vingt" invariable.
    """
    hundreds, rest = divmod(n, 100)
    words = []
    if hundreds == 1:
        words.append("cent")
    elif hundreds > 1:
        plural = "s" if rest == 0 and final else ""
        words.append(f"{_UNITS[hundreds]} cent{plural}")
    if rest:
        words.append(_below_hundred(rest, final))
    return " ".join(words)


def _spell(n: int) -> str:
    if n == 0:
        return "zéro"

    billions, n = divmod(n, 1_000_000_000)
    millions, n = divmod(n, 1_000_000)
    thousands, remainder = divmod(n, 1000)

    words = []
    if billions:
        words.append(f"{_below_thousand(billions, True)} milliard{'s' if billions > 1 else ''}")
    if millions:
        words.append(f"{_below_thousand(millions, True)} million{'s' if millions > 1 else ''}")
    if thousands:
        words.append("mille" if thousands == 1 else f"{_below_thousand(thousands, False)} mille")
    if remainder:
        words.append(_below_thousand(remainder, True))
    return " ".join(words)


def number_to_words(amount: float, currency_name: str = "Ariary") -> str:
    """
    Spell a rounded amount in French, capitalized, followed by the currency.

    >>> number_to_words(1280)
    'Mille deux cent quatre-vingts Ariary'
    """
    value = round_amount(amount)
    words = _spell(abs(value))
    if value < 0:
        words = f"moins {words}"
    return f"{words[0].upper()}{words[1:]} {currency_name}"
