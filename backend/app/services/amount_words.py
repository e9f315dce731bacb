"""Render dinar amounts as English and Arabic words for printed invoices.

Both converters share the same decomposition: the amount is rounded to
whole fils, split into dinars and fils, and each part is spelled out in
groups of three digits. Grouping stops at millions, so amounts of one
billion dinars or more are not supported.
"""

from decimal import Decimal, ROUND_HALF_UP

FILS_PER_DINAR = 1000

ENGLISH_ONES = (
    "", "ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN", "EIGHT", "NINE", "TEN",
    "ELEVEN", "TWELVE", "THIRTEEN", "FOURTEEN", "FIFTEEN", "SIXTEEN", "SEVENTEEN", "EIGHTEEN", "NINETEEN",
)
ENGLISH_TENS = ("", "", "TWENTY", "THIRTY", "FORTY", "FIFTY", "SIXTY", "SEVENTY", "EIGHTY", "NINETY")

ARABIC_UNITS = (
    "", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة", "عشرة",
    "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر", "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
)
ARABIC_TENS = ("", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون")
ARABIC_HUNDREDS = (
    "", "مائة", "مائتان", "ثلاثمائة", "أربعمائة", "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة",
)
ARABIC_AND = "و"
ARABIC_ZERO = "صفر"
ARABIC_ONLY = "فقط"
ARABIC_NO_MORE = "لا غير"
ARABIC_DINAR = "دينار كويتي"
ARABIC_FILS = "فلس"
ARABIC_MILLION = "مليون"
ARABIC_THOUSAND = "ألف"
ARABIC_TWO_THOUSAND = "ألفان"
ARABIC_THOUSANDS = "آلاف"

ENGLISH_CURRENCY_SUFFIX = "KUWAITI DINARS ONLY"


def split_amount(amount) -> tuple[int, int]:
    """Return (dinars, fils) for a non-negative amount rounded half-up to whole fils."""
    value = Decimal(str(amount)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    total_fils = int(value * FILS_PER_DINAR)
    return divmod(total_fils, FILS_PER_DINAR)


def _english_under_thousand(n: int) -> str:
    if n < 20:
        return ENGLISH_ONES[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        return ENGLISH_TENS[tens] + (" " + ENGLISH_ONES[ones] if ones else "")
    hundreds, rest = divmod(n, 100)
    words = ENGLISH_ONES[hundreds] + " HUNDRED"
    if rest:
        words += " " + _english_under_thousand(rest)
    return words


def _english_number(n: int) -> str:
    if n == 0:
        return "ZERO"
    parts = []
    millions, n = divmod(n, 1_000_000)
    if millions:
        parts.append(_english_under_thousand(millions) + " MILLION")
    thousands, n = divmod(n, 1000)
    if thousands:
        parts.append(_english_under_thousand(thousands) + " THOUSAND")
    if n:
        parts.append(_english_under_thousand(n))
    return " ".join(parts)


def number_to_english(amount) -> str:
    """Spell an amount in uppercase English, e.g. 1.5 -> 'ONE AND FIVE HUNDRED FILS'.

    The dinar currency name is left to the caller.
    """
    dinars, fils = split_amount(amount)
    words = _english_number(dinars)
    if fils:
        words += " AND " + _english_number(fils) + " FILS"
    return words


def _arabic_under_hundred(n: int) -> str:
    if n < 20:
        return ARABIC_UNITS[n]
    tens, units = divmod(n, 10)
    return ARABIC_TENS[tens] + (" " + ARABIC_AND + ARABIC_UNITS[units] if units else "")


def _arabic_under_thousand(n: int) -> str:
    if n < 100:
        return _arabic_under_hundred(n)
    hundreds, rest = divmod(n, 100)
    words = ARABIC_HUNDREDS[hundreds]
    if rest:
        words += " " + ARABIC_AND + _arabic_under_hundred(rest)
    return words


def _arabic_thousands(count: int) -> str:
    # ألف for one, dual ألفان for two, plural آلاف for three to ten, singular again from eleven
    if count == 1:
        return ARABIC_THOUSAND
    if count == 2:
        return ARABIC_TWO_THOUSAND
    if 3 <= count <= 10:
        return _arabic_number(count) + " " + ARABIC_THOUSANDS
    return _arabic_number(count) + " " + ARABIC_THOUSAND


def _arabic_number(n: int) -> str:
    if n == 0:
        return ARABIC_ZERO
    parts = []
    millions, n = divmod(n, 1_000_000)
    if millions:
        parts.append(_arabic_number(millions) + " " + ARABIC_MILLION)
    thousands, n = divmod(n, 1000)
    if thousands:
        parts.append(_arabic_thousands(thousands))
    if n:
        parts.append(_arabic_under_thousand(n))
    return (" " + ARABIC_AND).join(parts)


def number_to_arabic(amount) -> str:
    """Spell an amount as the Arabic legal phrase 'فقط ... دينار كويتي ... لا غير'."""
    dinars, fils = split_amount(amount)
    words = f"{ARABIC_ONLY} {_arabic_number(dinars)} {ARABIC_DINAR}"
    if fils:
        words += f" {ARABIC_AND}{_arabic_number(fils)} {ARABIC_FILS}"
    return f"{words} {ARABIC_NO_MORE}"


def amount_in_words(amount) -> dict:
    return {
        "english_words": f"{number_to_english(amount)} {ENGLISH_CURRENCY_SUFFIX}",
        "arabic_words": number_to_arabic(amount),
    }
