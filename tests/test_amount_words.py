from decimal import Decimal

import pytest

from backend.app.services.amount_words import amount_in_words, number_to_arabic, number_to_english, split_amount


def test_split_amount_rounds_half_up_to_fils():
    assert split_amount(Decimal("1.500")) == (1, 500)
    assert split_amount("2.0005") == (2, 1)
    assert split_amount(1.9996) == (2, 0)
    assert split_amount(0) == (0, 0)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "ZERO"),
        (1, "ONE"),
        (19, "NINETEEN"),
        (20, "TWENTY"),
        (45, "FORTY FIVE"),
        (100, "ONE HUNDRED"),
        (115, "ONE HUNDRED FIFTEEN"),
        (1000, "ONE THOUSAND"),
        (2024, "TWO THOUSAND TWENTY FOUR"),
        (150000, "ONE HUNDRED FIFTY THOUSAND"),
        (1000000, "ONE MILLION"),
        (1234567, "ONE MILLION TWO HUNDRED THIRTY FOUR THOUSAND FIVE HUNDRED SIXTY SEVEN"),
        (999999999, "NINE HUNDRED NINETY NINE MILLION NINE HUNDRED NINETY NINE THOUSAND NINE HUNDRED NINETY NINE"),
    ],
)
def test_number_to_english_whole_dinars(amount, expected):
    assert number_to_english(amount) == expected


def test_number_to_english_fils_clause():
    assert number_to_english(Decimal("1.500")) == "ONE AND FIVE HUNDRED FILS"
    assert number_to_english(1.5) == "ONE AND FIVE HUNDRED FILS"
    assert number_to_english("0.250") == "ZERO AND TWO HUNDRED FIFTY FILS"
    assert number_to_english("150.005") == "ONE HUNDRED FIFTY AND FIVE FILS"


def test_number_to_english_no_fils_clause_for_whole_amounts():
    assert "FILS" not in number_to_english(Decimal("75.000"))


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "فقط صفر دينار كويتي لا غير"),
        (1, "فقط واحد دينار كويتي لا غير"),
        (2, "فقط اثنان دينار كويتي لا غير"),
        (3, "فقط ثلاثة دينار كويتي لا غير"),
        (10, "فقط عشرة دينار كويتي لا غير"),
        (11, "فقط أحد عشر دينار كويتي لا غير"),
        (21, "فقط عشرون وواحد دينار كويتي لا غير"),
        (100, "فقط مائة دينار كويتي لا غير"),
        (200, "فقط مائتان دينار كويتي لا غير"),
        (250, "فقط مائتان وخمسون دينار كويتي لا غير"),
        (800, "فقط ثمانمائة دينار كويتي لا غير"),
        (1000, "فقط ألف دينار كويتي لا غير"),
        (2000, "فقط ألفان دينار كويتي لا غير"),
        (3000, "فقط ثلاثة آلاف دينار كويتي لا غير"),
        (10000, "فقط عشرة آلاف دينار كويتي لا غير"),
        (11000, "فقط أحد عشر ألف دينار كويتي لا غير"),
        (1500, "فقط ألف وخمسمائة دينار كويتي لا غير"),
        (1000000, "فقط واحد مليون دينار كويتي لا غير"),
        (2005000, "فقط اثنان مليون وخمسة آلاف دينار كويتي لا غير"),
    ],
)
def test_number_to_arabic(amount, expected):
    assert number_to_arabic(amount) == expected


def test_number_to_arabic_two_thousand_uses_dual():
    words = number_to_arabic(2000)
    assert "ألفان" in words
    assert "اثنان ألف" not in words
    assert "اثنين ألف" not in words


def test_number_to_arabic_fils_clause():
    assert number_to_arabic(Decimal("1.500")) == "فقط واحد دينار كويتي وخمسمائة فلس لا غير"
    assert number_to_arabic("12.050") == "فقط اثنا عشر دينار كويتي وخمسون فلس لا غير"


def test_amount_in_words_includes_currency():
    words = amount_in_words(Decimal("150.000"))
    assert words["english_words"] == "ONE HUNDRED FIFTY KUWAITI DINARS ONLY"
    assert words["arabic_words"] == "فقط مائة وخمسون دينار كويتي لا غير"
