import pytest

from cache import DERIVED_BIDI_CLASS, DERIVED_DECOMPOSITION_TYPE, JAMO, UNICODE_DATA

UNICODE_DATA_TEXT = """\
0000;<control>;Cc;0;BN;;;;;N;NULL;;;;
0031;DIGIT ONE;Nd;0;EN;;1;1;1;N;;;;;
0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;
0061;LATIN SMALL LETTER A;Ll;0;L;;;;;N;;;0041;;0041
00A0;NO-BREAK SPACE;Zs;0;CS;<noBreak> 0020;;;;N;NON-BREAKING SPACE;;;;
00BD;VULGAR FRACTION ONE HALF;No;0;ON;<fraction> 0031 2044 0032;;;1/2;N;FRACTION ONE HALF;;;;
4E00;<CJK Ideograph, First>;Lo;0;L;;;;;N;;;;;
4E02;<CJK Ideograph, Last>;Lo;0;L;;;;;N;;;;;
AC00;<Hangul Syllable, First>;Lo;0;L;;;;;N;;;;;
AC02;<Hangul Syllable, Last>;Lo;0;L;;;;;N;;;;;
D800;<Non Private Use High Surrogate, First>;Cs;0;L;;;;;N;;;;;
DB7F;<Non Private Use High Surrogate, Last>;Cs;0;L;;;;;N;;;;;
E000;<Private Use, First>;Co;0;L;;;;;N;;;;;
F8FF;<Private Use, Last>;Co;0;L;;;;;N;;;;;
"""

JAMO_TEXT = """\
# Jamo-15.0.0.txt
# Date: 2022-02-02

1100; G     # HANGUL CHOSEONG KIYEOK
110B;       # HANGUL CHOSEONG IEUNG
1161; A     # HANGUL JUNGSEONG A
11A8; G     # HANGUL JONGSEONG KIYEOK
11A9; GG    # HANGUL JONGSEONG SSANGKIYEOK
"""

DERIVED_DECOMPOSITION_TYPE_TEXT = """\
# DerivedDecompositionType-15.0.0.txt

# Decomposition_Type=Canonical

AC00..D7A3    ; Canonical # Lo [11172] HANGUL SYLLABLE GA..HANGUL SYLLABLE HIH

# Decomposition_Type=Nobreak

00A0          ; Nobreak # Zs       NO-BREAK SPACE

# Decomposition_Type=Fraction

00BD          ; Fraction # No       VULGAR FRACTION ONE HALF
"""

DERIVED_BIDI_CLASS_TEXT = """\
# DerivedBidiClass-15.0.0.txt

# @missing: 0000..10FFFF; Left_To_Right

0000..0008    ; BN # Cc   [9] <control-0000>..<control-0008>
0031          ; EN # Nd       DIGIT ONE
0041          ; L  # Lu       LATIN CAPITAL LETTER A
00A0          ; CS # Zs       NO-BREAK SPACE
00BD          ; ON # No       VULGAR FRACTION ONE HALF
F0000..FFFFD  ; L  # Co [65534] <private-use-F0000>..<private-use-FFFFD>
100000..10FFFD; L  # Co [65534] <private-use-100000>..<private-use-10FFFD>
"""

class FakeSource:
	def __init__(self, files: dict[str, str]):
		self.files = files
		self.fetched: list[str] = []

	def fetch(self, name: str) -> str:
		self.fetched.append(name)
		return self.files[name]

class FailingSource:
	def fetch(self, name: str) -> str:
		raise AssertionError(f"unexpected fetch of {name}")

@pytest.fixture
def ucd_files() -> dict[str, str]:
	return {
		UNICODE_DATA: UNICODE_DATA_TEXT,
		JAMO: JAMO_TEXT,
		DERIVED_DECOMPOSITION_TYPE: DERIVED_DECOMPOSITION_TYPE_TEXT,
		DERIVED_BIDI_CLASS: DERIVED_BIDI_CLASS_TEXT,
	}

@pytest.fixture
def source(ucd_files) -> FakeSource:
	return FakeSource(ucd_files)

@pytest.fixture
def failing_source() -> FailingSource:
	return FailingSource()
