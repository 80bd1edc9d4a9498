import re

from typing import Iterator

from records import Character, DerivedData, JamoShortNames, Numeric, ParseError, DECIMAL_NAN, NUMERIC_NAN
from util import code_range, parse_hex

# Snippet from `UnicodeData.txt`:
#     00A0;NO-BREAK SPACE;Zs;0;CS;<noBreak> 0020;;;;N;NON-BREAKING SPACE;;;;
#     00A1;INVERTED EXCLAMATION MARK;Po;0;ON;;;;;N;;;;;
#     00A2;CENT SIGN;Sc;0;ET;;;;;N;;;;;
#
# There are 14 `;`s per line, so 15 fields:
#  0. Code
#  1. Name
#  2. General_Category
#  3. Canonical_Combining_Class
#  4. Bidi_Class
#  5. <Decomposition_Type> Decomposition_Mapping
#  6. Numeric value if decimal
#  7. Numeric value if only digit
#  8. Numeric value otherwise
#  9. Bidi_Mirrored
# 10. Unicode_1_Name
# 11. ISO_Comment (always empty)
# 12. Simple_Uppercase_Mapping
# 13. Simple_Lowercase_Mapping
# 14. Simple_Titlecase_Mapping
FIELD_COUNT = 15

DECOMPOSITION_PATTERN = re.compile(r"^(?:<(\w+)> )?([0-9A-F ]+)$")

RANGE_SEPARATOR = ".."

# Huge private use blocks in the derived tables. Expanding them costs ~130k dictionary entries, and every codepoint
# in them gets the same value the backfill would pick anyway, so they're skipped purely to save time and space.
#   F0000..FFFFD  ; L # Co [65534] <private-use-F0000>..<private-use-FFFFD>
#   100000..10FFFD; L # Co [65534] <private-use-100000>..<private-use-10FFFD>
SKIPPED_DERIVED_RANGES = (
	(0xF0000, 0xFFFFD),
	(0x100000, 0x10FFFD),
)

def parse_numeric(s: str) -> Numeric:
	numerator, _, denominator = s.partition("/")
	return Numeric(int(numerator, 10), int(denominator or "1", 10))

def parse_decomposition(s: str) -> tuple[str | None, list[int]] | None:
	match = DECOMPOSITION_PATTERN.match(s)
	if match is None:
		return None

	tag, mapping = match.groups()

	# e.g. '0041 0301' for U+00C1 LATIN CAPITAL LETTER A WITH ACUTE
	codes = [parse_hex(code) for code in mapping.split()]

	return (tag.upper() if tag else None), codes

def parse_character(line: str, line_number: int | None = None) -> Character:
	fields = line.split(";")
	if len(fields) != FIELD_COUNT:
		raise ParseError(f"expected {FIELD_COUNT} fields, found {len(fields)}", line_number, line)

	(
		code,
		name,
		category,
		combining,
		bidirectional,
		decomposition,
		decimal,
		digit,
		numeric,
		mirrored,
		_unicode_1_name,
		_iso_comment,
		uppercase,
		lowercase,
		titlecase,
	) = fields

	try:
		character = Character(
			code = parse_hex(code),
			name = name,
			category = category or "Cn",
			combining = int(combining, 10) if combining else 0,
			bidirectional = bidirectional or "L",
			decimal = int(decimal, 10) if decimal else DECIMAL_NAN,
			digit = int(digit, 10) if digit else DECIMAL_NAN,
			numeric = parse_numeric(numeric) if numeric else NUMERIC_NAN,
			mirrored = mirrored == "Y",
			# 0 means "no simple mapping".
			uppercase = parse_hex(uppercase) if uppercase else 0,
			lowercase = parse_hex(lowercase) if lowercase else 0,
			titlecase = parse_hex(titlecase) if titlecase else 0,
		)

		if decomposition:
			parsed = parse_decomposition(decomposition)
			if parsed is not None:
				character.decomposition_type, character.decomposition = parsed
	except ValueError as error:
		raise ParseError(str(error), line_number, line) from error

	return character

def parse_unicode_data(text: str) -> list[Character]:
	return [
		parse_character(line, line_number)
		for line_number, line in enumerate(text.splitlines(), start = 1)
		if line != ""
	]

# Yields `(line number, [fields...])` for each data line of a `;`-delimited UCD file, with trailing comments removed.
def data_lines(text: str) -> Iterator[tuple[int, list[str]]]:
	for line_number, line in enumerate(text.splitlines(), start = 1):
		if line == "" or line.startswith("#"):
			continue

		content = line.split("#", 1)[0]
		if content.strip() == "":
			continue

		fields = [field.strip() for field in content.split(";")]
		if len(fields) < 2:
			raise ParseError("expected `;`-separated fields", line_number, line)

		yield line_number, fields

# Jamo.txt:
#     1100; G     # HANGUL CHOSEONG KIYEOK
#     110B;       # HANGUL CHOSEONG IEUNG
def parse_jamo(text: str) -> JamoShortNames:
	names: JamoShortNames = {}

	for _, fields in data_lines(text):
		code, short_name = fields[0], fields[1]
		names[code] = short_name

	return names

def is_skipped_range(first: int, last: int) -> bool:
	return (first, last) in SKIPPED_DERIVED_RANGES

# Derived*.txt:
#     0000..0008    ; BN # Cc   [9] <control-0000>..<control-0008>
#     0009          ; S  # Cc       <control-0009>
def parse_derived_data(text: str) -> DerivedData:
	derived: DerivedData = {}

	for line_number, fields in data_lines(text):
		codes, value = fields[0], fields[1].upper()

		try:
			start, _, end = codes.partition(RANGE_SEPARATOR)
			first = parse_hex(start)
			last = parse_hex(end) if end else first
		except ValueError as error:
			raise ParseError(str(error), line_number, codes) from error

		if last < first:
			raise ParseError("range end precedes start", line_number, codes)

		if is_skipped_range(first, last):
			continue

		for code in code_range(first, last):
			derived[code] = value

	return derived
