from dataclasses import replace

from records import Character, DerivedData

# Bidi_Class defaults for codepoints not listed in DerivedBidiClass.txt (UAX #44).
#
# Unassigned codepoints in blocks reserved for right-to-left scripts default to AL (Arabic, Syriac, Thaana, ...)
# or R (Hebrew, NKo, Phoenician, ...). Unassigned codepoints in the Currency Symbols block default to ET.
# Everything else is L, except unassigned (Cn) codepoints, which are treated as BN.
AL_RANGES = (
	(0x0600, 0x07BF),
	(0x0860, 0x08FF),
	(0xFB50, 0xFDCF),
	(0xFDF0, 0xFDFF),
	(0xFE70, 0xFEFF),
	(0x10D00, 0x10D3F),
	(0x10F30, 0x10F6F),
	(0x1EC70, 0x1ECBF),
	(0x1ED00, 0x1ED4F),
	(0x1EE00, 0x1EEFF),
)

R_RANGES = (
	(0x0590, 0x05FF),
	(0x07C0, 0x085F),
	(0xFB1D, 0xFB4F),
	(0x10800, 0x10CFF),
	(0x10D40, 0x10F2F),
	(0x10F70, 0x10FFF),
	(0x1E800, 0x1EC6F),
	(0x1ECC0, 0x1ECFF),
	(0x1ED50, 0x1EDFF),
	(0x1EF00, 0x1EFFF),
)

ET_RANGES = (
	(0x20A0, 0x20CF),
)

# Checked in order; the first table containing the codepoint wins.
DEFAULT_BIDI_RANGES = (
	("AL", AL_RANGES),
	("R", R_RANGES),
	("ET", ET_RANGES),
)

def in_ranges(code: int, ranges: tuple[tuple[int, int], ...]) -> bool:
	return any(first <= code <= last for first, last in ranges)

def default_bidi_class(code: int, category: str) -> str:
	for bidi_class, ranges in DEFAULT_BIDI_RANGES:
		if in_ranges(code, ranges):
			return bidi_class

	if category == "Cn":
		return "BN"

	return "L"

def backfill(character: Character, decomposition_types: DerivedData, bidi_classes: DerivedData) -> Character:
	decomposition_type = decomposition_types.get(character.code, "NONE")

	bidirectional = bidi_classes.get(character.code)
	if bidirectional is None:
		bidirectional = default_bidi_class(character.code, character.category)

	return replace(
		character,
		decomposition_type = decomposition_type,
		bidirectional = bidirectional,
	)

def backfill_all(characters: list[Character], decomposition_types: DerivedData, bidi_classes: DerivedData) -> list[Character]:
	return [backfill(character, decomposition_types, bidi_classes) for character in characters]
