from dataclasses import replace
from enum import IntEnum

from records import Character, EncodingError
from util import decode_tag, encode_tag, format_code

# Contract enum values. The order is fixed; the on-chain store stores the integers.
class BidiClass(IntEnum):
	L = 0
	R = 1
	AL = 2
	AN = 3
	EN = 4
	ES = 5
	ET = 6
	CS = 7
	NSM = 8
	BN = 9
	B = 10
	S = 11
	WS = 12
	ON = 13
	LRE = 14
	LRO = 15
	RLE = 16
	RLO = 17
	LRI = 18
	RLI = 19
	PDF = 20
	PDI = 21
	FSI = 22

class DecompositionType(IntEnum):
	NONE = 0
	CANONICAL = 1
	COMPAT = 2
	CIRCLE = 3
	FINAL = 4
	FONT = 5
	FRACTION = 6
	INITIAL = 7
	ISOLATED = 8
	MEDIAL = 9
	NARROW = 10
	NOBREAK = 11
	SMALL = 12
	SQUARE = 13
	SUB = 14
	SUPER = 15
	VERTICAL = 16
	WIDE = 17

def encode_enum(enum: type[IntEnum], tag: str, code: int) -> int:
	try:
		return int(enum[tag.upper()])
	except KeyError:
		raise EncodingError(f"unknown {enum.__name__} {tag!r} for {format_code(code)}") from None

def encode_character(character: Character) -> Character:
	if character.decomposition_type is None:
		raise EncodingError(f"{format_code(character.code)} has no decomposition type")

	return replace(
		character,
		category = encode_tag(character.category),
		bidirectional = encode_enum(BidiClass, character.bidirectional, character.code),
		decomposition_type = encode_enum(DecompositionType, character.decomposition_type, character.code),
	)

# Inverse of `encode_character`, for inspecting encoded tables.
def decode_character(character: Character) -> Character:
	return replace(
		character,
		category = decode_tag(character.category),
		bidirectional = BidiClass(character.bidirectional).name,
		decomposition_type = DecompositionType(character.decomposition_type).name,
	)
