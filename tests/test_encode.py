import pytest

from encode import BidiClass, DecompositionType, decode_character, encode_character
from records import Character, EncodingError
from util import decode_tag, encode_tag

def test_category_tag_round_trip():
	assert encode_tag("Lu") == "0x4c750000"
	assert decode_tag(encode_tag("Lu")) == "Lu"
	assert decode_tag(encode_tag("Zs")) == "Zs"

def test_category_tag_is_fixed_width():
	assert len(encode_tag("L")) == len(encode_tag("Lu")) == len(encode_tag("Cntr")) == 10

def test_category_tag_too_long():
	with pytest.raises(EncodingError):
		encode_tag("Lowercase")

def test_malformed_category_tag():
	with pytest.raises(EncodingError):
		decode_tag("4c750000")

	with pytest.raises(EncodingError):
		decode_tag("0xzz750000")

def test_enum_tables():
	assert len(BidiClass) == 23
	assert BidiClass.L == 0
	assert BidiClass.FSI == 22
	assert len(DecompositionType) == 18
	assert DecompositionType.NONE == 0
	assert DecompositionType.WIDE == 17

def test_encode_character():
	character = Character(
		code = 0x00A0,
		name = "NO-BREAK SPACE",
		category = "Zs",
		bidirectional = "CS",
		decomposition_type = "NOBREAK",
		decomposition = [0x20],
	)

	encoded = encode_character(character)

	assert encoded.category == "0x5a730000"
	assert encoded.bidirectional == 7
	assert encoded.decomposition_type == 11
	assert encoded.decomposition == [0x20]
	assert decode_character(encoded) == character

def test_unknown_tags_are_fatal():
	with pytest.raises(EncodingError):
		encode_character(Character(code = 0x41, name = "A", category = "Lu", bidirectional = "XX", decomposition_type = "NONE"))

	with pytest.raises(EncodingError):
		encode_character(Character(code = 0x41, name = "A", category = "Lu", decomposition_type = "BOGUS"))

def test_missing_decomposition_type_is_fatal():
	with pytest.raises(EncodingError):
		encode_character(Character(code = 0x41, name = "A", category = "Lu"))
