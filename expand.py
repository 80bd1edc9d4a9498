import unicodedata

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Iterable

from records import Character, JamoShortNames, StructuralError
from util import code_range, format_code

FIRST_SUFFIX = ", First>"
LAST_SUFFIX = ", Last>"

HANGUL_SYLLABLES_FIRST = 0xAC00 # 44032
HANGUL_SYLLABLES_LAST = 0xD7A3 # 55203

# Table 4-8, Name Derivation Rule Prefix Strings
class NameRule(StrEnum):
	hangul = "NR1"
	codepoint = "NR2"

def name_rule(code: int) -> NameRule:
	if HANGUL_SYLLABLES_FIRST <= code <= HANGUL_SYLLABLES_LAST:
		return NameRule.hangul

	return NameRule.codepoint

def jamo_short_name(code: int, decomposition: list[int], jamo: JamoShortNames) -> str:
	parts = []

	for index, component in enumerate(decomposition):
		key = f"{component:04X}"
		short_name = jamo.get(key)
		if short_name is None:
			raise StructuralError(f"unexpected decomposition character {key} for {format_code(code)}")

		parts.append(short_name.upper() if index == 0 else short_name.lower())

	return "".join(parts)

def derive_name(label: str, code: int, decomposition: list[int], jamo: JamoShortNames) -> str:
	if name_rule(code) == NameRule.hangul:
		return f"{label} {jamo_short_name(code, decomposition, jamo)}"

	return f"{label}-{code:x}"

def canonical_decomposition(code: int) -> list[int]:
	return [ord(c) for c in unicodedata.normalize("NFD", chr(code))]

# "<CJK Ideograph, First>" -> "CJK Ideograph"
def block_label(name: str, suffix: str) -> str:
	return name[1:-len(suffix)]

def is_first(character: Character) -> bool:
	return character.name.endswith(FIRST_SUFFIX)

def is_last(character: Character) -> bool:
	return character.name.endswith(LAST_SUFFIX)

@dataclass(frozen = True)
class AwaitingLast:
	label: str
	start: int

def expand_range(last: Character, start: int, jamo: JamoShortNames) -> list[Character]:
	if last.code < start:
		raise StructuralError(f"range {format_code(start)}..{format_code(last.code)} is empty")

	label = block_label(last.name, LAST_SUFFIX)

	expanded = []
	for code in code_range(start, last.code):
		decomposition = canonical_decomposition(code)

		expanded.append(replace(
			last,
			code = code,
			name = derive_name(label, code, decomposition, jamo),
			decomposition = decomposition,
		))

	return expanded

# Replaces each "<X, First>" / "<X, Last>" pair with one record per codepoint in the range, built from the "Last"
# record's properties. Every other record passes through untouched.
def expand_ranges(characters: Iterable[Character], jamo: JamoShortNames) -> list[Character]:
	output: list[Character] = []
	state: AwaitingLast | None = None

	for character in characters:
		if state is None:
			if is_last(character):
				raise StructuralError(f"expected {character.name!r} to follow a record ending with {FIRST_SUFFIX!r}")

			if is_first(character):
				state = AwaitingLast(block_label(character.name, FIRST_SUFFIX), character.code)
			else:
				output.append(character)

			continue

		if not is_last(character):
			raise StructuralError(f"expected a record ending with {LAST_SUFFIX!r} after <{state.label}, First>, found {character.name!r}")

		if block_label(character.name, LAST_SUFFIX) != state.label:
			raise StructuralError(f"range <{state.label}, First> closed by {character.name!r}")

		output.extend(expand_range(character, state.start, jamo))
		state = None

	if state is not None:
		raise StructuralError(f"input ended before the end of range <{state.label}, First>")

	return output
