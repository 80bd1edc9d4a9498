#! /usr/bin/env python3

import sys, argparse, os

from collections import Counter
from pathlib import Path

from cache import ArtifactCache, make_source, DEFAULT_SOURCE, DERIVED_BIDI_CLASS, DERIVED_DECOMPOSITION_TYPE, JAMO, UNICODE_DATA
from derive import backfill_all
from encode import encode_character
from expand import expand_ranges
from parse import parse_derived_data, parse_jamo, parse_unicode_data
from records import Character, DerivedData, StructuralError, UcdError
from store import BATCH_SIZE, FileStore, submit
from util import StatusReporter, format_code

# Control, surrogate, private use and unassigned categories.
# https://www.unicode.org/versions/stats/charcountv14_0.html
NON_CHARACTERS = frozenset(["Cn", "Cs", "Cc", "Co"])

CHARACTERS_KEY = "characters"
DECOMPOSITION_TYPES_KEY = "decomposition_types"
BIDI_CLASSES_KEY = "bidi_classes"
JAMO_KEY = "jamo"

def is_character(character: Character) -> bool:
	return character.category not in NON_CHARACTERS

def dump_derived(derived: DerivedData) -> dict[str, str]:
	return {str(code): value for code, value in derived.items()}

def restore_derived(data: dict[str, str]) -> DerivedData:
	return {int(code): value for code, value in data.items()}

def dump_characters(characters: list[Character]) -> list[dict]:
	return [character.to_json() for character in characters]

def restore_characters(data: list[dict]) -> list[Character]:
	return [Character.from_json(entry) for entry in data]

def check_unique(characters: list[Character]) -> None:
	counts = Counter(character.code for character in characters)
	duplicates = [code for code, count in counts.items() if count > 1]
	if duplicates:
		raise StructuralError("duplicate codes: " + ", ".join(format_code(code) for code in sorted(duplicates)[:10]))

def build_table(source, cache: ArtifactCache, reporter: StatusReporter | None = None, refresh: bool = False) -> list[Character]:
	reporter = reporter or StatusReporter()

	if not refresh:
		snapshot = cache.read(CHARACTERS_KEY, restore_characters)
		if snapshot is not None:
			reporter.note(f"Using cached character table from {cache.path(CHARACTERS_KEY)}")
			return snapshot

	with reporter.start("Loading decomposition types"):
		decomposition_types = cache.load(
			DECOMPOSITION_TYPES_KEY,
			lambda: source.fetch(DERIVED_DECOMPOSITION_TYPE),
			parse_derived_data,
			dump = dump_derived,
			restore = restore_derived,
		)

	with reporter.start("Loading bidi classes"):
		bidi_classes = cache.load(
			BIDI_CLASSES_KEY,
			lambda: source.fetch(DERIVED_BIDI_CLASS),
			parse_derived_data,
			dump = dump_derived,
			restore = restore_derived,
		)

	with reporter.start("Loading Jamo short names"):
		jamo = cache.load(JAMO_KEY, lambda: source.fetch(JAMO), parse_jamo)

	with reporter.start("Parsing character data"):
		characters = parse_unicode_data(source.fetch(UNICODE_DATA))

	# Filtering happens before expansion, so ranges that get expanded are never filtered.
	with reporter.start("Removing non-characters"):
		characters = [character for character in characters if is_character(character)]

	with reporter.start("Expanding ranges"):
		characters = expand_ranges(characters, jamo)

	with reporter.start("Checking that codes are unique"):
		check_unique(characters)

	with reporter.start("Filling in derived properties"):
		characters = backfill_all(characters, decomposition_types, bidi_classes)

	with reporter.start("Encoding properties"):
		characters = [encode_character(character) for character in characters]

	with reporter.start("Writing character table"):
		cache.write(CHARACTERS_KEY, dump_characters(characters), overwrite = refresh, restore = restore_characters)

	return characters

def parse_args():
	parser = argparse.ArgumentParser(
		prog = 'compile-ucd',
		description = "Compile the Unicode Character Database into a per-codepoint property table",
	)
	parser.add_argument(
		'--source',
		default = os.environ.get("UCD_SOURCE", DEFAULT_SOURCE),
		help = "URL prefix or local directory holding UnicodeData.txt, Jamo.txt and extracted/",
	)
	parser.add_argument(
		'--cache-dir',
		type = Path,
		default = Path(os.environ.get("UCD_CACHE_DIR", "cache")),
	)
	parser.add_argument(
		'--refresh',
		action = 'store_true',
		help = "Rebuild the character table even if a snapshot exists",
	)
	parser.add_argument(
		'--batches',
		type = argparse.FileType('w'),
		help = "Submit the table to a file, one JSON line per batch",
	)
	parser.add_argument(
		'--batch-size',
		type = int,
		default = BATCH_SIZE,
	)

	return parser.parse_args()

def main():
	reporter = StatusReporter()

	args = parse_args()

	cache = ArtifactCache(args.cache_dir, reporter)
	source = make_source(args.source, args.cache_dir / "raw")

	try:
		characters = build_table(source, cache, reporter, refresh = args.refresh)

		if args.batches is not None:
			with reporter.start(f"Submitting {len(characters)} characters"):
				submit(FileStore(args.batches), characters, args.batch_size, reporter)
	except UcdError as error:
		print(f"error: {error}", file = sys.stderr)
		sys.exit(1)

	print(len(characters), "characters")

if __name__ == "__main__":
	main()
