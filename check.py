#! /usr/bin/env python3

import argparse, json, sys

from compile import restore_characters
from encode import decode_character
from records import UcdError
from util import format_code

def parse_args():
	parser = argparse.ArgumentParser(
		prog = 'check-ucd',
		description = "Print a character table snapshot, in the format that `compile.py` writes.",
	)
	parser.add_argument(
		'filename',
		type = argparse.FileType('r', encoding = 'utf-8'),
	)

	return parser.parse_args()

def describe(character) -> str:
	decoded = decode_character(character)

	decomposition = " ".join(f"{code:04X}" for code in decoded.decomposition)

	return (
		f"{format_code(decoded.code)} {decoded.name!r} "
		f"(cat: {decoded.category}, bidi: {decoded.bidirectional}, "
		f"decomp: {decoded.decomposition_type} [{decomposition}])"
	)

def main() -> None:
	args = parse_args()

	try:
		characters = restore_characters(json.load(args.filename))

		for character in characters:
			print(describe(character))
	except (UcdError, KeyError, TypeError, ValueError) as error:
		print(f"error: {error}", file = sys.stderr)
		sys.exit(1)

if __name__ == '__main__':
	main()
