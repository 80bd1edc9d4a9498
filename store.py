import json

from typing import Any, Iterable, Protocol, TextIO

from records import Character, SubmissionError
from util import StatusReporter, format_code

# Roughly the number of characters that can be set within one transaction's gas limit.
BATCH_SIZE = 125

class Store(Protocol):
	def set_batch(self, codes: list[int], data: list[list[Any]]) -> None: ...

# The store's character struct, in field order:
# [name, [numerator, denominator], decomposition[], category, combining, bidirectional, decompositionType,
#  decimal, digit, mirrored, uppercase, lowercase, titlecase]
def to_parameters(character: Character) -> list[Any]:
	return [
		character.name,
		[character.numeric.numerator, character.numeric.denominator],
		list(character.decomposition),
		character.category,
		character.combining,
		character.bidirectional,
		character.decomposition_type,
		character.decimal,
		character.digit,
		character.mirrored,
		character.uppercase,
		character.lowercase,
		character.titlecase,
	]

def batches(characters: Iterable[Character], size: int = BATCH_SIZE) -> Iterable[list[Character]]:
	if size < 1:
		raise ValueError(f"batch size must be positive, got {size}")

	batch: list[Character] = []
	for character in characters:
		batch.append(character)
		if len(batch) == size:
			yield batch
			batch = []

	if batch:
		yield batch

# Submits `characters` to `store` in batches. Stops at the first failing batch; batches already submitted stay
# submitted. Returns the number of characters submitted.
def submit(store: Store, characters: list[Character], batch_size: int = BATCH_SIZE, reporter: StatusReporter | None = None) -> int:
	reporter = reporter or StatusReporter()
	committed = 0

	for index, batch in enumerate(batches(characters, batch_size)):
		codes = [character.code for character in batch]
		data = [to_parameters(character) for character in batch]

		try:
			store.set_batch(codes, data)
		except Exception as error:
			reporter.note(f"failed to set batch {index} ({format_code(codes[0])}..{format_code(codes[-1])}): {error}")
			raise SubmissionError(f"batch {index} was rejected: {error}", index, committed) from error

		committed += len(batch)

	return committed

class FileStore:
	"""Store that appends each batch to a file as one JSON line: `{"codes": [...], "data": [...]}`."""

	def __init__(self, file: TextIO):
		self.file = file

	def set_batch(self, codes: list[int], data: list[list[Any]]) -> None:
		if len(codes) != len(data):
			raise ValueError(f"{len(codes)} codes but {len(data)} entries")

		self.file.write(json.dumps({"codes": codes, "data": data}, separators = (",", ":")) + "\n")
