from dataclasses import dataclass, field, asdict
from typing import Any

# Sentinel for decimal/digit values that do not apply.
DECIMAL_NAN = 255

class UcdError(Exception):
	pass

class ParseError(UcdError, ValueError):
	def __init__(self, message: str, line_number: int | None = None, line: str | None = None):
		if line_number is not None:
			message = f"line {line_number}: {message}: {line!r}"
		super().__init__(message)
		self.line_number = line_number
		self.line = line

class StructuralError(UcdError):
	pass

class EncodingError(UcdError):
	pass

class FetchError(UcdError):
	pass

class SubmissionError(UcdError):
	def __init__(self, message: str, batch_index: int, committed: int):
		super().__init__(message)
		self.batch_index = batch_index
		self.committed = committed

@dataclass(frozen = True)
class Numeric:
	numerator: int = 0
	denominator: int = 1

NUMERIC_NAN = Numeric(0, 1)

@dataclass
class Character:
	code: int
	name: str
	category: str = "Cn"
	combining: int = 0
	bidirectional: str | int = "L"
	# None until filled in from the derived decomposition type table.
	decomposition_type: str | int | None = None
	decomposition: list[int] = field(default_factory = list)
	decimal: int = DECIMAL_NAN
	digit: int = DECIMAL_NAN
	numeric: Numeric = NUMERIC_NAN
	mirrored: bool = False
	uppercase: int = 0
	lowercase: int = 0
	titlecase: int = 0

	def to_json(self) -> dict[str, Any]:
		return asdict(self)

	@classmethod
	def from_json(cls, data: dict[str, Any]) -> "Character":
		values = dict(data)
		values["numeric"] = Numeric(**values["numeric"])
		values["decomposition"] = list(values["decomposition"])
		return cls(**values)

# Derived*.txt tables: codepoint -> upper-cased value.
DerivedData = dict[int, str]

# Jamo.txt: raw hex codepoint string -> short name.
JamoShortNames = dict[str, str]
