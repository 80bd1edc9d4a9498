import sys, time

from records import EncodingError

HEXADECIMAL = 16

# Width of an encoded general category tag, in bytes.
TAG_SIZE = 4

# Largest codepoint; codes are 21-bit.
MAX_CODE = 0x10FFFF

def parse_hex(s: str) -> int:
	code = int(s.strip(), HEXADECIMAL)
	if not 0 <= code <= MAX_CODE:
		raise ValueError(f"codepoint {s.strip()} is outside 0..10FFFF")

	return code

# Inclusive range of codepoints [first, last].
def code_range(first: int, last: int) -> range:
	return range(first, last + 1)

def format_code(code: int) -> str:
	return f"U+{code:04X}"

# Encode an ASCII tag (e.g. "Lu") as a fixed-width big-endian byte string, right-padded with zero bytes,
# displayed as `0x` followed by 2 * TAG_SIZE hex digits.
# Tags are never longer than TAG_SIZE, so the encoded size is constant regardless of the tag.
def encode_tag(tag: str) -> str:
	try:
		raw = tag.encode("ascii")
	except UnicodeEncodeError:
		raise EncodingError(f"category tag {tag!r} is not ASCII")

	if len(raw) > TAG_SIZE:
		raise EncodingError(f"category tag {tag!r} is longer than {TAG_SIZE} bytes")

	return "0x" + raw.ljust(TAG_SIZE, b"\x00").hex()

def decode_tag(encoded: str) -> str:
	if not encoded.startswith("0x") or len(encoded) != 2 + 2 * TAG_SIZE:
		raise EncodingError(f"malformed category tag {encoded!r}")

	try:
		return bytes.fromhex(encoded[2:]).rstrip(b"\x00").decode("ascii")
	except ValueError:
		raise EncodingError(f"malformed category tag {encoded!r}") from None

assert encode_tag("Lu") == "0x4c750000"
assert decode_tag("0x4c750000") == "Lu"

class TaskStatusReporter:
	def __init__(self, name):
		self.name = name
		self.start_time = time.time()

	def complete(self):
		duration_seconds = time.time() - self.start_time
		print(f"done in {duration_seconds:.3}s", file = sys.stderr)

	def __enter__(self):
		print(self.name + "...", file = sys.stderr, end = "")
		sys.stderr.flush()

	def __exit__(self, type_, _value, _traceback):
		if type_ is None:
			self.complete()
		else:
			print("failed", file = sys.stderr)

class StatusReporter:
	def __init__(self):
		pass

	def start(self, name: str) -> TaskStatusReporter:
		return TaskStatusReporter(name)

	def note(self, message: str) -> None:
		print(message, file = sys.stderr)
