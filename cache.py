import json, os

from pathlib import Path
from typing import Any, Callable, TypeVar

import requests

from records import FetchError
from util import StatusReporter

T = TypeVar("T")

DEFAULT_SOURCE = "https://www.unicode.org/Public/UCD/latest/ucd/"

UNICODE_DATA = "UnicodeData.txt"
JAMO = "Jamo.txt"
DERIVED_BIDI_CLASS = "extracted/DerivedBidiClass.txt"
DERIVED_DECOMPOSITION_TYPE = "extracted/DerivedDecompositionType.txt"

# Writes `data` to `path` through a temporary file, so a crash never leaves a half-written file behind.
def write_atomic(path: Path, data: bytes) -> None:
	path.parent.mkdir(parents = True, exist_ok = True)

	temporary = path.with_suffix(path.suffix + ".tmp")
	try:
		with open(temporary, "wb") as file:
			file.write(data)

		os.replace(temporary, path)
	except BaseException:
		temporary.unlink(missing_ok = True)
		raise

class ArtifactCache:
	"""JSON snapshots of pipeline artifacts, one `<key>.json` file per artifact.

	Snapshots are written once: an existing snapshot is never overwritten, and an unreadable one is treated as
	missing.
	"""

	def __init__(self, directory: Path, reporter: StatusReporter | None = None):
		self.directory = Path(directory)
		self.reporter = reporter or StatusReporter()

	def path(self, key: str) -> Path:
		return self.directory / f"{key}.json"

	def read(self, key: str, restore: Callable[[Any], T] | None = None) -> T | None:
		path = self.path(key)
		if not path.exists():
			return None

		try:
			with open(path, "r", encoding = "utf-8") as file:
				data = json.load(file)

			return restore(data) if restore is not None else data
		except (OSError, ValueError, KeyError, TypeError, AttributeError) as error:
			self.reporter.note(f"Ignoring unreadable snapshot {path}: {error}")
			return None

	def write(self, key: str, data: Any, overwrite: bool = False, restore: Callable[[Any], Any] | None = None) -> None:
		path = self.path(key)
		# An existing snapshot that doesn't restore is replaced.
		if not overwrite and path.exists() and self.read(key, restore) is not None:
			return

		write_atomic(path, json.dumps(data, separators = (",", ":")).encode("utf-8"))

	# Returns the cached artifact for `key`, or fetches and parses it and stores the snapshot.
	def load(
		self,
		key: str,
		fetch: Callable[[], str],
		parse: Callable[[str], T],
		*,
		dump: Callable[[T], Any] | None = None,
		restore: Callable[[Any], T] | None = None,
	) -> T:
		cached = self.read(key, restore)
		if cached is not None:
			self.reporter.note(f"Using cached {key} from {self.path(key)}")
			return cached

		value = parse(fetch())
		self.write(key, dump(value) if dump is not None else value, restore = restore)

		return value

class DirectorySource:
	"""UCD files from a local directory laid out like https://www.unicode.org/Public/UCD/latest/ucd/."""

	def __init__(self, directory: Path):
		self.directory = Path(directory)

	def fetch(self, name: str) -> str:
		path = self.directory / name
		try:
			with open(path, "r", encoding = "utf-8") as file:
				return file.read()
		except FileNotFoundError:
			raise FetchError(f"{path} does not exist") from None

class HttpSource:
	"""UCD files downloaded from `base_url`, keeping a copy of each download in `raw_directory` if given."""

	def __init__(self, base_url: str, raw_directory: Path | None = None, session = None):
		self.base_url = base_url if base_url.endswith("/") else base_url + "/"
		self.raw_directory = Path(raw_directory) if raw_directory is not None else None
		self.session = session or requests.Session()

	def fetch(self, name: str) -> str:
		if self.raw_directory is not None:
			path = self.raw_directory / name
			if path.exists():
				return path.read_bytes().decode("utf-8")

		url = self.base_url + name
		try:
			response = self.session.get(url, allow_redirects = True)
		except requests.RequestException as error:
			raise FetchError(f"Failed to download {url}: {error}") from error

		if response.status_code != 200:
			raise FetchError(f"Failed to download {url} with status code {response.status_code}")

		data = response.content
		if self.raw_directory is not None:
			write_atomic(self.raw_directory / name, data)

		return data.decode("utf-8")

def make_source(location: str, raw_directory: Path | None = None) -> DirectorySource | HttpSource:
	if location.startswith(("http://", "https://")):
		return HttpSource(location, raw_directory)

	return DirectorySource(Path(location))
