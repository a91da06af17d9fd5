import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


@contextmanager
def transient_file(
    content: bytes, directory: Path, suffix: str = ""
) -> Iterator[Path]:
    """Write content to a uniquely named file that is removed on exit.

    Args:
        content: The bytes to write.
        directory: The directory holding transient files.
        suffix: The file suffix.

    Yields:
        The path of the written file.

    """
    directory.mkdir(parents=True, exist_ok=True)
    filepath = directory / f"{uuid.uuid4().hex}{suffix}"

    try:
        with filepath.open("wb") as buffer:
            buffer.write(content)

        yield filepath
    finally:
        filepath.unlink(missing_ok=True)
