from pathlib import Path

import pytest

from utils import transient_file


class TestTransientFile:
    def test_removed_after_use(self, tmp_path: Path) -> None:
        with transient_file(content=b"data", directory=tmp_path, suffix=".txt") as path:
            assert path.read_bytes() == b"data"
            assert path.suffix == ".txt"

        assert not path.exists()

    def test_removed_on_error(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            with transient_file(content=b"data", directory=tmp_path) as path:
                raise RuntimeError

        assert not path.exists()
        assert list(tmp_path.iterdir()) == []
