import io

import pytest

from upload_api.core.exceptions import StorageConfigError, StorageWriteError
from upload_api.infrastructure.storage.local_file_storage import (
    LocalFileStorage,
    LocalFileStorageConfig,
    MillisecondSequence,
    storage_name_for,
)


def test_storage_root_is_created_and_reused(tmp_path):
    base = tmp_path / "nested" / "uploads"

    LocalFileStorage(config=LocalFileStorageConfig(base_path=str(base)))
    LocalFileStorage(config=LocalFileStorageConfig(base_path=str(base)))

    assert base.is_dir()


def test_empty_base_path_is_rejected():
    with pytest.raises(StorageConfigError):
        LocalFileStorage(config=LocalFileStorageConfig(base_path="  "))


def test_base_path_pointing_to_file_is_rejected(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")

    with pytest.raises(StorageConfigError):
        LocalFileStorage(config=LocalFileStorageConfig(base_path=str(target)))


def test_sequence_never_repeats_when_clock_stalls():
    seq = MillisecondSequence(clock=lambda: 5_000_000_000)

    assert [seq.next() for _ in range(3)] == [5000, 5001, 5002]


def test_storage_name_is_flat():
    assert storage_name_for("a/b\\c.txt", 42) == "42-a_b_c.txt"


def test_save_and_delete(tmp_path):
    storage = LocalFileStorage(
        config=LocalFileStorageConfig(base_path=str(tmp_path)),
        sequence=MillisecondSequence(clock=lambda: 7_000_000),
    )

    stored = storage.save(fileobj=io.BytesIO(b"payload"), declared_name="x/y.txt")

    assert stored.stored_name == "7-x_y.txt"
    assert stored.size_bytes == 7
    assert (tmp_path / "7-x_y.txt").read_bytes() == b"payload"
    assert storage.delete(stored_name=stored.stored_name) is True
    assert storage.delete(stored_name=stored.stored_name) is False


class BrokenStream:
    def __init__(self):
        self.reads = 0

    def read(self, size):
        self.reads += 1
        if self.reads > 1:
            raise OSError("connection reset")
        return b"partial"


def test_write_failure_removes_partial_file(tmp_path):
    storage = LocalFileStorage(config=LocalFileStorageConfig(base_path=str(tmp_path)))

    with pytest.raises(StorageWriteError):
        storage.save(fileobj=BrokenStream(), declared_name="big.bin")

    assert list(tmp_path.iterdir()) == []


def test_long_storage_name_is_trimmed_keeping_extension():
    name = storage_name_for("deep/" * 40 + "a" * 300 + ".txt", 1700000000000)

    assert len(name.encode("utf-8")) <= 255
    assert name.startswith("1700000000000-deep_deep_")
    assert name.endswith(".txt")


def test_long_multibyte_name_is_trimmed_on_character_boundary():
    name = storage_name_for("ç" * 200 + ".pdf", 1)

    assert len(name.encode("utf-8")) <= 255
    assert name.endswith(".pdf")
    assert set(name[2:-4]) == {"ç"}


def test_short_storage_name_is_untouched():
    assert storage_name_for("report.final.pdf", 9) == "9-report.final.pdf"
