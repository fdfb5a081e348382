"""Moonbeam pack files (.mpk): zip archives whose members are loaded as lumps."""

from __future__ import annotations

import logging
import sys
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

PACK_NAME = "data.mpk"

_log = logging.getLogger(__name__)


class PackFileError(Exception):
    """Raised when a pack file cannot be opened or unpacked."""


@dataclass(frozen=True)
class Lump:
    """One archive member held in memory. Directory members carry no data."""

    name: str
    data: bytes | None = None

    @property
    def is_directory(self) -> bool:
        return self.data is None

    @property
    def size(self) -> int:
        return 0 if self.data is None else len(self.data)


def default_pack_path() -> Path:
    """Return the path of ``data.mpk`` next to the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    base = Path(program).resolve().parent if program else Path.cwd()
    return base / PACK_NAME


class PackFile:
    """An opened pack file with every member decompressed into memory."""

    def __init__(self, lumps: Iterable[Lump] = (), path: Path | None = None) -> None:
        self._lumps: list[Lump] = list(lumps)
        self.path = path

    @classmethod
    def open(cls, path: str | Path) -> PackFile:
        """Read and unpack every member of the archive at ``path``."""
        path = Path(path)
        try:
            with zipfile.ZipFile(path) as archive:
                infos = archive.infolist()
                if not infos:
                    raise PackFileError(f"no lumps in {path}")
                lumps = [cls._read_lump(archive, info) for info in infos]
        except PackFileError:
            raise
        except (OSError, zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError) as exc:
            raise PackFileError(f"couldn't initialize MPK file {path} - {exc}") from exc
        _log.info("Added %s with %d lumps", path, len(lumps))
        return cls(lumps, path)

    @staticmethod
    def _read_lump(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> Lump:
        if info.is_dir():
            return Lump(info.filename)
        return Lump(info.filename, archive.read(info))

    def _find(self, name: str) -> Lump:
        for lump in self._lumps:
            if not lump.is_directory and lump.name == name:
                return lump
        raise KeyError(name)

    def _at(self, num: int) -> Lump:
        if 0 <= num < len(self._lumps):
            return self._lumps[num]
        raise IndexError(f"lump number {num} out of range")

    def lump_for_name(self, name: str) -> bytes:
        """Return the data of the first lump called ``name``."""
        data = self._find(name).data
        assert data is not None
        return data

    def lump_for_num(self, num: int) -> bytes | None:
        """Return the data of lump ``num``; directories give ``None``."""
        return self._at(num).data

    def length_for_name(self, name: str) -> int:
        return self._find(name).size

    def length_for_num(self, num: int) -> int:
        return self._at(num).size

    def names(self) -> list[str]:
        """Names of all file lumps in archive order."""
        return [lump.name for lump in self._lumps if not lump.is_directory]

    def close(self) -> None:
        self._lumps.clear()

    def __len__(self) -> int:
        return len(self._lumps)

    def __enter__(self) -> PackFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()