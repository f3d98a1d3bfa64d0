"""License of a project and the files that hold it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from repofetch.info_field import InfoField

LICENSE_FILES = ("LICENSE", "LICENCE", "COPYING")


def is_license_file(file_name: str) -> bool:
    """Whether a file name looks like that of a license file."""
    return any(file_name.startswith(name) for name in LICENSE_FILES)


def find_license_files(directory: Union[str, Path]) -> list[Path]:
    """Regular files directly inside ``directory`` that look like license files."""
    return sorted(
        entry
        for entry in Path(directory).iterdir()
        if entry.is_file() and is_license_file(entry.name)
    )


@dataclass
class LicenseInfo(InfoField):
    """The license, or licenses separated by commas."""

    license: str

    def value(self) -> str:
        return self.license

    def title(self) -> str:
        return "License"