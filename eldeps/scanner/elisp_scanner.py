"""Emacs Lisp scanner — line-anchored detection of `(require 'feature)` forms."""

from __future__ import annotations

import re
from pathlib import Path

from eldeps.models import SOURCE_SUFFIX, ExtractionError
from eldeps.scanner.base import BaseScanner

# Only a require at column zero counts; nested or indented forms are ignored.
_REQUIRE_RE = re.compile(r"^\(require '([\w-]+)\)")


class ElispScanner(BaseScanner):
    extensions = (SOURCE_SUFFIX,)

    def extract_requires(self, file_path: Path) -> list[str]:
        requires: list[str] = []
        try:
            with file_path.open(encoding="utf-8") as fh:
                for line in fh:
                    m = _REQUIRE_RE.match(line)
                    if m:
                        requires.append(m.group(1))
        except UnicodeDecodeError as e:
            raise ExtractionError(file_path, f"cannot decode: {e.reason}") from e
        except OSError as e:
            raise ExtractionError(file_path, e.strerror or str(e)) from e
        return requires
