"""Batch processing of Markdown files: read, transform, write back."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .config import TocOptions
from .errors import DocTocError
from .files import find_markdown_files
from .logging import get_logger
from .models import Header, TransformResult
from .transform import get_all_headers, prepare_main_toc_headers, transform

# Failures that concern one document only; siblings are still processed.
_DOCUMENT_ERRORS = (DocTocError, OSError, UnicodeDecodeError)


@dataclass
class RunReport:
    """Summary of a batch run."""

    changed: List[Path] = field(default_factory=list)
    unchanged: List[Path] = field(default_factory=list)
    tocs: List[Tuple[Path, str]] = field(default_factory=list)
    failures: Dict[Path, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


class TocRunner:
    """Applies the TOC transform to files on disk."""

    def __init__(self, options: TocOptions | None = None) -> None:
        self.options = options or TocOptions()
        self.logger = get_logger("runner")

    def collect(self, target: str | Path) -> List[Path]:
        """Expand a file or directory target into the Markdown files it names."""
        path = Path(target).expanduser()
        platform = self.options.platform.value
        if path.is_dir():
            self.logger.info('DocToccing "%s" and its sub directories for %s.', path, platform)
            return find_markdown_files(path)
        self.logger.info('DocToccing single file "%s" for %s.', path, platform)
        return [path]

    def run(
        self, targets: Iterable[str | Path], *, main: str | Path | None = None
    ) -> RunReport:
        """Process ``targets``; with ``main`` build one aggregate TOC in that file."""
        report = RunReport()
        files: List[Path] = []
        for target in targets:
            files.extend(self.collect(target))

        if main is None:
            for path in files:
                self._process(path, report)
            return report

        main_path = Path(main).expanduser()
        groups = self._harvest(files, main_path, report)
        headers = prepare_main_toc_headers(groups)
        self.logger.info(
            'DocToccing main TOC file "%s" for %s.', main_path, self.options.platform.value
        )
        self._process(main_path, report, main_toc_headers=headers, allow_missing=True)
        return report

    def _harvest(
        self, files: Sequence[Path], main_path: Path, report: RunReport
    ) -> List[Tuple[str, List[Header]]]:
        groups: List[Tuple[str, List[Header]]] = []
        main_resolved = main_path.resolve()
        for path in files:
            if path.resolve() == main_resolved:
                continue
            try:
                content = _read(path)
                headers = get_all_headers(content, self.options.max_header_level)
            except _DOCUMENT_ERRORS as exc:
                self._record_failure(report, path, exc)
                continue
            except Exception as exc:  # markdown-it or BeautifulSoup choking on one file
                self._record_unexpected(report, path, exc)
                continue
            self.logger.debug("Harvested %d header(s) from %s", len(headers), path)
            groups.append((_link_path(path, main_path.parent), headers))
        return groups

    def _process(
        self,
        path: Path,
        report: RunReport,
        *,
        main_toc_headers: Optional[List[Header]] = None,
        allow_missing: bool = False,
    ) -> Optional[TransformResult]:
        options = self.options
        try:
            content = "" if allow_missing and not path.exists() else _read(path)
            result = transform(
                content,
                platform=options.platform,
                max_header_level=options.max_header_level,
                title=options.title,
                notitle=options.notitle,
                entry_prefix=options.entry_prefix,
                main_toc_headers=main_toc_headers,
            )
            result.path = str(path)
            if result.toc and options.stdout:
                report.tocs.append((path, result.toc))
            if not result.transformed:
                self.logger.info('"%s" is up to date', path)
                report.unchanged.append(path)
                return result
            if options.stdout:
                self.logger.info('"%s" should be updated', path)
            else:
                self.logger.info('"%s" will be updated', path)
                _write(path, result.data or "")
        except _DOCUMENT_ERRORS as exc:
            self._record_failure(report, path, exc)
            return None
        except Exception as exc:  # markdown-it or BeautifulSoup choking on one file
            self._record_unexpected(report, path, exc)
            return None
        report.changed.append(path)
        return result

    def _record_failure(self, report: RunReport, path: Path, exc: Exception) -> None:
        self.logger.error('Failed to process "%s": %s', path, exc)
        report.failures[path] = str(exc)

    def _record_unexpected(self, report: RunReport, path: Path, exc: Exception) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.exception('Unexpected error while processing "%s"', path)
        else:
            self.logger.error('Unexpected error while processing "%s": %s', path, exc)
        report.failures[path] = f"{type(exc).__name__}: {exc}"


def _read(path: Path) -> str:
    # newline="" keeps CRLF documents intact when nothing changes.
    with path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


def _write(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def _link_path(path: Path, base: Path) -> str:
    return Path(os.path.relpath(path, base)).as_posix()


__all__ = ["RunReport", "TocRunner"]
