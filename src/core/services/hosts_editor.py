"""Hosts file reconciliation.

`reconcile` is pure text editing: it drops the block written by a previous
run (marker lines plus any line pinning one of the domains being written)
and appends a fresh block at the end. Everything else is kept verbatim and in
order. The line delimiter is supplied by the caller; nothing here depends on
the running OS.

The I/O helpers work on bytes so that Python's universal-newline translation
never rewrites the delimiters of the file.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Mapping

from core.domain.models import MARKER_LINE, HostsLocation
from core.errors import HostsFileError, LineDelimiterMismatch

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def is_comment(line: str) -> bool:
    return line.lstrip().startswith("#")


def references_domain(line: str, domain: str) -> bool:
    """True if `domain` appears in `line` at line start or right after a space/tab.

    `notgithub.com` does not reference `github.com`; `1.2.3.4\\tgithub.com` does.
    """

    start = line.find(domain)
    while start >= 0:
        if start == 0 or line[start - 1] in (" ", "\t"):
            return True
        start = line.find(domain, start + 1)
    return False


def format_entry(domain: str, address: str) -> str:
    return f"{address}\t {domain}"


def reconcile(existing: str, line_delimiter: str, resolved: Mapping[str, str]) -> str:
    """Devuelve el nuevo contenido del hosts con un único bloque gestionado.

    Args:
        existing: current file content.
        line_delimiter: "\\n", "\\r" or "\\r\\n".
        resolved: domain -> address; empty addresses are skipped and do not
            cause existing lines to be removed.

    Raises:
        LineDelimiterMismatch: a split line still holds "\\r" or "\\n", i.e. the
            file uses another delimiter. Editing it would treat several
            lines as one.
    """

    if not line_delimiter:
        raise ValueError("line_delimiter must not be empty")

    pinned = [(domain, address) for domain, address in resolved.items() if address]

    lines = existing.split(line_delimiter) if existing else []
    if any("\r" in line or "\n" in line for line in lines):
        raise LineDelimiterMismatch(line_delimiter)

    kept: list[str] = []
    for line in lines:
        if line == MARKER_LINE:
            continue
        if not is_comment(line) and any(references_domain(line, d) for d, _ in pinned):
            logger.debug("dropping stale hosts line %r", line)
            continue
        kept.append(line)

    kept.append(MARKER_LINE)
    kept.extend(format_entry(domain, address) for domain, address in pinned)
    kept.append(MARKER_LINE)
    return line_delimiter.join(kept)


def read_hosts(path: Path) -> str:
    try:
        return path.read_bytes().decode(ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise HostsFileError(path, "read", exc) from exc


def ensure_writable(path: Path) -> None:
    """Clear the read-only bit (Windows ships the hosts file read-only)."""

    try:
        mode = path.stat().st_mode
        if not mode & stat.S_IWRITE:
            logger.info("removing read-only attribute from %s", path)
            os.chmod(path, mode | stat.S_IWRITE)
    except OSError as exc:
        raise HostsFileError(path, "chmod", exc) from exc


def write_hosts(path: Path, content: str, *, atomic: bool = True) -> None:
    """Persist `content`.

    With `atomic=True` the data goes to a temp file in the same directory
    which then replaces the original, so readers never see a half-written
    file. Bind-mounted files (containers) cannot be replaced; use
    `atomic=False` there, which overwrites in place.
    """

    data = content.encode(ENCODING)
    if not atomic:
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise HostsFileError(path, "write", exc) from exc
        return

    tmp_path: str | None = None
    try:
        mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else 0o644
        with tempfile.NamedTemporaryFile(
            mode="wb",
            delete=False,
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as exc:
        raise HostsFileError(path, "write", exc) from exc
    finally:
        if tmp_path is not None:
            Path(tmp_path).unlink(missing_ok=True)


def update_hosts_file(
    location: HostsLocation,
    resolved: Mapping[str, str],
    *,
    atomic: bool = True,
    dry_run: bool = False,
) -> str:
    """Read, reconcile and (unless `dry_run`) write the hosts file.

    Returns the new content. Raises `HostsFileError` on any I/O failure and
    when the file does not use `location.line_delimiter`.
    """

    existing = read_hosts(location.path)
    try:
        updated = reconcile(existing, location.line_delimiter, resolved)
    except LineDelimiterMismatch as exc:
        raise HostsFileError(location.path, "parse", exc) from exc
    if dry_run:
        logger.info("dry run: %s left untouched", location.path)
        return updated
    if updated == existing:
        logger.info("%s already up to date", location.path)
        return updated

    ensure_writable(location.path)
    write_hosts(location.path, updated, atomic=atomic)
    logger.info("wrote %d managed entries to %s", sum(1 for a in resolved.values() if a), location.path)
    return updated
