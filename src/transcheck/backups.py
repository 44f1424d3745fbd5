"""
Backup rotation for survey files rewritten in place.

Backups live in one flat directory. A file's backups are named

    <path relative to base_dir, separators replaced by "__">.backup.<YYYY-MM-DD_HH-MM-SS>

so that sorting names in reverse gives newest first.
"""

import logging
import os
import shutil
from datetime import datetime, timezone
from typing import List, Optional, Tuple


logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def backup_base_name(filepath: str, base_dir: Optional[str] = None) -> str:
    """Flattened backup prefix for ``filepath``."""
    base_dir = base_dir or os.path.dirname(os.path.abspath(filepath))
    rel = os.path.relpath(os.path.abspath(filepath), os.path.abspath(base_dir))
    return "__".join(rel.split(os.sep))


def write_backup(
    filepath: str,
    backups_dir: str,
    base_dir: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Copy ``filepath`` into ``backups_dir`` with a UTC timestamp suffix.

    Returns:
        Path of the backup written
    """
    os.makedirs(backups_dir, exist_ok=True)
    now = now or datetime.now(timezone.utc)
    name = f"{backup_base_name(filepath, base_dir)}.backup.{now.strftime(TIMESTAMP_FORMAT)}"
    dest = os.path.join(backups_dir, name)
    shutil.copyfile(filepath, dest)
    logger.info("Backed up %s -> %s", filepath, dest)
    return dest


def prune_backups(filepath: str, backups_dir: str, keep: int = 3, base_dir: Optional[str] = None) -> List[str]:
    """
    Delete all but the newest ``keep`` backups of ``filepath``.

    Returns:
        Paths that were deleted
    """
    if keep < 0:
        raise ValueError(f"keep must be >= 0, got {keep}")
    if not os.path.isdir(backups_dir):
        return []

    prefix = backup_base_name(filepath, base_dir) + ".backup."
    backups = sorted((f for f in os.listdir(backups_dir) if f.startswith(prefix)), reverse=True)

    deleted = []
    for name in backups[keep:]:
        path = os.path.join(backups_dir, name)
        os.remove(path)
        logger.debug("Pruned backup %s", path)
        deleted.append(path)
    return deleted


def backup_and_prune(
    filepath: str,
    backups_dir: str,
    keep: int = 3,
    base_dir: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Tuple[str, List[str]]:
    """Write a backup, then prune older ones. Returns (backup path, pruned paths)."""
    dest = write_backup(filepath, backups_dir, base_dir=base_dir, now=now)
    pruned = prune_backups(filepath, backups_dir, keep=keep, base_dir=base_dir)
    return dest, pruned


__all__ = ["TIMESTAMP_FORMAT", "backup_base_name", "write_backup", "prune_backups", "backup_and_prune"]
