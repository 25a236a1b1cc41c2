import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def sync_media(source_dir: Path, dest_dir: Path) -> list[str]:
    """Copy uploads into the public site tree; files already present by name are left alone.

    Additive only: files removed from ``source_dir`` are never removed from
    ``dest_dir``.
    """
    dest_dir.mkdir(parents=True, exist_ok=True)
    if not source_dir.is_dir():
        return []

    copied = []
    for src in sorted(source_dir.iterdir()):
        if not src.is_file():
            continue
        dest = dest_dir / src.name
        if dest.exists():
            continue
        shutil.copyfile(src, dest)
        copied.append(src.name)
        logger.info("[generate] copied media %s", src.name)
    return copied
