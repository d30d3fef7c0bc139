"""Filesystem output for serialized feeds."""

from pathlib import Path

import structlog

from feissari_rss.exceptions import WriteError

logger = structlog.get_logger()


def write_feed(data: bytes, output_dir: Path | str, filename: str) -> Path:
    """Write a serialized feed, creating the output directory if needed.

    An existing file is overwritten in place.

    Args:
        data: Serialized feed document.
        output_dir: Destination directory.
        filename: File name inside output_dir.

    Returns:
        Path of the written file.

    Raises:
        WriteError: When the directory cannot be created or the file written.
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(str(output_dir), f"Cannot create output directory: {e}") from e

    path = output_dir / filename
    try:
        path.write_bytes(data)
    except OSError as e:
        raise WriteError(str(path), str(e)) from e

    logger.info("Feed written", path=str(path), size=len(data))
    return path
