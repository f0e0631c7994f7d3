import logging
from typing import BinaryIO, Iterator

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def iter_file(handle: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yields the remaining bytes of an already-open file and closes it afterwards.
    A read error mid-stream is logged and re-raised so the server drops the
    connection instead of sending a truncated body as if it were complete.
    """
    try:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                break
            yield chunk
    except OSError as e:
        logger.error(f"Stream interrupted for {getattr(handle, 'name', '?')}: {e}")
        raise
    finally:
        handle.close()
