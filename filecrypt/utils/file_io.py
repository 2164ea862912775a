"""
File collaborator: reads input buffers and saves export artifacts.

The processing core never touches the filesystem; everything that can
fail with an OS error lives here and is reported as IoFailureError.
"""

import os
import logging

from ..errors import IoFailureError

logger = logging.getLogger("FileCrypt.FileIO")


class FileIO:

    @staticmethod
    def read_input(path: str) -> tuple[bytes, str]:
        """Return *(data, file name)* for *path*."""
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            raise IoFailureError("Failed to read input file") from exc
        logger.info("Read %d bytes from %s", len(data), path)
        return data, os.path.basename(path)

    @staticmethod
    def write_artifact(path: str, artifact) -> str:
        """
        Write *artifact* (data, suggested_name, is_text) to *path*.

        Text artifacts saved without a suffix get ``.txt`` appended.
        Returns the path actually written.
        """
        if artifact.is_text and not os.path.splitext(path)[1]:
            path += ".txt"
        try:
            with open(path, "wb") as f:
                written = f.write(artifact.data)
        except OSError as exc:
            logger.error("Failed to save %s: %s", path, exc)
            raise IoFailureError("Failed to save output file") from exc
        if written != len(artifact.data):
            raise IoFailureError("Failed to save output file")
        logger.info("Saved %s (%d bytes)", path, written)
        return path
