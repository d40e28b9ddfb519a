import logging
import os

from .decoder import QOIDecoder
from .encoder import QOIEncoder
from .image import QOIImage

logger = logging.getLogger(__name__)


def _is_path(target) -> bool:
    return isinstance(target, (str, os.PathLike))


class QOIReader:
    """Reads QOIImage objects from paths or binary file objects."""

    def read(self, source) -> QOIImage:
        """
        :param source: A path, or a readable binary file object positioned at
                       the start of the QOI data. File objects are not closed.
        :raises QOIFormatError: If the data is not a valid QOI image.
        """
        if not _is_path(source):
            return QOIDecoder.read(source)

        logger.debug("reading %s", source)
        with open(source, "rb") as f:
            return QOIDecoder.read(f)


class QOIWriter:
    """Writes QOIImage objects to paths or binary file objects."""

    def write(self, image: QOIImage, target) -> int:
        """
        :param image: QOIImage to save.
        :param target: A path, or a writable binary file object. File objects
                       are not closed.
        :return: Number of bytes written.
        :raises ImageTooLargeError: If the image has 400 million pixels or more.
        """
        if not _is_path(target):
            return QOIEncoder.write(image, target)

        # encode before opening so a rejected image doesn't leave an empty file
        data = QOIEncoder.encode(image)
        logger.debug("writing %d bytes to %s", len(data), target)
        with open(target, "wb") as f:
            return f.write(data)
