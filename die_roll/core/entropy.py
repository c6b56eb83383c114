"""
entropy.py
Reads bounded random integers from the operating system's entropy device.
Each draw consumes a single byte; the top five bits are cleared so the result lies in [0, 8).
Related modules:
- frequency.py: Uses a DeviceEntropySource (or any callable) as the trial loop's source.
- cli.py: Opens the configured device for the run.
"""

import logging
from typing import BinaryIO, Optional

logger = logging.getLogger(__name__)

DEFAULT_ENTROPY_DEVICE = "/dev/urandom"
ENTROPY_MASK = 0b00000111


class EntropyReadError(OSError):
    """
    Raised when the entropy device returns fewer bytes than requested.
    """
    pass


def _masked_byte(handle: BinaryIO, path: str) -> int:
    data = handle.read(1)
    if len(data) != 1:
        raise EntropyReadError(f"short read from {path}: expected 1 byte, got {len(data)}")
    return data[0] & ENTROPY_MASK


def read_random_int(device: str = DEFAULT_ENTROPY_DEVICE) -> int:
    """
    Open the entropy device, read one byte and return it with the top five bits cleared.
    Args:
        device (str): Path of the entropy device.
    Returns:
        int: Random value in [0, 8).
    Raises:
        OSError: If the device cannot be opened or read.
    """
    with open(device, "rb", buffering=0) as handle:
        return _masked_byte(handle, device)


class DeviceEntropySource:
    """
    Callable entropy source that keeps the device open across draws.
    Use as a context manager so the handle is released even when a draw fails:
        with DeviceEntropySource("/dev/urandom") as source:
            value = source()  # value in [0, 8)
    """
    def __init__(self, path: str = DEFAULT_ENTROPY_DEVICE):
        self.path = path
        self._handle: Optional[BinaryIO] = None

    def open(self) -> "DeviceEntropySource":
        """
        Open the device for unbuffered binary reads.
        Raises:
            OSError: If the device cannot be opened.
        """
        if self._handle is None:
            self._handle = open(self.path, "rb", buffering=0)
            logger.debug("opened entropy device %s", self.path)
        return self

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug("closed entropy device %s", self.path)

    @property
    def closed(self) -> bool:
        return self._handle is None

    def __enter__(self) -> "DeviceEntropySource":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __call__(self) -> int:
        """
        Draw one masked byte from the open device.
        Returns:
            int: Random value in [0, 8).
        Raises:
            ValueError: If the source has not been opened or was closed.
            OSError: If reading the device fails.
        """
        if self._handle is None:
            raise ValueError(f"entropy source {self.path} is not open")
        return _masked_byte(self._handle, self.path)
