"""Input accumulation for validation.

Files and binary streams are read in fixed-size chunks into an InputBuffer,
an owned arena that grows with amortized reallocation. Once reading is done the
arena is frozen into immutable bytes which the validation engine then owns.
"""

from pathlib import Path
from typing import BinaryIO, Optional, Union

from charset_validator.shared import ValidationStatus, get_logger

CHUNK_SIZE = 16 * 1024


class ValidatorError(Exception):
    """Base exception for fatal errors that abort a validation run."""

    status = ValidationStatus.UNSPECIFIC_FAILURE

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source


class InputAllocationError(ValidatorError):
    """Raised when the input buffer cannot grow."""

    status = ValidationStatus.UNSPECIFIC_FAILURE


class InputUnavailableError(ValidatorError):
    """Raised when an input source cannot be opened or read."""

    status = ValidationStatus.INPUT_UNAVAILABLE


class InputBuffer:
    """Growable byte arena with a single owner.

    Chunks are appended with ``extend``; ``freeze`` hands the accumulated
    content out as immutable bytes and closes the arena for further writes.
    """

    def __init__(self, source: Optional[str] = None) -> None:
        self.source = source
        self._data: Optional[bytearray] = bytearray()

    def __len__(self) -> int:
        return len(self._data) if self._data is not None else 0

    @property
    def frozen(self) -> bool:
        return self._data is None

    def extend(self, chunk: bytes) -> None:
        """Append a chunk of input.

        Raises:
            InputAllocationError: If the arena cannot grow
            RuntimeError: If the arena was already frozen
        """
        if self._data is None:
            raise RuntimeError("InputBuffer is frozen")
        try:
            self._data.extend(chunk)
        except MemoryError as e:
            raise InputAllocationError("Memory allocation failed!", self.source) from e

    def read_from(self, stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> int:
        """Read ``stream`` to exhaustion in chunks.

        Returns:
            Number of bytes read

        Raises:
            InputUnavailableError: If reading fails
        """
        total = 0
        while True:
            try:
                chunk = stream.read(chunk_size)
            except OSError as e:
                raise InputUnavailableError(
                    f"Failed to read input: {e}", self.source
                ) from e
            if not chunk:
                break
            self.extend(chunk)
            total += len(chunk)
        return total

    def freeze(self) -> bytes:
        """Return the accumulated content and close the arena."""
        if self._data is None:
            raise RuntimeError("InputBuffer is frozen")
        try:
            data = bytes(self._data)
        except MemoryError as e:
            raise InputAllocationError("Memory allocation failed!", self.source) from e
        self._data = None
        return data


def load_stream(
    stream: BinaryIO,
    source: Optional[str] = None,
    chunk_size: int = CHUNK_SIZE,
) -> bytes:
    """Read a binary stream completely into memory."""
    buffer = InputBuffer(source)
    buffer.read_from(stream, chunk_size)
    return buffer.freeze()


def load_file(file_path: Union[str, Path], chunk_size: int = CHUNK_SIZE) -> bytes:
    """Read a file completely into memory.

    Raises:
        InputUnavailableError: If the file cannot be opened or read
    """
    path = Path(file_path)
    logger = get_logger(__name__, None, "input")
    try:
        stream = path.open("rb")
    except OSError as e:
        logger.warning(
            "Failed to open input file",
            extra={"file": str(path), "reason": str(e)},
        )
        raise InputUnavailableError(f"Failed to open file {path}!", str(path)) from e

    with stream:
        data = load_stream(stream, str(path), chunk_size)
    logger.debug("Input file loaded", extra={"file": str(path), "size": len(data)})
    return data
