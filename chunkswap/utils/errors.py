# chunkswap/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (directories, region files, config).
    Should NOT print traceback.
    """


class RegionFormatError(ValueError):
    """Base class for region container errors."""


class BufferTooShort(RegionFormatError):
    """
    A buffer is shorter than its own header says it is,
    or an output buffer is smaller than the compacted layout.
    """

    def __init__(self, required: int, actual: int, what: str = "buffer"):
        self.required = required
        self.actual = actual
        self.what = what
        super().__init__(f"{what} too short: need {required} bytes, got {actual}")


class SectorCountOverflow(RegionFormatError):
    """A chunk needs more sectors than the single count byte can hold."""

    def __init__(self, index: int, sector_count: int):
        self.index = index
        self.sector_count = sector_count
        super().__init__(
            f"slot {index}: sector count {sector_count} does not fit in one byte (max 255)"
        )
