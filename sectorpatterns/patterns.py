import abc
from typing import Optional, List

import numpy as np

from .models import TrackLayout, DEFAULT_LAYOUT
from .settings import OUTPUT_FILE_NAMES
from .logger import Logger, GenerationProgressStep
from .validators import validate_range


def truncate_to_byte(counters: np.ndarray) -> np.ndarray:
    """Keep the low 8 bits of every counter."""
    return np.bitwise_and(counters, 0xFF).astype(np.uint8)


class BasePattern(abc.ABC):
    def __init__(self, logger: Optional[Logger] = None, layout: TrackLayout = DEFAULT_LAYOUT) -> None:
        self.logger: Optional[Logger] = logger
        self.layout: TrackLayout = layout

    @property
    @abc.abstractmethod
    def code(self) -> int:
        """Return the unique identification code for the pattern."""
        pass

    @property
    @abc.abstractmethod
    def file_name(self) -> str:
        """Return the name of the file this pattern is written to."""
        pass

    @abc.abstractmethod
    def counter_at(self, sector: int, offset: int) -> int:
        """
        Return the raw loop counter that selects the byte at offset within sector.

        Args:
            sector (int): Sector index.
            offset (int): Byte offset within the sector.

        Returns:
            int: The counter before truncation.
        """
        pass

    @abc.abstractmethod
    def sector_counters(self, sector: int) -> np.ndarray:
        """
        Return the raw loop counters for every byte of a sector.

        Args:
            sector (int): Sector index.

        Returns:
            np.ndarray: One counter per byte, sector_size long.
        """
        pass

    def byte_at(self, sector: int, offset: int) -> int:
        validate_range(sector, "Sector", self.layout.sectors)
        validate_range(offset, "Offset", self.layout.sector_size)
        return self.counter_at(sector, offset) & 0xFF

    def generate_sector(self, sector: int) -> bytes:
        validate_range(sector, "Sector", self.layout.sectors)
        return truncate_to_byte(self.sector_counters(sector)).tobytes()

    def generate_track(self) -> bytes:
        """
        Generate every sector of the track in order.

        Returns:
            bytes: The full file payload, track_size long.
        """
        if self.logger is not None:
            self.logger.reset_generation_progress()
        sectors: List[bytes] = []
        for sector in range(self.layout.sectors):
            sectors.append(self.generate_sector(sector))
            if self.logger is not None:
                self.logger.log(GenerationProgressStep(f"Generating {self.file_name}", self.layout.sectors))
        return b''.join(sectors)


class RowPositionPattern(BasePattern):
    """
    Byte is the position within the row: 0..23 repeated every row.
    """
    @property
    def code(self) -> int:
        return 1

    @property
    def file_name(self) -> str:
        return OUTPUT_FILE_NAMES[0]

    def counter_at(self, sector: int, offset: int) -> int:
        return offset % self.layout.row_size

    def sector_counters(self, sector: int) -> np.ndarray:
        return np.tile(np.arange(self.layout.row_size), self.layout.rows_per_sector)


class RowIndexPattern(BasePattern):
    """
    Byte is the row index: constant within a row, 0..97 over a sector.
    """
    @property
    def code(self) -> int:
        return 2

    @property
    def file_name(self) -> str:
        return OUTPUT_FILE_NAMES[1]

    def counter_at(self, sector: int, offset: int) -> int:
        return offset // self.layout.row_size

    def sector_counters(self, sector: int) -> np.ndarray:
        return np.repeat(np.arange(self.layout.rows_per_sector), self.layout.row_size)


class SectorIndexPattern(BasePattern):
    """
    Byte is the sector index: constant for a whole sector.
    """
    @property
    def code(self) -> int:
        return 3

    @property
    def file_name(self) -> str:
        return OUTPUT_FILE_NAMES[2]

    def counter_at(self, sector: int, offset: int) -> int:
        return sector

    def sector_counters(self, sector: int) -> np.ndarray:
        return np.full(self.layout.sector_size, sector)


class SawtoothPattern(BasePattern):
    """
    Byte is the offset within the sector, ignoring rows. Wraps every 256 bytes.
    """
    @property
    def code(self) -> int:
        return 4

    @property
    def file_name(self) -> str:
        return OUTPUT_FILE_NAMES[3]

    def counter_at(self, sector: int, offset: int) -> int:
        return offset

    def sector_counters(self, sector: int) -> np.ndarray:
        return np.arange(self.layout.sector_size)


def get_pattern(code: int, logger: Optional[Logger] = None) -> BasePattern:
    """
    Retrieve a pattern instance based on the given code.

    Args:
        code (int): The pattern code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        BasePattern: An instance of a pattern.

    Raises:
        ValueError: If the pattern code is not supported.
    """
    if code == 1:
        return RowPositionPattern(logger)
    elif code == 2:
        return RowIndexPattern(logger)
    elif code == 3:
        return SectorIndexPattern(logger)
    elif code == 4:
        return SawtoothPattern(logger)
    else:
        raise ValueError("Pattern code not supported")


def get_all_patterns(logger: Optional[Logger] = None) -> List[BasePattern]:
    return [get_pattern(code, logger) for code in (1, 2, 3, 4)]
