"""
models.py

The shared objects used in the sectorpatterns.

"""


from .settings import SECTORS_PER_TRACK, ROWS_PER_SECTOR, ROW_SIZE
from .validators import validate_type, validate_range


class TrackLayout:
    """
    Geometry of one track: sectors made of fixed-size rows.
    """
    def __init__(self,
                 sectors: int = SECTORS_PER_TRACK,
                 rows_per_sector: int = ROWS_PER_SECTOR,
                 row_size: int = ROW_SIZE) -> None:
        validate_type(sectors, "Sectors", int)
        validate_type(rows_per_sector, "Rows per sector", int)
        validate_type(row_size, "Row size", int)
        if sectors <= 0 or rows_per_sector <= 0 or row_size <= 0:
            raise ValueError("Track dimensions must be positive")
        self.sectors: int = sectors
        self.rows_per_sector: int = rows_per_sector
        self.row_size: int = row_size

    @property
    def sector_size(self) -> int:
        return self.rows_per_sector * self.row_size

    @property
    def track_size(self) -> int:
        return self.sectors * self.sector_size

    def offset(self, sector: int, row: int, position: int) -> int:
        """
        Get the byte offset of a row position within the track.

        Args:
            sector (int): Sector index.
            row (int): Row index within the sector.
            position (int): Byte position within the row.

        Returns:
            int: Offset from the start of the file.
        """
        validate_range(sector, "Sector", self.sectors)
        validate_range(row, "Row", self.rows_per_sector)
        validate_range(position, "Position", self.row_size)
        return sector * self.sector_size + row * self.row_size + position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrackLayout):
            return False
        return (self.sectors, self.rows_per_sector, self.row_size) == \
            (other.sectors, other.rows_per_sector, other.row_size)

    def __repr__(self) -> str:
        return f"TrackLayout({self.sectors}x{self.rows_per_sector}x{self.row_size})"


DEFAULT_LAYOUT = TrackLayout()


class PatternFileInfo:
    """
    Represents a pattern file that has been written to disk.
    """
    def __init__(self, file_name: str, path: str, pattern_code: int, size: int) -> None:
        self.file_name: str = file_name
        self.path: str = path
        self.pattern_code: int = pattern_code
        self.size: int = size

    def __str__(self) -> str:
        return f"[{self.file_name}, pattern {self.pattern_code}, {self.size} bytes]"

    def __repr__(self) -> str:
        return self.__str__()
