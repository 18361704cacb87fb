"""
settings.py

Fixed track geometry and output names for sectorpatterns.
"""

SECTORS_PER_TRACK = 30
ROWS_PER_SECTOR = 98
ROW_SIZE = 24  # bytes
SECTOR_SIZE = ROWS_PER_SECTOR * ROW_SIZE  # 2352 bytes, one CD sector
TRACK_SIZE = SECTORS_PER_TRACK * SECTOR_SIZE  # 70560 bytes per output file

OUTPUT_FILE_NAMES = ['test1.raw', 'test2.raw', 'test3.raw', 'test4.raw']
