"""
sectorpatterns: Deterministic CD sector test patterns for exercising sector encoders and decoders.
"""

from .settings import (
    SECTORS_PER_TRACK,
    ROWS_PER_SECTOR,
    ROW_SIZE,
    SECTOR_SIZE,
    TRACK_SIZE,
    OUTPUT_FILE_NAMES,
)

from .models import (
    TrackLayout,
    PatternFileInfo,
    DEFAULT_LAYOUT,
)

from .patterns import (
    BasePattern,
    RowPositionPattern,
    RowIndexPattern,
    SectorIndexPattern,
    SawtoothPattern,
    get_pattern,
    get_all_patterns,
    truncate_to_byte,
)

from .file_handler import RawPatternFile

from .generator import (
    PatternFileGenerator,
    generate,
    verify,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    PatternFileLog,
    VerificationLog,
    GenerationProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "SECTORS_PER_TRACK",
    "ROWS_PER_SECTOR",
    "ROW_SIZE",
    "SECTOR_SIZE",
    "TRACK_SIZE",
    "OUTPUT_FILE_NAMES",

    "TrackLayout",
    "PatternFileInfo",
    "DEFAULT_LAYOUT",

    "BasePattern",
    "RowPositionPattern",
    "RowIndexPattern",
    "SectorIndexPattern",
    "SawtoothPattern",
    "get_pattern",
    "get_all_patterns",
    "truncate_to_byte",

    "RawPatternFile",

    "PatternFileGenerator",
    "generate",
    "verify",

    "Logger",
    "Log",
    "LogLevel",
    "PatternFileLog",
    "VerificationLog",
    "GenerationProgressStep",
]
