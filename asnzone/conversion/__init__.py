"""
Subpackage for conversion of announcement tables into zone data
"""

from .line_parser import LineParser, ParsedLine, IgnoredCounters
from .aggregator import Aggregator, FamilyTable
from .rdata import compose_rdata, MAX_RDATA_LENGTH
from .zone_emitter import ZoneEmitter, ZoneLine
from .converter import Converter
from .meta_splitter import MetaSplitter
