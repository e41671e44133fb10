import logging
from typing import Iterable, Optional

from asnzone.conversion.aggregator import Aggregator
from asnzone.conversion.line_parser import LineParser, IgnoredCounters
from asnzone.conversion.zone_emitter import ZoneEmitter, ZoneLine
from asnzone.network_objects import AddressFamily


class Converter:
    def __init__(self, config: dict):
        """ Conversion of announcement table into rbldnsd meta file

        Input is consumed completely before the first line is rendered,
        because one prefix may be announced anywhere in the table.

        :param config: dictionary containing configuration
        """
        self.lgr = logging.getLogger(self.__class__.__name__)
        self.parser = LineParser()
        self.aggregator = Aggregator()
        self.emitter = ZoneEmitter(config["ttl"],
                                   config["answer_address"],
                                   config["max_rdata_length"])

    @property
    def ignored(self) -> IgnoredCounters:
        return self.parser.ignored

    def read(self, input_lines: Iterable[str]):
        """ Parse and aggregate all input lines

        :param input_lines: lines of the table, trailing newlines allowed
        :raises ConversionError: on the first unacceptable line
        """
        for line_number, line in enumerate(input_lines, start=1):
            parsed = self.parser.parse(line.rstrip("\n"), line_number)
            if parsed is None:
                continue
            self.aggregator.add(parsed.family,
                                parsed.address,
                                parsed.prefixlen,
                                parsed.asn,
                                line_number)
        for family in AddressFamily:
            self.lgr.info("Aggregated %s %s prefixes",
                          len(self.aggregator.table(family)),
                          family.display_name)

    def convert(self, input_lines: Iterable[str]) -> list[ZoneLine]:
        """ Convert the whole table

        :param input_lines: lines of the table
        :raises ConversionError: when any line or prefix is unacceptable,
                                 no partial result is returned
        :return: tagged lines of the meta file
        """
        self.read(input_lines)
        return self.emitter.emit(self.aggregator)

    def warning(self) -> Optional[str]:
        """ Get summary of ignored lines, None if there were none """
        return self.ignored.summary()
