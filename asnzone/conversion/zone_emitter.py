import logging
from typing import NamedTuple

from asnzone.conversion.aggregator import Aggregator
from asnzone.conversion.rdata import compose_rdata, MAX_RDATA_LENGTH
from asnzone.network_objects import AddressFamily, PrefixRecord
from asnzone.network_objects import nibble_labels6


class ZoneLine(NamedTuple):
    """ Line of the meta file, tagged with the family of its data file """
    family: AddressFamily
    text: str

    def __str__(self):
        return f"{self.family}\t{self.text}"


class ZoneEmitter:
    separator = "# " + "-" * 42
    datasets = {AddressFamily.IPV6: "dnset origin6",
                AddressFamily.IPV4: "ip4trie origin"}

    def __init__(self,
                 ttl: int = 14400,
                 answer_address: str = "127.0.0.2",
                 max_rdata_length: int = MAX_RDATA_LENGTH):
        """ Object producing rbldnsd data lines for aggregated prefixes

        :param ttl: TTL announced in both data file headers
        :param answer_address: A record value of every entry
        :param max_rdata_length: longest allowed TXT data
        """
        self.lgr = logging.getLogger(self.__class__.__name__)
        self.ttl = ttl
        self.answer_address = answer_address
        self.max_rdata_length = max_rdata_length

    def header(self, family: AddressFamily) -> list[ZoneLine]:
        return [ZoneLine(family, self.separator),
                ZoneLine(family, f"$DATASET {self.datasets[family]}"),
                ZoneLine(family, f"$TTL {self.ttl}"),
                ZoneLine(family, self.separator)]

    def _rdata(self, record: PrefixRecord) -> str:
        return compose_rdata(record.asns, record.key, self.max_rdata_length)

    def ipv6_lines(self, record: PrefixRecord) -> list[ZoneLine]:
        """ Get default value line followed by the names it applies to

        :param record: aggregated IPv6 prefix
        :raises IntegrityError: when the prefix address has non-zero bits
                                in the partially covered nibble
        :return: lines of this prefix, they must stay together
        """
        labels = nibble_labels6(record.key.address,
                                record.key.prefixlen,
                                record.line_number)
        lines = [ZoneLine(AddressFamily.IPV6,
                          f":{self.answer_address}:{self._rdata(record)}")]
        # leading dot makes rbldnsd match the name and all its subdomains
        lines.extend(ZoneLine(AddressFamily.IPV6, f".{label}")
                     for label in labels)
        return lines

    def ipv4_lines(self, record: PrefixRecord) -> list[ZoneLine]:
        return [ZoneLine(AddressFamily.IPV4,
                         f"{record.key}:{self.answer_address}:"
                         f"{self._rdata(record)}")]

    def emit(self, aggregator: Aggregator) -> list[ZoneLine]:
        """ Render complete meta file

        Nothing is written here, so a failure on any prefix leaves no
        partial output behind.

        :param aggregator: aggregator holding the whole input
        :return: header lines of both families followed by data lines
        """
        lines = self.header(AddressFamily.IPV6)
        lines.extend(self.header(AddressFamily.IPV4))
        for record in aggregator.table(AddressFamily.IPV6):
            lines.extend(self.ipv6_lines(record))
        for record in aggregator.table(AddressFamily.IPV4):
            lines.extend(self.ipv4_lines(record))
        self.lgr.debug("Rendered %s lines", len(lines))
        return lines
