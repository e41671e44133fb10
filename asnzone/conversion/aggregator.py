from typing import Iterator

from asnzone.network_objects import AddressFamily, PrefixKey, PrefixRecord


class FamilyTable:
    def __init__(self, family: AddressFamily):
        """ Prefixes of one address family and the ASNs announcing them

        :param family: family of all prefixes in this table
        """
        self.family = family
        self._records: dict[PrefixKey, PrefixRecord] = {}

    def add(self, address: str, prefixlen: int, asn: int, line_number: int = 0):
        """ Add ASN to the record of the prefix, creating it if needed

        :param address: address exactly as it was given
        :param prefixlen: prefix length
        :param asn: ASN announcing the prefix
        :param line_number: input line of the announcement
        """
        key = PrefixKey(address, prefixlen)
        record = self._records.get(key, None)
        if record is None:
            record = PrefixRecord(key, line_number=line_number)
            self._records[key] = record
        record.add_asn(asn)

    def __len__(self):
        return len(self._records)

    def __iter__(self) -> Iterator[PrefixRecord]:
        return iter(self._records.values())


class Aggregator:
    def __init__(self):
        """ Collects announcements of the whole input before any output """
        self.tables = {AddressFamily.IPV4: FamilyTable(AddressFamily.IPV4),
                       AddressFamily.IPV6: FamilyTable(AddressFamily.IPV6)}

    def add(self,
            family: AddressFamily,
            address: str,
            prefixlen: int,
            asn: int,
            line_number: int = 0):
        self.tables[family].add(address, prefixlen, asn, line_number)

    def table(self, family: AddressFamily) -> FamilyTable:
        return self.tables[family]
