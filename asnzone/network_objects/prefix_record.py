from typing import NamedTuple


class PrefixKey(NamedTuple):
    """ Routed block as written in the input, compared as plain strings """
    address: str
    prefixlen: int

    def __str__(self):
        return f"{self.address}/{self.prefixlen}"


class PrefixRecord:
    def __init__(self,
                 key: PrefixKey,
                 asns: list[int] = None,
                 line_number: int = 0):
        """ Routed block together with every ASN announcing it

        :param key: prefix this record belongs to
        :param asns: ASNs in order of appearance, repeated values are kept
        :param line_number: first input line that announced the prefix
        """
        self.key = key
        self.asns = list(asns) if asns else []
        self.line_number = line_number

    def add_asn(self, asn: int):
        self.asns.append(asn)

    def __eq__(self, other):
        if not isinstance(other, PrefixRecord):
            return False
        return self.key == other.key and self.asns == other.asns

    def __repr__(self):
        return f"PrefixRecord({self.key!s}, {self.asns})"
