import ipaddress
import logging
import re
from typing import NamedTuple, Optional

from asnzone.errors import MalformedLineError, InvalidAddressError
from asnzone.errors import InvalidPrefixError
from asnzone.network_objects import AddressFamily


class ParsedLine(NamedTuple):
    """ Announcement accepted for aggregation """
    family: AddressFamily
    address: str
    prefixlen: int
    asn: int


class IgnoredCounters:
    def __init__(self):
        """ Count of lines dropped because their prefix is too long """
        self.ipv4 = 0
        self.ipv6 = 0

    def increment(self, family: AddressFamily):
        if family == AddressFamily.IPV4:
            self.ipv4 += 1
        else:
            self.ipv6 += 1

    def summary(self) -> Optional[str]:
        """ Get warning describing ignored lines

        :return: warning message or None if nothing was ignored
        """
        v4 = f"{self.ipv4} lines with IPv4 prefix /25-32"
        v6 = f"{self.ipv6} lines with IPv6 prefix /65-128"
        if self.ipv4 and self.ipv6:
            return f"Ignored {v4} and {v6}"
        elif self.ipv4:
            return f"Ignored {v4}"
        elif self.ipv6:
            return f"Ignored {v6}"
        return None


class LineParser:
    ipv6_re = re.compile(r"([0-9a-fA-F:]{2,})/([0-9]+) +([0-9]+) *")
    ipv4_re = re.compile(r"([0-9]+\.[0-9]+\.[0-9]+\.[0-9]+)/([0-9]+) +([0-9]+) *")
    blank_re = re.compile(r"\s*")

    def __init__(self):
        """ Object turning lines of announcement table into entries

        Lines have the form <prefix><space><asn>. Prefixes longer than
        the family supports in zone data are counted in ignored and
        otherwise dropped.
        """
        self.lgr = logging.getLogger(self.__class__.__name__)
        self.ignored = IgnoredCounters()

    def parse(self, line: str, line_number: int) -> Optional[ParsedLine]:
        """ Parse one line of input

        :param line: line without trailing newline
        :param line_number: 1-based line number used in error reports
        :raises ConversionError: when the line is not acceptable
        :return: ParsedLine or None if the line should be skipped
        """
        match_object = self.ipv6_re.fullmatch(line)
        if match_object is not None:
            return self._parse_entry(AddressFamily.IPV6,
                                     match_object,
                                     line_number)
        match_object = self.ipv4_re.fullmatch(line)
        if match_object is not None:
            return self._parse_entry(AddressFamily.IPV4,
                                     match_object,
                                     line_number)
        if self.blank_re.fullmatch(line) is not None:
            return None
        raise MalformedLineError(line_number, line)

    def _parse_entry(self,
                     family: AddressFamily,
                     match_object: re.Match,
                     line_number: int) -> Optional[ParsedLine]:
        address, prefixlen, asn = match_object.groups()
        try:
            if family == AddressFamily.IPV6:
                ipaddress.IPv6Address(address)
            else:
                ipaddress.IPv4Address(address)
        except ValueError:
            raise InvalidAddressError(line_number,
                                      f'"{address}" is not an '
                                      f'{family.display_name} address',
                                      match_object.string) from None

        prefixlen = int(prefixlen)
        if prefixlen > family.max_prefixlen:
            raise InvalidPrefixError(line_number,
                                     f'"{prefixlen}" is not a valid '
                                     f'{family.display_name} prefix within '
                                     f'range 0 to {family.max_prefixlen}',
                                     match_object.string)

        if prefixlen > family.max_supported_prefixlen:
            self.lgr.debug("Ignoring %s/%s on line %s",
                           address, prefixlen, line_number)
            self.ignored.increment(family)
            return None
        return ParsedLine(family, address, prefixlen, int(asn))
