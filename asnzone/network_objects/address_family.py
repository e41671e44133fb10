from enum import Enum
from typing import Optional


class AddressFamily(Enum):
    """ Address families present in the announcement table """
    IPV4 = 4
    IPV6 = 6

    def __str__(self):
        family_to_str = {AddressFamily.IPV4: "IPV4",
                         AddressFamily.IPV6: "IPV6"}
        return family_to_str[self]

    @property
    def max_prefixlen(self) -> int:
        """ Longest prefix length that is valid at all """
        return 32 if self == AddressFamily.IPV4 else 128

    @property
    def max_supported_prefixlen(self) -> int:
        """ Longest prefix length that is put into zone data """
        return 24 if self == AddressFamily.IPV4 else 64

    @property
    def display_name(self) -> str:
        return "IPv4" if self == AddressFamily.IPV4 else "IPv6"

    @staticmethod
    def from_str(name: str) -> Optional["AddressFamily"]:
        str_to_family = {"IPV4": AddressFamily.IPV4,
                         "IPV6": AddressFamily.IPV6}
        return str_to_family.get(name.upper(), None)
