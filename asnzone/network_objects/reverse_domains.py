#!/usr/bin/python
#
# Generate rbldnsd dnset names covering an IPv6 prefix in ip6.arpa

import ipaddress

from asnzone.errors import IntegrityError

ORIGIN6 = "ip6.arpa"
BITS_PER_LABEL = 4


def reverse_chars6(address: str) -> list[str]:
    """ Get nibbles of address, least significant first

    :param address: IPv6 address in any valid textual form
    :return: list of 32 lowercase hex digits
    """
    # inspired by ipaddress._BaseV6._reverse_pointer
    s = ipaddress.IPv6Address(address).exploded[::-1]
    return list(s.replace(':', ''))


def reverse_name6(address: str) -> str:
    """ Get reverse name of address relative to ip6.arpa """
    return '.'.join(reverse_chars6(address))


def nibble_labels6(address: str, prefixlen: int, line_number: int = 0) -> list[str]:
    """ Get names relative to ip6.arpa that together cover the prefix

    Every name matches itself and all of its subdomains. Nibble aligned
    prefixes need a single name, otherwise every value of the partially
    covered nibble that agrees with the fixed bits gets its own name.

    :param address: network address exactly as given in input
    :param prefixlen: prefix length 0-128
    :param line_number: input line used in error reports
    :raises IntegrityError: when the free bits of the partially covered
                            nibble are not zero and a digit would exceed f
    :return: names in ascending digit order, empty string stands for
             the whole ip6.arpa zone
    """
    reverse_chars = reverse_chars6(address)
    full_labels = prefixlen // BITS_PER_LABEL
    remain_bits = prefixlen % BITS_PER_LABEL
    suffix = '.'.join(reverse_chars[len(reverse_chars) - full_labels:])
    if remain_bits == 0:
        return [suffix]

    base_digit = int(reverse_chars[len(reverse_chars) - full_labels - 1], 16)
    addon = 2 ** (BITS_PER_LABEL - remain_bits) - 1
    labels = []
    for i in range(addon + 1):
        digit = base_digit + i
        if digit > 15:
            raise IntegrityError(line_number,
                                 f'Calculated digit "{digit}" is greater '
                                 f'than 15 for {address}/{prefixlen}')
        label = f"{digit:x}"
        if suffix:
            label += f".{suffix}"
        labels.append(label)
    return labels


__all__ = ["reverse_chars6", "reverse_name6", "nibble_labels6"]
