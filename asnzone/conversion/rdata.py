from asnzone.network_objects import PrefixKey

MAX_RDATA_LENGTH = 250


def compose_rdata(asns: list[int],
                  key: PrefixKey,
                  max_length: int = MAX_RDATA_LENGTH) -> str:
    """ Compose TXT data in the five field format of ASN lookup zones

    <asn> <asn> ... | <address>/<prefixlen> | NA | NA | NA

    ASNs are sorted numerically and added while the whole text stays
    within max_length. The first ASN that does not fit ends the list.

    :param asns: ASNs announcing the prefix
    :param key: prefix the data belongs to
    :param max_length: longest allowed text, the TXT field limit is 255
    :return: composed text
    """
    suffix = f"| {key} | NA | NA | NA"
    asn_part = ""
    for asn in sorted(asns):
        token = f"{asn} "
        if len(asn_part) + len(token) + len(suffix) > max_length:
            break
        asn_part += token
    return asn_part + suffix
