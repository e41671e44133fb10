from asnzone.network_objects import PrefixKey, PrefixRecord, AddressFamily

import pytest


def test_key_is_compared_as_written():
    assert PrefixKey("2001:db8::", 32) == PrefixKey("2001:db8::", 32)
    assert PrefixKey("2001:db8::", 32) != PrefixKey("2001:0db8::", 32)
    assert PrefixKey("10.0.0.0", 8) != PrefixKey("10.0.0.0", 16)
    assert str(PrefixKey("10.0.0.0", 8)) == "10.0.0.0/8"


def test_add_asn_keeps_duplicates():
    record = PrefixRecord(PrefixKey("10.0.0.0", 8), [64500, 13, 64500])
    record.add_asn(2)
    assert record.asns == [64500, 13, 64500, 2]


@pytest.mark.parametrize("family, text, max_len, max_supported", [
    (AddressFamily.IPV4, "IPV4", 32, 24),
    (AddressFamily.IPV6, "IPV6", 128, 64),
])
def test_address_family(family, text, max_len, max_supported):
    assert str(family) == text
    assert AddressFamily.from_str(text.lower()) == family
    assert family.max_prefixlen == max_len
    assert family.max_supported_prefixlen == max_supported


def test_unknown_family():
    assert AddressFamily.from_str("IPX") is None
