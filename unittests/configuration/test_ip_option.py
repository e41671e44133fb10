from asnzone.configuration import IpOption

import pytest


@pytest.fixture
def any_version():
    ins = IpOption("test", "test", "127.0.0.2")
    ins.lgr.disabled = True
    return ins


@pytest.fixture
def only_ipv4():
    ins = IpOption("test", "test", "127.0.0.2", validation=4)
    ins.lgr.disabled = True
    return ins


@pytest.mark.parametrize("value, result", [
    ("127.0.0.2", True),
    ("whatever.1.1.1", False),
    ("::1", True),
    ("300.0.0.1", False),
    (" ", False),
    ("2001:0000:130F:0000:0000:09C0:876A:130B", True)
])
def test_validate(value, result, any_version):
    assert any_version.validate(value) == result


@pytest.mark.parametrize("value, result", [
    ("127.0.0.2", True),
    ("::1", False),
    ("300.0.0.1", False)
])
def test_validate_version(value, result, only_ipv4):
    assert only_ipv4.validate(value) == result
