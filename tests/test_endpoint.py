from eipscan.endpoint import EndPoint, SockAddrIn


def test_should_convert_ip_and_host_to_addr():
    end_point = EndPoint("127.0.0.1", 0xAA00)

    assert end_point.host == "127.0.0.1"
    assert end_point.port == 0xAA00
    assert end_point.addr.family == 2
    assert end_point.addr.s_addr == 0x0100007F
    assert end_point.addr.port == 0x00AA
    assert str(end_point) == "127.0.0.1:43520"


def test_should_convert_addr_to_ip_and_host():
    addr = SockAddrIn(family=2, port=0x00AA, s_addr=0x0100007F)

    end_point = EndPoint.from_sockaddr(addr)

    assert end_point.host == "127.0.0.1"
    assert end_point.port == 0xAA00
    assert end_point.addr.family == 2
    assert end_point.addr.s_addr == 0x0100007F
    assert end_point.addr.port == 0x00AA
    assert str(end_point) == "127.0.0.1:43520"


def test_should_not_raise_if_can_not_parse_ip():
    end_point = EndPoint("XXXX", 0)
    assert end_point.addr.s_addr == 0
    assert end_point.host == "XXXX"


def test_round_trip_through_sockaddr_is_equal():
    original = EndPoint("192.168.1.15", 44818)
    copy = EndPoint.from_sockaddr(original.addr)
    assert copy == original
    assert hash(copy) == hash(original)


def test_equality_depends_on_host_and_port():
    assert EndPoint("10.0.0.1", 2222) == EndPoint("10.0.0.1", 2222)
    assert not EndPoint("10.0.0.1", 2222) == EndPoint("10.0.0.2", 2222)
    assert not EndPoint("10.0.0.1", 2222) == EndPoint("10.0.0.1", 2223)


def test_less_than_requires_both_host_and_port_smaller():
    low = EndPoint("10.0.0.1", 100)
    high = EndPoint("10.0.0.2", 200)
    mixed = EndPoint("10.0.0.2", 50)
    assert low < high
    assert not high < low
    assert not low < mixed


def test_end_points_usable_as_dict_keys():
    table = {EndPoint("10.0.0.1", 2222): "a"}
    assert table[EndPoint("10.0.0.1", 2222)] == "a"