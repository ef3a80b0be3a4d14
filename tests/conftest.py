"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class PacketCase:
    """A known packet with its value and rendered expression."""

    hex: str
    eval: int
    expr: str


PACKET_CASES = [
    PacketCase("D2FE28", 2021, "2021"),
    PacketCase("C200B40A82", 3, "1 + 2"),
    PacketCase("04005AC33890", 54, "6 * 9"),
    PacketCase("880086C3E88112", 7, "min(7, 8, 9)"),
    PacketCase("CE00C43D881120", 9, "max(7, 8, 9)"),
    PacketCase("D8005AC2A8F0", 1, "5 < 15"),
    PacketCase("F600BC2D8F", 0, "5 > 15"),
    PacketCase("9C005AC2F8F0", 0, "5 == 15"),
    PacketCase("9C0141080250320F1802104A08", 1, "(1 + 3) == (2 * 2)"),
]

# A full puzzle transmission: deep nesting, both framings and large literals.
LARGE_CASE = PacketCase(
    hex=(
        "6053231004C12DC26D00526BEE728D2C013AC7795ACA756F93B524D8000AAC8FF80B3A7A4016"
        "F6802D35C7C94C8AC97AD81D30024C00D1003C80AD050029C00E20240580853401E98C00D500"
        "38400D401518C00C7003880376300290023000060D800D09B9D03E7F546930052C0160004222"
        "34208CC000854778CF0EA7C9C802ACE005FE4EBE1B99EA4C8A2A804D26730E25AA8B23CBDE7C"
        "855808057C9C87718DFEED9A008880391520BC280004260C44C8E460086802600087C548430A"
        "4401B8C91AE3749CF9CEFF0A8C0041498F180532A9728813A012261367931FF43E9040191F00"
        "2A539D7A9CEBFCF7B3DE36CA56BC506005EE6393A0ACAA990030B3E29348734BC200D9803909"
        "60BC723007614C618DC600D4268AD168C0268ED2CB72E09341040181D802B285937A739ACCEF"
        "FE9F4B6D30802DC94803D80292B5389DFEB2A440081CE0FCE951005AD800D04BF26B32FC9AFC"
        "F8D280592D65B9CE67DCEF20C530E13B7F67F8FB140D200E6673BA45C0086262FBB084F5BF38"
        "1918017221E402474EF86280333100622FC37844200DC6A8950650005C8273133A300465A7AE"
        "C08B00103925392575007E63310592EA747830052801C99C9CB215397F3ACF97CFE41C802DBD"
        "004244C67B189E3BC4584E2013C1F91B0BCD60AA1690060360094F6A70B7FC7D34A52CBAE011"
        "CB6A17509F8DF61F3B4ED46A683E6BD258100667EA4B1A6211006AD367D600ACBD61FD10CBD6"
        "1FD129003D9600B4608C931D54700AA6E2932D3CBB45399A49E66E641274AE4040039B8BD2C9"
        "33137F95A4A76CFBAE122704026E700662200D4358530D4401F8AD0722DCEC3124E92B639CC5"
        "AF413300700010D8F30FE1B80021506A33C3F1007A314348DC0002EC4D9CF36280213938F648"
        "925BDE134803CB9BD6BF3BFD83C0149E859EA6614A8C"
    ),
    eval=246_225_449_979,
    expr=(
        "(1732 * (2814 < 77)) + max(14, 5579613, 222253) + (8128 + 215) + ((2767 < 11"
        "70) * 190083) + (product((product((sum((product(min(max((product(max(min((pr"
        "oduct(min((sum(min((product(max((product((product(min((sum(max(45889))))))))"
        "))))))))))))))))))))))) + 64077 + (((8 + 4 + 12) > (14 + 12 + 7)) * 244) + ("
        "(13795 == 2521) * 24) + min(55, 7, 1624, 7641219164) + (51766673277 * ((10 +"
        " 2 + 5) < (3 + 9 + 14))) + (((10 + 4 + 5) < (12 + 13 + 13)) * 869064586) + m"
        "ax(51) + (89 * 72 * 208 * 22 * 183) + 9429241 + ((3295 == 3295) * 15637965) "
        "+ 284106 + max(574274, 90) + (242 * 168 * 171) + ((4 * 2 * 14) + (5 * 12 * 1"
        "3) + (4 * 10 * 11)) + (14 * 107 * 112 * 161) + ((69 > 2990) * 177438679) + 1"
        "721 + (1024 * (1367 > 916122)) + (195 * 213) + ((31803 < 31803) * 243) + min"
        "(1643, 54927350796, 142, 3622435068, 1) + (52648 * (555874 < 15135494)) + (p"
        "roduct(17)) + (3555 * ((11 + 6 + 4) > (13 + 9 + 3))) + min(2) + 2103 + (6532"
        "356 * (42 < 42)) + min(35088, 729, 15) + ((799377 > 51182) * 245) + 3984 + ("
        "(22 < 3900935624) * 4) + (3 + 354 + 2693 + 5) + ((3929042919 > 170) * 107) +"
        " max(434298, 989105, 871763, 161) + 44587 + (3924 + 13 + 8) + (183 * (767171"
        "6 > 7671716)) + ((12 > 12) * 2266) + max(2841, 25502, 10, 37935, 2868) + 214"
        "416 + (11 + 105 + 2111 + 22585712350 + 23) + (((6 + 5 + 6) == (10 + 3 + 11))"
        " * 854057) + 165570701122 + ((15 + 7 + 6) * (3 + 12 + 7) * (12 + 6 + 13)) + "
        "(sum(9)) + 3309 + min(12786984, 179081) + (3132045308 * (57455 == 590931))"
    ),
)


@pytest.fixture(params=PACKET_CASES, ids=lambda case: case.hex)
def packet_case(request: pytest.FixtureRequest) -> PacketCase:
    """Each known small packet in turn."""
    return request.param


@pytest.fixture
def large_case() -> PacketCase:
    """The full-size transmission."""
    return LARGE_CASE
