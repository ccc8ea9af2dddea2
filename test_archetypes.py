#!/usr/bin/env python3
"""
Tests for the Freelancer id hash and the archetype lookup built from an install directory.
"""

import os
import struct

import pytest

from fl_player_stats.hashing import ArchetypeLookup, flhash, to_unsigned

SHIPARCH_TEXT = """[Ship]
nickname = li_elite ; Liberty elite
ids_name = 237033

[Ship]
nickname = ge_fighter
"""


def _bini_with_nickname(nickname):
    table = b"Ship\x00nickname\x00" + nickname.encode("latin-1") + b"\x00"
    body = struct.pack("<HH", 0, 1) + struct.pack("<HB", 5, 1) + struct.pack("<Bi", 3, 14)
    return b"BINI" + struct.pack("<II", 1, 12 + len(body)) + body + table


def _make_install(root):
    ships_dir = os.path.join(root, "DATA", "SHIPS")
    os.makedirs(ships_dir)
    with open(os.path.join(ships_dir, "shiparch.ini"), "w") as f:
        f.write(SHIPARCH_TEXT)
    with open(os.path.join(ships_dir, "rtc_shiparch.ini"), "wb") as f:
        f.write(_bini_with_nickname("bw_fighter"))
    with open(os.path.join(root, "DATA", "broken.ini"), "wb") as f:
        f.write(b"BINI\x01\x00")
    with open(os.path.join(root, "DATA", "readme.txt"), "w") as f:
        f.write("nickname = not_an_ini\n")


def test_flhash_properties():
    value = flhash("li_elite")
    assert value & 0x80000000
    assert value <= 0xFFFFFFFF
    assert flhash("LI_ELITE") == value
    assert flhash("li_elite") != flhash("li_elite2")


def test_flhash_known_ids():
    assert flhash("ge_fighter") == 2151746432
    assert flhash("GE_FIGHTER") == 2151746432


def test_to_unsigned():
    assert to_unsigned(-1) == 0xFFFFFFFF
    assert to_unsigned(5) == 5


def test_register_and_resolve():
    lookup = ArchetypeLookup(nicknames=["li_elite", "ge_fighter"])
    li_elite = flhash("li_elite")

    assert len(lookup) == 2
    assert lookup.resolve(li_elite) == "li_elite"
    assert lookup.resolve(str(li_elite)) == "li_elite"
    # signed 32-bit form as written by some server tools
    assert lookup.resolve(li_elite - 2 ** 32) == "li_elite"
    assert li_elite in lookup


def test_resolve_unknown_or_invalid():
    lookup = ArchetypeLookup(nicknames=["li_elite"])
    assert lookup.resolve(12345) is None
    assert lookup.resolve("not a number") is None
    assert lookup.resolve(None) is None


def test_lookup_from_install_directory(tmp_path):
    _make_install(str(tmp_path))

    lookup = ArchetypeLookup(str(tmp_path))

    assert lookup.data_dir == tmp_path / "DATA"
    assert lookup.resolve(flhash("li_elite")) == "li_elite"
    assert lookup.resolve(flhash("ge_fighter")) == "ge_fighter"
    assert lookup.resolve(flhash("bw_fighter")) == "bw_fighter"
    assert lookup.resolve(flhash("not_an_ini")) is None


def test_missing_install_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        ArchetypeLookup(str(tmp_path / "missing"))


def test_inline_comment_in_shiparch(tmp_path):
    ships_dir = tmp_path / "DATA" / "SHIPS"
    ships_dir.mkdir(parents=True)
    (ships_dir / "shiparch.ini").write_text(
        "[Ship]\nnickname = li_elite ; Liberty elite\n", encoding="utf-8")

    lookup = ArchetypeLookup(str(tmp_path))

    assert lookup.resolve(flhash("li_elite")) == "li_elite"
    assert len(lookup) == 1
