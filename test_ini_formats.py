#!/usr/bin/env python3
"""
Tests for the ini readers: text ini, BINI and FLS1 encrypted saves.
"""

import struct
import tempfile
import os

import pytest

from fl_player_stats.formats import (
    ABSENT,
    Scalar,
    ValueList,
    decrypt_fls1,
    encrypt_fls1,
    parse_bini,
    parse_ini,
    read_save_file,
)

SAVE_TEXT = """; Player save
[Player]
name = 00480069
rank = 3
base = Li01_01_Base
money = 12000

[mPlayer]
base_visited = 2745934752
base_visited = 2726876417
sys_visited = 2206486530
rm_completed = 1, 2
"""


def test_parse_sections_and_repeated_keys():
    document = parse_ini(SAVE_TEXT)

    assert list(document) == ["Player", "mPlayer"]
    player = document["Player"]
    assert player.get("name") == Scalar("00480069")
    assert player.text("money") == "12000"
    assert player.get("rep_group") is ABSENT

    stats = document["mPlayer"]
    assert stats.get("base_visited") == ValueList(("2745934752", "2726876417"))
    assert stats.get("sys_visited") == Scalar("2206486530")
    assert stats.text("rm_completed") == "1, 2"


def test_empty_and_comment_only_text_is_empty():
    assert parse_ini("") == {}
    assert parse_ini("\n\n; nothing here\n# or here\n") == {}


def test_sections_with_same_name_are_merged():
    document = parse_ini("[A]\nx = 1\n[B]\ny = 2\n[A]\nx = 3\n")
    assert document["A"].get("x") == ValueList(("1", "3"))
    assert len(document) == 2


def test_keys_before_first_section_and_quotes():
    document = parse_ini('\ufefftop = "quoted value"\nflag\n')
    root = document[""]
    assert root.text("top") == "quoted value"
    assert root.text("flag") == ""


def _bini(sections):
    """Build BINI bytes from [(name, [(key, [(type, value), ...]), ...]), ...]."""
    strings = {}
    table = bytearray()

    def offset_of(text):
        if text not in strings:
            strings[text] = len(table)
            table.extend(text.encode("latin-1") + b"\x00")
        return strings[text]

    body = bytearray()
    for name, entries in sections:
        body += struct.pack("<HH", offset_of(name), len(entries))
        for key, values in entries:
            body += struct.pack("<HB", offset_of(key), len(values))
            for value_type, value in values:
                if value_type == 1:
                    body += struct.pack("<Bi", 1, value)
                elif value_type == 2:
                    body += struct.pack("<Bf", 2, value)
                else:
                    body += struct.pack("<Bi", 3, offset_of(value))

    header = b"BINI" + struct.pack("<II", 1, 12 + len(body))
    return header + bytes(body) + bytes(table)


def test_parse_bini():
    data = _bini([
        ("Ship", [
            ("nickname", [(3, "li_elite")]),
            ("hit_pts", [(1, 5200)]),
            ("mass", [(2, 1.5)]),
            ("shield_link", [(3, "l_elite_shield01"), (1, 2), (2, 2.0)]),
        ]),
        ("Ship", [
            ("nickname", [(3, "ge_fighter")]),
        ]),
    ])

    document = parse_bini(data)
    ship = document["Ship"]
    assert ship.get("nickname") == ValueList(("li_elite", "ge_fighter"))
    assert ship.text("hit_pts") == "5200"
    assert ship.text("mass") == "1.5"
    assert ship.text("shield_link") == "l_elite_shield01, 2, 2.0"


def test_parse_bini_rejects_other_data():
    with pytest.raises(ValueError):
        parse_bini(b"[Ship]\nnickname = li_elite\n")


def test_parse_bini_truncated():
    data = _bini([("Ship", [("nickname", [(3, "li_elite")])])])
    with pytest.raises(ValueError):
        parse_bini(data[:14] + data[14:16])


def test_fls1_round_trip():
    plain = SAVE_TEXT.encode("utf-8")
    encrypted = encrypt_fls1(plain)
    assert encrypted.startswith(b"FLS1")
    assert encrypted[4:] != plain
    assert decrypt_fls1(encrypted) == plain


def test_decrypt_leaves_plain_text_alone():
    assert decrypt_fls1(b"[Player]\n") == b"[Player]\n"


def test_read_encrypted_save_file():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "encrypted.fl")
        with open(path, "wb") as f:
            f.write(encrypt_fls1(SAVE_TEXT.encode("utf-8")))

        document = read_save_file(path)
        assert document["Player"].text("name") == "00480069"


def test_inline_comments_end_the_value():
    document = parse_ini(
        "[Ship]\n"
        "nickname = li_elite ; Liberty elite\n"
        "ids_name = 237033# name\n"
        'ids_info = "a;b" ; quoted\n'
        "flag ; no value\n"
    )
    ship = document["Ship"]
    assert ship.text("nickname") == "li_elite"
    assert ship.text("ids_name") == "237033"
    assert ship.text("ids_info") == "a;b"
    assert ship.text("flag") == ""
