#!/usr/bin/env python3
"""
Tests for the player report tool and the configuration profiles it reads.
"""

import csv
import json
import os

import pytest

from config.config import Config
from fl_player_stats.hashing import ArchetypeLookup, flhash
from fl_player_stats.tools.player_report import PlayerReportTool

SAVES = {
    "alpha.fl": "[Player]\nname = 0041006c007000680061\nrank = 7\nmoney = 100\nship_archetype = {ship}\n",
    "bravo.fl": "[Player]\nname = 0042007200610076006f\nrank = 19\nmoney = 900\n"
                "[mPlayer]\nrm_completed = 1, 2\nship_type_killed = 5, 6\n",
    "empty.fl": "",
}


@pytest.fixture
def save_dir(tmp_path):
    directory = tmp_path / "saves"
    directory.mkdir()
    for file_name, text in SAVES.items():
        (directory / file_name).write_text(text.format(ship=flhash("ge_fighter")), encoding="utf-8")
    return directory


def _tool(tmp_path, **report):
    config = {
        "general": {"output_path": str(tmp_path / "output")},
        "report": report,
    }
    return PlayerReportTool(config, lookup=ArchetypeLookup(nicknames=["ge_fighter"]))


def test_run_without_export(tmp_path, save_dir):
    tool = _tool(tmp_path, sort="Rank", direction="Desc", export="none")
    result = tool.run(save_dir=str(save_dir))

    assert result["success"]
    assert result["player_count"] == 2
    assert result["output_file"] is None
    assert [p.name for p in result["players"]] == ["Bravo", "Alpha"]


def test_run_arguments_override_config(tmp_path, save_dir):
    tool = _tool(tmp_path, sort="Rank", direction="Desc", export="none")
    result = tool.run(save_dir=str(save_dir), sort="Name", direction="Asc")
    assert [p.name for p in result["players"]] == ["Alpha", "Bravo"]


def test_run_requires_save_dir(tmp_path):
    with pytest.raises(ValueError):
        _tool(tmp_path).run()


def test_run_rejects_unknown_export(tmp_path, save_dir):
    with pytest.raises(ValueError):
        _tool(tmp_path).run(save_dir=str(save_dir), export="pdf")


def test_to_rows(tmp_path, save_dir):
    tool = _tool(tmp_path, export="none")
    players = tool.run(save_dir=str(save_dir))["players"]
    rows = tool.to_rows(players)

    alpha = rows[0]
    assert list(alpha) == PlayerReportTool.CSV_HEADERS
    assert alpha["Name"] == "Alpha"
    assert alpha["Ship"] == "ge_fighter"
    assert alpha["Base"] == "In Space"
    assert len(alpha["Last Seen"]) == len("2024-01-01 00:00:00")

    bravo = rows[1]
    assert bravo["Missions"] == 2
    assert bravo["Kills"] == 6


def test_csv_export(tmp_path, save_dir):
    tool = _tool(tmp_path, export="csv")
    result = tool.run(save_dir=str(save_dir))

    output_file = result["output_file"]
    assert output_file.startswith(str(tmp_path / "output"))
    assert output_file.endswith(".csv")

    with open(output_file, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["Name"] for row in rows] == ["Alpha", "Bravo"]
    assert rows[1]["Rank"] == "19"


def test_excel_export(tmp_path, save_dir):
    import pandas as pd

    tool = _tool(tmp_path, export="excel", sort="Rank")
    result = tool.run(save_dir=str(save_dir))

    assert result["output_file"].endswith(".xlsx")
    df = pd.read_excel(result["output_file"], sheet_name="Players")
    assert list(df["Name"]) == ["Alpha", "Bravo"]
    assert list(df["Money"]) == [100, 900]


def test_config_profiles(tmp_path):
    config_dir = tmp_path / "profiles"
    secrets_dir = tmp_path / "secrets"
    config_dir.mkdir()
    secrets_dir.mkdir()
    with open(config_dir / "server.json", "w") as f:
        json.dump({"paths": {"save_dir": "saves"}, "report": {"sort": "Rank"}}, f)
    with open(secrets_dir / "server_secrets.json", "w") as f:
        json.dump({"paths": {"install_dir": "/opt/freelancer"}}, f)

    server = Config(config_dir=str(config_dir), secrets_dir=str(secrets_dir), profile="server")

    assert server.get("report.sort") == "Rank"
    assert server.get("report.direction") == "Asc"
    assert server.get("report.range", 30) == 30
    assert server.get("paths.install_dir") == "/opt/freelancer"
    assert server.get_path("paths.save_dir") == str(config_dir / "saves")
    assert server.list_profiles() == ["server"]


def test_default_profile_is_created(tmp_path):
    config_dir = tmp_path / "profiles"

    default = Config(config_dir=str(config_dir), secrets_dir=str(tmp_path / "secrets"))

    assert os.path.exists(config_dir / "default.json")
    assert default.get("general.log_level") == "INFO"
    assert default.get("missing.key", "fallback") == "fallback"
