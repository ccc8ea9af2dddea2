#!/usr/bin/env python3
"""
Freelancer Player Stats - Player Report

Reads the account save files of a Freelancer server and reports per-player
statistics: rank, money, ship, kills, missions and exploration counts.
Results can be filtered to recently active or recently created characters,
sorted, and exported to CSV or Excel.
"""

import argparse
import logging
import os
from typing import Any, Dict, List, Optional

from ..base import FreelancerTool, FileBasedTool
from ..errors import SaveFieldError
from ..hashing.archetypes import ArchetypeLookup
from ..stats.extractor import PlayerStatsExtractor
from ..stats.filters import RANGE_LAST_SEEN, RANGE_TYPES
from ..stats.records import PlayerRecord
from ..stats.sorting import DIRECTION_ASC, DIRECTIONS, SORT_FIELDS, SORT_NAME

try:
    import pandas as pd
    import openpyxl
except ImportError:
    raise ImportError("This tool requires pandas and openpyxl. Install with: pip install pandas openpyxl")

__all__ = ['PlayerReportTool', 'main']

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('csv', 'excel', 'none')


class PlayerReportTool(FileBasedTool):
    """
    Builds player statistics reports from Freelancer save files.

    Settings come from the configuration profile and can be overridden per run:
    paths.save_dir, paths.install_dir, report.range, report.range_type,
    report.sort, report.direction and report.export.
    """

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Column headers and the record attribute behind each
    COLUMNS = [
        ("Name", "name"),
        ("System", "system"),
        ("Rank", "rank"),
        ("PvP Kills", "pvpkills"),
        ("Money", "money"),
        ("Ship", "shiparch"),
        ("Base", "base"),
        ("Faction", "faction"),
        ("Last Seen", "lastseen"),
        ("Created", "created"),
        ("Time Played", "time_played"),
        ("Bases Visited", "bases_visited"),
        ("Systems Visited", "systems_visited"),
        ("Jump Holes Visited", "holes_visited"),
        ("Missions", "missions"),
        ("Kills", "kills"),
    ]
    CSV_HEADERS = [header for header, _ in COLUMNS]
    NUMERIC_COLUMNS = ["Rank", "PvP Kills", "Money", "Time Played", "Bases Visited",
                       "Systems Visited", "Jump Holes Visited", "Missions", "Kills"]

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 lookup: Optional[ArchetypeLookup] = None) -> None:
        """
        Initialize the report tool.

        Args:
            config: Configuration dictionary from the Config class
            lookup: Prebuilt archetype lookup. When None, one is built from
                paths.install_dir on first use.
        """
        super().__init__(config)
        self.initialize_directories()
        self.lookup = lookup

    def get_lookup(self, install_dir: Optional[str] = None) -> ArchetypeLookup:
        """
        Return the archetype lookup, building it from the install directory if needed.

        Args:
            install_dir: Freelancer install directory, overrides paths.install_dir.
        """
        if self.lookup is None:
            install_dir = install_dir or self.install_dir
            if install_dir:
                self.lookup = ArchetypeLookup(self.resolve_path(install_dir))
            else:
                logger.warning("No Freelancer install directory configured; ship names will not be resolved")
                self.lookup = ArchetypeLookup()
        return self.lookup

    def to_rows(self, players: List[PlayerRecord]) -> List[Dict[str, Any]]:
        """
        Convert records to report rows keyed by column header.

        Args:
            players: The player records

        Returns:
            One dictionary per player
        """
        rows = []
        for player in players:
            row = {}
            for header, attribute in self.COLUMNS:
                value = getattr(player, attribute)
                if header in ("Last Seen", "Created"):
                    value = value.strftime(self.TIMESTAMP_FORMAT)
                row[header] = value
            rows.append(row)
        return rows

    def print_results(self, players: List[PlayerRecord]) -> None:
        """
        Log the player table.

        Args:
            players: The player records in report order
        """
        if not players:
            logger.info("No players found.")
            return

        logger.info("Players:")
        logger.info("=" * 70)
        for position, player in enumerate(players, start=1):
            logger.info(
                f"{position:3d}. {player.name or '<unnamed>'} | Rank {player.rank} | {player.money} credits | "
                f"{player.shiparch or '?'} | {player.base} | "
                f"last seen {player.lastseen.strftime(self.TIMESTAMP_FORMAT)}"
            )
        logger.info("=" * 70)
        logger.info(f"Total players: {len(players)}")

    def save_to_csv(self, players: List[PlayerRecord]) -> str:
        """
        Save the report to a timestamped CSV file in the output directory.

        Returns:
            Path to the saved CSV file
        """
        output_file = self.generate_timestamped_filename("player_report", "csv")
        return self.write_csv(self.to_rows(players), output_file, headers=self.CSV_HEADERS)

    def save_to_excel(self, players: List[PlayerRecord]) -> str:
        """
        Save the report to a timestamped Excel workbook in the output directory.

        Returns:
            Path to the saved workbook
        """
        excel_path = self.output_path_for(self.generate_timestamped_filename("player_report", "xlsx"))
        os.makedirs(os.path.dirname(excel_path), exist_ok=True)

        df = pd.DataFrame(self.to_rows(players), columns=self.CSV_HEADERS)
        for col in self.NUMERIC_COLUMNS:
            df[col] = pd.to_numeric(df[col], errors='coerce')

        with pd.ExcelWriter(excel_path, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name='Players')
            worksheet = writer.sheets['Players']

            for idx, column in enumerate(df.columns, 1):
                letter = openpyxl.utils.get_column_letter(idx)
                values = [str(v) for v in df[column].tolist() if pd.notna(v)]
                worksheet.column_dimensions[letter].width = max([len(column)] + [len(v) for v in values]) + 2
                if column in self.NUMERIC_COLUMNS:
                    for cell in worksheet[letter][1:]:
                        if cell.value is not None:
                            cell.number_format = '0' if column != "Time Played" else '0.00'

        logger.info(f"Player report written to {excel_path}")
        return excel_path

    def run(self, save_dir: Optional[str] = None, install_dir: Optional[str] = None,
            range_days: Optional[int] = None, range_type: Optional[str] = None,
            sort: Optional[str] = None, direction: Optional[str] = None,
            export: Optional[str] = None) -> Dict[str, Any]:
        """
        Run the player report.

        Args:
            save_dir: Directory containing the account save files
            install_dir: Freelancer install directory for ship names
            range_days: Only include players active (or created) within this many days
            range_type: 'LastSeen' or 'Created'
            sort: 'Name', 'Rank' or 'LastSeen'
            direction: 'Asc' or 'Desc'
            export: 'csv', 'excel' or 'none'

        Returns:
            Dictionary with the records and report results
        """
        save_dir = save_dir or self.save_dir
        if not save_dir:
            raise ValueError("Save directory is required, either directly or via configuration (paths.save_dir)")

        range_days = range_days if range_days is not None else self.get_config('report.range')
        range_type = range_type or self.get_config('report.range_type') or RANGE_LAST_SEEN
        sort = sort or self.get_config('report.sort') or SORT_NAME
        direction = direction or self.get_config('report.direction') or DIRECTION_ASC
        export = export or self.get_config('report.export') or 'csv'

        if export not in EXPORT_FORMATS:
            raise ValueError(f"Invalid export format: {export}. Use {', '.join(EXPORT_FORMATS)}.")

        logger.info("Starting player report...")
        if range_days:
            logger.info(f"Range filter: {range_type} within {range_days} days")

        extractor = PlayerStatsExtractor(self.get_lookup(install_dir))
        players = (extractor
                   .parse_player_files(self.resolve_path(save_dir), range_days, range_type)
                   .sort_player_files(sort, direction)
                   .players)

        result = {
            "success": True,
            "player_count": len(players),
            "players": players,
            "output_file": None,
        }

        self.print_results(players)

        if export == 'csv':
            result["output_file"] = self.save_to_csv(players)
        elif export == 'excel':
            result["output_file"] = self.save_to_excel(players)

        logger.info(f"Report complete: {len(players)} players")
        return result


def main():
    """
    Main entry point for the player report command line tool.
    """
    parser = argparse.ArgumentParser(
        description="Report per-player statistics from Freelancer save files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --save-dir "~/Documents/My Games/Freelancer/Accts/MultiPlayer"
    %(prog)s --range 7 --range-type LastSeen --sort Rank --direction Desc
    %(prog)s --profile my_server --export excel

Configuration:
    - paths.save_dir: Directory containing account save files
    - paths.install_dir: Freelancer install directory (for ship names)
    - general.output_path: Directory for report files
        """
    )
    parser.add_argument("--save-dir", help="Directory containing the account save files (.fl).")
    parser.add_argument("--install-dir", help="Freelancer install directory, used to resolve ship names.")
    parser.add_argument("--range", type=int, help="Only include players within this many days.")
    parser.add_argument("--range-type", choices=RANGE_TYPES, help="Timestamp used by --range (default: LastSeen).")
    parser.add_argument("--sort", choices=SORT_FIELDS, help="Field to sort by (default: Name).")
    parser.add_argument("--direction", choices=DIRECTIONS, help="Sort direction (default: Asc).")
    parser.add_argument("--export", choices=EXPORT_FORMATS, help="Report file format (default: csv).")

    FreelancerTool.add_standard_arguments(parser)
    args = parser.parse_args()

    try:
        config = PlayerReportTool.load_config(args.profile)

        tool = PlayerReportTool(config)
        result = tool.run(
            save_dir=args.save_dir,
            install_dir=args.install_dir,
            range_days=args.range,
            range_type=args.range_type,
            sort=args.sort,
            direction=args.direction,
            export=args.export,
        )

        if args.console:
            logger.info(f"Player report completed: {result['player_count']} players, output: {result['output_file']}")

        return 0 if result["success"] else 1

    except SaveFieldError as e:
        logger.error(f"Malformed save file: {e}")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
