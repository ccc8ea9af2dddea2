"""
Freelancer Reporting Tools

Command line tools built on the statistics extractor.
"""

from .player_report import PlayerReportTool

__all__ = [
    'PlayerReportTool',
]
