"""
Fixed-width table rendering for Trials reports.

Each text column is as wide as its longest value across the rows, so nothing
is ever truncated. The name column carries a profile link. Discord shows the
link markup verbatim inside a code block, so the whole link is what gets padded.
"""

from typing import Callable, Sequence

from destiny_bot.constants import TableConstants
from destiny_bot.data_models.report import TrialsRow
from destiny_bot.services import classifier
from destiny_bot.utils.formatting import code_block, hyperlink


def column_width(rows: Sequence[TrialsRow], value: Callable[[TrialsRow], str]) -> int:
    """Length of the longest rendered value of a column."""
    return max((len(value(row)) for row in rows), default=0)


def format_rating(elo: int) -> str:
    return str(elo).rjust(TableConstants.RATING_WIDTH)


def format_ratio(kd: float) -> str:
    return str(kd).ljust(TableConstants.RATIO_WIDTH, TableConstants.RATIO_FILL)


def primary_label(row: TrialsRow) -> str:
    return classifier.weapon_label(classifier.primary(row.weapons))


def special_label(row: TrialsRow) -> str:
    return classifier.weapon_label(classifier.special(row.weapons))


def heavy_label(row: TrialsRow) -> str:
    return classifier.weapon_label(classifier.heavy(row.weapons))


class TrialsReportRenderer:
    """Turns report rows into a monospace Discord message."""

    def __init__(self, profile_client):
        self.profile_client = profile_client

    def render(self, rows: Sequence[TrialsRow], on_xbox: bool) -> str:
        links = [
            hyperlink(self.profile_client.get_profile_url(row.name, on_xbox), row.name)
            for row in rows
        ]
        name_width = max((len(link) for link in links), default=0)
        subclass_width = column_width(rows, lambda row: row.subclass)
        primary_width = column_width(rows, primary_label)
        special_width = column_width(rows, special_label)
        heavy_width = column_width(rows, heavy_label)

        gap = TableConstants.COLUMN_GAP
        lines = []
        for row, link in zip(rows, links):
            line = (
                f"{link.ljust(name_width)}"
                f"{gap}{format_rating(row.participant.elo)}"
                f"{gap}{format_ratio(row.participant.kd)}"
                f"{gap}{row.subclass.ljust(subclass_width)}"
                f"{gap}{TableConstants.SECTION_SEPARATOR}"
                f"{gap}{primary_label(row).ljust(primary_width)}"
                f"{gap}{special_label(row).ljust(special_width)}"
                f"{gap}{heavy_label(row).ljust(heavy_width)}"
            )
            exotic_armor = classifier.find_exotic_armor(row.armors)
            if exotic_armor is not None:
                line += f"{gap}{TableConstants.SECTION_SEPARATOR}{gap}{exotic_armor.name}"
            lines.append(line)
        return code_block('\n'.join(lines))
