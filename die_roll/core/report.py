"""
report.py
Formats a FrequencyTable as the line-oriented percentage distribution printed by the CLI.
Related modules:
- frequency.py: Produces the FrequencyTable consumed here.
- cli.py: Prints the report after a successful run.
"""

import sys
from typing import List, TextIO

from .frequency import FrequencyTable

LINE_TEMPLATE = "Value: {value}, frequency: {count}, percentage: {percentage}%"


def percentage(count: int, trials: int) -> float:
    return 100.0 * count / trials


def format_percentage(value: float) -> str:
    # whole numbers print without a trailing ".0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_report(frequency: FrequencyTable, trials: int) -> List[str]:
    """
    Build one report line per observed face, in ascending face order.
    Args:
        frequency (FrequencyTable): Completed tally.
        trials (int): Trial count the percentages are relative to.
    Returns:
        list[str]: Report lines (empty when nothing was observed).
    """
    return [
        LINE_TEMPLATE.format(
            value=face,
            count=count,
            percentage=format_percentage(percentage(count, trials)),
        )
        for face, count in frequency.items()
    ]


def print_report(frequency: FrequencyTable, trials: int, file: TextIO = None) -> None:
    out = sys.stdout if file is None else file
    for line in format_report(frequency, trials):
        print(line, file=out)
