"""
Filtering CSV rows with sequential composition.

Keeps only the rows of some comma-separated text that have exactly three
values::

    >>> process_csv("Ace,Ale,Are\\nBag,Beg,Bug\\nCar,Cat")
    [['Ace', 'Ale', 'Are'], ['Bag', 'Beg', 'Bug']]
"""

import re
from functools import partial
from typing import List, Optional

from function_composition.config import CsvConfig
from function_composition.core import Pipeline, pipe
from function_composition.utils import printer

_NEWLINES = re.compile("[\n\x0b\x0c\r\x85\u2028\u2029]")


def split_lines(text: str) -> List[str]:
    """Split on every newline character; "\\r\\n" produces an empty line."""
    return _NEWLINES.split(text)


def create_rows(lines: List[str], separator: str = ",") -> List[List[str]]:
    return [line.split(separator) for line in lines]


def remove_invalid_rows(rows: List[List[str]], row_length: int = 3) -> List[List[str]]:
    return [row for row in rows if len(row) == row_length]


process_csv = pipe(split_lines, create_rows, remove_invalid_rows)


def make_csv_processor(config: Optional[CsvConfig] = None, verbose: bool = False) -> Pipeline:
    """
    Build the CSV chain for a given configuration.

    Parameters:
    -----------
    config : CsvConfig, optional
        Separator and expected row length
    verbose : bool
        Print the value after every step

    Returns:
    --------
    Pipeline
        text -> valid rows
    """
    config = config or CsvConfig()
    steps = [
        ("lines", split_lines),
        ("rows", partial(create_rows, separator=config.separator)),
        ("valid rows", partial(remove_invalid_rows, row_length=config.row_length)),
    ]

    processor = Pipeline()
    for label, step in steps:
        processor = processor.then(step)
        if verbose:
            processor = processor.tap(printer(label))
    return processor
