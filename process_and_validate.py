"""
This module loads the month of every accident for a list of years.
Each year is read independently, tagged with the year it came from and reduced
to its (MONTH, year) columns. Years without a readable file are reported and skipped.
"""

import os
import warnings
from typing import Iterable, List, Optional, Union

import polars as pl

from data_loader import fars_read, make_filename


def read_month_year(year: Union[str, int], data_dir: str = ".") -> Optional[pl.DataFrame]:
    """
    Read one year of records and keep only the MONTH and year columns.

    Args:
        year (str or int): The year to read.
        data_dir (str): Directory holding the yearly files.

    Returns:
        pl.DataFrame or None: The tagged month/year table, or None if the year
        could not be loaded (a warning is issued).

    Raises:
        ValueError: If year cannot be converted to an integer.
    """
    file = os.path.join(data_dir, make_filename(year))
    year = int(year)
    try:
        dat = fars_read(file)
        return dat.with_columns(pl.lit(year, dtype=pl.Int64).alias("year")).select(
            pl.col("MONTH").cast(pl.Int64), "year"
        )
    except Exception:
        warnings.warn(f"invalid year: {year}")
        return None


def fars_read_years(
    years: Iterable[Union[str, int]], data_dir: str = "."
) -> List[Optional[pl.DataFrame]]:
    """
    Read the months and years from FARS data for a given list of years.

    Args:
        years (iterable): The years to read, as strings or integers.
        data_dir (str): Directory holding the yearly files.

    Returns:
        list: One entry per input year, in order. Each entry is a DataFrame with
        the columns MONTH and year, or None when that year's file is missing.
    """
    return [read_month_year(year, data_dir) for year in years]


def validate_data(dat_list: List[Optional[pl.DataFrame]], summary: pl.DataFrame) -> bool:
    """
    Check that the summary counts account for every loaded record.
    """
    total_rows = sum(df.height for df in dat_list if df is not None)
    count_columns = [col for col in summary.columns if col != "MONTH"]
    total_counts = (
        int(summary.select(pl.sum_horizontal(count_columns)).to_series().sum())
        if count_columns and summary.height > 0
        else 0
    )
    if total_rows == total_counts:
        print("No records were dropped during summarizing")
    else:
        print(
            f"Records were dropped during summarizing. Original: {total_rows}, Summarized: {total_counts}"
        )
    return total_rows == total_counts
