"""
This module summarizes FARS accident records into a months-by-years count table
and exports DataFrames to disk.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import polars as pl

from process_and_validate import fars_read_years


def count_by_month(dat_list: List[Optional[pl.DataFrame]]) -> pl.DataFrame:
    """
    Combine the tagged month/year tables and count accidents per (year, MONTH).
    Missing years contribute no rows.
    """
    frames = [df for df in dat_list if df is not None]
    if not frames:
        return pl.DataFrame(
            schema={"year": pl.Int64, "MONTH": pl.Int64, "n": pl.Int64}
        )

    return (
        pl.concat(frames, how="vertical")
        .group_by(["year", "MONTH"])
        .agg(pl.len().cast(pl.Int64).alias("n"))
    )


def spread_counts(counts: pl.DataFrame) -> pl.DataFrame:
    """
    Reshape long (year, MONTH, n) counts into one row per month and one column per year.

    Months are sorted ascending, year columns ascending. Combinations without
    accidents are left null.
    """
    cells = {
        (month, year): n
        for year, month, n in counts.select("year", "MONTH", "n").iter_rows()
    }
    months = sorted({month for month, _ in cells})
    years = sorted({year for _, year in cells})

    data = {"MONTH": months}
    schema = {"MONTH": pl.Int64}
    for year in years:
        data[str(year)] = [cells.get((month, year)) for month in months]
        schema[str(year)] = pl.Int64

    return pl.DataFrame(data, schema=schema)


def fars_summarize_years(
    years: Iterable[Union[str, int]], data_dir: str = "."
) -> pl.DataFrame:
    """
    Read FARS data and summarize monthly accident counts for a given list of years.

    Args:
        years (iterable): The years to summarize, as strings or integers.
        data_dir (str): Directory holding the yearly files.

    Returns:
        pl.DataFrame: A MONTH column followed by one count column per year.
        Years whose file is missing are warned about and left out.
    """
    dat_list = fars_read_years(years, data_dir)
    return spread_counts(count_by_month(dat_list))


def export_dataframe(
    df: pl.DataFrame,
    file_path: Union[str, Path],
    format: str = "csv",
    options: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Exports a Polars DataFrame to a file in a few different formats.

    Args:
        df (pl.DataFrame): The Polars DataFrame to export.
        file_path (str or Path): The path where the file will be saved.
        format (str): The export format. Options: 'csv', 'parquet', 'json'. Default is 'csv'.
        options (dict, optional): Additional options for the export function.

    Returns:
        None

    Raises:
        ValueError: If an unsupported format is specified.
    """
    writers = {
        "csv": df.write_csv,
        "parquet": df.write_parquet,
        "json": df.write_json,
    }
    if format not in writers:
        raise ValueError(f"Unsupported format: {format}")

    file_path = Path(file_path)

    # Ensure the directory exists
    file_path.parent.mkdir(parents=True, exist_ok=True)

    default_options = {
        "csv": {"separator": ",", "include_header": True},
        "parquet": {"compression": "snappy"},
        "json": {},
    }

    export_options = dict(default_options[format])
    if options:
        export_options.update(options)

    writers[format](file_path, **export_options)
    print(f"DataFrame successfully exported to {file_path}")
