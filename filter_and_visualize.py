import os
from typing import Union

import numpy as np
import plotly.express as px
import polars as pl

from data_loader import fars_read, make_filename

# Values above these are used by FARS to mark a missing coordinate
MAX_LONGITUDE = 900
MAX_LATITUDE = 90


def filter_state(df: pl.DataFrame, state_num: Union[str, int]) -> pl.DataFrame:
    """
    Returns a dataframe that only includes accidents in the given state.

    Args:
    df (pl.DataFrame): Input Polars DataFrame with a STATE column
    state_num (str or int): FARS state code

    Returns:
    pl.DataFrame: Filtered DataFrame

    Raises:
    ValueError: If the state code does not appear in the data.
    """
    state_num = int(state_num)
    if state_num not in df["STATE"].unique().to_list():
        raise ValueError(f"invalid STATE number: {state_num}")

    return df.filter(pl.col("STATE") == state_num)


def clean_coordinates(df: pl.DataFrame) -> pl.DataFrame:
    """
    Replace the sentinel LONGITUD and LATITUDE values with nulls.
    """
    return df.with_columns(
        pl.when(pl.col("LONGITUD") > MAX_LONGITUDE)
        .then(None)
        .otherwise(pl.col("LONGITUD"))
        .cast(pl.Float64)
        .alias("LONGITUD"),
        pl.when(pl.col("LATITUDE") > MAX_LATITUDE)
        .then(None)
        .otherwise(pl.col("LATITUDE"))
        .cast(pl.Float64)
        .alias("LATITUDE"),
    )


def fars_map_state(
    state_num: Union[str, int],
    year: Union[str, int],
    data_dir: str = ".",
    output_dir: str = ".",
) -> None:
    """
    Plots a map of the accidents in the given state and year.

    Args:
        state_num (str or int): FARS state code.
        year (str or int): The year of the records.
        data_dir (str): Directory holding the yearly files.
        output_dir (str): Directory where the HTML map is written.

    Returns:
        None: Saves the map as an HTML file. Nothing is drawn if no accidents are found.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        ValueError: If the state code does not appear in that year's data.
    """
    data = fars_read(os.path.join(data_dir, make_filename(year)))
    state_num = int(state_num)

    data_sub = filter_state(data, state_num)
    if data_sub.height == 0:
        print("no accidents to plot")
        return None

    # Points without a usable coordinate are left off the map
    pan_df = clean_coordinates(data_sub).to_pandas()
    pan_df = pan_df.dropna(subset=["LATITUDE", "LONGITUD"])

    fig = px.scatter_geo(
        pan_df,
        lat="LATITUDE",
        lon="LONGITUD",
        scope="usa",
        title=f"Accidents in state {state_num}, {int(year)}",
        height=600,
    )

    # Zoom the map to the accidents
    if not pan_df.empty:
        fig.update_geos(
            lataxis_range=[float(np.min(pan_df["LATITUDE"])), float(np.max(pan_df["LATITUDE"]))],
            lonaxis_range=[float(np.min(pan_df["LONGITUD"])), float(np.max(pan_df["LONGITUD"]))],
        )
    fig.update_traces(marker={"size": 3})
    fig.update_layout(margin={"r": 0, "t": 40, "l": 0, "b": 0})

    os.makedirs(output_dir, exist_ok=True)
    output_file = os.path.join(
        output_dir, f"fars_map_state_{state_num}_{int(year)}.html"
    )
    fig.write_html(output_file)

    print(f"Map saved as {output_file}")
