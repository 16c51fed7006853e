"""
This module accesses yearly accident records from the Fatality Analysis Reporting System (FARS).

It builds the canonical filenames of the yearly files, reads a single file into a
Polars DataFrame, and downloads the yearly files from a listing page to a specified
file path on the user's local computer.
"""

import errno
import os
import re
from typing import Iterable, Optional, Union
from urllib.parse import urljoin

import pandas as pd
import polars as pl
import requests
from bs4 import BeautifulSoup

FILENAME_PATTERN = re.compile(r"^accident_(\d{4})\.csv\.bz2$")


def make_filename(year: Union[str, int]) -> str:
    """
    Generate a filename in the form of 'accident_<year>.csv.bz2'.

    Args:
        year (str or int): The year of the records. It is converted to an integer.

    Returns:
        str: The generated filename.

    Raises:
        ValueError: If year cannot be converted to an integer.
    """
    year = int(year)
    return "accident_%d.csv.bz2" % year


def fars_read(filename: Union[str, os.PathLike]) -> pl.DataFrame:
    """
    Read the FARS file located at filename.

    Args:
        filename (str or PathLike): The path to the (optionally compressed) CSV file.

    Returns:
        pl.DataFrame: One row per record, columns in the order of the file header.

    Raises:
        FileNotFoundError: If filename does not exist.
    """
    if not os.path.exists(filename):
        raise FileNotFoundError(
            errno.ENOENT, f"file '{filename}' does not exist", str(filename)
        )

    # Compression is inferred from the suffix; low_memory avoids mixed-type warnings
    data = pd.read_csv(filename, low_memory=False)
    return pl.from_pandas(data)


def extract_year(file_name: str) -> Optional[int]:
    """
    Extract the year from a FARS filename.
    """
    match = FILENAME_PATTERN.match(os.path.basename(file_name))
    if match:
        return int(match.group(1))
    return None


def get_data(
    url: str, base_path: str, years: Optional[Iterable[Union[str, int]]] = None
) -> None:
    """
    Download the yearly FARS accident files linked from a listing page.

    Args:
        url (str): The webpage where the files are accessible.
        base_path (str): The directory where the files will be saved.
        years (iterable, optional): Only download these years. Defaults to every year found.

    Returns:
        None
    """
    wanted = {int(year) for year in years} if years is not None else None

    try:
        # Download the webpage
        response = requests.get(url)
        response.raise_for_status()

        # Parse the webpage
        soup = BeautifulSoup(response.text, "html.parser")

        os.makedirs(base_path, exist_ok=True)

        files_found = False

        for link in soup.find_all("a"):
            href = link.get("href", "")
            year = extract_year(href)
            if year is None or (wanted is not None and year not in wanted):
                continue

            files_found = True
            destination = os.path.join(base_path, make_filename(year))
            if os.path.exists(destination):
                print(f"File already exists, skipping: {destination}")
                continue

            file_url = urljoin(url, href)
            file_response = requests.get(file_url)
            file_response.raise_for_status()

            with open(destination, "wb") as f:
                f.write(file_response.content)
            print(f"Downloaded {file_url} to: {destination}")

        if not files_found:
            print("No accident files found at the given endpoint.")

    except requests.RequestException as e:
        print(f"Error downloading data: {e}")
    except OSError as e:
        print(f"Error creating directory or saving files: {e}")
