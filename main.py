"""
FARS Accident Data Pipeline

This pipeline summarizes and visualizes accident records from the
Fatality Analysis Reporting System (FARS).
It performs the following steps:
1. Downloads the yearly accident files from a specified URL
2. Counts accidents by month for each requested year
3. Validates that every loaded record was counted
4. Exports the monthly summary to a parquet file
5. Plots the accidents of one state on a map

The pipeline uses various custom modules for each step of the process.
"""

import os
import sys

from data_loader import get_data, make_filename
from process_and_validate import fars_read_years, validate_data
from summarize_and_export import count_by_month, export_dataframe, spread_counts
from filter_and_visualize import fars_map_state


def main(url=None):
    """
    Main function to execute the FARS accident data pipeline.

    This function orchestrates the entire process from data download to visualization.
    It prints progress messages at each step for user feedback.

    Args:
        url (str, optional): Listing page linking the yearly accident files.
            When omitted, the files already in the data directory are used.
    """

    # Define constants
    DATA_DIR = "./fars_data"
    YEARS = [2013, 2014, 2015]
    STATE = 1
    OUTPUT_FILE = "fars_monthly_summary.parquet"

    # Step 1: Fetch the data
    if url:
        print("Starting data download...")
        get_data(url, DATA_DIR, YEARS)
        print("Data download complete.")
    else:
        print(f"No download URL given, using the files in {DATA_DIR}")

    # Step 2: Count accidents by month and year
    print("Starting monthly summary...")
    dat_list = fars_read_years(YEARS, DATA_DIR)
    summary = spread_counts(count_by_month(dat_list))
    print(f"Summary shape: {summary.shape}")

    # Step 3: Validate the summary
    is_valid = validate_data(dat_list, summary)
    print(f"Summary validation {'successful' if is_valid else 'failed'}.")

    # Step 4: Export the summary as a parquet file
    print(f"Exporting summary to {OUTPUT_FILE}...")
    export_dataframe(summary, OUTPUT_FILE, format="parquet")
    print("Data export complete.")

    # Step 5: Visualize the accidents of one state
    print("Creating state map...")
    for year in YEARS:
        if os.path.exists(os.path.join(DATA_DIR, make_filename(year))):
            fars_map_state(STATE, year, data_dir=DATA_DIR)
            break
    else:
        print("No accident files available to map.")
    print("Map creation complete.")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
