from .csv_export import CSV_HEADER, csv_filename, round_to_csv
from .json_export import json_filename, round_report, round_to_json

__all__ = [
    "CSV_HEADER",
    "csv_filename",
    "round_to_csv",
    "json_filename",
    "round_report",
    "round_to_json",
]
