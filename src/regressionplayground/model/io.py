"""
Input/Output Manager (CSV)
Handles exporting the current dataset to a .csv file.
"""
import csv
import io
import logging

from regressionplayground.model.problem import Dataset

# Get module logger
logger = logging.getLogger(__name__)

CSV_HEADER = ("x", "y")


class EmptyDatasetError(ValueError):
    """Raised when there is nothing to export."""


def serialize_csv(dataset: Dataset) -> str:
    """
    Serialize points as ``x,y`` rows with 4 decimal places.

    Raises:
        EmptyDatasetError: If the dataset holds no points.
    """
    if len(dataset) == 0:
        raise EmptyDatasetError("No data to download")

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for point in dataset:
        writer.writerow((f"{point.x:.4f}", f"{point.y:.4f}"))
    return buffer.getvalue()


class IOManager:

    @staticmethod
    def export_csv(dataset: Dataset, filepath: str) -> None:
        """Write the dataset to ``filepath``. Nothing is written for an empty dataset."""
        # Serialize first so an empty dataset never creates a file
        content = serialize_csv(dataset)

        logger.info(f"Exporting {len(dataset)} points to: {filepath}")
        try:
            with open(filepath, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.exception(f"Failed to export dataset: {e}")
            raise

        logger.info(f"Dataset exported to: {filepath}")
