import os
import logging
from datetime import datetime

logger = logging.getLogger(__name__)


def save_suite_summary(summary, folder="results", suite_name="suite"):
    """
    Write a suite summary (DataFrame from suite_summary) as CSV.

    Args:
        summary (pd.DataFrame): one row per unit
        folder (str): root output folder
        suite_name (str): sub-folder and file name stem

    Returns:
        str: path of the written file
    """
    os.makedirs(os.path.join(folder, suite_name), exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = f"summary_{suite_name}_{timestamp}.csv"
    full_path = os.path.join(folder, suite_name, filename)
    summary.to_csv(full_path, index=False)
    logger.info(f"[SAVE] Summary written: {full_path}")
    return full_path
