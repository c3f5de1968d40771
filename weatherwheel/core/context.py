"""
context.py

The chart context: dataset, layout and scales built once after loading and
passed explicitly to every geometry and pointer function.
"""

from dataclasses import dataclass
from typing import Optional

from weatherwheel.core.dataset import Dataset
from weatherwheel.core.errors import EmptyDatasetError
from weatherwheel.core.scales import ScaleSet, build_scales
from weatherwheel.models.weather import Dimensions
from weatherwheel.utils.log_util import app_logger

logger = app_logger(__name__)


@dataclass(frozen=True)
class ChartContext:
    dataset: Dataset
    dimensions: Dimensions
    scales: ScaleSet


def initialize(dataset: Dataset, dimensions: Optional[Dimensions] = None) -> ChartContext:
    """
    Build the chart context from a loaded dataset.

    :param dataset: Loaded records
    :param dimensions: Layout; defaults to the configured 600px square chart
    :return: ChartContext
    :raises EmptyDatasetError: if the dataset has no records
    """
    if dimensions is None:
        dimensions = Dimensions.from_width()
    if len(dataset) == 0:
        logger.error("❌ Cannot initialize chart: dataset is empty")
        raise EmptyDatasetError("Dataset has no records")

    scales = build_scales(dataset, dimensions)
    logger.info(
        f"Initialized chart for {len(dataset)} records, bounded radius {dimensions.bounded_radius}"
    )
    return ChartContext(dataset=dataset, dimensions=dimensions, scales=scales)
