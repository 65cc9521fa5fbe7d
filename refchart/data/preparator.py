"""
Series preparation pipeline for converting raw records to samples.

This module provides the SeriesPreparator class that parses every raw
``{timestamp, price}`` record of a batch into a Sample. A batch is accepted
or rejected as a whole: one bad record aborts the render pass, so a chart is
never drawn from a partially valid series.
"""

from typing import Any, Iterable, Optional

from ..config.defaults import DataParams
from ..errors import DataQualityError, MalformedDataError, MissingDataError
from ..logging import get_logger
from .models import PreparationResult, Sample
from .parsers import InvalidPriceError, InvalidTimestampError, parse_price, parse_timestamp

logger = get_logger(__name__)


class SeriesPreparator:
    """
    Turns raw price records into an ordered tuple of samples.

    Input order is kept as-is; records are expected to be chronological
    already.
    """

    def __init__(self, params: Optional[DataParams] = None):
        self.params = params or DataParams()

    def prepare_samples(self, records: Iterable[dict[str, Any]]) -> list[Sample]:
        """
        Parse records into samples, raising on the first invalid record.

        Raises:
            MissingDataError: If a record lacks the timestamp or price field
            MalformedDataError: If a timestamp or price cannot be parsed
        """
        ts_field = self.params.timestamp_field
        price_field = self.params.price_field
        samples = []

        for i, record in enumerate(records):
            if not isinstance(record, dict):
                raise MalformedDataError(
                    f"Record at index {i} must be a mapping",
                    raw_data=repr(record),
                    expected_format="{timestamp, price}",
                    index=i,
                )

            for name in (ts_field, price_field):
                if name not in record:
                    raise MissingDataError(
                        f"Record at index {i} has no '{name}' field",
                        field=name,
                        context={"index": i},
                    )

            try:
                ts = parse_timestamp(record[ts_field])
            except InvalidTimestampError as e:
                raise MalformedDataError(
                    str(e),
                    raw_data=repr(record[ts_field]),
                    expected_format="ISO-8601",
                    index=i,
                )

            try:
                price = parse_price(record[price_field])
            except InvalidPriceError as e:
                raise MalformedDataError(
                    str(e),
                    raw_data=repr(record[price_field]),
                    expected_format="finite number",
                    index=i,
                )

            samples.append(Sample(ts=ts, price=price))

        return samples

    def prepare(self, records: Iterable[dict[str, Any]]) -> PreparationResult:
        """
        Parse a batch of records, reporting failures instead of raising.

        Returns:
            PreparationResult with samples, or an error result when any
            record is invalid
        """
        try:
            samples = self.prepare_samples(records)
        except DataQualityError as e:
            index = getattr(e, "index", None)
            if index is None:
                index = e.context.get("index")
            logger.error(
                "Data contains invalid values",
                error=str(e),
                error_type=type(e).__name__,
                index=index,
                raw_data=getattr(e, "raw_data", None),
            )
            return PreparationResult.error(str(e), index=index)

        logger.debug("Series prepared", sample_count=len(samples))
        return PreparationResult.success_with_samples(samples)
