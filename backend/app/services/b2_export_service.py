"""
B2 Cloud Export Service
Builds Yamato B2 Cloud import CSVs from stored orders

Handles:
- Column selection (projection onto the column registry)
- Per-order service code overrides
- Selection order and missing-order reporting
- In-memory CSV encoding (no files are written)

Author: TM3
Date: 2026-10-17
"""
import csv
import io
import logging
from datetime import date, datetime
from typing import Dict, List, Mapping, Optional, Sequence

import psycopg2
from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import (
    DuplicateSelectionError,
    EncodingError,
    NoColumnsError,
    NoSelectionError,
    UpstreamStoreError,
)
from app.domain.b2 import (
    CarrierConstants,
    ColumnDefinition,
    ExportRequest,
    ExportResult,
    ShipDatePolicy,
)
from app.domain.order import Order
from app.repositories.order_repository import OrderRepository
from app.services import b2_columns
from app.services.b2_formatting import resolve_service_type
from app.services.b2_record_mapper import B2RecordMapper

logger = logging.getLogger(__name__)


CSV_ENCODING = "utf-8"
CSV_LINE_TERMINATOR = "\r\n"


def resolve_columns(column_ids: Optional[Sequence[str]]) -> List[ColumnDefinition]:
    """
    Decide which registry columns an export will contain

    None or [] selects the whole registry. A list holding only blank ids is
    rejected; unknown ids raise UnknownColumnError from the registry.
    """
    if not column_ids:
        return list(b2_columns.all_columns())

    cleaned = [column_id.strip() for column_id in column_ids if column_id and column_id.strip()]
    if not cleaned:
        raise NoColumnsError()

    columns = b2_columns.resolve(cleaned)
    if not columns:
        raise NoColumnsError()
    return columns


def build_b2_csv(
    orders: Sequence[Order],
    column_ids: Optional[Sequence[str]] = None,
    service_overrides: Optional[Mapping[int, Optional[str]]] = None,
    *,
    mapper: B2RecordMapper,
) -> bytes:
    """
    Encode orders as a B2 Cloud CSV

    Args:
        orders: Orders in output order (manifest numbers follow this order)
        column_ids: Columns to include; None/[] means every column
        service_overrides: Order ID -> requested service code
        mapper: Record mapper carrying the batch's constants and run date

    Returns:
        UTF-8 encoded CSV bytes: header of column titles, one row per order

    Raises:
        NoSelectionError: orders is empty
        NoColumnsError / UnknownColumnError: bad column selection
        EncodingError: a row could not be written
    """
    if not orders:
        raise NoSelectionError()

    columns = resolve_columns(column_ids)

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator=CSV_LINE_TERMINATOR)

    try:
        writer.writerow([column.title for column in columns])

        for sequence, order in enumerate(orders, start=1):
            service_type = resolve_service_type(order.id, service_overrides)
            row = mapper.map(order, sequence, service_type)
            writer.writerow([row[column.id] for column in columns])

        return buffer.getvalue().encode(CSV_ENCODING)

    except (csv.Error, UnicodeEncodeError, KeyError) as e:
        raise EncodingError(f"Failed to encode B2 CSV: {e}") from e

    finally:
        buffer.close()


class B2ExportService:
    """
    Service for exporting stored orders to B2 Cloud

    Stateless across calls; a new B2RecordMapper is built for every export so
    manifest numbers restart at 0001 each time.
    """

    def __init__(
        self,
        repository: Optional[OrderRepository] = None,
        constants: Optional[CarrierConstants] = None,
        ship_date_policy: Optional[ShipDatePolicy] = None,
        filename_prefix: Optional[str] = None,
    ):
        self.repository = repository or OrderRepository()
        self.constants = constants or settings.carrier_constants()
        self.ship_date_policy = ship_date_policy or settings.B2_SHIP_DATE_POLICY
        self.filename_prefix = filename_prefix or settings.B2_EXPORT_FILENAME

    def _mapper(self, run_date: Optional[date] = None) -> B2RecordMapper:
        return B2RecordMapper(self.constants, self.ship_date_policy, run_date)

    def _filename(self, now: datetime) -> str:
        return f"{self.filename_prefix}_{now.strftime('%Y%m%d_%H%M%S')}.csv"

    def export(self, request: ExportRequest, now: Optional[datetime] = None) -> ExportResult:
        """
        Export the selected orders in selection order

        Args:
            request: Selections (order ids + optional overrides) and column ids
            now: Clock override for tests (file name and run date)

        Returns:
            ExportResult with payload and missing-order bookkeeping
        """
        if not request.selections:
            raise NoSelectionError()

        order_ids = [selection.order_id for selection in request.selections]
        duplicates = {order_id for order_id in order_ids if order_ids.count(order_id) > 1}
        if duplicates:
            raise DuplicateSelectionError(duplicates)

        # Validate columns before touching the database
        resolve_columns(request.columns)

        found = self._fetch(lambda: self.repository.find_by_ids(order_ids))
        by_id: Dict[int, Order] = {order.id: order for order in found}
        orders = [by_id[order_id] for order_id in order_ids if order_id in by_id]
        missing = [order_id for order_id in order_ids if order_id not in by_id]

        if missing:
            logger.warning(
                f"B2 export: {len(missing)} of {len(order_ids)} selected orders not found: {missing}"
            )
            if not orders:
                raise NoSelectionError(f"None of the selected orders exist: {missing}")

        return self._build(orders, request.columns, request.service_overrides(), len(order_ids), missing, now)

    def export_all(self, now: Optional[datetime] = None) -> ExportResult:
        """Export every stored order, most recent first, with all columns"""
        orders = self._fetch(self.repository.find_all)
        return self._build(orders, None, None, len(orders), [], now)

    def _fetch(self, query) -> List[Order]:
        try:
            return query()
        except (psycopg2.Error, RuntimeError, ValidationError) as e:
            logger.error(f"B2 export: error reading orders: {e}")
            raise UpstreamStoreError(f"Error reading orders: {e}") from e

    def _build(
        self,
        orders: Sequence[Order],
        column_ids: Optional[Sequence[str]],
        overrides: Optional[Mapping[int, Optional[str]]],
        requested_count: int,
        missing: List[int],
        now: Optional[datetime],
    ) -> ExportResult:
        now = now or datetime.now()
        try:
            payload = build_b2_csv(orders, column_ids, overrides, mapper=self._mapper(now.date()))
        except EncodingError as e:
            logger.error(f"B2 export: {e}")
            raise

        logger.info(f"B2 export: {len(orders)} rows encoded ({len(payload)} bytes)")
        return ExportResult(
            payload=payload,
            filename=self._filename(now),
            requested_count=requested_count,
            exported_count=len(orders),
            missing_ids=missing,
        )
