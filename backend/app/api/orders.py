"""
Orders API Endpoints
Handles order intake, listing and the Yamato B2 Cloud CSV export

Author: TM3
Date: 2026-10-17
"""
import logging
from typing import List

import psycopg2
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from app.core.exceptions import EncodingError, ExportValidationError, UpstreamStoreError
from app.domain.b2 import ColumnDefinition, ExportRequest, ExportResult
from app.domain.order import OrderIntake
from app.repositories.order_repository import OrderRepository
from app.services import b2_columns
from app.services.b2_export_service import B2ExportService

logger = logging.getLogger(__name__)

router = APIRouter()

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


@router.post("/")
def create_order(intake: OrderIntake):
    """
    Store an order sent by the order form

    Blank fields are stored as NULL.
    """
    try:
        repo = OrderRepository()
        order_id = repo.insert(intake)
        logger.info(f"Order {order_id} stored")
        return {"ok": True, "id": order_id}

    except psycopg2.Error as e:
        logger.error(f"Error storing order: {e}")
        raise HTTPException(status_code=500, detail=f"Error storing order: {str(e)}")


@router.get("/")
def get_orders():
    """
    Get all orders, most recent first
    """
    try:
        repo = OrderRepository()
        orders = repo.find_all()

        return {
            "status": "success",
            "count": len(orders),
            "data": [order.to_dict() for order in orders]
        }

    except psycopg2.Error as e:
        logger.error(f"Error fetching orders: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching orders: {str(e)}")


@router.get("/csv/columns", response_model=List[ColumnDefinition])
def get_csv_columns():
    """
    List every exportable B2 Cloud column as [{id, title}] in output order

    Used by the admin UI to build the `columns` selection.
    """
    return list(b2_columns.all_columns())


@router.post("/csv")
def export_orders_csv(request: ExportRequest):
    """
    Export selected orders as a B2 Cloud import CSV

    Body:
        selections: [{id, serviceTypeOverride?}] in the order rows should appear
        columns: column ids to include (empty = all columns)

    Returns:
        text/csv attachment. X-Export-Requested / X-Export-Rows report how many
        orders were asked for and written; X-Export-Missing-Ids lists selected
        ids that do not exist.
    """
    service = B2ExportService()
    return _run_export(lambda: service.export(request))


@router.get("/csv")
def export_all_orders_csv():
    """
    Export every order (most recent first) with all columns

    Backs the admin screen's "download all" button.
    """
    service = B2ExportService()
    return _run_export(service.export_all)


def _run_export(export) -> Response:
    try:
        result = export()

    except ExportValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())

    except UpstreamStoreError as e:
        raise HTTPException(status_code=502, detail={"code": "upstream_store_error", "message": str(e)})

    except EncodingError as e:
        raise HTTPException(status_code=500, detail={"code": "encoding_error", "message": str(e)})

    return _csv_response(result)


def _csv_response(result: ExportResult) -> Response:
    headers = {
        "Content-Disposition": f'attachment; filename="{result.filename}"',
        "X-Export-Requested": str(result.requested_count),
        "X-Export-Rows": str(result.exported_count),
    }
    if not result.is_complete:
        headers["X-Export-Missing-Ids"] = ",".join(str(i) for i in result.missing_ids)

    return Response(content=result.payload, media_type=CSV_MEDIA_TYPE, headers=headers)
