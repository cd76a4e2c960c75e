"""
B2 Cloud Export Domain Models

Types shared by the Yamato B2 Cloud export engine: column descriptors,
carrier code enumerations, consignor constants and the export request.

Author: TM3
Date: 2026-10-17
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceType(str, Enum):
    """送り状種類 - carrier service code"""

    STANDARD = "0"  # 発払い (standard parcel)
    COMPACT = "A"  # compact / merchandise mail


class TimeSlot(str, Enum):
    """お届け時間帯 - two-hour delivery windows accepted by B2 Cloud"""

    MORNING = "0812"
    NOON = "1214"
    AFTERNOON = "1416"
    LATE_AFTERNOON = "1618"
    EVENING = "1820"
    NIGHT = "1921"


class ShipDatePolicy(str, Enum):
    """How 出荷予定日 is filled: left blank, or set to the export run date"""

    BLANK = "blank"
    RUN_DATE = "run_date"


class ColumnDefinition(BaseModel):
    """
    One exportable B2 Cloud column

    Fields:
        id: Stable machine id, referenced by callers when selecting columns
        title: Header text printed in the CSV (what B2 Cloud matches on)
    """

    id: str = Field(..., description="Stable column id")
    title: str = Field(..., description="CSV header title")

    model_config = ConfigDict(frozen=True)


class CarrierConstants(BaseModel):
    """
    Consignor (発送元) and billing values printed on every exported row

    Immutable for the life of an export; built from deployment settings.
    """

    sender_phone: str = ""
    sender_zip: str = ""
    sender_address: str = ""
    sender_name: str = ""
    billing_customer_code: str = ""
    freight_manage_no: str = ""
    item_name: str = ""
    item_quantity: int = Field(1, ge=1)
    honorific: str = "様"

    model_config = ConfigDict(frozen=True)


class ExportSelection(BaseModel):
    """An order picked for export, optionally forcing its service code"""

    order_id: int = Field(..., alias="id", description="Order ID")
    service_type_override: Optional[str] = Field(
        None,
        alias="serviceTypeOverride",
        description="Service code to force for this order ('0' or 'A')"
    )

    model_config = ConfigDict(populate_by_name=True)


class ExportRequest(BaseModel):
    """Body of POST /api/v1/orders/csv"""

    selections: List[ExportSelection] = Field(default_factory=list)
    columns: List[str] = Field(default_factory=list, description="Column ids to include")

    def service_overrides(self) -> dict:
        """Map order id -> requested override (only selections that carry one)"""
        return {
            selection.order_id: selection.service_type_override
            for selection in self.selections
            if selection.service_type_override is not None
        }


class ExportResult(BaseModel):
    """Encoded CSV plus the bookkeeping the API reports back"""

    payload: bytes
    filename: str
    requested_count: int
    exported_count: int
    missing_ids: List[int] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing_ids
