"""
B2 Record Mapper

Turns one Order into a full B2 Cloud row keyed by column id. The row always
carries every registry column; projection to the caller's columns happens in
the export builder.

Author: TM3
Date: 2026-10-17
"""
from datetime import date
from typing import Dict, Optional

from app.domain.b2 import CarrierConstants, ServiceType, ShipDatePolicy
from app.domain.order import Order
from app.services.b2_formatting import (
    compose_address_line1,
    compose_address_line2,
    compose_recipient_name,
    digits_only,
    format_date,
    normalize_time_slot,
)


MANAGE_NO_WIDTH = 4
COOL_TYPE_NORMAL = "0"


def _text(value: Optional[str]) -> str:
    return "" if value is None else str(value)


class B2RecordMapper:
    """
    Maps orders to B2 Cloud rows for a single export batch

    Args:
        constants: Consignor/billing values injected into every row
        ship_date_policy: BLANK leaves 出荷予定日 empty, RUN_DATE fills today
        run_date: Date used for RUN_DATE (defaults to today)
    """

    def __init__(
        self,
        constants: CarrierConstants,
        ship_date_policy: ShipDatePolicy = ShipDatePolicy.BLANK,
        run_date: Optional[date] = None,
    ):
        self.constants = constants
        self.ship_date_policy = ShipDatePolicy(ship_date_policy)
        self.run_date = run_date or date.today()

    def ship_date(self) -> str:
        if self.ship_date_policy == ShipDatePolicy.RUN_DATE:
            return format_date(self.run_date)
        return ""

    @staticmethod
    def manage_no(sequence: int) -> str:
        """1-based manifest number, zero padded to four digits"""
        return str(sequence).zfill(MANAGE_NO_WIDTH)

    def map(
        self,
        order: Order,
        sequence: int,
        service_type: str = ServiceType.STANDARD.value,
    ) -> Dict[str, str]:
        """
        Build the full candidate row for one order

        Args:
            order: Order read from the store
            sequence: 1-based position of the order in this export
            service_type: Already-resolved 送り状種類 code

        Returns:
            Dict with one string value per registry column id
        """
        c = self.constants
        row = {
            "manage_no": self.manage_no(sequence),
            "slip_type": service_type,
            "cool_type": COOL_TYPE_NORMAL,
            "den_no": "",
            "ship_date": self.ship_date(),
            "delivery_date": format_date(order.delivery_date),
            "time_slot": normalize_time_slot(order.time_slot),
            "dest_phone": _text(order.phone),
            "dest_zip": digits_only(order.zipcode),
            "dest_addr": compose_address_line1(order.prefecture, order.city, order.address),
            "dest_building": compose_address_line2(order.building),
            "dest_company": "",
            "dest_name": compose_recipient_name(order.last_name, order.first_name),
            "dest_name_kana": "",
            "title": c.honorific,
            "item_code1": "",
            "item_name1": c.item_name,
            "qty": str(c.item_quantity),
            "note": _text(order.memo),
            "sender_phone": c.sender_phone,
            "sender_zip": c.sender_zip,
            "sender_addr": c.sender_address,
            "sender_name": c.sender_name,
            "billing_customer_code": c.billing_customer_code,
            "freight_manage_no": c.freight_manage_no,
        }
        return row
