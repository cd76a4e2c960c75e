"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2026-10-17
"""
from app.domain.order import Order, OrderIntake, CustomerInput, DeliveryInput
from app.domain.b2 import (
    CarrierConstants,
    ColumnDefinition,
    ExportRequest,
    ExportResult,
    ExportSelection,
    ServiceType,
    ShipDatePolicy,
    TimeSlot,
)

__all__ = [
    'Order',
    'OrderIntake',
    'CustomerInput',
    'DeliveryInput',
    'CarrierConstants',
    'ColumnDefinition',
    'ExportRequest',
    'ExportResult',
    'ExportSelection',
    'ServiceType',
    'ShipDatePolicy',
    'TimeSlot',
]
