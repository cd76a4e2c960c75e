"""
Order Domain Models

Represents a gift order taken by the order form. These are the single
source of truth for order data structure.

Author: TM3
Date: 2026-10-17
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime, date


def _blank_to_none(value):
    """Empty or whitespace-only strings are stored as NULL"""
    if value is None:
        return None
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


class Order(BaseModel):
    """
    Order domain model - represents an order as stored in the orders table

    Every field other than the identifier is optional; the export engine
    renders anything missing as an empty string.

    Fields:
        id: Internal order ID (primary key)

        # Recipient
        last_name / first_name: Recipient name parts
        zipcode: Postal code as typed (may contain hyphens)
        prefecture / city / address / building: Destination address parts
        phone: Recipient phone
        email: Contact email
        instagram: Social handle

        # Delivery wishes
        delivery_date: Desired delivery date
        time_slot: Desired delivery time, free text ("午前中", "14-16", ...)
        memo: Free-text note

        created_at: When order was created in system
    """

    id: int = Field(..., description="Internal order ID")

    last_name: Optional[str] = Field(None, description="Recipient last name")
    first_name: Optional[str] = Field(None, description="Recipient first name")
    zipcode: Optional[str] = Field(None, description="Postal code")
    prefecture: Optional[str] = Field(None, description="Prefecture")
    city: Optional[str] = Field(None, description="City / ward")
    address: Optional[str] = Field(None, description="Street and block number")
    building: Optional[str] = Field(None, description="Building / room")
    phone: Optional[str] = Field(None, description="Recipient phone")
    email: Optional[str] = Field(None, description="Contact email")
    instagram: Optional[str] = Field(None, description="Instagram handle")

    delivery_date: Optional[date] = Field(None, description="Desired delivery date")
    time_slot: Optional[str] = Field(None, description="Desired delivery time (free text)")
    memo: Optional[str] = Field(None, description="Free-text note")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        """Convert to dictionary with ISO dates for JSON responses"""
        data = self.model_dump()
        if data.get('delivery_date'):
            data['delivery_date'] = data['delivery_date'].isoformat()
        if data.get('created_at'):
            data['created_at'] = data['created_at'].isoformat()
        return data


class CustomerInput(BaseModel):
    """Customer block of the order form payload"""
    lastName: Optional[str] = None
    firstName: Optional[str] = None
    zipcode: Optional[str] = None
    prefecture: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    building: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator('*', mode='before')
    @classmethod
    def blank_to_none(cls, value):
        return _blank_to_none(value)


class DeliveryInput(BaseModel):
    """Delivery block of the order form payload"""
    desired_date: Optional[date] = None
    desired_time: Optional[str] = None

    @field_validator('*', mode='before')
    @classmethod
    def blank_to_none(cls, value):
        return _blank_to_none(value)


class OrderIntake(BaseModel):
    """Schema for creating a new order (payload sent by the order form)"""
    customer: CustomerInput = Field(default_factory=CustomerInput)
    delivery: DeliveryInput = Field(default_factory=DeliveryInput)
    note: Optional[str] = None

    @field_validator('note', mode='before')
    @classmethod
    def blank_note_to_none(cls, value):
        return _blank_to_none(value)

    def to_row(self) -> dict:
        """Flatten into orders table columns"""
        c = self.customer
        d = self.delivery
        return {
            'last_name': c.lastName,
            'first_name': c.firstName,
            'zipcode': c.zipcode,
            'prefecture': c.prefecture,
            'city': c.city,
            'address': c.address,
            'building': c.building,
            'phone': c.phone,
            'email': c.email,
            'instagram': c.instagram,
            'delivery_date': d.desired_date,
            'time_slot': d.desired_time,
            'memo': self.note,
        }
