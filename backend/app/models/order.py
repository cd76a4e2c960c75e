"""
Modelos relacionados con órdenes/pedidos
"""
from sqlalchemy import Column, Integer, Text, Date, DateTime
from sqlalchemy.sql import func
from app.core.database import Base


class Order(Base):
    """
    Tabla de pedidos del formulario - Single Source of Truth

    All columns except id are nullable; the order form sends blanks as NULL.
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    # Destinatario
    last_name = Column(Text)
    first_name = Column(Text)
    zipcode = Column(Text)
    prefecture = Column(Text)
    city = Column(Text)
    address = Column(Text)
    building = Column(Text)
    phone = Column(Text)
    email = Column(Text)
    instagram = Column(Text)

    # Entrega
    delivery_date = Column(Date)
    time_slot = Column(Text)
    memo = Column(Text)

    # Fechas
    created_at = Column(DateTime, server_default=func.now(), index=True)

    def __repr__(self):
        return f"<Order(id={self.id}, name='{self.last_name} {self.first_name}')>"
