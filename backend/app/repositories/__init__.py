"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: TM3
Date: 2026-10-17
"""
from app.repositories.order_repository import OrderRepository

__all__ = [
    'OrderRepository',
]
