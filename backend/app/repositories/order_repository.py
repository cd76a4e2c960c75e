"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order domain models.

Author: TM3
Date: 2026-10-17
"""
from typing import List, Sequence
from app.domain.order import Order, OrderIntake
from app.core.database import get_db_connection_dict


ORDER_COLUMNS = """
    id, last_name, first_name, zipcode, prefecture, city, address, building,
    phone, email, instagram, delivery_date, time_slot, memo, created_at
"""


class OrderRepository:
    """
    Repository for Order data access

    All SQL queries for orders are centralized here.
    Errors from psycopg2 propagate to the caller unchanged.
    """

    def insert(self, intake: OrderIntake) -> int:
        """
        Store a new order taken by the order form

        Args:
            intake: Validated form payload (blank values already None)

        Returns:
            New order ID
        """
        row = intake.to_row()
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO orders (
                    last_name, first_name, zipcode, prefecture, city, address, building,
                    phone, email, instagram, delivery_date, time_slot, memo
                )
                VALUES (
                    %(last_name)s, %(first_name)s, %(zipcode)s, %(prefecture)s, %(city)s,
                    %(address)s, %(building)s, %(phone)s, %(email)s, %(instagram)s,
                    %(delivery_date)s, %(time_slot)s, %(memo)s
                )
                RETURNING id
            """, row)

            new_id = cursor.fetchone()['id']
            conn.commit()
            return new_id

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def find_all(self) -> List[Order]:
        """
        Find every order, most recent first

        Returns:
            List of orders ordered by created_at DESC
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                ORDER BY created_at DESC, id DESC
            """)

            return [Order(**dict(row)) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def find_by_ids(self, order_ids: Sequence[int]) -> List[Order]:
        """
        Find orders by ID

        Args:
            order_ids: Order IDs to fetch

        Returns:
            Orders that exist, in no particular order (ids with no row are
            simply absent)
        """
        if not order_ids:
            return []

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                WHERE id = ANY(%s)
            """, (list(order_ids),))

            return [Order(**dict(row)) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()
