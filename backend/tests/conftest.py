"""
Pytest fixtures and configuration for the orders backend tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2026-10-17
"""
import pytest
import os
from datetime import date, datetime
from dotenv import load_dotenv
import psycopg2
from psycopg2.extras import RealDictCursor

from app.domain.b2 import CarrierConstants, ShipDatePolicy
from app.domain.order import Order
from app.services.b2_record_mapper import B2RecordMapper

# Load environment variables for tests
load_dotenv()


@pytest.fixture(scope="session")
def database_url():
    """
    Provides the database URL for integration tests

    Scope: session (created once per test session)
    Skips unless TEST_DATABASE_URL points at a disposable database
    """
    url = os.getenv("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL not configured")
    return url


@pytest.fixture(scope="function")
def db_connection(database_url):
    """
    Provides a fresh database connection for each test

    Scope: function (new connection per test)
    Automatically closes connection after test
    """
    conn = psycopg2.connect(database_url)
    yield conn
    conn.close()


@pytest.fixture(scope="function")
def db_cursor(db_connection):
    """
    Provides a database cursor with RealDictCursor for each test
    """
    cursor = db_connection.cursor(cursor_factory=RealDictCursor)
    yield cursor
    cursor.close()


@pytest.fixture
def sample_order_data():
    """
    Provides a complete orders table row
    """
    return {
        "id": 1,
        "last_name": "山田",
        "first_name": "花子",
        "zipcode": "530-0001",
        "prefecture": "大阪府",
        "city": "大阪市北区",
        "address": "梅田1-2-3",
        "building": "梅田ビル 101",
        "phone": "090-1234-5678",
        "email": "hanako@example.com",
        "instagram": "@hanako",
        "delivery_date": date(2024, 3, 5),
        "time_slot": "午前中",
        "memo": "お誕生日のお祝いです",
        "created_at": datetime(2024, 3, 1, 10, 30),
    }


@pytest.fixture
def make_order(sample_order_data):
    """
    Factory building Order models from the sample row plus overrides
    """
    def _make(**overrides):
        data = dict(sample_order_data)
        data.update(overrides)
        return Order(**data)
    return _make


@pytest.fixture
def carrier_constants():
    """
    Consignor/billing values distinct from the deployment defaults
    """
    return CarrierConstants(
        sender_phone="0612345678",
        sender_zip="5410041",
        sender_address="大阪府大阪市中央区北浜1-1-1",
        sender_name="テスト花店",
        billing_customer_code="061234567801",
        freight_manage_no="01",
        item_name="フラワーギフト",
        item_quantity=1,
        honorific="様",
    )


@pytest.fixture
def mapper(carrier_constants):
    """
    Record mapper with a fixed run date and blank ship date
    """
    return B2RecordMapper(carrier_constants, ShipDatePolicy.BLANK, run_date=date(2024, 3, 1))
