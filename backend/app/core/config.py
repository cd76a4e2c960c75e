"""
Configuración centralizada de la aplicación

Carrier (Yamato B2 Cloud) constants live here too; the export engine never
reads them directly, it receives a CarrierConstants built by
Settings.carrier_constants().
"""
from pydantic_settings import BaseSettings
from typing import List, Optional

from app.domain.b2 import CarrierConstants, ShipDatePolicy


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "nursery sera Orders API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Order intake and Yamato B2 Cloud CSV export"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "postgresql://postgres@localhost:5432/postgres"
    AUTO_CREATE_TABLES: bool = True

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "*"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["*"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # B2 Cloud export
    B2_SHIP_DATE_POLICY: ShipDatePolicy = ShipDatePolicy.BLANK
    B2_EXPORT_FILENAME: str = "orders_b2"

    # Consignor (発送元) and billing
    B2_SENDER_PHONE: str = "09000000000"
    B2_SENDER_ZIP: str = "1234567"
    B2_SENDER_ADDRESS: str = "大阪府大阪市中央区○○1-2-3"
    B2_SENDER_NAME: str = "nursery sera"
    B2_BILLING_CUSTOMER_CODE: str = ""
    B2_FREIGHT_MANAGE_NO: str = "01"
    B2_ITEM_NAME: str = "フラワーギフト"
    B2_ITEM_QUANTITY: int = 1
    B2_HONORIFIC: str = "様"

    def carrier_constants(self) -> CarrierConstants:
        """Snapshot of the consignor/billing configuration for one export"""
        return CarrierConstants(
            sender_phone=self.B2_SENDER_PHONE,
            sender_zip=self.B2_SENDER_ZIP,
            sender_address=self.B2_SENDER_ADDRESS,
            sender_name=self.B2_SENDER_NAME,
            billing_customer_code=self.B2_BILLING_CUSTOMER_CODE,
            freight_manage_no=self.B2_FREIGHT_MANAGE_NO,
            item_name=self.B2_ITEM_NAME,
            item_quantity=self.B2_ITEM_QUANTITY,
            honorific=self.B2_HONORIFIC,
        )

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
