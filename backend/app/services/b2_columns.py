"""
B2 Cloud Column Registry

Ordered master list of every column the export can emit. Registry order is
the output order; callers pick columns by id only.
"""
from typing import Iterable, List, Tuple

from app.core.exceptions import UnknownColumnError
from app.domain.b2 import ColumnDefinition


B2_COLUMNS: Tuple[ColumnDefinition, ...] = (
    ColumnDefinition(id="manage_no", title="お客様管理番号"),
    ColumnDefinition(id="slip_type", title="送り状種類"),
    ColumnDefinition(id="cool_type", title="クール区分"),
    ColumnDefinition(id="den_no", title="伝票番号"),
    ColumnDefinition(id="ship_date", title="出荷予定日"),
    ColumnDefinition(id="delivery_date", title="お届け予定日"),
    ColumnDefinition(id="time_slot", title="お届け時間帯"),
    ColumnDefinition(id="dest_phone", title="お届け先電話番号"),
    ColumnDefinition(id="dest_zip", title="お届け先郵便番号"),
    ColumnDefinition(id="dest_addr", title="お届け先住所"),
    ColumnDefinition(id="dest_building", title="お届け先アパートマンション名"),
    ColumnDefinition(id="dest_company", title="お届け先会社・部門名"),
    ColumnDefinition(id="dest_name", title="お届け先名"),
    ColumnDefinition(id="dest_name_kana", title="お届け先名(カナ)"),
    ColumnDefinition(id="title", title="敬称"),
    ColumnDefinition(id="item_code1", title="品名コード1"),
    ColumnDefinition(id="item_name1", title="品名1"),
    ColumnDefinition(id="qty", title="出荷個数"),
    ColumnDefinition(id="note", title="記事"),
    ColumnDefinition(id="sender_phone", title="発送元電話番号"),
    ColumnDefinition(id="sender_zip", title="発送元郵便番号"),
    ColumnDefinition(id="sender_addr", title="発送元住所"),
    ColumnDefinition(id="sender_name", title="発送元名"),
    ColumnDefinition(id="billing_customer_code", title="請求先顧客コード"),
    ColumnDefinition(id="freight_manage_no", title="運賃管理番号"),
)

COLUMN_IDS: Tuple[str, ...] = tuple(column.id for column in B2_COLUMNS)


def all_columns() -> Tuple[ColumnDefinition, ...]:
    """Every column, in output order"""
    return B2_COLUMNS


def resolve(ids: Iterable[str]) -> List[ColumnDefinition]:
    """
    Filter the registry down to the given ids, keeping registry order

    Args:
        ids: Column ids in any order (duplicates are harmless)

    Returns:
        Matching column definitions in registry order

    Raises:
        UnknownColumnError: if any id is not in the registry
    """
    wanted = set(ids)
    unknown = wanted.difference(COLUMN_IDS)
    if unknown:
        raise UnknownColumnError(unknown)
    return [column for column in B2_COLUMNS if column.id in wanted]
