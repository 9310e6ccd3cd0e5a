import re
from decimal import Decimal

_INDEX_PATTERN = re.compile(r"-?\d+", re.ASCII)


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    float は str 経由にして二進誤差を持ち込まない。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def to_index(v: str | None) -> int:
    """パスパラメータの位置指定を int に変換する"""
    if v is None or not _INDEX_PATTERN.fullmatch(v.strip()):
        raise ValueError(f"Invalid booking index: {v}")
    return int(v)
