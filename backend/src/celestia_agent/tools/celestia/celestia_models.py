# celestia_agent/tools/celestia/celestia_models.py
"""
Celestia 区块数据模型
字段提取相互独立：单个字段缺失或格式错误只会回落到默认值
"""

import logging
import re
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Tuple

from celestia_agent.tools.celestia.celestia_config import (
    DEFAULT_DECIMAL, DEFAULT_INTEGER, INTEGER_FIELDS, MAX_BLOCK_HEIGHT
)

logger = logging.getLogger(__name__)

_UINT_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class BlockHeightQuery:
    """区块高度查询参数"""
    height: int

    def __post_init__(self):
        if isinstance(self.height, bool) or not isinstance(self.height, int):
            raise ValueError(f"区块高度必须是整数: {self.height!r}")
        if self.height < 0 or self.height > MAX_BLOCK_HEIGHT:
            raise ValueError(f"区块高度超出范围: {self.height}")


def extract_uint(data: Any, key: str) -> Tuple[int, bool]:
    """
    读取以字符串编码的无符号整数字段

    Args:
        data: 解析后的 JSON
        key: 字段名

    Returns:
        (值, 是否使用了默认值)
    """
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, str) or not _UINT_PATTERN.fullmatch(value):
        return DEFAULT_INTEGER, True

    number = int(value)
    if number > MAX_BLOCK_HEIGHT:
        return DEFAULT_INTEGER, True
    return number, False


def extract_decimal(data: Any, key: str) -> Tuple[str, bool]:
    """读取小数字符串字段，原样返回"""
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, str):
        return DEFAULT_DECIMAL, True
    return value, False


@dataclass
class BlockStats:
    """区块统计信息"""
    tx_count: int = DEFAULT_INTEGER
    block_time: int = DEFAULT_INTEGER
    gas_limit: int = DEFAULT_INTEGER
    gas_used: int = DEFAULT_INTEGER
    square_size: int = DEFAULT_INTEGER
    bytes_in_block: int = DEFAULT_INTEGER
    events_count: int = DEFAULT_INTEGER
    blobs_count: int = DEFAULT_INTEGER
    blobs_size: int = DEFAULT_INTEGER
    fee: str = DEFAULT_DECIMAL
    supply_change: str = DEFAULT_DECIMAL
    inflation_rate: str = DEFAULT_DECIMAL
    fill_rate: str = DEFAULT_DECIMAL
    rewards: str = DEFAULT_DECIMAL
    commissions: str = DEFAULT_DECIMAL

    @classmethod
    def from_response(cls, data: Any) -> "BlockStats":
        """从 API 响应构建统计信息"""
        values: Dict[str, Any] = {}
        defaulted: List[str] = []

        for field in fields(cls):
            extractor = extract_uint if field.name in INTEGER_FIELDS else extract_decimal
            value, used_default = extractor(data, field.name)
            values[field.name] = value
            if used_default:
                defaulted.append(field.name)

        if defaulted:
            logger.debug(f"以下字段使用默认值: {', '.join(defaulted)}")

        return cls(**values)
