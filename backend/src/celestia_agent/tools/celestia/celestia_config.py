# celestia_agent/tools/celestia/celestia_config.py
"""
Celestia (Celenium API) 配置文件
包含 API 端点、字段定义和工具描述
"""

import os
from typing import Tuple
from dotenv import load_dotenv

load_dotenv()

# ===== API 配置 =====

# Celenium 区块 API 基础地址
API_ENDPOINT = os.getenv(
    "CELESTIA_API_ENDPOINT", "https://api-mainnet.celenium.io/v1/block"
).rstrip("/")

# 区块统计端点
ENDPOINTS = {
    "block_stats": "/{height}/stats",
}

# HTTP 成功状态码范围
SUCCESS_STATUS_RANGE = range(200, 300)

# 区块高度上限（u64）
MAX_BLOCK_HEIGHT = 2 ** 64 - 1

# ===== 字段定义 =====

# 以字符串形式返回的整数字段
INTEGER_FIELDS: Tuple[str, ...] = (
    "tx_count",
    "block_time",
    "gas_limit",
    "gas_used",
    "square_size",
    "bytes_in_block",
    "events_count",
    "blobs_count",
    "blobs_size",
)

# 任意精度小数字段，保持字符串
DECIMAL_FIELDS: Tuple[str, ...] = (
    "fee",
    "supply_change",
    "inflation_rate",
    "fill_rate",
    "rewards",
    "commissions",
)

DEFAULT_INTEGER = 0
DEFAULT_DECIMAL = "0"

# ===== 工具配置 =====

TOOL_NAME = "search_blocks"
TOOL_DESCRIPTION = "Search for info on Celestia blocks"
HEIGHT_DESCRIPTION = "Height of the block to search for (e.g., '10000')"

# 输出模板（保留前导空格）
GAS_FEE_TEMPLATE = "    The gas fee is: {fee}"

# 错误信息
UNKNOWN_API_ERROR = "Unknown error"


def get_block_stats_url(height: int) -> str:
    """构建区块统计 URL"""
    return f"{API_ENDPOINT}{ENDPOINTS['block_stats'].format(height=height)}"
