# celestia_agent/tools/celestia/celestia_tools.py
"""
Celestia 区块工具集
提供按区块高度查询统计信息的 search_blocks 工具
"""

import logging

from langchain_core.tools import StructuredTool, ToolException
from pydantic import BaseModel, Field

from celestia_agent.tools.celestia.celestia_client import (
    CelestiaSearchError, celestia_client
)
from celestia_agent.tools.celestia.celestia_config import (
    GAS_FEE_TEMPLATE, HEIGHT_DESCRIPTION, MAX_BLOCK_HEIGHT,
    TOOL_DESCRIPTION, TOOL_NAME
)
from celestia_agent.tools.celestia.celestia_models import BlockStats

logger = logging.getLogger(__name__)


class CelestiaSearchArgs(BaseModel):
    """search_blocks 工具参数"""
    height: int = Field(..., ge=0, le=MAX_BLOCK_HEIGHT, description=HEIGHT_DESCRIPTION)


def format_block_stats(stats: BlockStats) -> str:
    """生成工具输出，目前只报告 gas 费用"""
    return GAS_FEE_TEMPLATE.format(fee=stats.fee)


def fetch(height: int) -> str:
    """
    查询区块统计并生成摘要

    Args:
        height: 区块高度

    Returns:
        摘要文本

    Raises:
        HttpRequestFailed: 网络或解析错误
        ApiError: 服务端返回错误
    """
    stats = celestia_client.get_block_stats(height)
    return format_block_stats(stats)


def search_blocks(height: int) -> str:
    """search_blocks 工具入口，错误转换为 ToolException 交给 agent"""
    logger.info(f"查询 Celestia 区块: {height}")
    try:
        return fetch(height)
    except (CelestiaSearchError, ValueError) as e:
        logger.error(f"查询区块 {height} 失败: {e}")
        raise ToolException(str(e)) from e


# ===== 工具定义 =====

search_blocks_tool = StructuredTool.from_function(
    func=search_blocks,
    name=TOOL_NAME,
    description=TOOL_DESCRIPTION,
    args_schema=CelestiaSearchArgs,
    handle_tool_error=True,
    handle_validation_error=True,
)

# 导出所有工具
celestia_tools = [
    search_blocks_tool,
]

__all__ = [
    'celestia_tools',
    'search_blocks_tool',
    'fetch',
]
