# celestia_agent/tools/celestia/__init__.py

from celestia_agent.tools.celestia.celestia_tools import celestia_tools

# Celestia 工具分类
CELESTIA_TOOL_CATEGORIES = {
    "区块信息": [
        "search_blocks",        # 区块统计（gas 费用等）
    ]
}

__all__ = [
    'celestia_tools',
    'CELESTIA_TOOL_CATEGORIES'
]
