# celestia_agent/tools/__init__.py
"""
区块链工具集合
"""

from celestia_agent.tools.celestia import celestia_tools

# 汇总所有工具
tools = [
    *celestia_tools,
]

__all__ = ['tools']
