# celestia_agent/__init__.py
"""
Celestia 区块查询 agent
"""

__version__ = "0.1.0"
