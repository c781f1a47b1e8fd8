# celestia_agent/config.py
"""
应用配置 - LLM 与日志
"""

import os
from dotenv import load_dotenv

load_dotenv()

# ===== LLM 配置 =====

LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME = os.getenv("MODEL_NAME", "gpt-4o-mini")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0"))

# ===== Agent 配置 =====

AGENT_PREAMBLE = "You are a helpful assistant."
DEFAULT_PROMPT = "What is the gas fee of the Celestia block at height 9999?"
AGENT_MAX_TOOL_CALLS = int(os.getenv("AGENT_MAX_TOOL_CALLS", "4"))

# ===== 日志配置 =====

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
