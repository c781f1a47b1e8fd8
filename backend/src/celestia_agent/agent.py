# celestia_agent/agent.py
"""
最小化的工具调用 agent
模型返回工具调用时直接把工具结果（JSON 编码）交还调用方
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_core.tools import BaseTool

from celestia_agent.config import (
    AGENT_MAX_TOOL_CALLS, AGENT_PREAMBLE, LLM_PROVIDER, LLM_TEMPERATURE,
    MODEL_NAME, OPENAI_API_KEY
)

logger = logging.getLogger(__name__)


def create_llm(model: Optional[str] = None):
    """根据配置创建聊天模型"""
    if LLM_PROVIDER != "openai":
        raise ValueError(f"不支持的 LLM_PROVIDER: {LLM_PROVIDER}")
    if not OPENAI_API_KEY:
        raise ValueError("OPENAI_API_KEY 未设置，请在环境变量中配置")

    from langchain_openai import ChatOpenAI

    return ChatOpenAI(
        model=model or MODEL_NAME,
        temperature=LLM_TEMPERATURE,
        api_key=OPENAI_API_KEY,
    )


class CelestiaAgent:
    """
    带工具的单轮 agent

    Args:
        llm: 支持 bind_tools 的聊天模型
        tools: 可供模型调用的工具
        preamble: 系统提示
    """

    def __init__(self, llm: Any, tools: Sequence[BaseTool], preamble: str = AGENT_PREAMBLE):
        self.tools: Dict[str, BaseTool] = {tool.name: tool for tool in tools}
        self.llm = llm.bind_tools(list(tools)) if tools else llm
        self.preamble = preamble

    def _run_tool_calls(self, tool_calls: List[Dict[str, Any]]) -> List[str]:
        """执行模型请求的工具调用"""
        outputs: List[str] = []
        for tool_call in tool_calls[:AGENT_MAX_TOOL_CALLS]:
            tool_name = tool_call["name"]
            tool = self.tools.get(tool_name)
            if tool is None:
                logger.warning(f"模型请求了未知工具: {tool_name}")
                outputs.append(f"Error: Tool {tool_name} not found.")
                continue

            logger.info(f"执行工具 {tool_name}: {tool_call['args']}")
            outputs.append(str(tool.invoke(tool_call["args"])))
        return outputs

    def prompt(self, text: str) -> str:
        """
        发送提示并返回结果

        Args:
            text: 用户提示

        Returns:
            工具结果的 JSON 字符串，或模型的文本回答
        """
        messages: List[BaseMessage] = [
            SystemMessage(content=self.preamble),
            HumanMessage(content=text),
        ]
        response = self.llm.invoke(messages)

        tool_calls = getattr(response, "tool_calls", None) or []
        if tool_calls:
            outputs = self._run_tool_calls(tool_calls)
            return json.dumps("\n".join(outputs))

        content = response.content
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        return content


def decode_agent_response(text: str) -> str:
    """把 agent 返回的 JSON 字符串字面量解码为文本"""
    try:
        decoded = json.loads(text)
    except ValueError as e:
        raise ValueError(f"agent 响应不是 JSON 字符串: {e}") from e
    if not isinstance(decoded, str):
        raise ValueError(f"agent 响应不是 JSON 字符串: {type(decoded).__name__}")
    return decoded
