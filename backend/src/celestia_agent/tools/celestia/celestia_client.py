# celestia_agent/tools/celestia/celestia_client.py
"""
Celenium API 客户端
单次 GET 请求，无重试、无缓存
"""

import json
import logging
from typing import Any, Optional

import requests

from celestia_agent.tools.celestia.celestia_config import (
    SUCCESS_STATUS_RANGE, UNKNOWN_API_ERROR, get_block_stats_url
)
from celestia_agent.tools.celestia.celestia_models import BlockHeightQuery, BlockStats

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    """NaN / Infinity 不是合法 JSON"""
    raise ValueError(f"非法 JSON 常量: {name}")


class CelestiaSearchError(Exception):
    """区块查询错误基类"""

    prefix = "Celestia search failed"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class HttpRequestFailed(CelestiaSearchError):
    """网络请求失败，或响应体不是合法 JSON"""

    prefix = "HTTP request failed"


class ApiError(CelestiaSearchError):
    """服务端返回了错误状态码或 error 对象"""

    prefix = "API error"


class CelestiaClient:
    """Celenium 区块 API 客户端"""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def _make_request(self, url: str) -> Any:
        """
        发送 GET 请求并解析 JSON

        Args:
            url: 请求 URL

        Returns:
            解析后的 JSON

        Raises:
            HttpRequestFailed: 网络错误或 JSON 解析失败
            ApiError: 非 2xx 状态码或响应中包含 error 对象
        """
        logger.debug(f"请求 Celenium API: {url}")

        try:
            response = self.session.get(url)
            status = response.status_code
            # 无论状态码如何都读取完整响应体
            text = response.text
        except requests.exceptions.RequestException as e:
            logger.error(f"Celenium API 网络错误: {e}")
            raise HttpRequestFailed(str(e)) from e

        if status not in SUCCESS_STATUS_RANGE:
            logger.warning(f"Celenium API HTTP 错误: {status}")
            raise ApiError(f"Status: {status}, Response: {text}")

        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            logger.error(f"Celenium API 响应解析失败: {e}")
            raise HttpRequestFailed(str(e)) from e

        if isinstance(data, dict) and "error" in data:
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else None
            if not isinstance(message, str):
                message = UNKNOWN_API_ERROR
            logger.warning(f"Celenium API 返回错误: {message}")
            raise ApiError(message)

        return data

    def get_block_stats(self, height: int) -> BlockStats:
        """获取指定高度的区块统计"""
        query = BlockHeightQuery(height)
        data = self._make_request(get_block_stats_url(query.height))
        return BlockStats.from_response(data)


# 全局客户端实例
celestia_client = CelestiaClient()
