"""
Synthesis Service - LLM-Based Review Polishing
==============================================

ARCHITECTURAL DECISION:
- Uses Cloudflare Workers AI REST API (Gemma 3 12B by default)
- No fallback: if the model cannot be reached the caller gets an UpstreamError
- The completion is relayed as-is; nothing here parses the review text

EXTENSIBILITY:
- To use a different model: set AI_MODEL
- To use another OpenAI-style provider: add a sibling service class
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..config import SynthesisSettings, get_settings
from ...domain.errors import UpstreamError

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = "你是一个专业的餐厅点评润色助手，擅长将简单的标签转化为自然流畅的点评文字。"

USER_PROMPT_TEMPLATE = """请将以下餐厅评价标签随机排列，润色成一段自然流畅的餐厅点评，要求：
1. 语言自然亲切，以顾客的视角分享用餐体验，适合发布在点评网站上。
2. 保持原有信息的准确性，包括正面、中性和负面评价。
3. 字数随机控制在50-150字之间。
4. 语调真实客观，如实反映体验。
5. 根据综合评价随机生成一句自然的开场白。
6. 随机选择提及或称赞以下菜品：香煎石斑鱼、牛杂煲、口味虾、猪脚煨凤爪、小炒黄牛肉、擂椒茄子皮蛋、藠头炒青笋、青笋炒腊肉、瓦罐汤。
7. 开头结尾根据整体评价来补充一些主观感受和客观建议，使评价内容显得真实和多样化。
8. 仿照小红书晒单风格，在合适恰当的位置插入一些表情符号。
9. 使用中文，不要夹杂其他语言。

评价标签：{text}

请直接返回润色后的点评内容，不需要其他说明。"""


def build_messages(review_text: str) -> List[Dict[str, str]]:
    """Chat messages for one polish request; only the tag text varies."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(text=review_text)},
    ]


class ReviewSynthesisService:
    """
    Review synthesis through Cloudflare Workers AI.

    USAGE:
        service = ReviewSynthesisService()
        result = service.synthesize("环境舒适, 味道正宗, 态度很好")
        print(result["response"])
    """

    def __init__(self, settings: Optional[SynthesisSettings] = None):
        """Initialize synthesis service with settings."""
        settings = settings or get_settings().synthesis
        self._account_id = settings.account_id
        self._api_token = settings.api_token
        self._api_base_url = settings.api_base_url.rstrip("/")
        self._model = settings.model
        self._temperature = settings.temperature
        self._max_tokens = settings.max_tokens
        self._timeout = settings.timeout_seconds

        if not settings.is_configured:
            logger.warning(
                "No CLOUDFLARE_ACCOUNT_ID / CLOUDFLARE_API_TOKEN set. "
                "Review synthesis will fail until configured."
            )

    @property
    def endpoint(self) -> str:
        return f"{self._api_base_url}/accounts/{self._account_id}/ai/run/{self._model}"

    def synthesize(self, review_text: str) -> Dict[str, Any]:
        """
        Polish review tags into a natural-language review.

        Args:
            review_text: Raw tag text from the caller.

        Returns:
            The model's response object, e.g. {"response": "..."}.

        Raises:
            UpstreamError: if the service is unconfigured, unreachable,
                or answers with a non-success status.
        """
        if not self._account_id or not self._api_token:
            raise UpstreamError("Workers AI credentials are not configured")

        headers = {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json",
        }

        payload = {
            "messages": build_messages(review_text),
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
        }

        try:
            response = requests.post(
                self.endpoint,
                headers=headers,
                json=payload,
                timeout=self._timeout
            )
        except requests.Timeout as e:
            logger.error(f"Workers AI timeout after {self._timeout}s")
            raise UpstreamError(f"Workers AI request timed out: {e}") from e
        except requests.RequestException as e:
            logger.error(f"Workers AI request failed: {e}")
            raise UpstreamError(f"Workers AI request failed: {e}") from e

        if not response.ok:
            logger.error(
                f"Workers AI error: status={response.status_code} body={response.text[:200]}"
            )
            raise UpstreamError(
                f"Workers AI returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Workers AI returned a non-JSON body") from e

        return self._unwrap_envelope(data)

    def _unwrap_envelope(self, data: Any) -> Dict[str, Any]:
        """Strip the REST envelope so callers see the bare model output."""
        if not isinstance(data, dict):
            raise UpstreamError("Workers AI returned an unexpected body")

        if "result" not in data:
            return data

        if data.get("success") is False:
            errors = data.get("errors") or []
            message = errors[0].get("message") if errors and isinstance(errors[0], dict) else "unknown error"
            raise UpstreamError(f"Workers AI reported failure: {message}")

        result = data["result"]
        if not isinstance(result, dict):
            raise UpstreamError("Workers AI returned an unexpected result")

        logger.debug("Workers AI completion received")
        return result
