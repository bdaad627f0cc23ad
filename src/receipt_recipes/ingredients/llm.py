"""Language-model ingredient extraction through AWS Bedrock."""

import json
import logging
from typing import Optional

import boto3

from receipt_recipes.config import DEFAULT_MODEL_ID, DEFAULT_REGION, LLM_MAX_TOKENS

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """다음은 OCR로 추출된 영수증 텍스트입니다. 이 텍스트에서 요리에 사용할 수 있는 재료명만 추출하세요.

지침:
- 가격, 수량, 날짜, 결제 정보, 매장명, 광고 문구, 카테고리 표기는 모두 제외합니다.
- 브랜드명과 상품 수식어는 제거하고 재료명만 남깁니다.
- 가공 식품이라도 요리에 쓰일 수 있으면 하나의 재료로 표기합니다. (예: 딸기 요거트, 크림치즈 베이글)
- 출력은 한 줄에 쉼표로 구분된 재료명만 포함합니다.
- 다른 문구, 설명, 번호, 불릿, 따옴표, 마크다운을 넣지 마세요.
- 예시 출력: 사과, 양파, 햄, 치즈, 딸기 요거트

OCR 텍스트:
{ocr_text}
"""


class IngredientExtractionError(RuntimeError):
    """Raised when the language model gives no usable ingredient answer."""


class BedrockIngredientExtractor:
    """Extract ingredient names from receipt text with a Bedrock-hosted model.

    Attributes:
        model_id (str): Bedrock model ID used for every request.
        bedrock_client: AWS Bedrock runtime client.
        max_tokens (int): Completion token limit.
    """

    def __init__(
        self,
        model_id: str = DEFAULT_MODEL_ID,
        region_name: str = DEFAULT_REGION,
        client=None,
        max_tokens: int = LLM_MAX_TOKENS,
    ):
        self.model_id = model_id
        self.bedrock_client = client or boto3.client(
            "bedrock-runtime", region_name=region_name
        )
        self.max_tokens = max_tokens

    def _build_body(self, prompt: str) -> str:
        if "amazon.nova" in self.model_id:
            return json.dumps(
                {
                    "messages": [{"role": "user", "content": [{"text": prompt}]}],
                    "inferenceConfig": {"maxTokens": self.max_tokens},
                }
            )
        return json.dumps(
            {
                "anthropic_version": "bedrock-2023-05-31",
                "max_tokens": self.max_tokens,
                "messages": [
                    {"role": "user", "content": [{"type": "text", "text": prompt}]}
                ],
            }
        )

    def _read_completion(self, response_body: dict) -> Optional[str]:
        if "amazon.nova" in self.model_id:
            content = response_body.get("output", {}).get("message", {}).get("content")
        else:
            content = response_body.get("content")
        if not isinstance(content, list) or not content:
            return None
        text = content[0].get("text")
        return text if isinstance(text, str) else None

    def extract_ingredients(self, text: str) -> str:
        """Ask the model for a comma-separated ingredient line.

        Args:
            text: Raw OCR text of a receipt.

        Returns:
            The model's answer, expected to look like "사과, 양파, 햄".

        Raises:
            IngredientExtractionError: If the request fails or the response
                carries no text.
        """
        prompt = PROMPT_TEMPLATE.format(ocr_text=text or "")
        try:
            response = self.bedrock_client.invoke_model(
                body=self._build_body(prompt),
                modelId=self.model_id,
                accept="application/json",
                contentType="application/json",
            )
            response_body = json.loads(response.get("body").read())
        except Exception as e:
            raise IngredientExtractionError(
                f"Bedrock request with model {self.model_id} failed: {e}"
            ) from e

        logger.debug("Bedrock response: %s", response_body)
        completion = self._read_completion(response_body)
        if completion is None:
            raise IngredientExtractionError(
                f"Bedrock response from {self.model_id} has no text content"
            )
        return completion.strip()
