"""
Parent message generation through the Gemini generateContent REST API.

The message is a convenience for the academy teacher: any failure (no key, HTTP
error, empty answer) falls back to a fixed text instead of an error.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx
from django.conf import settings

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "AI 메시지 생성 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요."
EMPTY_MESSAGE = "메시지를 생성할 수 없습니다."

MESSAGE_PROMPT = """You are a helpful assistant for a teacher at an academy (학원).
Create a polite, professional, yet warm message to send to a parent via KakaoTalk/SMS.

The message should inform them about a textbook purchase request.

Details:
- Student: {student_name}
- Teacher: {teacher_name}
- Book: {book_name}
- Price: {price:,} won
- Account: {bank_name} {account_number} (Holder: {account_holder})

Structure:
1. Greeting (Hello, this is teacher {teacher_name}).
2. Explanation that {student_name} needs a new textbook ({book_name}) for the next curriculum.
3. Payment details clearly listed.
4. Closing (Ask them to let us know after deposit, Thank you).

Output language: Korean (Natural, polite '해요' style).
Keep it concise but friendly."""


@dataclass
class ParentMessageResult:
    """Generated text. `generated` is False when the fallback was used."""
    text: str
    generated: bool = True


class ParentMessageService:
    """학부모 안내 메시지 생성"""

    TIMEOUT_SECONDS = 30.0

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._api_key = api_key if api_key is not None else getattr(settings, 'GEMINI_API_KEY', '')
        self._api_url = api_url or getattr(
            settings,
            'GEMINI_API_URL',
            'https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent'
        )
        self._transport = transport

    def build_prompt(self, record) -> str:
        return MESSAGE_PROMPT.format(
            student_name=record.student_name,
            teacher_name=record.teacher_name,
            book_name=record.book_name,
            price=record.price or 0,
            bank_name=record.bank_name,
            account_number=record.account_number,
            account_holder=record.account_holder,
        )

    def generate(self, record) -> ParentMessageResult:
        """
        Generate the parent notice for a stored request.

        Returns:
            ParentMessageResult, never raises
        """
        if not self._api_key:
            logger.warning("Gemini API key not configured, returning fallback message")
            return ParentMessageResult(text=FALLBACK_MESSAGE, generated=False)

        payload = {
            'contents': [{'parts': [{'text': self.build_prompt(record)}]}],
        }

        try:
            with httpx.Client(timeout=self.TIMEOUT_SECONDS, transport=self._transport) as client:
                response = client.post(
                    self._api_url,
                    params={'key': self._api_key},
                    json=payload,
                )

            if response.status_code != 200:
                logger.error(f"Gemini API error: {response.status_code} - {response.text}")
                return ParentMessageResult(text=FALLBACK_MESSAGE, generated=False)

            text = self._extract_text(response.json())

        except httpx.TimeoutException:
            logger.error("Gemini API timeout", extra={'request_id': record.id})
            return ParentMessageResult(text=FALLBACK_MESSAGE, generated=False)
        except (httpx.HTTPError, ValueError) as e:
            logger.exception(f"Error generating parent message: {e}")
            return ParentMessageResult(text=FALLBACK_MESSAGE, generated=False)

        if not text.strip():
            return ParentMessageResult(text=EMPTY_MESSAGE, generated=False)

        logger.info("Parent message generated", extra={'request_id': record.id})
        return ParentMessageResult(text=text)

    @staticmethod
    def _extract_text(result: dict) -> str:
        candidates = result.get('candidates') or [{}]
        parts = (candidates[0].get('content') or {}).get('parts') or []
        return ''.join(part.get('text', '') for part in parts)
