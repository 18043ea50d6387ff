# ruff: noqa: B008

import asyncio
import logging
from typing import Union

from fastapi import APIRouter, Body, Depends, status

from app.api import ENDPOINTS
from app.app_types import TranslateErrorResponse, TranslateRequest, TranslateResponse
from app.lib import Action, LogsHandler
from app.services.translator import Translator, get_translator

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post(ENDPOINTS.TRANSLATE, status_code=status.HTTP_200_OK)
async def translate(
    data: TranslateRequest = Body(...),
    translator: Translator = Depends(get_translator),
) -> Union[TranslateResponse, TranslateErrorResponse]:
    """
    Translate text between American and British English.

    Args:
        data (TranslateRequest): JSON body containing:
            - text: The text to translate
            - locale: Either "american-to-british" or "british-to-american"

    Returns:
        TranslateResponse: The original text and the translation, with every translated
        span wrapped in <span class="highlight">...</span>.
        TranslateErrorResponse: When a field is missing, empty or invalid. Validation
        errors are returned with status 200 as {"error": "..."}.

    Usage:
        POST /api/translate
    """
    # match in the thread pool so that the asyncio loop isn't blocked
    result = await LogsHandler.with_logging(
        Action.TRANSLATE_TEXT,
        asyncio.to_thread(translator.translate, data.text, data.locale),
    )
    return result.model_dump()
