import logging
from typing import Optional

import deepl
from fastapi import APIRouter, Depends, HTTPException, Query

from core.versions import (
    APP_VERSION,
    CACHE_VERSION,
    FILTER_VERSION,
    TEMPLATE_VERSION,
    TRANSLATION_ENGINE_VERSION,
)
from domain.examples.schemas.schema import ExampleSentence
from domain.translator.translator import DeepLTranslator
from pipelines.example_pipeline import ExamplePipeline, build_example_pipeline

router = APIRouter()

# Built on first request so importing the app needs no credentials.
_pipeline: Optional[ExamplePipeline] = None
_translator: Optional[DeepLTranslator] = None


def get_pipeline() -> ExamplePipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = build_example_pipeline()
    return _pipeline


def get_translator() -> DeepLTranslator:
    global _translator
    if _translator is None:
        _translator = DeepLTranslator()
    return _translator


@router.get("/examples/{word}", response_model=ExampleSentence)
async def get_example(
    word: str,
    target_lang: str = Query(..., min_length=2),
    category: Optional[str] = None,
    pipeline: ExamplePipeline = Depends(get_pipeline),
    translator: DeepLTranslator = Depends(get_translator),
):
    try:
        return await pipeline.get_example_sentence(word, target_lang, translator, category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except deepl.DeepLException as e:
        logging.error(f"Translation failed for {word!r} -> {target_lang}: {e}")
        raise HTTPException(status_code=502, detail="Translation failed")


@router.get("/health")
def health():
    return {
        "status": "ok",
        "app_version": APP_VERSION,
        "filter_version": FILTER_VERSION,
        "template_version": TEMPLATE_VERSION,
        "cache_version": CACHE_VERSION,
        "translation_engine": TRANSLATION_ENGINE_VERSION,
    }
