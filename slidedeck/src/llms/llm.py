"""LLM Factory - Provider-based chat model instantiation.

Builds the LangChain chat model used by the ``llm`` slide generator.

Supported providers:
- openai: langchain_openai.ChatOpenAI
- anthropic: langchain_anthropic.ChatAnthropic
- ollama: langchain_ollama.ChatOllama
- openai_compat: langchain_openai.ChatOpenAI against a custom base URL
"""

import logging

from typing import Callable

from langchain_core.language_models import BaseChatModel

from slidedeck.core.conf import settings

logger = logging.getLogger(__name__)

# Provider -> (display name, pip package)
PROVIDER_INFO: dict[str, tuple[str, str]] = {
    'openai': ('OpenAI', 'langchain-openai'),
    'anthropic': ('Anthropic', 'langchain-anthropic'),
    'ollama': ('Ollama', 'langchain-ollama'),
    'openai_compat': ('OpenAI-Compatible', 'langchain-openai'),
}


def _create_openai_llm() -> BaseChatModel:
    """Create OpenAI LLM client using langchain-openai.

    Supports custom base_url for proxies.
    """
    from langchain_openai import ChatOpenAI

    kwargs = {
        'model': settings.OPENAI_MODEL,
        'api_key': settings.OPENAI_API_KEY,
        'max_retries': settings.LLM_MAX_RETRIES,
        'temperature': settings.LLM_TEMPERATURE,
        'timeout': settings.LLM_TIMEOUT_SECONDS,
    }

    if settings.OPENAI_BASE_URL:
        kwargs['base_url'] = settings.OPENAI_BASE_URL

    logger.info(f'Creating OpenAI LLM: model={settings.OPENAI_MODEL}')
    return ChatOpenAI(**kwargs)


def _create_anthropic_llm() -> BaseChatModel:
    """Create Anthropic LLM client using langchain-anthropic."""
    from langchain_anthropic import ChatAnthropic

    logger.info(f'Creating Anthropic LLM: model={settings.ANTHROPIC_MODEL}')
    return ChatAnthropic(
        model=settings.ANTHROPIC_MODEL,
        api_key=settings.ANTHROPIC_API_KEY,
        max_retries=settings.LLM_MAX_RETRIES,
        temperature=settings.LLM_TEMPERATURE,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )


def _create_ollama_llm() -> BaseChatModel:
    """Create Ollama LLM client using langchain-ollama.

    For running open-source models locally via Ollama.
    """
    from langchain_ollama import ChatOllama

    logger.info(f'Creating Ollama LLM: model={settings.OLLAMA_MODEL}, base_url={settings.OLLAMA_BASE_URL}')
    return ChatOllama(
        model=settings.OLLAMA_MODEL,
        base_url=settings.OLLAMA_BASE_URL,
        temperature=settings.LLM_TEMPERATURE,
    )


def _create_openai_compat_llm() -> BaseChatModel:
    """Create OpenAI-compatible LLM client using langchain-openai.

    For self-hosted models behind an OpenAI-compatible API (vLLM, LocalAI, LMStudio, ...).

    Raises:
        ValueError: If OPENAI_COMPAT_BASE_URL or OPENAI_COMPAT_MODEL is not set.
    """
    from langchain_openai import ChatOpenAI

    if not settings.OPENAI_COMPAT_BASE_URL:
        raise ValueError("OPENAI_COMPAT_BASE_URL is required for the 'openai_compat' provider.")
    if not settings.OPENAI_COMPAT_MODEL:
        raise ValueError("OPENAI_COMPAT_MODEL is required for the 'openai_compat' provider.")

    logger.info(
        f'Creating OpenAI-Compatible LLM: model={settings.OPENAI_COMPAT_MODEL}, '
        f'base_url={settings.OPENAI_COMPAT_BASE_URL}'
    )
    return ChatOpenAI(
        model=settings.OPENAI_COMPAT_MODEL,
        base_url=settings.OPENAI_COMPAT_BASE_URL,
        # Some local deployments require the field but never check it
        api_key=settings.OPENAI_COMPAT_API_KEY or 'not-needed',
        max_retries=settings.LLM_MAX_RETRIES,
        temperature=settings.LLM_TEMPERATURE,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )


# Provider factory mapping
_PROVIDER_FACTORIES: dict[str, Callable[[], BaseChatModel]] = {
    'openai': _create_openai_llm,
    'anthropic': _create_anthropic_llm,
    'ollama': _create_ollama_llm,
    'openai_compat': _create_openai_compat_llm,
}

# Cache for LLM instance
_llm_cache: BaseChatModel | None = None


def get_llm() -> BaseChatModel:
    """Get the configured LLM instance.

    Returns a cached instance for the provider named by ``LLM_PROVIDER``.

    Raises:
        ValueError: If an unsupported provider is configured.
        ImportError: If the required LangChain package is not installed.
    """
    global _llm_cache

    if _llm_cache is not None:
        return _llm_cache

    provider: str = settings.LLM_PROVIDER

    if provider not in _PROVIDER_FACTORIES:
        supported = list(_PROVIDER_FACTORIES.keys())
        raise ValueError(f"Unsupported LLM provider: '{provider}'. Supported providers: {supported}")

    display_name, package = PROVIDER_INFO[provider]
    try:
        logger.info(f'Initializing LLM provider: {display_name}')
        _llm_cache = _PROVIDER_FACTORIES[provider]()
        return _llm_cache
    except ImportError as e:
        raise ImportError(
            f"Failed to import LLM provider '{provider}'. "
            f'Please install the required package: pip install {package}\n'
            f'Original error: {e}'
        ) from e


def clear_llm_cache() -> None:
    """Clear the cached LLM instance.

    Useful for testing or when settings change at runtime.
    """
    global _llm_cache
    _llm_cache = None
    logger.info('LLM cache cleared')
