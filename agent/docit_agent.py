# =============================================================================
# agent/docit_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the ADK agent that answers a DocIt prompt: the persona, the model,
#   the decoding parameters and whichever data-fetch tools the current tool
#   revision exposes.
#
#   ┌──────────────────────────────────────────────────────────────────┐
#   │                       Google ADK Agent                           │
#   │                                                                  │
#   │  ┌─────────────┐    ┌──────────────┐    ┌───────────────────┐    │
#   │  │  Persona    │───▶│  Gemini      │───▶│  FunctionTools    │    │
#   │  │  (Kian)     │    │  (or LiteLlm)│    │  items/lists/     │    │
#   │  └─────────────┘    └──────────────┘    │  folders          │    │
#   │                                         └───────────────────┘    │
#   └──────────────────────────────────────────────────────────────────┘
#
# MODEL CHOICE:
#   A plain model name ("gemini-2.0-flash") is handed to ADK as-is and runs on
#   Gemini, reading GEMINI_API_KEY / GOOGLE_API_KEY from the environment.
#   A provider-prefixed name ("openrouter/openai/gpt-4o") is wrapped in
#   LiteLlm, which routes it to that provider instead.
# =============================================================================

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.genai import types

from agent.prompt import SYSTEM_PERSONA
from core.config import DecodingConfig

AGENT_NAME = "docit_assistant"


# Provider prefixes that LiteLlm routes.  Anything else (including Gemini
# resource names like "models/..." or "projects/.../endpoints/...") goes to
# ADK unchanged.
LITELLM_PROVIDERS = (
    "openrouter", "openai", "anthropic", "azure", "bedrock", "groq",
    "mistral", "ollama", "ollama_chat", "together_ai", "deepseek", "xai",
)


def resolve_model(model_name: str):
    """Return the model argument ADK expects for ``model_name``."""
    provider, sep, _ = model_name.partition("/")
    if sep and provider in LITELLM_PROVIDERS:
        return LiteLlm(model=model_name)
    return model_name


def build_generate_config(decoding: DecodingConfig) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        max_output_tokens=decoding.max_output_tokens,
        top_p=decoding.top_p,
        top_k=decoding.top_k,
        temperature=decoding.temperature,
        stop_sequences=list(decoding.stop_sequences),
    )


def create_agent(model_name: str, decoding: DecodingConfig, tools=()) -> Agent:
    """Create the DocIt assistant agent.

    Args:
        model_name: Gemini model name or a LiteLlm provider/model string.
        decoding: Sampling parameters applied to every generation.
        tools: ADK tools the model may call; may be empty.

    Returns:
        A configured Google ADK Agent instance.
    """
    return Agent(
        name=AGENT_NAME,
        model=resolve_model(model_name),
        instruction=SYSTEM_PERSONA,
        generate_content_config=build_generate_config(decoding),
        tools=list(tools),
    )
