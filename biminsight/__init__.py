"""BIM Insight — AI summaries of the walls in a building model."""

__version__ = "1.0.0"

from biminsight.command import InsightCommand
from biminsight.exceptions import (
    ConfigurationError,
    InsightError,
    ProviderConnectionError,
    ProviderError,
    ProviderResponseError,
    ProviderTimeoutError,
)
from biminsight.host import ConsoleDialog, Dialog, IfcModelHost, ModelHost, StaticModelHost
from biminsight.insight import InsightService
from biminsight.llm.providers import GeminiProvider, LLMProvider, OllamaProvider, get_provider
from biminsight.models import CommandResult, CommandStatus, WallRecord
from biminsight.prompt import build_prompt
from biminsight.settings import ConfigManager, InsightSettings

__all__ = [
    "__version__",
    # Command
    "InsightCommand",
    "InsightService",
    "build_prompt",
    # Host
    "ConsoleDialog",
    "Dialog",
    "IfcModelHost",
    "ModelHost",
    "StaticModelHost",
    # Providers
    "GeminiProvider",
    "LLMProvider",
    "OllamaProvider",
    "get_provider",
    # Models
    "CommandResult",
    "CommandStatus",
    "WallRecord",
    # Configuration
    "ConfigManager",
    "InsightSettings",
    # Errors
    "ConfigurationError",
    "InsightError",
    "ProviderConnectionError",
    "ProviderError",
    "ProviderResponseError",
    "ProviderTimeoutError",
]
