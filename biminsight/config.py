"""Global configuration: endpoints, prompt texts, dialog titles, unit factors."""

from pathlib import Path

# Gemini generateContent endpoint: {base}/{model}:generateContent?key=...
DEFAULT_GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-preview-05-20"

DEFAULT_OLLAMA_HOST = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "mistral"

# Seconds; applies to the whole request/response cycle
DEFAULT_TIMEOUT = 100.0

# Project-local settings directory, mirrors .git / .env placement
SETTINGS_DIR = Path(".biminsight")

# Placeholder for any wall attribute the model does not carry
NOT_AVAILABLE = "N/A"

# IFC entity queried for wall records; includes IfcWallStandardCase etc.
WALL_CLASS = "IfcWall"
WALL_QTO = "Qto_WallBaseQuantities"

# SI -> imperial
METRES_PER_FOOT = 0.3048
SQ_METRES_PER_SQ_FOOT = METRES_PER_FOOT ** 2

DEFAULT_PREAMBLE = (
    "As a BIM analyst, please provide a brief summary and insights based on "
    "the following data about walls in a BIM model. Highlight any potential "
    "anomalies or interesting patterns. The data format is "
    "'ElementId, WallType, Length, Area, HostLevelName'."
)

DEFAULT_SYSTEM_INSTRUCTION = (
    "You are a professional BIM analyst. Analyze the provided BIM data and "
    "provide a concise, single-paragraph summary of key findings, potential "
    "issues, or interesting patterns. Be specific and refer to the data given."
)

# Dialog titles
TITLE_NO_WALLS = "Gemini Insight"
TITLE_RESULT = "Gemini Model Insight"
TITLE_ERROR = "Error"
TITLE_PROGRESS = "Gemini Insight"

NO_WALLS_MESSAGE = "No walls found in the model to analyze."
NO_INSIGHT_MESSAGE = "No insight was generated."
