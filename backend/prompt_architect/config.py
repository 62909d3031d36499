import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

GROQ_API_KEY = os.getenv("GROQ_API_KEY")

COMPLETION_BASE_URL = os.getenv("COMPLETION_BASE_URL", "https://api.groq.com/openai/v1")
COMPLETION_MODEL = os.getenv("COMPLETION_MODEL", "llama3-8b-8192")

# Unset means no timeout: the transport default applies
_timeout = os.getenv("COMPLETION_TIMEOUT")
COMPLETION_TIMEOUT = float(_timeout) if _timeout else None

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:4200").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
