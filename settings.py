# settings.py
import os

from dotenv import load_dotenv
load_dotenv()

def int_env(name: str, default: int) -> int:
    try: return int(os.getenv(name, default))
    except (TypeError, ValueError): return default

MAX_LENGTH = int_env("TRANSPOSE_MAX_LENGTH", 99)         # CLI prompt limit
MAX_PAYLOAD = int_env("TRANSPOSE_MAX_PAYLOAD", 10000)    # API text/key limit
HOST = os.getenv("TRANSPOSE_HOST", "0.0.0.0")
PORT = int_env("TRANSPOSE_PORT", 8000)
CORS_ORIGINS = [o.strip() for o in os.getenv("TRANSPOSE_CORS_ORIGINS", "*").split(",") if o.strip()]
