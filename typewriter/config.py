import os
from dotenv import load_dotenv
load_dotenv()

BLOB_STORE_URL = os.getenv("BLOB_STORE_URL", "https://blobse.us.to").rstrip("/")
BLOB_STORE_TIMEOUT = float(os.getenv("BLOB_STORE_TIMEOUT", "10"))
APP_ORIGIN = os.getenv("APP_ORIGIN", "http://localhost:8501").rstrip("/")
APP_PATH = os.getenv("APP_PATH", "/")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
TYPING_DELAY_MS = int(os.getenv("TYPING_DELAY_MS", "30"))
