import os
from dotenv import load_dotenv

load_dotenv()

CONTENT_DIR = os.getenv("CONTENT_DIR", "content")
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "public/data")

# Public URL prefix the front-end serves content folders from
PUBLIC_PREFIX = os.getenv("PUBLIC_PREFIX", "/content")

# Default news author
ORGANIZATION = os.getenv("ORGANIZATION", "Skylink")

BUILD_WORKERS = os.getenv("BUILD_WORKERS", "4")
