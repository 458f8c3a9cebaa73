import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_int(value):
    return int(value) if value else None


class Config:
    """Application configuration read from the environment"""

    SECRET_KEY = os.getenv('SECRET_KEY', 'your-secret-key-change-in-production')
    JWT_SECRET = os.getenv('JWT_SECRET', 'your-secret-key')
    JWT_ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')
    JWT_EXPIRE_MINUTES = _optional_int(os.getenv('JWT_EXPIRE_MINUTES'))
    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', 'uploads')
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', 16777216))  # 16MB
    AGENT_LATENCY_SCALE = float(os.getenv('AGENT_LATENCY_SCALE', 1.0))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    PORT = int(os.getenv('PORT', 5000))
