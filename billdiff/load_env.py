import os
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

def load_env(path: str = ".env") -> bool:
    """
    Load environment variables from a .env file for local development.
    Skips on Railway/containers and stays quiet if the file is missing.
    Variables already set in the environment win over the file.
    """
    if os.environ.get("RAILWAY_ENVIRONMENT"):
        # Deployed: env vars are injected by the platform.
        return False

    if not os.path.exists(path):
        # Quietly skip to avoid noisy warnings
        return False

    loaded = load_dotenv(path, override=False)
    if loaded:
        logger.info("Loaded %s file.", path)
    return loaded
