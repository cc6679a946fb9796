"""Main application entry point.

Serves the NiceGUI knowledge base page, which talks to the knowledge base
server at API_BASE_URL. Environment variables are loaded from .env file.
"""

import locale
import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def configure_locale() -> None:
    """Adopt the date formatting locale from LC_ALL/LC_TIME/LANG."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Could not apply locale from environment, keeping C dates: {e}")


def main() -> None:
    """Application entry point.

    Registers the page and starts the NiceGUI server on HOST:PORT
    (default 0.0.0.0:8081).
    """
    from src.client.config import get_client_config
    from src.ui.knowledge_page import main as run_page

    configure_locale()
    config = get_client_config()
    port = os.getenv("PORT", "8081")

    logger.info(f"Knowledge base server: {config.api_base_url}")
    logger.info(f"Knowledge base page available at http://localhost:{port}/")

    run_page()


if __name__ in {"__main__", "__mp_main__"}:
    main()
