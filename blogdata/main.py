import uvicorn
import logging

from .app import app
from .core.config import Config

# Configure logging
logging.basicConfig(
    level=Config.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
    ]
)
logger = logging.getLogger(__name__)


def run() -> None:
    Config.validate()
    logger.info(f"Serving variant {Config.BLOG_VARIANT} on {Config.HOST}:{Config.port()}")
    uvicorn.run(app, host=Config.HOST, port=Config.port())


if __name__ == "__main__":
    run()
