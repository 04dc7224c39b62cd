"""Environment configuration for PumpkinPower"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class Config:
    """Process-level settings; the notification flag lives in config.yml instead"""

    # Paths
    PLUGINS_DIR = Path(os.getenv("PUMPKINPOWER_PLUGINS_DIR", "plugins"))
    DATA_DIR = PLUGINS_DIR / "PumpkinPower"
    DATA_FILE_NAME = "changed_blocks.txt"
    CONFIG_FILE_NAME = "config.yml"

    # Block type ids: pumpkin and jack o' lantern
    UNALTERED_ID = int(os.getenv("PUMPKINPOWER_UNALTERED_ID", "86"))
    ALTERED_ID = int(os.getenv("PUMPKINPOWER_ALTERED_ID", "91"))

    LOGGER_NAME = os.getenv("PUMPKINPOWER_LOGGER", "Pumpkins")

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def create_dirs(cls, data_dir: Path | None = None):
        """Create the data folder, DATA_DIR unless another one is given"""
        path = Path(data_dir) if data_dir is not None else cls.DATA_DIR
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Failed to create %s: %s", path, e)


config = Config()
