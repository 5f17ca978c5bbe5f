import os
import sys
import hydra
import uvicorn
from omegaconf import DictConfig

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.app import create_app
from src.builder import ApplicationBuilder
from src.common.config import ConfigManager
from src.common.logging import set_default_level, setup_logger

logger = setup_logger("src.run_server")


@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    cfg = ConfigManager().validate(cfg)
    set_default_level(cfg.logging.level)
    logger.info("Configuration loaded.")

    services = ApplicationBuilder(cfg).build()
    app = create_app(services, cors_origins=list(cfg.server.cors_origins))

    logger.info(f"Starting server at http://{cfg.server.host}:{cfg.server.port}")
    uvicorn.run(app, host=cfg.server.host, port=cfg.server.port)


if __name__ == "__main__":
    main()
