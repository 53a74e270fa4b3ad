"""
Entry-point.  Keeps top-level script tiny.
"""
import logging
import sys

import pygame
from sweepradar import config, gui
from sweepradar.errors import TransportError

logger = logging.getLogger("sweepradar")


def main() -> int:
    pygame.init()
    cfg = config.load()
    logging.basicConfig(level=cfg.get("log_level", "INFO"),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        app = gui.RadarGUI(cfg)
        app.run()
    except TransportError as exc:
        logger.error("%s", exc)
        return 1
    finally:
        pygame.quit()
    config.save(cfg)
    return 0

if __name__ == "__main__":
    sys.exit(main())
