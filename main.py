import logging

from prosperity.config import CFG
from prosperity.logging_config import setup_logging
from visualization.pygame.monitor import ChartMonitor

logger = logging.getLogger("prosperity.main")


def run():
    setup_logging()
    cfg = CFG()
    monitor = ChartMonitor(cfg)

    try:
        monitor.load()
        while monitor.should_continue():
            if not monitor.render():
                break
        logger.info("Chart closed by user")
    finally:
        monitor.cleanup()


if __name__ == "__main__":
    run()
