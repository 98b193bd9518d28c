import sys

import logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from config import CONFIG_PATH
from tilegrid.core.config_loader import load_runtime_config
from tilegrid.core.game_loop import GameLoop
from tilegrid.core.session import GameSession, SessionError
from tilegrid.entities.player import Player
from tilegrid.tiles.tile_parser import MapError, load_map


def main(config_path: str = CONFIG_PATH) -> int:
    runtime = load_runtime_config(config_path)
    logging.getLogger().setLevel(runtime.log_level)

    # The map must load before any window is opened
    try:
        playground, spawn = load_map(runtime.map_path)
    except MapError as e:
        logger.error("Cannot start: %s", e)
        return 1

    player = Player.spawn(spawn)
    try:
        with GameSession() as session:
            loop = GameLoop(
                playground,
                player,
                get_surface=session.get_surface,
                present=session.present,
                clock=session.clock,
                show_debug=runtime.show_debug,
            )
            loop.run()
    except SessionError as e:
        logger.error("Cannot start: %s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
