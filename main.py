import argparse
import os
import random

import pygame

from daynight.commands.command_system import CommandProcessor
from daynight.config import BACKGROUND_COLOR, SCREEN_HEIGHT, SCREEN_WIDTH, TARGET_FPS, WINDOW_TITLE
from daynight.core.event_system import TIME_OF_DAY_CHANGED, WEATHER_CHANGED, EventSystem
from daynight.core.game_system import GameSystem
from daynight.core.scene_map import SceneMap
from daynight.core.service_locator import get_service_locator
from daynight.ui.screen import Screen
from daynight.utils.logger import Logger, LogLevel

# Keys that run a console command in the demo window.
KEY_COMMANDS = {
    pygame.K_h: "help",
    pygame.K_t: "time",
    pygame.K_w: "weather",
    pygame.K_r: "setweather rain",
    pygame.K_s: "setweather snow",
    pygame.K_c: "setweather none",
    pygame.K_1: "tone morning",
    pygame.K_2: "tone noon",
    pygame.K_3: "tone evening",
    pygame.K_4: "tone night",
}


def main(argv=None):
    parser = argparse.ArgumentParser(description='Day/night cycle and weather demo')
    parser.add_argument('--frames', type=int, default=0,
                        help='Run this many frames without a window and exit (default: open a window)')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the weather random source')
    parser.add_argument('--debug', action='store_true')
    args = parser.parse_args(argv)

    Logger.set_level(LogLevel.DEBUG if args.debug else LogLevel.INFO)
    if args.frames > 0:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

    pygame.init()
    try:
        run(args)
    finally:
        pygame.quit()


def run(args):
    display = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    rng = random.Random(args.seed)

    event_system = EventSystem()
    event_system.subscribe(TIME_OF_DAY_CHANGED, lambda _, data: Logger.info("Demo", f"Now {data['time_of_day'].value}"))
    event_system.subscribe(WEATHER_CHANGED, lambda _, data: Logger.info("Demo", f"Weather is {data['weather'].value}"))

    locator = get_service_locator()
    game_system = GameSystem(locator.screen_provider("screen"), event_system, rng)
    command_processor = CommandProcessor()
    context = {"game_system": game_system, "command_processor": command_processor}

    # The host creates its screen after the plugin systems exist.
    screen = Screen((SCREEN_WIDTH, SCREEN_HEIGHT), rng)
    locator.register_service("screen", screen)

    scene = SceneMap(game_system, host_update=screen.update)
    scene.main()

    frame = 0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in KEY_COMMANDS:
                Logger.info("Demo", command_processor.process_input(KEY_COMMANDS[event.key], context))

        scene.update()
        display.fill(BACKGROUND_COLOR)
        screen.draw(display)
        pygame.display.flip()

        frame += 1
        if args.frames and frame >= args.frames:
            running = False
        if not args.frames:
            clock.tick(TARGET_FPS)

    game_system.day_night_cycle.print_time()


if __name__ == "__main__":
    main()
