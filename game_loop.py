# game_loop.py

import pygame

from config import ASSET_PATH, FPS, HEIGHT, LETTERBOX_COLOR, WIDTH
from assets import AssetLoadError, load_image
from game import Game
from log_utils import log_debug
from ui import canvas_offset


def process_events(game):
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        game.handle_event(event)
    return True


def update_game(game, dt):
    return game.update(dt)


def present(screen, game_surface):
    screen.fill(LETTERBOX_COLOR)
    screen.blit(game_surface, canvas_offset(screen.get_size(), game_surface.get_size()))
    pygame.display.flip()


def render_game(game, screen, game_surface):
    game.draw(game_surface)
    present(screen, game_surface)


def run_game():
    pygame.init()
    pygame.display.set_caption("Penger Flight")
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    try:
        image = load_image(ASSET_PATH)
    except AssetLoadError:
        # fatal before the loop begins
        pygame.quit()
        raise
    game = Game(image, window_size=screen.get_size())
    game_surface = pygame.Surface(game.canvas_size)
    clock = pygame.time.Clock()
    running = True
    over = False

    while running:
        dt = clock.tick(FPS)
        running = process_events(game)
        if over:
            # last frame stays on screen, re-centred after any resize
            present(screen, game_surface)
            continue

        if game_surface.get_size() != game.canvas_size:
            game_surface = pygame.Surface(game.canvas_size)
        over = update_game(game, dt)
        render_game(game, screen, game_surface)

    log_debug("run_game", f"exit score={game.state.score}")
    pygame.quit()


if __name__ == "__main__":
    run_game()
