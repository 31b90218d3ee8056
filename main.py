
import argparse
import logging
import sys
import pygame
from typefall_config import CONFIG
from typefall_dictionary import DictionaryError, load_dictionary
from typefall_events import Quit, Redraw, Resize, Tick, dispatch, translate_key
from typefall_layout import compute_dims
from typefall_logging import setup_logging
from typefall_render import RenderAssets
from typefall_rng import GameRandom
from typefall_state import GameState
from typefall_view import snapshot

log = logging.getLogger("typefall")

TICK_EVENT = pygame.USEREVENT + 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Type the falling words before they hit the bottom")
    parser.add_argument("-d", "--dict", default=CONFIG["DICT_PATH"], help="Path to dictionary file")
    return parser.parse_args(argv)


def recreate_window(dims, flags=pygame.RESIZABLE):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def make_fonts(dims):
    font = pygame.font.SysFont("monospace", dims.cell_h)
    bold = pygame.font.SysFont("monospace", dims.cell_h, bold=True)
    return font, bold


def to_event(e, game_over):
    if e.type == pygame.QUIT: return Quit()
    if e.type == TICK_EVENT: return Tick()
    if e.type == pygame.VIDEORESIZE: return Resize(e.w, e.h)
    if e.type == pygame.KEYDOWN: return translate_key(e.key, e.unicode, e.mod, game_over)
    return None


def run(dictionary):
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.VIDEORESIZE, TICK_EVENT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Typefall")
    render = RenderAssets(dims, *make_fonts(dims))
    clock = pygame.time.Clock()

    rng = GameRandom(CONFIG["RNG_SEED"])
    state = GameState(dictionary)
    pygame.time.set_timer(TICK_EVENT, int(CONFIG["TICK_MS"]))
    log.info("Game started with %d words, tick %d ms", len(dictionary), CONFIG["TICK_MS"])

    def refresh_assets_if_cell_changed(w, h):
        nonlocal dims, screen, render
        new_dims = compute_dims(w, h)
        if new_dims.cell_h != dims.cell_h:
            dims = new_dims
            screen = recreate_window(dims)
            render = RenderAssets(dims, *make_fonts(dims))

    # pygame's queue already orders timer ticks and key presses
    while not state.quit_requested:
        for e in pygame.event.get():
            event = to_event(e, state.game_over)
            if event is None:
                continue
            state = dispatch(state, event, rng)
            if isinstance(event, Resize):
                refresh_assets_if_cell_changed(event.width, event.height)
            elif isinstance(event, Redraw):
                render.invalidate()
            if state.quit_requested:
                break

        render.draw(screen, snapshot(state))
        pygame.display.flip()
        clock.tick(30)

    pygame.time.set_timer(TICK_EVENT, 0)
    pygame.quit()
    return state


def main(argv=None):
    args = parse_args(argv)
    setup_logging(CONFIG["LOG_LEVEL"])
    try:
        dictionary = load_dictionary(args.dict)
    except DictionaryError as e:
        log.error("%s", e)
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        sys.exit(1)
    run(dictionary)


if __name__ == '__main__':
    main()
