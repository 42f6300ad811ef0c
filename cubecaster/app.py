"""The command that opens a window and runs the game."""

from __future__ import annotations

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .config import MAX_FPS, WIN_H, WIN_W, WINDOW_TITLE, Key  # noqa: E402
from .game import Game, QuitGame, load_textures  # noqa: E402
from .scene import SceneError, check_extension, load_scene  # noqa: E402

_USAGE = "Error: Only one map expected: Usage: cubecaster [map]"


def _build_keymap() -> dict[int, Key]:
    keymap = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_EQUALS: Key.PLUS,
        pygame.K_LSHIFT: Key.SHIFT,
        pygame.K_RSHIFT: Key.SHIFT,
    }
    for letter in "wsadprujikolmec":
        keymap[getattr(pygame, f"K_{letter}")] = Key[letter.upper()]
    return keymap


_KEYMAP = _build_keymap()


def translate_key(key: int) -> Key | None:
    """Map a pygame key constant to a game key code, or None if unused."""
    return _KEYMAP.get(key)


def _handle_event(game: Game, event) -> bool:
    """Feed one event to the game; return False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        code = translate_key(event.key)
        if code is not None:
            if event.type == pygame.KEYDOWN:
                game.key_press(code)
            else:
                game.key_release(code)
    elif event.type == pygame.MOUSEMOTION:
        game.mouse_moved(*event.pos)
    return True


def run(game: Game) -> int:
    """Open the window and run the game until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while True:
            try:
                for event in pygame.event.get():
                    if not _handle_event(game, event):
                        return 0
            except QuitGame:
                return 0
            game.update()
            game.draw()
            view = pygame.image.frombuffer(game.image.rgb_bytes(), game.image.size, "RGB")
            screen.blit(view, (0, 0))
            minimap = game.minimap_image
            overlay = pygame.image.frombuffer(minimap.rgb_bytes(), minimap.size, "RGB")
            screen.blit(overlay, game.minimap.position)
            pygame.display.flip()
            clock.tick(MAX_FPS)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    """Load the scene named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        check_extension(args[0])
        scene = load_scene(args[0])
        game = Game(scene, load_textures(scene))
    except SceneError as exc:
        print(exc)
        return 1
    return run(game)


if __name__ == "__main__":
    sys.exit(main())