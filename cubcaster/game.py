"""The game state, its per-frame update and the command that starts it."""

from __future__ import annotations

import sys
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field

from PIL import Image as PILImage

from .assets import HEIGHT, AssetManager
from .cubmap import CubMap
from .errors import CubError, format_error
from .geometry import Player
from .image import Image
from .movement import Key, apply_keys, apply_mouse_motion, resolve_collision
from .raycast import WIDTH, Ray, cast_rays
from .reader import load_map
from .render import compose_frame, draw_map_player, draw_minimap, draw_scene, draw_weapon

USAGE = "Usage: cubcaster [map_path]/[map_name].cub"
TITLE = "cub3D"
FPS = 60


@dataclass
class Game:
    """A loaded scene, the player in it and the images that show it."""

    cub_map: CubMap
    player: Player
    assets: AssetManager
    mouse_x: int = 0
    rays: list[Ray] = field(default_factory=list)

    def _attack(self, mouse_down: bool, delta: float) -> None:
        sprite = self.assets.sprite_weapon
        if mouse_down:
            self.player.is_attacking = True
            if sprite.advance(delta):
                self.player.is_attacking = False
        else:
            self.player.is_attacking = False
            sprite.reset()

    def _draw(self) -> None:
        assets = self.assets
        draw_map_player(assets.map, assets.m_player, self.player.prev, self.player.current)
        draw_minimap(assets.m_map, assets.map, self.player,
                     self.cub_map.width, self.cub_map.height)
        draw_weapon(assets.player, assets.sprite_weapon)
        draw_scene(assets.scene, self.rays)

    def update(self, pressed: Collection[Key], mouse_x: int, mouse_down: bool,
               delta: float) -> bool:
        """Advance one frame; return False when the game should stop."""
        if apply_keys(self.player, pressed):
            return False
        apply_mouse_motion(self.player, self.mouse_x, mouse_x)
        self.mouse_x = mouse_x
        self._attack(mouse_down, delta)
        resolve_collision(self.player, self.cub_map)
        self.rays = cast_rays(self.player, self.cub_map.grid, self.assets.walls,
                              self.assets.scene.width)
        self._draw()
        return True

    def frame(self) -> Image:
        """Composite every layer into one window-sized image."""
        canvas = PILImage.new("RGBA", (WIDTH, HEIGHT), (0, 0, 0, 0))
        for image, x, y in compose_frame(self.assets):
            layer = PILImage.frombytes("RGBA", (image.width, image.height), bytes(image.pixels))
            canvas.alpha_composite(layer, dest=(x, y))
        return Image(WIDTH, HEIGHT, canvas.tobytes())

    def run(self) -> None:
        """Open the window and play until it is closed or escape is pressed."""
        import pygame

        keymap = {
            Key.W: pygame.K_w,
            Key.S: pygame.K_s,
            Key.A: pygame.K_a,
            Key.D: pygame.K_d,
            Key.LEFT: pygame.K_LEFT,
            Key.RIGHT: pygame.K_RIGHT,
            Key.ESCAPE: pygame.K_ESCAPE,
        }
        pygame.init()
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            self.mouse_x = pygame.mouse.get_pos()[0]
            while True:
                delta = clock.tick(FPS) / 1000.0
                if any(event.type == pygame.QUIT for event in pygame.event.get()):
                    return
                state = pygame.key.get_pressed()
                pressed = {key for key, code in keymap.items() if state[code]}
                mouse_x = pygame.mouse.get_pos()[0]
                mouse_down = bool(pygame.mouse.get_pressed()[0])
                if not self.update(pressed, mouse_x, mouse_down, delta):
                    return
                picture = self.frame()
                surface = pygame.image.frombuffer(
                    bytes(picture.pixels), (picture.width, picture.height), "RGBA"
                )
                screen.blit(surface, (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene file named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write(format_error(USAGE))
        return 1
    try:
        cub_map, player = load_map(args[0])
        assets = AssetManager.build(cub_map)
    except CubError as exc:
        sys.stderr.write(exc.report())
        return 1
    Game(cub_map, player, assets).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())