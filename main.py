"""Game entry point"""

from __future__ import annotations

import pygame

from lawn.constants import (
    WIDTH, HEIGHT, FPS, MAX_FRAME_MS, FONT_NAME, FONT_SIZE_MEDIUM, FONT_SIZE_LARGE,
    HUD_PADDING, LOG_FILE,
)
from lawn.logger import GameLogger
from lawn.models import PlantKind
from lawn.world import World
from ui import HUD, GameOverScreen, LawnRenderer

SEED_KEYS = {
    pygame.K_1: PlantKind.SUNFLOWER,
    pygame.K_2: PlantKind.PEASHOOTER,
    pygame.K_3: PlantKind.WALLNUT,
}


class Game:
    """
    Frame driver and input adapter: owns the window and clock, feeds frame
    deltas to the world, turns clicks and keys into world actions, and draws
    the frame.
    """

    def __init__(self) -> None:
        """Initialize subsystems and set initial game state."""
        pygame.init()
        pygame.display.set_caption("Lawn Defense")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.logger = GameLogger(LOG_FILE)

        self.renderer = LawnRenderer()
        self.hud = HUD(self.font_small)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_small)

        self.paused = False
        self.show_fps = False
        self.fps_samples: list[float] = []
        self.reset_game()

    def reset_game(self) -> None:
        """Start a fresh session on a clean lawn."""
        self.world = World(logger=self.logger)
        self.paused = False

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        running = True
        while running:
            # Cap frame rate; long frames are clamped so nothing tunnels
            dt = min(self.clock.tick(FPS), MAX_FRAME_MS)

            self.fps_samples.append(self.clock.get_fps())
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and self.world.is_over:
                        self.reset_game()
                    elif event.key == pygame.K_p:
                        self.toggle_pause()
                    elif event.key == pygame.K_f:
                        self.show_fps = not self.show_fps
                    elif event.key in SEED_KEYS and self.world.running:
                        self.world.select_plant_kind(SEED_KEYS[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 \
                        and not self.paused and self.world.running:
                    self.handle_click(event.pos)

            if not self.paused:
                self.world.advance(dt)

            self.draw(avg_fps)

        pygame.quit()

    # --------------------------------- Input ----------------------------------------

    def handle_click(self, pos: tuple[int, int]) -> None:
        """
        Handle left-clicks: seed bar first, then the lawn (suns before planting).

        Parameters
        ----------
        pos : Tuple[int, int]
            Mouse click position
        """
        seed = self.hud.seed_at(pos)
        if seed is not None:
            self.world.select_plant_kind(seed)
            return
        self.world.act_at(*pos)

    def toggle_pause(self) -> None:
        if not self.world.is_over:
            self.paused = not self.paused

    # --------------------------------- Rendering ------------------------------------

    def draw(self, fps: float) -> None:
        """Compose the frame: lawn → entities → HUD → overlays."""
        self.renderer.draw(self.screen, self.world)
        self.hud.draw(self.screen, self.world, self.show_fps, fps, self.paused)

        if self.world.running:
            hint_text = "[LMB] sun / plant | [1-3] seed | [P] pause | [F] fps | [ESC] quit"
            hint = self.font_small.render(hint_text, True, (200, 200, 200))
            hint_rect = hint.get_rect(midbottom=(WIDTH // 2, HEIGHT - HUD_PADDING))
            self.screen.blit(hint, hint_rect)
        else:
            self.game_over_screen.draw(self.screen, self.world)

        pygame.display.flip()


def main() -> None:
    Game().run()


if __name__ == "__main__":
    main()
