"""Lawn renderer, HUD and Game Over screen"""

import pygame

from lawn.constants import (
    WIDTH, GRID_ROWS, GRID_COLS, CELL_WIDTH, CELL_HEIGHT, GRID_OFFSET_X, GRID_OFFSET_Y,
    HUD_PADDING, TEXT_COLOR, FONT_NAME, FONT_SIZE_SMALL, PLANT_STATS, SUN_HALF_EXTENT,
    LAWN_LIGHT, LAWN_DARK, GRID_LINE, BG_COLOR,
    SUNFLOWER_COLOR, PEASHOOTER_COLOR, WALLNUT_COLOR, ZOMBIE_COLORS,
    PEA_COLOR, SUN_COLOR, FLASH_COLOR,
)
from lawn.models import HealthBand, PlantKind, ZombieState
from lawn.world import World

PLANT_COLORS = {
    PlantKind.SUNFLOWER: SUNFLOWER_COLOR,
    PlantKind.PEASHOOTER: PEASHOOTER_COLOR,
    PlantKind.WALLNUT: WALLNUT_COLOR,
}

# Wallnut shell darkens as it cracks
BAND_SHADE = {
    HealthBand.UNDAMAGED: 1.0,
    HealthBand.DAMAGED: 0.75,
    HealthBand.CRITICAL: 0.5,
}

SEED_ORDER = [PlantKind.SUNFLOWER, PlantKind.PEASHOOTER, PlantKind.WALLNUT]
SEED_SLOT_W, SEED_SLOT_H = 90, 56


def _shade(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    return tuple(max(0, min(255, int(c * factor))) for c in color)


class LawnRenderer:
    """Draws the lawn and every entity procedurally from world state."""

    def draw(self, surf: pygame.Surface, world: World) -> None:
        """Compose the playfield: lawn → plants → zombies → peas → splashes → suns."""
        surf.fill(BG_COLOR)
        self.draw_lawn(surf)
        for plant in world.plants:
            self.draw_plant(surf, plant)
        for zombie in world.zombies:
            self.draw_zombie(surf, zombie)
        for pea in world.peas:
            pygame.draw.circle(surf, PEA_COLOR, (int(pea.x), int(pea.y)), 7)
        for splash in world.splashes:
            self.draw_splash(surf, splash)
        for sun in world.suns:
            self.draw_sun(surf, sun)

    def draw_lawn(self, surf: pygame.Surface) -> None:
        for r in range(GRID_ROWS):
            for c in range(GRID_COLS):
                x = GRID_OFFSET_X + c * CELL_WIDTH
                y = GRID_OFFSET_Y + r * CELL_HEIGHT
                color = LAWN_LIGHT if (r + c) % 2 == 0 else LAWN_DARK
                pygame.draw.rect(surf, color, (x, y, CELL_WIDTH, CELL_HEIGHT))

        # Subtle grid lines on top
        overlay = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        for r in range(GRID_ROWS):
            for c in range(GRID_COLS):
                x = GRID_OFFSET_X + c * CELL_WIDTH
                y = GRID_OFFSET_Y + r * CELL_HEIGHT
                pygame.draw.rect(overlay, GRID_LINE, (x, y, CELL_WIDTH, CELL_HEIGHT), 1)
        surf.blit(overlay, (0, 0))

    def draw_plant(self, surf: pygame.Surface, plant) -> None:
        if not plant.alive:
            return
        pos = plant.position
        center = (int(pos.x), int(pos.y))
        color = PLANT_COLORS[plant.kind]

        if plant.kind is PlantKind.WALLNUT:
            color = _shade(color, BAND_SHADE[plant.health_band])
            rect = pygame.Rect(0, 0, 44, 52)
            rect.center = center
            pygame.draw.ellipse(surf, color, rect)
            if plant.health_band is not HealthBand.UNDAMAGED:
                pygame.draw.line(surf, (60, 40, 20), (rect.centerx - 8, rect.top + 10),
                                 (rect.centerx + 4, rect.centery), 2)
            if plant.health_band is HealthBand.CRITICAL:
                pygame.draw.line(surf, (60, 40, 20), (rect.centerx + 10, rect.top + 14),
                                 (rect.centerx - 2, rect.bottom - 12), 2)
        elif plant.kind is PlantKind.SUNFLOWER:
            pygame.draw.circle(surf, color, center, 20)
            pygame.draw.circle(surf, (140, 90, 30), center, 9)
        else:
            pygame.draw.circle(surf, color, center, 18)
            pygame.draw.rect(surf, color, (center[0], center[1] - 6, 22, 12))

        if plant.is_flashing:
            pygame.draw.circle(surf, FLASH_COLOR, center, 24, 2)

        self.draw_health_bar(surf, center[0], center[1] - 32, plant.health_ratio)

    def draw_zombie(self, surf: pygame.Surface, zombie) -> None:
        color = ZOMBIE_COLORS[zombie.kind]
        body = pygame.Rect(0, 0, 34, 56)
        body.center = (int(zombie.x), int(zombie.y))

        if zombie.state is ZombieState.DEFEATED:
            # Corpse lies flat and fades
            alpha = int(255 * zombie.corpse_fade)
            corpse = pygame.Surface((body.h, body.w), pygame.SRCALPHA)
            corpse.fill((*_shade(color, 0.6), alpha))
            surf.blit(corpse, corpse.get_rect(midbottom=body.midbottom))
            return

        if zombie.state is ZombieState.FEEDING:
            body.x -= 4  # lean into the bite
        pygame.draw.rect(surf, color, body, border_radius=6)
        pygame.draw.circle(surf, _shade(color, 1.2), (body.centerx - 4, body.top + 10), 11)
        self.draw_health_bar(surf, body.centerx, body.top - 8, zombie.health_ratio)

    def draw_splash(self, surf: pygame.Surface, splash) -> None:
        alpha = int(255 * splash.fade)
        if alpha <= 0:
            return
        splash_surf = pygame.Surface((24, 24), pygame.SRCALPHA)
        pygame.draw.circle(splash_surf, (*PEA_COLOR, alpha), (12, 12), 12)
        surf.blit(splash_surf, (splash.x - 12, splash.y - 12))

    def draw_sun(self, surf: pygame.Surface, sun) -> None:
        # Blink during the last quarter of its life
        if sun.fade_ratio < 0.25 and int(sun.life // 150) % 2 == 0:
            return
        sun_surf = pygame.Surface((SUN_HALF_EXTENT * 2, SUN_HALF_EXTENT * 2), pygame.SRCALPHA)
        pygame.draw.circle(sun_surf, (*SUN_COLOR, 90), (SUN_HALF_EXTENT, SUN_HALF_EXTENT), SUN_HALF_EXTENT)
        pygame.draw.circle(sun_surf, SUN_COLOR, (SUN_HALF_EXTENT, SUN_HALF_EXTENT), SUN_HALF_EXTENT - 8)
        surf.blit(sun_surf, (sun.x - SUN_HALF_EXTENT, sun.y - SUN_HALF_EXTENT))

    def draw_health_bar(self, surf: pygame.Surface, center_x: int, y: int, ratio: float) -> None:
        bar_width = 40
        bar_height = 4
        bar_x = center_x - bar_width // 2

        pygame.draw.rect(surf, (50, 50, 50), (bar_x, y, bar_width, bar_height))

        filled_width = int(bar_width * ratio)
        if ratio > 0.6:
            color = (0, 255, 0)
        elif ratio > 0.3:
            color = (255, 255, 0)
        else:
            color = (255, 0, 0)

        if filled_width > 0:
            pygame.draw.rect(surf, color, (bar_x, y, filled_width, bar_height))

        pygame.draw.rect(surf, (200, 200, 200), (bar_x, y, bar_width, bar_height), 1)


class HUD:
    """Heads-Up Display: seed bar and sun counter on the left, status on the right."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        self.sun_box = pygame.Rect(HUD_PADDING, HUD_PADDING, 80, SEED_SLOT_H)
        self.seed_slots: dict[PlantKind, pygame.Rect] = {}
        x = self.sun_box.right + HUD_PADDING
        for kind in SEED_ORDER:
            self.seed_slots[kind] = pygame.Rect(x, HUD_PADDING, SEED_SLOT_W, SEED_SLOT_H)
            x += SEED_SLOT_W + 6

    def seed_at(self, pos: tuple[int, int]) -> PlantKind | None:
        """Return the seed whose slot contains pos, if any."""
        for kind, rect in self.seed_slots.items():
            if rect.collidepoint(pos):
                return kind
        return None

    def draw(self, surf: pygame.Surface, world: World, show_fps: bool = False,
             fps: float = 0.0, paused: bool = False) -> None:
        """Render the seed bar, sun counter and optional indicators."""
        # LEFT SIDE: sun counter and seed bar
        pygame.draw.rect(surf, (60, 45, 25), self.sun_box, border_radius=6)
        pygame.draw.circle(surf, SUN_COLOR, (self.sun_box.centerx, self.sun_box.top + 18), 12)
        sun_text = self.font.render(str(world.sun_points), True, TEXT_COLOR)
        surf.blit(sun_text, sun_text.get_rect(center=(self.sun_box.centerx, self.sun_box.bottom - 12)))

        for index, kind in enumerate(SEED_ORDER):
            rect = self.seed_slots[kind]
            affordable = world.can_afford(kind)
            bg = (95, 75, 45) if affordable else (55, 50, 45)
            pygame.draw.rect(surf, bg, rect, border_radius=6)
            if world.selected_kind is kind:
                pygame.draw.rect(surf, FLASH_COLOR, rect, 3, border_radius=6)

            pygame.draw.circle(surf, PLANT_COLORS[kind], (rect.left + 18, rect.centery - 6), 11)
            name = self.small_font.render(f"{index + 1} {kind.value.title()}", True, TEXT_COLOR)
            surf.blit(name, (rect.left + 6, rect.bottom - name.get_height() - 4))
            cost_color = TEXT_COLOR if affordable else (200, 120, 120)
            cost = self.small_font.render(str(PLANT_STATS[kind].cost), True, cost_color)
            surf.blit(cost, (rect.right - cost.get_width() - 6, rect.top + 6))

        # RIGHT SIDE: optional indicators
        right_y = HUD_PADDING
        if show_fps:
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            fps_text = self.small_font.render(f"FPS: {fps:.1f}", True, fps_color)
            surf.blit(fps_text, (WIDTH - fps_text.get_width() - HUD_PADDING, right_y))
            right_y += fps_text.get_height() + 4

        zombies_text = self.small_font.render(f"Zombies: {sum(1 for z in world.zombies if z.alive)}",
                                              True, TEXT_COLOR)
        surf.blit(zombies_text, (WIDTH - zombies_text.get_width() - HUD_PADDING, right_y))

        if paused:
            current_width = surf.get_width()
            current_height = surf.get_height()
            pause_text = self.font.render("PAUSED", True, (255, 255, 100))
            pause_y = max(80, int(current_height * 0.15))
            text_rect = pause_text.get_rect(center=(current_width // 2, pause_y))
            # Semi-transparent background
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)


class GameOverScreen:
    """Game over screen with final stats and restart option."""
    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface, world: World) -> None:
        """
        Draw game over screen.
        """
        current_width = surf.get_width()
        current_height = surf.get_height()

        # Semi-transparent overlay
        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        game_over_text = self.font_big.render("THE ZOMBIES ATE YOUR LAWN", True, (255, 100, 100))
        title_y = max(80, int(current_height * 0.25))  # 25% from top, minimum 80px
        game_over_rect = game_over_text.get_rect(center=(current_width // 2, title_y))
        surf.blit(game_over_text, game_over_rect)

        stats_lines = [
            f"Survived: {world.elapsed_ms / 1000:.1f} s",
            f"Zombies spawned: {world.spawner.spawned}",
            f"Plants standing: {len(world.plants)}",
        ]

        stats_start_y = max(title_y + 80, int(current_height * 0.4))  # 40% from top or below title
        y_offset = stats_start_y
        for line in stats_lines:
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            text_rect = text_surf.get_rect(center=(current_width // 2, y_offset))
            surf.blit(text_surf, text_rect)
            y_offset += 30

        inst_text = self.font_small.render("Press R to restart or ESC to quit", True, (150, 150, 150))
        inst_y = y_offset + 30
        inst_rect = inst_text.get_rect(center=(current_width // 2, inst_y))
        surf.blit(inst_text, inst_rect)
