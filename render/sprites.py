from __future__ import annotations

"""Pygame sprites for characters placed on the tile map.

Each :class:`CharacterSprite` follows one character and snaps to its tile
every update.  The :class:`Spriteset` owns the sprites of a map scene: the
``character_sprites`` list keeps creation order while the ``tilemap`` group
handles layered drawing.
"""

from typing import List, Optional, Tuple

import pygame

import constants
from core.characters import Character, Player
from core.game_map import GameMap


class CharacterSprite(pygame.sprite.Sprite):
    """Coloured square standing for ``character`` on the map."""

    def __init__(self, character: Character, image: Optional[pygame.Surface] = None) -> None:
        super().__init__()
        self.character = character
        if image is None:
            size = constants.TILE_SIZE
            image = pygame.Surface((size, size), pygame.SRCALPHA)
            colour = constants.CHARACTER_COLOURS.get(character.kind, constants.GREY)
            image.fill(colour)
        self.image = image
        self.rect = self.image.get_rect()
        self.update()

    def update(self, *args, **kwargs) -> None:
        self.rect.topleft = self.screen_position()

    def screen_position(self) -> Tuple[int, int]:
        size = constants.TILE_SIZE
        x, y = self.character.position
        return x * size, y * size


class Spriteset:
    """Sprites of the current map scene."""

    def __init__(self, game_map: GameMap, player: Optional[Player] = None) -> None:
        self.game_map = game_map
        self.character_sprites: List[CharacterSprite] = []
        self.tilemap = pygame.sprite.LayeredUpdates()
        self._create_characters(player)

    def _create_characters(self, player: Optional[Player]) -> None:
        for event in self.game_map.events.values():
            self.add_character(CharacterSprite(event))
        for vehicle in self.game_map.vehicles:
            if vehicle.map_id == self.game_map.map_id:
                self.add_character(CharacterSprite(vehicle))
        if player is not None:
            self.add_character(CharacterSprite(player))

    def add_character(self, sprite: CharacterSprite) -> None:
        """Register ``sprite`` for updates and draw it on the character layer."""

        self.character_sprites.append(sprite)
        self.tilemap.add(sprite, layer=constants.LAYER_CHARACTERS)

    def update(self) -> None:
        self.tilemap.update()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the passage grid and every character onto ``surface``."""

        size = constants.TILE_SIZE
        for y in range(self.game_map.height):
            for x in range(self.game_map.width):
                colour = constants.GREEN if self.game_map.is_passable(x, y) else constants.GREY
                pygame.draw.rect(surface, colour, pygame.Rect(x * size, y * size, size, size))
        self.tilemap.draw(surface)
