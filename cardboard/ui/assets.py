"""
Card image lookup for the Blackjack UI.

Image names have the format "[rank][suit].GIF", for example "aceclubs.GIF" or
"10hearts.GIF". A face-down or missing card uses "back1.GIF".

No images ship with the package. Point ``CARDBOARD_CARD_IMAGES`` at a
directory holding the 52 card faces and the back. Without it the lookup falls
back to ``cardboard/ui/cards``, which is not part of the package, so every
card renders as a text placeholder.
"""

import os
from pathlib import Path
from typing import Optional, Union

from cardboard.common.card import Card

IMAGE_EXTENSION = ".GIF"
CARD_BACK = "back1" + IMAGE_EXTENSION
DEFAULT_IMAGE_DIR = Path(__file__).parent / "cards"


class MissingAssetError(FileNotFoundError):
    """Raised when a card image cannot be found."""

    pass


def image_key(card: Optional[Card], hidden: bool = False) -> str:
    """
    Returns the image file name for ``card``.

    >>> from cardboard.common.card import Rank, Suit
    >>> image_key(Card(Suit.CLUBS, Rank.ACE, 1))
    'aceclubs.GIF'
    >>> image_key(Card(Suit.CLUBS, Rank.ACE, 1), hidden=True)
    'back1.GIF'
    """
    if card is None or hidden:
        return CARD_BACK
    return card.image_key + IMAGE_EXTENSION


class CardImages:
    """Resolves card image names to files in one directory."""

    def __init__(self, directory: Union[str, Path, None] = None):
        if directory is None:
            directory = os.environ.get("CARDBOARD_CARD_IMAGES", DEFAULT_IMAGE_DIR)
        self.directory = Path(directory)

    def path_for(self, card: Optional[Card], hidden: bool = False) -> Path:
        """
        Returns the path of the image for ``card``.

        :raises MissingAssetError: If the image file does not exist.
        """
        path = self.directory / image_key(card, hidden)
        if not path.is_file():
            raise MissingAssetError(f'Card image not found: "{path}"')
        return path
