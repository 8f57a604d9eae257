"""
==============================================================================
Product Categories Module
==============================================================================

Fixed, order-significant category enumeration used to populate the
category selection control.

The same fifteen categories are available under two label sets. The
configured locale decides which labels are offered and accepted.

==============================================================================
"""

from __future__ import annotations

import enum
from typing import Dict, List


class Category(str, enum.Enum):
    """
    Product category enumeration.

    Declaration order is the order shown in the selection control.
    The enum inherits from str to enable JSON serialization.
    """

    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    BOOKS = "Books"
    FOOD = "Food"
    BEVERAGES = "Beverages"
    HOME_GARDEN = "Home & Garden"
    HEALTH_BEAUTY = "Health & Beauty"
    SPORTS_FITNESS = "Sports & Fitness"
    AUTOMOTIVE = "Automotive"
    TOYS = "Toys"
    TOOLS = "Tools"
    FURNITURE = "Furniture"
    STATIONERY = "Stationery"
    MUSICAL_INSTRUMENTS = "Musical Instruments"
    GAMES = "Games & Video Games"

    def __str__(self) -> str:
        """Return the enum value as string."""
        return self.value

    def label(self, locale: str = "en") -> str:
        """Get the display label for a locale."""
        return CATEGORY_LABELS[locale][self]


CATEGORY_LABELS: Dict[str, Dict[Category, str]] = {
    "en": {category: category.value for category in Category},
    "pt-BR": {
        Category.ELECTRONICS: "Eletrônicos",
        Category.CLOTHING: "Roupas",
        Category.BOOKS: "Livros",
        Category.FOOD: "Alimentos",
        Category.BEVERAGES: "Bebidas",
        Category.HOME_GARDEN: "Casa e Jardim",
        Category.HEALTH_BEAUTY: "Saúde e Beleza",
        Category.SPORTS_FITNESS: "Esportes e Fitness",
        Category.AUTOMOTIVE: "Automotivo",
        Category.TOYS: "Brinquedos",
        Category.TOOLS: "Ferramentas",
        Category.FURNITURE: "Móveis",
        Category.STATIONERY: "Papelaria",
        Category.MUSICAL_INSTRUMENTS: "Instrumentos Musicais",
        Category.GAMES: "Jogos e Videogames",
    },
}


def category_options(locale: str = "en") -> List[str]:
    """
    Get the category labels for a locale, in display order.

    Args:
        locale: One of the keys of CATEGORY_LABELS

    Returns:
        List of fifteen labels

    Raises:
        KeyError: If the locale has no label set
    """
    labels = CATEGORY_LABELS[locale]
    return [labels[category] for category in Category]
