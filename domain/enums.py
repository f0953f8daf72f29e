"""
Domain enums for BarBook.
Contains the controlled vocabularies used by the workbook tables.
"""

import enum


class IngredientCategory(str, enum.Enum):
    """Ingredient categories"""

    VODKA = "Vodka"
    TEQUILA = "Tequila"
    BOURBON = "Bourbon"
    SCOTCH = "Scotch"
    GIN = "Gin"
    RUM = "Rum"
    LIQUEURS = "Liqueurs/Cordials/Schnapps"
    BRANDY_COGNAC = "Brandy & Cognac"
    MIXERS_MODIFIERS = "Mixers & Modifiers"
    FRESH_INGREDIENTS = "Fresh Ingredients"
    GARNISHES_ACCESSORIES = "Garnishes & Accessories"
    WINES = "Wines"
    BEERS = "Beers"
    NON_ALCOHOLIC = "Non-Alcoholic"


class RecipeCategory(str, enum.Enum):
    """Drink recipe categories"""

    COCKTAIL = "Cocktail"
    MOCKTAIL = "Mocktail"
    SHOT = "Shot"
    PUNCH = "Punch"
    HOT_DRINK = "Hot Drink"
    FROZEN_DRINK = "Frozen Drink"
    WINE_COCKTAIL = "Wine Cocktail"
    BEER_COCKTAIL = "Beer Cocktail"
    SPECIALTY = "Specialty"


class Difficulty(str, enum.Enum):
    """Recipe difficulty levels"""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class Unit(str, enum.Enum):
    """Measuring units for recipe ingredients"""

    ML = "ml"
    OZ = "oz"
    CL = "cl"
    L = "l"
    CUP = "cup"
    TBSP = "tbsp"
    TSP = "tsp"
    DASH = "dash"
    SPLASH = "splash"
    DROP = "drop"
    PIECE = "piece"
    SLICE = "slice"
    WEDGE = "wedge"
    TWIST = "twist"
    SPRIG = "sprig"
    LEAF = "leaf"
    GRAM = "gram"
    KG = "kg"
