#!/usr/bin/env python3
"""
Food Catalog Seed Script

Writes a starter `foods` catalog for Macro Tracker.
All nutritional values are per 100g unless otherwise specified.
An existing catalog is never overwritten.
"""

from pathlib import Path

from rich.console import Console

from catalog import CATALOG_PATH, write_catalog
from logic import FoodRecord

console = Console()

# Food data: (name, calories, carbs, fat, protein, unit)
FOODS_DATA = [
    # Protein products
    ("Protein Shake", 138, 10.6, 5.6, 10, "100g"),
    ("Protein Bar", 178, 12, 4, 13, "100g"),
    ("Protein Bowl", 86, 12, 1.5, 4.6, "100g"),

    # Nuts and snacks
    ("Roasted Chickpeas", 279, 32, 13, 10, "100g"),
    ("Salted Peanuts", 619, 11, 51, 24, "100g"),
    ("Almonds", 576, 22, 49, 21, "100g"),
    ("Cashews", 589, 24, 45, 20, "100g"),

    # Fruits
    ("Banana", 108, 28.8, 0.6, 1.4, "100g"),
    ("Strawberry", 32, 7.7, 0.3, 0.7, "100g"),

    # Dairy
    ("Milk", 64, 4.8, 3.5, 3.3, "100g"),
    ("Cheese", 300, 0, 24, 20, "100g"),

    # Meats
    ("Chicken", 164, 0, 3.5, 31, "100g"),
    ("Spare Ribs", 243, 5.8, 15, 21, "100g"),
    ("Bacon", 600, 0, 40, 35, "100g"),
    ("Minced Meat", 280, 0, 20, 20, "100g"),

    # Fish
    ("Tuna Fish", 115, 0, 0.9, 26.6, "100g"),

    # Eggs
    ("Egg", 70, 1, 5, 6, "each"),

    # Vegetables and sides
    ("Veggies", 47, 4.4, 0.3, 1.7, "100g"),
    ("Chili Beans", 70, 8.2, 0.8, 3.9, "100g"),

    # Carbs
    ("Baked Potato", 93, 21, 0.1, 2.5, "100g"),
    ("Basmati Rice", 140, 28.8, 1, 3.2, "100g"),
    ("French Fries", 280, 35, 12, 3, "100g"),
]

HEADER = "name\tcalories\tcarbs\tfat\tprotein\tunit"


def seed_catalog(path=CATALOG_PATH) -> int:
    """Write the starter catalog. Returns the number of foods written, 0 if it already existed."""
    path = Path(path)
    if path.exists():
        return 0

    records = [FoodRecord(name, float(calories), float(carbs), float(fat), float(protein), unit)
               for name, calories, carbs, fat, protein, unit in FOODS_DATA]
    return write_catalog(records, path, header=HEADER)


def main():
    console.print("[bold cyan]Macro Tracker - Catalog Seed[/bold cyan]")
    console.print("=" * 40)

    path = CATALOG_PATH
    written = seed_catalog(path)

    if written:
        console.print(f"[green]Wrote {written} foods to {path}[/green]")
    else:
        console.print(f"[yellow]{path} already exists, left unchanged[/yellow]")


if __name__ == "__main__":
    main()
