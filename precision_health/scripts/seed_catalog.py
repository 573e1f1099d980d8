"""
Seed Catalog Script
Populates the global catalog tables from config/catalog_seed.py.
Rows are matched by natural key, so the script can be re-run safely.

    python -m precision_health.scripts.seed_catalog
"""

import sys
from precision_health.config import catalog_seed
from precision_health.database.supabase_client import get_supabase
from supabase import Client
from typing import Any, Dict, Optional, Tuple
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class SeedCounts:
    def __init__(self, table: str):
        self.table = table
        self.created = 0
        self.updated = 0

    def record(self, created: bool) -> None:
        if created:
            self.created += 1
        else:
            self.updated += 1

    def log(self) -> int:
        logger.info(f"{self.table} seeded: {self.created} created, {self.updated} updated")
        return self.created + self.updated


def upsert_by_key(supabase: Client, table: str, key: Dict[str, Any], values: Dict[str, Any]) -> Tuple[str, bool]:
    """Update the row matching every key column, or insert it. Returns (id, created)."""
    query = supabase.table(table).select("id")
    for column, value in key.items():
        query = query.eq(column, value)
    existing = query.execute()

    if existing.data:
        row_id = existing.data[0]["id"]
        supabase.table(table).update(values).eq("id", row_id).execute()
        return row_id, False

    result = supabase.table(table).insert({**key, **values}).execute()
    return result.data[0]["id"], True


def _id_by_name(supabase: Client, table: str, name: str) -> Optional[str]:
    result = supabase.table(table).select("id").eq("name", name).execute()
    return result.data[0]["id"] if result.data else None


def seed_ingredients(supabase: Client) -> int:
    logger.info("Seeding ingredients...")
    counts = SeedCounts("ingredients")
    for ingredient in catalog_seed.INGREDIENTS:
        try:
            values = {k: v for k, v in ingredient.items() if k != "name"}
            _, created = upsert_by_key(supabase, "ingredients", {"name": ingredient["name"]}, values)
            counts.record(created)
        except Exception as e:
            logger.error(f"Error processing ingredient {ingredient['name']}: {e}")
    return counts.log()


def seed_contraindications(supabase: Client) -> int:
    logger.info("Seeding contraindications...")
    counts = SeedCounts("ingredient_contraindications")
    for row in catalog_seed.CONTRAINDICATIONS:
        try:
            ingredient_id = _id_by_name(supabase, "ingredients", row["ingredient"])
            if not ingredient_id:
                logger.warning(f"Ingredient {row['ingredient']} not found, skipping contraindication")
                continue
            key = {
                "ingredient_id": ingredient_id,
                "condition_name": row["condition_name"],
                "species_type": row["species_type"],
            }
            values = {
                "contraindication_type": row["contraindication_type"],
                "rationale": row["rationale"],
            }
            _, created = upsert_by_key(supabase, "ingredient_contraindications", key, values)
            counts.record(created)
        except Exception as e:
            logger.error(f"Error processing contraindication for {row['ingredient']}: {e}")
    return counts.log()


def seed_substitutions(supabase: Client) -> int:
    logger.info("Seeding substitutions...")
    counts = SeedCounts("ingredient_substitutions")
    for row in catalog_seed.SUBSTITUTIONS:
        try:
            original_id = _id_by_name(supabase, "ingredients", row["original"])
            substitute_id = _id_by_name(supabase, "ingredients", row["substitute"])
            if not original_id or not substitute_id:
                logger.warning(f"Skipping substitution {row['original']} -> {row['substitute']}")
                continue
            key = {"original_ingredient_id": original_id, "substitute_ingredient_id": substitute_id}
            values = {"substitution_ratio": row["substitution_ratio"], "notes": row["notes"]}
            _, created = upsert_by_key(supabase, "ingredient_substitutions", key, values)
            counts.record(created)
        except Exception as e:
            logger.error(f"Error processing substitution {row['original']}: {e}")
    return counts.log()


def seed_recipes(supabase: Client) -> int:
    logger.info("Seeding recipes...")
    counts = SeedCounts("recipes")
    for recipe in catalog_seed.RECIPES:
        try:
            values = {k: v for k, v in recipe.items() if k != "name"}
            _, created = upsert_by_key(supabase, "recipes", {"name": recipe["name"]}, values)
            counts.record(created)
        except Exception as e:
            logger.error(f"Error processing recipe {recipe['name']}: {e}")
    return counts.log()


def seed_restaurants(supabase: Client) -> int:
    logger.info("Seeding restaurants and dishes...")
    restaurants = SeedCounts("restaurants")
    dishes = SeedCounts("dishes")
    for restaurant in catalog_seed.RESTAURANTS:
        try:
            values = {k: v for k, v in restaurant.items() if k not in ("name", "dishes")}
            restaurant_id, created = upsert_by_key(supabase, "restaurants", {"name": restaurant["name"]}, values)
            restaurants.record(created)

            for dish in restaurant["dishes"]:
                key = {"restaurant_id": restaurant_id, "name": dish["name"]}
                dish_values = {**{k: v for k, v in dish.items() if k != "name"}, "available": True}
                _, created = upsert_by_key(supabase, "dishes", key, dish_values)
                dishes.record(created)
        except Exception as e:
            logger.error(f"Error processing restaurant {restaurant['name']}: {e}")
    return restaurants.log() + dishes.log()


def seed_grocery(supabase: Client) -> int:
    logger.info("Seeding grocery stores and products...")
    stores = SeedCounts("grocery_stores")
    products = SeedCounts("grocery_products")
    for store in catalog_seed.GROCERY_STORES:
        try:
            values = {k: v for k, v in store.items() if k != "name"}
            store_id, created = upsert_by_key(supabase, "grocery_stores", {"name": store["name"]}, values)
            stores.record(created)

            for product in catalog_seed.GROCERY_PRODUCTS.get(store["name"], []):
                key = {"store_id": store_id, "sku": product["sku"]}
                product_values = {**{k: v for k, v in product.items() if k != "sku"}, "in_stock": True}
                _, created = upsert_by_key(supabase, "grocery_products", key, product_values)
                products.record(created)
        except Exception as e:
            logger.error(f"Error processing store {store['name']}: {e}")
    return stores.log() + products.log()


def seed_medications(supabase: Client) -> int:
    logger.info("Seeding medications...")
    counts = SeedCounts("medications")
    for medication in catalog_seed.MEDICATIONS:
        try:
            values = {k: v for k, v in medication.items() if k != "name"}
            _, created = upsert_by_key(supabase, "medications", {"name": medication["name"]}, values)
            counts.record(created)
        except Exception as e:
            logger.error(f"Error processing medication {medication['name']}: {e}")
    return counts.log()


def seed_interactions(supabase: Client) -> int:
    logger.info("Seeding medication interactions...")
    counts = SeedCounts("medication_interactions")
    for row in catalog_seed.MEDICATION_INTERACTIONS:
        try:
            medication_id = _id_by_name(supabase, "medications", row["medication"])
            if not medication_id:
                logger.warning(f"Medication {row['medication']} not found, skipping interaction")
                continue
            key = {"medication_id_1": medication_id, "interacting_substance": row["interacting_substance"]}
            values = {k: v for k, v in row.items() if k not in ("medication", "interacting_substance")}
            _, created = upsert_by_key(supabase, "medication_interactions", key, values)
            counts.record(created)
        except Exception as e:
            logger.error(f"Error processing interaction {row['medication']} + {row['interacting_substance']}: {e}")
    return counts.log()


def seed_all(supabase: Client) -> int:
    # Ingredients and medications first; later tables reference them by id
    return sum([
        seed_ingredients(supabase),
        seed_contraindications(supabase),
        seed_substitutions(supabase),
        seed_recipes(supabase),
        seed_restaurants(supabase),
        seed_grocery(supabase),
        seed_medications(supabase),
        seed_interactions(supabase),
    ])


def main():
    """Main function to seed the catalog"""
    try:
        supabase = get_supabase()
        logger.info("Starting catalog seeding...")
        total = seed_all(supabase)
        logger.info(f"Seeding completed successfully! {total} rows processed")
    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
