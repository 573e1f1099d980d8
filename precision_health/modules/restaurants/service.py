from supabase import Client
from precision_health.core.safety import (
    AVOID, RISK_FILTERS, DishRiskScorer, matches_risk_filter, unassessed_dish
)
from precision_health.modules.ingredients.service import IngredientService
from precision_health.modules.profiles.service import ProfileService
from precision_health.modules.restaurants.schemas import (
    RestaurantResponse, DishResponse, DishRiskAssessment, OrderCreate, OrderResponse
)
from typing import Any, Dict, List, Optional
from fastapi import HTTPException
from datetime import datetime
import logging

logger = logging.getLogger(__name__)


class RestaurantService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.ingredients = IngredientService(supabase)
        self.profiles = ProfileService(supabase)

    def list_restaurants(self, cuisine: Optional[str] = None) -> List[RestaurantResponse]:
        try:
            query = self.supabase.table("restaurants").select("*")
            if cuisine:
                query = query.eq("cuisine_type", cuisine)
            result = query.order("rating", desc=True).execute()
            return [RestaurantResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error loading restaurants: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def list_cuisines(self) -> List[str]:
        try:
            result = self.supabase.table("restaurants").select("cuisine_type").execute()
            return sorted({row["cuisine_type"] for row in result.data or [] if row.get("cuisine_type")})
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def _get_restaurant_row(self, restaurant_id: str) -> Dict[str, Any]:
        result = self.supabase.table("restaurants")\
            .select("*")\
            .eq("id", restaurant_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Restaurant not found")
        return result.data

    def get_restaurant(self, restaurant_id: str) -> RestaurantResponse:
        try:
            return RestaurantResponse(**self._get_restaurant_row(restaurant_id))
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    # ------------------------------------------------------------------
    # Dish risk
    # ------------------------------------------------------------------

    def assess_dish(self, dish: Dict[str, Any], species: str) -> Dict[str, Any]:
        """
        Score one dish for a species.

        Ingredients are matched to the catalog by exact name (ignoring case);
        names not in the catalog are skipped. Any lookup failure yields the
        neutral "unable to assess" result instead of failing the whole menu.
        """
        try:
            scorer = DishRiskScorer(species)
            for name in dish.get("ingredients") or []:
                ingredient = self.ingredients.find_by_exact_name(name)
                if not ingredient:
                    continue
                if scorer.apply_species_rules(ingredient):
                    break
                contraindications = self.ingredients.contraindications_for(ingredient["id"], species)
                scorer.apply_contraindication(ingredient, contraindications[0] if contraindications else None)

            assessment = scorer.result()
            assessment["recommended_substitutions"] = self.ingredients.substitute_names(
                scorer.flagged_ingredient_ids
            )
            return assessment
        except Exception as e:
            logger.error(f"Error assessing dish {dish.get('id')}: {e}")
            return unassessed_dish()

    def _store_assessment(self, profile_id: str, dish_id: str, assessment: Dict[str, Any]) -> None:
        try:
            self.supabase.table("dish_risk_assessments").upsert({
                "profile_id": profile_id,
                "dish_id": dish_id,
                **assessment,
                "assessed_at": datetime.utcnow().isoformat(),
            }, on_conflict="profile_id,dish_id").execute()
        except Exception as e:
            logger.warning(f"Could not store risk assessment for dish {dish_id}: {e}")

    def list_dishes(self, profile_id: str, restaurant_id: str, risk_filter: str = "all") -> List[DishResponse]:
        """Available dishes with a risk assessment for the caller, filtered by risk"""
        if risk_filter not in RISK_FILTERS:
            raise HTTPException(status_code=400, detail=f"risk_filter must be one of {', '.join(RISK_FILTERS)}")
        try:
            self._get_restaurant_row(restaurant_id)
            species = self.profiles.get_species(profile_id)

            result = self.supabase.table("dishes")\
                .select("*")\
                .eq("restaurant_id", restaurant_id)\
                .eq("available", True)\
                .execute()

            dishes = []
            for dish in result.data or []:
                assessment = self.assess_dish(dish, species)
                self._store_assessment(profile_id, dish["id"], assessment)
                if not matches_risk_filter(assessment["risk_classification"], risk_filter):
                    continue
                dishes.append(DishResponse(
                    **{
                        **dish,
                        "ingredients": dish.get("ingredients") or [],
                        "allergens": dish.get("allergens") or [],
                    },
                    risk_assessment=DishRiskAssessment(**assessment),
                ))
            return dishes
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error loading dishes: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def place_order(self, profile_id: str, restaurant_id: str, order_data: OrderCreate) -> OrderResponse:
        try:
            restaurant = self._get_restaurant_row(restaurant_id)

            result = self.supabase.table("dishes")\
                .select("*")\
                .in_("id", order_data.dish_ids)\
                .eq("restaurant_id", restaurant_id)\
                .eq("available", True)\
                .execute()
            by_id = {row["id"]: row for row in result.data or []}
            missing = [dish_id for dish_id in order_data.dish_ids if dish_id not in by_id]
            if missing:
                raise HTTPException(
                    status_code=400,
                    detail=f"Dishes not available at this restaurant: {', '.join(missing)}"
                )

            ordered = [
                {"dish_id": dish_id, "name": by_id[dish_id]["name"], "price": float(by_id[dish_id]["price"])}
                for dish_id in order_data.dish_ids
            ]
            total = round(sum(item["price"] for item in ordered), 2)

            flagged = self.supabase.table("dish_risk_assessments")\
                .select("dish_id")\
                .eq("profile_id", profile_id)\
                .in_("dish_id", list(by_id))\
                .eq("risk_classification", AVOID)\
                .execute()
            safety_verified = not flagged.data

            insert = self.supabase.table("restaurant_orders").insert({
                "profile_id": profile_id,
                "restaurant_id": restaurant_id,
                "dishes": ordered,
                "total_cost": total,
                "delivery_platform": restaurant.get("delivery_platform"),
                "order_status": "pending",
                "special_instructions": order_data.special_instructions,
                "safety_verified": safety_verified,
            }).execute()

            if not insert.data:
                raise HTTPException(status_code=500, detail="Failed to place order")

            logger.info("Order placed at %s (safety_verified=%s)", restaurant["name"], safety_verified)
            return OrderResponse(**insert.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_orders(self, profile_id: str) -> List[OrderResponse]:
        try:
            result = self.supabase.table("restaurant_orders")\
                .select("*")\
                .eq("profile_id", profile_id)\
                .order("created_at", desc=True)\
                .execute()
            return [OrderResponse(**row) for row in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
