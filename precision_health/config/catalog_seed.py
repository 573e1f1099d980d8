"""
Catalog seed data
Global rows that every profile reads: ingredients, recipes, restaurants,
grocery stores and medications. Used by scripts/seed_catalog.py, which
upserts them by natural key (name, or store + sku for products).
"""

_THIOSULFATE = [{"species": ["dog", "cat"], "compound": "thiosulfate", "effect": "hemolytic_anemia"}]
_ALL_SAFE = {"human": True, "dog": True, "cat": True}

INGREDIENTS = [
    {"name": "Salmon", "category": "protein",
     "nutritional_data": {"protein": 25, "fat": 12, "omega3": 2.5, "vitamin_d": 15},
     "species_safe": _ALL_SAFE, "toxicity_warnings": []},
    {"name": "Chicken Breast", "category": "protein",
     "nutritional_data": {"protein": 31, "fat": 3.6, "iron": 0.9},
     "species_safe": _ALL_SAFE, "toxicity_warnings": []},
    {"name": "Spinach", "category": "vegetable",
     "nutritional_data": {"iron": 2.7, "vitamin_k": 483, "folate": 194},
     "species_safe": _ALL_SAFE, "toxicity_warnings": []},
    {"name": "Sweet Potato", "category": "vegetable",
     "nutritional_data": {"carbs": 20, "fiber": 3, "vitamin_a": 14187, "vitamin_c": 2.4},
     "species_safe": {"human": True, "dog": True, "cat": False}, "toxicity_warnings": []},
    {"name": "Blueberries", "category": "fruit",
     "nutritional_data": {"fiber": 2.4, "vitamin_c": 9.7, "antioxidants": "high"},
     "species_safe": _ALL_SAFE, "toxicity_warnings": []},
    {"name": "Onion", "category": "vegetable",
     "nutritional_data": {"vitamin_c": 7.4, "folate": 19},
     "species_safe": {"human": True, "dog": False, "cat": False}, "toxicity_warnings": _THIOSULFATE},
    {"name": "Garlic", "category": "vegetable",
     "nutritional_data": {"vitamin_c": 31, "manganese": 1.7},
     "species_safe": {"human": True, "dog": False, "cat": False}, "toxicity_warnings": _THIOSULFATE},
    {"name": "Quinoa", "category": "grain",
     "nutritional_data": {"protein": 14, "fiber": 7, "iron": 4.6, "magnesium": 197},
     "species_safe": _ALL_SAFE, "toxicity_warnings": []},
    {"name": "Broccoli", "category": "vegetable",
     "nutritional_data": {"vitamin_c": 89, "vitamin_k": 102, "folate": 63},
     "species_safe": _ALL_SAFE, "toxicity_warnings": []},
    {"name": "Greek Yogurt", "category": "dairy",
     "nutritional_data": {"protein": 10, "calcium": 110, "probiotics": "high"},
     "species_safe": _ALL_SAFE, "toxicity_warnings": []},
]

# Keyed by ingredient name
CONTRAINDICATIONS = [
    {"ingredient": "Salmon", "condition_name": "Chronic Kidney Disease", "contraindication_type": "limit",
     "rationale": "High phosphorus content should be limited in CKD patients", "species_type": "human"},
    {"ingredient": "Onion", "condition_name": "Chronic Kidney Disease", "contraindication_type": "avoid",
     "rationale": "Toxic to dogs and cats, causes hemolytic anemia", "species_type": "dog"},
]

SUBSTITUTIONS = [
    {"original": "Salmon", "substitute": "Chicken Breast", "substitution_ratio": 1.0,
     "notes": "Lower phosphorus protein"},
    {"original": "Onion", "substitute": "Broccoli", "substitution_ratio": 1.0,
     "notes": "Pet-safe vegetable"},
    {"original": "Garlic", "substitute": "Spinach", "substitution_ratio": 0.5,
     "notes": "Pet-safe greens"},
]

RECIPES = [
    {
        "name": "Omega-3 Rich Salmon Bowl",
        "description": "Heart-healthy salmon with quinoa and vegetables, rich in omega-3 fatty acids",
        "species_type": "human",
        "ingredients": [
            {"ingredient": "Salmon", "quantity": 6, "unit": "oz"},
            {"ingredient": "Quinoa", "quantity": 1, "unit": "cup"},
            {"ingredient": "Broccoli", "quantity": 1, "unit": "cup"},
            {"ingredient": "Spinach", "quantity": 2, "unit": "cups"},
        ],
        "instructions": (
            "1. Cook quinoa according to package instructions. 2. Season salmon with herbs and bake "
            "at 200C for 12-15 minutes. 3. Steam broccoli until tender. 4. Assemble bowl with quinoa "
            "base, add salmon, broccoli, and fresh spinach."
        ),
        "prep_time_minutes": 10,
        "cook_time_minutes": 15,
        "servings": 2,
        "difficulty_level": "easy",
        "condition_tags": ["heart health", "inflammation", "omega-3 deficiency"],
        "dietary_tags": ["gluten-free", "high-protein"],
    },
    {
        "name": "Chicken & Sweet Potato Bowl",
        "description": "Simple, digestible meal for dogs with sensitive stomachs",
        "species_type": "dog",
        "ingredients": [
            {"ingredient": "Chicken Breast", "quantity": 8, "unit": "oz"},
            {"ingredient": "Sweet Potato", "quantity": 2, "unit": "medium"},
            {"ingredient": "Blueberries", "quantity": 0.25, "unit": "cup"},
        ],
        "instructions": (
            "1. Boil chicken breast until fully cooked, then dice. 2. Bake sweet potato until soft, "
            "mash. 3. Mix chicken, sweet potato, and blueberries. 4. Let cool before serving."
        ),
        "prep_time_minutes": 10,
        "cook_time_minutes": 25,
        "servings": 4,
        "difficulty_level": "easy",
        "condition_tags": ["digestive health", "immune support"],
        "dietary_tags": ["grain-free", "limited-ingredient"],
    },
]

RESTAURANTS = [
    {
        "name": "The Healthy Kitchen", "cuisine_type": "Health Food", "delivery_platform": "deliveroo",
        "location": "London", "rating": 4.5, "delivery_time_minutes": 30, "minimum_order": 10.00,
        "delivery_fee": 2.99, "is_clinical_partner": True,
        "dishes": [
            {"name": "Grilled Salmon with Quinoa",
             "description": "Heart-healthy omega-3 rich salmon with organic quinoa and steamed vegetables",
             "ingredients": ["Salmon", "Quinoa", "Broccoli", "Spinach", "Olive Oil"],
             "allergens": ["fish"], "price": 14.99, "category": "main"},
            {"name": "Mediterranean Chicken Bowl",
             "description": "Lean chicken breast with mixed greens and tahini dressing",
             "ingredients": ["Chicken Breast", "Mixed Greens", "Cherry Tomatoes", "Cucumber", "Tahini"],
             "allergens": ["sesame"], "price": 12.99, "category": "main"},
        ],
    },
    {
        "name": "Green Bowl", "cuisine_type": "Vegetarian", "delivery_platform": "uber_eats",
        "location": "London", "rating": 4.7, "delivery_time_minutes": 25, "minimum_order": 12.00,
        "delivery_fee": 3.49, "is_clinical_partner": False,
        "dishes": [
            {"name": "Buddha Bowl",
             "description": "Nutrient-dense bowl with sweet potato, chickpeas, and avocado",
             "ingredients": ["Sweet Potato", "Chickpeas", "Avocado", "Kale", "Tahini"],
             "allergens": ["sesame"], "price": 11.99, "category": "main"},
            {"name": "Green Smoothie Bowl",
             "description": "Antioxidant-rich smoothie with fresh berries",
             "ingredients": ["Spinach", "Banana", "Blueberries", "Almond Milk", "Chia Seeds"],
             "allergens": ["nuts"], "price": 8.99, "category": "breakfast"},
        ],
    },
    {
        "name": "Mediterranean Delight", "cuisine_type": "Mediterranean", "delivery_platform": "just_eat",
        "location": "London", "rating": 4.3, "delivery_time_minutes": 35, "minimum_order": 15.00,
        "delivery_fee": 2.49, "is_clinical_partner": False,
        "dishes": [],
    },
    {
        "name": "Paws & Plates", "cuisine_type": "Pet Food", "delivery_platform": "deliveroo",
        "location": "London", "rating": 4.8, "delivery_time_minutes": 40, "minimum_order": 20.00,
        "delivery_fee": 4.99, "is_clinical_partner": True,
        "dishes": [
            {"name": "Renal Support Meal (Dog)",
             "description": "Veterinary-approved low-phosphorus meal for dogs with kidney disease",
             "ingredients": ["Chicken Breast", "Sweet Potato", "Green Beans", "Fish Oil"],
             "allergens": [], "price": 18.99, "category": "medical"},
            {"name": "Digestive Care Bowl (Cat)",
             "description": "Easily digestible meal for cats with sensitive stomachs",
             "ingredients": ["Turkey", "Pumpkin", "Rice", "Probiotics"],
             "allergens": [], "price": 16.99, "category": "medical"},
        ],
    },
]

GROCERY_STORES = [
    {"name": name, "region": "UK", "delivery_available": True, "api_available": False,
     "checkout_integration_type": "redirect"}
    for name in ("Ocado", "Tesco", "Waitrose", "Sainsburys", "Morrisons", "Asda")
]

# Keyed by store name
GROCERY_PRODUCTS = {
    "Ocado": [
        {"sku": "OCADO-001", "name": "Organic Salmon Fillets", "brand": "Ocado",
         "category": "Fish & Seafood", "price": 8.99, "unit": "2 fillets"},
        {"sku": "OCADO-002", "name": "Organic Quinoa", "brand": "Ocado",
         "category": "Grains & Pasta", "price": 3.49, "unit": "500g"},
        {"sku": "OCADO-003", "name": "Free Range Chicken Breast", "brand": "Ocado",
         "category": "Meat & Poultry", "price": 6.99, "unit": "400g"},
    ],
    "Tesco": [
        {"sku": "TESCO-001", "name": "Fresh Salmon Fillets", "brand": "Tesco Finest",
         "category": "Fish & Seafood", "price": 7.49, "unit": "2 fillets"},
        {"sku": "TESCO-002", "name": "Quinoa", "brand": "Tesco",
         "category": "Grains & Pasta", "price": 2.99, "unit": "500g"},
        {"sku": "TESCO-003", "name": "Chicken Breast Fillets", "brand": "Tesco",
         "category": "Meat & Poultry", "price": 5.99, "unit": "400g"},
    ],
}

MEDICATIONS = [
    {"name": "Levothyroxine", "generic_name": "Levothyroxine Sodium", "medication_class": "Thyroid Hormone",
     "species": "human", "common_dosages": ["25mcg", "50mcg", "75mcg", "100mcg"], "requires_prescription": True},
    {"name": "Metformin", "generic_name": "Metformin HCL", "medication_class": "Antidiabetic",
     "species": "human", "common_dosages": ["500mg", "850mg", "1000mg"], "requires_prescription": True},
    {"name": "Lisinopril", "generic_name": "Lisinopril", "medication_class": "ACE Inhibitor",
     "species": "human", "common_dosages": ["5mg", "10mg", "20mg", "40mg"], "requires_prescription": True},
    {"name": "Omega-3 Fish Oil", "generic_name": "EPA/DHA", "medication_class": "Supplement",
     "species": "all", "common_dosages": ["1000mg", "2000mg"], "requires_prescription": False},
    {"name": "Carprofen", "generic_name": "Carprofen", "medication_class": "NSAID",
     "species": "dog", "common_dosages": ["25mg", "75mg", "100mg"], "requires_prescription": True},
    {"name": "Gabapentin", "generic_name": "Gabapentin", "medication_class": "Anticonvulsant/Pain",
     "species": "cat", "common_dosages": ["50mg", "100mg"], "requires_prescription": True},
]

# Keyed by medication name and interacting substance
MEDICATION_INTERACTIONS = [
    {"medication": "Levothyroxine", "interaction_type": "drug_food", "interacting_substance": "Calcium-rich foods",
     "severity": "moderate", "effect": "Reduces absorption of thyroid medication",
     "recommendation": "Take levothyroxine 4 hours before or after calcium-rich foods"},
    {"medication": "Levothyroxine", "interaction_type": "drug_food", "interacting_substance": "Coffee",
     "severity": "minor", "effect": "May reduce absorption",
     "recommendation": "Take with water only, wait 30 minutes before coffee"},
    {"medication": "Levothyroxine", "interaction_type": "drug_supplement", "interacting_substance": "Iron supplements",
     "severity": "major", "effect": "Significantly reduces thyroid hormone absorption",
     "recommendation": "Space doses at least 4 hours apart"},
    {"medication": "Metformin", "interaction_type": "drug_supplement", "interacting_substance": "Vitamin B12",
     "severity": "moderate", "effect": "Metformin can deplete B12 levels",
     "recommendation": "Consider B12 supplementation and regular monitoring"},
]
