# -*- coding: utf-8 -*-
"""Built-in routines and recipes shipped with every account.

Seed entries are never written to the document store. Callers always get deep
copies, so nothing downstream can mutate the catalog.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Tuple

PLACEHOLDER_IMAGES: Dict[str, Tuple[str, str]] = {
    "exercise-squat": ("https://picsum.photos/seed/exercise-squat/600/400", "person squat"),
    "exercise-pushup": ("https://picsum.photos/seed/exercise-pushup/600/400", "person pushup"),
    "exercise-plank": ("https://picsum.photos/seed/exercise-plank/600/400", "person plank"),
    "exercise-bicep-curl": ("https://picsum.photos/seed/exercise-bicep-curl/600/400", "bicep curl"),
    "exercise-running": ("https://picsum.photos/seed/exercise-running/600/400", "person running"),
    "routine-full-body": ("https://picsum.photos/seed/routine-full-body/600/400", "gym workout"),
    "recipe-chicken-stir-fry": ("https://picsum.photos/seed/recipe-chicken-stir-fry/600/400", "chicken stirfry"),
    "recipe-lentil-soup": ("https://picsum.photos/seed/recipe-lentil-soup/600/400", "lentil soup"),
    "recipe-breakfast-smoothie": ("https://picsum.photos/seed/recipe-breakfast-smoothie/600/400", "berry smoothie"),
}

# Defaults applied to user-created records that arrive without images.
DEFAULT_ROUTINE_IMAGE = "routine-full-body"
DEFAULT_EXERCISE_IMAGE = "exercise-bicep-curl"
DEFAULT_RECIPE_IMAGE = "recipe-chicken-stir-fry"


def image(image_id: str) -> Tuple[str, str]:
    """Return ``(url, hint)`` for a placeholder image, or empty strings."""
    return PLACEHOLDER_IMAGES.get(image_id, ("", ""))


def _exercise(ex_id: str, name: str, sets: int, reps: str, description: str, image_id: str) -> Dict[str, Any]:
    url, hint = image(image_id)
    return {
        "id": ex_id,
        "name": name,
        "sets": sets,
        "reps": reps,
        "description": description,
        "image": url,
        "image_hint": hint,
    }


_ROUTINES: List[Dict[str, Any]] = [
    {
        "id": "routine-1",
        "name": "Full Body Blast",
        "description": "A comprehensive workout targeting all major muscle groups for balanced strength and conditioning.",
        "is_preloaded": True,
        "exercises": [
            _exercise("ex-1-1", "Squats", 3, "10-12",
                      "A fundamental compound exercise that strengthens your legs, glutes, and core.", "exercise-squat"),
            _exercise("ex-1-2", "Push-ups", 3, "As many as possible",
                      "Builds upper body and core strength. Modify by doing them on your knees if needed.", "exercise-pushup"),
            _exercise("ex-1-3", "Plank", 3, "60 seconds",
                      "An isometric core strength exercise that works the abs, back, and shoulders.", "exercise-plank"),
        ],
    },
    {
        "id": "routine-2",
        "name": "Upper Body Strength",
        "description": "Focus on building strength and muscle definition in your chest, back, shoulders, and arms.",
        "is_preloaded": True,
        "exercises": [
            _exercise("ex-2-1", "Bicep Curls", 3, "10-12 per arm",
                      "Isolate and build your bicep muscles with this classic dumbbell exercise.", "exercise-bicep-curl"),
            _exercise("ex-2-2", "Push-ups", 3, "10-15",
                      "Excellent for chest, shoulders, and triceps. A bodyweight staple.", "exercise-pushup"),
        ],
    },
    {
        "id": "routine-3",
        "name": "Lower Body Power",
        "description": "Develop powerful and toned legs and glutes with these targeted exercises.",
        "is_preloaded": True,
        "exercises": [
            _exercise("ex-3-1", "Squats", 4, "8-10",
                      "The king of leg exercises, targeting quads, hamstrings, and glutes.", "exercise-squat"),
        ],
    },
    {
        "id": "routine-4",
        "name": "Cardio Burn",
        "description": "Elevate your heart rate, improve endurance, and burn calories with this cardio session.",
        "is_preloaded": True,
        "exercises": [
            _exercise("ex-4-1", "Running", 1, "20-30 minutes",
                      "A great way to improve cardiovascular health. Can be done on a treadmill or outdoors.", "exercise-running"),
        ],
    },
]


def _recipe(recipe_id: str, name: str, ingredients: List[str], instructions: str, image_id: str) -> Dict[str, Any]:
    url, hint = image(image_id)
    return {
        "id": recipe_id,
        "name": name,
        "ingredients": ingredients,
        "instructions": instructions,
        "image": url,
        "image_hint": hint,
        "is_preloaded": True,
    }


_RECIPES: List[Dict[str, Any]] = [
    _recipe(
        "recipe-1",
        "Chicken Stir-fry",
        [
            "1 lb chicken breast, sliced",
            "2 cups broccoli florets",
            "1 red bell pepper, sliced",
            "1 carrot, julienned",
            "1/4 cup soy sauce",
            "2 tbsp honey",
            "1 tbsp sesame oil",
            "2 cloves garlic, minced",
            "1 tsp ginger, grated",
            "Cooked rice, for serving",
        ],
        "1. In a small bowl, whisk together soy sauce, honey, sesame oil, garlic, and ginger. \n"
        "2. Heat a large skillet or wok over medium-high heat. Add chicken and cook until browned and cooked through. \n"
        "3. Add broccoli, bell pepper, and carrot to the skillet. Cook until tender-crisp. \n"
        "4. Pour the sauce over the chicken and vegetables. Cook for 1-2 minutes until heated through. \n"
        "5. Serve immediately over cooked rice.",
        "recipe-chicken-stir-fry",
    ),
    _recipe(
        "recipe-2",
        "Hearty Lentil Soup",
        [
            "1 tbsp olive oil",
            "1 large onion, chopped",
            "2 carrots, chopped",
            "2 celery stalks, chopped",
            "2 cloves garlic, minced",
            "1 cup brown or green lentils, rinsed",
            "8 cups vegetable broth",
            "1 (14.5 oz) can diced tomatoes",
            "1 tsp dried thyme",
            "Salt and pepper to taste",
        ],
        "1. Heat olive oil in a large pot or Dutch oven over medium heat. \n"
        "2. Add onion, carrots, and celery and cook until softened, about 5-7 minutes. Add garlic and cook for another minute. \n"
        "3. Stir in lentils, vegetable broth, diced tomatoes, and thyme. \n"
        "4. Bring to a boil, then reduce heat and simmer for 45-60 minutes, or until lentils are tender. \n"
        "5. Season with salt and pepper to taste before serving.",
        "recipe-lentil-soup",
    ),
    _recipe(
        "recipe-3",
        "Quick Breakfast Smoothie",
        [
            "1 ripe banana",
            "1/2 cup mixed berries (fresh or frozen)",
            "1/2 cup Greek yogurt",
            "1/2 cup milk (dairy or non-dairy)",
            "1 tbsp honey or maple syrup (optional)",
            "1 tbsp chia seeds or flax seeds",
        ],
        "1. Combine all ingredients in a blender. \n"
        "2. Blend until smooth and creamy. \n"
        "3. If the smoothie is too thick, add a little more milk. If it's too thin, add more fruit or yogurt. \n"
        "4. Pour into a glass and enjoy immediately.",
        "recipe-breakfast-smoothie",
    ),
]

_BY_KIND = {"routines": _ROUTINES, "recipes": _RECIPES}


def preloaded_routines() -> List[Dict[str, Any]]:
    return copy.deepcopy(_ROUTINES)


def preloaded_recipes() -> List[Dict[str, Any]]:
    return copy.deepcopy(_RECIPES)


def get_seed(kind: str, record_id: str) -> Optional[Dict[str, Any]]:
    for entry in _BY_KIND.get(kind, []):
        if entry["id"] == record_id:
            return copy.deepcopy(entry)
    return None


def is_seed_id(kind: str, record_id: str) -> bool:
    return any(entry["id"] == record_id for entry in _BY_KIND.get(kind, []))
