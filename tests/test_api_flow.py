# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import unittest

from fastapi.testclient import TestClient

from tests.support import fresh_environment

ROUTINE = {
    "name": "Morning Mobility",
    "description": "Ten minutes of gentle joint work.",
    "exercises": [{"name": "Cat-cow", "sets": 2, "reps": 10}],
}

RECIPE = {
    "name": "Overnight Oats",
    "ingredients": "1/2 cup oats\n\n1/2 cup milk\n  1 tbsp honey  \n",
    "instructions": "Mix everything in a jar and leave it in the fridge overnight.",
}


class TestApiFlow(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = fresh_environment()

        from sinergyfit.api import app  # noqa: WPS433 (import after env setup)
        from sinergyfit.records import writer

        cls.client = TestClient(app)
        cls.dispatcher = writer.dispatcher
        cls.headers = cls._register("flow@example.com")

    @classmethod
    def tearDownClass(cls) -> None:
        shutil.rmtree(cls._tmp, ignore_errors=True)

    @classmethod
    def _register(cls, email: str) -> dict:
        r = cls.client.post("/api/auth/register", json={"email": email, "password": "password123"})
        assert r.status_code == 200, r.text
        # Token in a header, so the shared client's cookie never decides who is calling.
        cls.client.cookies.clear()
        return {"Authorization": f"Bearer {r.json()['token']}"}

    def test_requires_auth(self) -> None:
        self.assertEqual(self.client.get("/api/routines").status_code, 401)
        self.assertEqual(self.client.get("/api/meal-plan").status_code, 401)
        self.assertEqual(self.client.get("/api/health").status_code, 200)

    def test_me(self) -> None:
        r = self.client.get("/api/auth/me", headers=self.headers)
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["email"], "flow@example.com")
        self.assertEqual(r.json()["weekly_plan_id"], f"weekly-plan-{r.json()['id']}")

    def test_duplicate_registration_and_login(self) -> None:
        r = self.client.post("/api/auth/register", json={"email": "flow@example.com", "password": "password123"})
        self.assertEqual(r.status_code, 400)
        r = self.client.post("/api/auth/login", json={"email": "flow@example.com", "password": "wrong-password"})
        self.assertEqual(r.status_code, 401)
        r = self.client.post("/api/auth/login", json={"email": "flow@example.com", "password": "password123"})
        self.assertEqual(r.status_code, 200, r.text)
        self.client.cookies.clear()

    def test_email_is_normalized(self) -> None:
        headers = self._register("  Mixed.Case@Example.COM ")
        self.assertEqual(self.client.get("/api/auth/me", headers=headers).json()["email"], "mixed.case@example.com")
        r = self.client.post("/api/auth/register", json={"email": "MIXED.case@example.com", "password": "password123"})
        self.assertEqual(r.status_code, 400)
        r = self.client.post("/api/auth/register", json={"email": "not-an-email", "password": "password123"})
        self.assertEqual(r.status_code, 422)

    def test_bad_tokens(self) -> None:
        for token in ("garbage", "a.b.c", "a.b"):
            r = self.client.get("/api/routines", headers={"Authorization": f"Bearer {token}"})
            self.assertEqual(r.status_code, 401, token)

    def test_registration_creates_an_empty_weekly_plan(self) -> None:
        r = self.client.get("/api/meal-plan", headers=self._register("plan@example.com"))
        self.assertEqual(r.status_code, 200, r.text)
        days = r.json()["days"]
        self.assertEqual(len(days), 7)
        for slots in days.values():
            self.assertEqual(slots, {"breakfast": None, "lunch": None, "dinner": None})

    def test_seed_routines_for_a_new_user(self) -> None:
        r = self.client.get("/api/routines", headers=self._register("seed@example.com"))
        self.assertEqual(r.status_code, 200, r.text)
        body = r.json()
        self.assertEqual(body["count"], 4)
        self.assertEqual([x["id"] for x in body["items"]], ["routine-1", "routine-2", "routine-3", "routine-4"])
        self.assertTrue(all(x["is_preloaded"] for x in body["items"]))

    def test_create_routine_and_wait(self) -> None:
        r = self.client.post("/api/routines?wait=true", json=ROUTINE, headers=self.headers)
        self.assertEqual(r.status_code, 201, r.text)
        body = r.json()
        self.assertEqual(body["status"], "written")
        self.assertTrue(body["id"].startswith("routine-"))
        record = body["record"]
        self.assertFalse(record["is_preloaded"])
        self.assertEqual(record["image_hint"], "custom routine")
        self.assertEqual(record["exercises"][0]["reps"], "10")
        self.assertTrue(record["exercises"][0]["id"].startswith("ex-"))

        r = self.client.get(f"/api/routines/{body['id']}", headers=self.headers)
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["name"], "Morning Mobility")

    def test_override_hides_the_seed_routine(self) -> None:
        headers = self._register("override@example.com")
        payload = dict(ROUTINE, name="My Full Body", source_seed_id="routine-1")
        r = self.client.post("/api/routines?wait=true", json=payload, headers=headers)
        self.assertEqual(r.status_code, 201, r.text)

        ids = [x["id"] for x in self.client.get("/api/routines", headers=headers).json()["items"]]
        self.assertNotIn("routine-1", ids)
        self.assertEqual(ids[:3], ["routine-2", "routine-3", "routine-4"])
        self.assertEqual(ids[3], r.json()["id"])

    def test_seed_ids_are_reserved(self) -> None:
        r = self.client.post("/api/routines", json=dict(ROUTINE, id="routine-2"), headers=self.headers)
        self.assertEqual(r.status_code, 409)
        r = self.client.post("/api/routines", json=dict(ROUTINE, source_seed_id="routine-99"), headers=self.headers)
        self.assertEqual(r.status_code, 400)

    def test_seed_routines_are_read_only(self) -> None:
        r = self.client.put("/api/routines/routine-1", json={"name": "Renamed"}, headers=self.headers)
        self.assertEqual(r.status_code, 403)
        r = self.client.delete("/api/routines/routine-1", headers=self.headers)
        self.assertEqual(r.status_code, 403)
        r = self.client.put("/api/routines/routine-404", json={"name": "Renamed"}, headers=self.headers)
        self.assertEqual(r.status_code, 404)

    def test_update_merges_fields(self) -> None:
        created = self.client.post("/api/routines?wait=true", json=ROUTINE, headers=self.headers).json()
        r = self.client.put(f"/api/routines/{created['id']}?wait=true", json={"name": "Evening Mobility"}, headers=self.headers)
        self.assertEqual(r.status_code, 200, r.text)
        record = r.json()["record"]
        self.assertEqual(record["name"], "Evening Mobility")
        self.assertEqual(record["description"], ROUTINE["description"])
        self.assertEqual(len(record["exercises"]), 1)

        r = self.client.put(f"/api/routines/{created['id']}", json={}, headers=self.headers)
        self.assertEqual(r.status_code, 400)

    def test_delete_missing_record_is_fine(self) -> None:
        r = self.client.delete("/api/routines/routine-1700000000000?wait=true", headers=self.headers)
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["status"], "deleted")

    def test_delete_routine(self) -> None:
        created = self.client.post("/api/routines?wait=true", json=ROUTINE, headers=self.headers).json()
        r = self.client.delete(f"/api/routines/{created['id']}?wait=true", headers=self.headers)
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(self.client.get(f"/api/routines/{created['id']}", headers=self.headers).status_code, 404)

    def test_validation_errors(self) -> None:
        bad = [
            dict(ROUTINE, name="A"),
            dict(ROUTINE, description="short"),
            dict(ROUTINE, exercises=[]),
            dict(ROUTINE, exercises=[{"name": "Squat", "sets": 0, "reps": "10"}]),
            dict(ROUTINE, exercises=[{"name": "", "sets": 3, "reps": "10"}]),
        ]
        for payload in bad:
            r = self.client.post("/api/routines", json=payload, headers=self.headers)
            self.assertEqual(r.status_code, 422, payload)
        r = self.client.post("/api/recipes", json=dict(RECIPE, instructions="Too short"), headers=self.headers)
        self.assertEqual(r.status_code, 422)
        r = self.client.post("/api/recipes", json=dict(RECIPE, ingredients="\n \n"), headers=self.headers)
        self.assertEqual(r.status_code, 422)

    def test_recipe_ingredients_from_text(self) -> None:
        r = self.client.post("/api/recipes?wait=true", json=RECIPE, headers=self.headers)
        self.assertEqual(r.status_code, 201, r.text)
        record = r.json()["record"]
        self.assertEqual(record["ingredients"], ["1/2 cup oats", "1/2 cup milk", "1 tbsp honey"])
        self.assertEqual(record["image_hint"], "custom recipe")
        self.assertFalse(record["is_preloaded"])

    def test_client_ids_must_look_like_record_ids(self) -> None:
        r = self.client.post("/api/recipes?wait=true", json=dict(RECIPE, id="recipe-\u00b2"), headers=self.headers)
        self.assertEqual(r.status_code, 422)
        r = self.client.post("/api/routines?wait=true", json=dict(ROUTINE, id="recipe-1-copy"), headers=self.headers)
        self.assertEqual(r.status_code, 422)

        r = self.client.post("/api/recipes?wait=true", json=dict(RECIPE, id="recipe-2-mine"), headers=self.headers)
        self.assertEqual(r.status_code, 201, r.text)
        self.assertEqual(self.client.get("/api/recipes", headers=self.headers).status_code, 200)
        r = self.client.put("/api/meal-plan/Monday/lunch", json={"recipe_id": "recipe-2-mine"}, headers=self.headers)
        self.assertEqual(r.status_code, 202, r.text)

    def test_seed_recipes_are_read_only(self) -> None:
        r = self.client.put("/api/recipes/recipe-1", json={"name": "Renamed"}, headers=self.headers)
        self.assertEqual(r.status_code, 403)
        r = self.client.delete("/api/recipes/recipe-1", headers=self.headers)
        self.assertEqual(r.status_code, 403)

    def test_fire_and_forget_write_lands_after_flush(self) -> None:
        r = self.client.post("/api/recipes", json=dict(RECIPE, name="Queued Oats"), headers=self.headers)
        self.assertEqual(r.status_code, 202, r.text)
        self.assertEqual(r.json()["status"], "accepted")
        self.assertTrue(self.dispatcher.flush(timeout=5))

        r = self.client.get(f"/api/recipes/{r.json()['id']}", headers=self.headers)
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["name"], "Queued Oats")

    def test_meal_plan_slots(self) -> None:
        headers = self._register("planner@example.com")
        r = self.client.put("/api/meal-plan/Monday/breakfast?wait=true", json={"recipe_id": "recipe-3"}, headers=headers)
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["recipe"]["name"], "Quick Breakfast Smoothie")
        self.assertEqual(r.json()["status"], "written")

        r = self.client.put("/api/meal-plan/Monday/lunch?wait=true", json={"recipe_id": "recipe-1"}, headers=headers)
        self.assertEqual(r.status_code, 200, r.text)

        r = self.client.get("/api/meal-plan/Monday/breakfast", headers=headers)
        self.assertEqual(r.json()["recipe"]["id"], "recipe-3")
        monday = self.client.get("/api/meal-plan", headers=headers).json()["days"]["Monday"]
        self.assertEqual(monday["lunch"]["id"], "recipe-1")
        self.assertIsNone(monday["dinner"])

        r = self.client.delete("/api/meal-plan/Monday/breakfast?wait=true", headers=headers)
        self.assertEqual(r.status_code, 200, r.text)
        self.assertIsNone(r.json()["recipe"])
        monday = self.client.get("/api/meal-plan", headers=headers).json()["days"]["Monday"]
        self.assertIsNone(monday["breakfast"])
        self.assertEqual(monday["lunch"]["id"], "recipe-1")

    def test_meal_plan_errors(self) -> None:
        r = self.client.put("/api/meal-plan/Monday/lunch", json={"recipe_id": "recipe-404"}, headers=self.headers)
        self.assertEqual(r.status_code, 404)
        r = self.client.put("/api/meal-plan/Funday/lunch", json={"recipe_id": "recipe-1"}, headers=self.headers)
        self.assertEqual(r.status_code, 422)
        r = self.client.get("/api/meal-plan/Monday/brunch", headers=self.headers)
        self.assertEqual(r.status_code, 422)

    def test_meal_plan_accepts_user_recipes(self) -> None:
        created = self.client.post("/api/recipes?wait=true", json=dict(RECIPE, name="Planner Oats"), headers=self.headers).json()
        r = self.client.put("/api/meal-plan/Friday/dinner?wait=true", json={"recipe_id": created["id"]}, headers=self.headers)
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["recipe"]["name"], "Planner Oats")

    def test_notifications_start_empty(self) -> None:
        r = self.client.get("/api/notifications", headers=self._register("quiet@example.com"))
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["items"], [])

    def test_records_are_per_user(self) -> None:
        mine = self.client.post("/api/routines?wait=true", json=dict(ROUTINE, name="Private"), headers=self.headers).json()
        other = self._register("other@example.com")
        self.assertEqual(self.client.get(f"/api/routines/{mine['id']}", headers=other).status_code, 404)
        ids = [x["id"] for x in self.client.get("/api/routines", headers=other).json()["items"]]
        self.assertNotIn(mine["id"], ids)


if __name__ == "__main__":
    unittest.main()
