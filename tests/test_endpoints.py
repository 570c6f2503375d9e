"""
HTTP-level tests. Requests go through the real routers, handlers and an
in-memory database shared with the ``db_session`` fixture.
"""

import uuid
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from api.dependencies import get_db
from domain.models import AppUser

from test_fixtures import auth_headers, make_user, make_recipe, make_plan, plan_recipe


@pytest.fixture
def planned_week(db_session):
    user = make_user(db_session)
    stew = make_recipe(
        db_session,
        user,
        "Beef Stew",
        [("Beef", "500", "g"), ("Carrot", "2", "pc", "sliced"), ("Stock", "1", "L")],
    )
    salad = make_recipe(
        db_session, user, "Carrot Salad", [("carrot", "3", "pc"), ("Olive oil", "1", "tbsp")]
    )
    plan = make_plan(db_session, user)
    plan_recipe(db_session, user, plan, stew, servings=2, day=0)
    plan_recipe(db_session, user, plan, salad, servings=1, day=1)
    return user, plan


def test_health_check(client):
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "Flavourly"}


def test_database_health(client):
    r = client.get("/health-check/db")
    assert r.status_code == 200
    assert r.json()["database"] == "reachable"


# =============================================================================
# AUTHENTICATION
# =============================================================================


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/shopping-lists"),
        ("post", "/shopping-lists/generate"),
        ("get", "/shopping-lists/1"),
        ("put", "/shopping-lists/1"),
        ("patch", "/shopping-lists/1/items/1"),
        ("delete", "/shopping-lists/1"),
        ("get", "/meal-plans"),
    ],
)
def test_requests_without_user_are_unauthorized(client, method, path):
    r = client.request(method.upper(), path, json={})
    assert r.status_code == 401
    assert r.json() == {"error": "Unauthorized"}


def test_malformed_user_header_is_unauthorized(client):
    r = client.get("/shopping-lists", headers={"X-User-Id": "not-a-uuid"})
    assert r.status_code == 401


# =============================================================================
# GENERATE
# =============================================================================


def test_generate_shopping_list(client, planned_week):
    user, plan = planned_week

    r = client.post(
        "/shopping-lists/generate",
        json={"mealPlanId": plan.plan_id},
        headers=auth_headers(user),
    )

    assert r.status_code == 201
    body = r.json()
    assert body["listName"] == "Shopping List - Week 42"
    assert body["mealPlanId"] == plan.plan_id
    assert body["mealPlan"] == {"planId": plan.plan_id, "planName": "Week 42"}
    assert body["userId"] == str(user.user_id)

    items = [
        (i["itemName"], Decimal(i["quantity"]), i["unit"], i["sortOrder"])
        for i in body["items"]
    ]
    assert items == [
        ("Beef", Decimal("1000"), "g", 0),
        ("Carrot", Decimal("7"), "pc", 1),
        ("Stock", Decimal("2"), "L", 2),
        ("Olive oil", Decimal("1"), "tbsp", 3),
    ]
    assert all(isinstance(i["quantity"], str) for i in body["items"])
    assert all(i["isCompleted"] is False for i in body["items"])


def test_generate_with_custom_name(client, planned_week):
    user, plan = planned_week

    r = client.post(
        "/shopping-lists/generate",
        json={"mealPlanId": plan.plan_id, "listName": "Big shop"},
        headers=auth_headers(user),
    )

    assert r.status_code == 201
    assert r.json()["listName"] == "Big shop"


def test_generate_without_meal_plan_id_is_bad_request(client, db_session):
    user = make_user(db_session)

    r = client.post("/shopping-lists/generate", json={}, headers=auth_headers(user))

    assert r.status_code == 400
    assert r.json()["error"] == "Meal plan ID is required"


def test_generate_with_non_integer_plan_id_is_bad_request(client, db_session):
    user = make_user(db_session)

    r = client.post(
        "/shopping-lists/generate",
        json={"mealPlanId": "next week"},
        headers=auth_headers(user),
    )

    assert r.status_code == 400
    assert r.json()["error"].startswith("mealPlanId")


def test_generate_from_other_users_plan_is_not_found(client, db_session, planned_week):
    _, plan = planned_week
    intruder = make_user(db_session, "nutritionist")

    r = client.post(
        "/shopping-lists/generate",
        json={"mealPlanId": plan.plan_id},
        headers=auth_headers(intruder),
    )

    assert r.status_code == 404
    assert r.json() == {"error": "Meal plan not found"}


# =============================================================================
# READ / TOGGLE / REPLACE / DELETE
# =============================================================================


def _generate(client, user, plan):
    r = client.post(
        "/shopping-lists/generate",
        json={"mealPlanId": plan.plan_id},
        headers=auth_headers(user),
    )
    assert r.status_code == 201
    return r.json()


def test_list_and_get_shopping_lists(client, db_session, planned_week):
    user, plan = planned_week
    generated = _generate(client, user, plan)
    manual = client.post(
        "/shopping-lists",
        json={"listName": "Hardware", "items": [{"itemName": "Batteries"}]},
        headers=auth_headers(user),
    )
    assert manual.status_code == 201

    everything = client.get("/shopping-lists", headers=auth_headers(user)).json()
    assert {sl["listId"] for sl in everything} == {
        generated["listId"],
        manual.json()["listId"],
    }

    filtered = client.get(
        "/shopping-lists",
        params={"mealPlanId": plan.plan_id},
        headers=auth_headers(user),
    ).json()
    assert [sl["listId"] for sl in filtered] == [generated["listId"]]

    single = client.get(
        f"/shopping-lists/{generated['listId']}", headers=auth_headers(user)
    )
    assert single.status_code == 200
    assert single.json()["items"] == generated["items"]

    stranger = make_user(db_session, "nutritionist")
    assert client.get("/shopping-lists", headers=auth_headers(stranger)).json() == []
    r = client.get(
        f"/shopping-lists/{generated['listId']}", headers=auth_headers(stranger)
    )
    assert r.status_code == 404


def test_toggle_item(client, planned_week):
    user, plan = planned_week
    generated = _generate(client, user, plan)
    list_id = generated["listId"]
    target = generated["items"][1]

    r = client.patch(
        f"/shopping-lists/{list_id}/items/{target['itemId']}",
        json={"isCompleted": True},
        headers=auth_headers(user),
    )

    assert r.status_code == 200
    assert r.json()["isCompleted"] is True
    assert r.json()["itemName"] == target["itemName"]
    assert Decimal(r.json()["quantity"]) == Decimal(target["quantity"])

    after = client.get(f"/shopping-lists/{list_id}", headers=auth_headers(user)).json()
    flags = {i["itemId"]: i["isCompleted"] for i in after["items"]}
    assert flags[target["itemId"]] is True
    assert sum(flags.values()) == 1


def test_toggle_requires_boolean(client, planned_week):
    user, plan = planned_week
    generated = _generate(client, user, plan)
    item_id = generated["items"][0]["itemId"]

    r = client.patch(
        f"/shopping-lists/{generated['listId']}/items/{item_id}",
        json={},
        headers=auth_headers(user),
    )

    assert r.status_code == 400


def test_toggle_unknown_item_is_not_found(client, planned_week):
    user, plan = planned_week
    generated = _generate(client, user, plan)

    r = client.patch(
        f"/shopping-lists/{generated['listId']}/items/99999",
        json={"isCompleted": True},
        headers=auth_headers(user),
    )

    assert r.status_code == 404


def test_replace_list(client, planned_week):
    user, plan = planned_week
    generated = _generate(client, user, plan)
    keep = generated["items"][:2]

    r = client.put(
        f"/shopping-lists/{generated['listId']}",
        json={
            "listName": "Trimmed",
            "items": [
                {
                    "itemName": i["itemName"],
                    "quantity": i["quantity"],
                    "unit": i["unit"],
                    "isCompleted": True,
                }
                for i in keep
            ]
            + [{"itemName": "Bread", "quantity": "1", "unit": "loaves"}],
        },
        headers=auth_headers(user),
    )

    assert r.status_code == 200
    body = r.json()
    assert body["listName"] == "Trimmed"
    assert [(i["itemName"], i["isCompleted"], i["sortOrder"]) for i in body["items"]] == [
        ("Beef", True, 0),
        ("Carrot", True, 1),
        ("Bread", False, 2),
    ]
    old_ids = {i["itemId"] for i in generated["items"]}
    assert not old_ids & {i["itemId"] for i in body["items"]}


def test_replace_rejects_negative_quantity(client, planned_week):
    user, plan = planned_week
    generated = _generate(client, user, plan)

    r = client.put(
        f"/shopping-lists/{generated['listId']}",
        json={"items": [{"itemName": "Flour", "quantity": "-1"}]},
        headers=auth_headers(user),
    )

    assert r.status_code == 400
    assert "details" in r.json()


def test_delete_list(client, planned_week):
    user, plan = planned_week
    generated = _generate(client, user, plan)

    r = client.delete(
        f"/shopping-lists/{generated['listId']}", headers=auth_headers(user)
    )
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "deleted": generated["listId"]}

    r = client.get(f"/shopping-lists/{generated['listId']}", headers=auth_headers(user))
    assert r.status_code == 404


# =============================================================================
# RECIPES AND MEAL PLANS
# =============================================================================


def test_recipe_and_plan_flow(client, db_session):
    user = make_user(db_session)
    headers = auth_headers(user)

    r = client.post(
        "/recipes",
        json={
            "title": "Pancakes",
            "servings": 4,
            "ingredients": [
                {"ingredientName": "Flour", "unitName": "cup", "quantity": "1.5"},
                {"ingredientName": "Milk", "unitName": "cup", "quantity": "1.25",
                 "notes": "whole"},
            ],
        },
        headers=headers,
    )
    assert r.status_code == 201
    recipe = r.json()
    assert [i["ingredientName"] for i in recipe["ingredients"]] == ["Flour", "Milk"]
    assert recipe["authorId"] == str(user.user_id)

    r = client.post(
        "/meal-plans",
        json={"planName": "Brunch week", "startDate": "2026-10-19", "endDate": "2026-10-25"},
        headers=headers,
    )
    assert r.status_code == 201
    plan_id = r.json()["planId"]

    r = client.post(
        f"/meal-plans/{plan_id}/entries",
        json={
            "recipeId": recipe["recipeId"],
            "mealDate": "2026-10-19",
            "mealType": "breakfast",
            "servingsToPrepare": 2,
        },
        headers=headers,
    )
    assert r.status_code == 201
    assert r.json()["recipeTitle"] == "Pancakes"

    plan = client.get(f"/meal-plans/{plan_id}", headers=headers).json()
    assert len(plan["entries"]) == 1

    r = client.post(
        "/shopping-lists/generate", json={"mealPlanId": plan_id}, headers=headers
    )
    items = {i["itemName"]: Decimal(i["quantity"]) for i in r.json()["items"]}
    assert items == {"Flour": Decimal("3"), "Milk": Decimal("2.5")}


def test_plan_with_end_before_start_is_bad_request(client, db_session):
    user = make_user(db_session)

    r = client.post(
        "/meal-plans",
        json={"planName": "Backwards", "startDate": "2026-10-25", "endDate": "2026-10-19"},
        headers=auth_headers(user),
    )

    assert r.status_code == 400
    assert r.json()["details"] == {"field": "endDate"}


def test_entry_with_zero_servings_is_bad_request(client, planned_week):
    user, plan = planned_week

    r = client.post(
        f"/meal-plans/{plan.plan_id}/entries",
        json={
            "recipeId": plan.entries[0].recipe_id,
            "mealDate": "2026-10-13",
            "mealType": "lunch",
            "servingsToPrepare": 0,
        },
        headers=auth_headers(user),
    )

    assert r.status_code == 400


def test_entry_for_unknown_recipe_is_not_found(client, planned_week):
    user, plan = planned_week

    r = client.post(
        f"/meal-plans/{plan.plan_id}/entries",
        json={"recipeId": 424242, "mealDate": "2026-10-13", "mealType": "lunch"},
        headers=auth_headers(user),
    )

    assert r.status_code == 404


def test_deleting_plan_keeps_its_shopping_list(client, planned_week):
    user, plan = planned_week
    generated = _generate(client, user, plan)

    r = client.delete(f"/meal-plans/{plan.plan_id}", headers=auth_headers(user))
    assert r.status_code == 200

    r = client.get(f"/shopping-lists/{generated['listId']}", headers=auth_headers(user))
    assert r.status_code == 200
    assert r.json()["mealPlanId"] is None
    assert len(r.json()["items"]) == len(generated["items"])


def test_unknown_user_id_sees_nothing(client, planned_week):
    r = client.get("/meal-plans", headers={"X-User-Id": str(uuid.uuid4())})
    assert r.status_code == 200
    assert r.json() == []


# =============================================================================
# FIRST-TIME USERS, QUANTITY BOUNDS, PLAN ENTRIES, DB HEALTH
# =============================================================================


def test_first_request_from_new_user_id_provisions_account(client, db_session):
    headers = {"X-User-Id": str(uuid.uuid4())}

    recipe = client.post(
        "/recipes",
        json={
            "title": "Lentil soup",
            "ingredients": [
                {"ingredientName": "Lentils", "unitName": "g", "quantity": "200"}
            ],
        },
        headers=headers,
    )
    assert recipe.status_code == 201

    plan = client.post(
        "/meal-plans",
        json={"planName": "First week", "startDate": "2026-10-19", "endDate": "2026-10-25"},
        headers=headers,
    )
    assert plan.status_code == 201
    plan_id = plan.json()["planId"]

    entry = client.post(
        f"/meal-plans/{plan_id}/entries",
        json={
            "recipeId": recipe.json()["recipeId"],
            "mealDate": "2026-10-20",
            "mealType": "dinner",
            "servingsToPrepare": 3,
        },
        headers=headers,
    )
    assert entry.status_code == 201

    r = client.post("/shopping-lists/generate", json={"mealPlanId": plan_id}, headers=headers)
    assert r.status_code == 201
    assert [(i["itemName"], Decimal(i["quantity"])) for i in r.json()["items"]] == [
        ("Lentils", Decimal("600"))
    ]

    manual = client.post("/shopping-lists", json={"listName": "Extras"}, headers=headers)
    assert manual.status_code == 201

    user_id = uuid.UUID(headers["X-User-Id"])
    assert db_session.query(AppUser).filter(AppUser.user_id == user_id).count() == 1


@pytest.mark.parametrize("quantity", ["1.2345", "1234567890123"])
def test_item_quantity_outside_column_precision_is_bad_request(
    client, db_session, quantity
):
    user = make_user(db_session)

    r = client.post(
        "/shopping-lists",
        json={"listName": "Bulk", "items": [{"itemName": "salt", "quantity": quantity}]},
        headers=auth_headers(user),
    )

    assert r.status_code == 400
    assert r.json()["error"].startswith("items.0.quantity")


def test_item_quantity_within_precision_is_stored_exactly(client, db_session):
    user = make_user(db_session)

    r = client.post(
        "/shopping-lists",
        json={
            "listName": "Bulk",
            "items": [{"itemName": "rice", "quantity": "123456789.125", "unit": "g"}],
        },
        headers=auth_headers(user),
    )

    assert r.status_code == 201
    assert Decimal(r.json()["items"][0]["quantity"]) == Decimal("123456789.125")


@pytest.mark.parametrize("quantity", ["0.0005", "12345678901"])
def test_recipe_quantity_outside_column_precision_is_bad_request(
    client, db_session, quantity
):
    user = make_user(db_session)

    r = client.post(
        "/recipes",
        json={
            "title": "Salted water",
            "ingredients": [
                {"ingredientName": "Salt", "unitName": "g", "quantity": quantity}
            ],
        },
        headers=auth_headers(user),
    )

    assert r.status_code == 400
    assert r.json()["error"].startswith("ingredients.0.quantity")


def test_list_plan_entries_by_meal_date(client, db_session):
    user = make_user(db_session)
    soup = make_recipe(db_session, user, "Soup", [("Leek", "1", "pc")])
    toast = make_recipe(db_session, user, "Toast", [("Bread", "2", "slices")])
    plan = make_plan(db_session, user)
    plan_recipe(db_session, user, plan, soup, day=4)
    plan_recipe(db_session, user, plan, toast, day=0)
    plan_recipe(db_session, user, plan, toast, day=2)

    r = client.get(f"/meal-plans/{plan.plan_id}/entries", headers=auth_headers(user))

    assert r.status_code == 200
    assert [(e["mealDate"], e["recipeTitle"]) for e in r.json()] == [
        ("2026-10-12", "Toast"),
        ("2026-10-14", "Toast"),
        ("2026-10-16", "Soup"),
    ]

    stranger = make_user(db_session, "nutritionist")
    r = client.get(f"/meal-plans/{plan.plan_id}/entries", headers=auth_headers(stranger))
    assert r.status_code == 404


class _UnreachableSession:
    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))


def test_database_health_reports_503_when_unreachable(client):
    def broken_db():
        yield _UnreachableSession()

    client.app.dependency_overrides[get_db] = broken_db
    try:
        r = client.get("/health-check/db")
    finally:
        client.app.dependency_overrides.pop(get_db, None)

    assert r.status_code == 503
    assert r.json()["status"] == "degraded"
    assert r.json()["database"] == "unreachable"
