"""End-to-end tests for the FastAPI app over ASGI."""

import pytest
from httpx import AsyncClient

from nutricalc.app import APP_VERSION

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_version(client: AsyncClient) -> None:
    response = await client.get("/version")

    assert response.status_code == 200
    assert response.json() == {"version": APP_VERSION}


@pytest.mark.asyncio
async def test_graphql_energy_plan(client: AsyncClient) -> None:
    """Test an energy plan through the GraphQL endpoint."""
    query = """
        query Plan($parameters: EnergyParametersInput!, $targets: MacronutrientTargetsInput!) {
          nutritionCalculator {
            energyPlan(parameters: $parameters, targets: $targets) {
              get
              recommendedMacronutrients { grams { cho ptn lip } }
            }
          }
        }
    """
    variables = {
        "parameters": {
            "age": 30,
            "gender": "MALE",
            "weightKg": 70,
            "heightCm": 175,
            "activityLevel": "ACTIVE",
        },
        "targets": {"carbohydrate": 50, "protein": 20, "lipid": 30},
    }

    response = await client.post("/graphql", json={"query": query, "variables": variables})

    assert response.status_code == 200
    body = response.json()
    assert "errors" not in body
    plan = body["data"]["nutritionCalculator"]["energyPlan"]
    assert plan["get"] == 2949
    # 2949 × 0.5 / 4 = 368.625
    assert plan["recommendedMacronutrients"]["grams"]["cho"] == 368.6


@pytest.mark.asyncio
async def test_graphql_micronutrients(client: AsyncClient) -> None:
    query = """
        query {
          nutritionCalculator {
            micronutrients(input: {age: 25, gender: MALE, nutrients: ["magnesium", "vitamin_b12"]}) {
              nutrient amount unit
            }
          }
        }
    """

    response = await client.post("/graphql", json={"query": query})

    assert response.status_code == 200
    assert response.json()["data"]["nutritionCalculator"]["micronutrients"] == [
        {"nutrient": "magnesium", "amount": 400.0, "unit": "mg"},
        {"nutrient": "vitamin_b12", "amount": 2.4, "unit": "mcg"},
    ]


@pytest.mark.asyncio
async def test_graphql_domain_error(client: AsyncClient) -> None:
    query = """
        query {
          nutritionCalculator {
            get(parameters: {age: 1, gender: FEMALE, weightKg: 9,
                             heightCm: 75, activityLevel: SEDENTARY})
          }
        }
    """

    response = await client.post("/graphql", json={"query": query})

    body = response.json()
    assert body["errors"][0]["message"].startswith("DOMAIN_ERROR")
