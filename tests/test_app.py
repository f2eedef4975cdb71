from typing import Iterator

import pytest
from starlette.testclient import TestClient

from conftest import FakeLLM
from resipi.app import SESSION_COOKIE, app
from resipi.domain.controller import FAILURE_MESSAGE
from resipi.domain.models import GenerationStatus
from resipi.domain.session import RecipeSession, SessionStore


@pytest.fixture
def fake_llm(recipe_text: str) -> FakeLLM:
    return FakeLLM(text=recipe_text)


@pytest.fixture
def client(fake_llm: FakeLLM) -> Iterator[TestClient]:
    sessions = app.state.sessions
    app.state.sessions = SessionStore(
        llm=fake_llm, initial_ingredients=["Santan", "Cili Padi", "Ayam"]
    )
    yield TestClient(app)
    app.state.sessions = sessions


def test_homepage(client: TestClient) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert SESSION_COOKIE in resp.cookies
    for ingredient in ("Santan", "Cili Padi", "Ayam"):
        assert ingredient in resp.text
    assert "Your delicious recipe will appear here!" in resp.text


def test_add_and_remove(client: TestClient) -> None:
    client.get("/")

    resp = client.post("/ingredients", data={"ingredient": "  Serai "})
    assert resp.status_code == 200
    assert "Serai" in resp.text

    client.post("/ingredients", data={"ingredient": "serai"})
    assert client.get("/state").json()["ingredients"] == [
        "Santan",
        "Cili Padi",
        "Ayam",
        "Serai",
    ]

    resp = client.delete("/ingredients/1")
    assert resp.status_code == 200
    assert "Cili Padi" not in resp.text
    assert client.get("/state").json()["ingredients"] == ["Santan", "Ayam", "Serai"]


def test_remove_unknown_position(client: TestClient) -> None:
    client.get("/")
    resp = client.delete("/ingredients/9")
    assert resp.status_code == 200
    assert len(client.get("/state").json()["ingredients"]) == 3


def test_sessions_are_per_cookie(client: TestClient) -> None:
    client.post("/ingredients", data={"ingredient": "Ikan"})
    other = TestClient(app)
    assert "Ikan" not in other.get("/state").json()["ingredients"]
    assert "Ikan" in client.get("/state").json()["ingredients"]


def test_generate_recipe(client: TestClient, fake_llm: FakeLLM) -> None:
    client.get("/")
    resp = client.post("/recipe")

    assert resp.status_code == 200
    assert "Gulai Ayam Cili Padi" in resp.text
    assert "<h3>" in resp.text
    assert len(fake_llm.prompts) == 1
    assert "Santan, Cili Padi, Ayam" in fake_llm.prompts[0]

    state = client.get("/state").json()
    assert state["status"] == "done"
    assert state["result"]["kind"] == "text"


def test_generate_without_ingredients(client: TestClient, fake_llm: FakeLLM) -> None:
    for _ in range(3):
        client.delete("/ingredients/0")

    resp = client.post("/recipe")

    assert resp.status_code == 200
    assert "Please add at least one ingredient." in resp.text
    assert fake_llm.prompts == []
    assert client.get("/state").json()["status"] == "idle"


def test_generate_failure(client: TestClient, fake_llm: FakeLLM) -> None:
    fake_llm.error = ConnectionError("upstream said 500 secret-detail")
    client.get("/")

    resp = client.post("/recipe")

    assert resp.status_code == 200
    assert FAILURE_MESSAGE in resp.text
    assert "secret-detail" not in resp.text
    assert client.get("/state").json()["result"] == {
        "kind": "failure",
        "text": None,
        "message": FAILURE_MESSAGE,
    }


def test_recipe_html_is_escaped(client: TestClient, fake_llm: FakeLLM) -> None:
    fake_llm.text = "### Nasi\n\n<script>alert(1)</script>"
    client.get("/")
    resp = client.post("/recipe")
    assert "<script>" not in resp.text


def current_session(client: TestClient) -> RecipeSession:
    store: SessionStore = app.state.sessions
    _, session = store.get_or_create(client.cookies.get(SESSION_COOKIE))
    return session


def test_page_polls_while_in_flight(client: TestClient) -> None:
    client.get("/")
    current_session(client).controller.status = GenerationStatus.in_flight

    resp = client.get("/")

    assert "AI chef is thinking..." in resp.text
    assert 'hx-get="/recipe"' in resp.text
    assert 'hx-trigger="every 2s"' in resp.text
    assert "disabled>Generate Recipe" in " ".join(resp.text.split())


def test_poll_while_in_flight_keeps_polling(client: TestClient) -> None:
    client.get("/")
    current_session(client).controller.status = GenerationStatus.in_flight

    resp = client.get("/recipe")

    assert resp.status_code == 200
    assert 'hx-trigger="every 2s"' in resp.text
    assert 'id="ingredient-panel"' not in resp.text


def test_poll_after_done_shows_recipe(client: TestClient) -> None:
    client.get("/")
    current_session(client).controller.status = GenerationStatus.in_flight
    assert 'hx-trigger="every 2s"' in client.get("/recipe").text

    client.post("/recipe")
    resp = client.get("/recipe")

    assert "Gulai Ayam Cili Padi" in resp.text
    assert "hx-trigger" not in resp.text
    assert 'id="ingredient-panel" hx-swap-oob="true"' in resp.text
    assert "disabled>Generate Recipe" not in " ".join(resp.text.split())


def test_start_over_discards_session(client: TestClient) -> None:
    client.post("/ingredients", data={"ingredient": "Ikan"})
    old_id = client.cookies.get(SESSION_COOKIE)
    store: SessionStore = app.state.sessions
    assert old_id in store

    resp = client.post("/start-over")

    assert resp.status_code == 200
    assert old_id not in store
    assert client.cookies.get(SESSION_COOKIE) != old_id
    assert client.get("/state").json()["ingredients"] == [
        "Santan",
        "Cili Padi",
        "Ayam",
    ]
