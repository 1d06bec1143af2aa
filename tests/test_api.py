"""HTTP contract of the question and answer routes."""

import pytest

QUESTION = {"title": "Where to eat in Chiang Mai?", "description": "Looking for khao soi", "category": "Food"}


def _create_question(client, **overrides):
    response = client.post("/questions", json={**QUESTION, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_health_endpoint(client):
    response = client.get("/test")
    assert response.status_code == 200
    assert response.json() == "Server API is working 🚀"


def test_create_question(client):
    response = client.post("/questions", json=QUESTION)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Question created successfully."
    data = body["data"]
    assert {k: data[k] for k in QUESTION} == QUESTION
    assert isinstance(data["id"], int)
    assert data["created_at"] == data["updated_at"]


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "t", "description": "d"},
        {"title": "", "description": "d", "category": "c"},
        {"title": 5, "description": "d", "category": "c"},
        [],
    ],
)
def test_create_question_with_invalid_body(client, payload):
    response = client.post("/questions", json=payload)
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request data."}


def test_create_question_with_unparseable_body(client):
    response = client.post(
        "/questions", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400


def _post_raw(client, url, body):
    return client.post(url, content=body, headers={"Content-Type": "application/json"})


def test_create_question_with_lone_surrogate(client):
    response = _post_raw(client, "/questions", '{"title": "\\ud800", "description": "d", "category": "c"}')

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request data."}
    assert client.get("/questions").json() == {"data": []}


def test_list_questions(client):
    assert client.get("/questions").json() == {"data": []}

    older = _create_question(client, title="older")
    newer = _create_question(client, title="newer")

    response = client.get("/questions")
    assert response.status_code == 200
    assert [q["id"] for q in response.json()["data"]] == [newer["id"], older["id"]]


def test_get_question(client):
    created = _create_question(client)

    response = client.get(f"/questions/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"data": created}


def test_get_question_errors(client):
    bad = client.get("/questions/abc")
    assert bad.status_code == 400
    assert bad.json() == {"message": "Invalid question ID."}

    missing = client.get("/questions/999")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Question not found."}


def test_search_route_is_not_taken_as_an_id(client):
    food = _create_question(client, title="Street food tips", category="Food")
    _create_question(client, title="Python tips", category="Software")

    response = client.get("/questions/search", params={"category": "FOOD"})

    assert response.status_code == 200
    assert [q["id"] for q in response.json()["data"]] == [food["id"]]


def test_search_with_both_filters(client):
    _create_question(client, title="Python tips", category="Food")
    match = _create_question(client, title="Python tips", category="Software")

    response = client.get("/questions/search", params={"title": "python", "category": "software"})

    assert [q["id"] for q in response.json()["data"]] == [match["id"]]


def test_search_without_results_is_empty(client):
    _create_question(client)
    response = client.get("/questions/search", params={"title": "volcano"})
    assert response.status_code == 200
    assert response.json() == {"data": []}


def test_search_without_filters(client):
    response = client.get("/questions/search")
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid search parameters."}


def test_update_question(client):
    created = _create_question(client)

    response = client.put(
        f"/questions/{created['id']}",
        json={"title": "Updated", "description": "Now with more detail"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Question updated successfully."
    assert body["data"]["title"] == "Updated"
    assert body["data"]["description"] == "Now with more detail"
    assert body["data"]["category"] == QUESTION["category"]
    assert body["data"]["updated_at"] >= created["updated_at"]


def test_update_question_category(client):
    created = _create_question(client)
    response = client.put(
        f"/questions/{created['id']}",
        json={"title": "t", "description": "d", "category": "Travel"},
    )
    assert response.json()["data"]["category"] == "Travel"


def test_update_question_errors(client):
    created = _create_question(client)
    assert client.put(f"/questions/{created['id']}", json={"title": "only"}).status_code == 400
    assert client.put("/questions/x", json={"title": "t", "description": "d"}).status_code == 400
    assert client.put("/questions/404", json={"title": "t", "description": "d"}).status_code == 404


def test_update_question_with_lone_surrogate(client):
    created = _create_question(client)

    response = client.put(
        f"/questions/{created['id']}",
        content='{"title": "t", "description": "d", "category": "\\udc00"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request data."}
    assert client.get(f"/questions/{created['id']}").json() == {"data": created}


def test_delete_question_cascades_to_answers(client):
    created = _create_question(client)
    for n in range(3):
        client.post(f"/questions/{created['id']}/answers", json={"content": f"answer {n}"})

    response = client.delete(f"/questions/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Question post has been deleted successfully."}
    assert client.get(f"/questions/{created['id']}").status_code == 404
    assert client.get(f"/questions/{created['id']}/answers").status_code == 404


def test_delete_question_errors(client):
    assert client.delete("/questions/abc").status_code == 400
    assert client.delete("/questions/1").status_code == 404


def test_create_answer(client):
    question = _create_question(client)

    response = client.post(f"/questions/{question['id']}/answers", json={"content": "Try Khao Soi Khun Yai."})

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Answer created successfully."
    assert body["data"]["question_id"] == question["id"]
    assert body["data"]["content"] == "Try Khao Soi Khun Yai."


def test_answer_length_limit(client):
    question = _create_question(client)
    url = f"/questions/{question['id']}/answers"

    assert client.post(url, json={"content": "x" * 300}).status_code == 201
    too_long = client.post(url, json={"content": "x" * 301})
    assert too_long.status_code == 400
    assert client.post(url, json={}).status_code == 400
    assert len(client.get(url).json()["data"]) == 1


def test_create_answer_errors(client):
    assert client.post("/questions/abc/answers", json={"content": "hi"}).status_code == 400
    missing = client.post("/questions/9/answers", json={"content": "hi"})
    assert missing.status_code == 404
    assert missing.json() == {"message": "Question not found."}


def test_answer_with_lone_surrogate_or_nul(client):
    question = _create_question(client)
    url = f"/questions/{question['id']}/answers"

    rejected = _post_raw(client, url, '{"content": "\\ud800 hello"}')
    assert rejected.status_code == 400
    assert rejected.json() == {"message": "Invalid request data."}

    accepted = client.post(url, json={"content": "\u0000hello"})
    assert accepted.status_code == 201
    assert accepted.json()["data"]["content"] == "\x00hello"
    assert len(client.get(url).json()["data"]) == 1


def test_list_answers(client):
    question = _create_question(client)
    url = f"/questions/{question['id']}/answers"
    assert client.get(url).json() == {"data": []}

    first = client.post(url, json={"content": "first"}).json()["data"]
    second = client.post(url, json={"content": "second"}).json()["data"]

    response = client.get(url)
    assert response.status_code == 200
    assert response.json()["data"] == [second, first]


def test_delete_answers(client):
    question = _create_question(client)
    url = f"/questions/{question['id']}/answers"
    client.post(url, json={"content": "one"})
    client.post(url, json={"content": "two"})

    response = client.delete(url)

    assert response.status_code == 200
    assert response.json() == {"message": "All answers for the question have been deleted successfully."}
    assert client.get(url).json() == {"data": []}
    assert client.get(f"/questions/{question['id']}").status_code == 200
    assert client.delete(url).status_code == 200


def test_answer_routes_with_bad_ids(client):
    assert client.get("/questions/abc/answers").status_code == 400
    assert client.get("/questions/3/answers").status_code == 404
    assert client.delete("/questions/abc/answers").status_code == 400
    assert client.delete("/questions/3/answers").status_code == 404


def test_store_failure_is_a_generic_500(client):
    client.app.state.db.close()

    response = client.get("/questions")

    assert response.status_code == 500
    assert response.json() == {"message": "Unable to fetch questions."}
