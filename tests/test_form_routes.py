OWNER = "user_owner"
OTHER = "user_other"


def _create(client, headers, name="Survey", description="q1"):
    response = client.post("/forms/create", json={"name": name, "description": description}, headers=headers)
    assert response.status_code == 201
    return response.json()["data"]["id"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["statusCode"] == 200


def test_full_lifecycle_over_http(client, auth_headers):
    headers = auth_headers(OWNER)
    form_id = _create(client, headers)

    form = client.get(f"/forms/{form_id}", headers=headers).json()["data"]
    assert form["name"] == "Survey"
    assert form["published"] is False
    assert form["status"] == "draft"
    assert form["visits"] == 0
    assert form["submissions"] == 0
    assert form["share_link"].endswith(f"/submit/{form['share_url']}")

    updated = client.put(
        f"/forms/{form_id}/content",
        json={"content": '[{"type": "TextField"}]'},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["content"] == '[{"type": "TextField"}]'

    published = client.post(f"/forms/{form_id}/publish", headers=headers)
    assert published.status_code == 200
    assert published.json()["data"]["status"] == "published"

    share_url = form["share_url"]
    content = client.get(f"/submit/{share_url}")
    assert content.status_code == 200
    assert content.json()["data"]["content"] == '[{"type": "TextField"}]'

    submitted = client.post(f"/submit/{share_url}", json={"content": '{"a":1}'})
    assert submitted.status_code == 201
    assert submitted.json()["data"] == {"id": form_id, "submissions": 1}

    details = client.get(f"/forms/{form_id}/submissions", headers=headers).json()["data"]
    assert details["visits"] == 1
    assert details["submissions"] == 1
    assert [s["content"] for s in details["form_submissions"]] == ['{"a":1}']

    stats = client.get("/forms/stats", headers=headers).json()["data"]
    assert stats == {"visits": 1, "submissions": 1, "submissionRate": 100.0, "bounceRate": 0.0}


def test_create_with_short_name_returns_field_errors(client, auth_headers):
    response = client.post("/forms/create", json={"name": "abc"}, headers=auth_headers(OWNER))

    assert response.status_code == 400
    body = response.json()
    assert body["statusCode"] == 400
    assert body["message"][0]["field"] == "name"
    assert client.get("/forms", headers=auth_headers(OWNER)).json()["data"] == []


def test_owner_routes_reject_anonymous_callers(client):
    for method, path in (
        ("get", "/forms/stats"),
        ("get", "/forms"),
        ("get", "/forms/1"),
        ("post", "/forms/1/publish"),
        ("get", "/forms/1/submissions"),
    ):
        response = getattr(client, method)(path)
        assert response.status_code == 401, path
        assert response.json()["statusCode"] == 401

    response = client.post("/forms/create", json={"name": "Survey"})
    assert response.status_code == 401


def test_invalid_token_is_treated_as_anonymous(client):
    response = client.get("/forms", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_forms_are_scoped_to_owner(client, auth_headers):
    form_id = _create(client, auth_headers(OWNER))
    other = auth_headers(OTHER)

    assert client.get(f"/forms/{form_id}", headers=other).status_code == 404
    assert client.post(f"/forms/{form_id}/publish", headers=other).status_code == 404
    assert client.put(f"/forms/{form_id}/content", json={"content": "x"}, headers=other).status_code == 404
    assert client.get("/forms", headers=other).json()["data"] == []


def test_submit_to_draft_returns_not_found(client, auth_headers):
    headers = auth_headers(OWNER)
    form_id = _create(client, headers)
    share_url = client.get(f"/forms/{form_id}", headers=headers).json()["data"]["share_url"]

    response = client.post(f"/submit/{share_url}", json={"content": "{}"})

    assert response.status_code == 404
    assert client.get(f"/forms/{form_id}", headers=headers).json()["data"]["submissions"] == 0


def test_update_content_requires_content_field(client, auth_headers):
    headers = auth_headers(OWNER)
    form_id = _create(client, headers)

    response = client.put(f"/forms/{form_id}/content", json={}, headers=headers)

    assert response.status_code == 400
    assert response.json()["message"][0]["field"] == "content"


def test_unknown_share_url_returns_not_found(client):
    assert client.get("/submit/missing").status_code == 404
